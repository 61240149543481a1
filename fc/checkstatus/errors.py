class EmptyInput(ValueError):
    """Raised when an aggregation that creates a new status gets no input.

    Callers that want a fallback (for example an UNKNOWN status) should
    catch this instead of rendering an empty result.
    """

    def __init__(self, msg="no statuses provided to aggregate"):
        super().__init__(msg)
