import io
import sys

import structlog

_EVENT_WIDTH = 30  # pad the event name to so many characters
_initialized = False
_log_file = None


def _pad(s, l):
    """
    Pads *s* to length *l*.
    """
    missing = l - len(s)
    return s + " " * (missing if missing > 0 else 0)


class MultiLoggerFactory:
    def __init__(self, **factories):
        self.factories = factories

    def __call__(self, *args):
        loggers = {k: f() for k, f in self.factories.items()}
        return MultiLogger(loggers)


class MultiLogger:
    """
    A logger which distributes messages to multiple loggers.
    It's initialized with a logger dict where the keys are the logger names
    which correspond to the keyword arguments given to the msg method.
    If the logger's name is not present in the arguments or the message is
    empty, the logger is skipped.
    """

    def __init__(self, loggers):
        self.loggers = loggers

    def __repr__(self):
        return "<MultiLogger {}>".format(list(self.loggers))

    def msg(self, **messages):
        for name, logger in self.loggers.items():
            line = messages.get(name)
            if line:
                logger.msg(line)

    def __getattr__(self, name):
        return self.msg


class ConsoleFileRenderer:
    """
    Renders `event_dict` as aligned text: level letter, padded event name and
    sorted key/value pairs. The console gets the line only if the level is
    at least `min_level`, the log file always gets it.
    """

    LEVELS = [
        "critical",
        "error",
        "warn",
        "warning",
        "info",
        "debug",
    ]

    def __init__(self, min_level, pad_event=_EVENT_WIDTH):
        self.min_level = self.LEVELS.index(min_level.lower())
        self._pad_event = pad_event

    def __call__(self, logger, method_name, event_dict):
        out = io.StringIO()

        ts = event_dict.pop("timestamp", None)
        if ts is not None:
            out.write(str(ts) + " ")

        level = event_dict.pop("level", method_name)
        out.write(level[0].upper() + " ")

        event = event_dict.pop("event")
        out.write(_pad(event, self._pad_event) + " ")

        exception = event_dict.pop("exception", None)

        out.write(
            " ".join(
                key + "=" + repr(event_dict[key])
                for key in sorted(event_dict.keys())
            )
        )

        if exception is not None:
            out.write("\n" + exception)

        line = out.getvalue().rstrip()
        if self.LEVELS.index(method_name.lower()) > self.min_level:
            console = ""
        else:
            console = line

        return {"console": console, "file": line}


def logging_initialized():
    return _initialized


def init_logging(verbose, log_file=None):
    """Sets up structlog for check commands.

    stdout is reserved for the status line, so console output goes to
    stderr.
    """
    global _initialized, _log_file

    processors = [
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=False),
        ConsoleFileRenderer(min_level="debug" if verbose else "info"),
    ]

    # Reconfiguring replaces the previous log file.
    if _log_file is not None:
        _log_file.close()
        _log_file = None

    loggers = {"console": structlog.PrintLoggerFactory(sys.stderr)}
    if log_file:
        _log_file = open(log_file, "a", encoding="utf-8")
        loggers["file"] = structlog.PrintLoggerFactory(_log_file)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.BoundLogger,
        logger_factory=MultiLoggerFactory(**loggers),
        cache_logger_on_first_use=False,
    )
    _initialized = True
