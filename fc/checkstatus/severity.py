"""Check outcome levels as understood by Nagios-compatible supervisors.

The integer value of a severity is the exit code of the check process and
also its rank when results are combined: OK < WARNING < CRITICAL < UNKNOWN.
UNKNOWN ranks highest because not knowing the state of a service is worse
than a confirmed failure.
"""

import enum
from types import MappingProxyType
from typing import Iterable

import nagiosplugin


class Severity(enum.IntEnum):
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def rank(self) -> int:
        return int(self)

    @property
    def label(self) -> str:
        return LABELS[self]

    def __str__(self):
        return self.label

    @classmethod
    def parse(cls, text: str) -> "Severity":
        """Look up a severity by its label, ignoring case."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown severity: {text!r}") from None

    @classmethod
    def from_service_state(
        cls, state: nagiosplugin.state.ServiceState
    ) -> "Severity":
        return cls(state.code)

    def to_service_state(self) -> nagiosplugin.state.ServiceState:
        return SERVICE_STATES[self]


LABELS = MappingProxyType(
    {
        Severity.OK: "OK",
        Severity.WARNING: "WARNING",
        Severity.CRITICAL: "CRITICAL",
        Severity.UNKNOWN: "UNKNOWN",
    }
)

SERVICE_STATES = MappingProxyType(
    {
        Severity.OK: nagiosplugin.Ok,
        Severity.WARNING: nagiosplugin.Warn,
        Severity.CRITICAL: nagiosplugin.Critical,
        Severity.UNKNOWN: nagiosplugin.Unknown,
    }
)


def worst(severities: Iterable[Severity]) -> Severity:
    """Returns the highest ranked severity, OK for no input.

    On a tie, the severity seen first is kept.
    """
    result = Severity.OK
    for severity in severities:
        if severity.rank > result.rank:
            result = severity
    return result
