# Status model for Nagios-style checks: a verdict, a message and optional
# performance data, rendered as the single line a supervisor expects:
#
#   <LABEL>: <message>[ | 'label1'=value1uom1;warn1;crit1;min1;max1[; ...]]
#
import copy
from dataclasses import dataclass, field
from typing import Iterable, Protocol

import nagiosplugin

from fc.checkstatus.errors import EmptyInput
from fc.checkstatus.severity import Severity, worst

MESSAGE_SEPARATOR = " - "
PERFDATA_SEPARATOR = "; "


class Reportable(Protocol):
    """Anything that can be handed to the exit boundary."""

    def format_output(self) -> str:
        ...

    @property
    def exit_code(self) -> int:
        ...


@dataclass
class Status:
    """A single check verdict.

    A default constructed status is OK with an empty message.
    """

    message: str = ""
    severity: Severity = Severity.OK

    def format_output(self) -> str:
        return f"{self.severity.label}: {self.message}"

    def __str__(self):
        return self.format_output()

    @property
    def exit_code(self) -> int:
        return self.severity.rank

    def aggregate(self, *others: "Status"):
        """Merges other statuses into this one.

        The severity is raised to the worst one seen (ties keep the current
        severity) and each other message is appended after " - ".
        """
        for other in others:
            if other.severity.rank > self.severity.rank:
                self.severity = other.severity
            self.message += MESSAGE_SEPARATOR + other.message

    def with_perfdata(
        self, *perfdata: "PerformanceMetric"
    ) -> "StatusWithPerformanceData":
        return StatusWithPerformanceData(copy.copy(self), list(perfdata))


@dataclass
class PerformanceMetric:
    """One performance data record.

    All fields are emitted verbatim. Labels are always wrapped in single
    quotes, a quote inside the label is not escaped.
    """

    label: str = ""
    value: str = ""
    unit: str = ""
    warn_threshold: str = ""
    crit_threshold: str = ""
    min_value: str = ""
    max_value: str = ""

    def format_output(self) -> str:
        return (
            f"'{self.label}'={self.value}{self.unit};"
            f"{self.warn_threshold};{self.crit_threshold};"
            f"{self.min_value};{self.max_value}"
        )

    def __str__(self):
        return self.format_output()

    @classmethod
    def from_performance(
        cls, perf: nagiosplugin.Performance
    ) -> "PerformanceMetric":
        """Converts performance data produced by a nagiosplugin check."""
        return cls(
            label=_text(perf.label),
            value=_text(perf.value),
            unit=_text(perf.uom),
            warn_threshold=_text(perf.warn),
            crit_threshold=_text(perf.crit),
            min_value=_text(perf.min),
            max_value=_text(perf.max),
        )


def _copies(
    perfdata: Iterable[PerformanceMetric],
) -> list[PerformanceMetric]:
    return [copy.copy(p) for p in perfdata]


def _text(value) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass
class StatusWithPerformanceData:
    """A status that carries performance data.

    The perfdata order is kept as given, it shows up in the rendered output
    in exactly that order. Metrics are copied whenever they are added, so
    two statuses never share a metric.
    """

    status: Status = field(default_factory=Status)
    perfdata: list[PerformanceMetric] = field(default_factory=list)

    def __post_init__(self):
        self.perfdata = _copies(self.perfdata)

    @property
    def message(self) -> str:
        return self.status.message

    @message.setter
    def message(self, value: str):
        self.status.message = value

    @property
    def severity(self) -> Severity:
        return self.status.severity

    @severity.setter
    def severity(self, value: Severity):
        self.status.severity = value

    @property
    def exit_code(self) -> int:
        return self.status.exit_code

    def format_output(self) -> str:
        if not self.perfdata:
            return self.status.format_output()

        perfdata = PERFDATA_SEPARATOR.join(
            p.format_output() for p in self.perfdata
        )
        return f"{self.status.format_output()} | {perfdata}"

    def __str__(self):
        return self.format_output()

    def add(self, *perfdata: PerformanceMetric):
        self.perfdata.extend(_copies(perfdata))

    def aggregate(self, *others: "StatusWithPerformanceData"):
        """Merges other statuses into this one, see `Status.aggregate`.

        The perfdata of each other status is appended in order.
        """
        for other in others:
            self.status.aggregate(other.status)
            self.perfdata.extend(_copies(other.perfdata))


def aggregate(statuses: Iterable[Status]) -> Status:
    """Combines statuses into a new one.

    Uses the worst severity and joins all messages with " - ". Unlike
    `Status.aggregate`, there is no starting message: the result message
    consists of the input messages only.
    """
    statuses = list(statuses)
    if not statuses:
        raise EmptyInput()

    return Status(
        message=MESSAGE_SEPARATOR.join(s.message for s in statuses),
        severity=worst(s.severity for s in statuses),
    )


def aggregate_with_perfdata(
    statuses: Iterable[StatusWithPerformanceData],
) -> StatusWithPerformanceData:
    """Combines statuses like `aggregate` and concatenates their perfdata."""
    statuses = list(statuses)
    if not statuses:
        raise EmptyInput()

    result = StatusWithPerformanceData(
        aggregate(s.status for s in statuses)
    )
    for status in statuses:
        result.add(*status.perfdata)
    return result
