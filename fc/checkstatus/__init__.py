"""Status reporting for Nagios-style monitoring checks."""

from fc.checkstatus.errors import EmptyInput
from fc.checkstatus.severity import Severity, worst
from fc.checkstatus.status import (
    PerformanceMetric,
    Reportable,
    Status,
    StatusWithPerformanceData,
    aggregate,
    aggregate_with_perfdata,
)

__all__ = [
    "EmptyInput",
    "PerformanceMetric",
    "Reportable",
    "Severity",
    "Status",
    "StatusWithPerformanceData",
    "aggregate",
    "aggregate_with_perfdata",
    "worst",
]
