"""Terminal side of a check: print the status line and exit.

These functions end the process. Everything up to the rendered line lives in
`fc.checkstatus.status` and can be used without exiting.
"""

import sys

from fc.checkstatus.severity import Severity
from fc.checkstatus.status import Reportable, Status


def exit_with(line: str, code: int):
    print(line)
    sys.exit(code)


def exit_with_status(status: Reportable):
    exit_with(status.format_output(), status.exit_code)


def ok(message: str):
    exit_with_status(Status(message, Severity.OK))


def warning(message: str):
    exit_with_status(Status(message, Severity.WARNING))


def critical(error: BaseException):
    exit_with_status(Status(str(error), Severity.CRITICAL))


def unknown(message: str):
    exit_with_status(Status(message, Severity.UNKNOWN))
