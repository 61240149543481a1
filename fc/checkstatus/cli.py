from pathlib import Path
from typing import NamedTuple, Optional

import fc.checkstatus.logging
import fc.checkstatus.report
import structlog
from fc.checkstatus.config import logging_settings, parse_config
from fc.checkstatus.constants import DEFAULT_CONFIG_FILE
from fc.checkstatus.severity import Severity
from fc.checkstatus.status import (
    PerformanceMetric,
    Reportable,
    Status,
    StatusWithPerformanceData,
)
from fc.checkstatus.typer_utils import CheckTyperApp
from typer import Argument, BadParameter, Option


class Context(NamedTuple):
    config_file: Path
    verbose: bool


context: Context

app = CheckTyperApp("fc-check-status")


@app.callback(no_args_is_help=True)
def fc_check_status(
    verbose: bool = Option(
        False,
        "--verbose",
        "-v",
        help="Show debug messages on stderr.",
    ),
    config_file: Path = Option(
        DEFAULT_CONFIG_FILE,
        "--config",
        dir_okay=False,
        help="Path to the config file.",
    ),
):
    """Print a Nagios-style status line and exit with its code."""
    global context

    context = Context(
        config_file=config_file,
        verbose=verbose,
    )


def _init_logging():
    fc.checkstatus.logging.init_logging(context.verbose)
    log = structlog.get_logger()
    config = parse_config(log, context.config_file)
    settings = logging_settings(config, context.verbose)
    if settings.log_file or settings.verbose != context.verbose:
        fc.checkstatus.logging.init_logging(
            settings.verbose, settings.log_file
        )
    return structlog.get_logger()


def _emit(status: Reportable):
    log = _init_logging()
    log.debug(
        "check-status-exit",
        exit_code=status.exit_code,
        output=status.format_output(),
    )
    fc.checkstatus.report.exit_with_status(status)


@app.command()
def report(
    severity: str = Argument(
        ..., help="One of OK, WARNING, CRITICAL, UNKNOWN (any case)."
    ),
    message: str = Argument("", help="Status message."),
    label: Optional[str] = Option(
        None, help="Add a performance metric with this label."
    ),
    value: str = Option("", help="Metric value."),
    unit: str = Option("", help="Metric unit of measurement."),
    warn: str = Option("", help="Warning threshold range."),
    crit: str = Option("", help="Critical threshold range."),
    min_value: str = Option("", "--min", help="Minimum possible value."),
    max_value: str = Option("", "--max", help="Maximum possible value."),
):
    """Report a status with an optional performance metric."""
    try:
        parsed = Severity.parse(severity)
    except ValueError as e:
        raise BadParameter(str(e), param_hint="SEVERITY")

    status = Status(message, parsed)
    if label is not None:
        metric = PerformanceMetric(
            label=label,
            value=value,
            unit=unit,
            warn_threshold=warn,
            crit_threshold=crit,
            min_value=min_value,
            max_value=max_value,
        )
        status = StatusWithPerformanceData(status, [metric])

    _emit(status)


@app.command()
def ok(message: str = Argument("")):
    _emit(Status(message, Severity.OK))


@app.command()
def warning(message: str = Argument("")):
    _emit(Status(message, Severity.WARNING))


@app.command()
def critical(message: str = Argument("")):
    _emit(Status(message, Severity.CRITICAL))


@app.command()
def unknown(message: str = Argument("")):
    _emit(Status(message, Severity.UNKNOWN))


if __name__ == "__main__":
    app()
