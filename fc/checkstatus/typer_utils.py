import os
import traceback

import click
import fc.checkstatus.logging
import structlog
import typer
from fc.checkstatus.constants import SHOW_LOCALS_ENV
from fc.checkstatus.report import unknown
from typer.core import TyperGroup


class CheckTyperGroup(TyperGroup):
    """Reports usage errors as UNKNOWN.

    click exits with 2 on bad arguments, which a supervisor would read as
    CRITICAL.
    """

    def main(self, *args, **kwargs):
        kwargs["standalone_mode"] = False
        try:
            return super().main(*args, **kwargs)
        except click.UsageError as e:
            e.show()
            unknown(f"Invalid arguments: {e.format_message()}")


class CheckTyperApp(typer.Typer):
    """Typer app for check commands.

    Unhandled exceptions and usage errors still produce a valid check
    result: an UNKNOWN status line and exit code 3.
    """

    def __init__(self, command_name, **kwargs):
        kwargs.setdefault("cls", CheckTyperGroup)
        # Showing local variables may leak secrets, don't do it in production!
        super().__init__(
            pretty_exceptions_show_locals=(
                os.getenv(SHOW_LOCALS_ENV) == "1"
            ),
            **kwargs,
        )
        self.command_name = command_name

    def __call__(self, *args, **kwargs):
        try:
            super().__call__(*args, **kwargs)
        except Exception:
            if fc.checkstatus.logging.logging_initialized():
                log = structlog.get_logger()
                log.error(
                    "unhandled-exception",
                    exc_info=True,
                    command=self.command_name,
                )
            else:
                traceback.print_exc()
            unknown("Exception occurred while running checks")
