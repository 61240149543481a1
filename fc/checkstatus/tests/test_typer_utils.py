import pytest

from fc.checkstatus.constants import SHOW_LOCALS_ENV
from fc.checkstatus.typer_utils import CheckTyperApp, CheckTyperGroup


@pytest.mark.parametrize(
    "value, expected",
    [(None, False), ("0", False), ("", False), ("yes", False), ("1", True)],
)
def test_show_locals_env(monkeypatch, value, expected):
    if value is None:
        monkeypatch.delenv(SHOW_LOCALS_ENV, raising=False)
    else:
        monkeypatch.setenv(SHOW_LOCALS_ENV, value)
    app = CheckTyperApp("test")
    assert app.pretty_exceptions_show_locals is expected


def test_usage_error_outside_test_runner(capsys):
    app = CheckTyperApp("test")

    @app.command()
    def check(name: str):
        print(f"OK: {name}")

    @app.command()
    def other():
        pass

    assert app.info.cls is CheckTyperGroup
    with pytest.raises(SystemExit) as e:
        app(args=["check"], prog_name="test")
    assert e.value.code == 3
    captured = capsys.readouterr()
    assert captured.out.startswith("UNKNOWN: Invalid arguments: ")
    assert "Missing argument" in captured.err
