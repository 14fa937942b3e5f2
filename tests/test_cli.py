import io
import os
import subprocess
import sys

import pytest

from trip_capacity import cli


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    monkeypatch.delenv(cli.LOG_LEVEL_ENV, raising=False)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3 2\n1 2 3\n", "3"),
        ("1 1\n5\n", "5"),
        ("4 4\n10 10 10 10\n", "10"),
        ("5 1\n1 2 3 4 5\n", "15"),
        ("5 3\n3 2 2 1 1\n", "3"),
    ],
)
def test_prints_single_integer(monkeypatch, capsys, text, expected):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    assert cli.main() == 0
    assert capsys.readouterr().out == expected + "\n"


@pytest.mark.parametrize("text", ["3 2\n1 2\n", "1 0\n4\n", "a b\n"])
def test_bad_input_exits_with_message(monkeypatch, capsys, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    with pytest.raises(SystemExit) as excinfo:
        cli.main()
    assert str(excinfo.value.code).startswith("ERROR: ")
    assert capsys.readouterr().out == ""


def test_module_entry_point():
    src = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
    env = dict(os.environ, PYTHONPATH=os.pathsep.join(filter(None, [src, os.environ.get("PYTHONPATH")])))
    proc = subprocess.run(
        [sys.executable, "-m", "trip_capacity"],
        input="6 2\n26 7 10 30 5 4\n",
        capture_output=True,
        text=True,
        check=True,
        env=env,
    )
    assert proc.stdout == "42\n"
