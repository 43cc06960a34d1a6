from __future__ import annotations

import logging

import pytest

from pygetopt.__main__ import main


def test_prints_params(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["prog", "-p", "8080", "-v", "-W", "2", "-z", "in.txt"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "debug: false",
        "directory: .",
        "port: 8080",
        "verbose: 1",
        "warning: 2",
        "zed: true",
        "files: in.txt",
    ]


def test_defaults_when_absent(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["prog", "--port", "1", "--directory", "/tmp"]) == 0
    out = capsys.readouterr().out
    assert "directory: /tmp" in out
    assert "verbose: 0" in out
    assert "warning: -1" in out


def test_help_prints_usage(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["prog", "--help"]) == 0
    assert capsys.readouterr().out.startswith("usage: prog [options] --port <P>")


@pytest.mark.parametrize(
    "argv, message",
    [
        (["prog"], "prog: option 'port' required"),
        (["prog", "-q"], "prog: unknown option 'q'"),
        (["prog", "--port"], "prog: option 'port' requires a value"),
        (["prog", "--port", "x"], "prog: port must be an integer"),
        (["prog", "-p", "1", "-v", "x"], "prog: verbose must be an integer"),
    ],
)
def test_errors_go_to_stderr(capsys: pytest.CaptureFixture[str], argv, message: str) -> None:
    assert main(argv) == 1
    assert capsys.readouterr().err.strip() == message


def test_debug_shows_parser_records(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: caplog.set_level(kwargs["level"]))
    assert main(["prog", "--debug", "-p", "1", "--", "x"]) == 0
    loggers = {record.name for record in caplog.records}
    assert "pygetopt.arguments" in loggers
    assert "pygetopt.__main__" in loggers
    assert any("sentinel at 3" in record.getMessage() for record in caplog.records)
