"""Shared fixtures for chromalab tests."""

from __future__ import annotations

import json
import sys

import pytest

from chromalab import main as cli_main


@pytest.fixture
def run_cli(monkeypatch, capsys):
    """Run the chromalab entry point with the given arguments.

    Returns (exit_code, stdout, stderr); a normal return counts as exit code 0.
    """
    monkeypatch.setenv("COLORTERM", "truecolor")

    def _run(*argv: str):
        monkeypatch.setattr(sys, "argv", ["chromalab", *argv])
        code = 0
        try:
            cli_main.main()
        except SystemExit as exc:
            code = exc.code if isinstance(exc.code, int) else 0
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


@pytest.fixture
def run_cli_json(run_cli):
    def _run(*argv: str):
        code, out, err = run_cli(*argv, "--json")
        assert code == 0, err
        return json.loads(out)

    return _run
