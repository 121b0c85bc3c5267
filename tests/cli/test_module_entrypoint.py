"""Tests for running bridgecut as a module (`python -m bridgecut`)."""

from __future__ import annotations

import runpy
from unittest.mock import patch

import pytest


def test_module_help_exits_zero() -> None:
    """Running with --help should exit cleanly with code 0."""
    with patch("sys.argv", ["bridgecut", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("bridgecut", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_subcommand_help_exits_zero() -> None:
    """Invoking a subcommand's help via module entrypoint should exit 0."""
    with patch("sys.argv", ["bridgecut", "inspect", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("bridgecut", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_runs_example(data_dir, capsys) -> None:
    with patch("sys.argv", ["bridgecut", "run", str(data_dir / "example.txt")]):
        runpy.run_module("bridgecut", run_name="__main__")
    assert capsys.readouterr().out.strip() == "54"
