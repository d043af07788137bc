"""Tests for the command line front end."""

import argparse
import contextlib
import io

import pytest

from gridpath.cli import main, parse_coord


def _run(argv, monkeypatch):
    monkeypatch.setenv("GRIDPATH_NO_COLOR", "1")
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        code = main(argv)
    return code, buf.getvalue()


def test_parse_coord():
    assert parse_coord("3,4") == (3, 4)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coord("3;4")


def test_cli_reports_path_and_renders(monkeypatch):
    code, out = _run(
        ["--width", "3", "--height", "3", "--source", "0,0", "--destination", "2,2",
         "--representation", "map"],
        monkeypatch,
    )
    assert code == 0
    assert "[✓] [map] Shortest path: 3 tiles" in out
    assert "Time taken:" in out
    assert "S" in out and "D" in out


def test_cli_compares_both(monkeypatch):
    code, out = _run(
        ["--width", "5", "--height", "5", "--source", "2,0", "--destination", "2,4",
         "--obstacle", "0,2", "--obstacle", "1,2", "--obstacle", "3,2", "--obstacle", "4,2",
         "--representation", "both", "--no-render"],
        monkeypatch,
    )
    assert code == 0
    assert "[map] Shortest path: 5 tiles" in out
    assert "[linked_list] Shortest path: 5 tiles" in out
    assert "locator steps" in out


def test_cli_reports_unreachable(monkeypatch):
    code, out = _run(
        ["--width", "3", "--height", "3", "--source", "0,0", "--destination", "2,2",
         "--obstacle", "1,1", "--obstacle", "1,2", "--obstacle", "2,1", "--no-render"],
        monkeypatch,
    )
    assert code == 0
    assert "No path exists" in out


def test_cli_rejects_obstacle_endpoint(monkeypatch):
    code, out = _run(
        ["--width", "3", "--height", "3", "--source", "1,1", "--destination", "2,2",
         "--obstacle", "1,1"],
        monkeypatch,
    )
    assert code == 1
    assert "[!]" in out


def test_cli_rejects_off_grid_cell(monkeypatch):
    code, out = _run(
        ["--width", "3", "--height", "3", "--source", "0,0", "--destination", "3,3"],
        monkeypatch,
    )
    assert code == 1
    assert "outside the grid" in out
