"""Tests for the sortlib-demo command line program."""

from __future__ import annotations

import io
from typing import List, Tuple

import pytest
from rich.console import Console

from sortlib import cli
from sortlib.datasets import MWCGenerator
from sortlib.errors import KeyRangeError


def _run(argv: List[str]) -> Tuple[int, str]:
    buf = io.StringIO()
    console = Console(file=buf, width=200, highlight=False)
    status = cli.main(argv, console=console)
    return status, buf.getvalue()


def test_all_methods_verify() -> None:
    status, out = _run(["-n", "40", "--all", "--seed", "7"])
    assert status == 0
    for name in ("Insertion", "Bubble", "Shell", "Quick", "Merge", "Heap", "Radix"):
        assert f"{name} sort:" in out
    assert out.count("Number of comparisons to sort 40 items:") == 7
    assert "ERROR" not in out


def test_methods_run_in_fixed_order() -> None:
    status, out = _run(["-n", "10", "-r", "-q", "-i", "--seed", "1"])
    assert status == 0
    assert out.index("Insertion sort:") < out.index("Quick sort:") < out.index("Radix sort:")
    assert "Merge sort:" not in out


def test_descending_order() -> None:
    status, out = _run(["-n", "25", "-m", "-H", "-r", "--descending", "--seed", "3"])
    assert status == 0
    assert "ERROR" not in out


def test_debug_dumps_hex_words() -> None:
    status, out = _run(["-n", "3", "-q", "-d", "--seed", "11"])
    assert status == 0
    assert "Unsorted list:" in out and "Sorted list:" in out

    values = MWCGenerator.from_seed(11).integers(3)
    expected = " ".join(f"{v & 0xFFFFFFFFFFFFFFFF:016X}" for v in sorted(values))
    assert expected in out


def test_default_item_count(monkeypatch) -> None:
    monkeypatch.setattr(cli, "DEFAULT_NUM_ITEMS", 12)
    status, out = _run(["-s", "--seed", "5"])
    assert status == 0
    assert "Defaulting to 12." in out
    assert "to sort 12 items" in out


def test_no_methods_selected() -> None:
    status, out = _run(["-n", "10"])
    assert status == 1
    assert "No sort methods selected" in out
    assert "usage:" in out


def test_too_few_items() -> None:
    status, out = _run(["-n", "1", "-q"])
    assert status == 1
    assert "At least 2 items" in out


def test_failed_verification_sets_exit_status(monkeypatch) -> None:
    monkeypatch.setattr(cli, "sort_in_place", lambda *args, **kwargs: None)
    status, out = _run(["-n", "50", "-q", "--seed", "9"])
    assert status == 1
    assert "ERROR: Sort results are incorrect." in out


def test_help_exits_cleanly() -> None:
    with pytest.raises(SystemExit) as info:
        cli.main(["--help"])
    assert info.value.code == 0


@pytest.mark.parametrize("exc", [ValueError("bad input"), KeyRangeError(300, 256, 0)])
def test_library_errors_exit_nonzero(monkeypatch, exc: Exception) -> None:
    def failing(*args, **kwargs):
        raise exc

    monkeypatch.setattr(cli, "run_demo", failing)
    status, out = _run(["-n", "10", "-q"])
    assert status == 1
    assert "Sort failed:" in out
