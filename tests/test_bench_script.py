"""Tests for the benchmark script helpers."""

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

pytest.importorskip("typer")
pytest.importorskip("rich")

BENCH_PATH = Path(__file__).parent.parent.joinpath("scripts", "bench.py")


def _load_bench() -> ModuleType:
    spec = importlib.util.spec_from_file_location("optres_bench", BENCH_PATH)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_display_without_results() -> None:
    """Test that an empty run reports instead of failing on the median."""
    bench = _load_bench()
    bench.RESULTS.clear()
    bench._display_results()


def test_unknown_category_runs_nothing() -> None:
    """Test that filtering on an unknown category exits cleanly."""
    from typer.testing import CliRunner

    bench = _load_bench()
    result = CliRunner().invoke(bench.app, ["--category", "nope"])
    assert result.exit_code == 0
    assert "No benchmarks ran" in result.output
    assert bench.RESULTS == []
