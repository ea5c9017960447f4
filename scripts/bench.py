"""Benchmarks for Option and Result combinators against plain Python baselines."""

import statistics
import timeit
from collections.abc import Callable
from enum import IntEnum, StrEnum, auto
from functools import wraps
from typing import Final, NamedTuple

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table
from rich.text import Text

import optres as opr

app = typer.Typer(help="Option/Result benchmarks: combinators vs plain Python")


class Runs(IntEnum):
    """Cost category for benchmarks, determining iteration counts."""

    CHEAP = 5_000
    NORMAL = 2_500
    EXPENSIVE = 500


class Implementation(StrEnum):
    """Implementation type for benchmarks."""

    OPTRES = auto()
    PLAIN = auto()


class BenchmarkResult(NamedTuple):
    """Result of a single benchmark comparison."""

    category: str
    name: str
    optres_median: float
    plain_median: float
    overhead: float


class BenchmarkMetadata(NamedTuple):
    """Metadata for a benchmark function."""

    category: str
    name: str
    cost: Runs
    implementation: Implementation


TEST_VALUE: Final[int] = 42
NULLABLE_DATA: Final = [x if x % 3 != 0 else None for x in range(100)]
RAW_PORTS: Final = [str(x) if x % 4 else "nope" for x in range(100)]
type BenchFn = Callable[[], object]

CONSOLE: Final = Console()
RESULTS: list[BenchmarkResult] = []
BENCHMARK_REGISTRY: dict[BenchFn, BenchmarkMetadata] = {}


def bench(
    category: str,
    name: str,
    implementation: Implementation,
    cost: Runs = Runs.CHEAP,
) -> Callable[[BenchFn], BenchFn]:
    """Register a benchmark function with its metadata.

    Args:
        category (str): The category of the benchmark (e.g., "Instantiation").
        name (str): The name of the benchmark (e.g., "Some(value)").
        implementation (Implementation): Which side of the comparison this is.
        cost (Runs): The cost category, defaults to CHEAP.

    Returns:
        Callable: The decorated function.
    """

    def decorator(func: BenchFn) -> BenchFn:
        BENCHMARK_REGISTRY[func] = BenchmarkMetadata(
            category=category, name=name, cost=cost, implementation=implementation
        )

        @wraps(func)
        def wrapper() -> object:
            return func()

        return wrapper

    return decorator


@bench("Instantiation", "Some(value)", Implementation.OPTRES)
def _optres_some() -> object:
    return opr.Some(TEST_VALUE)


@bench("Instantiation", "Some(value)", Implementation.PLAIN)
def _plain_some() -> object:
    return TEST_VALUE


@bench("Option", "map + unwrap_or", Implementation.OPTRES, Runs.NORMAL)
def _optres_map_unwrap_or() -> object:
    return [
        opr.Option.from_nullable(x).map(lambda v: v * 2).unwrap_or(0)
        for x in NULLABLE_DATA
    ]


@bench("Option", "map + unwrap_or", Implementation.PLAIN, Runs.NORMAL)
def _plain_map_unwrap_or() -> object:
    return [x * 2 if x is not None else 0 for x in NULLABLE_DATA]


@bench("Option", "match", Implementation.OPTRES, Runs.NORMAL)
def _optres_match() -> object:
    return [
        opr.Option.from_nullable(x).match(some=str, none="-") for x in NULLABLE_DATA
    ]


@bench("Option", "match", Implementation.PLAIN, Runs.NORMAL)
def _plain_match() -> object:
    return [str(x) if x is not None else "-" for x in NULLABLE_DATA]


def _parse_port(raw: str) -> opr.Result[int, str]:
    if raw.isdigit():
        return opr.Ok(int(raw))
    return opr.Err(raw)


def _parse_port_raising(raw: str) -> int:
    if raw.isdigit():
        return int(raw)
    raise ValueError(raw)


@bench("Result", "and_then + unwrap_or", Implementation.OPTRES, Runs.EXPENSIVE)
def _optres_and_then() -> object:
    return [
        opr.Ok(raw).and_then(_parse_port).map(lambda p: p + 1).unwrap_or(0)
        for raw in RAW_PORTS
    ]


@bench("Result", "and_then + unwrap_or", Implementation.PLAIN, Runs.EXPENSIVE)
def _plain_and_then() -> object:
    out: list[int] = []
    for raw in RAW_PORTS:
        try:
            out.append(_parse_port_raising(raw) + 1)
        except ValueError:
            out.append(0)
    return out


def bench_one(optres_fn: BenchFn, plain_fn: BenchFn) -> None:
    """Run a single benchmark multiple times and store median results."""
    meta = BENCHMARK_REGISTRY[optres_fn]
    n_calls = meta.cost.value // 10
    repeats = meta.cost.value // 50

    optres_times = [timeit.timeit(optres_fn, number=n_calls) for _ in range(repeats)]
    plain_times = [timeit.timeit(plain_fn, number=n_calls) for _ in range(repeats)]
    optres_median = statistics.median(optres_times)
    plain_median = statistics.median(plain_times)
    RESULTS.append(
        BenchmarkResult(
            category=meta.category,
            name=meta.name,
            optres_median=optres_median,
            plain_median=plain_median,
            overhead=optres_median / plain_median,
        )
    )


def _run_all_benchmarks() -> None:
    pairs: dict[tuple[str, str], dict[Implementation, BenchFn]] = {}
    for func, meta in BENCHMARK_REGISTRY.items():
        pairs.setdefault((meta.category, meta.name), {})[meta.implementation] = func

    benchmarks: list[tuple[BenchFn, BenchFn]] = []
    for (category, name), impls in pairs.items():
        if Implementation.OPTRES not in impls or Implementation.PLAIN not in impls:
            CONSOLE.print(
                f"[yellow]Warning: Skipping {category}/{name} - missing implementation[/yellow]"
            )
            continue
        benchmarks.append((impls[Implementation.OPTRES], impls[Implementation.PLAIN]))

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=len(benchmarks))
        for optres_fn, plain_fn in benchmarks:
            meta = BENCHMARK_REGISTRY[optres_fn]
            progress.update(task, description=f"[cyan]{meta.category}: {meta.name}")
            bench_one(optres_fn, plain_fn)
            progress.advance(task)


def _display_results() -> None:
    if not RESULTS:
        CONSOLE.print("[yellow]No benchmarks ran, nothing to display.[/yellow]")
        return
    table = Table(title="Option/Result Benchmark Results (optres vs plain Python)")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("optres (s, median)", justify="right", style="green")
    table.add_column("plain (s, median)", justify="right", style="yellow")
    table.add_column("Overhead", justify="right")

    for result in RESULTS:
        style = "green bold" if result.overhead < 2 else "red bold"
        table.add_row(
            result.category,
            result.name,
            f"{result.optres_median:.4f}",
            f"{result.plain_median:.4f}",
            Text(f"{result.overhead:.2f}x", style=style),
        )

    CONSOLE.print(table)
    CONSOLE.print()
    median_overhead = statistics.median([r.overhead for r in RESULTS])
    CONSOLE.print(
        Text("Median overhead: ", style="bold")
        + Text(f"{median_overhead:.2f}x", style="green bold")
    )


@app.command()
def run(
    category: str | None = typer.Option(None, help="Only run this category."),
) -> None:
    """Run the benchmarks and display results."""
    if category is not None:
        for func, meta in list(BENCHMARK_REGISTRY.items()):
            if meta.category != category:
                del BENCHMARK_REGISTRY[func]
    CONSOLE.print(Text("Running Option/Result benchmarks...", style="bold blue"))
    CONSOLE.print()
    _run_all_benchmarks()
    _display_results()


if __name__ == "__main__":
    app()
