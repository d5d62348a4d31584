"""Benchmarks for lemonad containers against the plain Python code they replace."""

import statistics
import timeit
from collections.abc import Callable
from enum import IntEnum, StrEnum, auto
from functools import wraps
from typing import Annotated, Final, NamedTuple

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

import lemonad as lm

app = typer.Typer(help="Container benchmarks: lemonad vs plain Python")


class Runs(IntEnum):
    """Cost category for benchmarks, determining iteration counts."""

    CHEAP = 5_000
    NORMAL = 2_500
    EXPENSIVE = 500


class Implementation(StrEnum):
    """Implementation type for benchmarks."""

    CONTAINER = auto()
    PLAIN = auto()


class BenchmarkResult(NamedTuple):
    """Result of a single benchmark comparison."""

    category: str
    name: str
    container_median: float
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
RAW_NUMBERS: Final = [str(x) if x % 10 != 0 else "n/a" for x in range(100)]
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
    """Decorator to register a benchmark function with its metadata.

    Args:
        category (str): The category of the benchmark (e.g., "Optional").
        name (str): The name of the benchmark (e.g., "map chain").
        implementation (Implementation): Whether the function uses the containers or plain code.
        cost (Runs): The cost category, defaults to CHEAP.

    Returns:
        Callable: The decorated function.
    """

    def decorator(func: BenchFn) -> BenchFn:
        BENCHMARK_REGISTRY[func] = BenchmarkMetadata(category, name, cost, implementation)

        @wraps(func)
        def wrapper() -> object:
            return func()

        return wrapper

    return decorator


# =============================================================================
# OPTIONAL
# =============================================================================


@bench("Optional", "map chain", Implementation.CONTAINER)
def bench_optional_map_chain() -> object:
    return lm.Optional.of(TEST_VALUE).map(lambda x: x + 1).filter(lambda x: x > 0).or_else(0)


@bench("Optional", "map chain", Implementation.PLAIN)
def bench_plain_map_chain() -> object:
    value: int | None = TEST_VALUE
    value = value + 1 if value is not None else None
    return value if value is not None and value > 0 else 0


@bench("Optional", "nullable sum", Implementation.CONTAINER, Runs.EXPENSIVE)
def bench_optional_nullable_sum() -> object:
    return sum(lm.optional(x).or_else(0) for x in NULLABLE_DATA)


@bench("Optional", "nullable sum", Implementation.PLAIN, Runs.EXPENSIVE)
def bench_plain_nullable_sum() -> object:
    return sum(x if x is not None else 0 for x in NULLABLE_DATA)


# =============================================================================
# MAYBE
# =============================================================================


@bench("Maybe", "to / or_", Implementation.CONTAINER)
def bench_maybe_to() -> object:
    return lm.maybe(TEST_VALUE).to(lambda x: x * 2).or_(0)


@bench("Maybe", "to / or_", Implementation.PLAIN)
def bench_plain_to() -> object:
    value: int | None = TEST_VALUE
    return value * 2 if value is not None else 0


# =============================================================================
# RESULT
# =============================================================================


def _parse(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


@bench("Result", "perform + recover", Implementation.CONTAINER, Runs.NORMAL)
def bench_result_perform() -> object:
    return lm.Result.perform(lambda: int("n/a")).recover(lambda _: 0).get_or_else(lm.noop)


@bench("Result", "perform + recover", Implementation.PLAIN, Runs.NORMAL)
def bench_plain_perform() -> object:
    return _parse("n/a") or 0


@bench("Result", "sequence", Implementation.CONTAINER, Runs.EXPENSIVE)
def bench_result_sequence() -> object:
    return lm.Result.sequence(lm.lets_try(lambda r=raw: int(r)) for raw in RAW_NUMBERS)


@bench("Result", "sequence", Implementation.PLAIN, Runs.EXPENSIVE)
def bench_plain_sequence() -> object:
    values: list[int] = []
    for raw in RAW_NUMBERS:
        parsed = _parse(raw)
        if parsed is None:
            return None
        values.append(parsed)
    return values


def bench_one(container_fn: BenchFn, plain_fn: BenchFn, scale: int) -> None:
    """Run a single benchmark pair and store the median results.

    Uses metadata from the BENCHMARK_REGISTRY to determine category, name, and iteration counts.
    """
    meta = BENCHMARK_REGISTRY[container_fn]
    runs = max(1, meta.cost.value // scale)
    n_calls = max(1, runs // 10)

    container_times = [timeit.timeit(container_fn, number=n_calls) for _ in range(runs)]
    plain_times = [timeit.timeit(plain_fn, number=n_calls) for _ in range(runs)]
    container_median = statistics.median(container_times)
    plain_median = statistics.median(plain_times)
    RESULTS.append(
        BenchmarkResult(
            category=meta.category,
            name=meta.name,
            container_median=container_median,
            plain_median=plain_median,
            overhead=container_median / plain_median,
        )
    )


def _run_all_benchmarks(category: str | None, scale: int) -> None:
    """Run all registered benchmarks by pairing container and plain implementations."""
    pairs: dict[tuple[str, str], dict[Implementation, BenchFn]] = {}
    for func, meta in BENCHMARK_REGISTRY.items():
        if category is not None and meta.category.lower() != category.lower():
            continue
        pairs.setdefault((meta.category, meta.name), {})[meta.implementation] = func

    benchmarks: list[tuple[BenchFn, BenchFn]] = []
    for (cat, name), impls in pairs.items():
        if len(impls) != len(Implementation):
            CONSOLE.print(
                f"[yellow]Warning: Skipping {cat}/{name} - missing implementation[/yellow]"
            )
            continue
        benchmarks.append((impls[Implementation.CONTAINER], impls[Implementation.PLAIN]))

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=len(benchmarks))
        for container_fn, plain_fn in benchmarks:
            meta = BENCHMARK_REGISTRY[container_fn]
            progress.update(task, description=f"[cyan]{meta.category}: {meta.name}")
            bench_one(container_fn, plain_fn, scale)
            progress.advance(task)


def _display_results() -> None:
    """Display benchmark results in a formatted table."""
    table = Table(title="Container Benchmark Results (lemonad vs plain Python)")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("lemonad (s, median)", justify="right", style="green")
    table.add_column("plain (s, median)", justify="right", style="yellow")
    table.add_column("Overhead", justify="right")

    for result in RESULTS:
        style = "green bold" if result.overhead < 2 else "red bold"  # noqa: PLR2004
        table.add_row(
            result.category,
            result.name,
            f"{result.container_median:.6f}",
            f"{result.plain_median:.6f}",
            Text(f"{result.overhead:.2f}x", style=style),
        )

    CONSOLE.print(table)
    if not RESULTS:
        return
    CONSOLE.print()
    median_overhead = statistics.median([r.overhead for r in RESULTS])
    CONSOLE.print(
        Text("Median overhead: ", style="bold")
        + Text(f"{median_overhead:.2f}x", style="green bold")
    )


@app.command()
def run(
    category: Annotated[
        str | None, typer.Option("--category", help="Only run this category.")
    ] = None,
    scale: Annotated[
        int, typer.Option("--scale", min=1, help="Divide run counts by this factor.")
    ] = 1,
) -> None:
    """Run the benchmarks and display the results."""
    CONSOLE.print(Text("Running container benchmarks...", style="bold blue"))
    CONSOLE.print()
    _run_all_benchmarks(category, scale)
    _display_results()


if __name__ == "__main__":
    app()
