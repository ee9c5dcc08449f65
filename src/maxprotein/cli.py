"""CLI interface using Typer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from maxprotein.config import get_settings
from maxprotein.data.abbrev_loader import load_usda_abbrev
from maxprotein.data.filters import filter_foods
from maxprotein.data.models import FoodRecord, MaxProteinError
from maxprotein.export.formatters import format_benchmark, format_result
from maxprotein.optimizer.models import SelectionMethod, SelectionResult
from maxprotein.optimizer.runner import run_benchmark, run_selection

app = typer.Typer(
    help="Choose foods that maximize protein within a calorie budget",
    no_args_is_help=True,
)
console = Console()

config_app = typer.Typer(help="Show or create the configuration file")
app.add_typer(config_app, name="config")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict) -> None:
    """Output JSON response to stdout."""
    print(json.dumps(response, indent=2))


def fail(command: str, message: str, json_output: bool) -> None:
    """Report a failed contract and exit with status 1."""
    if json_output:
        output_json({
            "success": False,
            "command": command,
            "errors": [message],
        })
    else:
        console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)
    raise typer.Exit(1)


def resolve_data_path(data_path: Optional[Path]) -> Path:
    """Return the ABBREV path from the argument or the config file."""
    if data_path is not None:
        return data_path
    configured = get_settings().data.abbrev_path
    if configured is None:
        raise FileNotFoundError(
            "No USDA database given. Pass DATA_PATH or set data.abbrev_path "
            "in the config file"
        )
    return configured


def load_candidates(
    data_path: Optional[Path],
    min_kcal: Optional[int],
    max_kcal: Optional[int],
    count: Optional[int],
    quiet: bool,
) -> list[FoodRecord]:
    """Load the database and bound it to the candidate list."""
    selection = get_settings().selection
    path = resolve_data_path(data_path)

    if quiet:
        source = load_usda_abbrev(path)
    else:
        with console.status(f"[bold green]Loading {path}..."):
            source = load_usda_abbrev(path)
        console.print(f"Loaded {len(source)} foods from {path}")

    return filter_foods(
        source,
        selection.min_kcal if min_kcal is None else min_kcal,
        selection.max_kcal if max_kcal is None else max_kcal,
        selection.candidate_count if count is None else count,
    )


DataPathArgument = typer.Argument(
    None, help="Path to USDA ABBREV.txt (defaults to data.abbrev_path)"
)
BudgetOption = typer.Option(None, "--budget", "-b", help="Calorie budget in kcal")
MinKcalOption = typer.Option(None, "--min-kcal", help="Minimum kcal per candidate food")
MaxKcalOption = typer.Option(None, "--max-kcal", help="Maximum kcal per candidate food")
CountOption = typer.Option(None, "--count", "-n", help="Number of candidate foods")
VectorizedOption = typer.Option(
    None, "--vectorized/--no-vectorized", help="Use numpy for exhaustive search"
)
JSONOption = typer.Option(False, "--json", help="Output as JSON")


# ============================================================================
# Main Commands
# ============================================================================


@app.command()
def select(
    data_path: Optional[Path] = DataPathArgument,
    method: Optional[SelectionMethod] = typer.Option(
        None, "--method", "-m", help="Selection algorithm", case_sensitive=False
    ),
    budget: Optional[int] = BudgetOption,
    min_kcal: Optional[int] = MinKcalOption,
    max_kcal: Optional[int] = MaxKcalOption,
    count: Optional[int] = CountOption,
    vectorized: Optional[bool] = VectorizedOption,
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output format: table, json, markdown"
    ),
    json_output: bool = JSONOption,
) -> None:
    """Select the foods with the most protein within the calorie budget."""
    settings = get_settings()
    if method is None:
        try:
            method = SelectionMethod(settings.selection.method)
        except ValueError:
            fail("select", f"Unknown method in config: {settings.selection.method}", json_output)
    if budget is None:
        budget = settings.selection.total_kcal
    if vectorized is None:
        vectorized = settings.selection.vectorized
    if output is None:
        output = settings.defaults.output_format

    try:
        foods = load_candidates(data_path, min_kcal, max_kcal, count, quiet=json_output)
        result = run_selection(foods, budget, method, vectorized)
    except (MaxProteinError, FileNotFoundError) as e:
        fail("select", str(e), json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "select",
            "data": result.to_dict(),
            "human_summary": (
                f"{method.value}: {len(result.foods)} foods, "
                f"{result.kcal} kcal, {result.protein_g} g protein"
            ),
        })
        return

    try:
        formatted = format_result(result, output, console)
    except ValueError as e:
        fail("select", str(e), json_output)
    if formatted is not None:
        print(formatted)


@app.command()
def compare(
    data_path: Optional[Path] = DataPathArgument,
    budget: Optional[int] = BudgetOption,
    min_kcal: Optional[int] = MinKcalOption,
    max_kcal: Optional[int] = MaxKcalOption,
    count: Optional[int] = CountOption,
    vectorized: Optional[bool] = VectorizedOption,
    json_output: bool = JSONOption,
) -> None:
    """Run greedy and exhaustive selection on the same candidates."""
    settings = get_settings()
    if budget is None:
        budget = settings.selection.total_kcal
    if vectorized is None:
        vectorized = settings.selection.vectorized

    try:
        foods = load_candidates(data_path, min_kcal, max_kcal, count, quiet=json_output)
        greedy = run_selection(foods, budget, SelectionMethod.GREEDY)
        exhaustive = run_selection(foods, budget, SelectionMethod.EXHAUSTIVE, vectorized)
    except (MaxProteinError, FileNotFoundError) as e:
        fail("compare", str(e), json_output)

    gap = exhaustive.protein_g - greedy.protein_g

    if json_output:
        output_json({
            "success": True,
            "command": "compare",
            "data": {
                "greedy": greedy.to_dict(),
                "exhaustive": exhaustive.to_dict(),
                "protein_gap_g": gap,
            },
            "human_summary": f"Greedy is {gap} g of protein short of optimal",
        })
        return

    format_result(greedy, "table", console)
    format_result(exhaustive, "table", console)

    color = "green" if gap == 0 else "yellow"
    console.print(
        Panel(
            f"Greedy protein: {greedy.protein_g} g\n"
            f"Optimal protein: {exhaustive.protein_g} g\n"
            f"Gap: [{color}]{gap} g[/{color}]",
            title="Comparison",
        )
    )


@app.command()
def benchmark(
    data_path: Optional[Path] = DataPathArgument,
    sizes: Optional[str] = typer.Option(
        None, "--sizes", "-s", help="Comma-separated candidate counts, e.g. 5,10,15"
    ),
    method: Optional[list[SelectionMethod]] = typer.Option(
        None, "--method", "-m", help="Method to time (repeatable, default all)",
        case_sensitive=False,
    ),
    budget: Optional[int] = BudgetOption,
    min_kcal: Optional[int] = MinKcalOption,
    max_kcal: Optional[int] = MaxKcalOption,
    vectorized: Optional[bool] = VectorizedOption,
    json_output: bool = JSONOption,
) -> None:
    """Time the selection methods over growing candidate counts."""
    settings = get_settings()
    selection = settings.selection
    if budget is None:
        budget = selection.total_kcal
    if vectorized is None:
        vectorized = selection.vectorized

    if sizes is None:
        size_list = list(settings.defaults.benchmark_sizes)
    else:
        try:
            size_list = [int(s) for s in sizes.split(",") if s.strip()]
        except ValueError:
            fail("benchmark", f"Invalid --sizes value: {sizes}", json_output)

    try:
        path = resolve_data_path(data_path)
        source = load_usda_abbrev(path)
        results: list[SelectionResult] = run_benchmark(
            source,
            size_list,
            budget,
            selection.min_kcal if min_kcal is None else min_kcal,
            selection.max_kcal if max_kcal is None else max_kcal,
            methods=method or None,
            vectorized=vectorized,
        )
    except (MaxProteinError, FileNotFoundError) as e:
        fail("benchmark", str(e), json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "benchmark",
            "data": {
                "runs": [
                    {
                        "method": r.method.value,
                        "n": r.candidate_count,
                        "elapsed_seconds": r.elapsed_seconds,
                        "total_kcal": r.kcal,
                        "total_protein_g": r.protein_g,
                    }
                    for r in results
                ],
            },
            "human_summary": f"Timed {len(results)} runs",
        })
        return

    format_benchmark(results, console)


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show() -> None:
    """Print the active configuration."""
    console.print(yaml.dump(get_settings().to_dict(), default_flow_style=False, sort_keys=False))


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(None, "--path", help="Where to write config.yaml"),
    data_path: Optional[Path] = typer.Option(
        None, "--data", help="Path to USDA ABBREV.txt"
    ),
) -> None:
    """Write a config file with the current settings."""
    settings = get_settings()
    if data_path is not None:
        settings.data.abbrev_path = data_path.expanduser()
    settings.save(path)
    console.print("[green]Configuration saved[/green]")


if __name__ == "__main__":
    app()
