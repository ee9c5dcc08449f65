"""Output formatters for selection results."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from maxprotein.optimizer.models import SelectionResult


class TableFormatter:
    """Format results as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format(self, result: SelectionResult) -> None:
        """Print formatted tables to console."""
        header_lines = [
            f"[bold]SELECTION RESULT[/bold] - {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            f"Method: {result.method.value}",
            f"Candidates: {result.candidate_count}",
            f"Budget: {result.total_kcal} kcal",
        ]
        self.console.print(Panel("\n".join(header_lines), title="Max Protein"))

        food_table = Table(title="Selected Foods")
        food_table.add_column("Food", style="cyan", max_width=50)
        food_table.add_column("Sample", style="dim")
        food_table.add_column("kcal", justify="right")
        food_table.add_column("Protein (g)", justify="right", style="green")

        for food in result.foods:
            food_table.add_row(
                food.description[:50],
                f"each {food.amount_label} is {food.sample_mass_g} g",
                str(food.energy_kcal),
                str(food.protein_g),
            )

        food_table.add_row(
            "[bold]TOTAL[/bold]",
            "",
            f"[bold]{result.kcal}[/bold]",
            f"[bold]{result.protein_g}[/bold]",
            style="bold",
        )

        self.console.print(food_table)

        if not result.foods:
            self.console.print("[yellow]No foods fit within the budget[/yellow]")

        info_parts = [
            f"Time: {result.elapsed_seconds:.6f}s",
            f"Solver: {result.solver_info.get('solver', result.method.value)}",
        ]
        if "subsets_evaluated" in result.solver_info:
            info_parts.append(f"Subsets: {result.solver_info['subsets_evaluated']}")
        self.console.print(f"[dim]{' | '.join(info_parts)}[/dim]")


class JSONFormatter:
    """Format results as JSON for programmatic use."""

    def format(self, result: SelectionResult) -> str:
        """Return JSON string."""
        data = {"timestamp": datetime.now().isoformat(), **result.to_dict()}
        return json.dumps(data, indent=2)


class MarkdownFormatter:
    """Format results as Markdown for documentation."""

    def format(self, result: SelectionResult) -> str:
        """Return Markdown string."""
        lines = [
            "# Max Protein Selection",
            "",
            f"**Method:** {result.method.value}",
            f"**Candidates:** {result.candidate_count}",
            f"**Budget:** {result.total_kcal} kcal",
            f"**Calories:** {result.kcal} kcal",
            f"**Protein:** {result.protein_g} g",
            "",
            "## Foods",
            "",
            "| Food | Sample | kcal | Protein |",
            "|------|--------|------|---------|",
        ]

        for food in result.foods:
            lines.append(
                f"| {food.description} | {food.amount_label} ({food.sample_mass_g} g) "
                f"| {food.energy_kcal} | {food.protein_g} g |"
            )

        return "\n".join(lines)


def format_result(
    result: SelectionResult,
    output_format: str = "table",
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format selection result in the specified format.

    Args:
        result: Selection result to format
        output_format: One of 'table', 'json', 'markdown'
        console: Rich console (for table format)

    Returns:
        Formatted string for json/markdown, None for table (prints directly)
    """
    if output_format == "table":
        formatter = TableFormatter(console)
        formatter.format(result)
        return None
    elif output_format == "json":
        return JSONFormatter().format(result)
    elif output_format == "markdown":
        return MarkdownFormatter().format(result)
    else:
        raise ValueError(f"Unknown output format: {output_format}")


def format_benchmark(
    results: Sequence[SelectionResult],
    console: Optional[Console] = None,
) -> None:
    """Print a timing table for benchmark results."""
    console = console or Console()

    table = Table(title="Selection Timing")
    table.add_column("Method", style="cyan")
    table.add_column("n", justify="right")
    table.add_column("Elapsed (s)", justify="right")
    table.add_column("kcal", justify="right")
    table.add_column("Protein (g)", justify="right", style="green")

    for result in results:
        table.add_row(
            result.method.value,
            str(result.candidate_count),
            f"{result.elapsed_seconds:.6f}",
            str(result.kcal),
            str(result.protein_g),
        )

    console.print(table)
