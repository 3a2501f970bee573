"""Output formatters for selection results."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from maxprotein.models import Food, SelectionResult
from maxprotein.optimizer.totals import sum_foods


def food_to_dict(food: Food) -> dict:
    """Return a JSON-serializable view of a food."""
    return {
        "description": food.description,
        "amount": food.amount,
        "amount_g": food.amount_g,
        "kcal": food.kcal,
        "protein_g": food.protein_g,
    }


def result_to_dict(result: SelectionResult) -> dict:
    """Return a JSON-serializable view of a selection result."""
    return {
        "method": result.method.value,
        "budget_kcal": result.total_kcal_budget,
        "candidates": result.candidate_count,
        "foods": [food_to_dict(f) for f in result.foods],
        "total_kcal": result.total_kcal,
        "total_protein_g": result.total_protein_g,
        "solver_info": result.solver_info,
    }


def build_food_table(foods: list[Food], title: str) -> Table:
    """Build a Rich table listing foods with a totals row."""
    table = Table(title=title)
    table.add_column("Food", style="cyan", max_width=50)
    table.add_column("Serving", max_width=30)
    table.add_column("kcal", justify="right")
    table.add_column("Protein (g)", justify="right", style="green")

    for food in foods:
        table.add_row(
            food.description[:50],
            f"{food.amount} ({food.amount_g} g)",
            str(food.kcal),
            str(food.protein_g),
        )

    total_kcal, total_protein_g = sum_foods(foods)
    table.add_row(
        "[bold]TOTAL[/bold]",
        "",
        f"[bold]{total_kcal}[/bold]",
        f"[bold]{total_protein_g}[/bold]",
        style="bold",
    )
    return table


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
            f"Budget: {result.total_kcal_budget} kcal over {result.candidate_count} candidates",
        ]
        self.console.print(Panel("\n".join(header_lines), title="Max Protein"))

        if not result.foods:
            self.console.print("[yellow]No food fits the calorie budget.[/yellow]")
        else:
            self.console.print(build_food_table(result.foods, "Selected Foods"))

        if "elapsed_seconds" in result.solver_info:
            info_parts = [f"Time: {result.solver_info['elapsed_seconds']:.3f}s"]
            if "evaluations" in result.solver_info:
                info_parts.append(f"Evaluations: {result.solver_info['evaluations']}")
            self.console.print(f"[dim]{' | '.join(info_parts)}[/dim]")


class JSONFormatter:
    """Format results as JSON for programmatic use."""

    def format(self, result: SelectionResult) -> str:
        """Return JSON string."""
        data = {"timestamp": datetime.now().isoformat()}
        data.update(result_to_dict(result))
        return json.dumps(data, indent=2)


class MarkdownFormatter:
    """Format results as Markdown for documentation."""

    def format(self, result: SelectionResult) -> str:
        """Return Markdown string."""
        lines = [
            "# Max Protein Selection",
            "",
            f"**Method:** {result.method.value}",
            f"**Budget:** {result.total_kcal_budget} kcal",
            f"**Total:** {result.total_kcal} kcal, {result.total_protein_g} g protein",
            "",
            "| Food | Serving | kcal | Protein |",
            "|------|---------|------|---------|",
        ]
        for food in result.foods:
            lines.append(
                f"| {food.description} | {food.amount} ({food.amount_g} g) "
                f"| {food.kcal} | {food.protein_g} g |"
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
        formatter = JSONFormatter()
        return formatter.format(result)
    elif output_format == "markdown":
        formatter = MarkdownFormatter()
        return formatter.format(result)
    else:
        raise ValueError(f"Unknown output format: {output_format}")


def format_comparison(
    greedy: SelectionResult,
    exhaustive: SelectionResult,
    console: Optional[Console] = None,
) -> None:
    """Print greedy and exhaustive results side by side with the protein gap."""
    console = console or Console()

    table = Table(title=f"Greedy vs Exhaustive ({greedy.total_kcal_budget} kcal budget)")
    table.add_column("Method")
    table.add_column("Foods", justify="right")
    table.add_column("kcal", justify="right")
    table.add_column("Protein (g)", justify="right", style="green")
    table.add_column("Time", justify="right")

    for result in (greedy, exhaustive):
        table.add_row(
            result.method.value,
            str(len(result.foods)),
            str(result.total_kcal),
            str(result.total_protein_g),
            f"{result.solver_info.get('elapsed_seconds', 0.0):.3f}s",
        )
    console.print(table)

    gap = exhaustive.total_protein_g - greedy.total_protein_g
    if gap > 0:
        console.print(f"[yellow]Greedy is {gap} g protein short of optimal.[/yellow]")
    else:
        console.print("[green]Greedy matched the optimum.[/green]")
