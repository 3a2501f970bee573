"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console

from maxprotein.app_logging import configure_logging
from maxprotein.config import get_settings, reload_settings
from maxprotein.models import Food, MaxProteinError, SelectionMethod

app = typer.Typer(
    help="Pick the foods with the most protein that fit a calorie budget",
    no_args_is_help=True,
)
console = Console()
_logger = logging.getLogger(__name__)

config_app = typer.Typer(help="Show or create the configuration file")
app.add_typer(config_app, name="config")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict) -> None:
    """Output JSON response to stdout."""
    print(json.dumps(response, indent=2))


def fail(command: str, message: str, json_output: bool) -> NoReturn:
    """Report an error and exit with status 1."""
    if json_output:
        output_json({"success": False, "command": command, "errors": [message]})
    else:
        console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def load_candidates(
    command: str,
    data_file: Optional[Path],
    min_kcal: Optional[int],
    max_kcal: Optional[int],
    limit: Optional[int],
    json_output: bool,
) -> list[Food]:
    """Load foods and filter them, filling unset options from settings."""
    from maxprotein.data.usda_loader import load_usda_abbrev
    from maxprotein.optimizer.filters import filter_foods

    settings = get_settings()
    data_file = data_file or settings.data.path
    min_kcal = settings.filter.min_kcal if min_kcal is None else min_kcal
    max_kcal = settings.filter.max_kcal if max_kcal is None else max_kcal
    limit = settings.filter.limit if limit is None else limit

    try:
        all_foods = load_usda_abbrev(data_file)
        candidates = filter_foods(all_foods, min_kcal, max_kcal, limit)
    except (MaxProteinError, ValueError) as e:
        fail(command, str(e), json_output)

    _logger.info(
        "%d of %d foods have %d < kcal <= %d (limit %d)",
        len(candidates),
        len(all_foods),
        min_kcal,
        max_kcal,
        limit,
    )
    return candidates


def warn_if_slow(candidates: list[Food], json_output: bool) -> None:
    """Warn when exhaustive search will enumerate a very large number of subsets."""
    warn_size = get_settings().filter.exhaustive_warn_size
    if len(candidates) > warn_size and not json_output:
        console.print(
            f"[yellow]Exhaustive search over {len(candidates)} foods evaluates "
            f"2^{len(candidates)} subsets and may take a long time.[/yellow]"
        )


# Shared option declarations
DataFileArg = typer.Argument(None, help="Path to USDA ABBREV.txt (default from config)")
MinKcalOpt = typer.Option(None, "--min-kcal", help="Exclude foods with this many kcal or fewer")
MaxKcalOpt = typer.Option(None, "--max-kcal", help="Exclude foods with more kcal than this")
LimitOpt = typer.Option(None, "--limit", "-n", help="Keep only the first N matching foods")
BudgetOpt = typer.Option(None, "--budget", "-b", help="Calorie budget")
JsonOpt = typer.Option(False, "--json", help="Output as JSON with agent-friendly envelope")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config.yaml"),
) -> None:
    """Max-protein food selection under a calorie budget."""
    configure_logging(verbose)
    if config is not None:
        reload_settings(config)


# ============================================================================
# Main Commands
# ============================================================================


@app.command()
def select(
    data_file: Optional[Path] = DataFileArg,
    method: Optional[str] = typer.Option(
        None, "--method", "-m", help="Selection method: greedy or exhaustive"
    ),
    budget: Optional[int] = BudgetOpt,
    min_kcal: Optional[int] = MinKcalOpt,
    max_kcal: Optional[int] = MaxKcalOpt,
    limit: Optional[int] = LimitOpt,
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output format: table, json, markdown"
    ),
    json_output: bool = JsonOpt,
) -> None:
    """Select the highest-protein foods that fit the calorie budget."""
    from maxprotein.export.formatters import format_result, result_to_dict
    from maxprotein.optimizer.selector import select_max_protein

    settings = get_settings()
    method = method or settings.selection.method
    budget = settings.selection.total_kcal if budget is None else budget
    output = output or settings.defaults.output_format

    try:
        selection_method = SelectionMethod(method)
    except ValueError:
        fail("select", f"Unknown method: {method}", json_output)

    candidates = load_candidates("select", data_file, min_kcal, max_kcal, limit, json_output)
    if selection_method is SelectionMethod.EXHAUSTIVE:
        warn_if_slow(candidates, json_output)

    try:
        result = select_max_protein(candidates, budget, selection_method)
    except MaxProteinError as e:
        fail("select", str(e), json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "select",
            "data": result_to_dict(result),
            "human_summary": (
                f"{len(result.foods)} foods, {result.total_kcal} kcal, "
                f"{result.total_protein_g} g protein"
            ),
        })
        return

    try:
        formatted = format_result(result, output, console)
    except ValueError as e:
        fail("select", str(e), json_output)
    if formatted:
        console.print(formatted)


@app.command()
def compare(
    data_file: Optional[Path] = DataFileArg,
    budget: Optional[int] = BudgetOpt,
    min_kcal: Optional[int] = MinKcalOpt,
    max_kcal: Optional[int] = MaxKcalOpt,
    limit: Optional[int] = LimitOpt,
    json_output: bool = JsonOpt,
) -> None:
    """Run greedy and exhaustive selection on the same candidates."""
    from maxprotein.export.formatters import format_comparison, result_to_dict
    from maxprotein.optimizer.selector import select_max_protein

    budget = get_settings().selection.total_kcal if budget is None else budget
    candidates = load_candidates("compare", data_file, min_kcal, max_kcal, limit, json_output)
    warn_if_slow(candidates, json_output)

    try:
        greedy = select_max_protein(candidates, budget, SelectionMethod.GREEDY)
        exhaustive = select_max_protein(candidates, budget, SelectionMethod.EXHAUSTIVE)
    except MaxProteinError as e:
        fail("compare", str(e), json_output)

    gap = exhaustive.total_protein_g - greedy.total_protein_g
    if json_output:
        output_json({
            "success": True,
            "command": "compare",
            "data": {
                "greedy": result_to_dict(greedy),
                "exhaustive": result_to_dict(exhaustive),
                "protein_gap_g": gap,
            },
            "human_summary": f"Greedy {greedy.total_protein_g} g vs optimal "
            f"{exhaustive.total_protein_g} g protein",
        })
        return

    format_comparison(greedy, exhaustive, console)


@app.command("candidates")
def candidates_cmd(
    data_file: Optional[Path] = DataFileArg,
    min_kcal: Optional[int] = MinKcalOpt,
    max_kcal: Optional[int] = MaxKcalOpt,
    limit: Optional[int] = LimitOpt,
    json_output: bool = JsonOpt,
) -> None:
    """List the foods that pass the calorie filter."""
    from maxprotein.export.formatters import build_food_table, food_to_dict

    foods = load_candidates("candidates", data_file, min_kcal, max_kcal, limit, json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "candidates",
            "data": {"count": len(foods), "foods": [food_to_dict(f) for f in foods]},
        })
        return

    if not foods:
        console.print("[yellow]No foods match the calorie filter.[/yellow]")
        return
    console.print(build_food_table(foods, f"Candidates ({len(foods)})"))


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show() -> None:
    """Print the active settings as YAML."""
    import yaml

    console.print(yaml.dump(get_settings().to_dict(), default_flow_style=False, sort_keys=False))


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(None, "--path", help="Where to write config.yaml"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a config file with the default settings."""
    from maxprotein.config.settings import Settings, default_config_path

    path = path or default_config_path()
    if path.exists() and not force:
        console.print(f"[red]{path} already exists (use --force to overwrite)[/red]")
        raise typer.Exit(1)

    Settings().save(path)
    console.print(f"[green]Wrote {path}[/green]")


if __name__ == "__main__":
    app()
