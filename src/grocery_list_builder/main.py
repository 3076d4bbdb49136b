"""CLI entry point for Grocery List Builder."""

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler

from .config import ConfigManager
from .csv_importer import CsvImporter
from .engine import GroceryListBuilder
from .models import Category
from .output_formatter import OutputFormatter

app = typer.Typer(
    name="grocery-list",
    help="Weekly grocery suggestions from your purchase history",
    no_args_is_help=True,
)

# Global state for formatter and config (set by callback)
formatter: OutputFormatter = OutputFormatter()
config: ConfigManager | None = None
history_files: list[Path] = []
builder: GroceryListBuilder | None = None


def get_config() -> ConfigManager:
    """Get or create ConfigManager instance."""
    global config
    if config is None:
        config = ConfigManager()
    return config


def make_importer(target: GroceryListBuilder) -> CsvImporter:
    """Create a CsvImporter using config values."""
    cfg = get_config()
    return CsvImporter(
        target,
        delimiter=cfg.import_.delimiter,
        skip_header=cfg.import_.skip_header,
    )


def get_builder() -> GroceryListBuilder:
    """Get or create the session builder, loaded from the history files."""
    global builder
    if builder is None:
        session = GroceryListBuilder(get_config().recommendations)
        importer = make_importer(session)
        for path in history_files:
            importer.import_file(path)
        builder = session
    return builder


def configure_logging(verbose: bool) -> None:
    """Send debug logs to stderr through Rich when verbose."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            force=True,
        )


def fail(exc: Exception) -> NoReturn:
    """Report an exception and exit with status 1."""
    if isinstance(exc, FileNotFoundError):
        formatter.error(f"File not found - {exc.filename}", error_code="FILE_NOT_FOUND")
    elif isinstance(exc, (OSError, UnicodeDecodeError)):
        formatter.error(f"Error reading file: {exc}", error_code="READ_ERROR")
    else:
        formatter.error(str(exc))
    raise typer.Exit(code=1)


def require_positive_week(week: int) -> None:
    """Exit with INVALID_WEEK unless the week is at least 1."""
    if week < 1:
        formatter.error("Week number must be positive.", error_code="INVALID_WEEK")
        raise typer.Exit(code=1)


@app.callback()
def main(
    json_output: Annotated[
        bool, typer.Option("--json", help="Output as JSON for programmatic use")
    ] = False,
    history: Annotated[
        list[Path] | None,
        typer.Option("--history", "-H", help="Purchase history CSV (repeatable)"),
    ] = None,
    config_path: Annotated[
        Path | None, typer.Option("--config", help="Config file path")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logs")] = False,
) -> None:
    """Grocery List Builder CLI - Suggest what to buy from what you bought."""
    global formatter, config, history_files, builder

    formatter = OutputFormatter(json_mode=json_output)
    configure_logging(verbose)

    config = ConfigManager(config_path=config_path)

    # CLI --history overrides config
    history_files = list(history) if history else list(config.data.history_files)
    builder = None


@app.command(name="import")
def import_files(
    files: Annotated[list[Path], typer.Argument(help="CSV files to import")],
) -> None:
    """Import purchase history files and report invalid rows."""
    try:
        session = GroceryListBuilder(get_config().recommendations)
        importer = make_importer(session)
        results = [importer.import_file(path) for path in files]
        total = sum(r.loaded for r in results)

        output_data = {
            "success": True,
            "message": f"Loaded {total} items from CSV.",
            "data": {
                "import": [r.summary() for r in results],
                "total_loaded": total,
                "total_skipped": sum(r.skipped for r in results),
            },
        }
        formatter.output(output_data, output_data["message"])
    except Exception as e:
        fail(e)


@app.command()
def frequent(
    limit: Annotated[
        int | None, typer.Option("--limit", "-l", help="Maximum items to show")
    ] = None,
) -> None:
    """View the most frequently purchased items."""
    try:
        session = get_builder()
        items = session.top_frequent(limit)

        output_data = {
            "success": True,
            "data": {
                "frequent": [
                    {"name": name, "purchase_count": session.purchase_count(name)}
                    for name in items
                ],
            },
        }
        formatter.output(output_data)
    except Exception as e:
        fail(e)


@app.command()
def suggest(
    week: Annotated[int, typer.Option("--week", "-w", help="Week to plan for")],
    time_sensitive: Annotated[
        list[str] | None,
        typer.Option("--time-sensitive", "-t", help="Mark an item as time-sensitive"),
    ] = None,
    explain: Annotated[
        bool, typer.Option("--explain/--plain", help="Include the reason for each item")
    ] = True,
) -> None:
    """Generate the suggested shopping list for a week."""
    require_positive_week(week)
    try:
        session = get_builder()
        for item in time_sensitive or []:
            session.mark_time_sensitive(item)
        session.set_current_week(week)

        if explain:
            suggestions: list = [s.model_dump(mode="json") for s in session.explain_suggestions()]
        else:
            suggestions = session.generate_suggestions()

        output_data = {
            "success": True,
            "data": {"suggestions": suggestions, "current_week": week},
        }
        formatter.output(output_data)
    except Exception as e:
        fail(e)


@app.command()
def rotate(
    week: Annotated[int, typer.Option("--week", "-w", help="Week to rotate into")],
    time_sensitive: Annotated[
        list[str] | None,
        typer.Option("--time-sensitive", "-t", help="Mark an item as time-sensitive"),
    ] = None,
) -> None:
    """Re-add time-sensitive items bought two weeks earlier."""
    require_positive_week(week)
    try:
        session = get_builder()
        for item in time_sensitive or []:
            session.mark_time_sensitive(item)
        rotated = session.rotate(week)

        output_data = {
            "success": True,
            "message": f"Rotated {len(rotated)} items into week {week}",
            "data": {"rotated": rotated, "week": week},
        }
        formatter.output(output_data, output_data["message"] if rotated else "")
    except Exception as e:
        fail(e)


@app.command()
def category(
    name: Annotated[str, typer.Argument(help="Category to filter by")],
) -> None:
    """List items assigned to a category."""
    try:
        session = get_builder()
        known = Category.parse(name)

        output_data = {
            "success": True,
            "data": {
                "category": known.value if known else name,
                "category_items": session.items_in_category(name),
            },
        }
        formatter.output(output_data)
    except Exception as e:
        fail(e)


@app.command()
def item(
    name: Annotated[str, typer.Argument(help="Item name")],
) -> None:
    """View purchase details for one item."""
    try:
        session = get_builder()
        record = session.item(name)
    except Exception as e:
        fail(e)

    if record.purchase_count == 0 and record.category is None:
        formatter.error(f"Item '{name}' not found", error_code="UNKNOWN_ITEM")
        raise typer.Exit(code=1)

    interval = session.average_purchase_interval(name)
    item_data = record.model_dump()
    item_data["average_interval"] = interval if interval >= 0 else None

    formatter.output({"success": True, "data": {"item": item_data}})


@app.command()
def weeks(
    week: Annotated[
        int | None, typer.Option("--week", "-w", help="Show items bought in one week")
    ] = None,
) -> None:
    """View weeks with purchases, or the items of one week."""
    try:
        session = get_builder()
        if week is None:
            formatter.output({"success": True, "data": {"weeks": session.all_weeks()}})
            return

        items = session.weekly_items(week)
        if not items:
            formatter.warning(f"No purchases recorded for week {week}")
            return
        formatter.output({"success": True, "data": {"weeks": {week: items}}})
    except Exception as e:
        fail(e)


@app.command()
def regularity(
    limit: Annotated[
        int | None, typer.Option("--limit", "-l", help="Maximum items to show")
    ] = None,
) -> None:
    """Rank items by how regularly they are bought."""
    try:
        session = get_builder()
        scores = sorted(session.regularity_scores().items(), key=lambda x: x[1], reverse=True)
        if limit is not None:
            scores = scores[:limit] if limit > 0 else []

        output_data = {
            "success": True,
            "data": {
                "regularity": [
                    {
                        "name": name,
                        "score": round(score, 3),
                        "time_sensitive": session.is_time_sensitive(name),
                    }
                    for name, score in scores
                ],
            },
        }
        formatter.output(output_data)
    except Exception as e:
        fail(e)


@app.command()
def tui() -> None:
    """Launch the interactive terminal form."""
    try:
        session = get_builder()
    except Exception as e:
        fail(e)

    from .tui import GroceryListTUI

    cfg = get_config()
    GroceryListTUI(
        session,
        importer=make_importer(session),
        default_category=cfg.defaults.category,
    ).run()


if __name__ == "__main__":
    app()
