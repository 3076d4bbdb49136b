"""Output formatting for CLI and programmatic use."""

import json
from enum import Enum
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table


class JSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for output."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Path):
            return str(obj)
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, (set, frozenset)):
            return sorted(obj)
        return super().default(obj)


class OutputFormatter:
    """Formats output for both Rich terminal and JSON modes."""

    def __init__(self, json_mode: bool = False, console: Console | None = None):
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON instead of Rich formatting
            console: Rich console to print to. Creates one if not provided.
        """
        self.json_mode = json_mode
        self.console = console or Console()

    def output(self, data: dict[str, Any], message: str = "") -> None:
        """Output data in appropriate format.

        Args:
            data: Data to output
            message: Optional message for Rich mode
        """
        if self.json_mode:
            self._output_json(data)
        else:
            self._output_rich(data, message)

    def _output_json(self, data: dict[str, Any]) -> None:
        """Output as JSON to stdout."""
        print(json.dumps(data, cls=JSONEncoder, indent=2))

    def _output_rich(self, data: dict[str, Any], message: str) -> None:
        """Output with Rich formatting."""
        if message:
            self.console.print(f"[green]✓[/green] {message}")

        payload = data.get("data", {})
        if "frequent" in payload:
            self._render_frequent(data)
        elif "suggestions" in payload:
            self._render_suggestions(data)
        elif "rotated" in payload:
            self._render_rotated(data)
        elif "category_items" in payload:
            self._render_category_items(data)
        elif "item" in payload:
            self._render_item(data)
        elif "import" in payload:
            self._render_import(data)
        elif "regularity" in payload:
            self._render_regularity(data)
        elif "weeks" in payload:
            self._render_weeks(data)

    def _render_frequent(self, data: dict) -> None:
        """Render the most purchased items."""
        items = data["data"]["frequent"]

        if not items:
            self.console.print("[dim]No purchases recorded[/dim]")
            return

        table = Table(title="Frequent Items", show_header=True, header_style="bold cyan")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Item", style="cyan")
        table.add_column("Purchases", style="magenta", justify="right")

        for rank, item in enumerate(items, start=1):
            table.add_row(str(rank), item["name"], str(item["purchase_count"]))

        self.console.print(table)

    def _render_suggestions(self, data: dict) -> None:
        """Render the suggested shopping list."""
        suggestions = data["data"]["suggestions"]
        week = data["data"].get("current_week")

        if not suggestions:
            self.console.print("[dim]No items are due this week[/dim]")
            return

        title = "Suggested List" if week is None else f"Suggested List (Week {week})"
        self.console.print(f"\n[bold]{title}[/bold]")

        for s in suggestions:
            if isinstance(s, str):
                self.console.print(f"  • [bold]{s}[/bold]")
                continue

            icon, color = {
                "due": ("⚠", "yellow"),
                "time_sensitive": ("⏱", "red"),
                "frequent": ("•", "dim"),
            }.get(s["reason"], ("•", "white"))

            self.console.print(
                f"  [{color}]{icon}[/{color}] [bold]{s['item_name']}[/bold]: "
                f"{s['message']} (last bought: Week {s['last_purchase_week']})"
            )

    def _render_rotated(self, data: dict) -> None:
        """Render rotated items."""
        rotated = data["data"]["rotated"]
        week = data["data"].get("week")

        if not rotated:
            self.console.print(f"[dim]No time-sensitive items needed rotation for week {week}[/dim]")
            return

        self.console.print(f"\n[bold]Rotated items for week {week}[/bold]")
        for item in rotated:
            self.console.print(f"  ↻ {item}")

    def _render_category_items(self, data: dict) -> None:
        """Render items in one category."""
        category = data["data"]["category"]
        items = data["data"]["category_items"]

        if not items:
            self.console.print(f"[dim]No items in category '{category}'[/dim]")
            return

        self.console.print(f"\n[bold]Items in category '{category}'[/bold]")
        for item in items:
            self.console.print(f"  • {item}")

    def _render_item(self, data: dict) -> None:
        """Render a single item with Rich."""
        item = data["data"]["item"]
        interval = item.get("average_interval")

        last_week = item["last_purchase_week"]
        panel_content = f"""[bold]{item["name"]}[/bold]

Category: {item.get("category") or "Uncategorized"}
Purchases: {item.get("purchase_count", 0)}
Last bought: {f"Week {last_week}" if last_week >= 0 else "Never"}
Average interval: {f"{interval:.1f} weeks" if interval is not None else "n/a"}
Time-sensitive: {"yes" if item.get("time_sensitive") else "no"}"""

        panel = Panel(panel_content, title="Item Details", border_style="green")
        self.console.print(panel)

    def _render_import(self, data: dict) -> None:
        """Render import results."""
        for result in data["data"]["import"]:
            self.console.print(
                f"\n[bold]{result['source']}[/bold]: "
                f"{result['loaded']} loaded, {result['skipped']} skipped"
            )
            for issue in result["issues"]:
                self.console.print(
                    f"  [yellow]Line {issue['line_number']}:[/yellow] {issue['message']}"
                )

    def _render_regularity(self, data: dict) -> None:
        """Render regularity scores."""
        scores = data["data"]["regularity"]

        if not scores:
            self.console.print("[dim]No purchases recorded[/dim]")
            return

        table = Table(title="Purchase Regularity", show_header=True, header_style="bold")
        table.add_column("Item")
        table.add_column("Score", justify="right")
        table.add_column("Time-sensitive")

        for entry in scores:
            table.add_row(
                entry["name"],
                f"{entry['score']:.2f}",
                "[green]✓[/green]" if entry.get("time_sensitive") else "",
            )

        self.console.print(table)

    def _render_weeks(self, data: dict) -> None:
        """Render weeks with data, or the items of one week."""
        weeks = data["data"]["weeks"]

        if isinstance(weeks, dict):
            for week, items in weeks.items():
                self.console.print(f"\n[bold]Week {week}[/bold]")
                for item in items:
                    self.console.print(f"  • {item}")
            return

        if not weeks:
            self.console.print("[dim]No purchases recorded[/dim]")
            return
        self.console.print("Weeks with purchases: " + ", ".join(str(w) for w in weeks))

    def error(self, message: str, error_code: str | None = None) -> None:
        """Output error message.

        Args:
            message: Error message
            error_code: Optional error code
        """
        if self.json_mode:
            output = {"success": False, "error": message}
            if error_code:
                output["error_code"] = error_code
            print(json.dumps(output))
        else:
            self.console.print(f"[red]✗ Error:[/red] {message}")

    def warning(self, message: str) -> None:
        """Output warning message.

        Args:
            message: Warning message
        """
        if self.json_mode:
            print(json.dumps({"success": True, "warning": message}))
        else:
            self.console.print(f"[yellow]⚠ Warning:[/yellow] {message}")
