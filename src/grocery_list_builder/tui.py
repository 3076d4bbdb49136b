"""Terminal form for recording purchases and viewing suggestions."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Footer, Header, Input, Label, Select, Static

from .csv_importer import CsvImporter
from .engine import GroceryListBuilder
from .models import Category


class GroceryListTUI(App[None]):
    """Single-screen form over a GroceryListBuilder session."""

    TITLE = "Grocery List Builder"
    SUB_TITLE = "Weekly Suggestions"

    DEFAULT_CSS = """
    #form {
        height: auto;
        padding: 0 1;
    }

    .form-row {
        height: auto;
        margin-bottom: 1;
    }

    .form-row Label {
        width: 10;
        padding-top: 1;
    }

    .form-row Input {
        width: 1fr;
    }

    #category {
        width: 30;
    }

    #actions Button {
        margin-right: 1;
    }

    #display-scroll {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+s", "suggest", "Suggest"),
        Binding("ctrl+f", "frequent", "Frequent"),
    ]

    def __init__(
        self,
        builder: GroceryListBuilder,
        importer: CsvImporter | None = None,
        default_category: str = Category.FRUITS.value,
    ):
        super().__init__()
        self.builder = builder
        self.importer = importer or CsvImporter(builder)
        known = Category.parse(default_category)
        self.default_category = known.value if known else Category.FRUITS.value

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="form"):
            with Horizontal(classes="form-row"):
                yield Label("Item")
                yield Input(placeholder="Milk", id="item")
                yield Label("Week")
                yield Input(placeholder="1", id="week")
                yield Select(
                    [(c.value, c.value) for c in Category],
                    value=self.default_category,
                    allow_blank=False,
                    id="category",
                )
            with Horizontal(classes="form-row"):
                yield Label("CSV file")
                yield Input(placeholder="history.csv", id="csv-path")
            with Horizontal(id="actions", classes="form-row"):
                yield Button("Add Item", id="add", variant="primary")
                yield Button("Frequent Items", id="frequent")
                yield Button("Smart Suggestions", id="suggest")
                yield Button("Rotate Time-Sensitive", id="rotate")
                yield Button("Filter by Category", id="filter")
                yield Button("Load CSV", id="load")
                yield Button("Mark Time-Sensitive", id="mark")
        with VerticalScroll(id="display-scroll"):
            yield Static("", id="display")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        handlers = {
            "add": self.action_add_item,
            "frequent": self.action_frequent,
            "suggest": self.action_suggest,
            "rotate": self.action_rotate,
            "filter": self.action_filter,
            "load": self.action_load,
            "mark": self.action_mark,
        }
        handler = handlers.get(event.button.id or "")
        if handler is not None:
            handler()

    def action_add_item(self) -> None:
        item = self._value("#item")
        if not item:
            self._show("Please enter an item name.")
            return

        week = self._week()
        if week is None:
            self._show("Please enter a valid week number.")
            return
        if week < 1:
            self._show("Week number must be positive.")
            return

        self.builder.record_purchase(item, week)
        self.builder.assign_category(item, self._category())
        self.query_one("#item", Input).value = ""
        self._show(f"Item added: {item}")

    def action_frequent(self) -> None:
        items = self.builder.top_frequent()
        self._show("Frequent Items (by count only):\n" + "\n".join(items))

    def action_suggest(self) -> None:
        week = self._week()
        if week is None:
            self._show("Please enter a valid current week number first.")
            return
        if week < 1:
            self._show("Week number must be positive.")
            return

        self.builder.set_current_week(week)
        suggestions = self.builder.explain_suggestions()
        if not suggestions:
            self._show("No items are due this week based on smart interval logic.")
            return

        lines = [
            f"{s.item_name} - {s.message} (last bought: Week {s.last_purchase_week})"
            for s in suggestions
        ]
        self._show("Suggested List (Smart):\n" + "\n".join(lines))

    def action_rotate(self) -> None:
        week = self._week()
        if week is None:
            self._show("Please enter a valid week number.")
            return
        if week < 1:
            self._show("Week number must be positive.")
            return

        rotated = self.builder.rotate(week)
        if not rotated:
            self._show(f"No time-sensitive items needed rotation for week: {week}")
        else:
            self._show(f"Rotated items for week {week}:\n" + "\n".join(rotated))

    def action_filter(self) -> None:
        category = self._category()
        items = self.builder.items_in_category(category)
        self._show(f"Items in category '{category}':\n" + "\n".join(items))

    def action_load(self) -> None:
        path = self._value("#csv-path")
        if not path:
            self._show("Please enter a CSV file path.")
            return

        try:
            result = self.importer.import_file(path)
        except FileNotFoundError:
            self._show(f"Error: File not found - {path}")
            return
        except (OSError, UnicodeDecodeError) as exc:
            self._show(f"Error reading file: {exc}")
            return
        self._show(result.message)

    def action_mark(self) -> None:
        item = self._value("#item")
        if not item:
            self._show("Please enter an item name to mark as time-sensitive.")
            return

        if self.builder.category_of(item) is None and self.builder.purchase_count(item) == 0:
            self._show(f"Item '{item}' not found. Please add the item first.")
            return

        self.builder.mark_time_sensitive(item)
        self._show(f"Item '{item}' marked as time-sensitive.")

    def _value(self, selector: str) -> str:
        return self.query_one(selector, Input).value.strip()

    def _week(self) -> int | None:
        try:
            return int(self._value("#week"))
        except ValueError:
            return None

    def _category(self) -> str:
        value = self.query_one("#category", Select).value
        return str(value) if value is not Select.BLANK else self.default_category

    def _show(self, message: str) -> None:
        self.query_one("#display", Static).update(Text(message))
