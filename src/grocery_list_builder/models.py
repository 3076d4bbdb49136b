"""Core data models for Grocery List Builder."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

NO_PURCHASE_WEEK = -1
NO_INTERVAL = -1.0


class Category(str, Enum):
    """Known grocery categories."""

    FRUITS = "Fruits"
    VEGETABLES = "Vegetables"
    DAIRY = "Dairy"
    SNACKS = "Snacks"
    MEAT = "Meat"
    BEVERAGES = "Beverages"
    GRAINS = "Grains"
    FROZEN = "Frozen Foods"
    CANNED = "Canned Goods"
    BAKERY = "Bakery"
    DELI = "Deli"
    SEAFOOD = "Seafood"
    CONDIMENTS = "Condiments"

    @property
    def perishable(self) -> bool:
        """Whether items in this category are time-sensitive by default."""
        return _PERISHABLE[self]

    @classmethod
    def parse(cls, label: str) -> "Category | None":
        """Resolve a label to a known category, ignoring case."""
        wanted = label.strip().lower()
        for category in cls:
            if category.value.lower() == wanted:
                return category
        return None


_PERISHABLE: dict[Category, bool] = {
    Category.FRUITS: True,
    Category.VEGETABLES: True,
    Category.DAIRY: True,
    Category.SNACKS: False,
    Category.MEAT: False,
    Category.BEVERAGES: False,
    Category.GRAINS: False,
    Category.FROZEN: False,
    Category.CANNED: False,
    Category.BAKERY: True,
    Category.DELI: True,
    Category.SEAFOOD: True,
    Category.CONDIMENTS: False,
}


class ItemRecord(BaseModel):
    """Snapshot of one grocery item's attributes.

    Two records describe the same item when their names match, so
    equality and hashing ignore every other field.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    category: str | None = None
    time_sensitive: bool = False
    last_purchase_week: int = NO_PURCHASE_WEEK
    purchase_count: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemRecord):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


class SuggestionReason(str, Enum):
    """Why an item landed on the suggested list."""

    DUE = "due"
    TIME_SENSITIVE = "time_sensitive"
    FREQUENT = "frequent"


class Suggestion(BaseModel):
    """A suggested item with the reasoning behind it."""

    item_name: str
    reason: SuggestionReason
    message: str
    average_interval: float | None = None
    last_purchase_week: int = NO_PURCHASE_WEEK
    weeks_since_purchase: int | None = None
    time_sensitive: bool = False


class PurchaseRow(BaseModel):
    """A validated (item, week, category) row from an import file."""

    line_number: int
    item: str = Field(min_length=1)
    week: int = Field(ge=1)
    category: str | None = None


class ImportIssue(BaseModel):
    """A rejected import row."""

    line_number: int
    message: str
    raw: str = ""

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.message}"


class ImportResult(BaseModel):
    """Outcome of importing purchase rows."""

    source: str
    loaded: int = 0
    issues: list[ImportIssue] = Field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.issues)

    @property
    def message(self) -> str:
        text = f"Loaded {self.loaded} items from CSV."
        if self.issues:
            details = "\n".join(str(issue) for issue in self.issues)
            text += f"\nSkipped {self.skipped} invalid entries:\n{details}"
        return text

    def summary(self) -> dict[str, Any]:
        """Serializable summary including derived fields."""
        data = self.model_dump(mode="json")
        data["skipped"] = self.skipped
        return data
