"""Item categories and time-sensitivity flags."""

import logging

from .models import Category

logger = logging.getLogger(__name__)


class CategoryRegistry:
    """Maps items to one category and tracks perishable items."""

    def __init__(self) -> None:
        self._categories: dict[str, str] = {}
        self._time_sensitive: set[str] = set()

    def assign(self, item: str, category: Category | str) -> None:
        """Set an item's category.

        Known perishable categories also flag the item as time-sensitive.
        Reassigning to a non-perishable category leaves the flag alone.
        """
        known = category if isinstance(category, Category) else Category.parse(category)
        label = known.value if known is not None else category
        self._categories[item] = label
        if known is not None and known.perishable:
            self._time_sensitive.add(item)
        logger.debug("Assigned %s to category %s", item, label)

    def category_of(self, item: str) -> str | None:
        return self._categories.get(item)

    def items_in(self, category: Category | str) -> list[str]:
        """Items assigned to a category, in first-assignment order."""
        known = category if isinstance(category, Category) else Category.parse(category)
        label = known.value if known is not None else category
        return [item for item, assigned in self._categories.items() if assigned == label]

    def categories(self) -> set[str]:
        return set(self._categories.values())

    def mark(self, item: str) -> None:
        self._time_sensitive.add(item)

    def unmark(self, item: str) -> None:
        self._time_sensitive.discard(item)

    def is_time_sensitive(self, item: str) -> bool:
        return item in self._time_sensitive
