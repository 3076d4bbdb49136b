"""Append-only ledger of weekly purchase events."""

import logging

from .models import NO_PURCHASE_WEEK

logger = logging.getLogger(__name__)


class PurchaseHistory:
    """Records (item, week) purchases indexed by item and by week.

    Not thread-safe on its own; ``GroceryListBuilder`` serializes access.
    """

    def __init__(self, starting_week: int = 1):
        """Initialize an empty history.

        Args:
            starting_week: Value of the current week before any purchase.
        """
        self._weeks_by_item: dict[str, list[int]] = {}
        self._items_by_week: dict[int, list[str]] = {}
        self._last_week: dict[str, int] = {}
        self._frequency: dict[str, int] = {}
        self.current_week = starting_week

    def record(self, item: str, week: int) -> None:
        """Record one purchase of ``item`` during ``week``.

        Accepts any week value; range checks belong to the caller.
        """
        self._weeks_by_item.setdefault(item, []).append(week)
        self._items_by_week.setdefault(week, []).append(item)
        self._last_week[item] = max(self._last_week.get(item, week), week)
        self._frequency[item] = self._frequency.get(item, 0) + 1
        self.current_week = max(self.current_week, week)
        logger.debug("Recorded %s in week %d", item, week)

    def weeks_for(self, item: str) -> list[int]:
        """Purchase weeks for an item in insertion order."""
        return list(self._weeks_by_item.get(item, []))

    def items_in_week(self, week: int) -> list[str]:
        """Items bought during a week in insertion order."""
        return list(self._items_by_week.get(week, []))

    def last_purchase_week(self, item: str) -> int:
        """Latest week an item was bought, or -1 if never."""
        return self._last_week.get(item, NO_PURCHASE_WEEK)

    def frequency(self, item: str) -> int:
        return self._frequency.get(item, 0)

    def frequencies(self) -> dict[str, int]:
        """Copy of the purchase count per item, in first-purchase order."""
        return dict(self._frequency)

    def items(self) -> list[str]:
        """All purchased items in first-purchase order."""
        return list(self._weeks_by_item)

    def weeks(self) -> list[int]:
        """All weeks with at least one purchase, ascending."""
        return sorted(self._items_by_week)

    def __contains__(self, item: object) -> bool:
        return item in self._weeks_by_item

    def __len__(self) -> int:
        return len(self._weeks_by_item)
