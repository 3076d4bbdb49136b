"""Recommendation engine over weekly purchase history."""

import logging
import threading

from .config import RecommendationSettings
from .history import PurchaseHistory
from .intervals import average_interval, is_due, regularity_score
from .models import Category, ItemRecord, Suggestion, SuggestionReason
from .ranking import rank_all, top_frequent
from .registry import CategoryRegistry

logger = logging.getLogger(__name__)


class GroceryListBuilder:
    """Builds shopping suggestions from an in-memory purchase history.

    Every public method holds one re-entrant lock, so a reader never
    sees a purchase half-recorded across the history indexes.

    ``generate_suggestions`` and ``rotate`` do not commute: a rotated item
    counts as freshly bought and stops being due. Call ``rotate`` first
    when both should apply to the same week.
    """

    def __init__(self, settings: RecommendationSettings | None = None):
        """Initialize an empty builder.

        Args:
            settings: Recommendation thresholds. Uses defaults if not provided.
        """
        self.settings = settings or RecommendationSettings()
        self._history = PurchaseHistory(starting_week=self.settings.starting_week)
        self._registry = CategoryRegistry()
        self._lock = threading.RLock()

    # Purchases

    def record_purchase(self, item: str, week: int) -> None:
        """Record that ``item`` was bought during ``week``."""
        with self._lock:
            self._history.record(item, week)

    def last_purchase_week(self, item: str) -> int:
        with self._lock:
            return self._history.last_purchase_week(item)

    def purchase_count(self, item: str) -> int:
        with self._lock:
            return self._history.frequency(item)

    def weekly_items(self, week: int) -> list[str]:
        with self._lock:
            return self._history.items_in_week(week)

    def all_weeks(self) -> list[int]:
        with self._lock:
            return self._history.weeks()

    @property
    def current_week(self) -> int:
        with self._lock:
            return self._history.current_week

    @current_week.setter
    def current_week(self, week: int) -> None:
        with self._lock:
            self._history.current_week = week

    def get_current_week(self) -> int:
        return self.current_week

    def set_current_week(self, week: int) -> None:
        """Evaluate due dates as of ``week``, which may precede recorded data."""
        self.current_week = week

    # Categories and time-sensitivity

    def assign_category(self, item: str, category: Category | str) -> None:
        with self._lock:
            self._registry.assign(item, category)

    def category_of(self, item: str) -> str | None:
        with self._lock:
            return self._registry.category_of(item)

    def items_in_category(self, category: Category | str) -> list[str]:
        with self._lock:
            return self._registry.items_in(category)

    def all_categories(self) -> set[str]:
        with self._lock:
            return self._registry.categories()

    def mark_time_sensitive(self, item: str) -> None:
        with self._lock:
            self._registry.mark(item)

    def unmark_time_sensitive(self, item: str) -> None:
        with self._lock:
            self._registry.unmark(item)

    def is_time_sensitive(self, item: str) -> bool:
        with self._lock:
            return self._registry.is_time_sensitive(item)

    # Items

    def item(self, name: str) -> ItemRecord:
        """Snapshot of one item; unknown names yield an empty record."""
        with self._lock:
            return ItemRecord(
                name=name,
                category=self._registry.category_of(name),
                time_sensitive=self._registry.is_time_sensitive(name),
                last_purchase_week=self._history.last_purchase_week(name),
                purchase_count=self._history.frequency(name),
            )

    def items(self) -> list[ItemRecord]:
        """Records for every purchased item in first-purchase order."""
        with self._lock:
            return [self.item(name) for name in self._history.items()]

    # Analysis

    def top_frequent(self, limit: int | None = None) -> list[str]:
        """Most purchased items, highest count first.

        Ties are broken by the order items were first purchased.
        """
        if limit is None:
            limit = self.settings.frequent_limit
        with self._lock:
            return top_frequent(self._history.frequencies(), limit)

    def average_purchase_interval(self, item: str) -> float:
        """Average weeks between purchases, or -1.0 if bought fewer than twice."""
        with self._lock:
            return average_interval(self._history.weeks_for(item))

    def regularity_scores(self) -> dict[str, float]:
        """Regularity score per purchased item."""
        with self._lock:
            return {
                name: regularity_score(self._history.weeks_for(name))
                for name in self._history.items()
            }

    def generate_suggestions(self) -> list[str]:
        """Items to put on the next shopping list.

        Due and time-sensitive items come first in first-purchase order,
        followed by frequent padding items.
        """
        return [name for name, _ in self._plan_suggestions()]

    def explain_suggestions(self) -> list[Suggestion]:
        """The suggested list with a reason for each item."""
        with self._lock:
            current = self._history.current_week
            suggestions = []
            for name, reason in self._plan_suggestions():
                avg = average_interval(self._history.weeks_for(name))
                last = self._history.last_purchase_week(name)
                since = current - last if name in self._history else None

                if reason is SuggestionReason.TIME_SENSITIVE:
                    message = f"Time-sensitive item, last bought {since} weeks ago"
                elif reason is SuggestionReason.DUE:
                    message = f"Due based on {avg:.1f} weeks average interval"
                else:
                    message = f"Frequently purchased ({self._history.frequency(name)} times)"

                suggestions.append(
                    Suggestion(
                        item_name=name,
                        reason=reason,
                        message=message,
                        average_interval=avg if avg >= 0 else None,
                        last_purchase_week=last,
                        weeks_since_purchase=since,
                        time_sensitive=self._registry.is_time_sensitive(name),
                    )
                )
            return suggestions

    def _plan_suggestions(self) -> list[tuple[str, SuggestionReason]]:
        settings = self.settings
        with self._lock:
            current = self._history.current_week
            planned: list[tuple[str, SuggestionReason]] = []
            chosen: set[str] = set()

            for name in self._history.items():
                last = self._history.last_purchase_week(name)
                since = current - last
                weeks = self._history.weeks_for(name)

                if (
                    self._registry.is_time_sensitive(name)
                    and since >= settings.time_sensitive_weeks
                ):
                    planned.append((name, SuggestionReason.TIME_SENSITIVE))
                    chosen.add(name)
                elif len(weeks) >= 2 and is_due(
                    current, last, average_interval(weeks), settings.due_tolerance
                ):
                    planned.append((name, SuggestionReason.DUE))
                    chosen.add(name)

            # Padding keeps the list actionable; it is not a due-date signal.
            if len(planned) < settings.minimum_list_size:
                for name in rank_all(self._history.frequencies()):
                    if len(planned) >= settings.minimum_list_size:
                        break
                    if name not in chosen and self._history.frequency(name) >= 2:
                        planned.append((name, SuggestionReason.FREQUENT))
                        chosen.add(name)

            return planned

    # Rotation

    def rotate(self, week: int) -> list[str]:
        """Re-buy time-sensitive items last purchased ``rotation_weeks`` ago.

        Each rotated item is recorded as a new purchase in ``week``, so a
        repeat call for the same week finds nothing further to rotate.

        Returns:
            Items rotated, in the order they were bought that earlier week
        """
        with self._lock:
            self._history.current_week = max(self._history.current_week, week)
            cutoff = week - self.settings.rotation_weeks
            rotated: list[str] = []

            for name in self._history.items_in_week(cutoff):
                if not self._registry.is_time_sensitive(name):
                    continue
                if self._history.last_purchase_week(name) <= cutoff:
                    self._history.record(name, week)
                    rotated.append(name)

            if rotated:
                logger.debug("Rotated %d items into week %d", len(rotated), week)
            return rotated
