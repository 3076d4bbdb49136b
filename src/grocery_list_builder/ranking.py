"""Most-purchased item ranking."""

import heapq
from collections.abc import Mapping


def top_frequent(frequencies: Mapping[str, int], limit: int = 10) -> list[str]:
    """Return up to ``limit`` items, highest purchase count first.

    Ties keep the mapping's iteration order, which for the purchase
    history is the order items were first bought.

    Args:
        frequencies: Purchase count per item
        limit: Maximum number of items to return

    Returns:
        Item names ordered by descending count
    """
    if limit <= 0 or not frequencies:
        return []
    ranked = heapq.nlargest(limit, frequencies.items(), key=lambda entry: entry[1])
    return [name for name, _ in ranked]


def rank_all(frequencies: Mapping[str, int]) -> list[str]:
    """Every item ordered by descending count with the same tie-break."""
    return sorted(frequencies, key=lambda name: frequencies[name], reverse=True)
