"""Purchase cadence analysis."""

from collections.abc import Iterable

from .models import NO_INTERVAL


def average_interval(weeks: Iterable[int]) -> float:
    """Average gap in weeks between consecutive purchases.

    Args:
        weeks: Purchase weeks in any order

    Returns:
        Mean gap, or -1.0 with fewer than two purchases
    """
    ordered = sorted(weeks)
    if len(ordered) < 2:
        return NO_INTERVAL
    total = sum(ordered[i] - ordered[i - 1] for i in range(1, len(ordered)))
    return total / (len(ordered) - 1)


def is_due(
    current_week: int,
    last_purchase_week: int,
    avg_interval: float,
    tolerance: float = 0.5,
) -> bool:
    """Whether enough weeks have passed to buy an item again.

    An item comes due ``tolerance`` weeks before its average interval
    fully elapses. Items without an interval are never due by this rule.
    """
    if avg_interval < 0:
        return False
    return current_week - last_purchase_week >= avg_interval - tolerance


def regularity_score(weeks: Iterable[int]) -> float:
    """Score how evenly spaced an item's purchase weeks are.

    Repeated purchases within one week count once. The score grows with
    the number of distinct weeks and shrinks with the variance of the
    gaps between them.
    """
    distinct = sorted(set(weeks))
    if len(distinct) <= 1:
        return 0.0

    gaps = [distinct[i] - distinct[i - 1] for i in range(1, len(distinct))]
    mean = sum(gaps) / len(gaps)
    variance = sum((gap - mean) ** 2 for gap in gaps) / len(gaps)
    return len(distinct) * (1.0 / (1.0 + variance))
