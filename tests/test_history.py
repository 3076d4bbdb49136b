"""Tests for the purchase history store."""

from grocery_list_builder.history import PurchaseHistory


class TestRecord:
    """Tests for recording purchases."""

    def test_record_indexes_item_and_week(self):
        """A purchase shows up under its item and its week."""
        history = PurchaseHistory()
        history.record("Milk", 2)

        assert history.weeks_for("Milk") == [2]
        assert history.items_in_week(2) == ["Milk"]
        assert history.frequency("Milk") == 1

    def test_duplicate_events_counted(self):
        """Same item twice in one week counts twice."""
        history = PurchaseHistory()
        history.record("Milk", 2)
        history.record("Milk", 2)

        assert history.frequency("Milk") == 2
        assert history.weeks_for("Milk") == [2, 2]
        assert history.items_in_week(2) == ["Milk", "Milk"]

    def test_weeks_kept_in_insertion_order(self):
        """Weeks are not sorted on write."""
        history = PurchaseHistory()
        for week in [5, 1, 3]:
            history.record("Eggs", week)

        assert history.weeks_for("Eggs") == [5, 1, 3]

    def test_frequency_matches_history_length(self):
        """Count always equals the number of recorded weeks."""
        history = PurchaseHistory()
        for item, week in [("A", 1), ("B", 2), ("A", 3), ("A", 1), ("C", 9)]:
            history.record(item, week)

        for item in history.items():
            assert history.frequency(item) == len(history.weeks_for(item))

    def test_accepts_zero_and_negative_weeks(self):
        """Recording is total over all integers."""
        history = PurchaseHistory()
        history.record("Milk", 0)
        history.record("Milk", -4)

        assert history.frequency("Milk") == 2
        assert history.last_purchase_week("Milk") == 0


class TestLastPurchaseWeek:
    """Tests for last purchase tracking."""

    def test_unknown_item(self):
        """Never purchased item returns -1."""
        assert PurchaseHistory().last_purchase_week("Milk") == -1

    def test_is_maximum_not_latest_insert(self):
        """Out-of-order inserts keep the maximum week."""
        history = PurchaseHistory()
        history.record("Milk", 6)
        history.record("Milk", 2)

        assert history.last_purchase_week("Milk") == 6

    def test_never_decreases(self):
        """Last purchase week is monotonic."""
        history = PurchaseHistory()
        seen = []
        for week in [3, 1, 7, 4, 7, 2]:
            history.record("Milk", week)
            seen.append(history.last_purchase_week("Milk"))

        assert seen == sorted(seen)
        assert seen[-1] == max(history.weeks_for("Milk"))


class TestCurrentWeek:
    """Tests for current week tracking."""

    def test_starts_at_starting_week(self):
        """Current week begins at the configured start."""
        assert PurchaseHistory().current_week == 1
        assert PurchaseHistory(starting_week=4).current_week == 4

    def test_advances_to_latest_week(self):
        """Recording a later week advances the current week."""
        history = PurchaseHistory()
        history.record("Milk", 8)
        history.record("Eggs", 3)

        assert history.current_week == 8


class TestQueries:
    """Tests for read-only queries."""

    def test_unknown_week_is_empty(self):
        """Unknown week returns an empty list."""
        assert PurchaseHistory().items_in_week(12) == []

    def test_weeks_sorted(self):
        """All weeks come back ascending."""
        history = PurchaseHistory()
        for week in [4, 1, 9, 1]:
            history.record("Milk", week)

        assert history.weeks() == [1, 4, 9]

    def test_returned_lists_are_copies(self):
        """Mutating a returned list does not touch the store."""
        history = PurchaseHistory()
        history.record("Milk", 1)
        history.weeks_for("Milk").append(99)
        history.items_in_week(1).append("Eggs")

        assert history.weeks_for("Milk") == [1]
        assert history.items_in_week(1) == ["Milk"]

    def test_contains_and_len(self):
        """Membership and size reflect purchased items."""
        history = PurchaseHistory()
        history.record("Milk", 1)
        history.record("Milk", 2)
        history.record("Eggs", 2)

        assert "Milk" in history
        assert "Bread" not in history
        assert len(history) == 2
