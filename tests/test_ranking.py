"""Tests for frequency ranking."""

from grocery_list_builder.ranking import rank_all, top_frequent


class TestTopFrequent:
    """Tests for top_frequent."""

    def test_empty(self):
        """No purchases gives an empty list."""
        assert top_frequent({}, 10) == []

    def test_highest_first(self):
        """Items are ordered by descending count."""
        counts = {"Bread": 2, "Milk": 5, "Eggs": 3}
        assert top_frequent(counts, 10) == ["Milk", "Eggs", "Bread"]

    def test_limit(self):
        """Only the requested number of items is returned."""
        counts = {f"item{i}": i for i in range(20)}
        result = top_frequent(counts, 10)
        assert len(result) == 10
        assert result[0] == "item19"
        assert result[-1] == "item10"

    def test_ties_keep_insertion_order(self):
        """Equal counts keep first-seen order."""
        counts = {"Bread": 2, "Apples": 2, "Milk": 3, "Cheese": 2}
        assert top_frequent(counts, 3) == ["Milk", "Bread", "Apples"]

    def test_non_positive_limit(self):
        """Zero or negative limit gives nothing."""
        assert top_frequent({"Milk": 1}, 0) == []
        assert top_frequent({"Milk": 1}, -2) == []


class TestRankAll:
    """Tests for rank_all."""

    def test_ranks_every_item(self):
        """All items ranked with the same tie-break."""
        counts = {"Bread": 1, "Milk": 4, "Eggs": 1}
        assert rank_all(counts) == ["Milk", "Bread", "Eggs"]
