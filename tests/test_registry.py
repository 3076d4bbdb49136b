"""Tests for the category and sensitivity registry."""

from grocery_list_builder.models import Category
from grocery_list_builder.registry import CategoryRegistry


class TestAssign:
    """Tests for category assignment."""

    def test_assign_sets_category(self):
        """Assigned category is retrievable."""
        registry = CategoryRegistry()
        registry.assign("Rice", "Grains")
        assert registry.category_of("Rice") == "Grains"

    def test_unassigned_is_none(self):
        """Unknown item has no category."""
        assert CategoryRegistry().category_of("Rice") is None

    def test_perishable_category_flags_item(self):
        """Dairy assignment marks the item time-sensitive."""
        registry = CategoryRegistry()
        registry.assign("Yogurt", "Dairy")
        assert registry.is_time_sensitive("Yogurt")

    def test_enum_assignment(self):
        """Enum members work like their labels."""
        registry = CategoryRegistry()
        registry.assign("Salmon", Category.SEAFOOD)
        assert registry.category_of("Salmon") == "Seafood"
        assert registry.is_time_sensitive("Salmon")

    def test_known_labels_canonicalized(self):
        """Known labels are stored with canonical casing."""
        registry = CategoryRegistry()
        registry.assign("Bagel", "bakery")
        assert registry.category_of("Bagel") == "Bakery"
        assert registry.is_time_sensitive("Bagel")

    def test_non_perishable_does_not_flag(self):
        """Snacks assignment leaves the item unflagged."""
        registry = CategoryRegistry()
        registry.assign("Chips", "Snacks")
        assert not registry.is_time_sensitive("Chips")

    def test_reassign_does_not_unflag(self):
        """Moving to a shelf-stable category keeps the flag."""
        registry = CategoryRegistry()
        registry.assign("Cheese", "Dairy")
        registry.assign("Cheese", "Snacks")
        assert registry.category_of("Cheese") == "Snacks"
        assert registry.is_time_sensitive("Cheese")

    def test_unknown_category_stored_verbatim(self):
        """Unknown labels are kept as given and never flag."""
        registry = CategoryRegistry()
        registry.assign("Dog Food", "Pet Supplies")
        assert registry.category_of("Dog Food") == "Pet Supplies"
        assert not registry.is_time_sensitive("Dog Food")


class TestTimeSensitivity:
    """Tests for manual flags."""

    def test_mark_and_unmark(self):
        """Manual toggles work regardless of category."""
        registry = CategoryRegistry()
        registry.mark("Rice")
        assert registry.is_time_sensitive("Rice")
        registry.unmark("Rice")
        assert not registry.is_time_sensitive("Rice")

    def test_mark_idempotent(self):
        """Marking twice then unmarking once clears the flag."""
        registry = CategoryRegistry()
        registry.mark("Rice")
        registry.mark("Rice")
        registry.unmark("Rice")
        assert not registry.is_time_sensitive("Rice")

    def test_unmark_unknown(self):
        """Unmarking an unknown item is harmless."""
        registry = CategoryRegistry()
        registry.unmark("Nothing")
        assert not registry.is_time_sensitive("Nothing")

    def test_unmark_overrides_category_default(self):
        """Explicit unmark clears an auto flag."""
        registry = CategoryRegistry()
        registry.assign("Milk", "Dairy")
        registry.unmark("Milk")
        assert not registry.is_time_sensitive("Milk")


class TestItemsIn:
    """Tests for category lookups."""

    def test_items_in_category(self):
        """Items are listed in assignment order."""
        registry = CategoryRegistry()
        registry.assign("Milk", "Dairy")
        registry.assign("Rice", "Grains")
        registry.assign("Cheese", "Dairy")
        assert registry.items_in("Dairy") == ["Milk", "Cheese"]

    def test_items_in_case_insensitive_for_known(self):
        """Known category lookups ignore case."""
        registry = CategoryRegistry()
        registry.assign("Milk", "Dairy")
        assert registry.items_in("dairy") == ["Milk"]
        assert registry.items_in(Category.DAIRY) == ["Milk"]

    def test_stable_across_calls(self):
        """Repeated calls return the same order."""
        registry = CategoryRegistry()
        for name in ["Kale", "Carrots", "Onion"]:
            registry.assign(name, "Vegetables")
        assert registry.items_in("Vegetables") == registry.items_in("Vegetables")

    def test_empty_category(self):
        """Unused category gives an empty list."""
        assert CategoryRegistry().items_in("Deli") == []

    def test_categories(self):
        """All assigned categories are reported once."""
        registry = CategoryRegistry()
        registry.assign("Milk", "Dairy")
        registry.assign("Cheese", "Dairy")
        registry.assign("Rice", "Grains")
        assert registry.categories() == {"Dairy", "Grains"}
