"""Shared test fixtures for Grocery List Builder."""

import pytest

from grocery_list_builder.csv_importer import CsvImporter
from grocery_list_builder.engine import GroceryListBuilder


@pytest.fixture
def builder():
    """Create an empty GroceryListBuilder."""
    return GroceryListBuilder()


@pytest.fixture
def importer(builder):
    """Create a CsvImporter feeding the test builder."""
    return CsvImporter(builder)


@pytest.fixture
def sample_rows():
    """Sample history rows including a header."""
    return [
        "Item,Week,Category",
        "Milk,1,Dairy",
        "Bread,1,Bakery",
        "Rice,1,Grains",
        "Milk,3,Dairy",
        "Rice,4,Grains",
        "Milk,5,Dairy",
        "Lettuce,5,Vegetables",
    ]


@pytest.fixture
def history_csv(tmp_path, sample_rows):
    """Write the sample rows to a CSV file."""
    path = tmp_path / "history.csv"
    path.write_text("\n".join(sample_rows) + "\n")
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep config discovery away from the real home directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
