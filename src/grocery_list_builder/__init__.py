"""Grocery List Builder - Weekly shopping suggestions from purchase history."""

import logging

from .config import ConfigManager, RecommendationSettings
from .csv_importer import CsvImporter
from .engine import GroceryListBuilder
from .history import PurchaseHistory
from .models import (
    Category,
    ImportIssue,
    ImportResult,
    ItemRecord,
    PurchaseRow,
    Suggestion,
    SuggestionReason,
)
from .output_formatter import OutputFormatter
from .registry import CategoryRegistry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Category",
    "CategoryRegistry",
    "ConfigManager",
    "CsvImporter",
    "GroceryListBuilder",
    "ImportIssue",
    "ImportResult",
    "ItemRecord",
    "OutputFormatter",
    "PurchaseHistory",
    "PurchaseRow",
    "RecommendationSettings",
    "Suggestion",
    "SuggestionReason",
]
