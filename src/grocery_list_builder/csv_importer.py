"""Import weekly purchase rows from delimited text files."""

import csv
import logging
import re
from collections.abc import Iterable
from pathlib import Path

from .engine import GroceryListBuilder
from .models import ImportIssue, ImportResult, PurchaseRow

logger = logging.getLogger(__name__)

_WEEK_LITERAL = re.compile(r"^[+-]?\d+$")


class RowError(Exception):
    """Raised when an import row fails validation."""

    def __init__(self, line_number: int, message: str):
        self.line_number = line_number
        super().__init__(message)


def detect_delimiter(header: str) -> str:
    """Pick ';' or ',' based on which appears more in the header line."""
    return ";" if header.count(";") > header.count(",") else ","


def parse_row(line_number: int, fields: list[str]) -> PurchaseRow:
    """Validate one split row.

    Args:
        line_number: 1-based line number within the source
        fields: Column values, untrimmed

    Returns:
        PurchaseRow for a valid row

    Raises:
        RowError: If the row has too few columns, no item name, or a bad week
    """
    if len(fields) < 3:
        raise RowError(line_number, "Invalid format (expected 3 columns)")

    item = fields[0].strip()
    week_raw = fields[1].strip()
    category = fields[2].strip()

    if not item:
        raise RowError(line_number, "Empty item name")
    if not _WEEK_LITERAL.match(week_raw):
        raise RowError(line_number, f"Invalid week number format ({week_raw})")

    week = int(week_raw)
    if week < 1:
        raise RowError(line_number, f"Invalid week number ({week_raw})")

    return PurchaseRow(line_number=line_number, item=item, week=week, category=category or None)


class CsvImporter:
    """Feeds ``ItemName,WeekNumber,Category`` rows into a builder."""

    def __init__(
        self,
        builder: GroceryListBuilder,
        delimiter: str = "auto",
        skip_header: bool = True,
    ):
        """Initialize importer.

        Args:
            builder: Engine receiving valid rows
            delimiter: ',' or ';', or 'auto' to detect from the first line
            skip_header: Whether the first line is a header row
        """
        self.builder = builder
        self.delimiter = delimiter
        self.skip_header = skip_header

    def import_file(self, path: Path | str) -> ImportResult:
        """Import a file.

        Raises:
            OSError: If the file cannot be opened or read
        """
        path = Path(path)
        with open(path, encoding="utf-8", newline="") as f:
            return self.import_lines(f, source=str(path))

    def import_lines(self, lines: Iterable[str], source: str = "<input>") -> ImportResult:
        """Import rows from an iterable of text lines.

        Invalid rows are reported in the result and never reach the builder.
        """
        result = ImportResult(source=source)
        delimiter = None if self.delimiter == "auto" else self.delimiter

        for line_number, line in enumerate(lines, start=1):
            line = line.rstrip("\r\n")
            if delimiter is None:
                delimiter = detect_delimiter(line)
            if line_number == 1 and self.skip_header:
                continue
            if not line.strip():
                continue

            fields = next(csv.reader([line], delimiter=delimiter))
            try:
                row = parse_row(line_number, fields)
            except RowError as e:
                issue = ImportIssue(line_number=e.line_number, message=str(e), raw=line)
                logger.warning("%s: %s", source, issue)
                result.issues.append(issue)
                continue

            self.builder.record_purchase(row.item, row.week)
            if row.category:
                self.builder.assign_category(row.item, row.category)
            result.loaded += 1

        logger.debug("Imported %d rows from %s", result.loaded, source)
        return result
