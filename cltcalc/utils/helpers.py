"""Shared utility functions for the HTTP layer: date parsing."""

from __future__ import annotations

from datetime import date, datetime

# ── Supported date formats (ISO first, then the Brazilian form) ──────────
_DATE_FORMATS = [
    "%Y-%m-%d",
    "%d/%m/%Y",
    "%d-%m-%Y",
]


def parse_date(value: str) -> date:
    """Parse a date string using the accepted format variants.

    Raises ``ValueError`` if the string cannot be parsed.
    """
    value = value.strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date format: '{value}'. "
        f"Expected YYYY-MM-DD or DD/MM/YYYY."
    )
