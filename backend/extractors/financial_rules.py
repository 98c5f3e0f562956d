"""
Financial Rules Module
Defines field kinds and the post-processing applied to captured receipt values:
amount parsing, date canonicalization with month-name tables, and text cleanup.
"""

import re
import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


class FieldKind(Enum):
    """Field rule kind enumeration."""
    TEXT = "text"
    AMOUNT = "amount"
    DATE = "date"
    FIXED = "fixed"


# Month-name tables. Keys are lower-case; lookups are case-insensitive.
SHORT_MONTHS: Mapping[str, str] = MappingProxyType({
    "ene": "01", "jan": "01",
    "feb": "02",
    "mar": "03",
    "abr": "04", "apr": "04",
    "may": "05",
    "jun": "06",
    "jul": "07",
    "ago": "08", "aug": "08",
    "sep": "09",
    "oct": "10",
    "nov": "11",
    "dic": "12", "dec": "12",
})

DOTTED_MONTHS: Mapping[str, str] = MappingProxyType({
    "ene.": "01", "feb.": "02", "mar.": "03", "abr.": "04",
    "may.": "05", "jun.": "06", "jul.": "07", "ago.": "08",
    "sep.": "09", "oct.": "10", "nov.": "11", "dic.": "12",
})

LONG_MONTHS: Mapping[str, str] = MappingProxyType({
    "enero": "01", "febrero": "02", "marzo": "03", "abril": "04",
    "mayo": "05", "junio": "06", "julio": "07", "agosto": "08",
    "septiembre": "09", "octubre": "10", "noviembre": "11", "diciembre": "12",
})

DEFAULT_MONTH = "01"

TWO_PLACES = Decimal("0.01")

# Date shapes, tried in order. A trailing time (e.g. "14:32:10") is ignored.
ISO_DATE_PATTERN = re.compile(r'^(\d{4})[/-](\d{1,2})[/-](\d{1,2})\b')
NUMERIC_DATE_PATTERN = re.compile(r'^(\d{1,2})[/-](\d{1,2})[/-](\d{4}|\d{2})\b')
NAMED_DATE_PATTERN = re.compile(r'^(\d{1,2})[\s/-]+([^\W\d_]+\.?)[\s/-]+(\d{4})\b')


def parse_amount(raw: str) -> Optional[Decimal]:
    """
    Parse a captured amount string into a two-place Decimal.

    Currency symbols, suffixes such as MXP/MXN and thousands-separator
    commas are discarded; only digits and the decimal point are kept.

    Args:
        raw: Captured amount text (e.g. "$1,200.00 MXP")

    Returns:
        Decimal quantized to two places, or None if the value cannot be parsed
    """
    clean = re.sub(r'[^\d.]', '', raw or '')
    if not clean:
        return None

    try:
        amount = Decimal(clean)
    except InvalidOperation:
        logger.warning(f"Cannot parse amount '{raw}'")
        return None

    if not amount.is_finite():
        logger.warning(f"Non-finite amount '{raw}'")
        return None

    return amount.quantize(TWO_PLACES)


def month_number(name: str, months: Mapping[str, str]) -> str:
    """
    Look up a month name in a month table.

    Unknown names map to "01". The lookup is case-insensitive and ignores
    a trailing period on either the name or the table key.
    """
    key = name.strip().lower()
    if key in months:
        return months[key]
    bare = key.rstrip('.')
    for candidate in (bare, f"{bare}."):
        if candidate in months:
            return months[candidate]

    logger.debug(f"Month '{name}' not in table, defaulting to {DEFAULT_MONTH}")
    return DEFAULT_MONTH


def _expand_year(year: str) -> str:
    return f"20{year}" if len(year) == 2 else year


def _assemble(day: str, month: str, year: str) -> Optional[str]:
    """Assemble DD/MM/YYYY, rejecting impossible calendar dates."""
    candidate = f"{day.zfill(2)}/{month.zfill(2)}/{year}"
    try:
        datetime.strptime(candidate, "%d/%m/%Y")
    except ValueError:
        logger.warning(f"Discarding impossible date '{candidate}'")
        return None
    return candidate


def canonicalize_date(raw: str, months: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Canonicalize a captured date to DD/MM/YYYY.

    Supported shapes:
    - DD/MM/YYYY, D/M/YYYY, DD-MM-YYYY, DD/MM/YY (two-digit years are 20YY)
    - YYYY-MM-DD, YYYY/MM/DD
    - DD-Mon-YYYY, DD/mon./YYYY, DD Mon YYYY, DD monthname YYYY

    Args:
        raw: Captured date text
        months: Month-name table for named months (defaults to SHORT_MONTHS)

    Returns:
        Canonical date string, or None if the text is not a recognizable date
    """
    if not raw:
        return None

    text = raw.strip()
    if months is None:
        months = SHORT_MONTHS

    match = ISO_DATE_PATTERN.match(text)
    if match:
        year, month, day = match.groups()
        return _assemble(day, month, year)

    match = NUMERIC_DATE_PATTERN.match(text)
    if match:
        day, month, year = match.groups()
        return _assemble(day, month, _expand_year(year))

    match = NAMED_DATE_PATTERN.match(text)
    if match:
        day, name, year = match.groups()
        # Unknown month names are not rejected: they fall back to DEFAULT_MONTH.
        return f"{day.zfill(2)}/{month_number(name, months)}/{year}"

    logger.debug(f"Unrecognized date format: '{raw}'")
    return None


def clean_text(
    raw: str,
    collapse_whitespace: bool = False,
    trailing: Optional[str] = None
) -> Optional[str]:
    """
    Clean a captured text value.

    Args:
        raw: Captured text
        collapse_whitespace: Collapse internal whitespace runs to one space
        trailing: Pattern for template artifacts to strip from the end

    Returns:
        Cleaned text, or None if nothing is left
    """
    value = (raw or '').strip()

    if collapse_whitespace:
        value = re.sub(r'\s+', ' ', value)

    if trailing:
        value = re.sub(trailing, '', value, flags=re.IGNORECASE).strip()

    return value or None


def format_amount_display(amount: Decimal) -> str:
    """
    Format amount for display.

    Example: Decimal("1200.00") -> "$1,200.00"
    """
    return f"${amount:,.2f}"
