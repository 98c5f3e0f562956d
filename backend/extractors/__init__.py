"""
Extractors Module - Receipt text normalization and field extraction.
"""

from .regex_extractor import (
    ExtractionResult,
    FieldExtractor,
    FieldRule,
    normalize,
    first_match,
    matches_any,
)

from .financial_rules import (
    FieldKind,
    parse_amount,
    canonicalize_date,
    format_amount_display,
)

from .outcome import (
    Identified,
    Unidentified,
    Failure,
    Outcome,
)

from .institutions import EXTRACTORS

__all__ = [
    'ExtractionResult',
    'FieldExtractor',
    'FieldRule',
    'normalize',
    'first_match',
    'matches_any',
    'FieldKind',
    'parse_amount',
    'canonicalize_date',
    'format_amount_display',
    'Identified',
    'Unidentified',
    'Failure',
    'Outcome',
    'EXTRACTORS',
]
