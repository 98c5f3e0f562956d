"""
Regex Extractor Module
Normalizes receipt text and extracts named fields using ordered regex patterns.
Each institution declares its own FieldExtractor built from FieldRule entries.
"""

import re
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union
from .financial_rules import FieldKind, parse_amount, canonicalize_date, clean_text

logger = logging.getLogger(__name__)

PatternLike = Union[str, re.Pattern]


def normalize(text: str) -> str:
    """
    Normalize receipt text.

    Canonicalizes CR/LF variants to a single line break, trims every line and
    drops lines that are empty after trimming. Idempotent.

    Args:
        text: Raw OCR or PDF-layer text

    Returns:
        Normalized text
    """
    text = text.replace('\r\n', '\n').replace('\r', '\n')
    lines = (line.strip() for line in text.split('\n'))
    return '\n'.join(line for line in lines if line)


def _search(pattern: PatternLike, text: str) -> Optional[re.Match]:
    if isinstance(pattern, re.Pattern):
        return pattern.search(text)
    return re.search(pattern, text, re.IGNORECASE)


def matches_any(text: str, patterns: Iterable[PatternLike]) -> bool:
    """
    Check whether any pattern matches anywhere in the text.
    Malformed patterns are logged and skipped.
    """
    for pattern in patterns:
        try:
            if _search(pattern, text):
                return True
        except re.error as e:
            logger.warning(f"Skipping malformed pattern {pattern!r}: {e}")
    return False


def first_match(text: str, patterns: Iterable[PatternLike]) -> Optional[str]:
    """
    Return the first non-empty capture from an ordered list of patterns.

    Patterns are tried in order, case-insensitively and unanchored. The first
    pattern that matches with a non-empty first group wins; later patterns
    are not tried. Captures spanning several lines are cut to their first line.

    Args:
        text: Text to search
        patterns: Ordered candidate patterns (strings or compiled patterns)

    Returns:
        Trimmed captured value, or None if no pattern fires
    """
    if not text or not patterns:
        return None

    text = text.replace('\r\n', '\n').replace('\r', '\n')

    for pattern in patterns:
        try:
            match = _search(pattern, text)
            if not match:
                continue

            value = match.group(1)
        except (re.error, IndexError) as e:
            logger.warning(f"Skipping pattern {pattern!r}: {e}")
            continue

        if value and value.strip():
            return value.strip().split('\n')[0].strip()

    return None


@dataclass(frozen=True)
class FieldRule:
    """
    A named extraction procedure producing at most one value.

    Pattern rules (TEXT, AMOUNT, DATE) capture a substring with the ordered
    patterns and post-process it by kind. FIXED rules emit fixed_value when
    any trigger in patterns fires, or always when there are no triggers.
    """
    name: str
    kind: FieldKind
    patterns: tuple[PatternLike, ...] = ()
    fixed_value: Optional[str] = None
    collapse_whitespace: bool = False
    trailing: Optional[str] = None
    labels: tuple[str, ...] = ()
    months: Optional[Mapping[str, str]] = None  # None means SHORT_MONTHS
    fallback: Optional["FieldRule"] = None

    def resolve(self, text: str) -> Any:
        """Resolve this rule against normalized text. Returns None when absent."""
        value = self._resolve_own(text)
        if value is None and self.fallback is not None:
            return self.fallback.resolve(text)
        return value

    def _resolve_own(self, text: str) -> Any:
        if self.kind is FieldKind.FIXED:
            if not self.patterns or matches_any(text, self.patterns):
                return self.fixed_value
            return None

        raw = first_match(text, self.patterns)
        if raw is None:
            return None

        if self.kind is FieldKind.AMOUNT:
            return parse_amount(raw)

        if self.kind is FieldKind.DATE:
            return canonicalize_date(raw, self.months)

        value = clean_text(raw, self.collapse_whitespace, self.trailing)
        if value:
            # A capture containing a known label is reduced to that label
            for label in self.labels:
                if label.lower() in value.lower():
                    return label
        return value


def text_rule(
    name: str,
    *patterns: PatternLike,
    collapse_whitespace: bool = False,
    trailing: Optional[str] = None,
    labels: tuple[str, ...] = (),
    fallback: Optional[FieldRule] = None
) -> FieldRule:
    """Build a text field rule."""
    return FieldRule(
        name=name,
        kind=FieldKind.TEXT,
        patterns=patterns,
        collapse_whitespace=collapse_whitespace,
        trailing=trailing,
        labels=labels,
        fallback=fallback,
    )


def amount_rule(name: str, *patterns: PatternLike) -> FieldRule:
    """Build an amount field rule."""
    return FieldRule(name=name, kind=FieldKind.AMOUNT, patterns=patterns)


def date_rule(name: str, *patterns: PatternLike, months: Optional[Mapping[str, str]] = None) -> FieldRule:
    """Build a date field rule using the given month table for named months."""
    return FieldRule(name=name, kind=FieldKind.DATE, patterns=patterns, months=months)


def fixed_rule(
    name: str,
    value: str,
    *triggers: PatternLike,
    fallback: Optional[FieldRule] = None
) -> FieldRule:
    """Build a fixed-value rule. With no triggers the value is always emitted."""
    return FieldRule(name=name, kind=FieldKind.FIXED, patterns=triggers, fixed_value=value, fallback=fallback)


def first_label(name: str, *labels: str) -> FieldRule:
    """
    Build a rule emitting the first label (in declaration order) found in the text.
    """
    rule = None
    for label in reversed(labels):
        rule = fixed_rule(name, label, re.escape(label), fallback=rule)
    if rule is None:
        raise ValueError(f"first_label '{name}' needs at least one label")
    return rule


@dataclass(frozen=True)
class ExtractionResult:
    """Fields extracted from a classified receipt. Only resolved fields are present."""
    institution: str
    transaction_type: str
    fields: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert result to dictionary."""
        return {
            "institution": self.institution,
            "transactionType": self.transaction_type,
            "fields": dict(self.fields),
        }


class FieldExtractor:
    """
    Extracts the declared fields of one institution and transaction type.
    The rule set is an explicit, read-only mapping of field name to FieldRule.
    """

    def __init__(self, institution: str, transaction_type: str, rules: Iterable[FieldRule]):
        self.institution = institution
        self.transaction_type = transaction_type

        declared: dict[str, FieldRule] = {}
        for rule in rules:
            if rule.name in declared:
                raise ValueError(f"Duplicate field rule '{rule.name}' in {institution}_{transaction_type}")
            declared[rule.name] = rule
        self.rules: Mapping[str, FieldRule] = MappingProxyType(declared)

    @property
    def key(self) -> str:
        return f"{self.institution}_{self.transaction_type}"

    def extract(self, text: str) -> dict[str, Any]:
        """
        Run every field rule against the text.

        A rule that fails is logged and its field treated as absent;
        the remaining rules still run.

        Args:
            text: Receipt text (normalized here if it is not already)

        Returns:
            Mapping of field name to value, containing only resolved fields
        """
        text = normalize(text)
        data = {}

        for name, rule in self.rules.items():
            try:
                value = rule.resolve(text)
            except Exception as e:
                logger.error(f"{self.key}: field '{name}' failed: {e}", exc_info=True)
                continue

            if value is not None:
                data[name] = value

        logger.debug(f"{self.key}: resolved {len(data)}/{len(self.rules)} fields")
        return data

    def __repr__(self) -> str:
        return f"FieldExtractor({self.key}, fields={list(self.rules)})"
