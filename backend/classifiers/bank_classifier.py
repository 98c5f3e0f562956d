"""
Bank Classifier Module
Identifies the issuing institution and transaction type of a receipt using an
ordered table of trigger-pattern signatures.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from extractors.regex_extractor import FieldExtractor, PatternLike, matches_any, normalize
from extractors.institutions import EXTRACTORS

logger = logging.getLogger(__name__)


class UnregisteredExtractorError(LookupError):
    """A signature fired but no extractor is registered under its key."""
    pass


@dataclass(frozen=True)
class Signature:
    """An institution/transaction-type pair and its ordered trigger patterns."""
    institution: str
    transaction_type: str
    triggers: tuple[PatternLike, ...] = ()

    @property
    def key(self) -> str:
        return f"{self.institution}_{self.transaction_type}"

    @property
    def enabled(self) -> bool:
        """Signatures without triggers can never match."""
        return bool(self.triggers)


@dataclass(frozen=True)
class Classification:
    """Result of a successful classification."""
    institution: str
    transaction_type: str
    extractor: FieldExtractor


# Priority order. Earlier signatures win when several could match the same
# text, so specific triggers must precede generic ones.
SIGNATURES: tuple[Signature, ...] = (
    Signature("afirme", "spei", (
        r'el banco de hoy',
        r'banca afirme',
    )),
    Signature("banbajio", "spei"),
    Signature("banorte", "spei"),
    Signature("banorte", "third_party"),
    Signature("banregio", "spei"),
    Signature("banregio", "third_party"),
    Signature("bbva", "spei", (
        r'BNET[0-9A-Za-z]{20}',
    )),
    Signature("bbva", "third_party", (
        r'transferencia a terceros',
    )),
    Signature("hsbc", "spei"),
    Signature("santander", "spei"),
    Signature("santander", "third_party"),
    Signature("scotiabank", "spei"),
)


class BankClassifier:
    """
    First-match classifier over an ordered signature table.

    Signatures are scanned top to bottom and each signature's triggers in
    order; the first trigger found anywhere in the text decides. There is no
    scoring across candidates.
    """

    def __init__(
        self,
        signatures: Iterable[Signature] = SIGNATURES,
        extractors: Mapping[str, FieldExtractor] = EXTRACTORS
    ):
        self.signatures = tuple(signatures)
        self.extractors = extractors

        disabled = [s.key for s in self.signatures if not s.enabled]
        if disabled:
            logger.debug(f"Signatures without triggers (unreachable): {', '.join(disabled)}")

    def match_signature(self, text: str) -> Optional[Signature]:
        """
        Return the first signature whose trigger fires on the text.

        Args:
            text: Normalized receipt text

        Returns:
            Winning Signature, or None if nothing fires
        """
        for signature in self.signatures:
            if signature.enabled and matches_any(text, signature.triggers):
                return signature
        return None

    def classify(self, text: str) -> Optional[Classification]:
        """
        Identify the institution and transaction type of a receipt.

        Args:
            text: Receipt text (normalized here)

        Returns:
            Classification bound to the institution's extractor, or None when
            the text matches no signature

        Raises:
            UnregisteredExtractorError: If the winning signature has no extractor
        """
        text = normalize(text)
        signature = self.match_signature(text)

        if signature is None:
            logger.info("No signature matched the receipt text")
            return None

        extractor = self.extractors.get(signature.key)
        if extractor is None:
            raise UnregisteredExtractorError(f"No extractor registered for signature '{signature.key}'")

        logger.info(f"Classified receipt as {signature.key}")
        return Classification(
            institution=signature.institution,
            transaction_type=signature.transaction_type,
            extractor=extractor,
        )

    def describe(self) -> list[dict]:
        """Summarize the signature table in priority order."""
        return [
            {
                "key": s.key,
                "institution": s.institution,
                "transaction_type": s.transaction_type,
                "enabled": s.enabled,
                "triggers": len(s.triggers),
                "has_extractor": s.key in self.extractors,
            }
            for s in self.signatures
        ]


# Shared, read-only classifier built from the static tables
default_classifier = BankClassifier()


def classify(text: str) -> Optional[Classification]:
    """Convenience function to classify text with the default tables."""
    return default_classifier.classify(text)
