"""
Field Validator Module
Re-checks extracted receipt fields against their format invariants before
they leave the extraction pipeline.
"""

import logging
import re
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d/%m/%Y"
DATE_SHAPE = re.compile(r'^\d{2}/\d{2}/\d{4}$')


class ValidationError(Exception):
    """Custom exception for validation errors."""
    pass


class FieldValidator:
    """Validates resolved receipt fields."""

    def __init__(self, strict_mode: bool = False):
        """
        Initialize validator.

        Args:
            strict_mode: If True, raise ValidationError on the first invalid field.
                        If False, log a warning and drop the field.
        """
        self.strict_mode = strict_mode

        self.validation_stats = {
            "total_validated": 0,
            "valid": 0,
            "invalid": 0,
            "invalid_amount": 0,
            "invalid_date": 0,
            "invalid_text": 0,
        }

    def validate(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        """
        Validate a field map.

        Args:
            fields: Mapping of field name to resolved value

        Returns:
            New mapping holding only the valid fields

        Raises:
            ValidationError: If strict_mode is True and a field is invalid
        """
        valid = {}

        for name, value in fields.items():
            self.validation_stats["total_validated"] += 1
            problem = self._check(name, value)

            if problem is None:
                self.validation_stats["valid"] += 1
                valid[name] = value
                continue

            stat, msg = problem
            self.validation_stats[stat] += 1
            self.validation_stats["invalid"] += 1
            if self.strict_mode:
                raise ValidationError(msg)
            logger.warning(f"Dropping field: {msg}")

        return valid

    def _check(self, name: str, value: Any):
        """Return (stat_key, message) for an invalid field, None when valid."""
        if name == "amount" or isinstance(value, Decimal):
            if not self._validate_amount(value):
                return "invalid_amount", f"Invalid amount in '{name}': {value!r}"
            return None

        if name == "date" or name.endswith("_date"):
            if not self._validate_date(value):
                return "invalid_date", f"Invalid date in '{name}': {value!r}"
            return None

        if not isinstance(value, str) or not value.strip():
            return "invalid_text", f"Empty or non-text value in '{name}': {value!r}"

        return None

    @staticmethod
    def _validate_amount(amount: Any) -> bool:
        """Amounts must be finite Decimals with exactly two fractional digits."""
        if not isinstance(amount, Decimal):
            return False

        if not amount.is_finite():
            return False

        return amount.as_tuple().exponent == -2

    @staticmethod
    def _validate_date(date_str: Any) -> bool:
        """Dates must be real calendar dates in DD/MM/YYYY form."""
        if not isinstance(date_str, str) or not DATE_SHAPE.match(date_str):
            return False

        try:
            datetime.strptime(date_str, DATE_FORMAT)
        except ValueError:
            return False

        return True

    def get_stats(self) -> dict:
        """Get validation statistics."""
        return self.validation_stats.copy()


def validate_fields(fields: Mapping[str, Any], strict_mode: bool = False) -> dict[str, Any]:
    """
    Convenience function to validate a field map.

    Args:
        fields: Mapping of field name to value
        strict_mode: If True, raise exceptions on invalid data

    Returns:
        Mapping of valid fields
    """
    validator = FieldValidator(strict_mode=strict_mode)
    return validator.validate(fields)
