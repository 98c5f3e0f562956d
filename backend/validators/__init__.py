"""
Validators Module - Extracted field validation.
"""

from .field_validator import (
    FieldValidator,
    validate_fields,
    ValidationError
)

__all__ = [
    'FieldValidator',
    'validate_fields',
    'ValidationError',
]
