"""
Classifiers Package - Bank and transaction type identification.
"""

from .bank_classifier import (
    BankClassifier,
    Classification,
    Signature,
    SIGNATURES,
    UnregisteredExtractorError,
    classify,
    default_classifier,
)

__all__ = [
    'BankClassifier',
    'Classification',
    'Signature',
    'SIGNATURES',
    'UnregisteredExtractorError',
    'classify',
    'default_classifier',
]
