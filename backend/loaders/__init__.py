"""
Loaders Module - Receipt text acquisition (OCR and PDF text layer).
"""

from .receipt_loader import (
    load_receipt_text,
    load_image,
    load_pdf,
    ReceiptLoadError
)

__all__ = [
    'load_receipt_text',
    'load_image',
    'load_pdf',
    'ReceiptLoadError',
]
