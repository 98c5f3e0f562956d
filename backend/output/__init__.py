"""
Output Module - Outcome rendering and PDF report generation.
"""

from .writer import (
    PDFReportWriter,
    field_label,
    format_json,
    format_text,
    generate_pdf_report
)

__all__ = [
    'PDFReportWriter',
    'field_label',
    'format_json',
    'format_text',
    'generate_pdf_report',
]
