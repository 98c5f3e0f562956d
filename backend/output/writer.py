"""
Output Writer Module
Renders receipt outcomes as JSON or labelled text lines, and generates PDF
summary reports for batches of receipts.
"""

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable, Union
from reportlab.lib.pagesizes import letter, landscape
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib.enums import TA_CENTER
from extractors.financial_rules import format_amount_display
from extractors.outcome import Identified, Failure, Outcome

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "account_id": "Account",
    "amount": "Amount",
    "reference": "Reference",
    "transaction_id": "Transaction ID",
    "date": "Date",
    "clabe": "CLABE",
}


def field_label(name: str) -> str:
    """Human label for a field name."""
    return FIELD_LABELS.get(name, name.replace("_", " ").upper())


def json_amount(value: Decimal) -> str:
    """JSON form of an amount: a string with exactly two decimals, never a float."""
    return f"{value:.2f}"


def _json_default(value: Any):
    if isinstance(value, Decimal):
        return json_amount(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def format_json(outcomes: Union[Outcome, list]) -> str:
    """
    Render one outcome, or a list of outcome records, as pretty JSON.

    Args:
        outcomes: An Outcome, or a list of Outcomes / already-built dicts
    """
    if isinstance(outcomes, list):
        payload = [o if isinstance(o, dict) else o.to_dict() for o in outcomes]
    else:
        payload = outcomes.to_dict()
    return json.dumps(payload, indent=2, ensure_ascii=False, default=_json_default)


def format_text(outcome: Outcome) -> str:
    """
    Render an outcome as human-labelled text lines.
    """
    if isinstance(outcome, Identified):
        result = outcome.result
        lines = [
            "Receipt processed successfully:",
            f"Bank: {result.institution}",
            f"Type: {result.transaction_type}",
        ]
        for name, value in result.fields.items():
            if isinstance(value, Decimal):
                value = format_amount_display(value)
            lines.append(f"{field_label(name)}: {value}")
        return "\n".join(lines)

    if isinstance(outcome, Failure):
        return f"Error: {outcome.message}"

    return "Could not identify bank from receipt"


class PDFReportWriter:
    """Generates a PDF summary of a batch of processed receipts."""

    COLUMNS = ['File', 'Bank', 'Type', 'Amount', 'Date', 'Reference', 'Status']

    def __init__(self, output_path: str, page_size=landscape(letter)):
        """
        Initialize PDF writer.

        Args:
            output_path: Path where PDF will be saved
            page_size: Page size (default: landscape letter)
        """
        self.output_path = output_path
        self.page_size = page_size
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self):
        """Setup custom paragraph styles."""
        self.styles.add(ParagraphStyle(
            name='CustomTitle',
            parent=self.styles['Heading1'],
            fontSize=22,
            textColor=colors.HexColor('#1a1a1a'),
            spaceAfter=24,
            alignment=TA_CENTER,
            fontName='Helvetica-Bold'
        ))

        self.styles.add(ParagraphStyle(
            name='InfoText',
            parent=self.styles['Normal'],
            fontSize=11,
            textColor=colors.HexColor('#444444'),
            spaceAfter=6
        ))

    def generate_report(self, results: Iterable[tuple[str, Outcome]]):
        """
        Generate the batch summary report.

        Args:
            results: (file name, outcome) pairs

        Raises:
            ValueError: If results is None
            Exception: If the PDF cannot be written
        """
        if results is None:
            raise ValueError("results cannot be None")

        results = list(results)
        logger.info(f"Generating receipt report: {self.output_path} ({len(results)} receipts)")

        try:
            output_path = Path(self.output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)

            doc = SimpleDocTemplate(
                str(output_path),
                pagesize=self.page_size,
                rightMargin=0.5*inch,
                leftMargin=0.5*inch,
                topMargin=0.75*inch,
                bottomMargin=0.75*inch
            )

            story = self._create_header(results)
            story.append(self._create_receipt_table(results))
            doc.build(story)
            logger.info(f"PDF report generated successfully: {self.output_path}")

        except PermissionError as e:
            logger.error(f"Permission denied writing to {self.output_path}: {e}")
            raise Exception(f"Cannot write to {self.output_path}. File may be open or directory is read-only.") from e

        except OSError as e:
            logger.error(f"OS error writing PDF: {e}", exc_info=True)
            raise Exception(f"Failed to write PDF file: {e}") from e

    def _create_header(self, results: list[tuple[str, Outcome]]) -> list:
        """Create report header section."""
        identified = sum(1 for _, outcome in results if isinstance(outcome, Identified))
        failed = sum(1 for _, outcome in results if isinstance(outcome, Failure))

        elements = [
            Paragraph("Bank Receipt Report", self.styles['CustomTitle']),
            Spacer(1, 0.1 * inch),
        ]

        info_lines = [
            f"<b>Generated:</b> {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            f"<b>Receipts:</b> {len(results)}",
            f"<b>Identified:</b> {identified}",
            f"<b>Unidentified:</b> {len(results) - identified - failed}",
            f"<b>Failed:</b> {failed}",
        ]
        for line in info_lines:
            elements.append(Paragraph(line, self.styles['InfoText']))

        elements.append(Spacer(1, 0.25 * inch))
        return elements

    def _row(self, filename: str, outcome: Outcome) -> list[str]:
        """One table row for a receipt."""
        name = self._truncate(filename, 30)

        if isinstance(outcome, Identified):
            result = outcome.result
            fields = result.fields
            amount = fields.get("amount")
            date = fields.get("date") or fields.get("operation_date") or ''
            reference = fields.get("reference") or fields.get("tracking_key") or ''
            return [
                name,
                result.institution,
                result.transaction_type,
                format_amount_display(amount) if amount is not None else '',
                date,
                self._truncate(reference, 30),
                fields.get("status", 'identified'),
            ]

        if isinstance(outcome, Failure):
            return [name, '', '', '', '', '', self._truncate(f"error: {outcome.message}", 40)]

        return [name, '', '', '', '', '', 'unidentified']

    def _create_receipt_table(self, results: list[tuple[str, Outcome]]) -> Table:
        """Create table of receipts."""
        data = [self.COLUMNS]
        if not results:
            data.append(['No receipts processed', '', '', '', '', '', ''])
        for filename, outcome in results:
            data.append(self._row(filename, outcome))

        identified_total = sum(
            (o.result.fields["amount"] for _, o in results
             if isinstance(o, Identified) and "amount" in o.result.fields),
            Decimal("0.00")
        )
        data.append(['', '', 'TOTAL', format_amount_display(identified_total), '', '', ''])

        table = Table(
            data,
            colWidths=[2.2 * inch, 1.0 * inch, 1.0 * inch, 1.2 * inch, 1.0 * inch, 2.0 * inch, 1.6 * inch]
        )
        table.setStyle(TableStyle([
            # Header row
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#ef8145')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.HexColor('#ffffff')),
            ('ALIGN', (0, 0), (-1, 0), 'CENTER'),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, 0), 11),
            ('TOPPADDING', (0, 0), (-1, 0), 8),
            ('BOTTOMPADDING', (0, 0), (-1, 0), 8),

            # Data rows
            ('BACKGROUND', (0, 1), (-1, -2), colors.HexColor('#ffffff')),
            ('TEXTCOLOR', (0, 1), (-1, -2), colors.HexColor('#000000')),
            ('ALIGN', (3, 1), (3, -1), 'RIGHT'),
            ('FONTNAME', (0, 1), (-1, -2), 'Helvetica'),
            ('FONTSIZE', (0, 1), (-1, -2), 9),

            # Total row
            ('BACKGROUND', (0, -1), (-1, -1), colors.HexColor('#ef8145')),
            ('FONTNAME', (0, -1), (-1, -1), 'Helvetica-Bold'),
            ('LINEABOVE', (0, -1), (-1, -1), 2, colors.black),

            ('GRID', (0, 0), (-1, -1), 1, colors.HexColor('#808183')),

            # Alternating row colors
            *[('BACKGROUND', (0, i), (-1, i), colors.HexColor('#e8e0dc'))
              for i in range(2, len(data) - 1, 2)]
        ]))
        return table

    @staticmethod
    def _truncate(text: str, max_length: int) -> str:
        """Truncate text with an ellipsis if too long."""
        if len(text) <= max_length:
            return text
        return text[:max_length - 3] + "..."


def generate_pdf_report(output_path: str, results: Iterable[tuple[str, Outcome]]):
    """
    Convenience function to generate a batch receipt report.

    Args:
        output_path: Path where PDF will be saved
        results: (file name, outcome) pairs
    """
    writer = PDFReportWriter(output_path)
    writer.generate_report(results)
