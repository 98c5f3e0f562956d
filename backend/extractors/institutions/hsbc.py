"""HSBC receipt rules."""

from ..financial_rules import SHORT_MONTHS
from ..regex_extractor import FieldExtractor, amount_rule, date_rule, text_rule

SPEI = FieldExtractor("hsbc", "spei", (
    text_rule(
        "account_id",
        r'Número\s+de\s+cuenta\s*(\d+)',
        r'CLABE\s+emisor\s*(\d+)',
    ),
    amount_rule(
        "amount",
        r'Monto\s*bruto\s*MXN\s*([\d,]+\.?\d{2})',
        r'Monto\s*MXN\s*([\d,]+\.?\d{2})',
        r'Moneda/\s*Monto\s*MXN\s*([\d,]+\.?\d{2})',
    ),
    text_rule(
        "reference",
        r'Referencia\s+de\s+cliente\s*(\d+)',
        r'Referencia\s+numérica\s*(\d+)',
    ),
    # "07 Oct 2025"
    date_rule(
        "operation_date",
        r'Fecha\s+de\s+liquidación\s*(\d{1,2}\s+\w{3}\s+\d{4})',
        r'Fecha\s+y\s+hora\s+de\s+liquidación\s*(\d{1,2}\s+\w{3}\s+\d{4})',
        months=SHORT_MONTHS,
    ),
    text_rule(
        "destination_account",
        r'Cuenta\s+beneficiaria\s*(\d+)',
        r'Código\s+del\s+banco\s+receptor\s*(\d+)',
    ),
    # The beneficiary block follows the payee's registered trade name
    text_rule(
        "beneficiary_name",
        r'SEPSA\s+([A-Z\s]+?)\s{2,}Dirección',
        r'SEPSA\s+([A-Z\s]+)',
        collapse_whitespace=True,
    ),
    text_rule(
        "concept",
        r'Concepto\s+de\s+pago\s*([^:\n\r]+?)\s{2,}Referencia\s+numérica',
        r'Concepto\s+de\s+pago\s*([^:\n\r]+)',
        collapse_whitespace=True,
    ),
    text_rule("tracking_key", r'Clave\s+de\s+rastreo\s*([A-Za-z0-9]+)'),
    text_rule(
        "bank_reference",
        r'Referencia\s+bancaria\s*(\d+)',
        r'Referencia\s+relacionada\s*(\d+)',
    ),
))
