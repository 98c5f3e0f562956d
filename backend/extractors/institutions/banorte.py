"""Banorte receipt rules."""

from ..financial_rules import DOTTED_MONTHS
from ..regex_extractor import FieldExtractor, amount_rule, date_rule, fixed_rule, text_rule

THIRD_PARTY = FieldExtractor("banorte", "third_party", (
    text_rule(
        "account_id",
        r'Cuenta/ CLABE Ordenante\s*(\d+)',
        r'Cuenta Ordenante\s*(\d+)',
    ),
    amount_rule("amount", r'Importe a Transferir\s*\$\s*([\d,]+\.?\d{2})'),
    text_rule("reference", r'Referencia numérica\s*(\d+)'),
    # "07/oct./2025"
    date_rule("operation_date", r'Fecha Aplicación\s*(\d{1,2}/\w+\./\d{4})', months=DOTTED_MONTHS),
    text_rule(
        "destination_account",
        r'Cuenta/ CLABE Beneficiario\s*(\d+)',
        r'Cuenta Beneficiario\s*(\d+)',
    ),
    text_rule("beneficiary_name", r'Nombre del Beneficiario\s*([^\n\r]+)'),
    text_rule("concept", r'Propósito de la Transferencia\s*([^\n\r]+)'),
    text_rule("tracking_key", r'Clave de Rastreo\s*([A-Za-z0-9]+)'),
    fixed_rule("operation_type", "Transferencia a Terceros Banorte"),
))
