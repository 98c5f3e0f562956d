"""Scotiabank receipt rules."""

from ..regex_extractor import FieldExtractor, amount_rule, date_rule, text_rule

SPEI = FieldExtractor("scotiabank", "spei", (
    text_rule(
        "account_id",
        r'Cuenta de cargo:?\s*([A-Z0-9-]+)',
    ),
    amount_rule("amount", r'Importe:?\s*([\d,]+\.?\d{2})'),
    text_rule(
        "reference",
        r'Referencia \(Numérica\):\s*(\d+)',
        r'Referencia:\s*(\d+)',
        r'Folio:\s*(\d+)',
    ),
    text_rule("tracking_key", r'Clave de Rastreo:?\s*([A-Za-z0-9]+)'),
    # "2025/10/07"
    date_rule(
        "operation_date",
        r'Fecha de Operación:\s*(\d{4}/\d{2}/\d{2})',
        r'Fecha de aplicación:\s*(\d{4}/\d{2}/\d{2})',
    ),
    text_rule("destination_account", r'Cuenta de Abono:?\s*(\d+)'),
    text_rule(
        "beneficiary_name",
        r'Nombre Beneficiario/Razón Social:\s*([^\n\r]+)',
        r'Nombre Beneficiario:\s*([^\n\r]+)',
    ),
    text_rule(
        "concept",
        r'Concepto:\s*([^\n\r]+)',
        r'Concepto\s*([^\n\r]+)',
    ),
))
