"""BanBajío receipt rules."""

from ..financial_rules import SHORT_MONTHS
from ..regex_extractor import FieldExtractor, amount_rule, date_rule, text_rule

SPEI = FieldExtractor("banbajio", "spei", (
    text_rule("account_id", r'Cuenta Origen:\s*(\d+)'),
    amount_rule("amount", r'Importe:\s*\$\s*([\d,]+\.?\d{2})'),
    text_rule("reference", r'Referencia:\s*(\d+)'),
    # "09-Sep-2025"
    date_rule("operation_date", r'Fecha de Operación:\s*(\d{2}-\w{3}-\d{4})', months=SHORT_MONTHS),
    text_rule("destination_account", r'Cuenta Destino:\s*(\d+)'),
    text_rule(
        "beneficiary_name",
        r'Nombre del Beneficiario:\s*([A-Z\s]+?)\s{2,}[A-Z]',
        r'Nombre del Beneficiario:\s*([A-Z\s]+)',
    ),
    text_rule(
        "concept",
        r'Concepto de Pago:\s*([A-Z\s]+?)\s{2,}Referencia:',
        r'Concepto de Pago:\s*([A-Z\s]+)',
    ),
    text_rule("tracking_key", r'Clave de Rastreo:\s*([A-Za-z0-9]+)'),
    text_rule(
        "destination_bank",
        r'Banco Destino:\s*([A-Z]+?)\s{2,}Nombre del Beneficiario:',
        r'Banco Destino:\s*([A-Z]+)',
    ),
))
