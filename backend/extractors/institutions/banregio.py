"""
Banregio receipt rules.

Account lines read "<name> - <number>"; third-party receipts stamp the
operation folio as "<folio> - dd-mm-yyyy".

SPEI receipts can show other dollar amounts (fees, balances) before the
transfer itself, so the amount labelled "Cantidad a Transferir" is tried
before the first bare dollar amount.
"""

from ..financial_rules import LONG_MONTHS
from ..regex_extractor import FieldExtractor, amount_rule, date_rule, fixed_rule, text_rule

ORIGIN_ACCOUNT = r'Cuenta Origen[\s\S]*?-\s*(\*?\d+)'

SPEI = FieldExtractor("banregio", "spei", (
    text_rule("account_id", ORIGIN_ACCOUNT),
    amount_rule(
        "amount",
        r'Cantidad a Transferir[\s\S]*?\$([\d,]+\.?\d{2})',
        r'\$([\d,]+\.?\d{2})',
    ),
    text_rule(
        "reference",
        r'Número de referencia\s*(\d+)',
        r'Transferencia\s*(\d+)',
    ),
    # "10 octubre 2025"
    date_rule(
        "operation_date",
        r'Fecha de operación SPEI\s*(\d{1,2}\s+\w+\s+\d{4})',
        r'Recibo de la transferencia\s*(\d{1,2}\s+\w+\s+\d{4})',
        months=LONG_MONTHS,
    ),
    text_rule("destination_account", r'Cuenta Destino[\s\S]*?-\s*(\d+)'),
    text_rule("beneficiary_name", r'Cuenta Destino[\s\S]*?-\s*([A-Z\s\.]+?)\s+\d+'),
    text_rule(
        "concept",
        r'Concepto de pago\s*([^\n\r]+?)\s{2,}\w+',
        r'Concepto de pago\s*([^\n\r]+)',
    ),
    text_rule("tracking_key", r'Tu clave de rastreo\s*([A-Za-z0-9]+)'),
))

THIRD_PARTY = FieldExtractor("banregio", "third_party", (
    text_rule("account_id", ORIGIN_ACCOUNT),
    amount_rule("amount", r'\$([\d,]+\.?\d{2})'),
    text_rule(
        "reference",
        r'Datos\s+de\s+tu\s+operaci[oó]n[\s\S]*?([A-Za-z0-9][A-Za-z0-9-]{5,})\s*-\s*\d{2}-\d{2}-\d{4}',
        r'([A-Za-z0-9][A-Za-z0-9-]{5,})\s*-\s*\d{2}-\d{2}-\d{4}',
    ),
    date_rule("operation_date", r'[A-Za-z0-9][A-Za-z0-9-]{5,}\s*-\s*(\d{2}-\d{2}-\d{4})'),
    text_rule("destination_account", r'Cuenta Destino[\s\S]*?-\s*(\*?\d+)'),
    text_rule("beneficiary_name", r'Cuenta Destino[\s\S]*?-\s*([A-Z\s\.]+?)\s+\*'),
    text_rule(
        "concept",
        r'Descripci[oó]n\s*([^\n\r]+?)\s{2,}',
        r'Descripci[oó]n\s*([^\n\r]+)',
    ),
    fixed_rule("operation_type", "third_party"),
))
