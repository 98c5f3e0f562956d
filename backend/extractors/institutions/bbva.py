"""
BBVA receipt rules.

SPEI receipts carry a "BNET..." tracking key; transfers between BBVA
accounts are titled "Transferencia a terceros". Labels end in a colon and
PDF-layer text often runs several label/value pairs onto one line, so text
fields stop at the next "Label:" separated by two or more spaces.
"""

from ..regex_extractor import FieldExtractor, amount_rule, date_rule, text_rule

NEXT_LABEL = r'\s{2,}[A-Za-záéíóúñ]+\s*:'

SPEI = FieldExtractor("bbva", "spei", (
    text_rule(
        "account_id",
        r'Cuenta de retiro\.?\s*(\d+)',
        r'Cuenta de retiro[\s\S]*?(\d{10,})',
        r'Cuenta Retiro:\s*(\d+)',
    ),
    amount_rule(
        "amount",
        r'Importe\s*\$\s*([\d,]+\.?\d{2})',
        r'Importe:\s*\$?\s*([\d,]+\.?\d{2})',
    ),
    text_rule(
        "reference",
        r'Referencia numérica\s*(\d+)',
        r'REFERENCIA.*NUMÉRICA\s*(\d+)',
        r'Referencia Numérica:\s*(\d+)',
    ),
    date_rule("date", r'Fecha de Operación:\s*(\d{1,2}/\d{1,2}/\d{4})'),
    text_rule(
        "destination_bank",
        r'Banco Destino:\s*([^:\n\r]+?)\s{2,}Cuenta Asociada:',
        r'Banco Destino:\s*([^:\n\r]+?)' + NEXT_LABEL,
        r'Banco Destino:\s*([^:\n\r]+)',
    ),
    text_rule("destination_account", r'Cuenta Asociada:\s*(\d+)'),
    text_rule(
        "beneficiary_name",
        r'Nombre del beneficiario:\s*([^:\n\r(]+?)\s{2,}\(',
        r'Nombre del beneficiario:\s*([^:\n\r(]+?)' + NEXT_LABEL,
        r'Nombre del beneficiario:\s*([^:\n\r(]+)',
    ),
    text_rule("tracking_key", r'Clave de Rastreo:\s*([A-Za-z0-9]+)'),
    text_rule(
        "status",
        r'Estatus:\s*([^:\n\r]+?)\s{2,}Clave de Rastreo:',
        r'Estatus:\s*([^:\n\r]+?)' + NEXT_LABEL,
        r'Estatus:\s*([^:\n\r]+)',
    ),
    text_rule(
        "concept",
        r'Concepto de Pago:\s*([^:\n\r]+?)' + NEXT_LABEL,
        r'Concepto de Pago:\s*([^:\n\r]+)',
    ),
))

THIRD_PARTY = FieldExtractor("bbva", "third_party", (
    text_rule(
        "account_id",
        r'Cuenta de retiro:\s*(\d+)',
        r'Cuenta de retiro\.?\s*(\d+)',
    ),
    amount_rule("amount", r'Importe de la operación:?\s*\$\s*([\d,]+\.?\d{2})'),
    text_rule(
        "reference",
        r'Folio de internet:\s*(\d+)',
        r'Folio de internet\.?\s*(\d+)',
    ),
    date_rule("operation_date", r'Fecha de la operación:?\s*(\d{1,2}/\d{1,2}/\d{4})'),
    text_rule(
        "destination_account",
        r'Cuenta asociada:\s*(\d+)',
        r'Cuenta asociada\.?\s*(\d+)',
    ),
    text_rule(
        "concept",
        r'Concepto de pago:\s*([^:\n\r]+?)\s{2,}Fecha de la operación:',
        r'Concepto de pago:\s*([^:\n\r]+?)' + NEXT_LABEL,
        r'Concepto de pago:\s*([^:\n\r]+)',
    ),
    text_rule(
        "operation_type",
        r'Tipo de operación:\s*([^:\n\r]+?)\s{2,}Cuenta de retiro:',
        r'Tipo de operación:\s*([^:\n\r]+?)' + NEXT_LABEL,
        r'Tipo de operación:\s*([^:\n\r]+)',
    ),
))
