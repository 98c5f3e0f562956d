"""
Santander receipt rules.

Santander prints label/value pairs in two columns, so most text fields
stop at the label of the neighbouring column.
"""

from ..regex_extractor import FieldExtractor, amount_rule, date_rule, text_rule

SPEI = FieldExtractor("santander", "spei", (
    text_rule(
        "account_id",
        r'Cuenta Cargo:\s*([^:\n\r]+?)\s{2,}Cuenta Abono:',
        r'Cuenta Cargo:\s*(\d+)',
    ),
    amount_rule(
        "amount",
        r'Importe:\s*\$\s*([\d,]+\.?\d{2})',
        r'Importe:\s*\$?\s*([\d,]+\.?\d{2})\s*MXN',
    ),
    text_rule(
        "reference",
        r'Referencia:\s*([^:\n\r]+?)\s{2,}Referencias del Movimiento:',
        r'Referencia:\s*([^:\n\r]+)',
    ),
    date_rule(
        "operation_date",
        r'Fecha aplicación:\s*([^:\n\r]+?)\s{2,}RFC Beneficiario:',
        r'Fecha aplicación:\s*(\d{2}/\d{2}/\d{4})',
    ),
    text_rule(
        "destination_account",
        r'Cuenta Abono:\s*([^:\n\r]+?)\s{2,}Importe:',
        r'Cuenta Abono:\s*(\d+)',
    ),
    text_rule(
        "beneficiary_name",
        r'Cuenta Abono:\s*\d+\s*-\s*([^:\n\r]+?)\s{2,}Importe:',
        r'Cuenta Abono:[^-]+-\s*([^\n\r]+)',
    ),
    text_rule(
        "concept",
        r'Concepto:\s*([^:\n\r]+?)\s{2,}Fecha aplicación:',
        r'Concepto:\s*([^:\n\r]+)',
    ),
    text_rule(
        "status",
        r'Estado:\s*([^:\n\r]+?)\s{2,}Divisa:',
        r'Estado:\s*([^:\n\r]+)',
    ),
    text_rule(
        "operation_type",
        r'Tipo de Operación:\s*([^:\n\r]+?)\s{2,}Contrato:',
        r'Tipo de Operación:\s*([^:\n\r]+)',
    ),
))

THIRD_PARTY = FieldExtractor("santander", "third_party", (
    text_rule(
        "account_id",
        r'Cuenta de Cargo:\s*([^:\n\r]+?)\s{2,}Fecha y Hora Operación:',
        r'Cuenta de Cargo:\s*([^:\n\r]+)',
    ),
    amount_rule(
        "amount",
        r'Importe:\s*-?\$?([\d,]+\.?\d{2})',
        r'Importe:\s*-?([\d,]+\.?\d{2})\s*MXP',
    ),
    text_rule(
        "reference",
        r'Referencia:\s*([^:\n\r]+?)\s{2,}Referencia numérica del Emisor:',
        r'Referencia:\s*([^:\n\r]+)',
    ),
    # "2025-10-07 13:45:02"
    date_rule(
        "operation_date",
        r'Fecha y Hora Operación:\s*([^\n\r]+?)\s{2,}Fecha y Hora contable:',
        r'Fecha y Hora Operación:\s*(\d{4}-\d{2}-\d{2})',
    ),
    text_rule(
        "concept",
        r'Concepto:\s*([^:\n\r]+?)\s{2,}Banco Participante:',
        r'Concepto:\s*([^:\n\r]+)',
    ),
    text_rule(
        "operation_type",
        r'Tipo de Operación:\s*([^:\n\r]+?)\s{2,}Cuenta de Cargo:',
        r'Tipo de Operación:\s*([^:\n\r]+)',
    ),
))
