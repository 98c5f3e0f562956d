"""
Afirme receipt rules.

Afirme SPEI receipts ("Banca Afirme", "El banco de hoy") mask accounts as
"(****1234)" and print the amount with an MXP suffix.
"""

from ..regex_extractor import FieldExtractor, amount_rule, date_rule, first_label, fixed_rule, text_rule

PAGO_DE_SERVICIO = "PAGO DE SERVICIO"

SPEI = FieldExtractor("afirme", "spei", (
    text_rule(
        "account_id",
        r'Cuenta origen\s*[A-Za-z0-9\s\-]+?\(\*\*\*\*(\d+)\)',
        r'Cuenta origen[^\(]*\(\*\*\*\*(\d+)\)',
        r'\(\*\*\*\*(\d+)\)',
    ),
    amount_rule(
        "amount",
        r'Importe de traspaso\s*\$\s*([0-9,]+\.\d{2})\s*MXP',
        r'Importe.*\$\s*([0-9,]+\.\d{2})\s*MXP',
        r'\$\s*([0-9,]+\.\d{2})\s*MXP\.',
        r'Importe.*\$([0-9,]+\.\d{2})',
    ),
    text_rule(
        "reference",
        r'Referencia SPE\s*(\d+)',
        r'Referencia.*?(\d{9})',
        r'Referencia numérica\s*(\d+)',
    ),
    text_rule(
        "tracking_key",
        r'Clave de rastreo\s*(\d+)',
        r'Clave.*rastreo\s*(\d{25,30})',
        r'Exitosa\s*(\d+)',
    ),
    date_rule(
        "date",
        r'Fecha:\s*(\d{2}/\d{2}/(?:\d{4}|\d{2}))',
        r'Día:\s*(\d{2}/\d{2}/(?:\d{4}|\d{2}))',
        r'Fecha.*?(\d{2}/\d{2}/(?:\d{4}|\d{2}))',
    ),
    text_rule(
        "beneficiary",
        r'Cuenta destino\s*([A-Za-z0-9\s\-]+?)\s*\(\*\*\*\*\d+\)',
        r'Cuenta destino\s*([^\(]+)',
        collapse_whitespace=True,
        trailing=r'(\s*-\s*\(\*\*\*\*\d+\)\s*-\s*[A-Z]+|\s*-)\s*$',
    ),
    text_rule(
        "concept",
        r'Concepto del pago\s*([A-Za-z0-9\s]+)(?=Comisión|Referencia|$)',
        r'Concepto del pago\s*([^\n]+)',
        labels=(PAGO_DE_SERVICIO,),
        fallback=fixed_rule("concept", PAGO_DE_SERVICIO, PAGO_DE_SERVICIO),
    ),
    first_label("status", "Exitosa", "Fallida", "Rechazada", "Pendiente"),
))
