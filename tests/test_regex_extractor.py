from decimal import Decimal

import pytest

from extractors.financial_rules import FieldKind
from extractors.regex_extractor import (
    FieldExtractor,
    FieldRule,
    first_label,
    first_match,
    fixed_rule,
    matches_any,
    normalize,
    text_rule,
    amount_rule,
    date_rule,
)


def test_normalize_trims_lines_and_drops_blank_ones():
    assert normalize("  Banca Afirme \r\n\r\n  Importe  $5.00 \rFecha\n   \n") == "Banca Afirme\nImporte  $5.00\nFecha"


def test_normalize_is_idempotent():
    raw = "\r\n  a  \r\r b\n\n\tc\t\n"
    once = normalize(raw)
    assert normalize(once) == once


def test_normalize_empty_text():
    assert normalize("") == ""
    assert normalize(" \r\n \n") == ""


def test_first_match_returns_first_pattern_that_captures():
    text = "Referencia: 111\nFolio: 222"
    assert first_match(text, [r"Folio:\s*(\d+)", r"Referencia:\s*(\d+)"]) == "222"
    assert first_match(text, [r"Referencia:\s*(\d+)", r"Folio:\s*(\d+)"]) == "111"


def test_first_match_is_case_insensitive_and_unanchored():
    assert first_match("xx FOLIO DE INTERNET: 42", [r"folio de internet:\s*(\d+)"]) == "42"


def test_first_match_skips_blank_captures():
    text = "Concepto:   \nReferencia: 77"
    assert first_match(text, [r"Concepto:([ \t]*)", r"Referencia:\s*(\d+)"]) == "77"


def test_first_match_keeps_only_first_line_of_capture():
    text = "Concepto: RENTA\nOTRA LINEA\nFecha"
    assert first_match(text, [r"Concepto:\s*([\s\S]+)"]) == "RENTA"


def test_first_match_skips_malformed_patterns():
    assert first_match("abc", ["(", r"(b)"]) == "b"


def test_first_match_skips_patterns_without_groups():
    assert first_match("abc", ["abc", r"(c)"]) == "c"


def test_first_match_no_match():
    assert first_match("abc", [r"(\d+)"]) is None
    assert first_match("", [r"(a)"]) is None
    assert first_match("abc", []) is None


def test_matches_any():
    assert matches_any("Banca AFIRME", [r"el banco de hoy", r"banca afirme"])
    assert not matches_any("Banorte", [r"banca afirme"])
    assert not matches_any("anything", [])
    assert matches_any("abc", ["(", "abc"])


def test_fixed_rule_without_triggers_always_fires():
    rule = fixed_rule("operation_type", "third_party")
    assert rule.resolve("") == "third_party"


def test_fixed_rule_with_triggers():
    rule = fixed_rule("concept", "PAGO DE SERVICIO", "PAGO DE SERVICIO")
    assert rule.resolve("pago de servicio luz") == "PAGO DE SERVICIO"
    assert rule.resolve("renta") is None


def test_first_label_uses_declaration_order():
    rule = first_label("status", "Exitosa", "Fallida", "Rechazada")
    assert rule.resolve("Fallida\nExitosa") == "Exitosa"
    assert rule.resolve("Operación Rechazada") == "Rechazada"
    assert rule.resolve("sin estado") is None


def test_first_label_needs_labels():
    with pytest.raises(ValueError):
        first_label("status")


def test_text_rule_reduces_capture_to_known_label():
    rule = text_rule("concept", r"Concepto\s*([^\n]+)", labels=("PAGO DE SERVICIO",))
    assert rule.resolve("Concepto pago de servicio agua") == "PAGO DE SERVICIO"
    assert rule.resolve("Concepto RENTA") == "RENTA"


def test_text_rule_fallback():
    rule = text_rule(
        "concept",
        r"Concepto\s*([^\n]+)",
        fallback=fixed_rule("concept", "SIN CONCEPTO"),
    )
    assert rule.resolve("Importe 5.00") == "SIN CONCEPTO"


def test_text_rule_trailing_and_whitespace():
    rule = text_rule(
        "beneficiary",
        r"Destino\s*([^\n]+)",
        collapse_whitespace=True,
        trailing=r"\s*-\s*$",
    )
    assert rule.resolve("Destino  ACME    SA  -") == "ACME SA"


def test_amount_rule():
    rule = amount_rule("amount", r"Importe\s*\$\s*([\d,]+\.\d{2})")
    assert rule.resolve("Importe $12,345.60") == Decimal("12345.60")


def test_date_rule_defaults_to_short_month_names():
    rule = FieldRule(name="date", kind=FieldKind.DATE, patterns=(r"Fecha:\s*(\S+)",))
    assert rule.months is None
    assert rule.resolve("Fecha: 10-oct-2025") == "10/10/2025"
    assert date_rule("date", r"Fecha:\s*(\S+)").resolve("Fecha: 02-ene-2025") == "02/01/2025"


def test_extractor_rejects_duplicate_fields():
    with pytest.raises(ValueError):
        FieldExtractor("acme", "spei", (
            text_rule("reference", r"Ref\s*(\d+)"),
            text_rule("reference", r"Folio\s*(\d+)"),
        ))


def test_extractor_omits_unresolved_fields():
    extractor = FieldExtractor("acme", "spei", (
        text_rule("reference", r"Ref\s*(\d+)"),
        text_rule("tracking_key", r"Rastreo\s*(\w+)"),
    ))
    assert extractor.extract("Ref 12") == {"reference": "12"}
    assert extractor.key == "acme_spei"


class ExplodingRule(FieldRule):
    def resolve(self, text):
        raise RuntimeError("boom")


def test_extractor_keeps_going_when_a_rule_fails():
    extractor = FieldExtractor("acme", "spei", (
        ExplodingRule(name="broken", kind=FieldKind.TEXT),
        text_rule("reference", r"Ref\s*(\d+)"),
    ))
    assert extractor.extract("Ref 12") == {"reference": "12"}


def test_extractor_rules_are_read_only():
    extractor = FieldExtractor("acme", "spei", (text_rule("reference", r"Ref\s*(\d+)"),))
    with pytest.raises(TypeError):
        extractor.rules["other"] = text_rule("other", r"(x)")
