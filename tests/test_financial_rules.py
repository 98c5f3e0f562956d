from decimal import Decimal

from extractors.financial_rules import (
    DOTTED_MONTHS,
    LONG_MONTHS,
    canonicalize_date,
    clean_text,
    format_amount_display,
    month_number,
    parse_amount,
)


def test_parse_amount_strips_symbols_and_separators():
    amount = parse_amount("$1,200.00 MXP")
    assert amount == Decimal("1200.00")
    assert str(amount) == "1200.00"


def test_parse_amount_quantizes_to_two_places():
    assert str(parse_amount("500")) == "500.00"
    assert str(parse_amount("12.5")) == "12.50"


def test_parse_amount_rejects_garbage():
    assert parse_amount("MXP") is None
    assert parse_amount("") is None
    assert parse_amount("1.2.3") is None


def test_month_number():
    assert month_number("OCT", LONG_MONTHS) == "01"
    assert month_number("Octubre", LONG_MONTHS) == "10"
    assert month_number("oct", DOTTED_MONTHS) == "10"
    assert month_number("xyz", DOTTED_MONTHS) == "01"


def test_canonicalize_named_month():
    assert canonicalize_date("10-oct-2025") == "10/10/2025"
    assert canonicalize_date("09-Sep-2025") == "09/09/2025"
    assert canonicalize_date("07 Oct 2025") == "07/10/2025"


def test_canonicalize_unknown_month_defaults_to_january():
    assert canonicalize_date("10-xyz-2025") == "10/01/2025"


def test_canonicalize_with_month_tables():
    assert canonicalize_date("07/oct./2025", DOTTED_MONTHS) == "07/10/2025"
    assert canonicalize_date("10 octubre 2025", LONG_MONTHS) == "10/10/2025"


def test_canonicalize_numeric_dates():
    assert canonicalize_date("7/3/2025") == "07/03/2025"
    assert canonicalize_date("07/03/25") == "07/03/2025"
    assert canonicalize_date("15-10-2025") == "15/10/2025"


def test_canonicalize_iso_dates_ignore_time():
    assert canonicalize_date("2025-10-07 13:45:02") == "07/10/2025"
    assert canonicalize_date("2025/10/07") == "07/10/2025"


def test_canonicalize_rejects_impossible_and_unknown_dates():
    assert canonicalize_date("31/02/2025") is None
    assert canonicalize_date("mañana") is None
    assert canonicalize_date("") is None


def test_clean_text():
    assert clean_text("  ACME \n SA  ", collapse_whitespace=True) == "ACME SA"
    assert clean_text("ACME SA - (****5678) - BANORTE", trailing=r"\s*-\s*\(\*\*\*\*\d+\)\s*-\s*[A-Z]+$") == "ACME SA"
    assert clean_text("   ") is None


def test_format_amount_display():
    assert format_amount_display(Decimal("1200.00")) == "$1,200.00"
