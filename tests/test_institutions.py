from decimal import Decimal

import pytest

from extractors.institutions import EXTRACTORS
import samples


def extract(key, text):
    return EXTRACTORS[key].extract(text)


def test_registry_holds_eleven_extractors():
    assert len(EXTRACTORS) == 11
    assert "banorte_spei" not in EXTRACTORS
    for key, extractor in EXTRACTORS.items():
        assert extractor.key == key


def test_afirme_spei():
    fields = extract("afirme_spei", samples.AFIRME_SPEI)
    assert fields == {
        "account_id": "1234",
        "amount": Decimal("1200.00"),
        "reference": "123456789",
        "tracking_key": "202510101234567890123456",
        "date": "10/10/2025",
        "beneficiary": "PROVEEDORA DEL NORTE SA",
        "concept": "PAGO DE SERVICIO",
        "status": "Exitosa",
    }


def test_afirme_concept_falls_back_to_service_payment_phrase():
    text = "Banca Afirme\nServicio: PAGO DE SERVICIO CFE\nImporte de traspaso $10.00 MXP"
    assert extract("afirme_spei", text)["concept"] == "PAGO DE SERVICIO"


def test_bbva_spei():
    fields = extract("bbva_spei", samples.BBVA_SPEI)
    assert fields["account_id"] == "0123456789"
    assert fields["amount"] == Decimal("1000.00")
    assert fields["reference"] == "123456"
    assert fields["date"] == "07/10/2025"
    assert fields["tracking_key"] == "BNET01002510070012345678"
    assert fields["status"] == "Enviado"


def test_bbva_spei_multi_column_line_stops_at_next_label():
    text = "Estatus: Liquidado  Clave de Rastreo: BNET01002510070012345678"
    assert extract("bbva_spei", text)["status"] == "Liquidado"


def test_bbva_third_party():
    fields = extract("bbva_third_party", samples.BBVA_THIRD_PARTY)
    assert fields == {
        "account_id": "0123456789",
        "amount": Decimal("500.00"),
        "reference": "987654321",
        "operation_date": "07/10/2025",
        "destination_account": "9876543210",
        "concept": "RENTA OCTUBRE",
        "operation_type": "Transferencia a terceros BBVA",
    }


def test_banbajio_spei():
    fields = extract("banbajio_spei", samples.BANBAJIO_SPEI)
    assert fields["account_id"] == "0123456789"
    assert fields["amount"] == Decimal("2500.50")
    assert fields["reference"] == "4455"
    assert fields["operation_date"] == "09/09/2025"
    assert fields["destination_account"] == "5566778899"
    assert fields["tracking_key"] == "BB123ABC"


def test_banorte_third_party():
    fields = extract("banorte_third_party", samples.BANORTE_THIRD_PARTY)
    assert fields["account_id"] == "072580001234567890"
    assert fields["amount"] == Decimal("10000.00")
    assert fields["reference"] == "1010"
    assert fields["operation_date"] == "07/10/2025"
    assert fields["beneficiary_name"] == "JUAN PEREZ LOPEZ"
    assert fields["tracking_key"] == "8846APR1202510071234"
    assert fields["operation_type"] == "Transferencia a Terceros Banorte"


def test_banregio_spei():
    fields = extract("banregio_spei", samples.BANREGIO_SPEI)
    assert fields["account_id"] == "1234"
    assert fields["amount"] == Decimal("3450.75")
    assert fields["operation_date"] == "10/10/2025"
    assert fields["destination_account"] == "9876543210"
    assert fields["tracking_key"] == "BR2025ABC"


def test_banregio_spei_prefers_transfer_amount_over_other_amounts():
    text = "Comisión $5.00\nCantidad a Transferir\n$3,450.75"
    assert extract("banregio_spei", text)["amount"] == Decimal("3450.75")
    assert extract("banregio_spei", "Total $12.00")["amount"] == Decimal("12.00")


def test_banregio_third_party():
    fields = extract("banregio_third_party", samples.BANREGIO_THIRD_PARTY)
    assert fields["account_id"] == "4321"
    assert fields["amount"] == Decimal("800.00")
    assert fields["reference"] == "AbC123x"
    assert fields["operation_date"] == "15/10/2025"
    assert fields["destination_account"] == "*7788"
    assert fields["concept"] == "PAGO FACTURA 12"
    assert fields["operation_type"] == "third_party"


def test_hsbc_spei():
    fields = extract("hsbc_spei", samples.HSBC_SPEI)
    assert fields["account_id"] == "4060123456"
    assert fields["amount"] == Decimal("1500.00")
    assert fields["reference"] == "778899"
    assert fields["operation_date"] == "07/10/2025"
    assert fields["tracking_key"] == "HSBC2025XYZ"
    assert fields["bank_reference"] == "5544"
    assert "concept" not in fields


def test_santander_spei():
    fields = extract("santander_spei", samples.SANTANDER_SPEI)
    assert fields["account_id"] == "65501234567"
    assert fields["destination_account"] == "012345678901234567"
    assert fields["beneficiary_name"] == "JUAN PEREZ"
    assert fields["amount"] == Decimal("2000.00")
    assert fields["reference"] == "1234567"
    assert fields["operation_date"] == "07/10/2025"
    assert fields["status"] == "Liquidada"


def test_santander_third_party():
    fields = extract("santander_third_party", samples.SANTANDER_THIRD_PARTY)
    assert fields["account_id"] == "65501234567"
    assert fields["amount"] == Decimal("750.25")
    assert fields["reference"] == "998877"
    assert fields["operation_date"] == "07/10/2025"
    assert fields["concept"] == "RENTA"
    assert fields["operation_type"] == "Transferencia Santander"


def test_scotiabank_spei():
    fields = extract("scotiabank_spei", samples.SCOTIABANK_SPEI)
    assert fields == {
        "account_id": "00112233",
        "amount": Decimal("1234.56"),
        "reference": "445566",
        "tracking_key": "SCOT123",
        "operation_date": "07/10/2025",
        "destination_account": "998877",
        "beneficiary_name": "ACME SA DE CV",
        "concept": "PAGO",
    }


@pytest.mark.parametrize("key", sorted(EXTRACTORS))
def test_unrelated_text_yields_only_fixed_fields(key):
    fields = extract(key, "")
    assert all(isinstance(value, str) for value in fields.values())
    assert "amount" not in fields
