import pytest
import pytesseract
from PIL import Image

from config import Config
from loaders import receipt_loader
from loaders.receipt_loader import (
    ReceiptLoadError,
    load_image,
    load_pdf,
    load_receipt_text,
    ocr_image,
)
import samples


@pytest.fixture
def fake_tesseract(monkeypatch):
    calls = []

    def image_to_string(image, lang=None, config=None):
        calls.append({"size": image.size, "lang": lang, "config": config})
        return samples.BBVA_THIRD_PARTY

    monkeypatch.setattr(pytesseract, "image_to_string", image_to_string)
    return calls


def test_ocr_image_uses_configured_languages_and_segmentation(fake_tesseract):
    text = ocr_image(Image.new("RGB", (40, 20), "white"))

    assert text == samples.BBVA_THIRD_PARTY
    assert fake_tesseract == [{"size": (40, 20), "lang": "spa+eng", "config": "--psm 11"}]


def test_ocr_image_missing_tesseract(monkeypatch):
    def image_to_string(*args, **kwargs):
        raise pytesseract.TesseractNotFoundError()

    monkeypatch.setattr(pytesseract, "image_to_string", image_to_string)
    with pytest.raises(ReceiptLoadError, match="Tesseract"):
        ocr_image(Image.new("RGB", (10, 10)))


def test_load_image(tmp_path, fake_tesseract):
    path = tmp_path / "receipt.png"
    Image.new("RGB", (60, 30), "white").save(path)

    assert load_receipt_text(str(path)) == samples.BBVA_THIRD_PARTY
    assert fake_tesseract[0]["size"] == (60, 30)


def test_load_image_rejects_non_images(tmp_path, fake_tesseract):
    path = tmp_path / "receipt.jpg"
    path.write_bytes(b"definitely not a jpeg")

    with pytest.raises(ReceiptLoadError):
        load_image(str(path))
    assert fake_tesseract == []


def test_load_pdf_uses_text_layer(make_pdf, monkeypatch):
    monkeypatch.setattr(receipt_loader, "ocr_image", lambda image: pytest.fail("OCR should not run"))
    pdf = make_pdf("afirme.pdf", samples.AFIRME_SPEI)

    text = load_pdf(str(pdf))
    assert "Importe de traspaso $1,200.00 MXP" in text
    assert "Banca Afirme" in text


def test_load_pdf_falls_back_to_ocr_for_sparse_layer(make_pdf, monkeypatch):
    pages = []

    def fake_ocr(image):
        pages.append(image.size)
        return f"page {len(pages)}"

    monkeypatch.setattr(receipt_loader, "ocr_image", fake_ocr)
    monkeypatch.setattr(Config, "PDF_RENDER_DPI", 72)
    pdf = make_pdf("scan.pdf", "Banca Afirme", "")

    assert load_pdf(str(pdf)) == "page 1\npage 2"
    assert len(pages) == 2


def test_load_pdf_rejects_corrupt_files(tmp_path):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"this is not a pdf")

    with pytest.raises(ReceiptLoadError):
        load_pdf(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(ReceiptLoadError, match="not found"):
        load_receipt_text(str(tmp_path / "missing.pdf"))


def test_unsupported_file_type(tmp_path):
    path = tmp_path / "receipt.txt"
    path.write_text(samples.BBVA_THIRD_PARTY)

    with pytest.raises(ReceiptLoadError, match="Unsupported file type"):
        load_receipt_text(str(path))
