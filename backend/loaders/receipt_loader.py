"""
Receipt Loader Module
Acquires receipt text from images (Tesseract OCR) and PDFs (PyMuPDF text layer,
falling back to rasterized pages + OCR when the layer is too sparse).
"""

import fitz  # PyMuPDF
import logging
import pytesseract
from pathlib import Path
from PIL import Image

from config import config

logger = logging.getLogger(__name__)


class ReceiptLoadError(Exception):
    """Custom exception for receipt loading errors."""
    pass


def _check_path(file_path: str) -> Path:
    path = Path(file_path)
    if not path.exists():
        logger.error(f"Receipt file not found: {file_path}")
        raise ReceiptLoadError(f"Receipt file not found: {file_path}")

    if not path.is_file():
        raise ReceiptLoadError(f"Not a file: {file_path}")

    return path


def ocr_image(image: Image.Image) -> str:
    """
    Run Tesseract on an image with the configured languages and page segmentation.

    Raises:
        ReceiptLoadError: If Tesseract is missing or fails
    """
    if config.TESSERACT_CMD:
        pytesseract.pytesseract.tesseract_cmd = config.TESSERACT_CMD

    try:
        return pytesseract.image_to_string(
            image,
            lang=config.OCR_LANGUAGES,
            config=f"--psm {config.OCR_PSM}"
        )
    except pytesseract.TesseractNotFoundError as e:
        logger.error("Tesseract OCR binary not found")
        raise ReceiptLoadError(
            "Tesseract OCR binary not found. Install tesseract-ocr with the 'spa' and 'eng' language packs"
        ) from e
    except pytesseract.TesseractError as e:
        logger.error(f"Tesseract failed: {e}")
        raise ReceiptLoadError(f"OCR failed: {e}") from e


def load_image(file_path: str) -> str:
    """
    Extract text from a receipt image with OCR.

    Args:
        file_path: Path to the image file

    Returns:
        Recognized text

    Raises:
        ReceiptLoadError: If the image cannot be opened or recognized
    """
    path = _check_path(file_path)

    try:
        with Image.open(path) as image:
            image.load()
            logger.info(f"Running OCR on image: {file_path} ({image.width}x{image.height})")
            text = ocr_image(image)
    except ReceiptLoadError:
        raise
    except OSError as e:
        logger.error(f"Cannot open image {file_path}: {e}")
        raise ReceiptLoadError(f"Invalid or unreadable image file: {file_path}") from e

    logger.info(f"OCR complete: {len(text)} characters from {file_path}")
    return text


def _open_pdf(path: Path) -> fitz.Document:
    try:
        doc = fitz.open(path)
    except fitz.FileDataError as e:
        logger.error(f"Invalid or corrupted PDF file: {path}", exc_info=True)
        raise ReceiptLoadError(f"Invalid or corrupted PDF file: {path}") from e
    except Exception as e:
        logger.error(f"Unexpected error opening PDF {path}: {e}", exc_info=True)
        raise ReceiptLoadError(f"Failed to open PDF {path}: {str(e)}") from e

    if doc.page_count == 0:
        doc.close()
        raise ReceiptLoadError(f"PDF has no pages: {path}")

    return doc


def load_pdf_text_layer(file_path: str) -> str:
    """
    Extract the embedded text layer from every page of a PDF.

    Returns:
        Page texts joined by newlines (may be empty for scanned PDFs)
    """
    path = _check_path(file_path)
    doc = _open_pdf(path)

    try:
        chunks = []
        for page_num in range(doc.page_count):
            text = doc[page_num].get_text()
            if text.strip():
                chunks.append(text)
            else:
                logger.debug(f"Page {page_num + 1}: no text layer")
        return "\n".join(chunks)
    finally:
        doc.close()


def ocr_pdf_pages(file_path: str) -> str:
    """
    Rasterize every PDF page at the configured DPI and OCR it.

    Returns:
        Recognized page texts joined by newlines
    """
    path = _check_path(file_path)
    doc = _open_pdf(path)

    try:
        chunks = []
        for page_num in range(doc.page_count):
            pix = doc[page_num].get_pixmap(dpi=config.PDF_RENDER_DPI, alpha=False)
            image = Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
            chunks.append(ocr_image(image))
            logger.debug(f"Page {page_num + 1}: OCR'd at {config.PDF_RENDER_DPI} dpi")
        return "\n".join(chunks)
    finally:
        doc.close()


def load_pdf(file_path: str) -> str:
    """
    Extract receipt text from a PDF.

    Uses the text layer when it holds at least MIN_PDF_TEXT_CHARS characters,
    otherwise OCRs the rendered pages.

    Raises:
        ReceiptLoadError: If the PDF cannot be read
    """
    text = load_pdf_text_layer(file_path)
    layer_chars = len(text.strip())

    if layer_chars >= config.MIN_PDF_TEXT_CHARS:
        logger.info(f"Using PDF text layer: {layer_chars} characters from {file_path}")
        return text

    logger.info(
        f"PDF text layer too sparse ({layer_chars} < {config.MIN_PDF_TEXT_CHARS} characters), "
        f"falling back to OCR: {file_path}"
    )
    return ocr_pdf_pages(file_path)


def load_receipt_text(file_path: str) -> str:
    """
    Acquire receipt text from an image or PDF file.

    Args:
        file_path: Path to the receipt file

    Returns:
        Raw receipt text

    Raises:
        ReceiptLoadError: If the file type is unsupported or cannot be read
    """
    name = Path(file_path).name
    if name.lower().endswith(".pdf"):
        return load_pdf(file_path)

    if config.is_image(name):
        return load_image(file_path)

    logger.error(f"Unsupported receipt file type: {file_path}")
    raise ReceiptLoadError(
        f"Unsupported file type: {file_path}. Allowed types: {', '.join(config.ALLOWED_FILE_TYPES)}"
    )
