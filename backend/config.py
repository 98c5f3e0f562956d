"""
Settings for Bank Receipt Reader.
Every value can be overridden through an environment variable of the same name.
"""

import os
from pathlib import Path
from typing import Optional


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


class Config:
    """Receipt reader settings."""

    APP_NAME = "Bank Receipt Reader"
    VERSION = "1.0.0"

    # Uploads
    MAX_FILE_SIZE_MB: int = _env_int("MAX_FILE_SIZE_MB", 10)
    MAX_FILE_SIZE_BYTES: int = MAX_FILE_SIZE_MB * 1024 * 1024
    IMAGE_FILE_TYPES: list[str] = [".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp", ".webp"]
    ALLOWED_FILE_TYPES: list[str] = [".pdf"] + IMAGE_FILE_TYPES

    # Reports and logs
    OUTPUT_DIR: Path = Path(os.getenv("OUTPUT_DIR", "./output"))
    LOG_DIR: Path = Path(os.getenv("LOG_DIR", "./logs"))

    # Tesseract / PDF text acquisition
    OCR_LANGUAGES: str = os.getenv("OCR_LANGUAGES", "spa+eng")
    OCR_PSM: int = _env_int("OCR_PSM", 11)  # sparse text
    TESSERACT_CMD: Optional[str] = os.getenv("TESSERACT_CMD")
    MIN_PDF_TEXT_CHARS: int = _env_int("MIN_PDF_TEXT_CHARS", 100)
    PDF_RENDER_DPI: int = _env_int("PDF_RENDER_DPI", 300)

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = _env_int("API_PORT", 8000)

    @classmethod
    def ensure_directories(cls):
        for directory in (cls.OUTPUT_DIR, cls.LOG_DIR):
            directory.mkdir(parents=True, exist_ok=True)

    @classmethod
    def get_output_path(cls, filename: str) -> Path:
        """Path for a generated report inside OUTPUT_DIR."""
        cls.ensure_directories()
        return cls.OUTPUT_DIR / filename

    @classmethod
    def get_log_path(cls, filename: str) -> Path:
        """Path for a log file inside LOG_DIR."""
        cls.ensure_directories()
        return cls.LOG_DIR / filename

    @classmethod
    def is_image(cls, filename: str) -> bool:
        return Path(filename).suffix.lower() in cls.IMAGE_FILE_TYPES

    @classmethod
    def validate_file(cls, filename: str, file_size: int) -> tuple[bool, Optional[str]]:
        """
        Check an uploaded receipt's name and size.

        Returns:
            (True, None) when acceptable, otherwise (False, reason)
        """
        suffix = Path(filename).suffix.lower()
        if suffix not in cls.ALLOWED_FILE_TYPES:
            allowed = ', '.join(cls.ALLOWED_FILE_TYPES)
            return False, f"Invalid file type '{suffix or filename}'. Allowed types: {allowed}"

        if file_size == 0:
            return False, "File is empty"

        if file_size > cls.MAX_FILE_SIZE_BYTES:
            return False, (
                f"File too large ({file_size / (1024 * 1024):.2f} MB). "
                f"Limit is {cls.MAX_FILE_SIZE_MB} MB"
            )

        return True, None

    @classmethod
    def to_dict(cls) -> dict:
        """Public settings, as reported by the API."""
        return {
            "app_name": cls.APP_NAME,
            "version": cls.VERSION,
            "max_file_size_mb": cls.MAX_FILE_SIZE_MB,
            "allowed_file_types": list(cls.ALLOWED_FILE_TYPES),
            "ocr": {
                "languages": cls.OCR_LANGUAGES,
                "psm": cls.OCR_PSM,
                "min_pdf_text_chars": cls.MIN_PDF_TEXT_CHARS,
                "pdf_render_dpi": cls.PDF_RENDER_DPI,
            },
            "log_level": cls.LOG_LEVEL,
        }


config = Config()
