"""
Bank Receipt Reader - Main Pipeline
Orchestrates text acquisition, bank classification, field extraction and
validation, and exposes the command line interface.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Iterator, Optional

from config import config
from logging_config import setup_logging
from classifiers.bank_classifier import BankClassifier, default_classifier
from extractors.regex_extractor import ExtractionResult, normalize
from extractors.outcome import Identified, Unidentified, Failure, Outcome
from loaders.receipt_loader import load_receipt_text, ReceiptLoadError
from validators.field_validator import FieldValidator
from output.writer import format_json, format_text, generate_pdf_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNREAD = 1
EXIT_USAGE = 2


class ReceiptReader:
    """Reads bank transfer receipts into structured outcomes."""

    def __init__(
        self,
        classifier: BankClassifier = default_classifier,
        text_loader: Callable[[str], str] = load_receipt_text
    ):
        """
        Args:
            classifier: Signature table and extractor registry to use
            text_loader: Callable turning a file path into receipt text
        """
        self.classifier = classifier
        self.text_loader = text_loader

    def process(self, raw_text) -> Outcome:
        """
        Classify receipt text and extract its fields.

        Args:
            raw_text: Receipt text, as produced by OCR or a PDF text layer

        Returns:
            Identified, Unidentified or Failure
        """
        if not isinstance(raw_text, str):
            logger.error(f"Invalid receipt input of type {type(raw_text).__name__}")
            return Failure(f"Receipt text must be a string, got {type(raw_text).__name__}")

        try:
            text = normalize(raw_text)
            classification = self.classifier.classify(text)

            if classification is None:
                return Unidentified()

            extractor = classification.extractor
            fields = extractor.extract(text)

            # Invalid fields are dropped; their siblings are kept
            fields = FieldValidator().validate(fields)

            logger.info(
                f"Extracted {len(fields)} field(s) for "
                f"{classification.institution}/{classification.transaction_type}"
            )
            return Identified(ExtractionResult(
                institution=classification.institution,
                transaction_type=classification.transaction_type,
                fields=fields,
            ))

        except Exception as e:
            logger.error(f"Receipt processing failed: {e}", exc_info=True)
            return Failure(str(e) or type(e).__name__)

    def read_receipt(self, file_path: str) -> Outcome:
        """
        Acquire the text of a receipt file and process it.

        Args:
            file_path: Path to an image or PDF receipt
        """
        logger.info(f"Reading receipt: {file_path}")
        try:
            text = self.text_loader(file_path)
        except ReceiptLoadError as e:
            logger.error(f"Failed to load receipt {file_path}: {e}")
            return Failure(str(e))
        except Exception as e:
            logger.error(f"Unexpected error loading receipt {file_path}: {e}", exc_info=True)
            return Failure(str(e) or type(e).__name__)

        return self.process(text)


def process_text(raw_text) -> Outcome:
    """Convenience function to process text with the default reader."""
    return ReceiptReader().process(raw_text)


def iter_receipt_files(paths: list[str], recursive: bool = False) -> Iterator[Path]:
    """
    Expand CLI paths into receipt files.

    Files are yielded as given; directories yield their supported files in
    name order, descending into subdirectories when recursive is set.

    Raises:
        FileNotFoundError: If a path does not exist
    """
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            yield path
        elif path.is_dir():
            candidates = path.rglob("*") if recursive else path.iterdir()
            for candidate in sorted(candidates):
                if candidate.is_file() and candidate.suffix.lower() in config.ALLOWED_FILE_TYPES:
                    yield candidate
        else:
            raise FileNotFoundError(f"No such file or directory: {raw}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="receipt-reader",
        description="Read Mexican bank transfer receipts (images or PDFs) into structured data."
    )
    parser.add_argument("paths", nargs="+", metavar="PATH", help="Receipt file or directory")
    parser.add_argument(
        "-f", "--format",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)"
    )
    parser.add_argument("-r", "--recursive", action="store_true", help="Recurse into directories")
    parser.add_argument("--report", metavar="OUT.pdf", help="Write a PDF summary of the batch")
    parser.add_argument("--log-file", metavar="NAME", help="Also log to NAME inside the log directory")
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Command line entry point. Returns the process exit code."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return EXIT_OK if e.code == 0 else EXIT_USAGE

    setup_logging(log_level=args.log_level, log_file=args.log_file)

    if args.report and not args.report.lower().endswith(".pdf"):
        print("Error: --report must end with .pdf", file=sys.stderr)
        return EXIT_USAGE

    try:
        files = list(iter_receipt_files(args.paths, recursive=args.recursive))
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    if not files:
        print("Error: no receipt files found", file=sys.stderr)
        return EXIT_USAGE

    reader = ReceiptReader()
    results = [(str(path), reader.read_receipt(str(path))) for path in files]

    if args.format == "json":
        if len(results) == 1:
            print(format_json(results[0][1]))
        else:
            print(format_json([{"file": name, **outcome.to_dict()} for name, outcome in results]))
    else:
        blocks = []
        for name, outcome in results:
            block = format_text(outcome)
            blocks.append(f"== {name}\n{block}" if len(results) > 1 else block)
        print("\n\n".join(blocks))

    if args.report:
        try:
            generate_pdf_report(args.report, [(Path(name).name, outcome) for name, outcome in results])
        except Exception as e:
            logger.error(f"PDF report generation failed: {e}", exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_UNREAD

    identified = sum(1 for _, outcome in results if isinstance(outcome, Identified))
    logger.info(f"Processed {len(results)} receipt(s), {identified} identified")
    return EXIT_OK if identified == len(results) else EXIT_UNREAD


if __name__ == "__main__":
    sys.exit(main())
