"""
FastAPI Backend for Bank Receipt Reader
RESTful API endpoints for reading bank transfer receipts
"""

from fastapi import FastAPI, File, UploadFile, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from pathlib import Path
from datetime import datetime
from decimal import Decimal
import tempfile
import logging
import sys

# Add backend to path
backend_path = Path(__file__).parent.parent / 'backend'
sys.path.insert(0, str(backend_path))

# Import backend modules
from config import config
from logging_config import setup_logging
from classifiers.bank_classifier import default_classifier
from main import ReceiptReader
from output.writer import json_amount

setup_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Bank Receipt Reader API",
    description="Identify the bank of a transfer receipt and extract its fields",
    version=config.VERSION
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

reader = ReceiptReader()


class TextRequest(BaseModel):
    text: str


def encode_record(record: dict) -> dict:
    """Outcome record with amounts in the same two-decimal form as the CLI JSON."""
    return jsonable_encoder(record, custom_encoder={Decimal: json_amount})


@app.get("/")
def root():
    """Root endpoint - API information"""
    return {
        "message": config.APP_NAME,
        "version": config.VERSION,
        "endpoints": {
            "POST /read": "Read an uploaded receipt image or PDF",
            "POST /process-text": "Read receipt text already acquired by the caller",
            "GET /banks": "List recognized bank signatures",
            "GET /health": "Health check"
        },
        "settings": config.to_dict()
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat()
    }


@app.get("/banks")
def list_banks():
    """Signature table in priority order"""
    signatures = default_classifier.describe()
    return {
        "total": len(signatures),
        "signatures": signatures
    }


@app.post("/process-text")
def process_text(request: TextRequest):
    """
    Read a receipt from its text.

    - **text**: Receipt text as produced by OCR or a PDF text layer
    """
    try:
        outcome = reader.process(request.text)
        return encode_record(outcome.to_dict())
    except Exception as e:
        logger.error(f"Error processing receipt text: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@app.post("/read")
def read_receipt(file: UploadFile = File(..., description="Receipt image or PDF")):
    """
    Read an uploaded receipt.

    - **file**: Receipt image (PNG, JPG, TIFF, ...) or PDF
    """
    filename = file.filename or ""
    content = file.file.read()

    is_valid, error = config.validate_file(filename, len(content))
    if not is_valid:
        raise HTTPException(status_code=400, detail=error)

    tmp_path = None
    try:
        # Save to temporary file, keeping the suffix for type dispatch
        with tempfile.NamedTemporaryFile(delete=False, suffix=Path(filename).suffix.lower()) as tmp_file:
            tmp_file.write(content)
            tmp_path = tmp_file.name

        logger.info(f"Reading uploaded receipt {filename} ({len(content)} bytes)")
        outcome = reader.read_receipt(tmp_path)
        return encode_record({"filename": filename, **outcome.to_dict()})

    except Exception as e:
        logger.error(f"Error reading {filename}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    finally:
        if tmp_path:
            try:
                Path(tmp_path).unlink()
            except OSError as e:
                logger.warning(f"Could not remove temporary file {tmp_path}: {e}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
