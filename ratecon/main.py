"""
Rate Confirmation Parser — FastAPI Backend
Endpoints: POST /parse, POST /upload, POST /format
"""

import logging
import os

from fastapi import FastAPI, File, UploadFile, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from .models import (
    ParseRequest, ParseResponse, FormatRequest, FormatResponse,
)
from .document_processor import ALLOWED_EXTENSIONS, extract_text_from_bytes
from .extractor import parse_rate_confirmation, summarize
from .formatter import format_notes, format_route, generate_chain, generate_rename

load_dotenv()

# Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
MAX_UPLOAD_MB = float(os.getenv("MAX_UPLOAD_MB", "10"))

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ── App Init ────────────────────────────────────────────────────────

app = FastAPI(
    title="Rate Confirmation Parser",
    description="Extracts load, rate and stop details from freight rate confirmations",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Health Check ────────────────────────────────────────────────────

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "allowed_extensions": sorted(ALLOWED_EXTENSIONS),
        "max_upload_mb": MAX_UPLOAD_MB,
    }


# ── POST /parse ─────────────────────────────────────────────────────

@app.post("/parse", response_model=ParseResponse)
async def parse_text(request: ParseRequest):
    """
    Parse text already recovered from a rate confirmation.
    Every field still needs human review before use.
    """
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Text cannot be empty.")

    data = parse_rate_confirmation(request.text)
    return ParseResponse(
        data=data,
        stop_count=len(data.stops),
        extraction_notes=summarize(data),
    )


# ── POST /upload ────────────────────────────────────────────────────

@app.post("/upload", response_model=ParseResponse)
async def upload_document(file: UploadFile = File(...)):
    """
    Upload a rate confirmation (PDF, DOCX, or TXT) and parse its text layer.
    Nothing is written to disk.
    """
    filename = file.filename or "unknown"
    ext = os.path.splitext(filename)[1].lower()

    if ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type: {ext}. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}"
        )

    content = await file.read()
    if len(content) > MAX_UPLOAD_MB * 1024 * 1024:
        raise HTTPException(status_code=413, detail=f"File exceeds {MAX_UPLOAD_MB:g} MB.")

    try:
        text = extract_text_from_bytes(content, filename)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception("[Upload] Failed to read %s", filename)
        raise HTTPException(status_code=500, detail=f"Processing failed: {str(e)}")

    data = parse_rate_confirmation(text)
    return ParseResponse(
        filename=filename,
        data=data,
        stop_count=len(data.stops),
        extraction_notes=summarize(data),
    )


# ── POST /format ────────────────────────────────────────────────────

@app.post("/format", response_model=FormatResponse)
async def format_outputs(request: FormatRequest):
    """Build route / notes / chain / rename strings from a verified record."""
    data = request.data
    chain = generate_chain(data, request.truck_number, request.broker, request.team)
    return FormatResponse(
        route=format_route(data, request.simplified_address),
        notes=format_notes(data, chain),
        chain=chain,
        rename=generate_rename(data, request.truck_number),
    )


# ── Run Server ──────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info("Rate Confirmation Parser starting on %s:%s", host, port)
    uvicorn.run(app, host=host, port=port)
