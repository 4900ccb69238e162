import os
import time
import logging
from fastapi import FastAPI, Request, Body
from typing import Dict, List

from .models import ExtractionResult, JsonHeadersInput, SCLReport
from .security import assert_api_key
from .headers import headers_from_text
from .scl import extract_scl

LOG_LEVEL = os.getenv("LOG_LEVEL", "info")

logging.basicConfig(level=LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

api = FastAPI(title="SCL Extraction API", version="1.0.0")

def _extract(headers: Dict[str, List[str]], start: float) -> ExtractionResult:
    result = extract_scl(headers)
    processingMs = int((time.time() - start) * 1000)
    if result is None:
        # Sin SCL no es un error: se responde found=false
        return ExtractionResult(found=False, scl=None, processingMs=processingMs)
    return ExtractionResult(
        found=True,
        scl=SCLReport.from_result(result),
        processingMs=processingMs,
    )

@api.get("/health")
async def health():
    return {"status": "ok"}

@api.post("/scl/mime", response_model=ExtractionResult)
async def scl_mime(
    request: Request,
    raw_mime: str = Body(..., media_type="text/plain"),
):
    assert_api_key(request)
    start = time.time()
    headers = headers_from_text(raw_mime)
    logger.debug("Parsed %d header names from MIME body", len(headers))
    return _extract(headers, start)

@api.post("/scl/json", response_model=ExtractionResult)
async def scl_json(request: Request, payload: JsonHeadersInput):
    assert_api_key(request)
    start = time.time()
    return _extract(payload.headers, start)
