import hmac
import logging
import os
from fastapi import HTTPException, Request

API_KEY = os.getenv("API_KEY", "")

logger = logging.getLogger(__name__)

def assert_api_key(request: Request):
    # Sin API_KEY configurada se rechaza todo
    key = request.headers.get("X-Api-Key") or ""
    if not API_KEY or not hmac.compare_digest(key.encode(), API_KEY.encode()):
        logger.info("Rejected request to %s: invalid or missing API key", request.url.path)
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
