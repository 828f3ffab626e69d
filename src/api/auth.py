"""Shared-secret API key check on the X-API-KEY header."""

import hmac
import logging
from typing import Optional

from fastapi import Header, Request

from .errors import Unauthorized

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-KEY"


def api_key_matches(supplied: Optional[str], secret: Optional[str]) -> bool:
    """Constant-time comparison; a missing header or unset secret never matches."""
    if supplied is None or not secret:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), secret.encode("utf-8"))


async def require_api_key(request: Request, x_api_key: Optional[str] = Header(default=None, alias=API_KEY_HEADER)):
    """Reject the request before any handler logic unless the key matches."""
    if not api_key_matches(x_api_key, request.app.state.api_secret_key):
        reason = "missing" if x_api_key is None else "invalid"
        logger.warning(f"Unauthorized {request.method} {request.url.path}: {reason} API key")
        raise Unauthorized()
