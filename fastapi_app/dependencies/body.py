import json
import logging
from typing import Any

from fastapi import Request

logger = logging.getLogger(__name__)


async def json_body(request: Request) -> Any:
    """Decoded JSON body, or None when it is absent or not valid JSON.

    Services report the missing fields themselves, so a broken body ends up
    as the same 400 the Flask surface answers with.
    """
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.warning(f"Invalid_JSON_body path={request.url.path}")
        return None
