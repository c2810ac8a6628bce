import json
import logging
from typing import Any

from starlette.requests import Request

logger = logging.getLogger(__name__)


async def read_json_body(request: Request) -> dict[str, Any]:
    """
    Read the whole request body and parse it as JSON.

    Fails open: an empty, undecodable or malformed body, or a JSON value
    that is not an object, yields ``{}`` so handlers answer with their own
    missing-field error instead of a parse error.
    """
    raw = await request.body()
    try:
        parsed = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        logger.debug("Unparsable request body treated as empty")
        return {}
    if not isinstance(parsed, dict):
        return {}
    return parsed
