"""
Request dispatcher.

Matches the request target verbatim, in order: the exact route table,
then the item prefix, then a plain-text 404. The health probe is answered
here for every verb; other matched requests are handed to the FastAPI
router, and anything a handler raises becomes a generic 500.
"""
import logging

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)

HEALTH_ROUTE = "/readyz"
EXACT_ROUTES = frozenset({HEALTH_ROUTE, "/todos"})
ITEM_PREFIX = "/todos/"


def request_target(request: Request) -> str:
    """The path as sent by the client, still percent-encoded, query string included."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        # Some clients put the query in raw_path as well.
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        path = request.scope.get("path") or ""
    query = request.scope.get("query_string") or b""
    if query:
        return f"{path}?{query.decode('latin-1')}"
    return path


def is_routed(target: str) -> bool:
    return target in EXACT_ROUTES or target.startswith(ITEM_PREFIX)


async def dispatch(request: Request, call_next):
    if not request.scope.get("path"):
        return PlainTextResponse("Bad Request", status_code=400)

    target = request_target(request)
    logger.info("%s %s", request.method, target)

    if not is_routed(target):
        return PlainTextResponse("Not Found", status_code=404)

    if target == HEALTH_ROUTE:
        return PlainTextResponse("OK")

    try:
        return await call_next(request)
    except Exception:
        logger.exception("Handler error: %s %s", request.method, target)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
