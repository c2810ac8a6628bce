import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import HOST, PORT
from app.database import check_connection, engine
from app.dispatch import dispatch
from app.routers import todo_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The listener is only bound once this liveness query succeeds.
    try:
        await check_connection()
    except Exception:
        logger.exception("Database connection failed")
        raise
    logger.info("Server running on http://%s:%s", HOST, PORT)
    yield
    await engine.dispose()


app = FastAPI(title="Todo Service", lifespan=lifespan, redirect_slashes=False)

app.middleware("http")(dispatch)

app.include_router(todo_router.router, prefix="/todos", tags=["Todos"])
