import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.config import DATABASE_URL, SQL_ECHO

logger = logging.getLogger(__name__)

# One pool for the whole process, shared by every in-flight request.
engine = create_async_engine(DATABASE_URL, echo=SQL_ECHO, pool_pre_ping=True)
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

Base = declarative_base()


async def get_db():
    async with AsyncSessionLocal() as session:
        yield session


async def check_connection(bind: AsyncEngine = engine):
    """
    Liveness query run before the server accepts traffic.
    Returns the store's current time; any connection error propagates.
    """
    async with bind.connect() as conn:
        result = await conn.execute(text("SELECT CURRENT_TIMESTAMP AS now"))
        now = result.scalar_one()
    logger.info("Database connected! Time: %s", now)
    return now
