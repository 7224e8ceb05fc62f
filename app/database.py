import ssl
from typing import Any, Dict, List, Sequence

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from structlog import get_logger

from app.config import settings

logger = get_logger()

DB_URL = settings.DATABASE_URL
if not DB_URL:
    raise RuntimeError("DATABASE_URL not set")

connect_args = {}
if settings.DATABASE_SSL:
    # Hosted Postgres often presents self-signed certs
    ssl_ctx = ssl.create_default_context()
    ssl_ctx.check_hostname = False
    ssl_ctx.verify_mode = ssl.CERT_NONE
    connect_args["ssl"] = ssl_ctx

engine = create_async_engine(
    DB_URL,
    poolclass=NullPool,
    connect_args=connect_args,
    future=True,
)

AsyncSessionFactory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

# Dependency for getting a session in FastAPI routes
async def get_session() -> AsyncSession:
    async with AsyncSessionFactory() as session:
        yield session


async def execute_query(db: AsyncSession, sql_text: str, params: Sequence[Any] = ()) -> List[Dict]:
    """
    Runs a statement with positional ``$n`` placeholders and returns every row as a dict.

    The text goes to the driver untouched (asyncpg understands ``$n`` natively), so
    ``params[0]`` binds ``$1`` and so on. Errors propagate; callers log them.
    """
    try:
        conn = await db.connection()
        result = await conn.exec_driver_sql(sql_text, tuple(params))
        if not result.returns_rows:
            return []
        columns = list(result.keys())
        return [dict(zip(columns, row)) for row in result.fetchall()]
    except Exception as e:
        logger.debug("Query execution failed", sql=sql_text, error=str(e))
        raise
