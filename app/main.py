from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from structlog import get_logger

from app.routers import api, users
from app.core.logging import setup_logging
from app.config import settings
from app.database import AsyncSessionFactory

logger = get_logger()

app = FastAPI(title="LightBnB")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api.router)
app.include_router(users.router)

@app.on_event("startup")
async def startup_event():
    setup_logging()
    logger.info("LightBnB API started")


@app.get("/health", tags=["health"])
async def health():
    details = {"status": "ok"}
    # Check DB connectivity
    try:
        async with AsyncSessionFactory() as session:
            await session.execute(text("SELECT 1"))
        details["database"] = "up"
    except Exception as e:
        logger.warning("Health check database probe failed", error=str(e))
        details["status"] = "degraded"
        details["database"] = f"down: {str(e)}"
    details["config"] = {
        "db_url_set": bool(settings.DATABASE_URL),
        "db_ssl": settings.DATABASE_SSL,
    }
    try:
        async with AsyncSessionFactory() as session:
            result = await session.execute(text("SELECT COUNT(1) FROM properties"))
            count = result.scalar() or 0
        details["properties_count"] = int(count)
    except Exception as e:
        details["properties_count"] = f"error: {str(e)}"
    return details
