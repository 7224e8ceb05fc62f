from typing import Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from app.database import execute_query
from app.schemas.user import UserCreate

logger = get_logger()


async def get_user_with_email(db: AsyncSession, email: str) -> Optional[Dict]:
    """
    Returns the user with this email, or None when there is none.
    Database errors propagate to the caller.
    """
    rows = await execute_query(db, "SELECT * FROM users WHERE email = $1", [email])
    return rows[0] if rows else None


async def get_user_with_id(db: AsyncSession, user_id: int) -> Optional[Dict]:
    rows = await execute_query(db, "SELECT * FROM users WHERE id = $1", [user_id])
    return rows[0] if rows else None


async def add_user(db: AsyncSession, user: UserCreate) -> Dict:
    rows = await execute_query(
        db,
        """
        INSERT INTO users (name, email, password)
        VALUES ($1, $2, $3)
        RETURNING *
        """,
        [user.name, user.email, user.password],
    )
    await db.commit()
    logger.info("User added", user_id=rows[0].get("id"))
    return rows[0]
