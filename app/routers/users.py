from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from app.database import get_session
from app.schemas.user import UserCreate
from app.services import users as user_service

logger = get_logger()
router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=dict)
async def get_user_by_email(email: str, db: AsyncSession = Depends(get_session)):
    try:
        user = await user_service.get_user_with_email(db, email)
    except Exception as e:
        logger.error("User lookup failed", email=email, error=str(e))
        raise HTTPException(status_code=500, detail="User lookup failed")
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/{user_id}", response_model=dict)
async def get_user(user_id: int, db: AsyncSession = Depends(get_session)):
    try:
        user = await user_service.get_user_with_id(db, user_id)
    except Exception as e:
        logger.error("User lookup failed", user_id=user_id, error=str(e))
        raise HTTPException(status_code=500, detail="User lookup failed")
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("", response_model=dict)
async def create_user(request: UserCreate, db: AsyncSession = Depends(get_session)):
    try:
        return await user_service.add_user(db, request)
    except Exception as e:
        logger.error("User insert failed", email=request.email, error=str(e))
        raise HTTPException(status_code=500, detail="User insert failed")
