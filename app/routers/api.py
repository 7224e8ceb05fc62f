from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from app.database import get_session
from app.schemas.property import PropertyCreate, PropertyListResponse, PropertySearchParams
from app.schemas.reservation import ReservationListResponse
from app.services import properties as property_service
from app.services import reservations as reservation_service

logger = get_logger()
router = APIRouter(prefix="/api", tags=["properties"])


@router.get("/properties", response_model=PropertyListResponse)
async def list_properties(params: Annotated[PropertySearchParams, Query()], db: AsyncSession = Depends(get_session)):
    try:
        properties = await property_service.get_all_properties(db, params.to_criteria())
    except Exception as e:
        logger.error("Property search failed", criteria=params.model_dump(exclude_none=True), error=str(e))
        raise HTTPException(status_code=500, detail="Property search failed")
    return {"properties": properties}


@router.post("/properties", response_model=dict)
async def create_property(request: PropertyCreate, db: AsyncSession = Depends(get_session)):
    try:
        return await property_service.add_property(db, request)
    except Exception as e:
        logger.error("Property insert failed", owner_id=request.owner_id, error=str(e))
        raise HTTPException(status_code=500, detail="Property insert failed")


@router.get("/reservations", response_model=ReservationListResponse)
async def list_reservations(guest_id: int, limit: int = 10, db: AsyncSession = Depends(get_session)):
    try:
        reservations = await reservation_service.get_all_reservations(db, guest_id, limit)
    except Exception as e:
        logger.error("Reservation lookup failed", guest_id=guest_id, error=str(e))
        raise HTTPException(status_code=500, detail="Reservation lookup failed")
    return {"reservations": reservations}
