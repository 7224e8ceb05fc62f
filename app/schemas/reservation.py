from pydantic import BaseModel
from typing import List, Dict


class ReservationListResponse(BaseModel):
    reservations: List[Dict]
