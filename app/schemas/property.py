from pydantic import BaseModel, field_validator
from typing import List, Dict, Optional

from app.queries.property_filters import DEFAULT_LIMIT, SearchCriteria


class PropertySearchParams(BaseModel):
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[int] = None
    maximum_price_per_night: Optional[int] = None
    minimum_rating: Optional[float] = None
    limit: int = DEFAULT_LIMIT

    @field_validator(
        "city",
        "owner_id",
        "minimum_price_per_night",
        "maximum_price_per_night",
        "minimum_rating",
        mode="before",
    )
    def blank_to_none(cls, v):
        # HTML search forms submit untouched inputs as empty strings
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_criteria(self) -> SearchCriteria:
        return SearchCriteria(
            city=self.city,
            owner_id=self.owner_id,
            minimum_price_per_night=self.minimum_price_per_night,
            maximum_price_per_night=self.maximum_price_per_night,
            minimum_rating=self.minimum_rating,
            limit=self.limit,
        )


class PropertyCreate(BaseModel):
    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    cost_per_night: int
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    post_code: Optional[str] = None
    country: Optional[str] = None
    parking_spaces: Optional[int] = None
    number_of_bathrooms: Optional[int] = None
    number_of_bedrooms: Optional[int] = None

    class Config:
        json_schema_extra = {
            "example": {
                "owner_id": 1,
                "title": "Speed lamp",
                "description": "description",
                "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                "cost_per_night": 93061,
                "street": "536 Namsub Highway",
                "city": "Sotboske",
                "province": "Quebec",
                "post_code": "28142",
                "country": "Canada",
                "parking_spaces": 6,
                "number_of_bathrooms": 4,
                "number_of_bedrooms": 8,
            }
        }


class PropertyListResponse(BaseModel):
    properties: List[Dict]
