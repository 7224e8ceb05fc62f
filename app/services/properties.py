from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from app.database import execute_query
from app.queries.property_filters import SearchCriteria, build_property_search_query
from app.schemas.property import PropertyCreate

logger = get_logger()

# Column order of the insert; values are bound in the same order
PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)

INSERT_PROPERTY_QUERY = "INSERT INTO properties ({columns})\nVALUES ({placeholders})\nRETURNING *".format(
    columns=", ".join(PROPERTY_COLUMNS),
    placeholders=", ".join(f"${i}" for i in range(1, len(PROPERTY_COLUMNS) + 1)),
)


async def get_all_properties(db: AsyncSession, criteria: SearchCriteria) -> List[Dict]:
    """
    Returns the properties matching ``criteria``, cheapest first, each with its
    average review rating.
    """
    query = build_property_search_query(criteria)
    properties = await execute_query(db, query.text, query.params)
    logger.debug("Property search executed", params=query.params, result_count=len(properties))
    return properties


async def add_property(db: AsyncSession, property: PropertyCreate) -> Dict:
    values = [getattr(property, column) for column in PROPERTY_COLUMNS]
    rows = await execute_query(db, INSERT_PROPERTY_QUERY, values)
    await db.commit()
    logger.info("Property added", property_id=rows[0].get("id"), owner_id=property.owner_id)
    return rows[0]
