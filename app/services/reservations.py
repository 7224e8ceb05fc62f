from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import execute_query

PAST_RESERVATIONS_QUERY = """
SELECT reservations.*, properties.*, AVG(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON properties.id = reservations.property_id
JOIN property_reviews ON properties.id = property_reviews.property_id
WHERE end_date < now()::date
AND reservations.guest_id = $1
GROUP BY reservations.id, properties.id
ORDER BY start_date
LIMIT $2;
"""


async def get_all_reservations(db: AsyncSession, guest_id: int, limit: int = 10) -> List[Dict]:
    """
    Returns a guest's finished reservations, earliest first, each joined with its
    property and the property's average rating.
    """
    return await execute_query(db, PAST_RESERVATIONS_QUERY, [guest_id, limit])
