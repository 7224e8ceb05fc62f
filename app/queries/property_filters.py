"""
Property search query builder.

Turns a sparse set of search criteria into one positional-parameter SQL
statement for the property listing page. Only criteria that are present
contribute a predicate; the first predicate opens with ``WHERE`` and every
later one with ``AND``.

Usage:
    query = build_property_search_query(SearchCriteria(city="van", minimum_rating=4))
    rows = await execute_query(db, query.text, query.params)
"""

from dataclasses import dataclass
from typing import Any, List, NamedTuple, Optional

DEFAULT_LIMIT = 10

BASE_PROPERTY_QUERY = """
SELECT properties.*, AVG(property_reviews.rating) AS average_rating
FROM properties
LEFT JOIN property_reviews ON properties.id = property_id"""


@dataclass(frozen=True)
class SearchCriteria:
    """Optional property filters. ``None`` means the filter is not applied."""

    city: Optional[str] = None
    owner_id: Optional[Any] = None
    minimum_price_per_night: Optional[Any] = None
    maximum_price_per_night: Optional[Any] = None
    minimum_rating: Optional[Any] = None
    limit: Any = DEFAULT_LIMIT


class ParameterizedQuery(NamedTuple):
    text: str
    params: List[Any]


class _QueryAccumulator:
    """Collects SQL lines and their bound values, numbering placeholders as it goes."""

    def __init__(self, base: str):
        self.lines = [base]
        self.params: List[Any] = []
        self.clause_count = 0

    def bind(self, value: Any) -> str:
        # the placeholder index is always the position the value just landed in
        self.params.append(value)
        return f"${len(self.params)}"

    def add_line(self, line: str):
        self.lines.append(line)

    def add_filter(self, predicate: str, value: Any):
        """Appends ``predicate`` (containing one ``{}`` slot) as a WHERE/AND clause."""
        placeholder = self.bind(value)
        keyword = "WHERE" if self.clause_count == 0 else "AND"
        self.clause_count += 1
        self.add_line(f"{keyword} {predicate.format(placeholder)}")

    def build(self) -> ParameterizedQuery:
        return ParameterizedQuery("\n".join(self.lines) + ";", list(self.params))


# (field, predicate, value transform), applied in this order
_FILTERS = (
    ("city", "city LIKE {}", lambda city: f"%{city}%"),
    ("owner_id", "properties.owner_id = {}", None),
    ("minimum_price_per_night", "properties.cost_per_night >= {}", None),
    ("maximum_price_per_night", "properties.cost_per_night <= {}", None),
)


def build_property_search_query(criteria: SearchCriteria) -> ParameterizedQuery:
    """
    Builds the property search statement for ``criteria``.

    Never raises and never validates: values are bound exactly as given, so a bad
    value only fails once the database executes the statement.
    """
    query = _QueryAccumulator(BASE_PROPERTY_QUERY)

    for field, predicate, transform in _FILTERS:
        value = getattr(criteria, field)
        if value is None:
            continue
        query.add_filter(predicate, transform(value) if transform else value)

    query.add_line("GROUP BY properties.id")

    if criteria.minimum_rating is not None:
        rating = query.bind(criteria.minimum_rating)
        query.add_line(f"HAVING AVG(property_reviews.rating) >= {rating}")

    limit = query.bind(criteria.limit)
    query.add_line(f"ORDER BY cost_per_night LIMIT {limit}")

    return query.build()
