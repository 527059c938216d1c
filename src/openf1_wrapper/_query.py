"""Query string builder for OpenF1 equality and comparison filters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any
from urllib.parse import quote

FilterValue = int | float | str | datetime | None


@dataclass(frozen=True)
class Filter:
    """Comparison filter on a single field.

    Usage:
        # Upper bound
        Filter(lte=10)  # produces: lap_number<=10

        # Time window
        Filter(gte=start, lte=end)  # produces: date>=...&date<=...
    """

    gt: FilterValue = None
    gte: FilterValue = None
    lt: FilterValue = None
    lte: FilterValue = None

    def to_terms(self, key: str) -> list[str]:
        """Render this filter as ``key<op>value`` terms."""
        terms: list[str] = []
        if self.gt is not None:
            terms.append(f"{key}>{format_value(self.gt)}")
        if self.gte is not None:
            terms.append(f"{key}>={format_value(self.gte)}")
        if self.lt is not None:
            terms.append(f"{key}<{format_value(self.lt)}")
        if self.lte is not None:
            terms.append(f"{key}<={format_value(self.lte)}")
        return terms


def format_value(value: Any) -> str:
    """Render a filter value for the query string.

    Datetimes use ISO 8601. The result is percent-encoded except for ``:``
    so a UTC offset such as ``+00:00`` is not read back as a space.
    """
    if isinstance(value, (datetime, date)):
        text = value.isoformat()
    else:
        text = str(value)
    return quote(text, safe=":")


def build_query(**filters: Any) -> str:
    """Build an ``&``-joined query string from keyword filters.

    Plain values become equality terms, Filter instances become one
    comparison term per operator and None values are dropped.

    Args:
        **filters: Field names mapped to plain values or Filter instances.

    Returns:
        The query string without a leading ``?``.
    """
    terms: list[str] = []
    for key, value in filters.items():
        if value is None:
            continue
        if isinstance(value, Filter):
            terms.extend(value.to_terms(key))
        else:
            terms.append(f"{key}={format_value(value)}")
    return "&".join(terms)
