#domain/services/search_filter.py --> case-insensitive name/region search over the loaded directory
from typing import Any, List, Optional, Sequence, Tuple

from domain.models.company import Company


def _folded(value: Any) -> str:
    # records are not validated; numbers and other values are matched by their text
    return ("" if value is None else str(value)).lower()


def matches(company: Company, query: str) -> bool:
    """True when query is a case-insensitive substring of name or region."""
    q = query.lower()
    return q in _folded(company.name) or q in _folded(company.region)


def filter_companies(companies: Sequence[Company], query: str) -> List[Company]:
    """
    Return the visible subset, in original order.

    Always runs against the full list; whitespace in the query is kept as typed.
    An empty query returns every company.
    """
    if not query:
        return list(companies)
    return [c for c in companies if matches(c, query)]


class SearchFilter:
    """Remembers the last (companies, query) pair so repeated renders skip the scan."""

    def __init__(self) -> None:
        self._last_key: Optional[Tuple[int, str]] = None
        self._last_companies: Optional[Sequence[Company]] = None
        self._last_result: List[Company] = []

    def __call__(self, companies: Sequence[Company], query: str) -> List[Company]:
        key = (id(companies), query)
        if key == self._last_key and self._last_companies is companies:
            return list(self._last_result)
        result = filter_companies(companies, query)
        self._last_key = key
        self._last_companies = companies
        self._last_result = result
        return list(result)
