# infrastructure/sources/_payload.py
from typing import Any, Dict, List

from domain.errors import ParseError


def ensure_company_array(data: Any, origin: str) -> List[Dict[str, Any]]:
    """Structural check only: a flat array whose elements are objects."""
    if not isinstance(data, list):
        raise ParseError(f"{origin}: expected a JSON array, got {type(data).__name__}")
    for i, row in enumerate(data):
        if not isinstance(row, dict):
            raise ParseError(f"{origin}: element {i} is {type(row).__name__}, expected an object")
    return data
