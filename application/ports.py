from __future__ import annotations
from typing import Protocol, Any, List, Dict
from dataclasses import dataclass

from domain.services.disclosure import DEFAULT_MARKER, DEFAULT_THRESHOLD

# =========================
# Directory loading
# =========================

class DirectorySource(Protocol):
    """Port: fetch the raw directory document from wherever it is published."""

    def fetch(self, url: str) -> List[Dict[str, Any]]:
        """
        Return the decoded JSON array (one dict per company).
        Raises FetchError on transport problems and ParseError when the body
        is not an array of objects. Never returns None.
        """
        ...


@dataclass(frozen=True)
class DirectoryConfig:
    """Configuration for the directory session, resolved once at startup."""
    base_url: str = ""
    resource_path: str = "/data/companies.json"
    failure_message: str = "Error fetching data"
    label_threshold: int = DEFAULT_THRESHOLD
    label_marker: str = DEFAULT_MARKER

    @property
    def resource_url(self) -> str:
        return f"{self.base_url.rstrip('/')}{self.resource_path}"
