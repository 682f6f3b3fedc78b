"""Shared fixtures for the directory tests."""

from typing import Any, Dict, List

import pytest

from domain.errors import FetchError
from domain.models.company import Company


ALPHA = {
    "name": "Alpha Gas Co",
    "contact": "010-1111-2222",
    "region": "Seoul Gangnam-gu Teheran-ro 123",
    "industry": "gas",
    "grade": "A",
}


class StubSource:
    """In-memory DirectorySource that records every URL it was asked for."""

    def __init__(self, payload: Any = None, error: Exception | None = None) -> None:
        self.payload = payload if payload is not None else []
        self.error = error
        self.calls: List[str] = []

    def fetch(self, url: str) -> List[Dict[str, Any]]:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def alpha_record() -> Dict[str, str]:
    return dict(ALPHA)


@pytest.fixture
def companies() -> List[Company]:
    return [
        Company(name="Alpha Gas Co", contact="010-1111-2222",
                region="Seoul Gangnam-gu Teheran-ro 123", industry="gas", grade="A"),
        Company(name="Busan Steel", contact="051-333-4444",
                region="Busan Haeundae-gu", industry="steel", grade="B"),
        Company(name="Daegu Build", contact="053-555-6666",
                region="Daegu Suseong-gu", industry="building", grade="A"),
        Company(name="Seoul Pipe Works", contact="02-777-8888",
                region="Incheon Namdong-gu", industry="plumbing", grade="C"),
    ]


@pytest.fixture
def stub_source_factory():
    return StubSource


@pytest.fixture
def network_error() -> FetchError:
    return FetchError("connection refused", url="/data/companies.json")
