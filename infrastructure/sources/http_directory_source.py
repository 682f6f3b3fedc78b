# infrastructure/sources/http_directory_source.py
from __future__ import annotations
from typing import Any, Dict, List, Optional

import requests

from application.ports import DirectorySource
from domain.errors import FetchError, ParseError
from infrastructure.sources._payload import ensure_company_array

USER_AGENT = "company-directory/1.0"


def get_session() -> requests.Session:
    s = requests.Session()
    s.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json", "Accept-Encoding": "gzip, deflate"})
    return s


class HttpDirectorySource(DirectorySource):
    source_label = "published companies.json"

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = 15.0) -> None:
        self.session = session or get_session()
        self.timeout = timeout

    def fetch(self, url: str) -> List[Dict[str, Any]]:
        try:
            r = self.session.get(url, timeout=self.timeout)
            r.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise FetchError(f"HTTP {status} for {url}", url=url, status=status) from e
        except requests.RequestException as e:
            raise FetchError(f"request to {url} failed: {e}", url=url) from e

        try:
            data = r.json()
        except ValueError as e:
            raise ParseError(f"{url}: body is not valid JSON") from e
        return ensure_company_array(data, url)
