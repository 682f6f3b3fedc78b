# infrastructure/sources/local_directory_source.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List
import json

from application.ports import DirectorySource
from domain.errors import FetchError, ParseError
from infrastructure.sources._payload import ensure_company_array


class LocalFileDirectorySource(DirectorySource):
    """
    Dev-host source: the resource URL is a root-relative path
    ("/data/companies.json") resolved under a local directory.
    """
    source_label = "local companies.json"

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def path_for(self, url: str) -> Path:
        return self.root / url.lstrip("/")

    def fetch(self, url: str) -> List[Dict[str, Any]]:
        path = self.path_for(url)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise FetchError(f"cannot read {path}: {e}", url=url) from e
        try:
            data = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise ParseError(f"{path}: body is not valid UTF-8 (byte {e.start})") from e
        except json.JSONDecodeError as e:
            raise ParseError(f"{path}: body is not valid JSON ({e.msg} at line {e.lineno})") from e
        return ensure_company_array(data, str(path))
