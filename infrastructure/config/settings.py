#infrastructure/config/settings.py
from __future__ import annotations
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional
import os

from application.ports import DirectoryConfig
from domain.services.disclosure import DEFAULT_THRESHOLD

PUBLISHED_URL = "https://gard2np.github.io/info"
DEV_HOSTS = ("localhost",)


def parse_threshold(value) -> int:
    """Label threshold from a flag or env string; a non-negative int or ValueError."""
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"label threshold must be a non-negative integer, got {value!r}") from None
    if n < 0:
        raise ValueError(f"label threshold must be a non-negative integer, got {value!r}")
    return n


def resolve_base_url(hostname: str, published_url: str = PUBLISHED_URL) -> str:
    """Empty base (served from the local root) on a dev host, published URL anywhere else."""
    return "" if hostname in DEV_HOSTS else published_url


@dataclass(frozen=True)
class DirectorySettings:
    host: str = "localhost"
    published_url: str = PUBLISHED_URL
    base_url: Optional[str] = None       # explicit override, skips host detection
    local_root: Path = field(default_factory=Path.cwd)  # directory that holds data/companies.json in dev
    label_threshold: int = DEFAULT_THRESHOLD
    timeout: float = 15.0

    @classmethod
    def from_env(cls) -> "DirectorySettings":
        env = os.environ
        return cls(
            host=env.get("DIRECTORY_HOST", "localhost"),
            published_url=env.get("DIRECTORY_PUBLISHED_URL", PUBLISHED_URL),
            base_url=env.get("DIRECTORY_BASE_URL"),
            local_root=Path(env.get("DIRECTORY_LOCAL_ROOT", str(Path.cwd()))),
            label_threshold=parse_threshold(env.get("DIRECTORY_LABEL_THRESHOLD", DEFAULT_THRESHOLD)),
            timeout=float(env.get("DIRECTORY_TIMEOUT", "15")),
        )

    def with_overrides(self, **kwargs) -> "DirectorySettings":
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})

    @property
    def resolved_base_url(self) -> str:
        if self.base_url is not None:
            return self.base_url
        return resolve_base_url(self.host, self.published_url)

    def directory_config(self) -> DirectoryConfig:
        return DirectoryConfig(base_url=self.resolved_base_url, label_threshold=self.label_threshold)
