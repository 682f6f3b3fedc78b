# infrastructure/sources/factory.py
from __future__ import annotations

from application.ports import DirectorySource
from infrastructure.config.settings import DirectorySettings
from infrastructure.sources.http_directory_source import HttpDirectorySource
from infrastructure.sources.local_directory_source import LocalFileDirectorySource


def make_source(settings: DirectorySettings) -> DirectorySource:
    base = settings.resolved_base_url
    if base.startswith(("http://", "https://")):
        return HttpDirectorySource(timeout=settings.timeout)
    # dev host: base is "" (or a relative prefix) and the resource path is read under local_root
    return LocalFileDirectorySource(settings.local_root)
