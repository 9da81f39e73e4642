# gameday/core/errors.py
from __future__ import annotations

from typing import Optional


class GamesError(Exception):
    """Base for every failure the CLI reports to the user."""


class ConfigError(GamesError):
    pass


class UsageError(GamesError):
    pass


class NetworkError(GamesError):
    def __init__(self, status_code: Optional[int], url: str, detail: str | None = None):
        self.status_code = status_code
        self.url = url
        if status_code is not None:
            msg = f"HTTP {status_code} for {url}"
        else:
            msg = f"request to {url} failed: {detail or 'unknown error'}"
        super().__init__(msg)


class ParseError(GamesError):
    def __init__(self, source: str, detail: str):
        self.source = source
        super().__init__(f"invalid JSON from {source}: {detail}")


class FilesystemError(GamesError):
    pass
