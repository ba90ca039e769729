from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Fatal scaffolding failure tied to one path."""

    reason = "scaffold failed"

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"{self.reason}: {self.path}")


class UnsupportedEntryError(ScaffoldError):
    reason = "unsupported entry (not a regular file or directory)"


class MalformedTestPathError(ScaffoldError):
    reason = "test path has no parent to build under"
