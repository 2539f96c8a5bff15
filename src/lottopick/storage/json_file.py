"""File-backed store with one JSON document per key."""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path

from .base import StoreError

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileStore:
    """Store each key as ``<directory>/<key>.json``."""

    def __init__(self, directory: str | Path, *, encoding: str = "utf-8") -> None:
        self.directory = Path(directory)
        self.encoding = encoding

    def path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise StoreError(f"Invalid store key: {key!r}")
        return self.directory / f"{key}.json"

    def load(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreError(f"Failed to read {path}: {exc}") from exc

    def save(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            # Write to a sibling temp file first so readers never see a partial document.
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding=self.encoding) as file:
                    file.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StoreError(f"Failed to write {path}: {exc}") from exc
