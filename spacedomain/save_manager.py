"""A directory of save game files."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class SaveError(Exception):
    """Raised when the save directory or a save file cannot be used."""


@dataclass(frozen=True)
class SaveFile:
    filename: str
    modified_ns: int

    @property
    def modified(self) -> float:
        """Modification time in seconds since the epoch."""
        return self.modified_ns / 1_000_000_000


class SaveManager:
    """Lists, reads and writes save files in one directory; knows nothing of their content."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        if not self.path.exists():
            logger.warning("path %s does not exists", self.path)
            raise SaveError("path does not exist")
        if not self.path.is_dir():
            logger.warning("path %s is not a directory", self.path)
            raise SaveError("path is not a directory")

    def list_saves(self) -> list[SaveFile]:
        """Regular files in the save directory, ordered by name."""
        try:
            entries = sorted(self.path.iterdir(), key=lambda p: p.name)
            return [
                SaveFile(entry.name, entry.stat().st_mtime_ns)
                for entry in entries
                if entry.is_file()
            ]
        except OSError as exc:
            logger.warning("fail to read save directory by %r", exc)
            raise SaveError("fail to read save directory") from exc

    def write(self, file_name: str, data: str) -> None:
        path = self.path / file_name
        logger.debug("writing %s", path)
        try:
            path.write_text(data, encoding="utf-8")
        except OSError as exc:
            logger.warning("fail to write save file by %r", exc)
            raise SaveError("fail to write save file") from exc

    def read(self, file_name: str) -> str:
        path = self.path / file_name
        logger.debug("reading %s", path)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("fail to read save file by %r", exc)
            raise SaveError("fail to read save file") from exc

    def get_last(self) -> SaveFile | None:
        """The most recently modified save, or None when there is none."""
        saves = self.list_saves()
        if not saves:
            return None
        return max(saves, key=lambda s: (s.modified_ns, s.filename))