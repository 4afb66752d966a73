from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from ..core.constants import STORAGE_KEY
from .codec import roster_from_payload, roster_to_payload
from .model import Roster

logger = logging.getLogger(__name__)


class JsonFileRosterRepository:
    """Key-value JSON file holding the roster blob under one key.

    Note: other keys in the same file are preserved on save.
    """

    def __init__(self, path: str | os.PathLike, *, key: str = STORAGE_KEY):
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def _read_store(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("load error: %s (%s)", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.error("load error: %s does not hold a JSON object", self._path)
            return {}
        return data

    def load(self) -> Roster:
        roster = roster_from_payload(self._read_store().get(self._key))
        logger.info("Loaded %d worker(s) from %s", len(roster), self._path)
        return roster

    def save(self, roster: Roster) -> None:
        store = self._read_store()
        store[self._key] = roster_to_payload(roster)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=self._path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(store, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
