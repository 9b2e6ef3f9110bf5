"""File-backed key-value storage."""

import json
import logging
import os
import tempfile
from pathlib import Path

from monthcal.exceptions import StorageError

logger = logging.getLogger(__name__)


class FileStorage:
    """Key-value storage persisted as a single JSON object on disk.

    Every write rewrites the whole file through a temporary file and an
    atomic replace, so a crash never leaves a half-written document.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Failed to read storage file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self.path} is not a JSON object")
        return data

    def _write_all(self, items: dict[str, str]) -> None:
        payload = json.dumps(items, ensure_ascii=False, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=".storage-", suffix=".json", dir=str(self.path.parent)
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                    f.write("\n")
                os.replace(tmp_name, self.path)
            finally:
                if os.path.exists(tmp_name):
                    os.remove(tmp_name)
        except OSError as e:
            raise StorageError(f"Failed to write storage file {self.path}: {e}") from e
        logger.debug(f"Wrote {len(items)} key(s) to {self.path}")

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise StorageError(f"Storage value for {key!r} is not a string")
        return value

    def set_item(self, key: str, value: str) -> None:
        try:
            items = self._read_all()
        except StorageError:
            # An unreadable file is replaced rather than blocking every save
            logger.warning(f"Overwriting unreadable storage file {self.path}")
            items = {}
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)
