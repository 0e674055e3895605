"""
JSON file store
Small list-of-records persistence used by the vehicle registry and the
managed user list.
"""
import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from .errors import StoreCorruptedError

logger = logging.getLogger(__name__)


class JsonStore:
    """A JSON array on disk, read and rewritten whole under a lock"""

    def __init__(self, path, seed=None):
        self.path = Path(path)
        self.seed = list(seed or [])
        self._lock = threading.Lock()

    def load(self):
        """Return all records"""
        with self._lock:
            return self._read()

    def save(self, records):
        """Replace all records; refused while the file on disk is unreadable"""
        with self._lock:
            self._read(strict=True)
            self._write(records)

    def update(self, func):
        """Apply ``func(records) -> (records, result)`` atomically"""
        with self._lock:
            records, result = func(self._read(strict=True))
            self._write(records)
            return result

    def _read(self, strict=False):
        """Records on disk. With ``strict`` a damaged file raises instead of
        falling back to the seed, so it is never overwritten."""
        if not self.path.exists():
            return [dict(r) for r in self.seed]
        try:
            with self.path.open('r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error('Failed to read %s: %s', self.path, e)
            if strict:
                raise StoreCorruptedError(self.path, e) from e
            return [dict(r) for r in self.seed]
        if not isinstance(data, list):
            logger.error('Expected a JSON array in %s, got %s', self.path, type(data).__name__)
            if strict:
                raise StoreCorruptedError(self.path, 'not a JSON array')
            return []
        return data

    def _write(self, records):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(records, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except Exception:
            os.unlink(tmp_path)
            raise
