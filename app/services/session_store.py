"""Durable key-value storage for the client session."""

import json
import logging
import os
import tempfile

log = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_ID_KEY = "userId"
USERNAME_KEY = "username"

SESSION_KEYS = (TOKEN_KEY, USER_ID_KEY, USERNAME_KEY)

class SessionStore:
    """String key/value store holding the client session."""

    def get(self, key):
        raise NotImplementedError("Subclasses must implement this")

    def set(self, key, value):
        raise NotImplementedError("Subclasses must implement this")

    def remove(self, key):
        raise NotImplementedError("Subclasses must implement this")

class MemorySessionStore(SessionStore):
    """Session store that lives as long as the process."""

    def __init__(self, initial=None):
        self._data = dict(initial or {})

    def get(self, key):
        return self._data.get(key)

    def set(self, key, value):
        self._data[key] = str(value)

    def remove(self, key):
        self._data.pop(key, None)

class FileSessionStore(SessionStore):
    """Session store persisted as a JSON object on disk.

    Every write replaces the file atomically so a crash never leaves a
    half-written session behind.
    """

    def __init__(self, path):
        self.path = os.path.expanduser(path)

    def get(self, key):
        return self._load().get(key)

    def set(self, key, value):
        data = self._load()
        data[key] = str(value)
        self._save(data)

    def remove(self, key):
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)

    def _load(self):
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            log.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data):
        directory = os.path.dirname(self.path) or "."
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".session-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except OSError:
            os.unlink(tmp_path)
            raise
