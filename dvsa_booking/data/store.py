"""Persisted key-value store for booking configuration"""

import json
import os
import tempfile


class ConfigStoreError(ValueError):
    """Raised when the store file exists but is not a JSON object."""


class JsonConfigStore:
    """
    String keys to string values in a single JSON file.

    Every set() rewrites the whole file, so the last write wins. The file is
    only created on the first set().
    """

    def __init__(self, path):
        self.path = path

    def _read(self):
        if not os.path.exists(self.path):
            return {}
        with open(self.path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigStoreError(f"Config file {self.path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigStoreError(f"Config file {self.path} must hold a JSON object")
        return data

    def get(self, key, default=None):
        return self._read().get(key, default)

    def set(self, key, value):
        data = self._read()
        data[key] = value
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        # Temp file beside the target, swapped in whole
        fd, tmp_path = tempfile.mkstemp(dir=directory or ".", prefix=".dvsa_config.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise
