import os
import json


class StorageError(Exception):
    """Raised when the config file cannot be created, read, written or parsed."""


def _read_document(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise StorageError(f"Cannot read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise StorageError(f"Config file {path} does not contain a JSON object")
    return data


def _write_document(path, data):
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except (OSError, TypeError) as e:
        raise StorageError(f"Cannot write config file {path}: {e}") from e


def _as_string(value):
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return None


class ConfigDocument:
    """A JSON object on disk with string-valued top-level keys.

    Writes go through `set`, which patches one key into a fresh read of the
    file so other keys survive edits made since `open`. There is no locking:
    two processes writing at once means the last one wins.
    """

    def __init__(self, path, data):
        self.path = path
        self.data = data

    @classmethod
    def open(cls, path):
        path = os.fspath(path)
        if not os.path.exists(path):
            folder = os.path.dirname(path)
            try:
                if folder and not os.path.exists(folder):
                    os.makedirs(folder)
                with open(path, 'w', encoding='utf-8') as f:
                    f.write("{}")
            except OSError as e:
                raise StorageError(f"Cannot create config file {path}: {e}") from e
        return cls(path, _read_document(path))

    def get(self, key):
        return _as_string(self.data.get(key))

    def set(self, key, value):
        data = _read_document(self.path)
        data[key] = value
        _write_document(self.path, data)
        self.data[key] = value

    def ensure_default(self, key, default):
        if not self.get(key):
            self.set(key, default)

    def __contains__(self, key):
        return self.get(key) is not None


def open_config(path):
    return ConfigDocument.open(path)
