# backend/geotrack/utils/preferences.py
"""Local key-value preferences used for the geofence active flag.

The storage backend is picked from ``PREFERENCES_STORAGE_URL``:

* ``redis://host:port/db`` keeps values in a Redis hash per namespace.
* ``file://path/to/prefs.json`` keeps a small JSON document on disk
  (relative paths are resolved against the working directory).
* ``memory://`` keeps values in the process only.
"""
import json
import os
import threading
from typing import Any, Dict, Optional

import redis

class MemoryBackend:
    """Process-local storage."""

    def __init__(self):
        self._data: Dict[str, Dict[str, Any]] = {}

    def get(self, namespace: str, key: str) -> Optional[Any]:
        return self._data.get(namespace, {}).get(key)

    def set(self, namespace: str, key: str, value: Any) -> None:
        self._data.setdefault(namespace, {})[key] = value

    def clear(self, namespace: str) -> None:
        self._data.pop(namespace, None)

class FileBackend:
    """JSON document on disk, one object per namespace."""

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, Dict[str, Any]]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def _write(self, data: Dict[str, Dict[str, Any]]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f'{self.path}.tmp'
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f)
        os.replace(tmp_path, self.path)

    def get(self, namespace: str, key: str) -> Optional[Any]:
        with self._lock:
            return self._read().get(namespace, {}).get(key)

    def set(self, namespace: str, key: str, value: Any) -> None:
        with self._lock:
            data = self._read()
            data.setdefault(namespace, {})[key] = value
            self._write(data)

    def clear(self, namespace: str) -> None:
        with self._lock:
            data = self._read()
            data.pop(namespace, None)
            self._write(data)

class RedisBackend:
    """Redis hash per namespace, values JSON-encoded."""

    def __init__(self, url: str):
        self.client = redis.Redis.from_url(url, decode_responses=True)

    def get(self, namespace: str, key: str) -> Optional[Any]:
        raw = self.client.hget(namespace, key)
        return json.loads(raw) if raw is not None else None

    def set(self, namespace: str, key: str, value: Any) -> None:
        self.client.hset(namespace, key, json.dumps(value))

    def clear(self, namespace: str) -> None:
        self.client.delete(namespace)

def backend_from_url(url: str):
    """Build a storage backend for a preferences URL."""
    if url.startswith(('redis://', 'rediss://', 'unix://')):
        return RedisBackend(url)
    if url.startswith('file://'):
        return FileBackend(url[len('file://'):])
    if url == 'memory://':
        return MemoryBackend()
    raise ValueError(f'Unsupported preferences storage URL: {url}')

class PreferenceStore:
    """Namespaced key-value storage, similar to Android shared preferences."""

    def __init__(self, app=None):
        self.backend = None
        self.namespace = 'default'
        if app is not None:
            self.init_app(app)

    def init_app(self, app) -> None:
        url = app.config.get('PREFERENCES_STORAGE_URL')
        if not url:
            app.logger.warning('PREFERENCES_STORAGE_URL not set, preferences will not survive restarts')
            url = 'memory://'

        self.backend = backend_from_url(url)
        self.namespace = app.config.get('PREFERENCES_NAMESPACE', self.namespace)
        app.extensions['preferences'] = self

    def get_boolean(self, key: str, default: bool = False) -> bool:
        value = self.backend.get(self.namespace, key)
        if value is None:
            return default
        return bool(value)

    def put_boolean(self, key: str, value: bool) -> None:
        self.backend.set(self.namespace, key, bool(value))

    def clear(self) -> None:
        self.backend.clear(self.namespace)
