import threading
from datetime import datetime, timedelta, timezone
from hashlib import sha256

from streamwrap.domain.interface.cache_interface import CacheInterface
from streamwrap.utils.log import streamlog


def _now():
    return datetime.now(timezone.utc)


def text_hash(text: str) -> str:
    h = sha256()
    h.update(text.encode("utf-8"))
    return h.hexdigest()


class MemoryCache(CacheInterface):
    """Process local TTL cache for upstream responses."""

    __instance = None

    _hash_func = staticmethod(text_hash)

    def __init__(self, cleanup_interval=timedelta(minutes=15)):
        self._store = {}
        self._lock = threading.Lock()
        self._cleanup_interval = cleanup_interval
        self._last_cleanup = _now()

    @classmethod
    def get_instance(cls):
        if cls.__instance is None:
            cls.__instance = cls()
        return cls.__instance

    def get(self, key, default=None, hashed_key=False):
        key = self._generate_key(key, hashed_key)
        with self._lock:
            result = self._store.get(key)
            if not result:
                return default
            data, expires = result
            if expires > _now():
                return data
            del self._store[key]
        return default

    def set(self, key, data, expiry_time, hashed_key=False):
        if expiry_time <= timedelta(0):
            return  # Do nothing, as it will expire immediately

        key = self._generate_key(key, hashed_key)
        with self._lock:
            self._store[key] = (data, _now() + expiry_time)
        self.check_clean_up()

    def delete(self, key, hashed_key=False):
        with self._lock:
            self._store.pop(self._generate_key(key, hashed_key), None)

    def clear(self):
        with self._lock:
            self._store.clear()

    def check_clean_up(self):
        if _now() - self._last_cleanup < self._cleanup_interval:
            return
        self.clean_up()

    def clean_up(self):
        now = _now()
        with self._lock:
            expired = [k for k, (_, expires) in self._store.items() if expires <= now]
            for key in expired:
                del self._store[key]
            self._last_cleanup = now
        if expired:
            streamlog(f"[MemoryCache] Removed {len(expired)} expired entries")

    def _generate_key(self, key, hashed_key=False):
        if not hashed_key:
            key = self._hash_func(key)
        return key

    def __len__(self):
        return len(self._store)


cache = MemoryCache.get_instance()
