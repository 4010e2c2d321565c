"""Non-blocking, fetch-once cache for the slow metadata endpoints."""

import threading
from concurrent.futures import ThreadPoolExecutor, wait as wait_futures
from dataclasses import dataclass
from typing import Callable, Optional

from arkstatus import config
from arkstatus.fetch import fetch_uri
from arkstatus.log import logger


@dataclass
class CacheEntry:
    value: Optional[str] = None
    in_progress: bool = False


class SingleFlightCache:
    """Fetch-once text cache for slow metadata endpoints.

    `get()` never blocks: it returns the cached text, or None while the first
    fetch for that endpoint is still running (or after it failed). At most one
    fetch per (base_uri, api_uri) is in flight at a time; a failed fetch leaves
    the entry empty so the next `get()` starts a new one.
    """

    def __init__(self, fetch: Callable[[str, str], str] = fetch_uri, *,
                 max_workers: int = config.CACHE_WORKERS):
        self._fetch = fetch
        self._entries = {}
        self._pending = {}
        self._lock = threading.Lock()
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="arkstatus-cache")

    def get(self, base_uri: str, api_uri: str) -> Optional[str]:
        key = (base_uri, api_uri)
        with self._lock:
            entry = self._entries.setdefault(key, CacheEntry())
            if entry.value is not None or entry.in_progress:
                return entry.value
            entry.in_progress = True
            try:
                self._pending[key] = self._executor.submit(self._refresh, key)
            except RuntimeError:
                entry.in_progress = False
                raise
        return None

    def _refresh(self, key):
        uri = key[0] + key[1]
        try:
            value = self._fetch(*key)
        except Exception as e:
            with self._lock:
                self._entries[key].in_progress = False
                self._pending.pop(key, None)
            logger.warning("[CACHE] error fetching %s: %s; will retry on next request", uri, e)
            return
        with self._lock:
            entry = self._entries[key]
            entry.value = value
            entry.in_progress = False
            self._pending.pop(key, None)
        logger.debug("[CACHE] stored %s (%s chars)", uri, len(value))

    def entry(self, base_uri: str, api_uri: str) -> CacheEntry:
        """Snapshot of the entry for one endpoint."""
        with self._lock:
            entry = self._entries.get((base_uri, api_uri), CacheEntry())
            return CacheEntry(entry.value, entry.in_progress)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the fetches in flight right now settle. True if none are left running."""
        with self._lock:
            pending = list(self._pending.values())
        if not pending:
            return True
        _, not_done = wait_futures(pending, timeout=timeout)
        return not not_done

    def close(self):
        self._executor.shutdown(wait=False)
