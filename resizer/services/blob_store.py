"""In-memory, single-use storage for letterboxed images.

Every ``put`` returns a fresh UUID. The entry can be taken exactly once;
``take_once`` removes it under the same lock that guards insertion and the
expiry sweep, so two concurrent downloads of one id never both succeed.
Entries older than the TTL are treated as gone even before the background
sweep removes them.
"""
from __future__ import annotations

import logging
import threading
import time
import uuid
from typing import Callable, Dict, Optional

from resizer.config import get_settings
from resizer.models import StoredBlob

logger = logging.getLogger(__name__)
settings = get_settings()


class EphemeralBlobStore:
    """Lock-guarded map of id -> StoredBlob with at-most-once retrieval."""

    def __init__(self, *, ttl_seconds: float = 600.0, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, StoredBlob] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def put(self, content: bytes, filename: str) -> str:
        blob_id = str(uuid.uuid4())
        blob = StoredBlob(id=blob_id, content=content, filename=filename, created_at=self._clock())
        with self._lock:
            self._entries[blob_id] = blob
        logger.debug("Stored blob %s (%d bytes) as %s", blob_id, len(content), filename)
        return blob_id

    def take_once(self, blob_id: str) -> Optional[StoredBlob]:
        """Remove and return the entry, or ``None`` if unknown, taken or expired."""

        with self._lock:
            blob = self._entries.pop(blob_id, None)
        if blob is None:
            return None
        if self._is_expired(blob, self._clock()):
            logger.debug("Blob %s expired before download", blob_id)
            return None
        return blob

    def sweep(self) -> int:
        """Drop expired entries and return how many were removed."""

        now = self._clock()
        with self._lock:
            expired = [key for key, blob in self._entries.items() if self._is_expired(blob, now)]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.info("Expired %d undownloaded blob(s)", len(expired))
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _is_expired(self, blob: StoredBlob, now: float) -> bool:
        return now - blob.created_at >= self._ttl


# Singleton instance
blob_store = EphemeralBlobStore(ttl_seconds=settings.blob_ttl_seconds)


def get_blob_store() -> EphemeralBlobStore:
    return blob_store
