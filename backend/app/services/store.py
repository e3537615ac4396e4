"""In-memory store of receipt points keyed by generated id.

One ``ReceiptStore`` is created per application (see
``app.api.main.create_app``) and lives as long as the process. Records
are written once and never updated or removed. Handlers run in a
thread pool, so every access to the underlying dict goes through a
lock; an insert is complete before any lookup can see its id.
"""

from __future__ import annotations

import threading
import uuid
from typing import Dict, Optional


class ReceiptStore:
    """Thread-safe mapping of receipt id to points."""

    def __init__(self) -> None:
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def create(self, points: int) -> str:
        """Store ``points`` under a fresh id and return the id."""
        if points < 0:
            raise ValueError("points must be non-negative")
        with self._lock:
            receipt_id = str(uuid.uuid4())
            # ids are never reused, even in the astronomically unlikely case of a clash
            while receipt_id in self._points:
                receipt_id = str(uuid.uuid4())
            self._points[receipt_id] = points
        return receipt_id

    def lookup(self, receipt_id: str) -> Optional[int]:
        """Return the points stored for ``receipt_id``, or ``None`` if unknown."""
        with self._lock:
            return self._points.get(receipt_id)

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)
