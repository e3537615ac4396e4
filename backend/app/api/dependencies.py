"""Common dependencies for FastAPI routes.

The receipt store is built once by ``create_app`` and kept on
``app.state``; routes receive it through :func:`get_receipt_store` so
tests can override it with ``app.dependency_overrides``.
"""

from __future__ import annotations

from fastapi import Request

from app.services.store import ReceiptStore


def get_receipt_store(request: Request) -> ReceiptStore:
    """Return the application's receipt store."""
    return request.app.state.receipt_store
