"""Top-level application package for the receipt points API.

This package contains everything required to run the FastAPI backend
that scores purchase receipts: Pydantic schemas for the wire format,
the validation and points rule engine, an in-memory receipt store and
the API routers. Receipts are posted to ``/receipts/process`` and the
points they earned are read back from ``/receipts/{id}/points``.

To run the API locally you can execute:

```bash
uvicorn app.api.main:app --app-dir backend --port 8081 --reload
```

Points live in process memory only and are gone after a restart.
Configuration values can be overridden using environment variables or
a ``.env`` file at the project root.
"""

__all__: list[str] = []
