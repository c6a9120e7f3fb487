"""
Roster API - Application Package Initializer
============================================

What: Marks the `app` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │        Routes (one per lesson)      │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (repository, validators, │  ← Business rules
    │   search and pagination helpers)    │
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Dataclass records + Pydantic
    └─────────────────────────────────────┘

    Repositories live on `app.state` and reach the routes through
    FastAPI's dependency injection (see app/dependencies.py).
"""

__version__ = "1.0.0"
