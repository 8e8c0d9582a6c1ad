"""
Note Store: Application Package Initializer
===========================================

What: Marks the `notestore` directory as a Python package.
Who:  Used by the launcher (`notestore.cli`), uvicorn and pytest.

Architecture Note:
    The service follows the same layered split as any FastAPI backend:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      NoteStore (Directory Store)    │  ← existence check, read, write
    ├─────────────────────────────────────┤
    │        Schemas (API Contract)       │  ← Pydantic models for JSON/OpenAPI
    ├─────────────────────────────────────┤
    │      Filesystem (Root Directory)    │  ← one file per note
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
