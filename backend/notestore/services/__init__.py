# Services package init
"""
Note Store: Services Layer
==========================

What:  Storage logic sitting between routes (HTTP) and the filesystem.
How:   Services raise NoteStoreError subclasses; routes never inspect
       the filesystem themselves. They are injected into routes via
       FastAPI's dependency injection (see notestore.dependencies).

Service Inventory:
    - NoteStore: Directory-backed note storage (get, list, create, update, delete)
"""

from notestore.services.note_store import NoteStore

__all__ = ["NoteStore"]
