"""
Note Store: Request Dependencies
================================

What:  FastAPI dependencies handing the per-app Settings and NoteStore to routes.
How:   create_app() stores both on app.state; these functions read them back
       from the incoming request. Tests override them with
       app.dependency_overrides when they need a different store.
"""

from fastapi import Request

from notestore.config import Settings
from notestore.services.note_store import NoteStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_note_store(request: Request) -> NoteStore:
    return request.app.state.note_store
