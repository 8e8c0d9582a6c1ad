"""
Note Store: Directory-Backed Note Storage
=========================================

What:  Maps note operations onto files directly inside one root directory.
How:   The note name is the file name, the note text is the file content.
       All I/O goes through aiofiles so handlers never block the event loop.
Who:   Created by create_app() from Settings.cache_dir; called by the
       note routes and the health check.

Storage Layout:
    <cache_dir>/
    ├── groceries        ← note "groceries"
    ├── todo.txt         ← note "todo.txt"
    └── meeting-notes    ← note "meeting-notes"

    A note exists iff an entry with its name exists in <cache_dir>.
    Sub-directories are never created and are skipped when listing.

Concurrency:
    There is no locking. Update and delete are last-writer-wins.
    Create opens the file in exclusive mode ("x"), so two concurrent
    creates of the same name cannot both succeed; the loser gets
    NoteAlreadyExistsError exactly like a sequential duplicate.

Encoding:
    Text is written as UTF-8 and read back with errors="replace", so a
    foreign binary file in the directory degrades to replacement
    characters instead of failing the whole listing. newline="" keeps
    line endings byte-exact in both directions.
"""

import errno
import logging
import os
from pathlib import Path
from typing import List, Union

import aiofiles
import aiofiles.os

from notestore.exceptions import (
    InvalidNoteNameError,
    NoteAlreadyExistsError,
    NoteNotFoundError,
)
from notestore.schemas.note import NoteItem

logger = logging.getLogger(__name__)

ENCODING = "utf-8"

# Characters that would make the joined path leave the root or nest below it
_FORBIDDEN_IN_NAME = {"/", "\\", "\x00"}


class NoteStore:
    """
    Directory-backed key/value store: key = note name, value = note text.

    Lifecycle of a note:
        create_note()  → file appears in the root directory
        update_note()  → file content replaced in full
        delete_note()  → file removed
        get_note() / list_notes() read it in between

    Every operation re-checks the filesystem; nothing is cached.
    """

    def __init__(self, root: Union[str, Path]):
        """
        Args:
            root: The configured cache directory. Created if missing.
        """
        self.root = Path(root).expanduser().resolve()
        self.root.mkdir(parents=True, exist_ok=True)
        logger.info("NoteStore initialized with root=%s", self.root)

    # ── Path Handling ─────────────────────────────────────────────────────

    def note_path(self, name: str) -> Path:
        """
        Join the root directory with a note name.

        Only names that address a single entry directly inside the root are
        accepted; anything else raises InvalidNoteNameError.
        """
        if not name or name in {".", ".."} or any(c in name for c in _FORBIDDEN_IN_NAME):
            raise InvalidNoteNameError(name)
        return self.root / name

    async def exists(self, name: str) -> bool:
        """
        Existence predicate: is there an entry called `name` in the root?

        Every note operation asks this first. A name the filesystem cannot
        look up at all (longer than NAME_MAX, for instance) counts as absent.
        """
        return await aiofiles.os.path.exists(self.note_path(name))

    # ── Read Operations ───────────────────────────────────────────────────

    async def get_note(self, name: str) -> str:
        """
        Return the full text of a note.

        Raises:
            NoteNotFoundError: no entry with that name
            InvalidNoteNameError: name cannot address an entry in the root
        """
        if not await self.exists(name):
            raise NoteNotFoundError(name)
        try:
            async with aiofiles.open(
                self.note_path(name), "r", encoding=ENCODING, errors="replace", newline=""
            ) as f:
                return await f.read()
        except FileNotFoundError:
            # Deleted between the check and the open
            raise NoteNotFoundError(name, context={"race": True})

    async def list_notes(self) -> List[NoteItem]:
        """
        Read every note in the root directory.

        What:    One NoteItem per regular file directly in the root, sorted
                 by name. Directories and other non-file entries are skipped.
        Cost:    Reads every file in full on every call (no pagination).
        Races:   A file deleted between the directory scan and the read is
                 silently left out of the result.
        """
        entries = await aiofiles.os.listdir(self.root)
        notes: List[NoteItem] = []
        for name in sorted(entries):
            path = self.root / name
            if not await aiofiles.os.path.isfile(path):
                continue
            try:
                async with aiofiles.open(path, "r", encoding=ENCODING, errors="replace", newline="") as f:
                    text = await f.read()
            except FileNotFoundError:
                logger.debug("Note %s vanished while listing", name)
                continue
            notes.append(NoteItem(name=name, text=text))
        return notes

    async def count_notes(self) -> int:
        """Number of regular files directly in the root directory."""
        count = 0
        for name in await aiofiles.os.listdir(self.root):
            if await aiofiles.os.path.isfile(self.root / name):
                count += 1
        return count

    async def storage_status(self) -> str:
        """'available' if the root is an existing writable directory, else 'unavailable'."""
        if await aiofiles.os.path.isdir(self.root) and os.access(self.root, os.W_OK):
            return "available"
        return "unavailable"

    # ── Write Operations ──────────────────────────────────────────────────

    async def create_note(self, name: str, text: str) -> None:
        """
        Store a new note.

        The existence check only gives the common case a clean error;
        the exclusive-create open is what actually guarantees uniqueness.

        Raises:
            NoteAlreadyExistsError: an entry with that name already exists
            InvalidNoteNameError: name is not usable as a file name here
        """
        if await self.exists(name):
            raise NoteAlreadyExistsError(name)
        try:
            async with aiofiles.open(self.note_path(name), "x", encoding=ENCODING, newline="") as f:
                await f.write(text)
        except FileExistsError:
            raise NoteAlreadyExistsError(name, context={"race": True})
        except OSError as e:
            if e.errno == errno.ENAMETOOLONG:
                raise InvalidNoteNameError(name, context={"errno": e.errno})
            raise
        logger.info("Note created: %s (%d chars)", name, len(text))

    async def update_note(self, name: str, text: str) -> None:
        """
        Replace the full content of an existing note (no merge).

        Raises:
            NoteNotFoundError: no entry with that name
        """
        if not await self.exists(name):
            raise NoteNotFoundError(name)
        async with aiofiles.open(self.note_path(name), "w", encoding=ENCODING, newline="") as f:
            await f.write(text)
        logger.info("Note updated: %s (%d chars)", name, len(text))

    async def delete_note(self, name: str) -> None:
        """
        Remove a note.

        Raises:
            NoteNotFoundError: no entry with that name
        """
        if not await self.exists(name):
            raise NoteNotFoundError(name)
        try:
            await aiofiles.os.remove(self.note_path(name))
        except FileNotFoundError:
            raise NoteNotFoundError(name, context={"race": True})
        logger.info("Note deleted: %s", name)
