# Path: vaultcore/indexing/sources.py
# Purpose: Resolve notes by id from caller-controlled storage.
# Layer: core/indexing.
# Details: Sources raise UnreadableDocumentError on any failure so callers can skip the note and continue.

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set

from vaultcore.errors import UnreadableDocumentError
from vaultcore.models.domain import Note

SUPPORTED_EXTENSIONS = {".md", ".markdown", ".txt"}


class DocumentSource(ABC):
    """Read boundary supplying note bodies to the engine."""

    @abstractmethod
    def read(self, doc_id: str) -> Note:
        """Return the note for ``doc_id`` or raise UnreadableDocumentError."""

    @abstractmethod
    def list_ids(self) -> List[str]:
        """Return every id the source can currently resolve."""


class InMemoryDocumentSource(DocumentSource):
    """Dict-backed source, handy for callers that already hold note bodies."""

    def __init__(self, notes: Optional[Iterable[Note]] = None) -> None:
        self._notes: Dict[str, Note] = {}
        for note in notes or []:
            self.add(note)

    def add(self, note: Note) -> None:
        self._notes[note.id] = note

    def read(self, doc_id: str) -> Note:
        note = self._notes.get(doc_id)
        if note is None:
            raise UnreadableDocumentError(doc_id, "unknown id")
        return note

    def list_ids(self) -> List[str]:
        return list(self._notes)


class FolderDocumentSource(DocumentSource):
    """Scan a folder for text notes; ids are POSIX paths relative to the root."""

    def __init__(self, root: Path, extensions: Optional[Set[str]] = None, encoding: str = "utf-8") -> None:
        self.root = Path(root)
        self.extensions = extensions or SUPPORTED_EXTENSIONS
        self.encoding = encoding

    def list_ids(self) -> List[str]:
        """Return discovered note ids in sorted order."""

        return sorted(path.relative_to(self.root).as_posix() for path in self._iter_note_files())

    def read(self, doc_id: str) -> Note:
        """Load a note from disk, mapping every failure to UnreadableDocumentError."""

        root = self.root.resolve()
        path = (root / doc_id).resolve()
        if root != path and root not in path.parents:
            raise UnreadableDocumentError(doc_id, "path escapes the notes folder")
        if not path.is_file():
            raise UnreadableDocumentError(doc_id, "file not found")

        try:
            body = path.read_text(encoding=self.encoding)
            modified = path.stat().st_mtime
        except (OSError, UnicodeDecodeError) as exc:
            raise UnreadableDocumentError(doc_id, str(exc)) from exc

        return Note(
            id=doc_id,
            title=path.stem,
            body=body,
            last_modified=datetime.fromtimestamp(modified, tz=timezone.utc),
        )

    def _iter_note_files(self) -> Iterable[Path]:
        """Yield note files under the root directory."""

        if not self.root.is_dir():
            return
        for path in self.root.rglob("*"):
            if path.is_file() and path.suffix.lower() in self.extensions:
                yield path
