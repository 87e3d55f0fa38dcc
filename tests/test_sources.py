"""
Unit tests for document sources.
"""

import pytest

from vaultcore.errors import UnreadableDocumentError
from vaultcore.indexing.sources import FolderDocumentSource, InMemoryDocumentSource
from vaultcore.models.domain import Note


@pytest.fixture
def notes_folder(tmp_path):
    (tmp_path / "a.md").write_text("# Alpha\nFirst note.", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.txt").write_text("Second note.", encoding="utf-8")
    (tmp_path / "image.png").write_bytes(b"\x89PNG")
    (tmp_path / "bad.md").write_bytes(b"\xff\xfe\xfa\xfb")
    return tmp_path


class TestFolderDocumentSource:
    """Tests for FolderDocumentSource."""

    def test_list_ids_filters_extensions(self, notes_folder):
        source = FolderDocumentSource(notes_folder)
        assert source.list_ids() == ["a.md", "bad.md", "sub/b.txt"]

    def test_read_note(self, notes_folder):
        note = FolderDocumentSource(notes_folder).read("sub/b.txt")

        assert note.id == "sub/b.txt"
        assert note.title == "b"
        assert note.body == "Second note."
        assert note.last_modified is not None

    def test_missing_file(self, notes_folder):
        with pytest.raises(UnreadableDocumentError) as exc_info:
            FolderDocumentSource(notes_folder).read("missing.md")
        assert exc_info.value.doc_id == "missing.md"

    def test_path_outside_root(self, notes_folder):
        with pytest.raises(UnreadableDocumentError):
            FolderDocumentSource(notes_folder / "sub").read("../a.md")

    def test_undecodable_file(self, notes_folder):
        with pytest.raises(UnreadableDocumentError):
            FolderDocumentSource(notes_folder).read("bad.md")

    def test_missing_root_lists_nothing(self, tmp_path):
        assert FolderDocumentSource(tmp_path / "nope").list_ids() == []


class TestInMemoryDocumentSource:
    """Tests for InMemoryDocumentSource."""

    def test_read_and_list(self):
        source = InMemoryDocumentSource([Note(id="n1", title="One", body="Body")])
        source.add(Note(id="n2", title="Two", body="Body"))

        assert source.list_ids() == ["n1", "n2"]
        assert source.read("n2").title == "Two"

    def test_unknown_id(self):
        with pytest.raises(UnreadableDocumentError, match="unknown id"):
            InMemoryDocumentSource().read("ghost")
