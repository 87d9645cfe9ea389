"""
test_host.py
------------
Unit tests for the file-backed VaultHost and NoteEditor.
"""
import json

import pytest

from paste_renamer.core.exceptions import NoActiveDocumentError
from paste_renamer.paste.classifier import ObservedFile
from paste_renamer.paste.links import LinkStyle
from paste_renamer.workspace.host import (
    Cursor,
    NoteEditor,
    VaultHost,
    read_use_markdown_links,
)
from paste_renamer.workspace.session import Focus


def host_for(vault, note="Trip.md", line=8, ch=0, link_style=None):
    focus = Focus(note=vault / note, line=line, ch=ch) if note else None
    return VaultHost(vault, focus=lambda: focus, link_style=link_style)


class TestActiveDocument:
    """Test get_active_document."""

    def test_reads_note(self, vault):
        document = host_for(vault).get_active_document()
        assert document.basename == "Trip"
        assert document.frontmatter["imageNameKey"] == "lisbon"

    def test_relative_note_resolved_against_vault(self, vault):
        host = VaultHost(vault, focus=lambda: Focus(note="Trip.md", line=0))
        assert host.get_active_document().path == vault / "Trip.md"

    def test_no_focus(self, vault):
        assert host_for(vault, note=None).get_active_document() is None

    def test_missing_note(self, vault):
        assert host_for(vault, note="Gone.md").get_active_document() is None

    def test_note_without_frontmatter(self, vault):
        (vault / "Plain.md").write_text("# Plain\n")
        document = host_for(vault, note="Plain.md").get_active_document()
        assert document.frontmatter == {}

    def test_undecodable_note(self, vault):
        (vault / "Latin1.md").write_bytes(b"caf\xe9\n")
        host = host_for(vault, note="Latin1.md", line=0)
        with pytest.raises(NoActiveDocumentError) as exc_info:
            host.get_active_document()
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
        with pytest.raises(NoActiveDocumentError):
            host.get_editor()


class TestEditor:
    """Test get_editor and NoteEditor."""

    def test_editor_at_cursor(self, vault):
        editor = host_for(vault, line=8, ch=4).get_editor()
        assert editor.get_cursor() == Cursor(8, 4)
        assert editor.get_line(8) == "![[assets/Pasted image 20221026172752.png]]"

    def test_no_cursor_line(self, vault):
        assert host_for(vault, line=None).get_editor() is None

    def test_cursor_past_end(self, vault):
        assert host_for(vault, line=500).get_editor() is None

    def test_replace_range_keeps_other_lines(self, vault):
        editor = host_for(vault).get_editor()
        before = (vault / "Trip.md").read_text().splitlines()
        editor.replace_range(8, 0, len(before[8]), "![[assets/new.png]]")
        after = (vault / "Trip.md").read_text().splitlines()
        assert after[8] == "![[assets/new.png]]"
        assert after[:8] == before[:8]
        assert after[9:] == before[9:]

    def test_crlf_preserved(self, tmp_dir):
        note = tmp_dir / "win.md"
        note.write_bytes(b"one\r\n![[a.png]]\r\nthree\r\n")
        editor = NoteEditor(note, Cursor(1))
        assert editor.get_line(1) == "![[a.png]]"
        editor.replace_range(1, 0, 10, "![[b.png]]")
        assert note.read_bytes() == b"one\r\n![[b.png]]\r\nthree\r\n"

    def test_line_after_last_newline(self, tmp_dir):
        note = tmp_dir / "n.md"
        note.write_text("one\n")
        editor = NoteEditor(note, Cursor(1))
        assert editor.get_line(1) == ""
        editor.replace_range(1, 0, 0, "two")
        assert note.read_text() == "one\ntwo"

    def test_only_newlines_break_lines(self, tmp_dir):
        note = tmp_dir / "n.md"
        note.write_bytes("a\x0cb\x1cc\u2028d\n![[a.png]]\n".encode("utf-8"))
        editor = NoteEditor(note, Cursor(1))
        assert editor.line_count() == 2
        assert editor.get_line(0) == "a\x0cb\x1cc\u2028d"
        assert editor.get_line(1) == "![[a.png]]"

    def test_lone_carriage_return(self, tmp_dir):
        note = tmp_dir / "n.md"
        note.write_bytes(b"one\rtwo\r\nthree")
        editor = NoteEditor(note, Cursor(1))
        assert editor.line_count() == 3
        assert editor.get_line(1) == "two"
        editor.replace_range(1, 0, 3, "2")
        assert note.read_bytes() == b"one\r2\r\nthree"

    def test_out_of_range(self, tmp_dir):
        note = tmp_dir / "n.md"
        note.write_text("one\n")
        with pytest.raises(IndexError):
            NoteEditor(note, Cursor(5)).get_line(5)


class TestRenameFile:
    """Test rename_file."""

    def test_rename(self, vault, pasted_image):
        host = host_for(vault)
        file = ObservedFile.from_path(vault, pasted_image)
        host.rename_file(file, "assets/new.png")
        assert not pasted_image.exists()
        assert (vault / "assets" / "new.png").exists()

    def test_destination_exists(self, vault, pasted_image):
        (vault / "assets" / "new.png").write_bytes(b"")
        file = ObservedFile.from_path(vault, pasted_image)
        with pytest.raises(FileExistsError):
            host_for(vault).rename_file(file, "assets/new.png")
        assert pasted_image.exists()

    def test_source_missing(self, vault):
        file = ObservedFile(name="gone.png", parent="assets", created_at=0.0)
        with pytest.raises(FileNotFoundError):
            host_for(vault).rename_file(file, "assets/new.png")


class TestLinkStyle:
    """Test link style resolution."""

    def write_config(self, vault, data):
        (vault / ".obsidian").mkdir(exist_ok=True)
        (vault / ".obsidian" / "app.json").write_text(json.dumps(data))

    def test_default_wikilinks(self, vault):
        assert read_use_markdown_links(vault) is None
        assert host_for(vault).link_style() is LinkStyle.WIKILINK

    def test_markdown_from_config(self, vault):
        self.write_config(vault, {"useMarkdownLinks": True})
        assert host_for(vault).link_style() is LinkStyle.MARKDOWN

    def test_config_without_key(self, vault):
        self.write_config(vault, {"attachmentFolderPath": "assets"})
        assert host_for(vault).link_style() is LinkStyle.WIKILINK

    def test_invalid_config(self, vault):
        (vault / ".obsidian").mkdir()
        (vault / ".obsidian" / "app.json").write_text("{not json")
        assert read_use_markdown_links(vault) is None

    def test_explicit_style_wins(self, vault):
        self.write_config(vault, {"useMarkdownLinks": True})
        host = host_for(vault, link_style=LinkStyle.WIKILINK)
        assert host.link_style() is LinkStyle.WIKILINK
