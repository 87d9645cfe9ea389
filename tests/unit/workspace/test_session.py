"""
test_session.py
---------------
Unit tests for the focus session file.
"""
from pathlib import Path

import pytest

from paste_renamer.core.exceptions import SessionError
from paste_renamer.workspace.session import Focus, FocusSession


@pytest.fixture
def session(tmp_dir):
    return FocusSession(tmp_dir / "state" / "session.yaml")


class TestFocus:
    """Test Focus validation."""

    def test_defaults(self):
        focus = Focus(note=Path("a.md"))
        assert focus.line is None
        assert focus.ch == 0

    def test_negative_line(self):
        with pytest.raises(SessionError):
            Focus(note=Path("a.md"), line=-1)

    def test_negative_column(self):
        with pytest.raises(SessionError):
            Focus(note=Path("a.md"), line=0, ch=-2)


class TestFocusSession:
    """Test FocusSession persistence."""

    def test_missing_file(self, session):
        assert session.load() is None

    def test_save_and_load(self, session, tmp_dir):
        focus = Focus(note=tmp_dir / "Trip.md", line=8, ch=3)
        session.save(focus)
        assert session.load() == focus

    def test_save_without_cursor(self, session, tmp_dir):
        session.save(Focus(note=tmp_dir / "Trip.md"))
        assert session.load().line is None

    def test_clear(self, session, tmp_dir):
        session.save(Focus(note=tmp_dir / "Trip.md", line=0))
        session.clear()
        assert session.load() is None

    def test_clear_without_file(self, session):
        session.clear()
        assert session.load() is None

    def test_empty_file(self, session):
        session.path.parent.mkdir(parents=True)
        session.path.write_text("")
        assert session.load() is None

    def test_missing_note(self, session):
        session.path.parent.mkdir(parents=True)
        session.path.write_text("line: 3\n")
        with pytest.raises(SessionError, match="must name a note"):
            session.load()

    def test_bad_line(self, session):
        session.path.parent.mkdir(parents=True)
        session.path.write_text("note: a.md\nline: three\n")
        with pytest.raises(SessionError, match="Invalid cursor"):
            session.load()

    def test_malformed_yaml(self, session):
        session.path.parent.mkdir(parents=True)
        session.path.write_text("note: [a.md\n")
        with pytest.raises(SessionError, match="Cannot parse"):
            session.load()
