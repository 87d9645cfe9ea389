"""
test_fs_md_utils.py
-------------------
Unit tests for paste_renamer.utils.fs and paste_renamer.utils.md.
"""
import pytest

from paste_renamer.utils.fs import basename, extension, join, split_name, to_vault_path
from paste_renamer.utils.md import frontmatter_block, parse_frontmatter


class TestJoin:
    """Test vault path joining."""

    def test_simple(self):
        assert join("assets", "a.png") == "assets/a.png"

    def test_root_parent(self):
        assert join("", "a.png") == "a.png"

    def test_redundant_slashes_and_dots(self):
        assert join("assets/", "./img/", "a.png") == "assets/img/a.png"

    def test_leading_slash_kept(self):
        assert join("/vault", "a.png") == "/vault/a.png"


class TestNames:
    """Test basename, extension and split_name."""

    def test_basename(self):
        assert basename("assets/img/a.png") == "a.png"

    def test_extension(self):
        assert extension("assets/2024.01.15-093000.png") == "png"

    def test_no_extension(self):
        assert extension("README") == ""
        assert split_name("README") == ("README", "")

    def test_split_name_with_dots(self):
        assert split_name("2022.10.26-052752.png") == ("2022.10.26-052752", "png")

    def test_split_name_with_spaces(self):
        assert split_name("Pasted image 1.png") == ("Pasted image 1", "png")


class TestToVaultPath:
    """Test to_vault_path."""

    def test_nested(self, tmp_dir):
        assert to_vault_path(tmp_dir, tmp_dir / "assets" / "a.png") == "assets/a.png"

    def test_root_itself(self, tmp_dir):
        assert to_vault_path(tmp_dir, tmp_dir) == ""

    def test_outside(self, tmp_dir):
        with pytest.raises(ValueError):
            to_vault_path(tmp_dir / "vault", tmp_dir / "other.png")


class TestFrontmatter:
    """Test frontmatter_block and parse_frontmatter."""

    def test_block(self):
        assert frontmatter_block("---\nimageNameKey: trip\n---\n\nBody text") == "imageNameKey: trip"

    def test_body_fence_not_included(self):
        content = "---\na: 1\n---\nBody\n---\nmore\n"
        assert frontmatter_block(content) == "a: 1"

    def test_no_frontmatter(self):
        assert frontmatter_block("# Title\nText") == ""
        assert frontmatter_block("") == ""

    def test_unclosed_frontmatter(self):
        assert frontmatter_block("---\nkey: value\n") == ""

    def test_crlf(self):
        assert frontmatter_block("---\r\nkey: value\r\n---\r\n") == "key: value"

    def test_parse(self):
        assert parse_frontmatter("---\nimageNameKey: trip\ntags: [a]\n---\n") == {
            "imageNameKey": "trip",
            "tags": ["a"],
        }

    def test_parse_malformed(self):
        assert parse_frontmatter("---\nkey: [oops\n---\n") == {}

    def test_parse_non_mapping(self):
        assert parse_frontmatter("---\n- a\n- b\n---\n") == {}

    def test_parse_empty(self):
        assert parse_frontmatter("---\n---\nBody") == {}
