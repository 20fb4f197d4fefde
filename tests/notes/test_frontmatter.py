"""Tests for daybook.notes.frontmatter."""

from datetime import datetime

import pytest
import yaml

from daybook.core.exceptions import ConfigurationError
from daybook.notes.frontmatter import read_front_matter, render_front_matter

MOMENT = datetime(2023, 10, 19, 20, 49, 0)


class TestRenderFrontMatter:
    def test_org(self):
        text = render_front_matter("org", "Thursday 19 October 2023", MOMENT, ["journal"], "20231019T204900")
        assert "#+title:      Thursday 19 October 2023" in text
        assert "#+date:       [2023-10-19 Thu 20:49]" in text
        assert "#+filetags:   :journal:" in text
        assert "#+identifier: 20231019T204900" in text

    def test_org_multiple_tags(self):
        text = render_front_matter("org", "t", MOMENT, ["journal", "work"], "20231019T204900")
        assert ":journal:work:" in text

    def test_markdown_yaml_is_valid_yaml(self):
        text = render_front_matter("markdown-yaml", "A: title", MOMENT, ["journal"], "20231019T204900")
        assert text.startswith("---\n")
        data = yaml.safe_load(text.split("---")[1])
        assert data["title"] == "A: title"
        assert data["tags"] == ["journal"]
        assert data["identifier"] == "20231019T204900"

    def test_markdown_toml(self):
        text = render_front_matter("markdown-toml", 'Say "hi"', MOMENT, ["a", "b"], "20231019T204900")
        assert text.startswith("+++\n")
        assert 'title      = "Say \\"hi\\""' in text
        assert 'tags       = ["a", "b"]' in text

    def test_text(self):
        text = render_front_matter("text", "T", MOMENT, ["journal"], "20231019T204900")
        assert "date:       2023-10-19" in text
        assert text.rstrip().endswith("-" * 27)

    def test_unknown_file_type(self):
        with pytest.raises(ConfigurationError):
            render_front_matter("docx", "T", MOMENT, [], "20231019T204900")


class TestReadFrontMatter:
    def test_reads_markdown_yaml(self, tmp_path):
        path = tmp_path / "note.md"
        path.write_text(render_front_matter("markdown-yaml", "T", MOMENT, ["journal"], "x") + "\nbody\n")
        assert read_front_matter(path)["title"] == "T"

    def test_other_layouts_are_empty(self, tmp_path):
        path = tmp_path / "note.org"
        path.write_text(render_front_matter("org", "T", MOMENT, ["journal"], "x"))
        assert read_front_matter(path) == {}

    def test_missing_file(self, tmp_path):
        assert read_front_matter(tmp_path / "nope.md") == {}

    def test_broken_yaml(self, tmp_path):
        path = tmp_path / "note.md"
        path.write_text("---\ntitle: [unclosed\n---\n")
        assert read_front_matter(path) == {}
