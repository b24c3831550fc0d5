"""
Tests for storage.writer module.

Tests file writing utilities for JSON/HTML output with proper error handling.
"""

import json

import pytest

from brand_signals.exceptions import ExportError
from brand_signals.storage.writer import write_json, write_report_html


class TestWriteJson:
    """Tests for write_json function."""

    def test_writes_pretty_json(self, tmp_path):
        """Test that JSON is indented and ends with a newline."""
        filepath = tmp_path / "analysis.json"

        write_json(filepath, {"meta": {"provider": "kimi"}, "detected": []})

        content = filepath.read_text(encoding="utf-8")
        assert content.endswith("\n")
        assert '  "meta": {' in content
        assert json.loads(content) == {"meta": {"provider": "kimi"}, "detected": []}

    def test_cjk_written_as_is(self, tmp_path):
        """Test that non-ASCII brand names are not escaped."""
        filepath = tmp_path / "cjk.json"

        write_json(filepath, {"name": "小米"})

        content = filepath.read_text(encoding="utf-8")
        assert "小米" in content
        assert "\\u" not in content

    def test_writes_lists(self, tmp_path):
        filepath = tmp_path / "list.json"
        write_json(str(filepath), [1, 2, 3])
        assert json.loads(filepath.read_text()) == [1, 2, 3]

    def test_creates_parent_directories(self, tmp_path):
        """Test that missing parent directories are created."""
        filepath = tmp_path / "nested" / "dir" / "out.json"

        write_json(filepath, {})

        assert filepath.exists()

    def test_overwrites_existing_file(self, tmp_path):
        filepath = tmp_path / "out.json"
        write_json(filepath, {"v": 1})
        write_json(filepath, {"v": 2})
        assert json.loads(filepath.read_text())["v"] == 2

    def test_non_serializable_data(self, tmp_path):
        """Test that non-serializable data raises ExportError."""
        with pytest.raises(ExportError, match="not JSON-serializable"):
            write_json(tmp_path / "bad.json", {"value": object()})

    def test_unwritable_location(self, tmp_path):
        """Test that a file in place of the parent directory raises ExportError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(ExportError):
            write_json(blocker / "out.json", {})


class TestWriteReportHtml:
    """Tests for write_report_html function."""

    def test_writes_html(self, tmp_path):
        filepath = tmp_path / "reports" / "report.html"

        write_report_html(filepath, "<html><body>华为</body></html>")

        assert filepath.read_text(encoding="utf-8") == "<html><body>华为</body></html>"

    def test_unwritable_location(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")

        with pytest.raises(ExportError):
            write_report_html(blocker / "report.html", "<html></html>")
