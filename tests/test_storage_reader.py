"""
Tests for storage.reader module - batch input loading.

Tests cover:
- JSON Lines files (blank lines skipped)
- JSON array files
- Validation of individual records
- Error messages naming the offending line / item
"""

import json

import pytest

from brand_signals.exceptions import InputFileNotFoundError, InputValidationError
from brand_signals.storage.reader import load_analysis_inputs


class TestJsonLines:
    """Test JSON Lines inputs."""

    def test_loads_records(self, tmp_path):
        path = tmp_path / "responses.jsonl"
        path.write_text(
            '{"query": "q1", "provider": "kimi", "response": "小米、华为"}\n'
            "\n"
            '{"query": "q2", "provider": "qwen", "response": "text"}\n',
            encoding="utf-8",
        )

        inputs = load_analysis_inputs(path)

        assert [item.provider for item in inputs] == ["kimi", "qwen"]
        assert inputs[0].response == "小米、华为"

    def test_invalid_json_names_line(self, tmp_path):
        path = tmp_path / "responses.jsonl"
        path.write_text('{"response": "ok"}\n{broken\n')

        with pytest.raises(InputValidationError, match="line 2"):
            load_analysis_inputs(path)

    def test_non_object_line(self, tmp_path):
        path = tmp_path / "responses.jsonl"
        path.write_text('"just a string"\n')

        with pytest.raises(InputValidationError, match="expected an object"):
            load_analysis_inputs(path)

    def test_invalid_field_type(self, tmp_path):
        path = tmp_path / "responses.jsonl"
        path.write_text('{"provider": ["not", "a", "string"]}\n')

        with pytest.raises(InputValidationError, match="line 1: provider"):
            load_analysis_inputs(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "responses.jsonl"
        path.write_text("")
        assert load_analysis_inputs(path) == []


class TestJsonArray:
    """Test JSON array inputs."""

    def test_loads_records(self, tmp_path):
        path = tmp_path / "responses.json"
        path.write_text(
            json.dumps([{"response": "a"}, {"response": "b", "timestamp": "t"}])
        )

        inputs = load_analysis_inputs(path)

        assert [item.response for item in inputs] == ["a", "b"]
        assert inputs[1].timestamp == "t"

    def test_leading_whitespace(self, tmp_path):
        path = tmp_path / "responses.json"
        path.write_text('\n   [{"response": "a"}]')
        assert len(load_analysis_inputs(path)) == 1

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "responses.json"
        path.write_text('[{"response": "a"},')

        with pytest.raises(InputValidationError, match="Invalid JSON"):
            load_analysis_inputs(path)

    def test_bad_item_names_index(self, tmp_path):
        path = tmp_path / "responses.json"
        path.write_text('[{"response": "a"}, 5]')

        with pytest.raises(InputValidationError, match="item 1"):
            load_analysis_inputs(path)


class TestMissingFile:
    """Test missing input file."""

    def test_not_found(self, tmp_path):
        with pytest.raises(InputFileNotFoundError, match="not found"):
            load_analysis_inputs(tmp_path / "missing.jsonl")
