"""
Tests for utils.console module - dual-mode CLI output utilities.

This module tests console output functions to ensure:
- OutputMode class correctly manages format/quiet state
- Output functions (success, error, warning, info) work in all modes
- Context managers (spinner, create_progress_bar) work correctly
- Display functions (print_analysis, print_summary_table, print_final_summary)
  adapt to modes
- JSON buffering and flushing works correctly in agent mode (CJK kept as-is)
- Rich Console methods are called correctly in human mode
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from brand_signals.extractor import ResponseAnalyzer
from brand_signals.report.summary import summarize_analyses
from brand_signals.utils.console import (
    NoOpProgress,
    OutputMode,
    create_progress_bar,
    error,
    info,
    output_mode,
    print_analysis,
    print_banner,
    print_final_summary,
    print_summary_table,
    spinner,
    success,
    warning,
)

# ========================================================================
# Fixtures
# ========================================================================


@pytest.fixture
def reset_output_mode():
    """Reset global output_mode to default state after each test."""
    original_format = output_mode.format
    original_quiet = output_mode.quiet
    output_mode._json_buffer.clear()

    yield

    # Restore original state
    output_mode.format = original_format
    output_mode.quiet = original_quiet
    output_mode._json_buffer.clear()


@pytest.fixture
def analysis():
    """One analysis with a known and a discovered competitor."""
    analyzer = ResponseAnalyzer(
        {"targetBrand": "Amazfit", "competitors": [{"name": "小米"}]}
    )
    return analyzer.analyze(
        {"provider": "deepseek", "response": "1. 小米\n2. Amazfit\n3. Garmin"}
    )


@pytest.fixture
def summary(analysis):
    return summarize_analyses([analysis])


# ========================================================================
# OutputMode
# ========================================================================


class TestOutputMode:
    """Test OutputMode state and JSON buffering."""

    def test_default_initialization(self):
        mode = OutputMode()
        assert mode.format == "text"
        assert mode.quiet is False
        assert mode.is_human()
        assert not mode.is_agent()

    def test_json_format(self):
        mode = OutputMode("json")
        assert mode.is_agent()
        assert not mode.is_human()

    def test_invalid_format_raises_error(self):
        with pytest.raises(ValueError, match="Invalid format"):
            OutputMode("xml")

    def test_flush_json_outputs_and_clears_buffer(self, capsys):
        mode = OutputMode("json")
        mode.add_json("name", "小米")

        mode.flush_json()

        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"name": "小米"}
        assert "小米" in captured.out
        assert mode._json_buffer == {}

    def test_flush_json_no_op_in_human_mode(self, capsys):
        mode = OutputMode("text")
        mode.add_json("key", "value")

        mode.flush_json()

        assert capsys.readouterr().out == ""

    def test_flush_json_empty_buffer(self, capsys):
        OutputMode("json").flush_json()
        assert capsys.readouterr().out == ""


# ========================================================================
# Output functions
# ========================================================================


class TestOutputFunctions:
    """Test success(), error(), warning() and info()."""

    @patch("brand_signals.utils.console.console")
    def test_success_human_mode(self, mock_console, reset_output_mode):
        output_mode.format = "text"

        success("Analysis complete")

        call_args = mock_console.print.call_args[0][0]
        assert "[green]" in call_args
        assert "Analysis complete" in call_args

    def test_success_agent_mode_buffers(self, reset_output_mode):
        output_mode.format = "json"

        success("Analysis complete")

        assert output_mode._json_buffer["status"] == "success"
        assert output_mode._json_buffer["message"] == "Analysis complete"

    @patch("brand_signals.utils.console.console_err")
    def test_error_human_mode_uses_stderr(self, mock_console_err, reset_output_mode):
        output_mode.format = "text"

        error("Config not found")

        assert "Config not found" in mock_console_err.print.call_args[0][0]

    def test_error_agent_mode_buffers(self, reset_output_mode):
        output_mode.format = "json"

        error("Config not found")

        assert output_mode._json_buffer["status"] == "error"
        assert output_mode._json_buffer["error"] == "Config not found"

    def test_warning_agent_mode_buffers(self, reset_output_mode):
        output_mode.format = "json"
        warning("No analyses to export")
        assert output_mode._json_buffer["warning"] == "No analyses to export"

    @patch("brand_signals.utils.console.console")
    def test_info_quiet_mode_silent(self, mock_console, reset_output_mode):
        output_mode.format = "text"
        output_mode.quiet = True

        info("hidden")

        mock_console.print.assert_not_called()

    def test_info_agent_mode_silent(self, reset_output_mode):
        output_mode.format = "json"
        info("hidden")
        assert output_mode._json_buffer == {}


# ========================================================================
# Context managers
# ========================================================================


class TestSpinnerAndProgress:
    """Test spinner() and create_progress_bar()."""

    @patch("brand_signals.utils.console.console")
    def test_spinner_human_mode_shows_status(self, mock_console, reset_output_mode):
        output_mode.format = "text"
        output_mode.quiet = False

        with spinner("Analyzing..."):
            pass

        mock_console.status.assert_called_once()
        assert "Analyzing..." in mock_console.status.call_args[0][0]

    def test_spinner_agent_mode_yields_none(self, reset_output_mode):
        output_mode.format = "json"

        with spinner("Analyzing...") as status:
            assert status is None

    @patch("brand_signals.utils.console.Progress")
    def test_progress_bar_human_mode(self, mock_progress_class, reset_output_mode):
        output_mode.format = "text"
        output_mode.quiet = False
        mock_progress_class.return_value = MagicMock()

        result = create_progress_bar()

        assert result is mock_progress_class.return_value

    def test_progress_bar_agent_mode_returns_noop(self, reset_output_mode):
        output_mode.format = "json"
        assert isinstance(create_progress_bar(), NoOpProgress)

    def test_progress_bar_quiet_mode_returns_noop(self, reset_output_mode):
        output_mode.format = "text"
        output_mode.quiet = True
        assert isinstance(create_progress_bar(), NoOpProgress)

    def test_noop_progress_workflow(self):
        with NoOpProgress() as progress:
            task = progress.add_task("Analyzing", total=3)
            progress.advance(task)
        assert task == 0


# ========================================================================
# Display functions
# ========================================================================


class TestPrintAnalysis:
    """Test print_analysis()."""

    def test_agent_mode_buffers_record(self, analysis, reset_output_mode):
        output_mode.format = "json"

        print_analysis(analysis)

        record = output_mode._json_buffer["analysis"]
        assert record["brandAnalysis"]["name"] == "Amazfit"
        names = [c["name"] for c in record["competitorAnalysis"]["detected"]]
        assert names == ["小米", "Garmin"]

    def test_quiet_mode_tab_separated(self, analysis, capsys, reset_output_mode):
        output_mode.format = "text"
        output_mode.quiet = True

        print_analysis(analysis)

        assert capsys.readouterr().out == "2\t1\t2\n"

    @patch("brand_signals.utils.console.console")
    def test_human_mode_prints_panel_and_table(
        self, mock_console, analysis, reset_output_mode
    ):
        output_mode.format = "text"
        output_mode.quiet = False

        print_analysis(analysis)

        # panel, competitor table, implicit-rank footnote
        assert mock_console.print.call_count == 3


class TestPrintSummaryTable:
    """Test print_summary_table()."""

    def test_agent_mode_buffers_summary(self, summary, reset_output_mode):
        output_mode.format = "json"

        print_summary_table(summary)

        assert output_mode._json_buffer["summary"]["total_responses"] == 1

    @patch("brand_signals.utils.console.console")
    def test_quiet_mode_silent(self, mock_console, summary, reset_output_mode):
        output_mode.format = "text"
        output_mode.quiet = True

        print_summary_table(summary)

        mock_console.print.assert_not_called()

    @patch("brand_signals.utils.console.console")
    def test_human_mode_prints_tables(self, mock_console, summary, reset_output_mode):
        output_mode.format = "text"
        output_mode.quiet = False

        print_summary_table(summary)

        assert mock_console.print.call_count == 2


class TestPrintFinalSummary:
    """Test print_final_summary()."""

    def test_agent_mode_flushes(self, summary, capsys, reset_output_mode):
        output_mode.format = "json"

        print_final_summary("2025-11-02T08-00-00Z", summary, ["out.json"])

        data = json.loads(capsys.readouterr().out)
        assert data["batch_id"] == "2025-11-02T08-00-00Z"
        assert data["outputs"] == ["out.json"]

    def test_quiet_mode_tab_separated(self, summary, capsys, reset_output_mode):
        output_mode.format = "text"
        output_mode.quiet = True

        print_final_summary("b1", summary, [])

        assert capsys.readouterr().out == "b1\t1\t1\t2.0\n"


class TestPrintBanner:
    """Test print_banner()."""

    @patch("brand_signals.utils.console.console")
    def test_human_mode(self, mock_console, reset_output_mode):
        output_mode.format = "text"
        output_mode.quiet = False

        print_banner("0.1.0")

        assert "0.1.0" in mock_console.print.call_args[0][0]

    @patch("brand_signals.utils.console.console")
    def test_agent_mode_silent(self, mock_console, reset_output_mode):
        output_mode.format = "json"
        print_banner("0.1.0")
        mock_console.print.assert_not_called()
