"""
Tests for storage.exporter module - CSV exports of analysis records.

Tests cover:
- Analysis rows (brand rank, mention count, extracted brand list)
- Competitor rows
- AnalysisResult objects and dict records
- Empty exports (header only)
- Write failures surfacing as ExportError
"""

import csv

import pytest

from brand_signals.exceptions import ExportError
from brand_signals.extractor import ResponseAnalyzer
from brand_signals.storage.exporter import (
    ANALYSIS_COLUMNS,
    COMPETITOR_COLUMNS,
    export_analyses_csv,
    export_competitors_csv,
)


@pytest.fixture
def results():
    analyzer = ResponseAnalyzer(
        {
            "targetBrand": "MyBrand",
            "competitors": [{"name": "CompetitorA", "category": "Test"}],
        }
    )
    return [
        analyzer.analyze(
            {
                "query": "best tools?",
                "provider": "deepseek",
                "response": "1. CompetitorA\n2. MyBrand\n3. NewComp",
            }
        ),
        analyzer.analyze(
            {"query": "cheap tools?", "provider": "kimi", "response": "**Solo**"}
        ),
    ]


def read_rows(path):
    with path.open(encoding="utf-8", newline="") as f:
        return list(csv.DictReader(f))


class TestExportAnalysesCsv:
    """Test export_analyses_csv() function."""

    def test_rows(self, tmp_path, results):
        path = tmp_path / "analyses.csv"

        count = export_analyses_csv(path, results)

        rows = read_rows(path)
        assert count == 2
        assert rows[0] == {
            "Query": "best tools?",
            "Provider": "deepseek",
            "Response": "1. CompetitorA\n2. MyBrand\n3. NewComp",
            "Target Brand Rank": "2",
            "Mentions Count": "1",
            "Total Brands Found": "2",
            "Extracted Brands": "CompetitorA(#1); NewComp(#3)",
        }

    def test_unranked_brand(self, tmp_path, results):
        path = tmp_path / "analyses.csv"

        export_analyses_csv(path, results)

        second = read_rows(path)[1]
        assert second["Target Brand Rank"] == "-"
        assert second["Mentions Count"] == "0"
        assert second["Extracted Brands"] == "Solo(#1)"

    def test_dict_records(self, tmp_path, results):
        path = tmp_path / "analyses.csv"

        export_analyses_csv(path, [r.to_dict() for r in results])

        assert read_rows(path)[0]["Extracted Brands"] == "CompetitorA(#1); NewComp(#3)"

    def test_missing_rank_in_brand_list(self, tmp_path):
        record = {
            "meta": {"query": "q", "provider": "p"},
            "brandAnalysis": {"totalMentions": 0, "ranking": {"bestRank": None}},
            "competitorAnalysis": {
                "detected": [{"name": "Alpha", "ranking": {"bestRank": None}}]
            },
        }
        path = tmp_path / "analyses.csv"

        export_analyses_csv(path, [record])

        assert read_rows(path)[0]["Extracted Brands"] == "Alpha(#-)"

    def test_empty_export_writes_header(self, tmp_path):
        path = tmp_path / "empty.csv"

        assert export_analyses_csv(path, []) == 0

        header = path.read_text(encoding="utf-8").strip()
        assert header == ",".join(ANALYSIS_COLUMNS)

    def test_write_failure(self, tmp_path, results):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")

        with pytest.raises(ExportError, match="Cannot write CSV"):
            export_analyses_csv(blocker / "out.csv", results)


class TestExportCompetitorsCsv:
    """Test export_competitors_csv() function."""

    def test_one_row_per_competitor(self, tmp_path, results):
        path = tmp_path / "competitors.csv"

        count = export_competitors_csv(path, results)

        rows = read_rows(path)
        assert count == 3
        assert [row["name"] for row in rows] == ["CompetitorA", "NewComp", "Solo"]
        assert rows[0]["category"] == "Test"
        assert rows[0]["is_heuristic"] == "False"
        assert rows[1]["best_rank"] == "3"
        assert rows[2]["provider"] == "kimi"
        assert rows[2]["is_implicit"] == "True"

    def test_header(self, tmp_path):
        path = tmp_path / "competitors.csv"
        export_competitors_csv(path, [])
        assert path.read_text(encoding="utf-8").strip() == ",".join(COMPETITOR_COLUMNS)
