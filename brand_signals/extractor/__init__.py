"""
Extractor module for analyzing LLM responses for brand signals.

This module extracts structured signals from free-text LLM answers: target
brand mentions with context, explicit and implicit ranks, known competitors,
and competitors discovered heuristically from lists, tables, bold headers and
CJK enumerations.

Public API:
    - ResponseAnalyzer: Configured analyzer; analyze() one response at a time
    - AnalysisResult: Complete analysis of one response (to_dict() for JSON)
    - CompetitorResult: A known or discovered competitor with its ranking
    - RankingInfo: Positions, best rank and source lines for one entity
    - MentionRecord: One target brand mention with context
    - scan_mentions: Find target brand mentions with context
    - extract_ranking: Read explicit ranks from numbered list lines
"""

from brand_signals.extractor.analyzer import ResponseAnalyzer
from brand_signals.extractor.mention_detector import scan_mentions
from brand_signals.extractor.models import (
    AnalysisResult,
    CompetitorResult,
    MentionRecord,
    RankingInfo,
)
from brand_signals.extractor.rank_extractor import extract_ranking

__all__ = [
    "AnalysisResult",
    "CompetitorResult",
    "MentionRecord",
    "RankingInfo",
    "ResponseAnalyzer",
    "extract_ranking",
    "scan_mentions",
]
