"""
Result records produced by the analysis engine.

All records are created fresh per analyze() call. Attribute names are
snake_case; to_dict() renders the camelCase JSON shape consumed by report
views (meta / brandAnalysis / competitorAnalysis / originalContent).
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class MentionRecord:
    """
    One occurrence of the target brand in the response.

    Attributes:
        index: Character offset of the match in the response text
        context: Whitespace-collapsed surrounding text wrapped in "..."
        type: Match kind; only "direct" (literal match) exists today
    """

    index: int
    context: str
    type: str = "direct"

    def __post_init__(self):
        """Validate index and type."""
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got: {self.index}")
        if self.type != "direct":
            raise ValueError(f"type must be 'direct', got: {self.type}")

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, "type": self.type, "context": self.context}


@dataclass
class RankLine:
    """A list line (or discovery snippet) that contributed rank information."""

    rank: int | None
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"rank": self.rank, "content": self.content}


@dataclass
class RankingInfo:
    """
    Rank information for one entity.

    Attributes:
        positions: Every rank found, in scan order (may be empty)
        best_rank: Lowest explicit rank, or an implicit rank, or None
        raw_lines: Lines the ranks were read from
        first_index: Offset of the first occurrence (None when not tracked)
        is_implicit: True when best_rank was inferred from text order
    """

    positions: list[int] = field(default_factory=list)
    best_rank: int | None = None
    raw_lines: list[RankLine] = field(default_factory=list)
    first_index: int | None = None
    is_implicit: bool = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "positions": list(self.positions),
            "bestRank": self.best_rank,
            "rawLines": [line.to_dict() for line in self.raw_lines],
            "isImplicit": self.is_implicit,
        }
        if self.first_index is not None:
            data["firstIndex"] = self.first_index
        return data


@dataclass
class CompetitorResult:
    """
    A competitor found in the response, configured or discovered.

    Attributes:
        name: Canonical name (configured name, or cleaned candidate text)
        category: Configured category, or "Detected" for discovered entities
        mentions: Number of mentions/proposals seen (always >= 1)
        ranking: Rank information
        is_heuristic: True when proposed by pattern discovery
    """

    name: str
    category: str
    mentions: int
    ranking: RankingInfo
    is_heuristic: bool = False

    def __post_init__(self):
        """Validate mentions is at least 1."""
        if self.mentions < 1:
            raise ValueError(f"mentions must be >= 1, got: {self.mentions}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category,
            "mentions": self.mentions,
            "ranking": self.ranking.to_dict(),
            "isHeuristic": self.is_heuristic,
        }


@dataclass(frozen=True)
class Candidate:
    """
    Raw entity proposal emitted by a discovery strategy.

    Attributes:
        raw: Unnormalized text (list line content, table cell, bold span, ...)
        rank: Explicit rank stated next to it, or None
        offset: Character offset used for first-occurrence ordering
    """

    raw: str
    rank: int | None
    offset: int


@dataclass
class AnalysisMeta:
    timestamp: str
    provider: str | None
    query: str | None
    processing_time: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "provider": self.provider,
            "query": self.query,
            "processingTime": self.processing_time,
        }


@dataclass
class BrandAnalysis:
    name: str
    mentions: list[MentionRecord]
    ranking: RankingInfo

    @property
    def total_mentions(self) -> int:
        return len(self.mentions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "totalMentions": self.total_mentions,
            "mentions": [m.to_dict() for m in self.mentions],
            "ranking": self.ranking.to_dict(),
        }


@dataclass
class AnalysisResult:
    """
    Complete analysis of one response.

    Attributes:
        meta: Timestamp, provider, query and processing time
        brand_analysis: Target brand mentions and ranking
        detected: Known and discovered competitors, in detection order
        original_content: Response text when include_original is enabled
    """

    meta: AnalysisMeta
    brand_analysis: BrandAnalysis
    detected: list[CompetitorResult]
    original_content: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the JSON-shaped analysis record."""
        return {
            "meta": self.meta.to_dict(),
            "brandAnalysis": self.brand_analysis.to_dict(),
            "competitorAnalysis": {
                "detected": [c.to_dict() for c in self.detected],
            },
            "originalContent": self.original_content,
        }
