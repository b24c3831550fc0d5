"""
Aggregate statistics over many analyses.

summarize_analyses() turns a batch of analysis records (one per LLM response)
into the numbers a brand report leads with: how often the target brand is
mentioned, where it ranks, which competitors dominate the answers, and how
each provider treats the brand.

Records may be AnalysisResult objects or their to_dict() form (e.g. loaded
back from a JSON file), so summaries can be rebuilt from saved output.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

from ..extractor.models import AnalysisResult

# Per-provider rank buckets, in display order
RANK_BUCKETS = ("1", "2", "3", "4+", "unranked")

DEFAULT_TOP_N = 10


@dataclass
class CompetitorStat:
    name: str
    mentions: int
    average_rank: float | None


@dataclass
class ProviderStat:
    """
    Brand visibility for one provider.

    Attributes:
        provider: Provider identifier ("unknown" when records carry none)
        mentioned: Responses mentioning the target brand
        total: Responses from this provider
        mention_rate: mentioned / total (0.0 when total is 0)
        rank_buckets: Counts per bucket "1", "2", "3", "4+" and "unranked"
                      (mentioned but never ranked)
    """

    provider: str
    mentioned: int
    total: int
    mention_rate: float
    rank_buckets: dict[str, int] = field(
        default_factory=lambda: dict.fromkeys(RANK_BUCKETS, 0)
    )


@dataclass
class AnalysisSummary:
    total_responses: int
    mentioned_responses: int
    mention_rate: float
    average_rank: float | None
    first_rank_count: int
    top_competitors: list[CompetitorStat]
    providers: list[ProviderStat]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _as_record(record: AnalysisResult | dict[str, Any]) -> dict[str, Any]:
    if isinstance(record, AnalysisResult):
        return record.to_dict()
    return record


def _rank_bucket(best_rank: int | None, mentioned: bool) -> str | None:
    if best_rank:
        return str(best_rank) if best_rank <= 3 else "4+"
    return "unranked" if mentioned else None


def _average(values: list[int]) -> float | None:
    return round(sum(values) / len(values), 1) if values else None


def summarize_analyses(
    records: list[AnalysisResult] | list[dict[str, Any]],
    top_n: int = DEFAULT_TOP_N,
) -> AnalysisSummary:
    """
    Aggregate analysis records into an AnalysisSummary.

    Args:
        records: AnalysisResult objects or their dict form
        top_n: Number of competitors to keep, by summed mention count

    Returns:
        AnalysisSummary. Providers appear in first-seen order; competitors
        with equal mention counts keep first-seen order.

    Example:
        >>> summary = summarize_analyses([analyzer.analyze(item) for item in inputs])
        >>> summary.mention_rate
        0.75
    """
    rows = [_as_record(record) for record in records]

    mentioned_responses = 0
    brand_ranks: list[int] = []
    competitor_mentions: dict[str, int] = {}
    competitor_ranks: dict[str, list[int]] = {}
    providers: dict[str, ProviderStat] = {}

    for row in rows:
        brand = row.get("brandAnalysis") or {}
        mentioned = (brand.get("totalMentions") or 0) > 0
        best_rank = (brand.get("ranking") or {}).get("bestRank")

        if mentioned:
            mentioned_responses += 1
        if best_rank:
            brand_ranks.append(best_rank)

        for competitor in (row.get("competitorAnalysis") or {}).get("detected", []):
            name = competitor["name"]
            competitor_mentions[name] = (
                competitor_mentions.get(name, 0) + competitor["mentions"]
            )
            competitor_ranks.setdefault(name, []).extend(
                competitor["ranking"].get("positions", [])
            )

        provider = (row.get("meta") or {}).get("provider") or "unknown"
        stat = providers.get(provider)
        if stat is None:
            stat = ProviderStat(
                provider=provider, mentioned=0, total=0, mention_rate=0.0
            )
            providers[provider] = stat
        stat.total += 1
        if mentioned:
            stat.mentioned += 1
        bucket = _rank_bucket(best_rank, mentioned)
        if bucket is not None:
            stat.rank_buckets[bucket] += 1

    for stat in providers.values():
        stat.mention_rate = stat.mentioned / stat.total if stat.total else 0.0

    ordered = sorted(
        competitor_mentions.items(), key=lambda item: item[1], reverse=True
    )
    top_competitors = [
        CompetitorStat(
            name=name,
            mentions=mentions,
            average_rank=_average(competitor_ranks[name]),
        )
        for name, mentions in ordered[:top_n]
    ]

    total = len(rows)
    return AnalysisSummary(
        total_responses=total,
        mentioned_responses=mentioned_responses,
        mention_rate=mentioned_responses / total if total else 0.0,
        average_rank=_average(brand_ranks),
        first_rank_count=sum(1 for rank in brand_ranks if rank == 1),
        top_competitors=top_competitors,
        providers=list(providers.values()),
    )
