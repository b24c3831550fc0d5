"""
Known competitor detection for brand-signals.

Scans every keyword variant of each configured competitor, counts mentions,
tracks the earliest occurrence, and reads explicit ranks from numbered list
lines. Competitors that are never mentioned are not reported.
"""

import logging

from ..config.schema import CompetitorConfig
from .consolidator import CompetitorRegistry
from .models import CompetitorResult, RankingInfo
from .patterns import find_literal_offsets
from .rank_extractor import extract_ranking

logger = logging.getLogger(__name__)


def _rank_competitor(text: str, competitor: CompetitorConfig) -> RankingInfo:
    """
    Rank by canonical name first; otherwise adopt the first keyword with ranks.
    """
    ranking = extract_ranking(text, competitor.name)
    if ranking.positions:
        return ranking

    for keyword in competitor.keywords:
        keyword_ranking = extract_ranking(text, keyword)
        if keyword_ranking.positions:
            return keyword_ranking

    return ranking


def detect_known_competitors(
    text: str,
    competitors: list[CompetitorConfig],
    registry: CompetitorRegistry,
) -> list[CompetitorResult]:
    """
    Detect configured competitors and register them in ``registry``.

    For each competitor, mentions are summed across all keyword variants
    (case-insensitive literal matches) and first_index is the minimum offset
    over all of them. Mentioned competitors get an explicit ranking from the
    canonical name, falling back to the first keyword that yields ranks.

    Args:
        text: Response text
        competitors: Configured competitors, in configuration order
        registry: Per-call accumulator receiving the results

    Returns:
        The results registered by this call, in configuration order
    """
    detected = []

    for competitor in competitors:
        mention_count = 0
        first_index: int | None = None

        for keyword in competitor.keywords:
            offsets = find_literal_offsets(text, keyword)
            mention_count += len(offsets)
            if offsets and (first_index is None or offsets[0] < first_index):
                first_index = offsets[0]

        if mention_count == 0:
            continue

        ranking = _rank_competitor(text, competitor)
        ranking.first_index = first_index

        result = CompetitorResult(
            name=competitor.name,
            category=competitor.category,
            mentions=mention_count,
            ranking=ranking,
            is_heuristic=False,
        )
        registry.add(result)
        detected.append(result)

        logger.debug(
            f"Known competitor {competitor.name}: {mention_count} mentions, "
            f"best rank {ranking.best_rank}"
        )

    return detected
