"""
Implicit rank assignment from text order.

When an answer names entities without numbering them, their order of first
appearance is the ranking. Competitors and the target brand are sorted
together by first occurrence, so a competitor appearing after the target
brand is ranked behind it even though the brand itself is not a competitor.
"""

import math
from dataclasses import dataclass
from enum import Enum

from .consolidator import CompetitorRegistry


class EntityKind(Enum):
    COMPETITOR = "competitor"
    TARGET_BRAND = "target_brand"


@dataclass(frozen=True)
class RankAnchor:
    """An entity placed on the text-order axis."""

    name: str
    first_index: int | None
    kind: EntityKind

    @property
    def sort_key(self) -> float:
        return math.inf if self.first_index is None else self.first_index


def assign_implicit_ranks(
    registry: CompetitorRegistry,
    target_name: str,
    target_first_index: int | None,
) -> None:
    """
    Fill missing competitor ranks from first-occurrence order.

    Every competitor without a best rank gets its 1-based position in the
    combined (competitors + target brand) ordering, with positions set to
    that single rank and is_implicit set. Competitors with an explicit rank
    are left untouched. Entities without an offset sort last; ties keep
    registration order.

    Args:
        registry: Per-call accumulator, updated in place
        target_name: Target brand name (empty -> no anchor)
        target_first_index: First offset of the target brand, or None when
            it does not occur (no anchor)
    """
    anchors = [
        RankAnchor(result.name, result.ranking.first_index, EntityKind.COMPETITOR)
        for result in registry
    ]
    if target_name and target_first_index is not None:
        anchors.append(
            RankAnchor(target_name, target_first_index, EntityKind.TARGET_BRAND)
        )

    anchors.sort(key=lambda anchor: anchor.sort_key)

    for position, anchor in enumerate(anchors, start=1):
        if anchor.kind is not EntityKind.COMPETITOR:
            continue

        result = registry.get(anchor.name)
        if result is None or result.ranking.best_rank:
            continue

        result.ranking.best_rank = position
        result.ranking.positions = [position]
        result.ranking.is_implicit = True
