"""
Per-call competitor accumulator.

CompetitorRegistry is the single ordered mapping (name -> CompetitorResult)
threaded through every detection phase of one analyze() call. Known
competitors are registered first; heuristic candidates proposed later by any
discovery strategy merge into an existing entry of the same exact name
instead of creating duplicates. Entries are updated in place and never
removed, and insertion order is the output order.
"""

from collections.abc import Iterator

from ..config.constants import DETECTED_CATEGORY
from .models import CompetitorResult, RankingInfo, RankLine


class CompetitorRegistry:
    """Ordered name -> CompetitorResult mapping for one analysis."""

    def __init__(self) -> None:
        self._entries: dict[str, CompetitorResult] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CompetitorResult]:
        return iter(self._entries.values())

    def get(self, name: str) -> CompetitorResult | None:
        return self._entries.get(name)

    def add(self, result: CompetitorResult) -> None:
        """
        Register a fully built result (known competitors).

        Raises:
            ValueError: If an entry with the same name already exists
        """
        if result.name in self._entries:
            raise ValueError(f"Competitor already registered: {result.name}")
        self._entries[result.name] = result

    def merge_candidate(
        self, name: str, rank: int | None, raw_content: str, offset: int
    ) -> CompetitorResult:
        """
        Merge a cleaned heuristic candidate into the registry.

        Existing entry: mention count +1; an explicit rank is appended to
        positions and lowers best_rank when smaller. New entry: a "Detected"
        heuristic result anchored at ``offset``.

        Args:
            name: Cleaned candidate name (exact-match key)
            rank: Explicit rank next to the candidate, or None
            raw_content: Unnormalized text the candidate came from
            offset: Character offset of the proposal

        Returns:
            The created or updated CompetitorResult
        """
        # rank 0 carries no ordering information
        rank = rank or None

        existing = self._entries.get(name)
        if existing is not None:
            existing.mentions += 1
            if rank is not None:
                ranking = existing.ranking
                ranking.positions.append(rank)
                if ranking.best_rank is None or rank < ranking.best_rank:
                    ranking.best_rank = rank
            return existing

        result = CompetitorResult(
            name=name,
            category=DETECTED_CATEGORY,
            mentions=1,
            ranking=RankingInfo(
                positions=[rank] if rank is not None else [],
                best_rank=rank,
                raw_lines=[RankLine(rank=rank, content=raw_content)],
                first_index=offset,
            ),
            is_heuristic=True,
        )
        self._entries[name] = result
        return result

    def results(self) -> list[CompetitorResult]:
        """Return all entries in registration order."""
        return list(self._entries.values())
