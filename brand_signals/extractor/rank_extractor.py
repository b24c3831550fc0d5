"""
Explicit rank extraction for brand-signals.

Reads ranks from numbered list lines ("1. Foo", "2、Foo", "3) Foo"). The
extractor is stateless and entity-agnostic: it is called once for the target
brand and once per known competitor, and only answers "on which numbered
lines does this name appear, and what is the best (lowest) number?".

Example:
    >>> text = "1. CompetitorA\\n2. MyBrand\\n3. Other"
    >>> ranking = extract_ranking(text, "mybrand")
    >>> ranking.positions
    [2]
    >>> ranking.best_rank
    2
"""

from collections.abc import Iterator

from .models import RankingInfo, RankLine
from .patterns import NUMBERED_LINE_PATTERN


def iter_numbered_lines(text: str) -> Iterator[tuple[int, str, int]]:
    """
    Yield (rank, content, offset) for every numbered list line in ``text``.

    ``content`` is the untrimmed rest of the line after the separator and
    ``offset`` the start of the match (including leading whitespace).
    """
    for match in NUMBERED_LINE_PATTERN.finditer(text):
        yield int(match.group(1)), match.group(2), match.start()


def extract_ranking(text: str, name: str) -> RankingInfo:
    """
    Collect the explicit ranks of ``name`` from numbered list lines.

    A line counts when its content contains ``name`` as a case-insensitive
    substring. A line numbered 0 is kept like any other (positions [0],
    best_rank 0); callers treat a falsy best_rank as "unranked".

    Args:
        text: Response text
        name: Entity name or keyword (empty -> empty ranking)

    Returns:
        RankingInfo with positions in scan order, best_rank = min(positions)
        or None, and the matching lines (content trimmed)
    """
    if not name or not text:
        return RankingInfo()

    needle = name.lower()
    raw_lines = []

    for rank, content, _offset in iter_numbered_lines(text):
        if needle in content.lower():
            raw_lines.append(RankLine(rank=rank, content=content.strip()))

    positions = [line.rank for line in raw_lines]

    return RankingInfo(
        positions=positions,
        best_rank=min(positions) if positions else None,
        raw_lines=raw_lines,
    )
