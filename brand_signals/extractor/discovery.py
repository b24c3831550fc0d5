"""
Heuristic discovery of competitors that are not in the configuration.

Each strategy is a pure function ``(text) -> list[Candidate]`` that recognizes
one way LLM answers tend to list entities:

1. Numbered list lines        "2. UnknownBrand - solid choice"
2. Markdown table rows        "| 3 | NewComp | 8.5 |"
3. Bold headers               "**3. BoldComp**" or "**ImplicitComp**"
4. CJK institutional entities "上海科技馆（浦东）"
5. CJK enumerations           "小米、华为和Amazfit是..."
6. Mashed description lines   "小米高性价比，适合学生。"

Strategies only propose raw fragments; cleaning, noise filtering and merging
are done by the normalizer. DISCOVERY_STRATEGIES fixes the order in which
they run against the shared registry, so later strategies merge into entries
found by earlier ones.
"""

import re
from collections.abc import Callable

from ..config.constants import TABLE_RANK_LIMIT
from .lexicon import DESCRIPTION_TRIGGERS, INSTITUTION_SUFFIXES, TRAILING_PARTICLES
from .models import Candidate
from .patterns import CJK_CHARS, NAME_CHARS, strip_emphasis
from .rank_extractor import iter_numbered_lines

# Pipe-delimited table row; group 1 is everything between the outer pipes
TABLE_ROW_PATTERN = re.compile(r"\|(.+)\|")

TABLE_SEPARATOR_PATTERN = re.compile(r"[\s|:]*-[\s|:-]*")

# Lenient leading-integer parse for table cells ("9.5" -> 9, "5G" -> 5)
LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?[0-9]+)")

# Line consisting of a bold span, optionally behind a bullet and/or "N."
BOLD_HEADER_PATTERN = re.compile(
    r"(?:^|\n)\s*(?:[-*]\s+)?(?:[0-9]+\.\s*)?(\*\*|__)(.*?)\1"
)

BOLD_ORDINAL_PATTERN = re.compile(r"^([0-9]+)\.\s*(.*)")

INSTITUTION_LINE_PATTERN = re.compile(
    r"^\s*(["
    + CJK_CHARS
    + "]{2,20}(?:"
    + "|".join(INSTITUTION_SUFFIXES)
    + r"))\s*[（(]",
    re.MULTILINE,
)

_ITEM = "(" + NAME_CHARS + "{2,15}?)"
_ITEM_BOUNDARY = r"(?=[、]|和|以及|\s|[。，；])"

# "A、B" followed by another separator
ENUMERATION_PATTERN = re.compile(_ITEM + "[、]" + _ITEM + _ITEM_BOUNDARY)

# One more "、C"
ENUMERATION_CONTINUATION_PATTERN = re.compile("[、]" + _ITEM + _ITEM_BOUNDARY)

# Closing "和D" / "以及D" / "&D", bounded by punctuation, a verb or end of text
ENUMERATION_TAIL_PATTERN = re.compile(
    r"\s*(?:和|以及|&)\s*" + _ITEM + r"(?=[。，；\s]|是|为|等|\Z)"
)

DESCRIPTION_LINE_PATTERN = re.compile(
    r"^\s*("
    + NAME_CHARS
    + "{2,15}?)(?=(?:"
    + "|".join(re.escape(word) for word in DESCRIPTION_TRIGGERS)
    + "))",
    re.MULTILINE,
)


def parse_leading_int(value: str) -> int | None:
    """
    Parse the integer a cell starts with, or None.

    Example:
        >>> parse_leading_int("9.5")
        9
        >>> parse_leading_int("NewComp") is None
        True
    """
    match = LEADING_INT_PATTERN.match(value)
    return int(match.group(1)) if match else None


def find_numbered_list_candidates(text: str) -> list[Candidate]:
    """Propose the content of every numbered list line with its number."""
    return [
        Candidate(raw=content, rank=rank, offset=offset)
        for rank, content, offset in iter_numbered_lines(text)
    ]


def find_table_candidates(text: str) -> list[Candidate]:
    """
    Propose one name per Markdown table body row.

    Rows before the first separator row (``|---|---|``) are header rows and
    are skipped. In body rows the name is the first cell that is longer than
    one character and does not start with an integer; the rank is the first
    cell starting with an integer below 100, falling back to the 1-based row
    counter since the last separator.

    The counter is never reconciled with explicit rank cells, so ragged
    tables mixing numbered and unnumbered rows can produce ranks that
    disagree with the visible order.
    """
    candidates = []
    in_body = False
    row_counter = 0

    for match in TABLE_ROW_PATTERN.finditer(text):
        row = match.group(1)

        if TABLE_SEPARATOR_PATTERN.fullmatch(row):
            in_body = True
            row_counter = 0
            continue

        if not in_body:
            continue

        row_counter += 1
        cells = [cell.strip() for cell in row.split("|")]

        name = next(
            (
                cell
                for cell in cells
                if len(cell) > 1 and parse_leading_int(cell) is None
            ),
            None,
        )
        if name is None:
            continue

        explicit_rank = next(
            (
                value
                for value in map(parse_leading_int, cells)
                if value is not None and value < TABLE_RANK_LIMIT
            ),
            None,
        )
        rank = explicit_rank if explicit_rank is not None else row_counter

        candidates.append(
            Candidate(raw=strip_emphasis(name), rank=rank, offset=match.start())
        )

    return candidates


def find_bold_header_candidates(text: str) -> list[Candidate]:
    """Propose bolded line headers; "**N. Foo**" carries rank N."""
    candidates = []

    for match in BOLD_HEADER_PATTERN.finditer(text):
        content = match.group(2).strip()
        rank = None

        ordinal = BOLD_ORDINAL_PATTERN.match(content)
        if ordinal:
            rank = int(ordinal.group(1))
            content = ordinal.group(2)

        candidates.append(Candidate(raw=content, rank=rank, offset=match.start()))

    return candidates


def find_institution_candidates(text: str) -> list[Candidate]:
    """Propose CJK institution names (…中心/博览会/馆/展) opening a "(" aside."""
    return [
        Candidate(raw=match.group(1), rank=None, offset=match.start())
        for match in INSTITUTION_LINE_PATTERN.finditer(text)
    ]


def _enumeration_tail(text: str, pos: int) -> str | None:
    match = ENUMERATION_TAIL_PATTERN.match(text, pos)
    if not match:
        return None

    name = match.group(1)
    if name[-1] in TRAILING_PARTICLES:
        name = name[:-1]

    return name if len(name) >= 2 else None


def find_enumeration_candidates(text: str) -> list[Candidate]:
    """
    Propose every item of CJK enumerations such as "A、B、C和D".

    Items get increasing offsets from the enumeration start so that their
    relative order survives implicit ranking. Scanning resumes right after
    the two-item base match.
    """
    candidates = []

    for match in ENUMERATION_PATTERN.finditer(text):
        items = [match.group(1), match.group(2)]
        pos = match.end()

        while more := ENUMERATION_CONTINUATION_PATTERN.match(text, pos):
            items.append(more.group(1))
            pos = more.end()

        tail = _enumeration_tail(text, pos)
        if tail is not None:
            items.append(tail)

        candidates.extend(
            Candidate(raw=item, rank=None, offset=match.start() + i)
            for i, item in enumerate(items)
        )

    return candidates


def find_description_line_candidates(text: str) -> list[Candidate]:
    """Propose the leading name of lines like "华为拥有强大的生态。"."""
    return [
        Candidate(raw=match.group(1), rank=None, offset=match.start())
        for match in DESCRIPTION_LINE_PATTERN.finditer(text)
    ]


DiscoveryStrategy = Callable[[str], list[Candidate]]

DISCOVERY_STRATEGIES: tuple[DiscoveryStrategy, ...] = (
    find_numbered_list_candidates,
    find_table_candidates,
    find_bold_header_candidates,
    find_institution_candidates,
    find_enumeration_candidates,
    find_description_line_candidates,
)
