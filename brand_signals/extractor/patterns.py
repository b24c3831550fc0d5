"""
Shared regex building blocks for brand-signals extraction.

Every user-supplied string (target brand, competitor keyword) that ends up in
a scan goes through create_literal_pattern(), which escapes regex
metacharacters before compiling. Brand names like "C++", "Warmly.io" or
"(Beta)" are therefore matched literally.

Unlike word-boundary matching, literal scanning here is a plain
case-insensitive substring search: CJK text has no word boundaries, and a
Latin brand glued to CJK words ("Keep智能手环") must still be found.

Also defines the line-shape patterns reused by several components:
- NUMBERED_LINE_PATTERN: "1. Foo", "2、Foo", "3) Foo" list lines
- BOLD_SPAN_PATTERN: "**Foo**" / "__Foo__" inline spans
- NAME_CHARS: character class for CJK/Latin/digit/parenthesis name runs
"""

import re

# CJK Unified Ideographs (basic block)
CJK_CHARS = "\u4e00-\u9fa5"

# One character of a loosely-delimited entity name: CJK, Latin, digit or
# half-/full-width parenthesis
NAME_CHARS = "[" + CJK_CHARS + "a-zA-Z0-9（）()]"

# Leading whitespace, number, one of . 、 ), optional whitespace, rest of line.
# Digits are spelled [0-9] so full-width or other Unicode digits never count.
NUMBERED_LINE_PATTERN = re.compile(r"^\s*([0-9]+)[.、)]\s*(.*)", re.MULTILINE)

# Inline bold span; group 2 is the bolded content
BOLD_SPAN_PATTERN = re.compile(r"(\*\*|__)(.*?)\1")

EMPHASIS_MARKERS_PATTERN = re.compile(r"[*_]")

WHITESPACE_RUN_PATTERN = re.compile(r"\s+")


def create_literal_pattern(literal: str) -> re.Pattern:
    """
    Create a case-insensitive pattern matching ``literal`` verbatim.

    Security: Always escapes special regex characters to prevent injection.

    Args:
        literal: Brand name or keyword (e.g., "HubSpot", "C++", "华为")

    Returns:
        Compiled case-insensitive pattern

    Raises:
        ValueError: If literal is empty (an empty pattern matches everywhere)

    Example:
        >>> pattern = create_literal_pattern("Warmly.io")
        >>> bool(pattern.search("try WARMLY.IO today"))
        True
        >>> bool(pattern.search("Warmlyxio"))
        False
    """
    if not literal:
        raise ValueError("Literal pattern cannot be empty")

    return re.compile(re.escape(literal), re.IGNORECASE)


def find_literal_offsets(text: str, literal: str) -> list[int]:
    """
    Return the start offset of every case-insensitive occurrence of ``literal``.

    Occurrences are non-overlapping and in text order. An empty literal or
    empty text yields no offsets.

    Example:
        >>> find_literal_offsets("MyBrand and mybrand", "MyBrand")
        [0, 12]
    """
    if not literal or not text:
        return []

    pattern = create_literal_pattern(literal)
    return [match.start() for match in pattern.finditer(text)]


def strip_emphasis(value: str) -> str:
    """Remove every Markdown bold/italic marker character (* and _)."""
    return EMPHASIS_MARKERS_PATTERN.sub("", value)


def collapse_whitespace(value: str) -> str:
    """Collapse whitespace runs (including newlines) to single spaces and trim."""
    return WHITESPACE_RUN_PATTERN.sub(" ", value).strip()
