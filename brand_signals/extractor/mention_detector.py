"""
Target brand mention scanning for brand-signals.

Finds every case-insensitive literal occurrence of the target brand and keeps
a bounded window of surrounding text for each one, so a report can show how
the brand was talked about.

Key features:
- Literal (regex-escaped) matching, safe for names like "C++" or "Warmly.io"
- Case-insensitive detection
- Works on CJK text (no word-boundary requirement)
- Context snippets with whitespace collapsed, wrapped in "..."

Example:
    >>> mentions = scan_mentions("I use MyBrand daily", "MyBrand", context_window=4)
    >>> mentions[0].index
    6
    >>> mentions[0].context
    '...use MyBrand dai...'
"""

from .models import MentionRecord
from .patterns import collapse_whitespace, create_literal_pattern


def scan_mentions(
    text: str, brand_name: str, context_window: int
) -> list[MentionRecord]:
    """
    Find all mentions of ``brand_name`` in ``text`` with surrounding context.

    For a match at offset i the context is text[i - context_window :
    i + len(brand_name) + context_window], clipped to the text bounds, with
    whitespace runs collapsed to single spaces, then wrapped as "...ctx...".

    Args:
        text: Response text to scan
        brand_name: Target brand (empty -> no mentions, not an error)
        context_window: Characters of context on each side of the match

    Returns:
        MentionRecord list in text order; len() is the total mention count
    """
    if not brand_name or not text:
        return []

    pattern = create_literal_pattern(brand_name)
    mentions = []

    for match in pattern.finditer(text):
        start = max(0, match.start() - context_window)
        end = min(len(text), match.start() + len(brand_name) + context_window)
        context = collapse_whitespace(text[start:end])

        mentions.append(
            MentionRecord(index=match.start(), context=f"...{context}...")
        )

    return mentions


def first_occurrence(text: str, name: str) -> int | None:
    """
    Return the offset of the first case-insensitive occurrence of ``name``.

    Returns None when ``name`` is empty or does not occur.
    """
    if not name or not text:
        return None

    match = create_literal_pattern(name).search(text)
    return match.start() if match else None
