"""
Candidate name cleaning and noise filtering.

Every discovery strategy hands raw text fragments to admit_candidate(), which:
1. Cleans the fragment into a name (clean_candidate_name)
2. Rejects anything that is not plausibly an entity (CandidateFilter)
3. Merges the survivor into the per-call CompetitorRegistry

Rejection is silent: untrusted free text is expected to produce many
fragments that are not brands.
"""

import logging
import re

from ..config.constants import MAX_CANDIDATE_LENGTH, MIN_CANDIDATE_LENGTH
from ..config.schema import CompetitorConfig
from .consolidator import CompetitorRegistry
from .lexicon import FILLER_PREFIXES, NOISE_FRAGMENTS, NOISE_WORDS, PRONOUN_PREFIXES
from .models import Candidate, CompetitorResult
from .patterns import BOLD_SPAN_PATTERN, CJK_CHARS, strip_emphasis

logger = logging.getLogger(__name__)

# Everything after the first of : ： , ， 。 . - （ ( is description, not name
NAME_TERMINATOR_PATTERN = re.compile(r"[:：，,。.\-（(]")

# A Latin/digit run glued to CJK words, e.g. "Keep智能手环"
MIXED_SCRIPT_PATTERN = re.compile(r"^([a-zA-Z0-9]{2,})[" + CJK_CHARS + "]")

PRONOUN_PATTERN = re.compile(
    "^(" + "|".join(re.escape(p) for p in PRONOUN_PREFIXES) + ")", re.IGNORECASE
)


def _strip_filler_prefixes(name: str) -> str:
    """Strip filler prefixes from the front until none applies."""
    modified = True
    while modified:
        modified = False
        for prefix in FILLER_PREFIXES:
            if name.startswith(prefix):
                name = name[len(prefix) :].strip()
                modified = True
    return name


def clean_candidate_name(raw: str) -> str:
    """
    Turn a raw fragment into a candidate entity name.

    An inner bold span ("1. **Foo** is good") wins over everything else.
    Otherwise the text before the first name terminator is used, with
    emphasis markers removed. Filler prefixes ("目前", "市场上", ...) are then
    stripped, and a Latin run glued to CJK text is cut down to the Latin run.

    Args:
        raw: Unnormalized text emitted by a discovery strategy

    Returns:
        Cleaned name (possibly empty; length is not checked here)

    Example:
        >>> clean_candidate_name("ColonComp: Okay.")
        'ColonComp'
        >>> clean_candidate_name("目前市场上小米")
        '小米'
        >>> clean_candidate_name("Keep智能手环")
        'Keep'
    """
    name = ""

    bold = BOLD_SPAN_PATTERN.search(raw)
    if bold:
        name = bold.group(2).strip()

    if not name:
        name = NAME_TERMINATOR_PATTERN.split(raw, maxsplit=1)[0].strip()
        name = strip_emphasis(name)

    name = _strip_filler_prefixes(name)

    mixed = MIXED_SCRIPT_PATTERN.match(name)
    if mixed:
        name = mixed.group(1)

    return name


class CandidateFilter:
    """
    Noise filter bound to one analyzer configuration.

    Rejects names that are too short or too long, start with a pronoun, are
    stopwords, contain link/report fragments, contain the target brand, or
    contain any configured competitor keyword (already tracked as known).
    """

    def __init__(self, target_brand: str, competitors: list[CompetitorConfig]):
        self.target_brand = target_brand.lower()
        self.known_keywords = [
            keyword.lower()
            for competitor in competitors
            for keyword in competitor.keywords
            if keyword
        ]

    def rejection_reason(self, name: str) -> str | None:
        """
        Return why ``name`` is rejected, or None when it is admissible.
        """
        if not MIN_CANDIDATE_LENGTH <= len(name) <= MAX_CANDIDATE_LENGTH:
            return "length"

        if PRONOUN_PATTERN.match(name):
            return "pronoun"

        if name in NOISE_WORDS:
            return "noise word"

        lowered = name.lower()

        if any(fragment.lower() in lowered for fragment in NOISE_FRAGMENTS):
            return "noise fragment"

        if self.target_brand and self.target_brand in lowered:
            return "target brand"

        if any(keyword in lowered for keyword in self.known_keywords):
            return "known competitor"

        return None


def admit_candidate(
    registry: CompetitorRegistry,
    candidate: Candidate,
    candidate_filter: CandidateFilter,
) -> CompetitorResult | None:
    """
    Clean, filter and merge one candidate into ``registry``.

    Returns:
        The created or updated entry, or None when the candidate was rejected
    """
    name = clean_candidate_name(candidate.raw)

    reason = candidate_filter.rejection_reason(name)
    if reason is not None:
        logger.debug(f"Rejected candidate {name!r} ({reason})")
        return None

    return registry.merge_candidate(
        name, candidate.rank, candidate.raw, candidate.offset
    )
