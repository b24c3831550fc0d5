"""
Response analysis orchestration.

ResponseAnalyzer ties the extraction components together for one LLM answer:

1. Target brand mentions with context (mention_detector)
2. Target brand explicit rank (rank_extractor)
3. Known competitors (competitor_detector)
4. Heuristic discovery of unknown competitors (discovery + normalizer)
5. Implicit ranks from text order (implicit_rank)

The analyzer holds only read-only configuration. Every analyze() call builds
its own CompetitorRegistry, so one instance can serve concurrent callers.
Nothing here raises for odd text: malformed Markdown, empty responses or an
empty target brand degrade to partial or empty results.

Example:
    >>> analyzer = ResponseAnalyzer({"targetBrand": "MyBrand"})
    >>> result = analyzer.analyze({"response": "1. Rival\\n2. MyBrand"})
    >>> result.brand_analysis.ranking.best_rank
    2
"""

import logging
import time
from collections.abc import Mapping
from typing import Any

from ..config.loader import parse_config
from ..config.schema import AnalysisInput, AnalyzerConfig
from ..utils.time import format_duration_ms, utc_timestamp
from .competitor_detector import detect_known_competitors
from .consolidator import CompetitorRegistry
from .discovery import DISCOVERY_STRATEGIES
from .implicit_rank import assign_implicit_ranks
from .mention_detector import first_occurrence, scan_mentions
from .models import AnalysisMeta, AnalysisResult, BrandAnalysis, CompetitorResult
from .normalizer import CandidateFilter, admit_candidate
from .rank_extractor import extract_ranking

logger = logging.getLogger(__name__)


class ResponseAnalyzer:
    """
    Rule-based brand intelligence extractor for LLM responses.

    Args:
        config: AnalyzerConfig, or a mapping validated into one (snake_case or
            camelCase keys). None means an empty configuration.

    Raises:
        ConfigValidationError: If a mapping config fails validation
    """

    def __init__(self, config: AnalyzerConfig | Mapping[str, Any] | None = None):
        if config is None:
            config = AnalyzerConfig()
        elif not isinstance(config, AnalyzerConfig):
            config = parse_config(dict(config))

        self.config = config
        self._candidate_filter = CandidateFilter(
            config.target_brand, config.competitors
        )

    @property
    def target_brand(self) -> str:
        return self.config.target_brand

    def analyze(
        self, response_data: AnalysisInput | Mapping[str, Any]
    ) -> AnalysisResult:
        """
        Analyze one response.

        Args:
            response_data: AnalysisInput or mapping with query, provider,
                response and timestamp (all optional)

        Returns:
            AnalysisResult with metadata, target brand analysis and detected
            competitors
        """
        if not isinstance(response_data, AnalysisInput):
            response_data = AnalysisInput.model_validate(dict(response_data))

        text = response_data.response
        timestamp = response_data.timestamp or utc_timestamp()

        start = time.perf_counter()

        mentions = scan_mentions(
            text, self.target_brand, self.config.options.context_window
        )
        brand_ranking = extract_ranking(text, self.target_brand)
        detected = self.analyze_competitors(text)

        processing_time = format_duration_ms(time.perf_counter() - start)

        logger.debug(
            f"Analyzed response from {response_data.provider}: "
            f"{len(mentions)} brand mentions, {len(detected)} competitors "
            f"in {processing_time}"
        )

        return AnalysisResult(
            meta=AnalysisMeta(
                timestamp=timestamp,
                provider=response_data.provider,
                query=response_data.query,
                processing_time=processing_time,
            ),
            brand_analysis=BrandAnalysis(
                name=self.target_brand,
                mentions=mentions,
                ranking=brand_ranking,
            ),
            detected=detected,
            original_content=text if self.config.options.include_original else None,
        )

    def analyze_competitors(self, text: str) -> list[CompetitorResult]:
        """
        Detect known and unknown competitors and rank them.

        Returns:
            Competitors in detection order: configured ones first (in
            configuration order), then discovered ones in discovery order
        """
        registry = CompetitorRegistry()

        detect_known_competitors(text, list(self.config.competitors), registry)

        for strategy in DISCOVERY_STRATEGIES:
            candidates = strategy(text)
            admitted = 0
            for candidate in candidates:
                if admit_candidate(registry, candidate, self._candidate_filter):
                    admitted += 1
            logger.debug(
                f"{strategy.__name__}: {len(candidates)} candidates, "
                f"{admitted} admitted"
            )

        assign_implicit_ranks(
            registry,
            self.target_brand,
            first_occurrence(text, self.target_brand),
        )

        return registry.results()
