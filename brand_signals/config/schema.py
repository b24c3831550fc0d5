"""
Configuration schema models for brand-signals.

This module defines Pydantic models for validating analyzer configuration
(usually loaded from a YAML file) and the per-call analysis input. Keys are
accepted both in snake_case and in camelCase (``target_brand`` or
``targetBrand``), so configurations written for JSON consumers load as-is.

Models:
    CompetitorConfig: One known competitor (name, keyword variants, category)
    AnalyzerOptions: Output options (context window, echo original text)
    AnalyzerConfig: Root analyzer configuration (immutable after construction)
    AnalysisInput: One response to analyze (query, provider, response, timestamp)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .constants import (
    DEFAULT_CONTEXT_WINDOW,
    DEFAULT_INCLUDE_ORIGINAL,
    UNCATEGORIZED_CATEGORY,
)


class CompetitorConfig(BaseModel):
    """
    Known competitor configuration.

    Attributes:
        name: Canonical competitor name (used for ranking lookups and output)
        keywords: Literal variants scanned for mentions. Defaults to [name] when
                  omitted or null. An explicit empty list disables scanning.
        category: Free-form grouping label (default: "Uncategorized")

    Example:
        competitors:
          - name: "CompetitorA"
            keywords: ["CompetitorA", "CompA"]
            category: "Wearables"
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    name: str
    keywords: list[str]
    category: str = UNCATEGORIZED_CATEGORY

    @model_validator(mode="before")
    @classmethod
    def default_keywords(cls, data: Any) -> Any:
        """Fill keywords with [name] when the key is missing or null."""
        if isinstance(data, dict) and data.get("keywords") is None:
            data = dict(data)
            data["keywords"] = [data.get("name")]
        return data

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is non-empty."""
        if not v or v.isspace():
            raise ValueError("name cannot be empty")
        return v.strip()

    @field_validator("keywords")
    @classmethod
    def validate_keywords(cls, v: list[str]) -> list[str]:
        """Drop empty/whitespace-only keywords (they would match everywhere)."""
        return [kw for kw in v if kw and not kw.isspace()]


class AnalyzerOptions(BaseModel):
    """
    Output options for the analyzer.

    Both fields are required when an options block is supplied: a partial
    block is a validation error rather than being filled with defaults.

    Attributes:
        context_window: Characters of context kept on each side of a brand mention
        include_original: Echo the response text as originalContent in the result
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    context_window: int
    include_original: bool

    @field_validator("context_window")
    @classmethod
    def validate_context_window(cls, v: int) -> int:
        """Validate context_window is not negative."""
        if v < 0:
            raise ValueError(f"context_window must be >= 0, got: {v}")
        return v


def _default_options() -> AnalyzerOptions:
    return AnalyzerOptions(
        context_window=DEFAULT_CONTEXT_WINDOW,
        include_original=DEFAULT_INCLUDE_ORIGINAL,
    )


class AnalyzerConfig(BaseModel):
    """
    Root analyzer configuration.

    Immutable after construction; one instance can be shared by any number of
    concurrent analyze() calls.

    Attributes:
        target_brand: Brand whose mentions and rank are measured. May be empty,
                      in which case brand mentions/ranking are always empty.
        competitors: Known competitors (names must be unique)
        options: Output options; defaults apply only when the block is omitted

    Example:
        target_brand: "MyBrand"
        competitors:
          - name: "CompetitorA"
            keywords: ["CompetitorA", "CompA"]
        options:
          context_window: 50
          include_original: true
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    target_brand: str = ""
    competitors: list[CompetitorConfig] = []
    options: AnalyzerOptions = Field(default_factory=_default_options)

    @field_validator("target_brand", mode="before")
    @classmethod
    def coerce_target_brand(cls, v: Any) -> str:
        """Treat a null target brand as empty and strip surrounding whitespace."""
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("competitors", mode="before")
    @classmethod
    def coerce_competitors(cls, v: Any) -> Any:
        """Treat a null competitor list as empty."""
        return [] if v is None else v

    @field_validator("options", mode="before")
    @classmethod
    def default_options(cls, v: Any) -> Any:
        """Treat an explicit null options block like an omitted one."""
        return _default_options() if v is None else v

    @field_validator("competitors")
    @classmethod
    def validate_unique_names(
        cls, v: list[CompetitorConfig]
    ) -> list[CompetitorConfig]:
        """Validate competitor names are unique."""
        names = [c.name for c in v]
        if len(names) != len(set(names)):
            duplicates = {name for name in names if names.count(name) > 1}
            raise ValueError(f"Duplicate competitor names found: {duplicates}")
        return v


class AnalysisInput(BaseModel):
    """
    One LLM response to analyze.

    Attributes:
        query: Question that produced the response (echoed into metadata)
        provider: Model/provider identifier (echoed into metadata)
        response: Response text. None/missing is coerced to "", any other
                  non-string value to its string form.
        timestamp: Caller-supplied timestamp; current UTC time when absent
    """

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    query: str | None = None
    provider: str | None = None
    response: str = ""
    timestamp: str | None = None

    @field_validator("response", mode="before")
    @classmethod
    def coerce_response(cls, v: Any) -> str:
        """Coerce missing/non-string responses to text."""
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)
