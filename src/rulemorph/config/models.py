"""
Core configuration and data models for RuleMorph.

Defines all configuration structures and the request/result types using
Pydantic for validation.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Strategy(str, Enum):
    """Translation path chosen for a language pair."""

    TEMPLATE = "template"  # Shared engine driven by both languages' templates
    PAIRWISE = "pairwise"  # Hand-authored rule chain for one ordered pair
    GENERIC = "generic"  # Commented echo of the source plus guidance


class BlockMatching(str, Enum):
    """How closing block tokens are inferred from indentation."""

    LOOKAHEAD = "lookahead"  # One-line lookahead, one closer per dedent
    STACK = "stack"  # One closer per dedented nesting level


# ============================================================================
# Engine Configuration
# ============================================================================


class EngineConfig(BaseModel):
    """Configuration for the fallback translation engine."""

    block_matching: BlockMatching = Field(
        default=BlockMatching.LOOKAHEAD,
        description="Closing-token inference mode for indentation-delimited sources",
    )
    prefer_templates: bool = Field(
        default=True,
        description="Use the template strategy before a pairwise chain when both apply",
    )
    max_source_lines: int | None = Field(
        default=None,
        ge=1,
        description="Warn when a request exceeds this many lines (no throttling)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration used by the CLI."""

    level: str = Field(default="INFO", description="Root log level")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate the level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


class RuleMorphConfig(BaseModel):
    """Root configuration model for RuleMorph."""

    engine: EngineConfig = Field(default_factory=EngineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# ============================================================================
# Language & Translation Models (used across the system)
# ============================================================================


class Language(BaseModel):
    """A language known to the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Lowercase identifier (e.g., 'python', 'cpp')")
    display_name: str = Field(description="Human-readable name (e.g., 'C++')")
    comment_prefix: str = Field(default="//", description="Line comment token")

    @field_validator("id")
    @classmethod
    def normalize_id(cls, v: str) -> str:
        return v.strip().lower()


class TranslationRequest(BaseModel):
    """A single fallback translation request."""

    model_config = ConfigDict(frozen=True)

    source_code: str
    source_language: Language
    target_language: Language


class TranslationResult(BaseModel):
    """Outcome of a fallback translation. Always displayable."""

    model_config = ConfigDict(frozen=True)

    translated_code: str
    confidence: int = Field(ge=0, le=100, description="Advisory quality score")
    is_fallback: bool = Field(default=True, description="Always true for this engine")
    strategy: Strategy = Field(description="Path that produced the translation")

    @field_validator("is_fallback")
    @classmethod
    def always_fallback(cls, v: bool) -> bool:
        if not v:
            raise ValueError("Fallback results must set is_fallback=True")
        return v
