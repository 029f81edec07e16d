from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class NewsletterTaggerColumnConfig(SingleColumnConfig):
    """Tag newsletter text columns for spam, jargon, fluff, vague claims, and readability.

    Runs the rule-based content tagger on each row and produces an overall 0-100
    score, a letter grade, issue counts by priority, and document-level flags.

    Attributes:
        target_columns: Columns whose text content will be concatenated and analyzed.
        min_score: Minimum overall score (0-100) for ``is_valid=True``. Defaults to 70
            (the C/D grade boundary).
        include_annotated: Include the content with flagged sentences wrapped in tags.
        include_sentences: Include per-sentence tags and reasons.
        options: Overrides for the tagger options (thresholds, phrase lists, grammar).
    """

    target_columns: list[str]
    min_score: int = Field(default=70, ge=0, le=100, description="Minimum overall score for is_valid=True")
    include_annotated: bool = Field(default=False, description="Include tag-annotated content in output")
    include_sentences: bool = Field(default=False, description="Include per-sentence tags and reasons in output")
    options: dict[str, Any] = Field(default_factory=dict, description="Overrides for the tagger options")
    column_type: Literal["newsletter-tagger"] = "newsletter-tagger"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f4f0"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
