from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_newsletter_tagger.config import NewsletterTaggerColumnConfig
from data_designer_newsletter_tagger.core import analyze_content
from data_designer_newsletter_tagger.options import resolve_options
from data_designer_newsletter_tagger.summary import summarize

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


class NewsletterTaggerColumnGenerator(ColumnGeneratorFullColumn[NewsletterTaggerColumnConfig]):
    """Column generator that tags newsletter text with the rule-based content tagger."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f4f0 Tagging column {self.config.name!r} for newsletter content issues")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   min_score: {self.config.min_score}")

        options = resolve_options(self.config.options or None)
        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = " ".join(str(v) for v in row.values if v is not None)
            result = analyze_content(text, options)
            summary = summarize(result)
            output: dict = {
                "is_valid": summary["score"] >= self.config.min_score,
                "newsletter_score": summary["score"],
                "newsletter_grade": summary["grade"],
                "word_count": summary["metrics"]["word_count"],
                "issue_counts": summary["issue_counts"],
                "global_flags": summary["global_flags"],
            }
            if self.config.include_annotated:
                output["annotated"] = result.annotated
            if self.config.include_sentences:
                output["sentences"] = [s.to_payload() for s in result.report.per_sentence]
            results.append(output)

        data = data.copy()
        data[self.config.name] = results
        return data
