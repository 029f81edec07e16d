# SPDX-License-Identifier: Apache-2.0
"""Newsletter content tagger plugin for NeMo Data Designer.

Adds a ``newsletter-tagger`` column type that flags spam-like language, jargon,
fluff, grammar/spelling slips, vague dates, numbers and claims, and scores
readability, link density, formatting, and redundancy. Rule-based only: no LLM
calls, no API dependencies.

Usage::

    from data_designer_newsletter_tagger import NewsletterTaggerColumnConfig

    builder.add_column(NewsletterTaggerColumnConfig(
        name="newsletter_check",
        target_columns=["issue_body"],
        min_score=70,
    ))

Or directly::

    from data_designer_newsletter_tagger import analyze_content

    result = analyze_content("<p>Buy now! Limited-time bonus inside.</p>")
    result.annotated
    result.report.to_payload()
"""

from data_designer_newsletter_tagger.config import NewsletterTaggerColumnConfig
from data_designer_newsletter_tagger.core import AnalysisResult, InvalidContentError, analyze_content
from data_designer_newsletter_tagger.options import DEFAULT_OPTIONS, Options, resolve_options

__all__ = [
    "NewsletterTaggerColumnConfig",
    "analyze_content",
    "AnalysisResult",
    "InvalidContentError",
    "Options",
    "DEFAULT_OPTIONS",
    "resolve_options",
]
