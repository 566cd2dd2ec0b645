# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Feedback analysis pipeline.

`analyze()` turns one block of raw feedback text into a complete Report:

    segment -> classify (pain points, emotions, biases, themes)
            -> personas -> recommendations -> summary

The pipeline is synchronous and has no side effects. It only reads the
immutable taxonomy, so it can be called concurrently without locking. It never
raises for text input: degenerate input is handled by the implicit fallbacks
and the guaranteed minimum counts.
"""

import logging

from feedback_analysis.classifiers import (
    classify_biases,
    classify_emotions,
    classify_pain_points,
    classify_themes,
)
from feedback_analysis.config import AnalysisOptions
from feedback_analysis.models import Report
from feedback_analysis.personas import synthesize_personas
from feedback_analysis.recommendations import synthesize_recommendations
from feedback_analysis.summary import generate_summary
from feedback_analysis.taxonomy import Taxonomy, default_taxonomy
from feedback_analysis.text import split_sentences


logger = logging.getLogger(__name__)


def analyze(
    raw_text: str | None,
    *,
    taxonomy: Taxonomy | None = None,
    options: AnalysisOptions | None = None,
) -> Report:
    """
    Analyze free-form feedback text.

    Args:
        raw_text:
            Survey responses, interview transcripts, reviews, ... as one text.
            `None` is treated like an empty string.
        taxonomy:
            Classifier tables. Defaults to the packaged taxonomy.
        options:
            Clustering thresholds. Defaults to `AnalysisOptions()`.

    Returns:
        The report. Always contains two personas and at least two behavioral
        themes and recommendations.
    """

    text = "" if raw_text is None else str(raw_text)
    taxonomy = taxonomy or default_taxonomy()
    options = options or AnalysisOptions()

    sentences = split_sentences(text)
    lowered = text.lower()
    logger.debug("Segmented %d sentence(s) from %d character(s)", len(sentences), len(text))

    pain_points = classify_pain_points(
        sentences,
        taxonomy,
        cluster_threshold=options.cluster_threshold,
        fallback_threshold=options.fallback_threshold,
    )
    emotional_patterns = classify_emotions(sentences, taxonomy)
    cognitive_biases = classify_biases(sentences, lowered, taxonomy)
    behavioral_themes = classify_themes(
        sentences,
        lowered,
        taxonomy,
        fallback_threshold=options.fallback_threshold,
    )

    personas = synthesize_personas(sentences, pain_points, emotional_patterns)
    recommendations = synthesize_recommendations(pain_points, emotional_patterns, behavioral_themes)
    executive_summary = generate_summary(
        pain_points,
        emotional_patterns,
        behavioral_themes,
        cognitive_biases,
        personas,
        recommendations,
    )

    logger.debug(
        "Report: %d pain point(s), %d emotion(s), %d theme(s), %d bias(es), %d recommendation(s)",
        len(pain_points),
        len(emotional_patterns),
        len(behavioral_themes),
        len(cognitive_biases),
        len(recommendations),
    )

    return Report(
        pain_points=tuple(pain_points),
        emotional_patterns=tuple(emotional_patterns),
        behavioral_themes=tuple(behavioral_themes),
        cognitive_biases=tuple(cognitive_biases),
        personas=tuple(personas),
        recommendations=tuple(recommendations),
        executive_summary=executive_summary,
    )
