# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Cognitive bias classifier.

Unlike the other fallbacks, the implicit phase is additive: absolutist and
comparative language are tested independently and both may be reported.
"""

from typing import Sequence

from feedback_analysis.classifiers.base import keyword_matches, pattern_matches, two_phase
from feedback_analysis.models import CognitiveBias
from feedback_analysis.taxonomy import Taxonomy


MAX_QUOTES = 2


def explicit_biases(sentences: Sequence[str], lowered_text: str, taxonomy: Taxonomy) -> list[CognitiveBias]:
    """Match bias keywords against sentences.

    The evidence lists which of the entry's keywords occur anywhere in the
    document.
    """

    out: list[CognitiveBias] = []
    for spec in taxonomy.biases:
        matches = keyword_matches(sentences, spec.keywords)
        if not matches:
            continue

        detected = [k for k in spec.keywords if k in lowered_text]
        out.append(
            CognitiveBias(
                bias=spec.bias,
                evidence=f"Keywords detected: {', '.join(detected)}",
                impact=spec.impact,
                mentions=len(matches),
                quotes=tuple(sentences[i] for i in matches[:MAX_QUOTES]),
            )
        )
    return out


def implicit_biases(sentences: Sequence[str], taxonomy: Taxonomy) -> list[CognitiveBias]:
    """Test the implicit bias patterns (absolutist and comparative language)."""

    out: list[CognitiveBias] = []
    for spec in taxonomy.implicit_biases:
        matches = pattern_matches(sentences, spec.patterns)
        if not matches:
            continue

        terms: list[str] = []
        for idx in matches:
            for pattern in spec.patterns:
                for m in pattern.finditer(sentences[idx]):
                    term = m.group(0).lower()
                    if term not in terms:
                        terms.append(term)

        out.append(
            CognitiveBias(
                bias=spec.bias,
                evidence=f"Language detected: {', '.join(terms)}",
                impact=spec.impact,
                mentions=len(matches),
                quotes=tuple(sentences[i] for i in matches[:MAX_QUOTES]),
            )
        )
    return out


def classify_biases(sentences: Sequence[str], lowered_text: str, taxonomy: Taxonomy) -> list[CognitiveBias]:
    return two_phase(
        "biases",
        lambda: explicit_biases(sentences, lowered_text, taxonomy),
        lambda: implicit_biases(sentences, taxonomy),
    )
