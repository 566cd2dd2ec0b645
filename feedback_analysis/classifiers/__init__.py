"""Rule-based taxonomy classifiers.

Each classifier runs in two phases:

- an explicit phase that matches taxonomy keywords/patterns,
- an implicit phase that infers findings heuristically, used only when the
  explicit phase found nothing.

Both phases are exposed separately so they can be tested in isolation.
"""

from feedback_analysis.classifiers.biases import classify_biases
from feedback_analysis.classifiers.emotions import classify_emotions
from feedback_analysis.classifiers.pain_points import classify_pain_points
from feedback_analysis.classifiers.themes import classify_themes

__all__ = [
    "classify_biases",
    "classify_emotions",
    "classify_pain_points",
    "classify_themes",
]
