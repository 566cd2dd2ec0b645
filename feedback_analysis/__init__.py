"""
Feedback analysis package.

This package turns free-form user feedback (survey responses, interview
transcripts, reviews) into a structured report:
- recurring pain points, emotional patterns, behavioral themes and cognitive
  biases (rule-based taxonomy classifiers with implicit fallbacks),
- two synthesized user personas,
- prioritized recommendations and an executive summary.

A small CLI runs the analysis over a set of feedback files and writes a
spreadsheet report.
"""

# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from feedback_analysis.pipeline import analyze

__all__ = ["analyze"]
