# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Taxonomy tables for the rule-based classifiers.

The taxonomy maps trigger keywords (and, for themes and implicit biases,
regular expressions) to labels and descriptive metadata. The default tables
ship with the package as `taxonomy.yaml`. A project can point to its own file
with the same structure.

Parsed taxonomies are immutable: entries are frozen dataclasses, sequences are
tuples and patterns are compiled once while loading.
"""

import json
import re
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from feedback_analysis.config import ConfigError
from feedback_analysis.hash_utils import md5_text


SENTIMENTS = ("positive", "negative", "neutral")


@dataclass(frozen=True)
class PainSpec:
    """Pain point category triggered by any of its keywords."""

    issue: str
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class EmotionSpec:
    """Emotion category with its polarity."""

    emotion: str
    sentiment: str
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class BiasSpec:
    """
    Cognitive bias category.

    Attributes:
        bias:
            Bias label.
        impact:
            How the bias may distort the feedback.
        keywords:
            Substring triggers (explicit stage).
        patterns:
            Word-boundary regexes (implicit stage).
    """

    bias: str
    impact: str
    keywords: tuple[str, ...] = ()
    patterns: tuple[re.Pattern[str], ...] = ()


@dataclass(frozen=True)
class ThemeSpec:
    """
    Behavioral theme.

    Attributes:
        theme:
            Theme label.
        description:
            One-line description shown in the report.
        user_segment:
            User segment the theme is typical for.
        keywords:
            Substrings tested against the whole lowercased document.
        patterns:
            Regexes tested against each individual sentence.
        key:
            Detector key (implicit themes only).
    """

    theme: str
    description: str
    user_segment: str
    keywords: tuple[str, ...] = ()
    patterns: tuple[re.Pattern[str], ...] = ()
    key: str | None = None


@dataclass(frozen=True)
class SentimentLexicon:
    """Signal phrases for the heuristic sentence sentiment."""

    negative: tuple[str, ...]
    positive: tuple[str, ...]


@dataclass(frozen=True)
class Taxonomy:
    """Complete set of classifier tables."""

    pain_points: tuple[PainSpec, ...]
    emotions: tuple[EmotionSpec, ...]
    biases: tuple[BiasSpec, ...]
    implicit_biases: tuple[BiasSpec, ...]
    themes: tuple[ThemeSpec, ...]
    implicit_themes: tuple[ThemeSpec, ...]
    sentiment: SentimentLexicon


def parse_taxonomy(raw: Any) -> Taxonomy:
    """
    Validate a raw YAML mapping and build a Taxonomy.

    Args:
        raw:
            Parsed YAML content.

    Returns:
        The immutable Taxonomy.

    Raises:
        ConfigError:
            If a section is missing or malformed, or a pattern does not compile.
    """

    if not isinstance(raw, dict):
        raise ConfigError("Taxonomy YAML must contain a mapping at the top level")

    pain_points = tuple(
        PainSpec(
            issue=_label(item, "issue", ctx),
            keywords=_strings(item.get("keywords"), f"{ctx}.keywords", required=True),
        )
        for ctx, item in _entries(raw, "pain_points")
    )

    emotions: list[EmotionSpec] = []
    for ctx, item in _entries(raw, "emotions"):
        sentiment = item.get("sentiment")
        if sentiment not in SENTIMENTS:
            raise ConfigError(f"{ctx}.sentiment must be one of: {', '.join(SENTIMENTS)}")
        emotions.append(
            EmotionSpec(
                emotion=_label(item, "emotion", ctx),
                sentiment=sentiment,
                keywords=_strings(item.get("keywords"), f"{ctx}.keywords", required=True),
            )
        )

    biases = tuple(
        BiasSpec(
            bias=_label(item, "bias", ctx),
            impact=_label(item, "impact", ctx),
            keywords=_strings(item.get("keywords"), f"{ctx}.keywords", required=True),
        )
        for ctx, item in _entries(raw, "biases")
    )

    implicit_biases = tuple(
        BiasSpec(
            bias=_label(item, "bias", ctx),
            impact=_label(item, "impact", ctx),
            patterns=_patterns(item.get("patterns"), f"{ctx}.patterns", required=True),
        )
        for ctx, item in _entries(raw, "implicit_biases")
    )

    themes: list[ThemeSpec] = []
    for ctx, item in _entries(raw, "themes"):
        keywords = _strings(item.get("keywords"), f"{ctx}.keywords", required=False)
        patterns = _patterns(item.get("patterns"), f"{ctx}.patterns", required=False)
        if not keywords and not patterns:
            raise ConfigError(f"{ctx} must define 'keywords' and/or 'patterns'")
        themes.append(
            ThemeSpec(
                theme=_label(item, "theme", ctx),
                description=_label(item, "description", ctx),
                user_segment=_label(item, "user_segment", ctx),
                keywords=keywords,
                patterns=patterns,
            )
        )

    implicit_themes = tuple(
        ThemeSpec(
            theme=_label(item, "theme", ctx),
            description=_label(item, "description", ctx),
            user_segment=_label(item, "user_segment", ctx),
            patterns=_patterns(item.get("patterns"), f"{ctx}.patterns", required=True),
            key=_label(item, "key", ctx),
        )
        for ctx, item in _entries(raw, "implicit_themes")
    )

    sentiment_raw = raw.get("sentiment")
    if not isinstance(sentiment_raw, dict):
        raise ConfigError("Taxonomy is missing the 'sentiment' mapping")

    lexicon = SentimentLexicon(
        negative=_strings(sentiment_raw.get("negative"), "sentiment.negative", required=True),
        positive=_strings(sentiment_raw.get("positive"), "sentiment.positive", required=True),
    )

    return Taxonomy(
        pain_points=pain_points,
        emotions=tuple(emotions),
        biases=biases,
        implicit_biases=implicit_biases,
        themes=tuple(themes),
        implicit_themes=implicit_themes,
        sentiment=lexicon,
    )


def load_taxonomy(path: Path) -> Taxonomy:
    """
    Load a taxonomy YAML file.

    Raises:
        ConfigError:
            If the file is missing, cannot be parsed, or is invalid.
    """

    if not path.is_file():
        raise ConfigError(f"Taxonomy file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read taxonomy YAML: {path}: {exc}") from exc

    try:
        return parse_taxonomy(raw)
    except ConfigError as exc:
        raise ConfigError(f"Invalid taxonomy {path}: {exc}") from exc


@lru_cache(maxsize=None)
def default_taxonomy() -> Taxonomy:
    """Return the packaged default taxonomy (parsed once per process)."""

    text = resources.files("feedback_analysis").joinpath("taxonomy.yaml").read_text(encoding="utf-8")
    return parse_taxonomy(yaml.safe_load(text))


def taxonomy_hash(taxonomy: Taxonomy) -> str:
    """Return a stable hash of a taxonomy.

    Work files record this hash so a changed taxonomy triggers re-analysis even
    if the feedback files did not change.
    """

    canonical = json.dumps(_to_plain(taxonomy), sort_keys=True, ensure_ascii=False, separators=(",", ":"))
    return md5_text(canonical)


def _to_plain(value: Any) -> Any:
    if isinstance(value, re.Pattern):
        return value.pattern
    if isinstance(value, (tuple, list)):
        return [_to_plain(v) for v in value]
    if hasattr(value, "__dataclass_fields__"):
        return {name: _to_plain(getattr(value, name)) for name in value.__dataclass_fields__}
    return value


def _entries(raw: dict[str, Any], section: str) -> list[tuple[str, dict[str, Any]]]:
    """Return `(context, entry)` pairs for a list section."""

    value = raw.get(section)
    if not isinstance(value, list):
        raise ConfigError(f"Taxonomy section '{section}' must be a list")

    out: list[tuple[str, dict[str, Any]]] = []
    for idx, item in enumerate(value, start=1):
        ctx = f"{section}[{idx}]"
        if not isinstance(item, dict):
            raise ConfigError(f"{ctx} must be a mapping")
        out.append((ctx, item))
    return out


def _label(item: dict[str, Any], key: str, ctx: str) -> str:
    value = item.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{ctx}.{key} must be a non-empty string")
    return value.strip()


def _strings(value: Any, ctx: str, *, required: bool) -> tuple[str, ...]:
    """Validate a keyword list. Keywords are lowercased for substring matching."""

    if value is None and not required:
        return ()
    if not isinstance(value, list) or (required and not value):
        raise ConfigError(f"{ctx} must be a non-empty list of strings")

    out: list[str] = []
    for idx, item in enumerate(value, start=1):
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"{ctx}[{idx}] must be a non-empty string")
        # Keep inner/trailing spaces: "not " is a different signal than "not".
        out.append(item.lower())
    return tuple(out)


def _patterns(value: Any, ctx: str, *, required: bool) -> tuple[re.Pattern[str], ...]:
    sources = _raw_patterns(value, ctx, required=required)

    compiled: list[re.Pattern[str]] = []
    for idx, source in enumerate(sources, start=1):
        try:
            compiled.append(re.compile(source, re.IGNORECASE))
        except re.error as exc:
            raise ConfigError(f"{ctx}[{idx}] is not a valid regular expression: {exc}") from exc
    return tuple(compiled)


def _raw_patterns(value: Any, ctx: str, *, required: bool) -> list[str]:
    if value is None and not required:
        return []
    if not isinstance(value, list) or (required and not value):
        raise ConfigError(f"{ctx} must be a non-empty list of regular expressions")
    if not all(isinstance(p, str) and p for p in value):
        raise ConfigError(f"{ctx} must only contain non-empty strings")
    return list(value)
