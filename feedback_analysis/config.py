# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `feedback.yaml`, validating required keys, and
normalizing paths so that downstream actions can rely on a typed config object.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


CONFIG_FILENAME = "feedback.yaml"
CONFIG_ENV_VAR = "FEEDBACK_ANALYSIS_CONFIG"


@dataclass(frozen=True)
class AnalysisOptions:
    """
    Tuning knobs of the analysis pipeline.

    Attributes:
        cluster_threshold:
            Minimum similarity to a cluster seed for the clusters that feed the
            pain point boost.
        fallback_threshold:
            Looser threshold used by the implicit inference fallbacks (inferred
            pain points and recurring themes).
    """

    cluster_threshold: float = 0.35
    fallback_threshold: float = 0.25


@dataclass(frozen=True)
class ProjectConfig:
    """
    Parsed configuration for a feedback analysis project.

    Attributes:
        config_path:
            Path to the YAML config file used for this run.
        base_dir:
            Directory that relative paths and glob patterns are resolved against.
        include:
            Glob patterns for feedback files to include.
        exclude:
            Glob patterns for feedback files to exclude.
        workdir:
            Directory for per-document analysis work files.
        outfile:
            Target ODS path for the final report.
        taxonomy_path:
            Optional custom taxonomy file. The packaged taxonomy is used if
            omitted.
        analysis:
            Pipeline options.
    """

    config_path: Path
    base_dir: Path
    include: list[str]
    exclude: list[str]
    workdir: Path
    outfile: Path
    taxonomy_path: Path | None = None
    analysis: AnalysisOptions = field(default_factory=AnalysisOptions)


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line. Takes precedence
            over the `FEEDBACK_ANALYSIS_CONFIG` environment variable.

    Returns:
        The resolved Path object (not necessarily existing).
    """

    if cli_path:
        return Path(cli_path)

    env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env_path:
        return Path(env_path)

    return Path.cwd() / CONFIG_FILENAME


def load_config(path: Path) -> ProjectConfig:
    """
    Load and validate a `feedback.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.

    Returns:
        A validated ProjectConfig instance.

    Raises:
        ConfigError:
            If the file is missing, unreadable, cannot be parsed as YAML, or is
            missing required keys.
    """

    if not path.exists():
        raise ConfigError(
            f"No {CONFIG_FILENAME} found in current directory and no --config provided. "
            "Use the 'template' command to create one or pass --config PATH."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    missing = [k for k in ("include", "workdir", "outfile") if k not in raw]
    if missing:
        raise ConfigError(f"Config is missing required key(s): {', '.join(missing)}")

    include = _parse_patterns(raw.get("include"), key="include")
    if not include:
        raise ConfigError("'include' must be a non-empty string or list of strings")

    exclude = _parse_patterns(raw.get("exclude"), key="exclude")

    workdir = raw.get("workdir")
    if not isinstance(workdir, str) or not workdir.strip():
        raise ConfigError("'workdir' must be a non-empty string")

    outfile = raw.get("outfile")
    if not isinstance(outfile, str) or not outfile.strip():
        raise ConfigError("'outfile' must be a non-empty string")

    taxonomy = raw.get("taxonomy")
    if taxonomy is not None and (not isinstance(taxonomy, str) or not taxonomy.strip()):
        raise ConfigError("'taxonomy' must be a non-empty string if provided")

    analysis = parse_analysis_options(raw.get("analysis"))

    # Interpret workdir/outfile/taxonomy and glob patterns relative to config file location.
    base_dir = path.parent.resolve()

    return ProjectConfig(
        config_path=path.resolve(),
        base_dir=base_dir,
        include=include,
        exclude=exclude,
        workdir=(base_dir / workdir).resolve(),
        outfile=(base_dir / outfile).resolve(),
        taxonomy_path=(base_dir / taxonomy).resolve() if isinstance(taxonomy, str) else None,
        analysis=analysis,
    )


def _parse_patterns(value: Any, *, key: str) -> list[str]:
    """
    Parse a glob pattern option that may be a string or a list of strings.

    Raises:
        ConfigError:
            If the value has the wrong type or contains empty patterns.
    """

    if value is None:
        return []

    if isinstance(value, str):
        if not value.strip():
            raise ConfigError(f"'{key}' must be a non-empty string")
        return [value.strip()]

    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a string or a list of strings")

    patterns: list[str] = []
    for idx, item in enumerate(value, start=1):
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"'{key}' entries must be non-empty strings (problem at index {idx})")
        patterns.append(item.strip())
    return patterns


def parse_analysis_options(value: Any) -> AnalysisOptions:
    """
    Parse and validate the optional `analysis` section.

    Args:
        value:
            Raw YAML value for the `analysis` key.

    Returns:
        An AnalysisOptions instance (with defaults if section is missing).

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return AnalysisOptions()

    if not isinstance(value, dict):
        raise ConfigError("'analysis' must be a mapping if provided")

    cluster_threshold = value.get("cluster_threshold", AnalysisOptions.cluster_threshold)
    fallback_threshold = value.get("fallback_threshold", AnalysisOptions.fallback_threshold)

    for name, threshold in (
        ("cluster_threshold", cluster_threshold),
        ("fallback_threshold", fallback_threshold),
    ):
        # bool is an int subclass; reject `true`/`false` explicitly.
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise ConfigError(f"analysis.{name} must be a number")
        if not 0.0 <= float(threshold) <= 1.0:
            raise ConfigError(f"analysis.{name} must be between 0 and 1")

    return AnalysisOptions(
        cluster_threshold=float(cluster_threshold),
        fallback_threshold=float(fallback_threshold),
    )
