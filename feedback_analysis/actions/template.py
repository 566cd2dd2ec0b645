# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Starter configuration.

`template` writes a commented `feedback.yaml` that works for the usual
project layout (feedback files below `./feedback`).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from feedback_analysis.config import CONFIG_FILENAME, ConfigError, ProjectConfig


TEMPLATE_YAML = """\
# Feedback files to analyze (recursive glob patterns, relative to this file).
# Supported formats: .txt, .md, .odt
# 'include' is required and can be a string or a list of strings.
include: ["feedback/**/*.txt", "feedback/**/*.md", "feedback/**/*.odt"]
# 'exclude' is optional and can be a string or a list of strings.
exclude: "feedback/private/**"

# Directory for the per-document analysis work files
workdir: ./work

# Spreadsheet report written by 'write-output'
outfile: report.ods

# Optional: your own taxonomy with the same structure as
# feedback_analysis/taxonomy.yaml. The packaged taxonomy is used if omitted.
# taxonomy: ./taxonomy.yaml

# Optional analysis options (defaults shown)
# analysis:
#   # Similarity a sentence needs to join a cluster seed. Clusters let a
#   # problem repeated in other words count as more than one mention.
#   cluster_threshold: 0.35
#
#   # Looser similarity for inferred issues and recurring themes, used when
#   # no keyword matches.
#   fallback_threshold: 0.25
"""


@dataclass(frozen=True)
class TemplateAction:
    """`template` subcommand. Works without an existing configuration."""

    name: str = "template"
    help: str = f"Write a commented {CONFIG_FILENAME} to start a project"
    requires_config: bool = False

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "path",
            nargs="?",
            default=CONFIG_FILENAME,
            help=f"Where to write the file (default: ./{CONFIG_FILENAME})",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Replace the file if it already exists",
        )

    def run(self, args: argparse.Namespace, config: ProjectConfig | None) -> None:
        """
        Write the template.

        Raises:
            ConfigError:
                If the destination exists and `--force` is not set.
        """

        _ = config
        dest = Path(args.path)
        if dest.exists() and not args.force:
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(TEMPLATE_YAML, encoding="utf-8")
        print(f"Wrote template config to: {dest}")
