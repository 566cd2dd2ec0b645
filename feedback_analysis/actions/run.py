# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Single-text analysis action.

The `run` subcommand analyzes one feedback file (or stdin) without a project
configuration and prints the report as YAML or JSON. This is the quickest way
to paste a block of survey answers into the pipeline. `--sample` analyzes the
bundled demo feedback instead.
"""

import argparse
import json
import sys
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from feedback_analysis.config import ConfigError, ProjectConfig
from feedback_analysis.pipeline import analyze
from feedback_analysis.sources import read_feedback_text
from feedback_analysis.taxonomy import default_taxonomy, load_taxonomy
from feedback_analysis.yaml_io import dump_yaml


SAMPLE_FEEDBACK_FILE = "sample_feedback.txt"


def sample_feedback() -> str:
    """Return the bundled demo feedback, one user comment per paragraph."""

    return resources.files("feedback_analysis").joinpath(SAMPLE_FEEDBACK_FILE).read_text(encoding="utf-8")


@dataclass(frozen=True)
class RunAction:
    """
    `run` subcommand.

    Reads a single text and writes the report to stdout.
    """

    name: str = "run"
    help: str = "Analyze a single feedback file (or stdin) and print the report"
    requires_config: bool = False

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "source",
            nargs="?",
            default="-",
            help="Feedback file (.txt, .md, .odt) or '-' for stdin (default: stdin)",
        )
        parser.add_argument(
            "--sample",
            action="store_true",
            help="Analyze the bundled demo feedback instead of a file",
        )
        parser.add_argument(
            "--format",
            choices=["yaml", "json"],
            default="yaml",
            help="Output format (default: yaml)",
        )
        parser.add_argument(
            "--taxonomy",
            help="Custom taxonomy YAML file (default: packaged taxonomy)",
        )

    def run(self, args: argparse.Namespace, config: ProjectConfig | None) -> None:
        """
        Analyze the text and print the report.

        Raises:
            ConfigError:
                If the source or taxonomy file cannot be read, or `--sample`
                is combined with a source file.
        """

        _ = config
        source = str(args.source)
        if args.sample:
            if source != "-":
                raise ConfigError("--sample cannot be combined with a source file")
            text = sample_feedback()
        elif source == "-":
            text = sys.stdin.read()
        else:
            text = read_feedback_text(Path(source))

        taxonomy = load_taxonomy(Path(args.taxonomy)) if args.taxonomy else default_taxonomy()
        report = analyze(text, taxonomy=taxonomy).to_dict()

        if args.format == "json":
            print(json.dumps(report, ensure_ascii=False, indent=2))
        else:
            print(dump_yaml(report), end="")
