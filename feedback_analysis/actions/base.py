# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Action protocol and path helpers shared by the subcommands.
"""

import argparse
from pathlib import Path
from typing import Protocol

from feedback_analysis.config import ProjectConfig


class Action(Protocol):
    """
    A CLI subcommand.

    Attributes:
        name:
            Subcommand name.
        help:
            One-line description for `--help`.
        requires_config:
            If True, `feedback.yaml` is loaded before `run()` and the
            subcommand accepts `--config`.
    """

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Register the subcommand's own arguments."""

    def run(self, args: argparse.Namespace, config: ProjectConfig | None) -> None:
        """Execute the subcommand. `config` is None unless `requires_config`."""


def resolve_from_base(base_dir: Path, path_value: str) -> Path:
    """Resolve a path stored in a work file against the project directory."""

    path = Path(path_value)
    return path if path.is_absolute() else (base_dir / path).resolve()


def rel_posix(base_dir: Path, path: Path) -> str:
    """
    Return `path` relative to `base_dir` with forward slashes.

    Work files store relative paths so a project directory can be moved.
    Paths outside of `base_dir` are returned absolute.
    """

    resolved = path.resolve()
    try:
        return resolved.relative_to(base_dir.resolve()).as_posix()
    except ValueError:
        return resolved.as_posix()
