# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Working directory cleanup action.

`clean` deletes the analysis work files by emptying `workdir`. The directory
itself is kept. Without `--force` the user is asked first; sessions without a
terminal must pass `--force`.
"""

import argparse
import shutil
from dataclasses import dataclass
from pathlib import Path

from feedback_analysis.cli_io import prompt_delete_contents
from feedback_analysis.config import ConfigError, ProjectConfig


@dataclass(frozen=True)
class CleanAction:
    """`clean` subcommand."""

    name: str = "clean"
    help: str = "Delete all analysis work files from the working directory"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Delete without asking for confirmation",
        )

    def run(self, args: argparse.Namespace, config: ProjectConfig | None) -> None:
        """
        Empty the working directory.

        Raises:
            ConfigError:
                If the workdir contains the project itself, cannot be emptied,
                or confirmation is needed but no terminal is attached.
        """

        if config is None:
            raise RuntimeError("CleanAction requires a config, but none was provided")

        workdir = config.workdir.resolve()
        protected = self._protected_reason(workdir, config.base_dir.resolve())
        if protected:
            raise ConfigError(f"Refusing to clean dangerous workdir {workdir}: {protected}")

        if not workdir.exists():
            print(f"Nothing to clean, workdir does not exist: {workdir}")
            return

        if not prompt_delete_contents(workdir, force=bool(args.force)):
            print("Aborted.")
            return

        removed = self._remove_children(workdir)
        print(f"Cleaned {removed} item(s) from: {workdir}")

    def _protected_reason(self, workdir: Path, base_dir: Path) -> str | None:
        """Return why `workdir` must not be emptied, or None if it is safe."""

        if workdir == Path(workdir.anchor):
            return "it is the filesystem root"
        if workdir == base_dir or workdir in base_dir.parents:
            return "it contains the project directory"

        try:
            home = Path.home().resolve()
        except RuntimeError:
            return "the home directory cannot be determined"
        if workdir == home:
            return "it is the home directory"

        return None

    def _remove_children(self, directory: Path) -> int:
        if not directory.is_dir():
            raise ConfigError(f"workdir is not a directory: {directory}")

        count = 0
        for child in sorted(directory.iterdir()):
            try:
                if child.is_dir() and not child.is_symlink():
                    shutil.rmtree(child)
                else:
                    child.unlink()
            except OSError as exc:
                raise ConfigError(f"Failed to remove '{child}': {exc}") from exc
            count += 1
        return count
