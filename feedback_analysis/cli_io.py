# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Small CLI interaction helpers.

These helpers centralize terminal interaction behavior so actions can stay
focused on their core job.

Destructive actions (overwriting the report, emptying the workdir) follow the
same rules:
- In interactive terminals, the user is asked for confirmation.
- In non-interactive contexts (CI, pipes), an explicit `--force` is required.
"""

import sys
from pathlib import Path

from feedback_analysis.config import ConfigError


def is_interactive_tty() -> bool:
    """
    Determine whether we can safely prompt the user.

    Returns:
        True if both stdin and stdout are connected to a TTY.
    """

    try:
        return sys.stdin.isatty() and sys.stdout.isatty()
    except Exception:  # noqa: BLE001
        return False


def prompt_yes_no(question: str, *, default_no: bool = True) -> bool:
    """
    Ask the user a yes/no question.

    Args:
        question:
            Prompt text without the trailing choice suffix.
        default_no:
            If true, empty input is treated as "no".

    Returns:
        True if the user answered yes.

    Raises:
        RuntimeError:
            If the prompt cannot be shown in a non-interactive session.
    """

    if not is_interactive_tty():
        raise RuntimeError("Cannot prompt in non-interactive mode")

    suffix = "[y/N]" if default_no else "[Y/n]"
    while True:
        answer = input(f"{question} {suffix} ").strip().lower()
        if not answer:
            return not default_no
        if answer in {"y", "yes"}:
            return True
        if answer in {"n", "no"}:
            return False


def confirm_or_force(question: str, *, force: bool, refusal: str) -> bool:
    """
    Decide whether a destructive step may proceed.

    Args:
        question:
            Confirmation prompt shown in interactive sessions.
        force:
            Value of the action's `--force` flag.
        refusal:
            Error message used in non-interactive sessions without `--force`.

    Returns:
        True if the step may proceed, False if the user declined.

    Raises:
        ConfigError:
            If confirmation is required but cannot be requested.
    """

    if force:
        return True
    if not is_interactive_tty():
        raise ConfigError(f"{refusal} Re-run with --force.")
    return prompt_yes_no(question, default_no=True)


def prompt_overwrite(path: Path, *, force: bool) -> bool:
    """Confirm overwriting an existing output file."""

    return confirm_or_force(
        f"Output file already exists: {path}. Overwrite?",
        force=force,
        refusal=f"Output file already exists: {path}. Refusing to overwrite in non-interactive mode.",
    )


def prompt_delete_contents(path: Path, *, force: bool) -> bool:
    """Confirm deleting all contents of a directory."""

    return confirm_or_force(
        f"This will delete all contents of '{path}'. Continue?",
        force=force,
        refusal=f"Refusing to clean '{path}' without confirmation on a non-interactive TTY.",
    )
