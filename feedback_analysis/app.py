# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Command line entry point (`feedback-analysis`).

Every subcommand is an action object. This module only wires them into an
argparse parser, loads the project configuration for actions that need it
and maps errors to exit codes.
"""

import argparse
import logging
import sys
from dotenv import load_dotenv

from feedback_analysis.actions.analyze import AnalyzeAction
from feedback_analysis.actions.base import Action
from feedback_analysis.actions.clean import CleanAction
from feedback_analysis.actions.run import RunAction
from feedback_analysis.actions.template import TemplateAction
from feedback_analysis.actions.write_output import WriteOutputAction
from feedback_analysis.config import CONFIG_ENV_VAR, CONFIG_FILENAME, ConfigError, find_config_path, load_config


EXIT_OK = 0
EXIT_CONFIG_ERROR = 2

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _actions() -> dict[str, Action]:
	"""Return the subcommands in `--help` order, keyed by name."""
	actions: list[Action] = [
		TemplateAction(),
		RunAction(),
		AnalyzeAction(),
		WriteOutputAction(),
		CleanAction(),
	]
	return {a.name: a for a in actions}


def build_parser() -> argparse.ArgumentParser:
	"""
	Build the argument parser with one subparser per action.

	Actions that work on a project additionally accept `--config`.
	"""
	parser = argparse.ArgumentParser(
		prog="feedback-analysis",
		description=(
			"Rule-based analysis of free-form user feedback: pain points, emotions, "
			"behavioral themes, cognitive biases, personas and recommendations."
		),
	)
	parser.add_argument(
		"-v",
		"--verbose",
		action="store_true",
		help="Log the pipeline's intermediate results to stderr",
	)

	config_option = argparse.ArgumentParser(add_help=False)
	config_option.add_argument(
		"-c",
		"--config",
		help=f"Project configuration (default: ${CONFIG_ENV_VAR}, then ./{CONFIG_FILENAME})",
	)

	subparsers = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)
	for name, action in _actions().items():
		sub = subparsers.add_parser(
			name,
			help=action.help,
			parents=[config_option] if action.requires_config else [],
		)
		action.add_arguments(sub)

	return parser


def _configure_logging(verbose: bool) -> None:
	if verbose:
		logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
	"""
	Run the CLI.

	Args:
		argv:
			Arguments without the program name. Defaults to `sys.argv[1:]`.

	Returns:
		`0` on success, `2` for configuration and input errors.
	"""
	load_dotenv()

	args = build_parser().parse_args(argv)
	_configure_logging(args.verbose)

	action = _actions()[args.action]

	try:
		config = None
		if action.requires_config:
			config = load_config(find_config_path(args.config))

		action.run(args, config)
	except ConfigError as exc:
		print(f"error: {exc}", file=sys.stderr)
		return EXIT_CONFIG_ERROR

	return EXIT_OK


if __name__ == "__main__":
	raise SystemExit(main())
