"""Command-line converter between scientific and alternative pitch notation.

Usage::

    python -m altpitch C#4          # prints mid2C#
    python -m altpitch hihiA        # prints A5
    echo lowlowA | python -m altpitch
    python -m altpitch --config altpitch.yaml -v A0

With no PITCH argument the pitch is read from standard input. An invalid
pitch prints an error on stderr and exits with status 1.
"""

import argparse
import logging
import os
import sys
import typing

import yaml

import altpitch.notation


DEFAULT_CONFIG_PATH = "altpitch.yaml"
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


def load_config (config_path: str = DEFAULT_CONFIG_PATH, warn_missing: bool = True) -> dict:

	"""
	Load configuration from a YAML file.

	A missing file, or one whose top level is not a mapping, yields the
	defaults. Pass ``warn_missing=False`` to skip the warning for a missing file.
	"""

	if not os.path.exists(config_path):
		if warn_missing:
			logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		config = yaml.safe_load(f)

	if config is None:
		return {}

	if not isinstance(config, dict):
		logger.warning(f"Config file {config_path} is not a mapping. Using defaults.")
		return {}

	return config


def read_pitch (argument: typing.Optional[str], stream: typing.TextIO) -> str:

	"""
	Return the pitch argument, or the first line of ``stream`` without its line terminator.
	"""

	if argument is not None:
		return argument

	line = stream.readline()

	if line.endswith("\n"):
		line = line[:-1]

	if line.endswith("\r"):
		line = line[:-1]

	return line


def configure_logging (config: dict, verbose: bool = False) -> None:

	"""
	Set up root logging from the ``logging.level`` config key.
	"""

	section = config.get('logging')

	if not isinstance(section, dict):
		section = {}

	level_name = str(section.get('level', DEFAULT_LOG_LEVEL)).upper()

	if verbose:
		level_name = "DEBUG"

	level = logging.getLevelName(level_name)

	if not isinstance(level, int):
		level = logging.WARNING

	logging.basicConfig(level=level)


def build_parser () -> argparse.ArgumentParser:

	"""
	Build the command-line argument parser.
	"""

	parser = argparse.ArgumentParser(prog="altpitch", description="Convert a pitch between scientific and alternative notation")
	parser.add_argument("pitch", nargs="?", help="pitch to convert, e.g. C#4 or mid2C# (read from stdin if omitted)")
	parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help=f"YAML config file (default: {DEFAULT_CONFIG_PATH})")
	parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the altpitch command.
	"""

	args = build_parser().parse_args(argv)

	# The default file is optional; a path given with --config is expected to exist.
	config = load_config(args.config, warn_missing=args.config != DEFAULT_CONFIG_PATH)

	configure_logging(config, verbose=args.verbose)

	text = read_pitch(args.pitch, sys.stdin)

	try:
		result = altpitch.notation.parse_notation(text)
	except altpitch.notation.NotationParseError:
		print(f"error: invalid pitch: {text!r}", file=sys.stderr)
		return 1

	target = result.format.other()

	logger.debug(f"Detected {result.format.value} notation for {text!r}, rendering {target.value}")

	print(altpitch.notation.render(result.pitch, target))

	return 0


if __name__ == "__main__":
	sys.exit(main())
