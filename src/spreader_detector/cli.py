"""
Command Line Interface.

    spreader-detector <people file> <meetings file> [--config PATH]
                      [--output PATH] [--verbose]

Exit status is 0 when the output file was fully written and 1 on any
failure. On failure the configured user-facing message for the error's
category is printed to stderr and the detail is logged.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

import yaml

import spreader_detector
from spreader_detector.config.loader import DEFAULT_CONFIG_PATH, ConfigLoader
from spreader_detector.config.models import DetectorConfig, ErrorMessagesConfig
from spreader_detector.domain.errors import (
    ConfigurationError,
    SpreaderDetectorError,
    UsageError,
)
from spreader_detector.pipeline.detection_pipeline import DetectionPipeline

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="spreader-detector",
        description="Classify people by infection probability propagated "
        "through a chronological meetings log.",
    )
    parser.add_argument("people", help="path to the people file")
    parser.add_argument("meetings", help="path to the meetings file")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument(
        "--output", help="output file (overrides output.output_file)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def _load_config(args: argparse.Namespace) -> DetectorConfig:
    """Layer --config and --output over the packaged defaults."""
    overrides = {"output": {"output_file": args.output}} if args.output else None
    source = args.config or str(DEFAULT_CONFIG_PATH)
    try:
        return ConfigLoader().load(args.config, overrides)
    except OSError as exc:
        raise ConfigurationError(source, f"cannot be opened: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(source, f"is not valid YAML: {exc}") from exc
    except ValueError as exc:
        # pydantic.ValidationError is a ValueError
        raise ConfigurationError(source, f"is invalid: {exc}") from exc


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the detector from the command line.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    messages = ErrorMessagesConfig()
    spreader_detector.configure_logging(logging.WARNING)
    try:
        args = build_parser().parse_args(argv)
        if args.verbose:
            spreader_detector.configure_logging(logging.DEBUG)
        config = _load_config(args)
        messages = config.messages
        DetectionPipeline(config).run(args.people, args.meetings)
    except UsageError as exc:
        # argparse detail stays at DEBUG, stderr gets the usage text only
        logger.debug(f"{exc.category}: {exc.message}")
        print(messages.for_category(exc.category), file=sys.stderr)
        return EXIT_FAILURE
    except SpreaderDetectorError as exc:
        logger.error(f"{exc.category}: {exc.message}")
        print(messages.for_category(exc.category), file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
