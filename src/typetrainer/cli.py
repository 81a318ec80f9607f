"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import yaml

from .config import TrainerSettings, load_settings
from .errors import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK, EmptyPromptError
from .prompt import load_prompt
from .tui import TypingTrainerApp

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: TrainerSettings) -> None:
    """Send log records to the configured file; the terminal belongs to the TUI."""
    handlers: list[logging.Handler]
    if settings.log_file:
        handlers = [logging.FileHandler(settings.log_file, encoding="utf-8")]
    else:
        handlers = [logging.NullHandler()]
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, handlers=handlers)


def exit_status(app: TypingTrainerApp) -> int:
    """
    Map how the app ended to a process exit status.

    Only a session that was actually interrupted exits with EXIT_INTERRUPTED;
    any other run without a result is a failure.
    """
    if app.return_value is not None:
        return EXIT_OK
    if app.interrupted:
        return EXIT_INTERRUPTED
    error = getattr(app, "_exception", None)
    if error is not None:
        logger.error(f"Session aborted: {error}", exc_info=error)
    return EXIT_FAILURE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typetrainer",
        description="Type the prompt as accurately as you can. Ctrl+C quits.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        default=None,
        help="YAML settings file (default: $TYPETRAINER_CONFIG_FILE)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one typing session and return the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(config_file=args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(settings)
    logger.debug(settings.summary())

    try:
        prompt = load_prompt()
    except EmptyPromptError as exc:
        logger.error(str(exc))
        print(f"Cannot start session: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    app = TypingTrainerApp(prompt, settings=settings)
    result = app.run()
    status = exit_status(app)

    if result is not None:
        print(result.format())
    return status


def run() -> None:
    """Sync entrypoint for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
