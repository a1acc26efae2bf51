"""Command-line entry point: read a message on stdin, print its rendering."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO, TextIO

from mail_canon.core import AppSettings, configure_logging, load_app_settings
from mail_canon.ingestion import EmailParser
from mail_canon.pipeline import render_mail

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create and configure the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Render an RFC822 message from stdin as canonical structured text"
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to a .env file containing configuration overrides.",
    )
    return parser


def execute(settings: AppSettings, source: BinaryIO, sink: TextIO) -> None:
    """Parse the whole of ``source`` and write the rendered document to ``sink``."""
    payload = source.read()
    parsed = EmailParser().parse(payload)
    document = render_mail(parsed, settings.output)
    sink.write(document + settings.output.newline)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_app_settings(env_file=args.env_file)
    configure_logging(settings.logging)
    try:
        execute(settings, sys.stdin.buffer, sys.stdout)
    except Exception as exc:  # noqa: BLE001  # pylint: disable=broad-exception-caught
        LOGGER.debug("Rendering failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
