#!/usr/bin/env python
"""Command-line launcher for the Note Store HTTP service."""
import argparse
import logging
import sys
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from notestore import __version__
from notestore.config import Settings
from notestore.main import create_app, setup_logging

logger = logging.getLogger(__name__)

MISSING_OPTIONS_MESSAGE = "all options --host, --port, and --cache are required"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    -h is taken by --host, so help is only available as --help.
    Unset options fall back to NOTESTORE_* environment variables.
    """
    parser = argparse.ArgumentParser(
        prog="notestore",
        description="Note Store HTTP server",
        add_help=False,
    )
    parser.add_argument("-h", "--host", help="server host")
    parser.add_argument("-p", "--port", help="server port")
    parser.add_argument("-c", "--cache", help="cache directory path (one file per note)")
    parser.add_argument(
        "--log-level",
        help="Logging level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> Settings:
    """Build Settings from the parsed flags; missing ones come from the environment.

    Raises:
        pydantic.ValidationError: a required setting is missing or invalid
    """
    overrides = {
        "host": args.host,
        "port": args.port,
        "cache_dir": args.cache,
        "log_level": args.log_level,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def main(argv: Optional[List[str]] = None) -> None:
    """Run the Note Store server."""
    args = parse_args(argv)
    setup_logging(args.log_level or "INFO")

    try:
        settings = load_settings(args)
    except ValidationError as e:
        logger.error("Error: %s", MISSING_OPTIONS_MESSAGE)
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            logger.error("  - %s: %s", location, error["msg"])
        sys.exit(1)

    setup_logging(settings.log_level)

    try:
        app = create_app(settings)
    except OSError as e:
        logger.error("Cannot use cache directory %s: %s", settings.cache_dir, e)
        sys.exit(1)

    logger.info("Server running at %s/", settings.base_url)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
