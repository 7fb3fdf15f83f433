"""CLI for ACR cleanup."""

import argparse
import sys
from pathlib import Path

import structlog

from .config import CleanupConfig
from .exceptions import CleanupError
from .factory import Factory, configure_logging


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description=(
            "Remove untagged images from Azure Container Registry"
            " repositories.  Without a config file, settings come from the"
            " RES_GROUP, ACR_NAME and REPO_NAMES environment variables."
        )
    )
    parser.add_argument(
        "-c",
        "--config-file",
        type=Path,
        help="cleanup config file (YAML)",
        default=None,
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
        default=False,
    )
    parser.add_argument(
        "-x",
        "--dry-run",
        action="store_true",
        help="Dry run only: do not delete any images",
        default=False,
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Do not ask for confirmation before deleting images",
        default=False,
    )
    return parser.parse_args(argv)


def _load_config(args: argparse.Namespace) -> CleanupConfig:
    if args.config_file:
        cfg = CleanupConfig.from_file(args.config_file)
    else:
        cfg = CleanupConfig.from_env()

    # Command-line switches override whatever was loaded
    if args.dry_run:
        cfg.dry_run = True
    if args.debug:
        cfg.debug = True
    if args.yes:
        cfg.assume_yes = True
    return cfg


def main(argv: list[str] | None = None) -> None:
    """Remove untagged images from the configured repositories."""
    args = _parse_args(argv)
    logger = structlog.get_logger(__name__)
    try:
        cfg = _load_config(args)
        configure_logging(debug=cfg.debug)
        logger.debug("Initialized logging")
        logger.info(
            "The script arguments are as follow.",
            resource_group=cfg.resource_group,
            registry_name=cfg.registry_name,
            repositories=cfg.repositories,
        )
        cfg.check()
        Factory(cfg).create_cleaner().run()
    except CleanupError as exc:
        logger.error(str(exc))
        sys.exit(1)
