"""Command-line entry point for FleetScope.

Usage::

    python -m fleetscope --api-url http://collector:8080/api --view bulk-tasks
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fleetscope import __version__
from fleetscope.models.state.app_settings import AppSettings
from fleetscope.models.state.config_manager import ConfigLoadError, ConfigManager
from fleetscope.screens import DEFAULT_VIEW, SCREEN_FACTORIES

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fleetscope",
        description="Terminal dashboard for cluster bulk write-task telemetry.",
    )
    parser.add_argument("--api-url", help="Base URL of the telemetry collector API")
    parser.add_argument(
        "--config",
        type=Path,
        help=f"Settings file (default: {ConfigManager.default_path()})",
    )
    parser.add_argument("--log-file", help="File that receives application logs")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level",
    )
    parser.add_argument(
        "--view",
        choices=sorted(SCREEN_FACTORIES),
        default=DEFAULT_VIEW,
        help=f"View shown at startup (default: {DEFAULT_VIEW})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_settings(args: argparse.Namespace) -> tuple[AppSettings, str | None]:
    """Load settings and apply command-line overrides.

    Returns the settings and, when the settings file was unusable, the reason
    defaults were used instead.
    """
    load_error: str | None = None
    try:
        settings = ConfigManager.load(args.config)
    except ConfigLoadError as exc:
        settings = AppSettings()
        load_error = str(exc)

    overrides: dict[str, Any] = {
        "api_base_url": args.api_url,
        "log_file": args.log_file,
        "log_level": args.log_level,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if overrides:
        settings = AppSettings.model_validate({**settings.model_dump(), **overrides})
    return settings, load_error


def configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        filename=settings.log_file,
        level=settings.log_level,
        format=LOG_FORMAT,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings, load_error = resolve_settings(args)
    except ValidationError as exc:
        parser.error(str(exc))

    configure_logging(settings)
    if load_error is not None:
        logger.warning(f"Using default settings: {load_error}")
    logger.info(f"Starting FleetScope {__version__} on view {args.view}")

    from fleetscope.app import FleetScopeApp

    FleetScopeApp(settings=settings, initial_view=args.view).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
