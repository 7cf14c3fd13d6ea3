"""Version detection and startup logging."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_package_version

from .logger import get_logger

logger = get_logger(__name__)

SERVICE_NAME = "atomic-counter"


def get_service_version(package_name: str = SERVICE_NAME) -> str:
    """Return the installed package version, or "0.0.0" when running from a checkout."""
    try:
        return get_package_version(package_name)
    except PackageNotFoundError:
        logger.debug("Package %s is not installed, using default version", package_name)
        return "0.0.0"


def log_service_startup(host: str, port: int, version: str | None = None) -> None:
    """Log a standardized startup message with version and bind address."""
    if not version:
        version = get_service_version()
    logger.info("Starting Atomic Counter Service v%s on %s:%d", version, host, port)
