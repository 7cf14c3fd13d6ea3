"""CLI entrypoint for running the counter service."""

from __future__ import annotations

import uvicorn

from .config import CounterSettings
from .logger import configure_root_logger
from .server import create_app


def main() -> None:
    settings = CounterSettings.from_env()
    configure_root_logger(settings.log_level)
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=settings.access_log,
    )


if __name__ == "__main__":
    main()
