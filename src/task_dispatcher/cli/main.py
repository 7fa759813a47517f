# src/task_dispatcher/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then serves the HTTP API with uvicorn
until SIGINT/SIGTERM (uvicorn installs the signal handlers).
"""

from __future__ import annotations

import logging

import uvicorn

from ..api.server import create_app
from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/dispatcher")
    setup_logging(log_dir=log_dir, console_level=console_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger.info("Starting %s...", getattr(settings, "app_name", "task-dispatcher"))

    state = create_initial_state(settings=settings)
    app = create_app(state)

    try:
        # log_config=None keeps the handlers installed by setup_logging().
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
