#!/usr/bin/env python3
"""
Entry point for running the todo API.
Supports a development (auto-reload) and a production mode.
"""

import logging
import sys

import uvicorn

from todo_api.config import get_settings
from todo_api.logging_utils import configure_logging

logger = logging.getLogger(__name__)

APP_PATH = "todo_api.main:app"


def log_startup(host: str, port: int, mode: str) -> None:
    """Log a single startup line for process managers."""
    logger.info("Starting on %s:%s (MODE=%s)", host, port, mode)


def run_server(reload: bool = False) -> None:
    """Serve the app with a single worker; the todo collection lives in this process."""
    settings = get_settings()
    log_startup(settings.host, settings.port, "dev" if reload else "prod")
    uvicorn.run(
        APP_PATH,
        host=settings.host,
        port=settings.port,
        reload=reload,
        workers=1,
        log_level=settings.log_level.lower(),
    )


def show_help():
    print("""
Todo API - Launch Utility

Usage:
  todo-api [command]

Commands:
  dev        - Run with auto-reload
  prod       - Run the server (default)
  help       - Show this help message
    """.strip())


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    mode = argv[0].lower() if argv else "prod"
    configure_logging(get_settings().log_level)

    try:
        if mode == "dev":
            run_server(reload=True)
        elif mode == "prod":
            run_server()
        elif mode in ["help", "-h", "--help"]:
            show_help()
        else:
            print(f"Unknown mode: {mode}")
            show_help()
            sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutdown requested...")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
