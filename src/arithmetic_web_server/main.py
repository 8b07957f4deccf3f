"""
Main entrypoint of the arithmetic web server.

This script:
- Reads the listening port from the PORT environment variable (default 5000)
- Applies optional --host / --port overrides from the command line
- Logs the startup banner and serves the Flask application
"""

import argparse
from typing import List, Optional

from pydantic import ValidationError

from arithmetic_web_server.common.logger import logger
from arithmetic_web_server.server.app import create_app
from arithmetic_web_server.server.config import ServerSettings


def parse_args(argv: Optional[List[str]] = None) -> ServerSettings:
    """
    Parse command-line arguments and validate them together with the environment.

    :param list argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Validated server settings
    :rtype: ServerSettings
    """
    parser = argparse.ArgumentParser(description="Calculator web server")

    parser.add_argument(
        "--host",
        default=None,
        help="Bind address (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        default=None,
        help="TCP port (default: $PORT or 5000)",
    )

    args = parser.parse_args(argv)

    try:
        return ServerSettings.from_env(host=args.host, port=args.port)
    except ValidationError as exc:
        parser.error(str(exc))


def log_banner(settings: ServerSettings) -> None:
    """Log the startup banner with the address the server listens on."""
    logger.info("========================================")
    logger.info("🖥️ Server started successfully!")
    logger.info("Access the application at:")
    logger.info(settings.url)
    logger.info("========================================")


def main(argv: Optional[List[str]] = None) -> None:
    """
    Start the web server.
    """
    settings: ServerSettings = parse_args(argv)
    app = create_app()

    log_banner(settings)
    # One thread per request; handlers share no state
    app.run(host=str(settings.host), port=settings.port, threaded=True)


if __name__ == "__main__":
    main()
