import argparse
import sys

import uvicorn
from loguru import logger

from web_calculator.services.calculator.app import app
from web_calculator.settings import SETTINGS


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description="Run the web calculator service.")
    parser.add_argument(
        "--host",
        type=str,
        default=SETTINGS.server.host,
        help="Interface to bind to.",
    )
    parser.add_argument(
        "--port", type=int, default=SETTINGS.server.port, help="TCP port to listen on."
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=SETTINGS.server.log_level,
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Minimum level written to the log.",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def main(argv=None):
    args = parse_arguments(argv)
    configure_logging(args.log_level)

    logger.info(f"Сервер запущен на порту {args.port}")
    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        timeout_keep_alive=SETTINGS.server.timeout_keep_alive,
    )


if __name__ == "__main__":
    main()
