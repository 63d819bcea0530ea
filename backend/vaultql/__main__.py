"""Entry point for the vaultql server.

Usage:
    python -m vaultql [options]

Options:
    --host HOST         Interface to bind (default: VAULTQL_HOST or 0.0.0.0)
    --port PORT         Port to listen on (default: VAULTQL_PORT or 4000)
    --no-graphiql       Disable the GraphiQL IDE on GET /query
    --log-dir DIR       Also write logs to DIR (default: VAULTQL_LOG_DIR)
    --log-level LEVEL   Console log level (default: VAULTQL_LOG_LEVEL or INFO)
"""

import argparse
import asyncio
import logging
import sys

import uvicorn

from .config import ServerConfig
from .logging import get_logger, setup_logging
from .main import create_app
from .vault import FatalInitError

logger = get_logger("main")


def parse_args(argv: list[str] | None = None) -> ServerConfig:
    parser = argparse.ArgumentParser(description="vaultql GraphQL server")
    parser.add_argument("--host", default="", help="Interface to bind")
    parser.add_argument("--port", type=int, default=0, help="Port to listen on")
    parser.add_argument(
        "--no-graphiql", action="store_true", help="Disable the GraphiQL IDE"
    )
    parser.add_argument("--log-dir", default="", help="Directory for log files")
    parser.add_argument("--log-level", default="", help="Console log level")

    args = parser.parse_args(argv)

    try:
        return ServerConfig(
            host=args.host,
            port=args.port,
            graphiql=False if args.no_graphiql else None,
            log_dir=args.log_dir,
            log_level=args.log_level,
        )
    except ValueError as e:
        parser.error(str(e))


async def run(config: ServerConfig):
    app = create_app(config)

    uvi_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level="warning",
    )
    server = uvicorn.Server(uvi_config)
    await server.serve()


def main():
    config = parse_args()
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    setup_logging(config.log_dir or None, console_level=level)
    try:
        asyncio.run(run(config))
    except FatalInitError as e:
        logger.critical(f"Startup aborted: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
