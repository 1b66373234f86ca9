import argparse
import sys

from chatshelf.config.app_config import DEFAULT_HOST, DEFAULT_PORT
from chatshelf.utils.logging_utils import configure_server_logging, logger


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        description="Serve the chatshelf chat list API",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument("--host", type=str, default=DEFAULT_HOST,
                        help=f"Interface to bind (default: {DEFAULT_HOST})")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT,
                        help=f"Port number to run chatshelf on (default: {DEFAULT_PORT})")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_arguments(argv)

    # Import here so --help works without the server dependencies loaded
    import uvicorn
    from chatshelf.server import app

    configure_server_logging()

    logger.info(f"Starting chatshelf on {args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
