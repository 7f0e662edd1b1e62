import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_CONFIG_FILE, load_config, resolve_secret_key
from .errors import UrlSigningError
from .signer import sign_many

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="urlsign",
        description="Append an HMAC-SHA1 'signature' parameter to Google Maps API URLs.",
    )
    parser.add_argument("urls", nargs="+", metavar="URL", help="Absolute URL to sign.")
    parser.add_argument("--key", default=None, help="URL-safe base64 signing secret.")
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE, help="Path to the yaml configuration.")
    parser.add_argument("--log-level", default=None, help="Logging level (overrides the config file).")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Logging is not configured yet while the config file is read
    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        logging.basicConfig(level=logging.WARNING)
        logger.error("Cannot load configuration: %s", e)
        return 2

    level_name = (args.log_level or config.log_level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logging.basicConfig(level=logging.WARNING)
        logger.error("Invalid log level: %r", level_name)
        return 2

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        secret_key = resolve_secret_key(config, override=args.key)
        signed = sign_many(args.urls, secret_key)
    except (UrlSigningError, RuntimeError) as e:
        logger.error("Signing failed: %s", e)
        return 2

    for url in signed:
        print(url)
    logger.info("Signed %d URL(s)", len(signed))
    return 0


if __name__ == "__main__":
    sys.exit(main())
