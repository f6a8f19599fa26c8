"""
Daytrip command-line entrypoint.

Prints the route report for the built-in catalog to stdout.
Log lines go to stderr so the report stays clean.
"""

import logging
import sys

from .catalog import PLACES
from .config import Config, ConfigError, TripSettings
from .report import build_report, render_report

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def main() -> int:
    """Main planning entrypoint."""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    try:
        logger.info("🗺️  Starting route planning...")

        config = Config.load()
        logger.info(f"Config loaded: {config}")
        settings = TripSettings.from_config(config)

        results = build_report(PLACES, settings)
        print(render_report(results))
        return 0

    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Planning interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Planning failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
