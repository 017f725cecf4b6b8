"""Configuration check for deployment tooling."""

import logging

from lakehouse_connector.adapters.driven.config.settings import load_settings
from lakehouse_connector.adapters.driven.logging.logging_config import configure_logs

__all__ = ["main"]

logger = logging.getLogger(__name__)


def main() -> int:
    """Check that the connector can be configured.

    Validates:
    - Required environment variables are set.
    - Port and flags parse.
    - Input file (if configured) exists and holds a JSON array of objects.

    Returns:
        0 if healthy, 1 if unhealthy.
    """
    configure_logs()

    try:
        _ = load_settings()
    except Exception as exc:
        logger.error(f"Connector configuration check FAILED: {exc}")
        return 1

    logger.info("Connector configuration check OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
