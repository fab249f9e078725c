"""Development server entry point."""

from __future__ import annotations

import logging
import os

from salaryadjust.backend.app import create_app, parse_positive_int

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
LOG_LEVEL_ENV = "SALARYADJUST_LOG_LEVEL"


def resolve_port() -> int:
    """Return the listening port from ``SALARYADJUST_PORT`` or ``PORT``."""

    for env in ("SALARYADJUST_PORT", "PORT"):
        port = parse_positive_int(os.getenv(env), env=env)
        if port is not None:
            return port
    return DEFAULT_PORT


def main() -> int:
    """Run the Flask development server."""

    logging.basicConfig(
        level=os.getenv(LOG_LEVEL_ENV, "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app()
    port = resolve_port()
    logger.info("Server running at http://localhost:%d", port)
    app.run(host="0.0.0.0", port=port)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
