"""
Logging configuration for the application.

``setup_logging`` attaches a single console handler to the root logger so
module loggers (``logging.getLogger(__name__)``) and the request logging
middleware share one format. Calling it again is a no-op.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive.
            Unknown names fall back to INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (uvicorn, pytest, or a second create_app call)
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
