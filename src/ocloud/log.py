"""Logging setup shared by the CLI and the MCP server entrypoints.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed once here by whichever entrypoint runs.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Attach a single stderr handler to the ``ocloud`` logger.

    Calling this more than once replaces the level but never stacks handlers.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    root = logging.getLogger("ocloud")
    root.setLevel(level)
    if not any(getattr(h, "_ocloud_handler", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._ocloud_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
