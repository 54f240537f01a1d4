from __future__ import annotations

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Console logging for the CLI and the Flask entry point.

    Level comes from the argument, then BUBBLES_LOG_LEVEL, then INFO.
    """
    name = (level or os.getenv("BUBBLES_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)
