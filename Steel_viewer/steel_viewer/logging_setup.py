"""Logging configuration for the Streamlit app."""

import logging
from typing import Optional

from steel_viewer import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configures the root logger once; Streamlit reruns call this repeatedly."""
    logging.basicConfig(level=level or config.LOG_LEVEL, format=LOG_FORMAT)
    logging.getLogger("steel_viewer").setLevel(level or config.LOG_LEVEL)
