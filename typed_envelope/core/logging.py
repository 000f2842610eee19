"""
Logging setup for the typed_envelope package loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import settings

PACKAGE_LOGGERS = [
    "typed_envelope",
    "typed_envelope.decoder",
    "typed_envelope.encoder",
    "typed_envelope.payloads",
]


def configure_logging(level: Optional[str] = None) -> None:
    """Ensure a console handler exists and apply the configured level to package loggers."""
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    resolved = (level or settings.log_level).upper()
    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(resolved)
