from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("xmlsieve")

logger = logging.getLogger("xmlsieve")

__all__ = ["__version__", "logger"]
