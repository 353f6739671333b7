# -*- coding: utf-8 -*-
import logging
from importlib.metadata import PackageNotFoundError, version

logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = version("yapDatum")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"
