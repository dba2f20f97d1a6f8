from __future__ import annotations

import importlib.metadata

DEFAULT_MODULE_NAME = "kycportal"

try:
    __version__ = importlib.metadata.version(DEFAULT_MODULE_NAME)
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"
