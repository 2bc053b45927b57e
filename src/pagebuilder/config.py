"""Local configuration for pagebuilder."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_STORE_DIR = ".pagebuilder_store"
DEFAULT_DOCUMENT_KIND = "pageBuilder"
DEFAULT_TABLET_PREFIX = "md:"
DEFAULT_DESKTOP_PREFIX = "lg:"
DEFAULT_LOG_LEVEL = "WARNING"

# Local-only directory used by the JSON file document store.
PAGEBUILDER_STORE_PATH = Path(os.getenv("PAGEBUILDER_STORE_PATH", DEFAULT_STORE_DIR)).expanduser().resolve()
PAGEBUILDER_DOCUMENT_KIND = os.getenv("PAGEBUILDER_DOCUMENT_KIND", DEFAULT_DOCUMENT_KIND)
PAGEBUILDER_TABLET_PREFIX = os.getenv("PAGEBUILDER_TABLET_PREFIX", DEFAULT_TABLET_PREFIX)
PAGEBUILDER_DESKTOP_PREFIX = os.getenv("PAGEBUILDER_DESKTOP_PREFIX", DEFAULT_DESKTOP_PREFIX)
PAGEBUILDER_LOG_LEVEL = os.getenv("PAGEBUILDER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
