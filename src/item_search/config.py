"""Environment-variable-based configuration."""

import os
from pathlib import Path


def get_catalog_path() -> Path | None:
    """Return the item catalog file path from ITEM_SEARCH_CATALOG_PATH, if set."""
    raw = os.environ.get("ITEM_SEARCH_CATALOG_PATH", "")
    if not raw:
        return None
    return Path(raw).expanduser()


def get_set_backend() -> str:
    """Return the set-membership backend name from ITEM_SEARCH_SET_BACKEND."""
    return os.environ.get("ITEM_SEARCH_SET_BACKEND", "equipment").lower()


def get_max_results() -> int:
    """Return the result cap for search tools from ITEM_SEARCH_MAX_RESULTS."""
    return int(os.environ.get("ITEM_SEARCH_MAX_RESULTS", "50"))


def get_log_level() -> str:
    """Return the logging level from ITEM_SEARCH_LOG_LEVEL."""
    return os.environ.get("ITEM_SEARCH_LOG_LEVEL", "WARNING").upper()
