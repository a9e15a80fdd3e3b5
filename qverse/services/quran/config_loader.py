# qverse/services/quran/config_loader.py
"""
Alias Configuration Loader

Loads additional named-verse and surah aliases from YAML and layers them
on top of the built-in tables. File entries are inserted only; a file
that tries to re-map a built-in alias is rejected.

File format:

    named_verses:
      "verse of the throne": "2:255"
    surahs:
      "the opening chapter": 1
"""

import logging
import os
from functools import lru_cache
from typing import Any, Dict, Optional

import yaml

from ...core import config
from .aliases import DEFAULT_TABLES, AliasTableError, AliasTables

logger = logging.getLogger(__name__)


def read_alias_file(path: str) -> Dict[str, Any]:
    """
    Read an alias YAML file.

    Returns:
        Dict with "named_verses" and "surahs" mappings (possibly empty)

    Raises:
        AliasTableError: If the file is not a mapping of mappings
    """
    if not os.path.exists(path):
        return {"named_verses": {}, "surahs": {}}

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise AliasTableError(f"Alias file {path} must contain a mapping")

    result = {}
    for section in ("named_verses", "surahs"):
        entries = data.get(section) or {}
        if not isinstance(entries, dict):
            raise AliasTableError(f"Section {section!r} in {path} must be a mapping")
        result[section] = entries
    return result


def load_tables(path: Optional[str] = None, base: AliasTables = DEFAULT_TABLES) -> AliasTables:
    """
    Build alias tables from the built-ins plus an optional YAML file.

    Args:
        path: YAML file (defaults to QURAN_ALIAS_FILE)
        base: Tables to extend

    Returns:
        AliasTables
    """
    path = path or config.QURAN_ALIAS_FILE
    data = read_alias_file(path)

    if not data["named_verses"] and not data["surahs"]:
        return base

    tables = base.extended(named_verses=data["named_verses"], surahs=data["surahs"])
    logger.info(
        f"Loaded {len(data['named_verses'])} named verses and "
        f"{len(data['surahs'])} surah aliases from {path}"
    )
    return tables


@lru_cache(maxsize=1)
def get_tables() -> AliasTables:
    """Process-wide alias tables, loaded once."""
    return load_tables()


def reload_tables() -> AliasTables:
    """Clear cache and reload tables."""
    get_tables.cache_clear()
    return get_tables()
