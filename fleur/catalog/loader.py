# -*- coding: utf-8 -*-
"""
Catalog Loader - Read a catalog from a JSON or YAML file.

Dependencies
------------
pyyaml

Author
------
Fleur Developers

License
-------
MIT License
Copyright (c) 2026 Fleur Developers
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

# Standard library
import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

# Third-party
import yaml

logger = logging.getLogger(__name__)

# Fleur internal
from fleur.catalog.builtin import default_catalog
from fleur.catalog.catalog import Catalog
from fleur.errors import MalformedCatalogError


_JSON_SUFFIXES = ('.json',)
_YAML_SUFFIXES = ('.yaml', '.yml')


def _read_records(path: Path) -> Any:
    suffix = path.suffix.lower()
    with open(path, 'r', encoding='utf-8') as f:
        if suffix in _JSON_SUFFIXES:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise MalformedCatalogError(
                    f"{path}: invalid JSON ({e})"
                ) from e
        if suffix in _YAML_SUFFIXES:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise MalformedCatalogError(
                    f"{path}: invalid YAML ({e})"
                ) from e
    raise MalformedCatalogError(f"{path}: unsupported catalog file type")


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """Load and validate a catalog.

    Parameters
    ----------
    path : Optional[Union[str, Path]]
        A ``.json``, ``.yaml`` or ``.yml`` file holding a list of app
        records. If None, the built-in catalog is returned.

    Returns
    -------
    Catalog

    Raises
    ------
    MalformedCatalogError
        If the file cannot be parsed or the catalog is invalid.
    FileNotFoundError
        If ``path`` does not exist.
    """
    if path is None:
        return default_catalog()

    path = Path(path)
    records = _read_records(path)
    if not isinstance(records, list):
        raise MalformedCatalogError(f"{path}: expected a list of apps")

    catalog = Catalog.from_records(records)
    logger.info("Loaded %d apps from %s", len(catalog), path)
    return catalog
