# -*- coding: utf-8 -*-
"""
Fleur - App catalog and installer for desktop MCP clients.

Holds the catalog of installable integrations and installs them into
the desktop client's configuration.

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

__version__ = "0.1.0"

from fleur.catalog import Catalog, default_catalog, load_catalog
from fleur.errors import AppNotFoundError, FleurError, MalformedCatalogError

__all__: list = [
    "AppNotFoundError",
    "Catalog",
    "FleurError",
    "MalformedCatalogError",
    "default_catalog",
    "load_catalog",
]
