# -*- coding: utf-8 -*-
"""
Catalog Module - The Fleur app catalog.

Provides the validated, read-only catalog of installable integrations
and the data models that describe them.

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

from fleur.catalog.builtin import APP_RECORDS, default_catalog
from fleur.catalog.catalog import Catalog
from fleur.catalog.loader import load_catalog
from fleur.catalog.models import (
    PLACEHOLDER_ICON,
    AppDescriptor,
    EnvVarSpec,
    Icon,
    Theme,
    UnsupportedIcon,
    UrlIcon,
    resolve_icon,
)

__all__ = [
    "APP_RECORDS",
    "AppDescriptor",
    "Catalog",
    "EnvVarSpec",
    "Icon",
    "PLACEHOLDER_ICON",
    "Theme",
    "UnsupportedIcon",
    "UrlIcon",
    "default_catalog",
    "load_catalog",
    "resolve_icon",
]
