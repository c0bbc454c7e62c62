# -*- coding: utf-8 -*-
"""
Built-in Catalog - The apps shipped with Fleur.

Adding, removing or editing an app is an edit to APP_RECORDS. Records
use the catalog wire shape and are validated when a Catalog is built
from them.

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
from typing import Any, Dict, Tuple

# Fleur internal
from fleur.catalog.catalog import Catalog


def _url_icon(light: str, dark: str = "") -> Dict[str, Any]:
    return {'type': 'url', 'url': {'light': light, 'dark': dark or light}}


APP_RECORDS: Tuple[Dict[str, Any], ...] = (
    {
        'name': "Browser",
        'description': "Web browser",
        'stars': 1000,
        'icon': _url_icon("/servers/browser.svg"),
        'category': "Utilities",
        'price': "Get",
        'developer': "Google LLC",
    },
    {
        'name': "Hacker News",
        'description': "Hacker News",
        'stars': 1000,
        'icon': _url_icon("/servers/yc.svg"),
        'category': "Social",
        'price': "Get",
        'developer': "Y Combinator",
    },
    {
        'name': "June",
        'description': "June",
        'stars': 1000,
        'icon': _url_icon("/servers/june.svg"),
        'category': "Analytics",
        'price': "Get",
        'developer': "June",
        'envVars': [
            {
                'name': "JUNE_API_URL",
                'label': "June API URL",
                'description': "June API URL",
            },
            {
                'name': "JUNE_API_KEY",
                'label': "June API Key",
                'description': "June API Key",
            },
        ],
    },
    {
        'name': "Linear",
        'description': "Linear",
        'stars': 1000,
        # Light theme shows the dark mark and vice versa.
        'icon': _url_icon("/servers/linear-dark.svg", "/servers/linear-light.svg"),
        'category': "Productivity",
        'price': "Get",
        'developer': "Linear",
        'envVars': [
            {
                'name': "LINEAR_API_KEY",
                'label': "Linear API Key",
                'description': "Your Linear API key for authentication",
            },
        ],
    },
    {
        'name': "Gmail",
        'description': "Email and messaging platform",
        'stars': 1000,
        'icon': _url_icon("/servers/gmail.svg"),
        'category': "Productivity",
        'price': "Free",
        'developer': "Google LLC",
    },
    {
        'name': "Google Calendar",
        'description': "Schedule and organize events",
        'stars': 1000,
        'icon': _url_icon("/servers/gcal.svg"),
        'category': "Productivity",
        'price': "Free",
        'developer': "Google LLC",
    },
)


def default_catalog() -> Catalog:
    """Build a new Catalog holding the built-in apps."""
    return Catalog.from_records(APP_RECORDS)
