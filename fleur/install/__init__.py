# -*- coding: utf-8 -*-
"""
Install Module - Install catalog apps into the desktop client.

Provides the remote app registry, the client configuration file and
the installer that ties them to the catalog.

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

from fleur.install.client_config import ClientConfig
from fleur.install.installer import AppInstaller
from fleur.install.registry import AppRegistry, RegistryEntry
from fleur.install.runtime import RuntimeResolver

__all__ = [
    "AppInstaller",
    "AppRegistry",
    "ClientConfig",
    "RegistryEntry",
    "RuntimeResolver",
]
