# -*- coding: utf-8 -*-
"""
Path Resolver - Locate the client configuration and catalog files.

Resolves the client configuration path using a priority chain:
1. FLEUR_CLIENT_CONFIG environment variable (highest priority)
2. FleurConfig.client_config_path
3. ~/Library/Application Support/Claude/claude_desktop_config.json

The catalog file follows the same pattern with FLEUR_CATALOG_PATH and
FleurConfig.catalog_path, falling back to the built-in catalog.

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
import os
from pathlib import Path
from typing import Optional

# Fleur internal
from fleur.core.config import FleurConfig


CLIENT_CONFIG_ENV_VAR = "FLEUR_CLIENT_CONFIG"
CATALOG_ENV_VAR = "FLEUR_CATALOG_PATH"
_DEFAULT_CLIENT_CONFIG = (
    "Library", "Application Support", "Claude", "claude_desktop_config.json",
)


def resolve_client_config_path(config: Optional[FleurConfig] = None) -> Path:
    """Resolve the client configuration file path.

    Priority:
    1. ``FLEUR_CLIENT_CONFIG`` environment variable
    2. ``config.client_config_path``
    3. ``~/Library/Application Support/Claude/claude_desktop_config.json``

    Parameters
    ----------
    config : Optional[FleurConfig]
        Loaded configuration, if any.

    Returns
    -------
    Path
        Resolved path to the client configuration file.
    """
    env_path = os.environ.get(CLIENT_CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    if config is not None and config.client_config_path:
        return Path(config.client_config_path).expanduser()

    return Path.home().joinpath(*_DEFAULT_CLIENT_CONFIG)


def resolve_catalog_path(config: Optional[FleurConfig] = None) -> Optional[Path]:
    """Resolve the catalog file path.

    Returns
    -------
    Optional[Path]
        The catalog file to load, or None for the built-in catalog.
    """
    env_path = os.environ.get(CATALOG_ENV_VAR)
    if env_path:
        return Path(env_path)

    if config is not None and config.catalog_path:
        return Path(config.catalog_path).expanduser()

    return None

