# -*- coding: utf-8 -*-
"""
Configuration Module - Configurable defaults for Fleur.

Provides a FleurConfig dataclass with the registry location, HTTP
timeout, client configuration path and runtime overrides. Loads from
~/.fleur/fleur_config.json if it exists, otherwise uses defaults.

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
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_CONFIG_DIR = Path.home() / ".fleur"
_CONFIG_FILE = _CONFIG_DIR / "fleur_config.json"

DEFAULT_REGISTRY_URL = (
    "https://raw.githubusercontent.com/fleuristes/app-registry/"
    "refs/heads/main/apps.json"
)


@dataclass
class FleurConfig:
    """Global Fleur configuration with defaults.

    Attributes
    ----------
    registry_url : str
        URL of the JSON app registry.
    request_timeout : float
        HTTP timeout for registry fetches in seconds.
    client_config_path : Optional[str]
        Client configuration file to install apps into. None uses the
        platform default.
    npx_command : Optional[str]
        Command used for ``npx`` apps. None searches PATH.
    uvx_command : Optional[str]
        Command used for ``uvx`` apps. None searches PATH.
    catalog_path : Optional[str]
        JSON or YAML catalog replacing the built-in one.
    """

    registry_url: str = DEFAULT_REGISTRY_URL
    request_timeout: float = 10.0
    client_config_path: Optional[str] = None
    npx_command: Optional[str] = None
    uvx_command: Optional[str] = None
    catalog_path: Optional[str] = None

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to JSON file."""
        path = path or _CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self), f, indent=2)


def load_config(path: Optional[Path] = None) -> FleurConfig:
    """Load configuration from file, or return defaults.

    Parameters
    ----------
    path : Optional[Path]
        Config file path. Defaults to ~/.fleur/fleur_config.json.

    Returns
    -------
    FleurConfig
        Loaded or default configuration.
    """
    path = path or _CONFIG_FILE
    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return FleurConfig(**{
                k: v for k, v in data.items()
                if k in FleurConfig.__dataclass_fields__
            })
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Failed to load config from %s: %s", path, e)

    return FleurConfig()
