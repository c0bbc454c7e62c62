# -*- coding: utf-8 -*-
"""
Client Config - Read and write the desktop client's JSON configuration.

The client keeps its MCP servers under an ``mcpServers`` object keyed
by server name. A missing file is created with an empty server map.

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
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

# Fleur internal
from fleur.errors import ClientConfigError


SERVERS_KEY = "mcpServers"


class ClientConfig:
    """The client configuration file and its server map.

    Parameters
    ----------
    path : Union[str, Path]
        Path to the client's JSON configuration file.

    Raises
    ------
    ClientConfigError
        If the file is not valid JSON or is not a JSON object.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        self._data: Dict[str, Any] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def data(self) -> Dict[str, Any]:
        """The whole configuration document."""
        return self._data

    @property
    def servers(self) -> Dict[str, Any]:
        """The ``mcpServers`` map."""
        return self._data[SERVERS_KEY]

    def _load(self) -> Dict[str, Any]:
        if not self._path.exists():
            logger.info("Creating client config at %s", self._path)
            data: Dict[str, Any] = {SERVERS_KEY: {}}
            self._write(data)
            return data

        try:
            with open(self._path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ClientConfigError(
                f"Failed to parse config JSON {self._path}: {e}"
            ) from e
        except OSError as e:
            raise ClientConfigError(
                f"Failed to read config file {self._path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ClientConfigError(f"{self._path} is not a JSON object")

        servers = data.setdefault(SERVERS_KEY, {})
        if not isinstance(servers, dict):
            raise ClientConfigError(
                f"'{SERVERS_KEY}' in {self._path} is not an object"
            )
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise ClientConfigError(
                f"Failed to write config file {self._path}: {e}"
            ) from e

    def reload(self) -> None:
        """Re-read the file, discarding unsaved changes."""
        self._data = self._load()

    def save(self) -> None:
        """Write the configuration back to disk."""
        self._write(self._data)

    def get_server(self, key: str) -> Optional[Dict[str, Any]]:
        server = self.servers.get(key)
        return server if isinstance(server, dict) else None

    def set_server(self, key: str, server: Dict[str, Any]) -> None:
        self.servers[key] = server

    def remove_server(self, key: str) -> bool:
        """Remove server ``key``. Returns True if it was present."""
        return self.servers.pop(key, None) is not None
