# -*- coding: utf-8 -*-
"""
App Registry - Fetch launch configurations for catalog apps.

The registry is a JSON list published over HTTP. Each record names an
app and carries the ``mcpKey`` it is installed under, the ``runtime``
that launches it and the runtime's ``args``. The registry is fetched
once and cached until refresh() is called.

Dependencies
------------
requests

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
import logging
import threading
from typing import Any, List, Optional, Tuple

# Third-party
import requests

logger = logging.getLogger(__name__)

# Fleur internal
from fleur.core.config import DEFAULT_REGISTRY_URL
from fleur.errors import RegistryError


class RegistryEntry:
    """Launch configuration for one app.

    Parameters
    ----------
    name : str
        App name, matching the catalog.
    mcp_key : str
        Key of the server entry in the client configuration.
    runtime : str
        ``npx``, ``uvx`` or a literal command.
    args : Tuple[str, ...]
        Arguments passed to the runtime.
    """

    def __init__(
        self,
        name: str,
        mcp_key: str,
        runtime: str,
        args: Tuple[str, ...] = (),
    ) -> None:
        self.name = name
        self.mcp_key = mcp_key
        self.runtime = runtime
        self.args = tuple(args)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegistryEntry):
            return NotImplemented
        return (
            (self.name, self.mcp_key, self.runtime, self.args)
            == (other.name, other.mcp_key, other.runtime, other.args)
        )

    def __repr__(self) -> str:
        return (
            f"RegistryEntry(name={self.name!r}, mcp_key={self.mcp_key!r}, "
            f"runtime={self.runtime!r})"
        )


def _parse_entry(index: int, record: Any) -> RegistryEntry:
    if not isinstance(record, dict):
        raise RegistryError(f"Registry entry {index} is not an object")

    name = record.get('name')
    if not isinstance(name, str) or not name:
        raise RegistryError(f"Registry entry {index}: app name is missing")

    config = record.get('config')
    if not isinstance(config, dict):
        raise RegistryError(f"Registry entry '{name}': config is missing")

    mcp_key = config.get('mcpKey')
    if not isinstance(mcp_key, str) or not mcp_key:
        raise RegistryError(f"Registry entry '{name}': mcpKey is missing")

    runtime = config.get('runtime')
    if not isinstance(runtime, str) or not runtime:
        raise RegistryError(f"Registry entry '{name}': runtime is missing")

    args = config.get('args')
    if not isinstance(args, list):
        raise RegistryError(f"Registry entry '{name}': args is missing")
    if not all(isinstance(arg, str) for arg in args):
        raise RegistryError(
            f"Registry entry '{name}': args must be strings"
        )

    return RegistryEntry(
        name=name,
        mcp_key=mcp_key,
        runtime=runtime,
        args=tuple(args),
    )


class AppRegistry:
    """Cached view of the remote app registry.

    Parameters
    ----------
    url : str
        Registry URL.
    timeout : float
        HTTP request timeout in seconds. Default 10.0.
    session : Optional[requests.Session]
        Session to issue requests with. Defaults to module-level
        ``requests.get``.
    """

    def __init__(
        self,
        url: str = DEFAULT_REGISTRY_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._session = session
        self._lock = threading.Lock()
        self._raw: Optional[List[Any]] = None
        self._entries: Optional[List[RegistryEntry]] = None

    @property
    def url(self) -> str:
        return self._url

    def _fetch(self) -> List[Any]:
        getter = self._session.get if self._session is not None else requests.get
        logger.info("Fetching app registry from %s", self._url)
        try:
            resp = getter(self._url, timeout=self._timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Failed to fetch app registry: %s", e)
            raise RegistryError(f"Failed to fetch app registry: {e}") from e

        if not isinstance(data, list):
            logger.error("App registry at %s is not a list", self._url)
            raise RegistryError("App registry is not an array")
        return data

    def _load(self) -> List[RegistryEntry]:
        with self._lock:
            if self._entries is None:
                raw = self._fetch()
                try:
                    entries = [
                        _parse_entry(index, record)
                        for index, record in enumerate(raw)
                    ]
                except RegistryError as e:
                    logger.error("Malformed app registry: %s", e)
                    raise
                self._raw = raw
                self._entries = entries
                logger.info("Loaded %d registry entries", len(entries))
            return self._entries

    def raw(self) -> List[Any]:
        """Return the decoded registry JSON."""
        self._load()
        return list(self._raw or [])

    def entries(self) -> List[RegistryEntry]:
        """Return every registry entry in published order.

        Raises
        ------
        RegistryError
            If the registry cannot be fetched or an entry is malformed.
        """
        return list(self._load())

    def get(self, name: str) -> Optional[RegistryEntry]:
        """Return the entry for app ``name``, or None."""
        for entry in self._load():
            if entry.name == name:
                return entry
        return None

    def refresh(self) -> None:
        """Drop the cached registry so the next access refetches it."""
        with self._lock:
            self._raw = None
            self._entries = None
