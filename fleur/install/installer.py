# -*- coding: utf-8 -*-
"""
App Installer - Install catalog apps into the client configuration.

Installing an app writes a server entry (command, args and optional
env) under the app's registry ``mcpKey``. The catalog decides which
apps exist and which environment variables they need; the registry
decides how they are launched.

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
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

# Fleur internal
from fleur.catalog.catalog import Catalog
from fleur.errors import (
    ClientConfigError,
    MissingEnvVarsError,
    NotInstalledError,
)
from fleur.install.client_config import ClientConfig
from fleur.install.registry import AppRegistry, RegistryEntry
from fleur.install.runtime import RuntimeResolver


class AppInstaller:
    """Install, uninstall and configure catalog apps.

    Parameters
    ----------
    catalog : Catalog
        The app catalog.
    registry : AppRegistry
        Launch configurations for the apps.
    client_config : ClientConfig
        The client configuration file to modify.
    runtimes : Optional[RuntimeResolver]
        Runtime resolver. Defaults to searching PATH.
    """

    def __init__(
        self,
        catalog: Catalog,
        registry: AppRegistry,
        client_config: ClientConfig,
        runtimes: Optional[RuntimeResolver] = None,
    ) -> None:
        self._catalog = catalog
        self._registry = registry
        self._config = client_config
        self._runtimes = runtimes or RuntimeResolver()

    def _entry(self, name: str) -> Optional[RegistryEntry]:
        self._catalog.find_by_name(name)
        return self._registry.get(name)

    def install(
        self,
        name: str,
        env: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Install app ``name``.

        Parameters
        ----------
        name : str
            Catalog app name.
        env : Optional[Mapping[str, str]]
            Environment values. Must cover every variable the catalog
            declares for the app.

        Returns
        -------
        str
            Human-readable result message.

        Raises
        ------
        AppNotFoundError
            If the app is not in the catalog.
        MissingEnvVarsError
            If a declared environment variable has no value.
        RuntimeNotFoundError
            If the app's runtime cannot be located.
        """
        logger.info("Installing app: %s", name)
        entry = self._entry(name)
        if entry is None:
            return f"No configuration available for {name}"

        env = dict(env or {})
        missing = [
            spec.name for spec in self._catalog.required_env_vars(name)
            if not env.get(spec.name)
        ]
        if missing:
            raise MissingEnvVarsError(name, missing)

        server: Dict[str, Any] = {
            'command': self._runtimes.resolve(entry.runtime),
            'args': list(entry.args),
        }
        if env:
            server['env'] = env

        self._config.set_server(entry.mcp_key, server)
        self._config.save()
        return f"Added {entry.mcp_key} configuration for {name}"

    def uninstall(self, name: str) -> str:
        """Remove app ``name`` from the client configuration."""
        logger.info("Uninstalling app: %s", name)
        entry = self._entry(name)
        if entry is None:
            return f"No configuration available for {name}"

        if not self._config.remove_server(entry.mcp_key):
            return f"Configuration for {name} was not found"

        self._config.save()
        return f"Removed {entry.mcp_key} configuration for {name}"

    def is_installed(self, name: str) -> bool:
        entry = self._entry(name)
        if entry is None:
            return False
        return self._config.get_server(entry.mcp_key) is not None

    def save_app_env(self, name: str, values: Mapping[str, str]) -> str:
        """Merge ``values`` into the installed app's environment.

        Raises
        ------
        NotInstalledError
            If the app is not installed.
        ClientConfigError
            If the stored env is not an object.
        """
        logger.info("Saving ENV values for app: %s", name)
        server = self._installed_server(name)
        env = self._server_env(name, server)
        env.update(values)
        server['env'] = env
        self._config.save()
        return f"Saved ENV values for app '{name}'"

    def get_app_env(self, name: str) -> Dict[str, Any]:
        """Return the installed app's environment, or ``{}``.

        Raises
        ------
        NotInstalledError
            If the app is not installed.
        ClientConfigError
            If the stored env is not an object.
        """
        server = self._installed_server(name)
        return self._server_env(name, server)

    def app_statuses(self) -> Dict[str, Dict[str, bool]]:
        """Report which registry apps are installed and launchable.

        Returns
        -------
        Dict[str, Dict[str, bool]]
            ``{"installed": {name: bool}, "configured": {name: bool}}``.
        """
        installed: Dict[str, bool] = {}
        configured: Dict[str, bool] = {}
        servers = self._config.servers
        for entry in self._registry.entries():
            installed[entry.name] = isinstance(servers.get(entry.mcp_key), dict)
            configured[entry.name] = self._runtimes.is_available(entry.runtime)
        return {'installed': installed, 'configured': configured}

    def _installed_server(self, name: str) -> Dict[str, Any]:
        entry = self._entry(name)
        if entry is None:
            raise NotInstalledError(name)
        server = self._config.get_server(entry.mcp_key)
        if server is None:
            raise NotInstalledError(name)
        return server

    @staticmethod
    def _server_env(name: str, server: Dict[str, Any]) -> Dict[str, Any]:
        env = server.get('env')
        if env is None:
            return {}
        if not isinstance(env, dict):
            raise ClientConfigError(
                f"Invalid env values stored for app '{name}'"
            )
        return dict(env)
