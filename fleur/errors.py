# -*- coding: utf-8 -*-
"""
Errors - Exception hierarchy for Fleur.

Every error raised by the catalog, registry, client configuration and
installer derives from FleurError so callers (notably the CLI) can
catch a single base class.

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
from typing import Iterable, List, Union


class FleurError(Exception):
    """Base class for all Fleur errors."""


class MalformedCatalogError(FleurError, ValueError):
    """Raised when a catalog violates its invariants at load time.

    Parameters
    ----------
    problems : Union[str, Iterable[str]]
        One problem description, or all of them.
    """

    def __init__(self, problems: Union[str, Iterable[str]]) -> None:
        if isinstance(problems, str):
            problems = [problems]
        self.problems: List[str] = list(problems)
        super().__init__("Malformed catalog: " + "; ".join(self.problems))


class AppNotFoundError(FleurError, LookupError):
    """Raised by name-keyed lookups when no app matches."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown app: {name!r}")


class RegistryError(FleurError):
    """Raised when the remote app registry cannot be fetched or parsed."""


class ClientConfigError(FleurError):
    """Raised when the client configuration file is unreadable."""


class RuntimeNotFoundError(FleurError):
    """Raised when an app's launch runtime cannot be located."""


class NotInstalledError(FleurError):
    """Raised when an operation needs an installed app."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"App '{name}' is not installed")


class MissingEnvVarsError(FleurError):
    """Raised when an install omits environment variables the app declares.

    Parameters
    ----------
    name : str
        App name.
    missing : List[str]
        Environment variable names that were not supplied.
    """

    def __init__(self, name: str, missing: List[str]) -> None:
        self.name = name
        self.missing = list(missing)
        super().__init__(
            f"App '{name}' requires environment variables: "
            f"{', '.join(self.missing)}"
        )
