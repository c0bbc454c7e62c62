# -*- coding: utf-8 -*-
"""
Runtime Resolver - Map registry runtimes to launch commands.

Registry entries name a runtime of ``npx`` or ``uvx`` (located on PATH
unless configured) or give a literal command.

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
import shutil
from typing import Dict, Optional

logger = logging.getLogger(__name__)

# Fleur internal
from fleur.errors import RuntimeNotFoundError


NPX = "npx"
UVX = "uvx"


class RuntimeResolver:
    """Resolve runtime names to executable commands.

    Parameters
    ----------
    npx_command : Optional[str]
        Command to use for ``npx``. None searches PATH.
    uvx_command : Optional[str]
        Command to use for ``uvx``. None searches PATH.
    """

    def __init__(
        self,
        npx_command: Optional[str] = None,
        uvx_command: Optional[str] = None,
    ) -> None:
        self._overrides: Dict[str, Optional[str]] = {
            NPX: npx_command,
            UVX: uvx_command,
        }

    def resolve(self, runtime: str) -> str:
        """Return the command that launches ``runtime``.

        Raises
        ------
        RuntimeNotFoundError
            If ``npx``/``uvx`` is not configured and not on PATH.
        """
        if runtime not in self._overrides:
            return runtime

        override = self._overrides[runtime]
        if override:
            return override

        found = shutil.which(runtime)
        if found is None:
            raise RuntimeNotFoundError(f"{runtime} not found in PATH")
        logger.debug("Resolved %s to %s", runtime, found)
        return found

    def is_available(self, runtime: str) -> bool:
        try:
            return bool(self.resolve(runtime))
        except RuntimeNotFoundError:
            return False
