# -*- coding: utf-8 -*-
"""
Core Module - Configuration and path resolution for Fleur.

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
