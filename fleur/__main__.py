# -*- coding: utf-8 -*-
"""
Fleur CLI - Browse the app catalog and manage installed apps.

Usage::

    python -m fleur list --category Productivity
    python -m fleur env Linear
    python -m fleur install Linear --env LINEAR_API_KEY=lin_api_123
    python -m fleur status

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

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from fleur.catalog import Catalog, load_catalog
from fleur.core.config import FleurConfig, load_config
from fleur.core.resolver import resolve_catalog_path, resolve_client_config_path
from fleur.errors import FleurError


def _parse_assignments(pairs: List[str]) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(
                f"expected KEY=VALUE, got {pair!r}"
            )
        values[key] = value
    return values


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fleur",
        description="Fleur - Browse and install desktop client apps.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a Fleur config file (default ~/.fleur/fleur_config.json).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List catalog apps.")
    list_cmd.add_argument("--category", help="Only list this category.")
    list_cmd.add_argument(
        "--json",
        action="store_true",
        help="Print catalog records as JSON.",
    )

    show_cmd = sub.add_parser("show", help="Show one app.")
    show_cmd.add_argument("name")

    env_cmd = sub.add_parser("env", help="List env vars an app requires.")
    env_cmd.add_argument("name")

    install_cmd = sub.add_parser("install", help="Install an app.")
    install_cmd.add_argument("name")
    install_cmd.add_argument(
        "--env", "-e",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Environment value for the app (repeatable).",
    )

    uninstall_cmd = sub.add_parser("uninstall", help="Uninstall an app.")
    uninstall_cmd.add_argument("name")

    sub.add_parser("status", help="Show installed and launchable apps.")

    set_env_cmd = sub.add_parser("set-env", help="Save env values for an app.")
    set_env_cmd.add_argument("name")
    set_env_cmd.add_argument("values", nargs="+", metavar="KEY=VALUE")

    get_env_cmd = sub.add_parser("get-env", help="Print an app's env values.")
    get_env_cmd.add_argument("name")

    return parser


def _print_app(catalog: Catalog, name: str) -> None:
    app = catalog.find_by_name(name)
    print(f"{app.name} ({app.category}, {app.price})")
    print(f"  {app.description}")
    print(f"  Developer: {app.developer}")
    print(f"  Stars:     {app.stars}")
    for spec in app.env_vars:
        print(f"  Requires:  {spec.name} - {spec.label}")


def _make_installer(config: FleurConfig, catalog: Catalog):
    from fleur.install import (
        AppInstaller, AppRegistry, ClientConfig, RuntimeResolver,
    )
    return AppInstaller(
        catalog=catalog,
        registry=AppRegistry(config.registry_url, config.request_timeout),
        client_config=ClientConfig(resolve_client_config_path(config)),
        runtimes=RuntimeResolver(config.npx_command, config.uvx_command),
    )


def _run(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    catalog = load_catalog(resolve_catalog_path(config))

    if args.command == "list":
        apps = (
            catalog.list_by_category(args.category)
            if args.category else list(catalog.list_all())
        )
        if args.json:
            print(json.dumps([app.to_record() for app in apps], indent=2))
        else:
            for app in apps:
                print(f"{app.name:<20} {app.category:<14} {app.price:<6} "
                      f"{app.developer}")
        return 0

    if args.command == "show":
        _print_app(catalog, args.name)
        return 0

    if args.command == "env":
        for spec in catalog.required_env_vars(args.name):
            print(f"{spec.name}\t{spec.label}\t{spec.description}")
        return 0

    values: Dict[str, str] = {}
    if args.command == "install":
        values = _parse_assignments(args.env)
    elif args.command == "set-env":
        values = _parse_assignments(args.values)

    installer = _make_installer(config, catalog)

    if args.command == "install":
        print(installer.install(args.name, values))
    elif args.command == "uninstall":
        print(installer.uninstall(args.name))
    elif args.command == "status":
        print(json.dumps(installer.app_statuses(), indent=2))
    elif args.command == "set-env":
        print(installer.save_app_env(args.name, values))
    elif args.command == "get-env":
        print(json.dumps(installer.get_app_env(args.name), indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return _run(args)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except (FleurError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 1


if __name__ == "__main__":
    sys.exit(main())
