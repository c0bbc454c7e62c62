# -*- coding: utf-8 -*-
"""
Catalog - Validated, read-only table of application descriptors.

Provides the Catalog class, which holds apps in display order and
answers name-keyed lookups. Every invariant is checked when the
catalog is constructed; a catalog that exists is a valid catalog.

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
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple

logger = logging.getLogger(__name__)

# Fleur internal
from fleur.catalog.models import (
    AppDescriptor,
    EnvVarSpec,
    Icon,
    UnsupportedIcon,
    UrlIcon,
)
from fleur.errors import AppNotFoundError, MalformedCatalogError


_REQUIRED_TEXT_FIELDS = ('name', 'description', 'category', 'price', 'developer')


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_apps(apps: Iterable[AppDescriptor]) -> List[str]:
    """Check a sequence of apps against the catalog invariants.

    Parameters
    ----------
    apps : Iterable[AppDescriptor]

    Returns
    -------
    List[str]
        One message per violation. Empty when the apps are valid.
    """
    problems: List[str] = []
    seen_names = set()

    for index, app in enumerate(apps):
        if not isinstance(app, AppDescriptor):
            problems.append(f"entry {index}: not an AppDescriptor")
            continue

        where = f"app {app.name!r}" if _is_text(app.name) else f"entry {index}"

        for attr in _REQUIRED_TEXT_FIELDS:
            if not _is_text(getattr(app, attr)):
                problems.append(f"{where}: '{attr}' must be a non-empty string")

        if (not isinstance(app.stars, int) or isinstance(app.stars, bool)
                or app.stars < 0):
            problems.append(f"{where}: 'stars' must be a non-negative integer")

        if not isinstance(app.icon, Icon):
            problems.append(f"{where}: 'icon' must be an Icon")
        elif isinstance(app.icon, UrlIcon):
            for theme in ('light', 'dark'):
                if not _is_text(getattr(app.icon, theme)):
                    problems.append(
                        f"{where}: icon url '{theme}' must be non-empty"
                    )

        env_names = set()
        for spec in app.env_vars:
            if not isinstance(spec, EnvVarSpec):
                problems.append(f"{where}: env var entry is not an EnvVarSpec")
                continue
            if not _is_text(spec.name):
                problems.append(f"{where}: env var name must be non-empty")
            elif spec.name in env_names:
                problems.append(
                    f"{where}: duplicate env var name {spec.name!r}"
                )
            env_names.add(spec.name)

        if _is_text(app.name):
            if app.name in seen_names:
                problems.append(f"duplicate app name {app.name!r}")
            seen_names.add(app.name)

    return problems


def _parse_icon(raw: Any, where: str, problems: List[str]) -> Icon:
    if not isinstance(raw, Mapping):
        problems.append(f"{where}: 'icon' must be an object")
        return UrlIcon(light="", dark="")

    kind = raw.get('type')
    if kind != UrlIcon.type:
        logger.debug("%s: unsupported icon type %r", where, kind)
        return UnsupportedIcon(kind=str(kind), raw=raw)

    urls = raw.get('url')
    if not isinstance(urls, Mapping):
        problems.append(f"{where}: icon 'url' must be an object")
        return UrlIcon(light="", dark="")
    return UrlIcon(light=urls.get('light', ""), dark=urls.get('dark', ""))


def _parse_env_vars(
    raw: Any,
    where: str,
    problems: List[str],
) -> Tuple[EnvVarSpec, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        problems.append(f"{where}: 'envVars' must be a list")
        return ()
    if not raw:
        problems.append(f"{where}: 'envVars' must be non-empty when present")
        return ()

    specs: List[EnvVarSpec] = []
    for item in raw:
        if not isinstance(item, Mapping):
            problems.append(f"{where}: env var entry must be an object")
            continue
        specs.append(EnvVarSpec(
            name=item.get('name', ""),
            label=item.get('label', ""),
            description=item.get('description', ""),
        ))
    return tuple(specs)


def parse_record(record: Any, index: int, problems: List[str]) -> AppDescriptor:
    """Build an AppDescriptor from one wire record.

    Structural problems are appended to ``problems``; field-level
    invariants are left to :func:`validate_apps`.
    """
    if not isinstance(record, Mapping):
        raise MalformedCatalogError(f"entry {index}: record must be an object")

    name = record.get('name', "")
    where = f"app {name!r}" if _is_text(name) else f"entry {index}"

    for key in ('name', 'description', 'stars', 'icon', 'category',
                'price', 'developer'):
        if key not in record:
            problems.append(f"{where}: missing field '{key}'")

    return AppDescriptor(
        name=name,
        description=record.get('description', ""),
        stars=record.get('stars', 0),
        icon=_parse_icon(record.get('icon'), where, problems),
        category=record.get('category', ""),
        price=record.get('price', ""),
        developer=record.get('developer', ""),
        env_vars=_parse_env_vars(record.get('envVars'), where, problems),
    )


class Catalog:
    """Ordered, immutable collection of AppDescriptors.

    Parameters
    ----------
    apps : Iterable[AppDescriptor]
        Apps in display order.

    Raises
    ------
    MalformedCatalogError
        If any name is empty or duplicated, any env var name is empty
        or duplicated within its app, any icon path is empty, or any
        other field is out of range.
    """

    def __init__(self, apps: Iterable[AppDescriptor]) -> None:
        apps = tuple(apps)
        problems = validate_apps(apps)
        if problems:
            raise MalformedCatalogError(problems)

        self._apps: Tuple[AppDescriptor, ...] = apps
        self._by_name: Dict[str, AppDescriptor] = {
            app.name: app for app in apps
        }
        logger.debug("Catalog loaded with %d apps", len(apps))

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> 'Catalog':
        """Build a catalog from wire records.

        Parameters
        ----------
        records : Iterable[Mapping[str, Any]]
            Records shaped ``{name, description, stars, icon{type, url},
            category, price, developer, envVars?}``.

        Returns
        -------
        Catalog

        Raises
        ------
        MalformedCatalogError
            If the records are structurally invalid or violate any
            catalog invariant.
        """
        problems: List[str] = []
        apps = [
            parse_record(record, index, problems)
            for index, record in enumerate(records)
        ]
        problems.extend(validate_apps(apps))
        if problems:
            raise MalformedCatalogError(problems)
        return cls(apps)

    def to_records(self) -> List[Dict[str, Any]]:
        """Serialize all apps, in order, to wire records."""
        return [app.to_record() for app in self._apps]

    def list_all(self) -> Tuple[AppDescriptor, ...]:
        """Return every app in declaration order."""
        return self._apps

    def find_by_name(self, name: str) -> AppDescriptor:
        """Return the app called ``name``.

        Raises
        ------
        AppNotFoundError
            If no app has that name.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise AppNotFoundError(name) from None

    def required_env_vars(self, name: str) -> Tuple[EnvVarSpec, ...]:
        """Return the env vars app ``name`` declares, in declared order.

        An app that declares none yields an empty tuple.

        Raises
        ------
        AppNotFoundError
            If no app has that name.
        """
        return self.find_by_name(name).env_vars

    def names(self) -> List[str]:
        return [app.name for app in self._apps]

    def categories(self) -> List[str]:
        """Distinct categories in the order they first appear."""
        seen: List[str] = []
        for app in self._apps:
            if app.category not in seen:
                seen.append(app.category)
        return seen

    def list_by_category(self, category: str) -> List[AppDescriptor]:
        return [app for app in self._apps if app.category == category]

    def __len__(self) -> int:
        return len(self._apps)

    def __iter__(self) -> Iterator[AppDescriptor]:
        return iter(self._apps)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"Catalog({len(self._apps)} apps)"
