# -*- coding: utf-8 -*-
"""
Catalog Models - Data models for application descriptors.

Defines the AppDescriptor and EnvVarSpec records that make up the app
catalog, and the Icon variants that resolve to a themed image path.
All models are frozen so a constructed catalog can be shared between
readers without copying.

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
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Tuple, Union


PLACEHOLDER_ICON = "/servers/placeholder.svg"


class Theme(Enum):
    """UI theme an icon is rendered for."""

    LIGHT = "light"
    DARK = "dark"


class Icon:
    """Base class for icon variants.

    Each variant is tagged by ``type`` (the wire discriminator) and
    must resolve to an image path for a given theme.
    """

    type: ClassVar[str] = ""

    def themed(self, theme: Union[Theme, str] = Theme.LIGHT) -> str:
        raise NotImplementedError

    def to_record(self) -> Dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class UrlIcon(Icon):
    """Icon given as a pair of image paths, one per theme.

    Parameters
    ----------
    light : str
        Image path used with the light theme.
    dark : str
        Image path used with the dark theme.
    """

    type: ClassVar[str] = "url"

    light: str
    dark: str

    def themed(self, theme: Union[Theme, str] = Theme.LIGHT) -> str:
        if Theme(theme) is Theme.DARK:
            return self.dark
        return self.light

    def to_record(self) -> Dict[str, Any]:
        return {
            'type': self.type,
            'url': {'light': self.light, 'dark': self.dark},
        }


@dataclass(frozen=True)
class UnsupportedIcon(Icon):
    """Icon whose ``type`` this version does not understand.

    The source record is kept, frozen as canonical JSON, so it
    serializes back unchanged and cannot be altered through the caller's
    copy. Every theme resolves to the placeholder image.

    Parameters
    ----------
    kind : str
        The unrecognized ``type`` discriminator.
    raw : Union[Mapping[str, Any], str]
        The icon record, or its JSON encoding.
    """

    kind: str
    raw: str = "{}"

    def __post_init__(self) -> None:
        raw: Any = self.raw
        if not isinstance(raw, str):
            raw = json.dumps(dict(raw), sort_keys=True, default=str)
        object.__setattr__(self, 'raw', raw)

    @property
    def type(self) -> str:  # type: ignore[override]
        return self.kind

    def themed(self, theme: Union[Theme, str] = Theme.LIGHT) -> str:
        return PLACEHOLDER_ICON

    def to_record(self) -> Dict[str, Any]:
        return json.loads(self.raw)


@dataclass(frozen=True)
class EnvVarSpec:
    """Declaration of one environment variable an integration needs.

    Parameters
    ----------
    name : str
        Exact environment variable key (e.g. ``LINEAR_API_KEY``).
    label : str
        Short name shown on a configuration form.
    description : str
        Help text shown on the same form.
    """

    name: str
    label: str = ""
    description: str = ""

    def to_record(self) -> Dict[str, str]:
        return {
            'name': self.name,
            'label': self.label,
            'description': self.description,
        }


@dataclass(frozen=True)
class AppDescriptor:
    """One installable integration in the catalog.

    Parameters
    ----------
    name : str
        Display name, unique within a catalog.
    description : str
        Human-readable summary.
    stars : int
        Popularity signal shown next to the app.
    icon : Icon
        Themed icon.
    category : str
        Grouping label (e.g. "Utilities", "Productivity").
    price : str
        Call-to-action label such as "Free" or "Get".
    developer : str
        Attribution string.
    env_vars : Tuple[EnvVarSpec, ...]
        Configuration the integration needs at runtime, in form order.
        Empty when the app needs none.
    """

    name: str
    description: str
    stars: int
    icon: Icon
    category: str
    price: str
    developer: str
    env_vars: Tuple[EnvVarSpec, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'env_vars', tuple(self.env_vars))

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the catalog wire shape.

        ``envVars`` is omitted when the app declares none.
        """
        record: Dict[str, Any] = {
            'name': self.name,
            'description': self.description,
            'stars': self.stars,
            'icon': self.icon.to_record(),
            'category': self.category,
            'price': self.price,
            'developer': self.developer,
        }
        if self.env_vars:
            record['envVars'] = [spec.to_record() for spec in self.env_vars]
        return record


def resolve_icon(
    source: Union[AppDescriptor, Icon, Mapping[str, Any], None],
    theme: Union[Theme, str] = Theme.LIGHT,
) -> str:
    """Resolve an app's icon to an image path.

    Unrecognized or incomplete icons resolve to ``PLACEHOLDER_ICON``
    instead of raising.

    Parameters
    ----------
    source : Union[AppDescriptor, Icon, Mapping[str, Any], None]
        An AppDescriptor, an Icon variant, a full app wire record, or
        the ``icon`` field of one.
    theme : Union[Theme, str]
        Theme to resolve for. Default light.

    Returns
    -------
    str
        Image path.
    """
    theme = Theme(theme)
    if isinstance(source, AppDescriptor):
        source = source.icon
    elif isinstance(source, Mapping) and 'icon' in source:
        source = source['icon']

    if isinstance(source, Icon):
        return source.themed(theme) or PLACEHOLDER_ICON
    if not isinstance(source, Mapping) or source.get('type') != UrlIcon.type:
        return PLACEHOLDER_ICON
    urls = source.get('url')
    if not isinstance(urls, Mapping):
        return PLACEHOLDER_ICON
    path = urls.get(theme.value)
    if not isinstance(path, str) or not path:
        return PLACEHOLDER_ICON
    return path
