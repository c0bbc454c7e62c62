# -*- coding: utf-8 -*-
"""
Tests for fleur.catalog.models — Icons and descriptors.

Author
------
Fleur Developers

Created
-------
2026-10-17
"""

import pytest

from fleur.catalog.models import (
    PLACEHOLDER_ICON,
    AppDescriptor,
    EnvVarSpec,
    Theme,
    UnsupportedIcon,
    UrlIcon,
    resolve_icon,
)


class TestUrlIcon:

    def test_themed(self):
        icon = UrlIcon(light="/l.svg", dark="/d.svg")
        assert icon.themed(Theme.LIGHT) == "/l.svg"
        assert icon.themed(Theme.DARK) == "/d.svg"

    def test_themed_accepts_strings(self):
        icon = UrlIcon(light="/l.svg", dark="/d.svg")
        assert icon.themed("dark") == "/d.svg"

    def test_unknown_theme_raises(self):
        with pytest.raises(ValueError):
            UrlIcon(light="/l.svg", dark="/d.svg").themed("sepia")

    def test_record(self):
        assert UrlIcon(light="/l.svg", dark="/d.svg").to_record() == {
            'type': 'url', 'url': {'light': "/l.svg", 'dark': "/d.svg"},
        }


class TestUnsupportedIcon:

    def test_resolves_to_placeholder(self):
        icon = UnsupportedIcon(kind="inline", raw={'type': 'inline'})
        assert icon.type == "inline"
        assert icon.themed(Theme.DARK) == PLACEHOLDER_ICON

    def test_raw_is_copied(self):
        raw = {'type': 'inline', 'data': "x"}
        icon = UnsupportedIcon(kind="inline", raw=raw)
        raw['data'] = "y"
        assert icon.to_record()['data'] == "x"

    def test_nested_raw_is_frozen(self):
        raw = {'type': 'inline', 'data': {'svg': "<a/>"}}
        icon = UnsupportedIcon(kind="inline", raw=raw)
        raw['data']['svg'] = "changed"
        icon.to_record()['data']['svg'] = "changed again"
        assert icon.to_record()['data'] == {'svg': "<a/>"}

    def test_hashable(self):
        icon = UnsupportedIcon(kind="inline", raw={'type': 'inline'})
        assert hash(icon) == hash(
            UnsupportedIcon(kind="inline", raw={'type': 'inline'})
        )


class TestResolveIcon:

    def test_icon_instance(self):
        assert resolve_icon(UrlIcon("/l.svg", "/d.svg"), "dark") == "/d.svg"

    def test_url_record(self):
        record = {'type': 'url', 'url': {'light': "/l.svg", 'dark': "/d.svg"}}
        assert resolve_icon(record) == "/l.svg"
        assert resolve_icon(record, Theme.DARK) == "/d.svg"

    def test_descriptor(self):
        app = AppDescriptor(
            name="A", description="d", stars=0,
            icon=UrlIcon("/l.svg", "/d.svg"), category="c", price="Free",
            developer="dev",
        )
        assert resolve_icon(app) == "/l.svg"
        assert resolve_icon(app, Theme.DARK) == "/d.svg"

    def test_full_app_record(self):
        record = {
            'name': "A",
            'icon': {'type': 'url', 'url': {'light': "/l.svg", 'dark': "/d.svg"}},
        }
        assert resolve_icon(record, "dark") == "/d.svg"
        assert resolve_icon({'name': "A", 'icon': {'type': 'inline'}}) == (
            PLACEHOLDER_ICON
        )

    @pytest.mark.parametrize("record", [
        {'type': 'inline', 'data': "<svg/>"},
        {'type': 'url'},
        {'type': 'url', 'url': {'light': ""}},
        None,
        "not-an-icon",
    ])
    def test_unsupported_falls_back(self, record):
        assert resolve_icon(record) == PLACEHOLDER_ICON


class TestAppDescriptor:

    def test_env_vars_become_tuple(self):
        app = AppDescriptor(
            name="A", description="d", stars=0,
            icon=UrlIcon("/a.svg", "/a.svg"), category="c", price="Free",
            developer="dev", env_vars=[EnvVarSpec("KEY", "Key", "A key")],
        )
        assert app.env_vars == (EnvVarSpec("KEY", "Key", "A key"),)

    def test_equality(self):
        kwargs = dict(
            name="A", description="d", stars=0,
            icon=UrlIcon("/a.svg", "/a.svg"), category="c", price="Free",
            developer="dev",
        )
        assert AppDescriptor(**kwargs) == AppDescriptor(**kwargs)
