# -*- coding: utf-8 -*-
"""
Tests for fleur.catalog.catalog — Catalog construction and lookups.

Author
------
Fleur Developers

Created
-------
2026-10-17
"""

import copy
from concurrent.futures import ThreadPoolExecutor

import pytest

from fleur.catalog.builtin import APP_RECORDS, default_catalog
from fleur.catalog.catalog import Catalog
from fleur.catalog.models import AppDescriptor, EnvVarSpec, UrlIcon, resolve_icon
from fleur.errors import AppNotFoundError, MalformedCatalogError


@pytest.fixture
def catalog():
    return default_catalog()


def _make_app(**kwargs):
    defaults = dict(
        name="Example",
        description="Example app",
        stars=10,
        icon=UrlIcon(light="/servers/example.svg", dark="/servers/example.svg"),
        category="Utilities",
        price="Free",
        developer="Example Inc",
    )
    defaults.update(kwargs)
    return AppDescriptor(**defaults)


def _record(**kwargs):
    record = {
        'name': "Example",
        'description': "Example app",
        'stars': 10,
        'icon': {'type': 'url', 'url': {'light': "/a.svg", 'dark': "/b.svg"}},
        'category': "Utilities",
        'price': "Free",
        'developer': "Example Inc",
    }
    record.update(kwargs)
    return record


# ---------------------------------------------------------------------------
# Built-in catalog properties
# ---------------------------------------------------------------------------

class TestBuiltinCatalog:

    def test_required_text_fields_non_empty(self, catalog):
        for app in catalog.list_all():
            for attr in ('name', 'description', 'developer', 'category', 'price'):
                value = getattr(app, attr)
                assert isinstance(value, str) and value

    def test_names_unique(self, catalog):
        names = [app.name for app in catalog.list_all()]
        assert len(names) == len(set(names))

    def test_env_var_names_unique_per_app(self, catalog):
        for app in catalog.list_all():
            env_names = [spec.name for spec in app.env_vars]
            assert len(env_names) == len(set(env_names))

    def test_declaration_order(self, catalog):
        assert catalog.names() == [
            "Browser", "Hacker News", "June", "Linear", "Gmail",
            "Google Calendar",
        ]

    def test_list_all_is_deterministic(self, catalog):
        assert catalog.list_all() == catalog.list_all()
        assert [a.name for a in catalog.list_all()] == catalog.names()

    def test_find_by_name_inverse_of_list_all(self, catalog):
        for app in catalog.list_all():
            found = catalog.find_by_name(app.name)
            assert found == app

    def test_find_by_name_unknown(self, catalog):
        with pytest.raises(AppNotFoundError):
            catalog.find_by_name("__nonexistent__")

    def test_not_found_is_lookup_error(self, catalog):
        with pytest.raises(LookupError):
            catalog.find_by_name("__nonexistent__")

    def test_required_env_vars_none_declared(self, catalog):
        assert catalog.required_env_vars("Browser") == ()

    def test_required_env_vars_linear(self, catalog):
        specs = catalog.required_env_vars("Linear")
        assert [s.name for s in specs] == ["LINEAR_API_KEY"]
        assert specs[0].label == "Linear API Key"

    def test_required_env_vars_june_order(self, catalog):
        specs = catalog.required_env_vars("June")
        assert [s.name for s in specs] == ["JUNE_API_URL", "JUNE_API_KEY"]

    def test_required_env_vars_unknown(self, catalog):
        with pytest.raises(AppNotFoundError):
            catalog.required_env_vars("__nonexistent__")

    def test_linear_icon_is_inverted(self, catalog):
        icon = catalog.find_by_name("Linear").icon
        assert icon.light == "/servers/linear-dark.svg"
        assert icon.dark == "/servers/linear-light.svg"

    def test_default_catalog_is_fresh_each_call(self):
        assert default_catalog() is not default_catalog()
        assert default_catalog().list_all() == default_catalog().list_all()

    def test_concurrent_readers(self, catalog):
        def read(_):
            return [catalog.find_by_name(n).name for n in catalog.names()]

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(read, range(16)))
        assert all(r == catalog.names() for r in results)


# ---------------------------------------------------------------------------
# Container helpers
# ---------------------------------------------------------------------------

class TestCatalogHelpers:

    def test_len_iter_contains(self, catalog):
        assert len(catalog) == 6
        assert [a.name for a in catalog] == catalog.names()
        assert "Gmail" in catalog
        assert "Slack" not in catalog

    def test_categories_first_seen_order(self, catalog):
        assert catalog.categories() == [
            "Utilities", "Social", "Analytics", "Productivity",
        ]

    def test_list_by_category(self, catalog):
        names = [a.name for a in catalog.list_by_category("Productivity")]
        assert names == ["Linear", "Gmail", "Google Calendar"]
        assert catalog.list_by_category("Games") == []

    def test_list_all_is_immutable(self, catalog):
        apps = catalog.list_all()
        assert isinstance(apps, tuple)
        with pytest.raises(AttributeError):
            apps[0].name = "Other"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestCatalogValidation:

    def test_valid_catalog(self):
        catalog = Catalog([_make_app(), _make_app(name="Other")])
        assert len(catalog) == 2

    def test_empty_catalog_allowed(self):
        assert len(Catalog([])) == 0

    def test_duplicate_name_rejected(self):
        records = [_record(name="Gmail"), _record(name="Gmail")]
        with pytest.raises(MalformedCatalogError) as exc_info:
            Catalog.from_records(records)
        assert any("Gmail" in p for p in exc_info.value.problems)

    def test_duplicate_builtin_rejected(self):
        records = list(APP_RECORDS) + [copy.deepcopy(APP_RECORDS[4])]
        with pytest.raises(MalformedCatalogError):
            Catalog.from_records(records)

    def test_empty_name_rejected(self):
        with pytest.raises(MalformedCatalogError):
            Catalog([_make_app(name="")])

    @pytest.mark.parametrize(
        "field", ['description', 'category', 'price', 'developer'],
    )
    def test_empty_text_field_rejected(self, field):
        with pytest.raises(MalformedCatalogError):
            Catalog([_make_app(**{field: ""})])

    def test_negative_stars_rejected(self):
        with pytest.raises(MalformedCatalogError):
            Catalog([_make_app(stars=-1)])

    def test_empty_icon_path_rejected(self):
        with pytest.raises(MalformedCatalogError):
            Catalog([_make_app(icon=UrlIcon(light="/a.svg", dark=""))])

    def test_duplicate_env_var_rejected(self):
        specs = [EnvVarSpec("API_KEY"), EnvVarSpec("API_KEY")]
        with pytest.raises(MalformedCatalogError):
            Catalog([_make_app(env_vars=specs)])

    def test_empty_env_var_name_rejected(self):
        with pytest.raises(MalformedCatalogError):
            Catalog([_make_app(env_vars=[EnvVarSpec("")])])

    def test_same_env_var_in_two_apps_allowed(self):
        catalog = Catalog([
            _make_app(env_vars=[EnvVarSpec("API_KEY")]),
            _make_app(name="Other", env_vars=[EnvVarSpec("API_KEY")]),
        ])
        assert len(catalog) == 2

    def test_all_problems_reported(self):
        with pytest.raises(MalformedCatalogError) as exc_info:
            Catalog([_make_app(description="", developer="")])
        assert len(exc_info.value.problems) == 2

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            Catalog([_make_app(name="")])


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

class TestCatalogRecords:

    def test_builtin_records_roundtrip(self, catalog):
        assert catalog.to_records() == [dict(r) for r in APP_RECORDS]

    def test_env_vars_omitted_when_absent(self, catalog):
        records = {r['name']: r for r in catalog.to_records()}
        assert 'envVars' not in records["Browser"]
        assert records["June"]['envVars'][1]['name'] == "JUNE_API_KEY"

    def test_empty_env_vars_list_rejected(self):
        with pytest.raises(MalformedCatalogError):
            Catalog.from_records([_record(envVars=[])])

    def test_missing_field_rejected(self):
        record = _record()
        del record['developer']
        with pytest.raises(MalformedCatalogError) as exc_info:
            Catalog.from_records([record])
        assert any("developer" in p for p in exc_info.value.problems)

    def test_non_object_record_rejected(self):
        with pytest.raises(MalformedCatalogError):
            Catalog.from_records(["Gmail"])

    def test_unknown_icon_type_kept(self):
        icon = {'type': 'inline', 'data': "<svg/>"}
        catalog = Catalog.from_records([_record(icon=icon)])
        app = catalog.find_by_name("Example")
        assert app.icon.type == "inline"
        assert catalog.to_records()[0]['icon'] == icon

    def test_source_record_mutation_does_not_leak(self):
        icon = {'type': 'inline', 'data': {'svg': "<a/>"}}
        record = _record(icon=icon)
        catalog = Catalog.from_records([record])
        icon['data']['svg'] = "changed"
        record['name'] = "Renamed"
        assert catalog.to_records()[0]['icon']['data'] == {'svg': "<a/>"}
        assert catalog.names() == ["Example"]

    def test_descriptors_hashable(self):
        catalog = Catalog.from_records([
            _record(icon={'type': 'inline', 'data': "<svg/>"}),
        ])
        assert len({app for app in catalog.list_all()}) == 1
        assert len(set(default_catalog().list_all())) == 6

    def test_resolve_icon_from_catalog(self, catalog):
        assert resolve_icon(catalog.find_by_name("Gmail")) == "/servers/gmail.svg"
        assert resolve_icon(catalog.to_records()[4]) == "/servers/gmail.svg"
