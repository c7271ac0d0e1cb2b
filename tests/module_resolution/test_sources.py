"""Tests for PackageSource and FileSource."""

import json
import sys
import types

import pytest
from orm_platform.module_resolution.sources import FileSource
from orm_platform.module_resolution.sources import PackageSource
from orm_platform.module_resolution.sources import to_import_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("redis", "redis"),
        ("pg-query-stream", "pg_query_stream"),
        ("sql.js", "sql_js"),
        ("@sap/hana-client", "_sap_hana_client"),
        ("3d-driver", "_3d_driver"),
    ],
)
def test_to_import_name(name, expected):
    assert to_import_name(name) == expected


class TestPackageSource:
    def test_loads_installed_module(self):
        assert PackageSource("json").load() is json

    def test_missing_module_raises_import_error(self):
        with pytest.raises(ImportError):
            PackageSource("definitely_not_installed_driver_xyz").load()

    def test_repr(self):
        assert repr(PackageSource("psycopg2")) == "PackageSource(psycopg2)"


class TestFileSource:
    def test_prefers_package_over_module_file(self, make_vendored_package, vendor_dir):
        make_vendored_package("both")
        (vendor_dir / "both.py").write_text("KIND = 'module'\n")

        assert FileSource(vendor_dir, "both").locate() == (vendor_dir / "both" / "__init__.py").resolve()

    def test_scoped_name_maps_to_nested_directory(self, make_vendored_package, vendor_dir):
        make_vendored_package("@sap/hana-client", "SCOPED = True\n")

        module = FileSource(vendor_dir, "@sap/hana-client").load()

        assert module.SCOPED is True
        assert module.__name__ == "orm_platform._fallback._sap_hana_client"

    def test_missing_name_raises_module_not_found(self, vendor_dir):
        with pytest.raises(ModuleNotFoundError, match="No package or module named 'ghost'"):
            FileSource(vendor_dir, "ghost").locate()

    def test_failed_load_restores_previous_registration(self, make_vendored_package, vendor_dir, monkeypatch):
        previous = types.ModuleType("orm_platform._fallback.flaky")
        monkeypatch.setitem(sys.modules, "orm_platform._fallback.flaky", previous)
        make_vendored_package("flaky", "raise RuntimeError('half installed')\n")

        with pytest.raises(RuntimeError, match="half installed"):
            FileSource(vendor_dir, "flaky").load()

        assert sys.modules["orm_platform._fallback.flaky"] is previous

    def test_successful_load_is_registered(self, make_vendored_package, vendor_dir):
        make_vendored_package("registered")

        module = FileSource(vendor_dir, "registered").load()

        assert sys.modules["orm_platform._fallback.registered"] is module
        assert "registered" not in sys.modules
