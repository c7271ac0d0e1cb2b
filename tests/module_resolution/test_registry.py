"""Tests for the built-in resolution table."""

import pytest
from orm_platform.module_resolution import RESOLUTION_TABLE
from orm_platform.module_resolution import DirectImport
from orm_platform.module_resolution import FallbackOnly
from orm_platform.module_resolution import PackageSource
from orm_platform.module_resolution import known_capabilities
from orm_platform.module_resolution.registry import get_resolution_action


def test_table_is_read_only():
    with pytest.raises(TypeError):
        RESOLUTION_TABLE["pg"] = DirectImport("something_else")  # type: ignore[index]


def test_every_entry_is_a_resolution_action():
    for name, action in RESOLUTION_TABLE.items():
        assert name
        assert isinstance(action, DirectImport | FallbackOnly)


def test_documents_core_drivers():
    capabilities = known_capabilities()

    assert capabilities == sorted(capabilities)
    for name in ("pg", "mysql", "mysql2", "redis", "sqlite3", "mssql", "oracledb", "mongodb"):
        assert name in capabilities


def test_direct_import_targets():
    assert get_resolution_action("pg") == DirectImport("psycopg2")
    assert get_resolution_action("ioredis") == DirectImport("redis.asyncio")


def test_fallback_only_entries():
    assert isinstance(get_resolution_action("sql.js"), FallbackOnly)
    assert isinstance(get_resolution_action("react-native-sqlite-storage"), FallbackOnly)


def test_unlisted_name_has_no_action():
    assert get_resolution_action("totally-unknown-name") is None


def test_direct_import_builds_package_source():
    source = DirectImport("json").source()

    assert isinstance(source, PackageSource)
    assert source.module_name == "json"
