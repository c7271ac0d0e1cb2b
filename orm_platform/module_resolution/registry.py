"""Resolution table of every driver capability the ORM integrates with.

Each capability maps to exactly one resolution action. Listing a capability
here documents it and gives bundlers (PyInstaller, Nuitka, Pyodide package
lists) an enumerable set of import targets to discover statically.
Capabilities absent from the table still resolve through the fallback root.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .sources import PackageSource


@dataclass(frozen=True)
class DirectImport:
    """Import a fixed module through the host import system."""

    module: str

    def source(self) -> PackageSource:
        return PackageSource(self.module)


@dataclass(frozen=True)
class FallbackOnly:
    """Known capability with no direct import target; use the fallback root."""

    note: str = ""


ResolutionAction = DirectImport | FallbackOnly


RESOLUTION_TABLE: Mapping[str, ResolutionAction] = MappingProxyType(
    {
        # spanner
        "spanner": DirectImport("google.cloud.spanner"),
        # mongodb
        "mongodb": DirectImport("pymongo"),
        # hana
        "@sap/hana-client": DirectImport("hdbcli.dbapi"),
        "hdb-pool": FallbackOnly("pooling is provided by the hana client itself"),
        # mysql
        "mysql": DirectImport("pymysql"),
        "mysql2": DirectImport("MySQLdb"),
        "mariadb": DirectImport("mariadb"),
        # oracle
        "oracledb": DirectImport("oracledb"),
        # postgres
        "pg": DirectImport("psycopg2"),
        "pg-native": DirectImport("psycopg"),
        "pg-query-stream": FallbackOnly("server-side cursors come from the postgres driver"),
        "aurora-data-api": DirectImport("aurora_data_api"),
        # redis
        "redis": DirectImport("redis"),
        "ioredis": DirectImport("redis.asyncio"),
        # sqlite
        "better-sqlite3": DirectImport("apsw"),
        "sqlite3": DirectImport("sqlite3"),
        "sql.js": FallbackOnly("browser-only sqlite build"),
        # sqlserver
        "mssql": DirectImport("pymssql"),
        # react-native
        "react-native-sqlite-storage": FallbackOnly("mobile-only sqlite build"),
    }
)


def get_resolution_action(name: str) -> ResolutionAction | None:
    """Return the action registered for a capability, or None if unlisted."""
    return RESOLUTION_TABLE.get(name)


def known_capabilities() -> list[str]:
    """All capability names in the resolution table, sorted."""
    return sorted(RESOLUTION_TABLE)
