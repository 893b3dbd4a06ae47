import os
import uuid
from collections.abc import Generator
from typing import Any

import psycopg
import pytest
from psycopg import sql

from content_normalizer.config.settings import Settings
from content_normalizer.database.connection import (
    build_conninfo,
    close_pool,
    get_connection,
    init_pool,
)


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "content_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute("SELECT 1")
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(
    integration_pool: None, test_settings: Settings
) -> Generator[psycopg.Connection[Any], None, None]:
    """A direct writable connection for fixtures; pooled connections are read-only."""
    with psycopg.connect(build_conninfo(test_settings)) as conn:
        yield conn


@pytest.fixture
def seed_table(db_conn: psycopg.Connection[Any]) -> Generator[str, None, None]:
    """Create a throwaway public table with id/body rows; yields 'public.<name>'."""
    name = f"normalize_{uuid.uuid4().hex[:12]}"
    table = sql.Identifier("public", name)
    db_conn.execute(
        sql.SQL("CREATE TABLE {} (id integer PRIMARY KEY, body text)").format(table)
    )
    db_conn.execute(
        sql.SQL("INSERT INTO {} (id, body) VALUES (%s, %s), (%s, %s), (%s, %s)").format(table),
        (3, "<p>Three</p>", 1, "<a href='x'>One</a>", 2, None),
    )
    db_conn.commit()
    try:
        yield f"public.{name}"
    finally:
        db_conn.execute(sql.SQL("DROP TABLE IF EXISTS {}").format(table))
        db_conn.commit()
