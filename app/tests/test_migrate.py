import logging

import pytest
from alembic.util import CommandError
from sqlalchemy import create_engine, inspect

from app.migrate import NoChange, migrate_down, migrate_down_main, migrate_up, migrate_up_main


@pytest.fixture(scope="function")
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'migrate.db'}"


def table_names(database_url):
    engine = create_engine(database_url)
    try:
        return set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


def book_columns(database_url):
    engine = create_engine(database_url)
    try:
        return [column["name"] for column in inspect(engine).get_columns("books")]
    finally:
        engine.dispose()


def test_migrate_up_creates_books_table(database_url):
    migrate_up(database_url)
    assert "books" in table_names(database_url)
    assert book_columns(database_url) == [
        "id", "code", "name", "auther", "is_archived", "created_at", "updated_at"
    ]


def test_migrate_up_twice_is_no_change(database_url):
    migrate_up(database_url)
    with pytest.raises(NoChange):
        migrate_up(database_url)
    assert "books" in table_names(database_url)


def test_migrate_down_reverts(database_url):
    migrate_up(database_url)
    migrate_down(database_url)
    assert "books" not in table_names(database_url)


def test_migrate_down_at_base_is_no_change(database_url):
    with pytest.raises(NoChange):
        migrate_down(database_url)
    migrate_up(database_url)
    migrate_down(database_url, revert_all=True)
    with pytest.raises(NoChange):
        migrate_down(database_url)


def test_missing_migration_files(database_url, tmp_path):
    with pytest.raises(CommandError):
        migrate_up(database_url, script_location=tmp_path / "missing")


def test_migrate_up_main_logs_up_to_date(database_url, caplog):
    caplog.set_level(logging.INFO)
    migrate_up_main(["--database-url", database_url])
    assert "database migrated up successfully" in caplog.text
    migrate_up_main(["--database-url", database_url])
    assert "migration is up to date" in caplog.text


def test_migrate_down_main(database_url, caplog):
    caplog.set_level(logging.INFO)
    migrate_up_main(["--database-url", database_url])
    migrate_down_main(["--database-url", database_url])
    assert "database migrated down successfully" in caplog.text
    assert "books" not in table_names(database_url)


def test_unreachable_database_exits(tmp_path):
    database_url = f"sqlite:///{tmp_path / 'no-such-dir' / 'migrate.db'}"
    with pytest.raises(SystemExit) as excinfo:
        migrate_up_main(["--database-url", database_url])
    assert excinfo.value.code == 1
