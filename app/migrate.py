"""
Schema migrators behind the ``dbmigrateup`` and ``dbmigratedown`` commands.

Revisions live in ``app/migrations/versions`` and are applied by alembic over a
synchronous connection. Both commands are a no-op when the database is already
at the target revision; any other failure ends the process with status 1.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection
from sqlalchemy.pool import NullPool

from app.core.config import Settings

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / 'migrations'


class NoChange(Exception):
    """The database is already at the requested revision."""


def _alembic_config(connection: Connection, script_location: Path) -> Config:
    cfg = Config()
    cfg.set_main_option('script_location', str(script_location))
    cfg.attributes['connection'] = connection
    return cfg


def _current_heads(connection: Connection) -> set:
    return set(MigrationContext.configure(connection).get_current_heads())


def ping_database(database_url: str) -> None:
    engine = create_engine(database_url, poolclass=NullPool)
    try:
        with engine.connect() as connection:
            connection.execute(text('SELECT 1'))
    finally:
        engine.dispose()


def migrate_up(database_url: str, script_location: Path = MIGRATIONS_DIR) -> None:
    """Apply every pending revision in order. Raises NoChange when at head."""
    engine = create_engine(database_url, poolclass=NullPool)
    try:
        with engine.begin() as connection:
            cfg = _alembic_config(connection, script_location)
            script = ScriptDirectory.from_config(cfg)
            if _current_heads(connection) == set(script.get_heads()):
                raise NoChange('no change')
            command.upgrade(cfg, 'head')
    finally:
        engine.dispose()


def migrate_down(database_url: str, revert_all: bool = False,
                 script_location: Path = MIGRATIONS_DIR) -> None:
    """Revert the latest revision, or all of them. Raises NoChange at base."""
    engine = create_engine(database_url, poolclass=NullPool)
    try:
        with engine.begin() as connection:
            cfg = _alembic_config(connection, script_location)
            # fails early when the revision files are missing
            ScriptDirectory.from_config(cfg)
            if not _current_heads(connection):
                raise NoChange('no change')
            command.downgrade(cfg, 'base' if revert_all else '-1')
    finally:
        engine.dispose()


def _parse_args(description: str, argv: Optional[Sequence[str]], with_all: bool = False):
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        '--database-url',
        default=None,
        help='SQLAlchemy URL to migrate. Defaults to the configured database.',
    )
    if with_all:
        parser.add_argument(
            '--all',
            action='store_true',
            dest='revert_all',
            help='Revert every applied revision instead of only the latest.',
        )
    return parser.parse_args(argv)


def _setup_logging() -> None:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(message)s')


def _connect_or_exit(database_url: str) -> None:
    try:
        ping_database(database_url)
    except Exception as e:
        logger.critical(f'error when trying to connect: {e}')
        sys.exit(1)


def migrate_up_main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args('Apply all pending schema migrations.', argv)
    _setup_logging()
    database_url = args.database_url or Settings().sync_database_url
    _connect_or_exit(database_url)

    try:
        migrate_up(database_url)
    except NoChange as e:
        logger.info(f'migration is up to date: {e}')
        return
    except Exception as e:
        logger.critical(f'migration up error: {e}')
        sys.exit(1)
    logger.info('database migrated up successfully')


def migrate_down_main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args('Revert the most recent schema migration.', argv, with_all=True)
    _setup_logging()
    database_url = args.database_url or Settings().sync_database_url
    _connect_or_exit(database_url)

    try:
        migrate_down(database_url, revert_all=args.revert_all)
    except NoChange as e:
        logger.info(f'migration is up to date: {e}')
        return
    except Exception as e:
        logger.critical(f'migration down error: {e}')
        sys.exit(1)
    logger.info('database migrated down successfully')


