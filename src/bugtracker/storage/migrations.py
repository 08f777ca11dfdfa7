"""Database migration handling with automatic upgrade on startup"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent.parent / "migrations"


def get_migration_config(database_url: str) -> Config:
    """Get Alembic configuration for the given database"""
    if not MIGRATIONS_DIR.exists():
        raise FileNotFoundError(
            f"migrations directory not found at {MIGRATIONS_DIR}. "
            "This indicates an incomplete installation. "
            "Please reinstall bugtracker."
        )

    alembic_cfg = Config()
    alembic_cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    alembic_cfg.set_main_option("sqlalchemy.url", database_url)
    return alembic_cfg


def get_current_revision(database_url: str):
    engine = create_engine(database_url)
    try:
        with engine.connect() as conn:
            return MigrationContext.configure(conn).get_current_revision()
    finally:
        engine.dispose()


def get_head_revision(database_url: str):
    script_dir = ScriptDirectory.from_config(get_migration_config(database_url))
    return script_dir.get_current_head()


def needs_migration(database_url: str) -> bool:
    """Check if database is behind the latest migration"""
    return get_current_revision(database_url) != get_head_revision(database_url)


def run_migrations(database_url: str):
    """Run any pending migrations"""
    command.upgrade(get_migration_config(database_url), "head")


def initialize_database(database_url: str):
    """Create the schema on first run or upgrade it to the latest revision"""
    if needs_migration(database_url):
        logger.info("Migrating bug database to latest schema...")
        run_migrations(database_url)
        logger.info("Database migration successful")
    else:
        logger.info("Database is up to date")
