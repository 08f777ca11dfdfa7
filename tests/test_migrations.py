"""Test database migration functionality"""

from sqlalchemy import create_engine, inspect

from bugtracker.storage import BugService, Database
from bugtracker.storage.migrations import (
    MIGRATIONS_DIR,
    get_current_revision,
    get_head_revision,
    initialize_database,
    needs_migration,
    run_migrations,
)


class TestMigrationSystem:
    """Test the automatic migration system"""

    def test_migrations_shipped_with_package(self):
        assert (MIGRATIONS_DIR / "env.py").exists()
        assert list((MIGRATIONS_DIR / "versions").glob("*.py"))

    def test_needs_migration_new_database(self, database_url):
        """Test migration needed when no schema exists"""
        assert needs_migration(database_url) is True
        assert get_current_revision(database_url) is None

    def test_run_migrations_creates_bugs_table(self, database_url):
        run_migrations(database_url)

        engine = create_engine(database_url)
        try:
            inspector = inspect(engine)
            assert "bugs" in inspector.get_table_names()
            columns = {column["name"] for column in inspector.get_columns("bugs")}
        finally:
            engine.dispose()

        assert columns == {
            "id", "title", "description", "reported_by", "status",
            "priority", "assigned_to", "created_at", "updated_at",
        }

    def test_up_to_date_after_migration(self, database_url):
        run_migrations(database_url)

        assert needs_migration(database_url) is False
        assert get_current_revision(database_url) == get_head_revision(database_url)

    def test_initialize_database_is_idempotent(self, database_url):
        initialize_database(database_url)
        initialize_database(database_url)

        assert needs_migration(database_url) is False

    def test_migrated_schema_matches_models(self, database_url):
        """Test the service works against a migrated (not create_all) schema"""
        initialize_database(database_url)
        database = Database(database_url)
        try:
            service = BugService(database)
            bug = service.create_bug(
                title="Migrated",
                description="Created on a migrated schema",
                reported_by="tester",
                status="in-progress",
                priority="critical",
            )
            assert service.get_bug(bug.id).priority.value == "critical"
            assert [b.id for b in service.list_bugs(status="in-progress")] == [bug.id]
        finally:
            database.dispose()
