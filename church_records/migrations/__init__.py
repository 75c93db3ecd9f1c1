from church_records.migrations.versions import create_initial_tables

# Ordered by revision; each entry revises the one before it.
MIGRATIONS = [
    create_initial_tables,
]

from church_records.migrations.schema_manager import SchemaManager  # noqa: E402
