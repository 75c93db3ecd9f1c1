import logging
import time

import sqlalchemy as sa
from alembic.operations import Operations
from alembic.runtime.migration import MigrationContext

from church_records.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)

metadata = sa.MetaData()

schema_version = sa.Table(
    "schema_version",
    metadata,
    sa.Column("id", sa.Integer, primary_key=True),
    sa.Column("version", sa.Integer, nullable=False),
    sa.Column("description", sa.Text, nullable=True),
    sa.Column("applied_at", sa.Integer, nullable=False),
)


class SchemaManager:
    """Applies versioned migrations and records the version in the store.

    Every migration module exposes ``revision``, ``down_revision``,
    ``description``, ``upgrade()`` and ``downgrade()`` and is written against
    ``alembic.op``. One version's script and its version record are committed
    in a single transaction, so a failing script leaves the store at the
    version it had before.
    """

    def __init__(self, engine, migrations=None):
        if migrations is None:
            from church_records.migrations import MIGRATIONS

            migrations = MIGRATIONS
        self.engine = engine
        self.migrations = sorted(migrations, key=lambda m: m.revision)
        self._check_chain()

    @property
    def head(self) -> int:
        return self.migrations[-1].revision if self.migrations else 0

    def _check_chain(self):
        for index, migration in enumerate(self.migrations, start=1):
            expected_down = index - 1 or None
            if migration.revision != index or migration.down_revision != expected_down:
                raise StorageError(
                    f"Broken migration chain at revision {migration.revision} "
                    f"(expected {index}, revises {expected_down})"
                )

    def _check_target(self, target_version):
        if (
            not isinstance(target_version, int)
            or isinstance(target_version, bool)
            or not 0 <= target_version <= self.head
        ):
            raise ValidationError(
                {"target_version": f"Must be an integer between 0 and {self.head}"},
                f"Unknown schema version: {target_version}",
            )

    @staticmethod
    def _read_version(connection) -> int:
        if not sa.inspect(connection).has_table(schema_version.name):
            return 0
        row = connection.execute(sa.select(schema_version.c.version)).first()
        return row.version if row else 0

    @staticmethod
    def _write_version(connection, version, description):
        schema_version.create(connection, checkfirst=True)
        connection.execute(sa.delete(schema_version))
        connection.execute(
            sa.insert(schema_version).values(
                id=1,
                version=version,
                description=description,
                applied_at=int(time.time()),
            )
        )

    def current_version(self) -> int:
        try:
            with self.engine.connect() as connection:
                return self._read_version(connection)
        except sa.exc.SQLAlchemyError as e:
            raise StorageError(f"Could not read schema version: {e}") from e

    def status(self):
        current = self.current_version()
        return {
            "current_version": current,
            "head_version": self.head,
            "pending": [m.revision for m in self.migrations if m.revision > current],
        }

    def _apply(self, migration, direction, resulting_version):
        step = migration.upgrade if direction == "upgrade" else migration.downgrade
        description = None
        if resulting_version:
            description = self.migrations[resulting_version - 1].description
        try:
            with self.engine.begin() as connection:
                context = MigrationContext.configure(connection)
                with Operations.context(context):
                    step()
                self._write_version(connection, resulting_version, description)
        except Exception as e:
            logger.error(
                f"Schema {direction} of revision {migration.revision} "
                f"({migration.description}) failed: {e}"
            )
            raise StorageError(
                f"Schema {direction} of revision {migration.revision} failed: {e}"
            ) from e
        logger.info(
            f"Schema {direction} of revision {migration.revision} "
            f"({migration.description}) applied, now at version {resulting_version}"
        )

    def upgrade(self, target_version=None) -> int:
        target = self.head if target_version is None else target_version
        self._check_target(target)
        current = self.current_version()
        if current > self.head:
            raise StorageError(
                f"Store is at schema version {current}, newer than this application ({self.head})"
            )
        if target < current:
            raise ValidationError(
                {"target_version": f"Store is already at version {current}"},
                "Cannot upgrade to an older version, use downgrade",
            )

        for migration in self.migrations[current:target]:
            self._apply(migration, "upgrade", migration.revision)
        return target

    def downgrade(self, target_version=0) -> int:
        self._check_target(target_version)
        current = self.current_version()
        if current > self.head:
            raise StorageError(
                f"Store is at schema version {current}, newer than this application ({self.head})"
            )
        if target_version > current:
            raise ValidationError(
                {"target_version": f"Store is only at version {current}"},
                "Cannot downgrade to a newer version, use upgrade",
            )

        for migration in reversed(self.migrations[target_version:current]):
            self._apply(migration, "downgrade", migration.revision - 1)
        return target_version
