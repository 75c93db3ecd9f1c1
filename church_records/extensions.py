from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
import logging

logger = logging.getLogger(__name__)

db = SQLAlchemy()


def configure_sqlite_engine(engine):
    """Make SQLite DDL transactional and enforce foreign keys.

    pysqlite only opens a transaction ahead of DML, so the driver's own
    transaction handling is switched off and SQLAlchemy emits BEGIN itself.
    """
    if engine.dialect.name != "sqlite":
        return engine

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    logger.debug(f"Configured SQLite engine {engine.url}")
    return engine
