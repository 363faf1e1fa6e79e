"""
Engine construction and schema bootstrap.

PostgreSQL is the production target. SQLite is supported for local
runs and tests; foreign keys are switched on for every SQLite
connection so referential actions match PostgreSQL.
"""

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from app.infrastructure.farming.schema import metadata

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_database_engine(dsn: str) -> Engine:
    """Build a SQLAlchemy engine for the given DSN.

    Args:
        dsn: Database URL, e.g. ``postgresql://...`` or ``sqlite:///agrix.db``.

    Returns:
        A configured engine with a pre-ping connection pool.
    """
    if dsn.startswith("sqlite"):
        engine = create_engine(dsn, connect_args={"check_same_thread": False})
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_engine(dsn, pool_pre_ping=True)

    logger.debug("Created database engine for dialect=%s", engine.dialect.name)
    return engine


def init_schema(engine: Engine) -> None:
    """Create the farming tables if they do not exist yet."""
    metadata.create_all(engine)
    logger.info("Database schema ready (%d tables).", len(metadata.tables))
