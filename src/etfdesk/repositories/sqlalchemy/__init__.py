"""SQLAlchemy repository implementations."""

from etfdesk.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    init_db_with_path,
    reset_database,
    Base,
)
from etfdesk.repositories.sqlalchemy.kv_repo import SqlAlchemyKeyValueRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "init_db_with_path",
    "reset_database",
    "Base",
    "SqlAlchemyKeyValueRepository",
]
