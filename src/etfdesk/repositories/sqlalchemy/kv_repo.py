"""SQLAlchemy implementation of KeyValueRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from etfdesk.repositories.sqlalchemy.orm_models import KeyValueORM


class SqlAlchemyKeyValueRepository:
    """SQLAlchemy-backed key-value repository."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, key: str) -> Optional[str]:
        """Return the stored value for key."""
        orm_entry = self._db.get(KeyValueORM, key)
        return orm_entry.value if orm_entry else None

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value for key."""
        orm_entry = self._db.get(KeyValueORM, key)
        if orm_entry:
            orm_entry.value = value
        else:
            self._db.add(KeyValueORM(key=key, value=value))
        self._db.commit()

    def delete(self, key: str) -> None:
        """Delete key if present."""
        self._db.query(KeyValueORM).filter(KeyValueORM.key == key).delete()
        self._db.commit()

    def keys(self) -> list[str]:
        """List all stored keys, sorted."""
        return [row.key for row in self._db.query(KeyValueORM).order_by(KeyValueORM.key).all()]
