"""SQLite SQLAlchemy store wrapper."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import Table, create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from core.errors import SchemaViolation, StorageUnavailable

logger = logging.getLogger("gw.storage")


class SQLStore:
    """Provides SQLAlchemy session management for SQLite persistence.

    One engine is held for the process lifetime; each logical operation gets
    its own session.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageUnavailable(f"Cannot create database directory: {exc}") from exc
        self.engine = create_engine(f"sqlite+pysqlite:///{self.db_path}", future=True)
        self._session_factory = sessionmaker(bind=self.engine, future=True, expire_on_commit=False)

    def create_table(self, table: Table) -> None:
        """Create one table if missing."""
        try:
            table.create(self.engine, checkfirst=True)
        except SQLAlchemyError as exc:
            logger.error("Schema provisioning failed for %s: %s", table.name, exc)
            raise StorageUnavailable(f"Cannot provision table {table.name}: {exc}") from exc

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Context manager that commits on success and rolls back on error.

        Database errors are translated into the wizard's storage error kinds.
        """
        sess = self._session_factory()
        try:
            yield sess
            sess.commit()
        except IntegrityError as exc:
            sess.rollback()
            logger.error("Uniqueness constraint violated: %s", exc.orig)
            raise SchemaViolation(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            sess.rollback()
            logger.error("Storage operation failed: %s", exc)
            raise StorageUnavailable(str(exc)) from exc
        except Exception:
            sess.rollback()
            raise
        finally:
            sess.close()

    def dispose(self) -> None:
        self.engine.dispose()
