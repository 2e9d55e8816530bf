"""SQLAlchemy engine and unit-of-work plumbing shared by the SQL repositories."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.domain.exceptions import StorageError
from storefront.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Database:
    """Owns one engine plus the schema it serves, and hands out transactions."""

    def __init__(self, url: str, metadata: MetaData, echo: bool = False) -> None:
        self.engine = _build_engine(url, echo)
        self._metadata = metadata
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def create_all(self) -> None:
        """Setup database schema"""
        self._metadata.create_all(self.engine)

    def drop_all(self) -> None:
        """Drop database schema"""
        self._metadata.drop_all(self.engine)

    @contextmanager
    def unit_of_work(self) -> Iterator[Session]:
        """Yield a session wrapped in one transaction.

        Commits when the block exits normally, rolls back otherwise. Any
        SQLAlchemy failure leaves the block as a StorageError.
        """
        session = self._session_factory()
        try:
            with session.begin():
                yield session
        except SQLAlchemyError as exc:
            logger.error("storage_failure", error=str(exc))
            raise StorageError(f"Storage operation failed: {exc}") from exc
        finally:
            session.close()


def _build_engine(url: str, echo: bool) -> Engine:
    if not url.startswith("sqlite"):
        return create_engine(url, echo=echo, pool_pre_ping=True)

    if url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, or every session would see its own empty DB.
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        database = make_url(url).database
        if database:
            Path(database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(url, echo=echo, connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def _configure_sqlite(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        # Built-in lower() only folds ASCII.
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)

    return engine


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
