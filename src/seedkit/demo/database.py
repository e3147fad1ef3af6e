"""
Database helpers for the demo seeders.

Defaults to SQLite for local dev; any SQLAlchemy URL works through
``SEEDKIT_DATABASE_URL``.
"""

from __future__ import annotations

from typing import Callable, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from seedkit.config import get_settings

from .models import Base


def create_db_engine(database_url: Optional[str] = None, *, echo: bool = False) -> Engine:
    url = database_url or get_settings().DATABASE_URL

    connect_args: dict = {}
    if "sqlite" in url:
        connect_args["check_same_thread"] = False

    if url.startswith("sqlite:///:memory:") or url == "sqlite://":
        from sqlalchemy.pool import StaticPool

        engine = create_engine(
            url,
            echo=echo,
            connect_args=connect_args,
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(
            url,
            echo=echo,
            pool_pre_ping=True,
            connect_args=connect_args,
        )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record):  # pragma: no cover
        if "sqlite" in url:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def init_db(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)


def create_session_factory(
    database_url: Optional[str] = None, *, create_tables: bool = True
) -> sessionmaker:
    engine = create_db_engine(database_url)
    if create_tables:
        init_db(engine)
    return sessionmaker(
        autoflush=False, expire_on_commit=False, bind=engine
    )


class LazySession:
    """Session proxy that opens the real session on first use.

    Building a registry then only needs the factory; no engine connects and
    no tables are created until a seeder touches the session.
    """

    def __init__(self, factory: Callable[[], Session]):
        self._factory = factory
        self._session: Optional[Session] = None

    @property
    def is_open(self) -> bool:
        return self._session is not None

    def __getattr__(self, name: str):
        if self._session is None:
            self._session = self._factory()
        return getattr(self._session, name)


def lazy_session(database_url: Optional[str] = None) -> LazySession:
    return LazySession(lambda: create_session_factory(database_url)())
