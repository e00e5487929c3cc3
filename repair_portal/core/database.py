# repair_portal/core/database.py
import threading
from contextlib import contextmanager

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()

_IN_MEMORY_URLS = {"sqlite://", "sqlite:///:memory:"}


def build_engine(database_url: str) -> Engine:
    """Create the engine backing both stores.

    An in-memory SQLite database exists per connection, so it is pinned to a
    single shared connection; otherwise every session would see an empty
    database.
    """
    if database_url in _IN_MEMORY_URLS:
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    Base.metadata.create_all(bind=engine)
    # Sessions from one factory share a connection, so they share a lock too
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
        info={"lock": threading.RLock()},
    )


@contextmanager
def unit_of_work(db: Session):
    """Run one store operation alone on the connection.

    Handlers run on a thread pool; without this, one session's commit or
    rollback can land in the middle of another session's flush.
    """
    with db.info["lock"]:
        try:
            yield db
        except Exception:
            db.rollback()
            raise


# Common DB dependency
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        with db.info["lock"]:
            db.close()
