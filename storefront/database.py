# storefront/database.py
import sqlite3

from sqlalchemy.engine import make_url
from sqlalchemy.pool import QueuePool
from sqlmodel import SQLModel, create_engine, Session

from storefront.core.config import get_settings

settings = get_settings()

# ---------------------------------------------------------
# Store engine
#
# The default DATABASE_URL ("sqlite://") is a process-memory
# SQLite database: everything resets on restart.
#
# - one raw connection, shared : every new connection would
#                                otherwise get an empty database
# - QueuePool(pool_size=1)     : a Session owns that connection from
#                                its first query until commit/rollback/
#                                close; other threads queue on checkout
# - check_same_thread=False    : sync routes run in FastAPI's threadpool
#
# Any other URL is passed through untouched, so the catalog and carts
# can move to a persistent database without changing call sites.
# ---------------------------------------------------------


def _is_memory_sqlite(db_url: str) -> bool:
    url = make_url(db_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def build_engine(db_url: str, pool_timeout: float = 30):
    if _is_memory_sqlite(db_url):
        shared = sqlite3.connect(":memory:", check_same_thread=False)
        return create_engine(
            db_url,
            echo=False,
            creator=lambda: shared,
            poolclass=QueuePool,
            pool_size=1,
            max_overflow=0,
            pool_timeout=pool_timeout,
        )
    if db_url.startswith("sqlite"):
        return create_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},
        )
    return create_engine(db_url, echo=False, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL)


def create_db_and_tables(bind=None) -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(bind if bind is not None else engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
