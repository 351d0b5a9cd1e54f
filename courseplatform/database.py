from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from courseplatform.config import DatabaseSettings

# Base model
Base = declarative_base()


def create_db_engine(settings: DatabaseSettings) -> Engine:
    url = settings.database_url
    if not url.startswith("sqlite"):
        return create_engine(url, echo=settings.SQL_ECHO, pool_pre_ping=True)

    # In-memory SQLite must share one connection or every session sees an empty db
    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
        kwargs["poolclass"] = StaticPool
    engine = create_engine(url, echo=settings.SQL_ECHO, **kwargs)
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    # Register every model on Base.metadata before creating tables
    import courseplatform.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
