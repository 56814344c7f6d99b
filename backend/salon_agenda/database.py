from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import NullPool

from .config import settings


def _connect_args(url: str) -> dict:
    # sqlite: the session can be used by the threadpool of FastAPI
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def _make_engine(url: str, app_env: str) -> Engine:
    # In dev: no pool -> connection closed right after each request
    if app_env.lower() != "prod":
        return create_engine(
            url,
            future=True,
            pool_pre_ping=True,
            poolclass=NullPool,
            connect_args=_connect_args(url),
        )

    # In prod: small, prudent pool
    return create_engine(
        url,
        future=True,
        pool_pre_ping=True,
        pool_size=1,
        max_overflow=0,
        pool_recycle=1800,
        connect_args=_connect_args(url),
    )


@event.listens_for(Engine, "connect")
def _sqlite_foreign_keys(dbapi_connection, connection_record):
    # ON DELETE CASCADE is ignored by sqlite unless foreign keys are on
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = _make_engine(settings.DB_URL, settings.APP_ENV)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
    future=True,
)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()  # releases the connection
