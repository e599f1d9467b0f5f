from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from blindaudit.core.config import settings
from blindaudit.core.errors import storage_errors


def enable_sqlite_savepoints(engine: Engine) -> None:
    """
    pysqlite starts transactions lazily and would silently commit on the
    outermost RELEASE SAVEPOINT. Take over BEGIN so begin_nested() behaves
    the same as on PostgreSQL.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")


def build_engine(url: str, **kwargs) -> Engine:
    engine = create_engine(url, pool_pre_ping=True, **kwargs)
    if engine.dialect.name == "sqlite":
        enable_sqlite_savepoints(engine)
    return engine


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)

def get_db():
    db = SessionLocal()
    try:
        yield db
        with storage_errors():
            db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
