from threading import Lock

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import declarative_base, sessionmaker

from backend.core import config


def build_engine(url: str | None = None, **kwargs):
    url = url or config.DATABASE_URL
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, echo=config.DATABASE_ECHO, **kwargs)


engine = build_engine()

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()

_schema_lock = Lock()
_sweet_schema_checked = False


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ensure_sweet_schema(bind=None) -> None:
    """Add the search indexes to a ``sweets`` table created before they existed."""
    global _sweet_schema_checked

    if _sweet_schema_checked and bind is None:
        return

    bind = bind or engine
    with _schema_lock:
        inspector = inspect(bind)

        if 'sweets' not in inspector.get_table_names():
            return

        with bind.begin() as connection:
            connection.execute(text('CREATE INDEX IF NOT EXISTS ix_sweets_name ON sweets(name)'))
            connection.execute(text('CREATE INDEX IF NOT EXISTS ix_sweets_category ON sweets(category)'))
            connection.execute(text('CREATE INDEX IF NOT EXISTS ix_sweets_price ON sweets(price)'))

        if bind is engine:
            _sweet_schema_checked = True
