from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import DATABASE_URL

# ---------------- SQLAlchemy setup ----------------
engine_kwargs = {}
if DATABASE_URL.startswith("sqlite"):
    # the same in-memory database must be visible to every request thread
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    if DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(DATABASE_URL, **engine_kwargs)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


if engine.dialect.name == "sqlite":
    # SQLite leaves foreign keys unchecked unless asked, Postgres always checks them
    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ---------------- get_db dependency for FastAPI ----------------
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
