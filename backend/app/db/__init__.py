import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from app.config import settings

log = logging.getLogger("app.db")

DATABASE_URL = make_url(settings.database_url)

# SQLite connections are handed between FastAPI's worker threads
connect_args = {"check_same_thread": False} if DATABASE_URL.get_backend_name() == "sqlite" else {}

engine = create_engine(DATABASE_URL, future=True, echo=False, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def init_db():
    """
    Create the products table if it does not exist yet.

    This is not a migration: an existing table is left exactly as it is.
    """
    # populate Base.metadata
    import app.models.product  # noqa: F401

    log.info(
        "Initializing database (backend=%s, database=%s)",
        DATABASE_URL.get_backend_name(),
        DATABASE_URL.database,
    )
    Base.metadata.create_all(bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
