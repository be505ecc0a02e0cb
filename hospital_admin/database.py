"""
Database connection and session management.
Provides SQLAlchemy engine, session, and base class for models.
"""
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import sessionmaker, declarative_base
from .config import settings

engine_options = {}
if settings.database_url.startswith("sqlite"):
    # Sync routes run on the threadpool, so the connection crosses threads
    engine_options["connect_args"] = {"check_same_thread": False}
    if settings.database_url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, otherwise every connection sees an empty database
        engine_options["poolclass"] = StaticPool

# Create SQLAlchemy engine for database connection
engine = create_engine(settings.database_url, **engine_options)

# Create session factory for database sessions
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

# Create base class for declarative models
Base = declarative_base()


def get_db():
    """
    Database dependency - Creates and yields a database session.

    The session is automatically closed after the request is processed,
    even if an exception occurs during request handling.

    Yields:
        SQLAlchemy Session: Database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Create every table registered on Base (users and the four record tables)."""
    # Model modules register their tables on Base when imported
    from .auth import models as _auth_models  # noqa: F401
    from .doctors import models as _doctor_models  # noqa: F401
    from .specialties import models as _specialty_models  # noqa: F401
    from .medications import models as _medication_models  # noqa: F401
    from .patients import models as _patient_models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
