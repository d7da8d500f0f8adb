import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using them
    pool_size=10,
    max_overflow=20
)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database.

    Schema changes are owned by Alembic ("alembic upgrade head"). Importing the
    models here registers them on Base.metadata; tables are only created
    directly when AUTO_CREATE_TABLES is enabled (local SQLite, demos).
    """
    from app.models import job_update  # noqa: F401  Import models to register them

    if settings.AUTO_CREATE_TABLES:
        logger.info("AUTO_CREATE_TABLES enabled, creating missing tables")
        Base.metadata.create_all(bind=engine)
