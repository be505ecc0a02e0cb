"""
Main FastAPI application entry point.
Configures the application, middleware, and includes routers.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
import logging

from . import __version__
from .config import settings
from .database import SessionLocal, engine, init_db
from .exceptions import register_exception_handlers
from .core.bootstrap import bootstrap_admin_if_needed
from .core.middleware import setup_middlewares
from .auth.router import router as auth_router
from .doctors.router import router as doctors_router
from .specialties.router import router as specialties_router
from .medications.router import router as medications_router
from .patients.router import router as patients_router

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables then bootstrap the first admin
    logger.info("🏥 Starting Hospital Administration API...")
    init_db()
    db = SessionLocal()
    try:
        bootstrap_admin_if_needed(db)
    except SQLAlchemyError as e:
        logger.error(f"❌ Bootstrap process failed: {str(e)}")
    finally:
        db.close()
    if not settings.protect_records:
        logger.info("Record routes are open; set PROTECT_RECORDS=true to require a bearer token")
    yield
    logger.info("Shutting down Hospital Administration API")


# Create FastAPI application
app = FastAPI(
    title="Hospital Administration API",
    description="Doctors, patients, specialties and medications with JWT authentication",
    version=__version__,
    lifespan=lifespan,
)

# Register exception handlers
register_exception_handlers(app)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Setup custom middleware
setup_middlewares(app)

# Include routers
app.include_router(auth_router, prefix="/api/auth", tags=["Authentication"])
app.include_router(doctors_router, prefix="/api/doctores", tags=["Doctors"])
app.include_router(specialties_router, prefix="/api/especialidades", tags=["Specialties"])
app.include_router(medications_router, prefix="/api/medicamentos", tags=["Medications"])
app.include_router(patients_router, prefix="/api/pacientes", tags=["Patients"])


# Root endpoint
@app.get("/")
def root():
    """
    Root endpoint for API health check.

    Returns:
        dict: Welcome message and API version
    """
    return {"message": "Welcome to the Hospital Administration API", "version": __version__}


# Health check endpoint
@app.get("/health")
@app.get("/api/health")
def health_check():
    """
    Health check endpoint for monitoring.

    Returns:
        dict: Health status information
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError as e:
        logger.error(f"Health check could not reach the database: {str(e)}")
        database = "disconnected"
    return {"status": "healthy", "database": database}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("hospital_admin.main:app", host="0.0.0.0", port=8000)
