"""
Main FastAPI application entry point.
Configures the application, middleware, and includes routers.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from . import __version__
from .config import settings
from .database import Base, engine, SessionLocal
from .exceptions import register_exception_handlers
from .core.middleware import setup_middlewares
from .auth.bootstrap import bootstrap_admin_if_needed
from .auth.router import router as auth_router
from .organ_requests.router import router as organ_requests_router
from .organ_pledges.router import router as organ_pledges_router
from .organ_matches.router import router as organ_matches_router
from .medical_records.router import router as medical_records_router
from .admin.router import router as admin_router
# Models must be imported before create_all
from .organ_requests import models as _organ_request_models  # noqa: F401
from .organ_pledges import models as _organ_pledge_models  # noqa: F401
from .organ_matches import models as _organ_match_models  # noqa: F401
from .medical_records import models as _medical_record_models  # noqa: F401

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

# Create database tables if they don't exist
Base.metadata.create_all(bind=engine)

# Bootstrap admin creation
logger.info("Starting OrganLink API...")
db = SessionLocal()
try:
    bootstrap_admin_if_needed(db)
except Exception as e:
    logger.error(f"Bootstrap process failed: {str(e)}")
finally:
    db.close()

# Create FastAPI application
app = FastAPI(
    title="OrganLink API",
    description="Role-based coordination of organ requests, pledges and matches",
    version=__version__
)

# Register exception handlers
register_exception_handlers(app)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware
setup_middlewares(app)

# Include routers
app.include_router(auth_router, prefix="/api/auth", tags=["Authentication"])
app.include_router(organ_requests_router, prefix="/api/organ-requests", tags=["Organ Requests"])
app.include_router(organ_pledges_router, prefix="/api/organ-pledges", tags=["Organ Pledges"])
app.include_router(organ_matches_router, prefix="/api/organ-matches", tags=["Organ Matches"])
app.include_router(medical_records_router, prefix="/api/medical-records", tags=["Medical Records"])
app.include_router(admin_router, prefix="/api/admin", tags=["Admin"])

# Root endpoint
@app.get("/")
def root():
    """
    Root endpoint for API health check.
    
    Returns:
        dict: Welcome message and API version
    """
    return {"message": "Welcome to OrganLink API", "version": __version__}

# Health check endpoint
@app.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring.
    
    Returns:
        dict: Health status information
    """
    return {"status": "healthy", "database": "connected"}
