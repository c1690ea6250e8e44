# app/main.py - Application entry point: middleware, error handlers and routers
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import traceback
import time

from app.core.config import settings
from app.core.db import get_engine
from app.core.errors import register_exception_handlers
from app.models.base import Base
from app.schemas.common import ErrorResponse
from app.api.routers import analytics, students, system
from app.api.routers.ledger import incomes_router, donations_router, expenses_router
from app.api.routers.staff import employees_router, admins_router


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"Starting {settings.API_TITLE}...")
    logger.info(f"Environment: {settings.ENV}")
    logger.info(f"Database URL: {settings.DATABASE_URL.split('@')[1] if '@' in settings.DATABASE_URL else 'local'}")

    engine = get_engine()

    # Create tables if they don't exist (for development); migrations own the schema elsewhere
    if settings.is_development:
        logger.info("Creating database tables...")
        try:
            Base.metadata.create_all(bind=engine)
            logger.info("Database tables created successfully")
        except Exception as e:
            logger.error(f"Error creating tables: {e}")

    yield

    logger.info(f"Shutting down {settings.API_TITLE}...")


app = FastAPI(
    title=settings.API_TITLE,
    description="Back office for a madrasa: students, staff, ledgers and financial reports",
    version=settings.API_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    lifespan=lifespan,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)


# Request logging middleware - BEFORE CORS
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and duration"""
    start_time = time.time()
    logger.info(f"⬇️  Incoming {request.method} {request.url.path}")

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"❌ Error processing {request.method} {request.url.path}: {str(e)}")
        logger.error(traceback.format_exc())
        raise

    process_time = time.time() - start_time
    logger.info(f"⬆️  Response {response.status_code} for {request.method} {request.url.path} ({process_time:.3f}s)")
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Authorization",
        "Accept",
        "Origin",
        "If-Match",
        "X-Requested-With",
    ],
    max_age=3600,
)

register_exception_handlers(app)

# Include routers
logger.info("Registering API routers...")
prefix = settings.API_PREFIX
app.include_router(analytics.router, prefix=f"{prefix}/analytics", tags=["Analytics"])
app.include_router(students.router, prefix=f"{prefix}/students", tags=["Students"])
app.include_router(incomes_router, prefix=f"{prefix}/incomes", tags=["Incomes"])
app.include_router(donations_router, prefix=f"{prefix}/donations", tags=["Donations"])
app.include_router(expenses_router, prefix=f"{prefix}/expenses", tags=["Expenses"])
app.include_router(employees_router, prefix=f"{prefix}/employees", tags=["Employees"])
app.include_router(admins_router, prefix=f"{prefix}/admins", tags=["Admins"])
app.include_router(system.router, prefix=f"{prefix}/system", tags=["System"])
logger.info("All routers registered successfully")


@app.get("/")
async def root():
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "docs_url": "/docs" if settings.is_development else "Documentation disabled in production",
    }
