"""
Guest Management API - FastAPI Backend
Main application entry point
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.core.config import settings
from app.core.db import init_db, log_db_path_on_startup
from app.api import routes_conceptos, routes_expenses, routes_grupos, routes_guests, routes_public
from app.api.error_handlers import register_error_handlers
from app.utils.responses import error_response

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Create database tables and default rows
    init_db()
    log_db_path_on_startup()
    logger.info("Database initialized successfully")
    yield
    logger.info("Application shutdown")

# Create FastAPI application
app = FastAPI(
    title=settings.SERVICE_NAME,
    description="REST API for event guests, expense categories and expenses",
    version=settings.VERSION,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and duration"""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response

register_error_handlers(app)

# Include routers
app.include_router(routes_public.router, tags=["public"])
app.include_router(routes_guests.router, prefix="/guests", tags=["guests"])
app.include_router(routes_grupos.router, prefix="/grupos", tags=["grupos"])
app.include_router(routes_conceptos.router, prefix="/conceptos", tags=["conceptos"])
app.include_router(routes_expenses.router, prefix="/expenses", tags=["expenses"])

@app.exception_handler(404)
async def route_not_found(request: Request, exc):
    """Unknown routes answer with the error envelope"""
    return error_response(
        error="Route not found",
        message=f"The requested endpoint {request.method} {request.url.path} does not exist",
        status_code=404
    )

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development
    )
