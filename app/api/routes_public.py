"""
Public API routes - service info and health check
"""

from datetime import datetime

from fastapi import APIRouter

from app.core.config import settings

router = APIRouter()

RESOURCES = ("guests", "grupos", "conceptos", "expenses")

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "OK",
        "timestamp": datetime.utcnow().isoformat(),
        "service": settings.SERVICE_NAME
    }

@router.get("/")
async def root():
    """Service info with the list of available endpoints"""
    endpoints = {}
    for resource in RESOURCES:
        endpoints[f"GET /{resource}"] = f"List {resource}"
        endpoints[f"GET /{resource}/:id"] = f"Get one of {resource} by ID"
        endpoints[f"POST /{resource}"] = f"Create one of {resource}"
        endpoints[f"PUT /{resource}/:id"] = f"Update one of {resource} by ID"
        endpoints[f"DELETE /{resource}/:id"] = f"Delete one of {resource} by ID"

    return {
        "message": settings.SERVICE_NAME,
        "version": settings.VERSION,
        "endpoints": endpoints
    }
