"""
API v1 Router - Aggregates all v1 endpoints.
Base Path: /api/v1
"""

from fastapi import APIRouter

from app.api.v1 import collections, exports, health

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(collections.router, prefix="/collections", tags=["collections"])
api_router.include_router(exports.router, prefix="/exports", tags=["exports"])
