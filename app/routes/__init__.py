"""
Portfolio API - Routes Module
All API endpoints organized by resource
"""

from fastapi import APIRouter

from app.routes.projects import router as projects_router

# Main router
api_router = APIRouter()

api_router.include_router(projects_router)

__all__ = ["api_router"]
