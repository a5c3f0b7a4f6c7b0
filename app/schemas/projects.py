"""
Portfolio API - Project Schemas
Project read models
"""

from typing import Any, Dict, List
from pydantic import BaseModel


class ProjectListResponse(BaseModel):
    """
    Projects, newest first.

    Rows are passed through as stored (id, title, featured, created_at, ...);
    the table owns their shape.
    """
    projects: List[Dict[str, Any]]


class ProjectDetailResponse(BaseModel):
    """Single project."""
    project: Dict[str, Any]
