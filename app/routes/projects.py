"""
Portfolio API - Projects Routes
Public project read endpoints
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.services.projects_service import ProjectsService, get_projects_service
from app.schemas import (
    ErrorResponse,
    ProjectListResponse,
    ProjectDetailResponse,
)

router = APIRouter(tags=["Projects"])

ERROR_RESPONSES = {500: {"model": ErrorResponse}}


@router.get(
    "/featured-projects",
    response_model=ProjectListResponse,
    responses=ERROR_RESPONSES,
)
async def featured_projects(
    service: ProjectsService = Depends(get_projects_service)
):
    """
    Newest featured projects for the landing page.

    At most six, ordered by creation date, newest first.
    """
    projects = await service.featured_projects()
    return {"projects": projects}


@router.get(
    "/projects",
    response_model=ProjectListResponse,
    responses=ERROR_RESPONSES,
)
async def list_projects(
    user_id: Optional[str] = Query(None, alias="userId", description="Only this user's projects"),
    service: ProjectsService = Depends(get_projects_service)
):
    """
    List projects, newest first.

    Without userId only featured projects are returned.
    """
    projects = await service.list_projects(user_id=user_id)
    return {"projects": projects}


@router.get(
    "/projects/{project_id}",
    response_model=ProjectDetailResponse,
    responses={404: {"model": ErrorResponse}, **ERROR_RESPONSES},
)
async def get_project(
    project_id: str,
    service: ProjectsService = Depends(get_projects_service)
):
    project = await service.get_project(project_id)
    return {"project": project}
