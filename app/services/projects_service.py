"""
Portfolio API - Projects Service
Read-only project queries against the projects table
"""

from typing import Optional, Dict, Any, List, Protocol

import anyio
import structlog

from app.core.config import Settings, settings as app_settings
from app.core.exceptions import NotFoundError, QueryError, error_message
from app.core.supabase import supabase


class ProjectStore(Protocol):
    """The slice of the persistence layer this service reads through."""

    def find_many(
        self,
        table: str,
        filters: Dict[str, Any] | None = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]: ...

    def find_one(self, table: str, filters: Dict[str, Any]) -> Optional[Dict[str, Any]]: ...


class ProjectsService:
    """Service for project operations."""

    def __init__(
        self,
        store: ProjectStore,
        logger: Any = None,
        settings: Settings = app_settings,
    ):
        self.store = store
        self.logger = logger if logger is not None else structlog.get_logger()
        self.settings = settings

    @property
    def table(self) -> str:
        return self.settings.PROJECTS_TABLE

    async def _find_many(self, filters: Dict[str, Any], limit: Optional[int] = None) -> List[Dict[str, Any]]:
        try:
            return await anyio.to_thread.run_sync(lambda: self.store.find_many(
                self.table,
                filters,
                order_by=self.settings.PROJECTS_CREATED_AT_COLUMN,
                descending=True,
                limit=limit,
            ))
        except Exception as e:
            self.logger.error("projects_query_failed", table=self.table, filters=filters, error=str(e))
            raise QueryError(error_message(e), table=self.table)

    async def featured_projects(self) -> List[Dict[str, Any]]:
        """Newest featured projects, at most FEATURED_PROJECTS_LIMIT of them."""
        projects = await self._find_many(
            {"featured": True},
            limit=self.settings.FEATURED_PROJECTS_LIMIT,
        )
        self.logger.debug(
            "featured_projects_fetched",
            count=len(projects),
            ids=[p.get("id") for p in projects],
        )
        return projects

    async def list_projects(self, user_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        All projects of one user, or every featured project when no user is
        given (the public portfolio view).
        """
        filters: Dict[str, Any] = {"user_id": user_id} if user_id else {"featured": True}
        projects = await self._find_many(filters)
        self.logger.debug("projects_listed", user_id=user_id, count=len(projects))
        return projects

    async def get_project(self, project_id: str) -> Dict[str, Any]:
        """Get one project by id."""
        try:
            project = await anyio.to_thread.run_sync(
                lambda: self.store.find_one(self.table, {"id": project_id})
            )
        except Exception as e:
            self.logger.error("project_fetch_failed", project_id=project_id, error=str(e))
            raise QueryError(error_message(e), table=self.table)

        if not project:
            raise NotFoundError("Project")
        return project


projects_service = ProjectsService(supabase)


def get_projects_service() -> ProjectsService:
    """FastAPI dependency; tests override it with a fake-backed service."""
    return projects_service
