"""
Portfolio API - Services Module
Business logic layer
"""

from app.services.projects_service import ProjectsService, projects_service, get_projects_service
from app.services.toast_service import (
    Toaster,
    LogToaster,
    ToastQueue,
    ToastService,
    ToastHandle,
    toast_service,
    toast,
    use_toast,
)

__all__ = [
    "ProjectsService",
    "projects_service",
    "get_projects_service",
    "Toaster",
    "LogToaster",
    "ToastQueue",
    "ToastService",
    "ToastHandle",
    "toast_service",
    "toast",
    "use_toast",
]
