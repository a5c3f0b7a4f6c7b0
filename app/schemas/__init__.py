"""
Portfolio API - Schemas Package
Centralized exports for all Pydantic schemas
"""

# Common (Enums and Base Models)
from .common import (
    ToastVariant,
    ErrorResponse,
)

# Projects
from .projects import (
    ProjectListResponse,
    ProjectDetailResponse,
)

# Toasts
from .toasts import (
    ToastRequest,
    ToastPayload,
)

__all__ = [
    # Common
    "ToastVariant",
    "ErrorResponse",

    # Projects
    "ProjectListResponse",
    "ProjectDetailResponse",

    # Toasts
    "ToastRequest",
    "ToastPayload",
]
