"""
Portfolio API - Common Schemas
Base models and enums shared across the application
"""

from pydantic import BaseModel
from enum import Enum


# ==================== Enums ====================

class ToastVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"
    SUCCESS = "success"


# ==================== Base Response Models ====================

class ErrorResponse(BaseModel):
    """Error response model."""
    error: str
