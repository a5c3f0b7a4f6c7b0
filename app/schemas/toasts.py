"""
Portfolio API - Toast Schemas
Toast notification request and rendered payload
"""

from typing import Optional, Dict, Any
from pydantic import BaseModel, field_validator

from .common import ToastVariant


class ToastRequest(BaseModel):
    """One notification to show. Never persisted."""
    title: str
    description: Optional[str] = None
    variant: ToastVariant = ToastVariant.DEFAULT

    @field_validator("variant", mode="before")
    @classmethod
    def _coerce_variant(cls, value: Any) -> ToastVariant:
        # Unknown or missing variants fall back to the neutral style.
        if isinstance(value, ToastVariant):
            return value
        try:
            return ToastVariant(value)
        except ValueError:
            return ToastVariant.DEFAULT


class ToastPayload(BaseModel):
    """What a toast library primitive was asked to display."""
    type: str
    title: str
    description: Optional[str] = None
    style: Optional[Dict[str, str]] = None
