"""
Portfolio API - Core Module
"""

from app.core.config import settings, get_settings, Settings
from app.core.supabase import supabase, get_supabase, SupabaseClient
from app.core.logging import configure_logging
from app.core.exceptions import (
    PortfolioException,
    NotFoundError,
    QueryError,
    ConfigurationError,
    error_message,
    http_exception_handler,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    "Settings",

    # Supabase
    "supabase",
    "get_supabase",
    "SupabaseClient",

    # Logging
    "configure_logging",

    # Exceptions
    "PortfolioException",
    "NotFoundError",
    "QueryError",
    "ConfigurationError",
    "error_message",
    "http_exception_handler",
]
