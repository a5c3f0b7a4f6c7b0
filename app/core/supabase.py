from typing import Optional, Dict, Any, List
from supabase import create_client, Client
from functools import lru_cache
import logging

from app.core.config import Settings, settings as app_settings
from app.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class SupabaseClient:
    def __init__(self, settings: Settings = app_settings):
        self._settings = settings
        self._anon_client: Optional[Client] = None
        self._service_client: Optional[Client] = None

    def _require(self, name: str) -> str:
        value = (getattr(self._settings, name) or "").strip()
        if not value:
            raise ConfigurationError(name)
        return value

    @property
    def anon(self) -> Client:
        if self._anon_client is None:
            self._anon_client = create_client(
                self._require("SUPABASE_URL"),
                self._require("SUPABASE_ANON_KEY"),
            )
        return self._anon_client

    @property
    def service(self) -> Client:
        if self._service_client is None:
            self._service_client = create_client(
                self._require("SUPABASE_URL"),
                self._require("SUPABASE_SERVICE_ROLE_KEY"),
            )
        return self._service_client

    def find_many(
        self,
        table: str,
        filters: Dict[str, Any] | None = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
        use_service_role: bool = False,
    ) -> List[Dict[str, Any]]:
        """
        Select full rows from `table` matching every equality filter.

        Blocking; call it through anyio.to_thread from async code.
        """
        client = self.service if use_service_role else self.anon
        try:
            query = client.table(table).select("*")
            for column, value in (filters or {}).items():
                query = query.eq(column, value)
            if order_by:
                query = query.order(order_by, desc=descending)
            if limit is not None:
                query = query.limit(limit)
            res = query.execute()
            return list(getattr(res, "data", None) or [])
        except Exception as e:
            logger.error(f"Query error on {table}: {e}")
            raise

    def find_one(
        self,
        table: str,
        filters: Dict[str, Any],
        use_service_role: bool = False,
    ) -> Optional[Dict[str, Any]]:
        rows = self.find_many(table, filters, limit=1, use_service_role=use_service_role)
        return rows[0] if rows else None


@lru_cache()
def get_supabase() -> SupabaseClient:
    return SupabaseClient()


supabase = get_supabase()
