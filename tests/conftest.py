from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from structlog.testing import CapturingLogger

from app.core.config import Settings
from app.main import app
from app.services.projects_service import ProjectsService, get_projects_service

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeStore:
    """In-memory stand-in for SupabaseClient."""

    def __init__(self, rows=None, error=None):
        self.rows = list(rows or [])
        self.error = error
        self.calls = []

    def find_many(self, table, filters=None, order_by=None, descending=False, limit=None):
        self.calls.append(dict(table=table, filters=filters, order_by=order_by, descending=descending, limit=limit))
        if self.error is not None:
            raise self.error
        rows = [r for r in self.rows if all(r.get(k) == v for k, v in (filters or {}).items())]
        if order_by:
            rows.sort(key=lambda r: r[order_by], reverse=descending)
        if limit is not None:
            rows = rows[:limit]
        return [dict(r) for r in rows]

    def find_one(self, table, filters):
        rows = self.find_many(table, filters, limit=1)
        return rows[0] if rows else None


def make_project(i, featured=True, user_id="user-1"):
    return {
        "id": f"project-{i}",
        "title": f"Project {i}",
        "description": "",
        "technologies": ["python"],
        "featured": featured,
        "user_id": user_id,
        "created_at": (EPOCH + timedelta(days=i)).isoformat(),
    }


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(SUPABASE_URL="", SUPABASE_ANON_KEY="")


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def capture():
    return CapturingLogger()


@pytest.fixture
def service(store, capture, settings):
    return ProjectsService(store, logger=capture, settings=settings)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_projects_service] = lambda: service
    try:
        with TestClient(app) as instance:
            yield instance
    finally:
        app.dependency_overrides.clear()
