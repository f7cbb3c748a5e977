"""Pytest configuration and fixtures."""

import os
import time
from collections import defaultdict
from collections.abc import Callable, Generator
from types import SimpleNamespace
from typing import Any
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from jose import jwt

# Set test environment variables before importing application modules
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SECRET_KEY", "test-secret-key")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-for-unit-tests")

TEST_JWT_SECRET = os.environ["JWT_SECRET"]
USER_A = "550e8400-e29b-41d4-a716-446655440000"
USER_B = "660e8400-e29b-41d4-a716-446655440000"


def create_test_token(
    sub: str = USER_A,
    email: str | None = "test@example.com",
    exp_offset: int = 3600,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """Create an HS256 bearer token for tests."""
    now = int(time.time())
    payload = {
        "sub": sub,
        "email": email,
        "role": "authenticated",
        "exp": now + exp_offset,
        "iat": now,
    }
    return jwt.encode(payload, secret, algorithm="HS256")


class FakeQuery:
    """Just enough of the PostgREST query builder for the services."""

    def __init__(self, table: "FakeTable", op: str, payload: dict[str, Any] | None = None) -> None:
        self.table = table
        self.op = op
        self.payload = payload
        self.filters: list[tuple[str, Any]] = []
        self._limit: int | None = None
        self._order: str | None = None

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._order = column
        return self

    def limit(self, count: int) -> "FakeQuery":
        self._limit = count
        return self

    def _matches(self, row: dict[str, Any]) -> bool:
        return all(str(row.get(column)) == str(value) for column, value in self.filters)

    def execute(self) -> SimpleNamespace:
        rows = self.table.rows
        if self.op == "insert":
            row = {"id": str(uuid4()), **(self.payload or {})}
            rows.append(row)
            return SimpleNamespace(data=[dict(row)])

        matched = [row for row in rows if self._matches(row)]
        if self.op == "update":
            for row in matched:
                row.update(self.payload or {})
        elif self.op == "delete":
            self.table.rows = [row for row in rows if not self._matches(row)]
        else:
            if self._order:
                matched = sorted(matched, key=lambda row: str(row.get(self._order)))
            if self._limit is not None:
                matched = matched[: self._limit]
        return SimpleNamespace(data=[dict(row) for row in matched])


class FakeTable:
    """In-memory table."""

    def __init__(self) -> None:
        self.rows: list[dict[str, Any]] = []

    def select(self, *columns: str) -> FakeQuery:
        return FakeQuery(self, "select")

    def insert(self, payload: dict[str, Any]) -> FakeQuery:
        return FakeQuery(self, "insert", payload)

    def update(self, payload: dict[str, Any]) -> FakeQuery:
        return FakeQuery(self, "update", payload)

    def delete(self) -> FakeQuery:
        return FakeQuery(self, "delete")


class FakeSupabaseClient:
    """In-memory stand-in for the Supabase client."""

    def __init__(self) -> None:
        self.tables: dict[str, FakeTable] = defaultdict(FakeTable)

    def table(self, name: str) -> FakeTable:
        return self.tables[name]


@pytest.fixture(scope="session")
def test_settings() -> Generator[Any, None, None]:
    """Provide test settings with cleared cache.

    Yields:
        Settings: Test configuration settings.
    """
    from wishlist_api.core.config import get_settings

    get_settings.cache_clear()
    settings = get_settings()
    yield settings
    get_settings.cache_clear()


@pytest.fixture
def fake_supabase() -> FakeSupabaseClient:
    """Provide an empty in-memory database."""
    return FakeSupabaseClient()


@pytest.fixture
def client(fake_supabase: FakeSupabaseClient) -> Generator[TestClient, None, None]:
    """Provide a test client whose services use the in-memory database.

    Args:
        fake_supabase: In-memory database fixture.

    Yields:
        TestClient: FastAPI test client.
    """
    from wishlist_api.api.deps import get_profile_service, get_wishlist_service
    from wishlist_api.main import app
    from wishlist_api.services.profile_service import ProfileService
    from wishlist_api.services.wishlist_service import WishlistService

    app.dependency_overrides[get_profile_service] = lambda: ProfileService(client=fake_supabase)
    app.dependency_overrides[get_wishlist_service] = lambda: WishlistService(client=fake_supabase)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Callable[[str], dict[str, str]]:
    """Build an Authorization header for a given user id."""

    def _headers(sub: str = USER_A) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_test_token(sub=sub)}"}

    return _headers
