"""Shared test fixtures.

Provides a ``test_client`` for FastAPI, chainable Supabase mocks, and an
in-memory ``FakeSupabase`` that executes the small subset of the PostgREST
query builder the directory uses (select / eq / order / limit / insert /
update / delete).
"""

import os

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")

import random
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock, patch
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from supabase import PostgrestAPIError

ADMIN_ID = "5b0f4a8e-2c3d-4e5f-8a9b-0c1d2e3f4a5b"


# ---------------------------------------------------------------------------
# In-memory Supabase fake
# ---------------------------------------------------------------------------

class _FakeQuery:
    """One fluent query against a single in-memory table."""

    def __init__(self, store: "FakeSupabase", name: str) -> None:
        self._store = store
        self._rows: list[dict[str, Any]] = store.tables.setdefault(name, [])
        self._op = "select"
        self._payload: Any = None
        self._filters: list[tuple[str, Any]] = []
        self._order: tuple[str, bool] | None = None
        self._limit: int | None = None

    def select(self, *_columns: str, **_kwargs: Any) -> "_FakeQuery":
        return self

    def insert(self, payload: Any) -> "_FakeQuery":
        self._op, self._payload = "insert", payload
        return self

    def update(self, payload: dict[str, Any]) -> "_FakeQuery":
        self._op, self._payload = "update", payload
        return self

    def delete(self) -> "_FakeQuery":
        self._op = "delete"
        return self

    def eq(self, column: str, value: Any) -> "_FakeQuery":
        self._filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "_FakeQuery":
        self._order = (column, desc)
        return self

    def limit(self, size: int) -> "_FakeQuery":
        self._limit = size
        return self

    def _matches(self) -> list[dict[str, Any]]:
        return [
            row for row in self._rows
            if all(row.get(col) == val for col, val in self._filters)
        ]

    def execute(self) -> MagicMock:
        self._store.calls.append(self._op)
        if self._store.fail_with is not None:
            raise self._store.fail_with

        if self._op == "insert":
            payloads = self._payload if isinstance(self._payload, list) else [self._payload]
            created = []
            for payload in payloads:
                for col in self._store.unique.get("*", ()):
                    if any(r.get(col) == payload.get(col) for r in self._rows):
                        raise PostgrestAPIError({
                            "code": "23505",
                            "message": f"duplicate key value violates unique constraint on {col}",
                        })
                row = {"id": str(uuid4()), "approved_at": None, **payload}
                self._rows.append(row)
                created.append(dict(row))
            return MagicMock(data=created)

        matched = self._matches()

        if self._op == "update":
            for row in matched:
                row.update(self._payload)
            return MagicMock(data=[dict(r) for r in matched])

        if self._op == "delete":
            for row in matched:
                self._rows.remove(row)
            return MagicMock(data=[dict(r) for r in matched])

        if self._order is not None:
            column, desc = self._order
            matched = sorted(matched, key=lambda r: r.get(column) or "", reverse=desc)
        if self._limit is not None:
            matched = matched[: self._limit]
        return MagicMock(data=[dict(r) for r in matched])


class FakeSupabase:
    """Dict-of-lists stand-in for ``supabase.Client``."""

    def __init__(self) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.unique: dict[str, tuple[str, ...]] = {"*": ("handle",)}
        self.calls: list[str] = []
        self.fail_with: Exception | None = None

    def table(self, name: str) -> _FakeQuery:
        return _FakeQuery(self, name)


# ---------------------------------------------------------------------------
# Mock helpers
# ---------------------------------------------------------------------------

def chainable_table_mock() -> MagicMock:
    """Return a mock that supports fluent chaining."""
    m = MagicMock()
    for method in (
        "select", "insert", "update", "delete", "eq", "order", "limit",
    ):
        getattr(m, method).return_value = m
    return m


def make_profile_row(**overrides: Any) -> dict[str, Any]:
    """Return a realistic ``profiles_ig_directory`` row."""
    row: dict[str, Any] = {
        "id": str(uuid4()),
        "handle": "photography_lover",
        "profile_image": "https://images.unsplash.com/photo-1.jpg",
        "bio": "Capturing life's beautiful moments",
        "instagram_url": "https://instagram.com/photography_lover",
        "email": None,
        "status": "pending",
        "submitted_at": "2026-10-01T12:00:00+00:00",
        "approved_at": None,
    }
    row.update(overrides)
    return row


def make_admin_row(**overrides: Any) -> dict[str, Any]:
    """Return a realistic ``admin_users_ig_directory`` row."""
    row: dict[str, Any] = {
        "id": ADMIN_ID,
        "username": "admin",
        "email": "admin@example.com",
        "password_hash": "admin123",
        "is_active": True,
        "role": "admin",
    }
    row.update(overrides)
    return row


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def fake_supabase() -> FakeSupabase:
    """Empty in-memory Supabase with the default admin account."""
    fake = FakeSupabase()
    fake.tables["admin_users_ig_directory"] = [make_admin_row()]
    return fake


@pytest.fixture()
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def session_store() -> Generator[Any, None, None]:
    """Install a fresh process-wide session store."""
    import app.services.sessions as sessions_mod

    store = sessions_mod.SessionStore()
    previous = sessions_mod._store
    sessions_mod._store = store
    yield store
    sessions_mod._store = previous


@pytest.fixture()
def test_client() -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient (scheduler not started)."""
    from app.main import app

    with patch("app.main.start_scheduler"), patch("app.main.shutdown_scheduler"):
        with TestClient(app) as client:
            yield client


@pytest.fixture()
def api_client(
    fake_supabase: FakeSupabase,
    seeded_rng: random.Random,
    session_store: Any,
    test_client: TestClient,
) -> Generator[TestClient, None, None]:
    """TestClient whose services run against ``fake_supabase`` and the mock lookup."""
    from app.services.instagram import MockProfileLookup

    with patch("app.routers.deps.get_supabase", return_value=fake_supabase), patch(
        "app.routers.deps.get_profile_lookup",
        return_value=MockProfileLookup(seeded_rng),
    ):
        yield test_client
