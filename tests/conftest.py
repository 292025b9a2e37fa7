from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from main import app
from utils.auth import create_access_token
from utils.database import get_connection


class FakeConnection:
    """
    asyncpg.Connection 대용.
    results 에 쌓아둔 row 목록을 호출 순서대로 돌려주고, 실행된 (query, args) 를 기록한다.
    """

    def __init__(self):
        self.results: list[list[dict]] = []
        self.calls: list[tuple[str, tuple]] = []
        self.error: Exception | None = None

    def _next(self, query: str, args: tuple) -> list[dict]:
        self.calls.append((query, args))
        if self.error is not None:
            raise self.error
        return self.results.pop(0) if self.results else []

    async def fetch(self, query: str, *args) -> list[dict]:
        return self._next(query, args)

    async def fetchrow(self, query: str, *args) -> dict | None:
        rows = self._next(query, args)
        return rows[0] if rows else None


@pytest.fixture
def fake_conn():
    return FakeConnection()


@pytest.fixture
def client(fake_conn):
    """테스트용 FastAPI 클라이언트 (DB 연결은 fake_conn 으로 대체)"""
    app.dependency_overrides[get_connection] = lambda: fake_conn
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_access_token(data={"sub": "u3", "is_admin": True})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token(data={"sub": "u1", "is_admin": False})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def job_rows():
    return [
        {"id": 1, "title": "j1", "salary": 100000, "equity": Decimal("0"), "companyHandle": "c1"},
        {"id": 2, "title": "j2", "salary": 200000, "equity": Decimal("0.02"), "companyHandle": "c2"},
        {"id": 3, "title": "j3", "salary": 300000, "equity": Decimal("0.03"), "companyHandle": "c3"},
    ]


@pytest.fixture
def company_rows():
    return [
        {"handle": "c1", "name": "C1", "description": "Desc1", "numEmployees": 1, "logoUrl": "http://c1.img"},
        {"handle": "c2", "name": "C2", "description": "Desc2", "numEmployees": 2, "logoUrl": "http://c2.img"},
        {"handle": "c3", "name": "C3", "description": "Desc3", "numEmployees": 3, "logoUrl": None},
    ]
