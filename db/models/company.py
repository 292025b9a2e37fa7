import logging
from types import MappingProxyType
from typing import Any, Mapping

import asyncpg

from utils.errors import bad_request, not_found
from utils.query import build_company_filter_clause, build_set_clause

logger = logging.getLogger(__name__)

# API 필드명 -> companies 컬럼 (name, description 은 그대로)
COMPANY_FIELD_MAP: Mapping[str, str] = MappingProxyType({
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
})

COMPANY_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'


class Company:
    """companies 테이블 접근"""

    @staticmethod
    async def create(
        conn: asyncpg.Connection,
        *,
        handle: str,
        name: str,
        description: str | None = None,
        num_employees: int | None = None,
        logo_url: str | None = None,
    ) -> dict[str, Any]:
        duplicate = await conn.fetchrow(
            "SELECT handle FROM companies WHERE handle = $1",
            handle,
        )
        if duplicate:
            raise bad_request(f"Duplicate company: {handle}")

        row = await conn.fetchrow(
            f"""
            INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {COMPANY_COLUMNS}
            """,
            handle, name, description, num_employees, logo_url,
        )
        logger.debug("Created company handle=%s", handle)
        return dict(row)

    @staticmethod
    async def find_all(
        conn: asyncpg.Connection,
        name_like: str | None = None,
        min_employees: int | None = None,
        max_employees: int | None = None,
    ) -> list[dict[str, Any]]:
        """회사 목록 (name 순)"""
        if min_employees is not None and max_employees is not None and min_employees > max_employees:
            raise bad_request("minEmployees cannot be greater than maxEmployees")

        filters = build_company_filter_clause(name_like, min_employees, max_employees)
        rows = await conn.fetch(
            f"""
            SELECT {COMPANY_COLUMNS}
            FROM companies
            {filters.where()}
            ORDER BY name
            """,
            *filters.values,
        )
        return [dict(row) for row in rows]

    @staticmethod
    async def get(conn: asyncpg.Connection, handle: str) -> dict[str, Any]:
        """회사 상세 (채용공고 목록 포함)"""
        row = await conn.fetchrow(
            f"""
            SELECT {COMPANY_COLUMNS}
            FROM companies
            WHERE handle = $1
            """,
            handle,
        )
        if row is None:
            raise not_found(f"No company: {handle}")

        company = dict(row)
        jobs = await conn.fetch(
            """
            SELECT id, title, salary, equity
            FROM jobs
            WHERE company_handle = $1
            ORDER BY id
            """,
            handle,
        )
        company["jobs"] = [dict(job) for job in jobs]
        return company

    @staticmethod
    async def update(conn: asyncpg.Connection, handle: str, data: Mapping[str, Any]) -> dict[str, Any]:
        """
        부분 수정. data 에 들어있는 필드만 변경한다.

        data 예시: {"name": ..., "numEmployees": ..., "logoUrl": ...}
        """
        if "handle" in data:
            raise bad_request("Company handle can not be changed")

        set_clause = build_set_clause(data, COMPANY_FIELD_MAP)
        handle_idx = set_clause.next_index

        row = await conn.fetchrow(
            f"""
            UPDATE companies
            SET {set_clause.text}
            WHERE handle = ${handle_idx}
            RETURNING {COMPANY_COLUMNS}
            """,
            *set_clause.values, handle,
        )
        if row is None:
            raise not_found(f"No company: {handle}")

        logger.debug("Updated company handle=%s fields=%s", handle, list(data))
        return dict(row)

    @staticmethod
    async def remove(conn: asyncpg.Connection, handle: str) -> None:
        row = await conn.fetchrow(
            "DELETE FROM companies WHERE handle = $1 RETURNING handle",
            handle,
        )
        if row is None:
            raise not_found(f"No company: {handle}")
        logger.debug("Deleted company handle=%s", handle)
