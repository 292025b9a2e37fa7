import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping

import asyncpg

from utils.errors import bad_request, not_found
from utils.query import build_job_filter_clause, build_set_clause

logger = logging.getLogger(__name__)

# API 필드명 -> jobs 컬럼
JOB_FIELD_MAP: Mapping[str, str] = MappingProxyType({
    "companyHandle": "company_handle",
})

IMMUTABLE_FIELDS = frozenset(["id", "companyHandle", "company_handle"])

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'


class Job:
    """jobs 테이블 접근"""

    @staticmethod
    async def create(
        conn: asyncpg.Connection,
        *,
        title: str,
        company_handle: str,
        salary: int | None = None,
        equity: Decimal | None = None,
    ) -> dict[str, Any]:
        """
        채용공고 생성.

        같은 회사에 같은 title 이 이미 있으면 INSERT 전에 BAD_REQUEST.
        """
        duplicate = await conn.fetchrow(
            """
            SELECT id
            FROM jobs
            WHERE company_handle = $1 AND title = $2
            """,
            company_handle, title,
        )
        if duplicate:
            raise bad_request(f"Duplicate job: {company_handle}, {title}")

        row = await conn.fetchrow(
            f"""
            INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_COLUMNS}
            """,
            title, salary, equity, company_handle,
        )
        logger.debug("Created job id=%s", row["id"])
        return dict(row)

    @staticmethod
    async def find_all(
        conn: asyncpg.Connection,
        title_like: str | None = None,
        min_salary: int | None = None,
        has_equity: bool | None = None,
    ) -> list[dict[str, Any]]:
        """채용공고 목록 (title 순)"""
        filters = build_job_filter_clause(title_like, min_salary, has_equity)
        rows = await conn.fetch(
            f"""
            SELECT {JOB_COLUMNS}
            FROM jobs
            {filters.where()}
            ORDER BY title
            """,
            *filters.values,
        )
        return [dict(row) for row in rows]

    @staticmethod
    async def get(conn: asyncpg.Connection, job_id: int) -> dict[str, Any]:
        """채용공고 상세 (회사 정보 포함)"""
        row = await conn.fetchrow(
            """
            SELECT id, title, salary, equity, company_handle
            FROM jobs
            WHERE id = $1
            """,
            job_id,
        )
        if row is None:
            raise not_found(f"No job: {job_id}")

        job = dict(row)
        company = await conn.fetchrow(
            """
            SELECT handle,
                   name,
                   description,
                   num_employees AS "numEmployees",
                   logo_url AS "logoUrl"
            FROM companies
            WHERE handle = $1
            """,
            job.pop("company_handle"),
        )
        job["company"] = dict(company) if company else None
        return job

    @staticmethod
    async def update(conn: asyncpg.Connection, job_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
        """
        부분 수정. data 에 들어있는 필드만 변경한다.

        Raises:
            AppError(BAD_REQUEST): data 가 비었거나 id/companyHandle 을 바꾸려는 경우
            AppError(NOT_FOUND): 해당 id 가 없는 경우
        """
        if data.keys() & IMMUTABLE_FIELDS:
            raise bad_request("Job id and companyHandle can not be changed")

        set_clause = build_set_clause(data, JOB_FIELD_MAP)
        id_idx = set_clause.next_index

        row = await conn.fetchrow(
            f"""
            UPDATE jobs
            SET {set_clause.text}
            WHERE id = ${id_idx}
            RETURNING {JOB_COLUMNS}
            """,
            *set_clause.values, job_id,
        )
        if row is None:
            raise not_found(f"No job: {job_id}")

        logger.debug("Updated job id=%s fields=%s", job_id, list(data))
        return dict(row)

    @staticmethod
    async def remove(conn: asyncpg.Connection, job_id: int) -> None:
        row = await conn.fetchrow(
            "DELETE FROM jobs WHERE id = $1 RETURNING id",
            job_id,
        )
        if row is None:
            raise not_found(f"No job: {job_id}")
        logger.debug("Deleted job id=%s", job_id)
