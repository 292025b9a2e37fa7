"""테스트 데이터 생성 스크립트

사용법:
    python scripts/seed.py

db/schema.sql 을 적용한 뒤 샘플 회사/채용공고를 넣고,
관리자 API 호출용 access token 을 출력한다.
"""
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

import asyncpg

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import settings
from db.models.company import Company
from db.models.job import Job
from utils.auth import create_access_token
from utils.errors import AppError

SCHEMA_FILE = Path(__file__).parent.parent / "db" / "schema.sql"

TEST_COMPANIES = [
    {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "num_employees": 1,
        "logo_url": "http://c1.img",
    },
    {
        "handle": "c2",
        "name": "C2",
        "description": "Desc2",
        "num_employees": 2,
        "logo_url": "http://c2.img",
    },
    {
        "handle": "c3",
        "name": "C3",
        "description": "Desc3",
        "num_employees": 3,
        "logo_url": None,
    },
]

TEST_JOBS = [
    {"title": "j1", "salary": 100000, "equity": Decimal("0"), "company_handle": "c1"},
    {"title": "j2", "salary": 200000, "equity": Decimal("0.02"), "company_handle": "c2"},
    {"title": "j3", "salary": 300000, "equity": Decimal("0.03"), "company_handle": "c3"},
]


async def seed():
    """모든 테스트 데이터 생성"""
    conn = await asyncpg.connect(dsn=settings.database_url)
    try:
        await conn.execute(SCHEMA_FILE.read_text(encoding="utf-8"))

        for company in TEST_COMPANIES:
            try:
                await Company.create(conn, **company)
            except AppError as e:
                print(f"   - skip: {e.detail}")

        for job in TEST_JOBS:
            try:
                await Job.create(conn, **job)
            except AppError as e:
                print(f"   - skip: {e.detail}")
    finally:
        await conn.close()

    print("✅ 테스트 데이터 생성 완료!")
    print(f"\n📁 DB: {settings.database_url}")
    print("\n🔑 관리자 토큰:")
    print(f"   {create_access_token({'sub': 'admin', 'is_admin': True})}")


if __name__ == "__main__":
    asyncio.run(seed())
