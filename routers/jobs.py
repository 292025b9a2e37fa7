from typing import Annotated

from fastapi import APIRouter, Query, status

from db.models.job import Job
from schemas.commons import AdminUser, DBConnection, DeletedResponse, JobIdPath
from schemas.job import (
    JobCreateRequest,
    JobDetailResponse,
    JobListResponse,
    JobResponse,
    JobSearchQuery,
    JobUpdateRequest,
)


router = APIRouter(
    tags=["JOBS"],
)


@router.post("/jobs", response_model=JobResponse,
             status_code=status.HTTP_201_CREATED)
async def create_job(_: AdminUser, job: JobCreateRequest, conn: DBConnection) -> JobResponse:
    """채용공고 생성 (관리자)"""
    new_job = await Job.create(conn, **job.model_dump())
    return JobResponse.model_validate({"job": new_job})


@router.get("/jobs", response_model=JobListResponse)
async def get_jobs(conn: DBConnection, query: Annotated[JobSearchQuery, Query()]) -> JobListResponse:
    """
    채용공고 목록 조회
    - titleLike: 제목 부분 일치 (대소문자 무시)
    - minSalary: 최소 연봉
    - hasEquity: true 면 지분이 있는 공고만
    """
    jobs = await Job.find_all(
        conn,
        title_like=query.title_like,
        min_salary=query.min_salary,
        has_equity=query.has_equity,
    )
    return JobListResponse.model_validate({"jobs": jobs})


@router.get("/jobs/{job_id}", response_model=JobDetailResponse)
async def get_single_job(job_id: JobIdPath, conn: DBConnection) -> JobDetailResponse:
    """채용공고 상세 조회"""
    job = await Job.get(conn, job_id)
    return JobDetailResponse.model_validate({"job": job})


@router.patch("/jobs/{job_id}", response_model=JobResponse)
async def update_job(
        _: AdminUser, job_id: JobIdPath, update_data: JobUpdateRequest, conn: DBConnection) -> JobResponse:
    """채용공고 수정 (관리자)"""
    update_fields = update_data.model_dump(exclude_unset=True, by_alias=True)
    job = await Job.update(conn, job_id, update_fields)
    return JobResponse.model_validate({"job": job})


@router.delete("/jobs/{job_id}", response_model=DeletedResponse)
async def delete_job(_: AdminUser, job_id: JobIdPath, conn: DBConnection) -> DeletedResponse:
    """채용공고 삭제 (관리자)"""
    await Job.remove(conn, job_id)
    return DeletedResponse(deleted=str(job_id))
