from typing import Annotated

from fastapi import APIRouter, Query, status

from db.models.company import Company
from schemas.commons import AdminUser, DBConnection, HandlePath, DeletedResponse
from schemas.company import (
    CompanyCreateRequest,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanySearchQuery,
    CompanyUpdateRequest,
)

router = APIRouter(
    tags=["COMPANIES"],
)


@router.post("/companies", response_model=CompanyResponse,
             status_code=status.HTTP_201_CREATED)
async def create_company(_: AdminUser, company: CompanyCreateRequest, conn: DBConnection) -> CompanyResponse:
    """회사 등록 (관리자)"""
    new_company = await Company.create(conn, **company.model_dump())
    return CompanyResponse.model_validate({"company": new_company})


@router.get("/companies", response_model=CompanyListResponse)
async def get_companies(
        conn: DBConnection, query: Annotated[CompanySearchQuery, Query()]) -> CompanyListResponse:
    """
    회사 목록 조회
    - nameLike: 이름 부분 일치 (대소문자 무시)
    - minEmployees / maxEmployees: 직원 수 범위
    """
    companies = await Company.find_all(
        conn,
        name_like=query.name_like,
        min_employees=query.min_employees,
        max_employees=query.max_employees,
    )
    return CompanyListResponse.model_validate({"companies": companies})


@router.get("/companies/{handle}", response_model=CompanyDetailResponse)
async def get_single_company(handle: HandlePath, conn: DBConnection) -> CompanyDetailResponse:
    """회사 상세 조회 (채용공고 포함)"""
    company = await Company.get(conn, handle)
    return CompanyDetailResponse.model_validate({"company": company})


@router.patch("/companies/{handle}", response_model=CompanyResponse)
async def update_company(
        _: AdminUser, handle: HandlePath, update_data: CompanyUpdateRequest,
        conn: DBConnection) -> CompanyResponse:
    """회사 정보 수정 (관리자)"""
    update_fields = update_data.model_dump(exclude_unset=True, by_alias=True)
    company = await Company.update(conn, handle, update_fields)
    return CompanyResponse.model_validate({"company": company})


@router.delete("/companies/{handle}", response_model=DeletedResponse)
async def delete_company(_: AdminUser, handle: HandlePath, conn: DBConnection) -> DeletedResponse:
    """회사 삭제 (관리자)"""
    await Company.remove(conn, handle)
    return DeletedResponse(deleted=handle)
