from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.commons import CompanyHandle, Equity, Name, Salary, SearchText


class JobBase(BaseModel):
    """채용공고 응답 기본 스키마 (DB 값을 그대로 내보내므로 입력 제약은 걸지 않음)"""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    salary: int | None = None
    equity: Decimal | None = None


class Job(JobBase):
    id: int
    company_handle: str = Field(alias="companyHandle")


class JobCompany(BaseModel):
    """채용공고 상세에 포함되는 회사 정보"""
    model_config = ConfigDict(populate_by_name=True)

    handle: str
    name: str
    description: str | None = None
    num_employees: int | None = Field(default=None, alias="numEmployees")
    logo_url: str | None = Field(default=None, alias="logoUrl")


class JobDetail(JobBase):
    id: int
    company: JobCompany | None = None


class JobCreateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    title: Name
    salary: Salary | None = None
    equity: Equity | None = None
    company_handle: CompanyHandle = Field(alias="companyHandle")


class JobUpdateRequest(BaseModel):
    """부분 수정 요청 (id, companyHandle 은 변경 불가)"""
    model_config = ConfigDict(extra='forbid')

    title: Name | None = None
    salary: Salary | None = None
    equity: Equity | None = None

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value):
        # 생략은 허용, 명시적 null 은 NOT NULL 컬럼이라 거부
        if value is None:
            raise ValueError("title cannot be null")
        return value


class JobSearchQuery(BaseModel):
    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    title_like: SearchText | None = Field(default=None, alias="titleLike")
    min_salary: Salary | None = Field(default=None, alias="minSalary")
    has_equity: bool | None = Field(default=None, alias="hasEquity")


class JobResponse(BaseModel):
    job: Job


class JobDetailResponse(BaseModel):
    job: JobDetail


class JobListResponse(BaseModel):
    jobs: list[Job]
