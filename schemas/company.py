from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from schemas.commons import CompanyHandle, Count, Description, LogoUrl, Name, SearchText


class Company(BaseModel):
    """회사 응답 스키마 (DB 값을 그대로 내보내므로 입력 제약은 걸지 않음)"""
    model_config = ConfigDict(populate_by_name=True)

    handle: str
    name: str
    description: str | None = None
    num_employees: int | None = Field(default=None, alias="numEmployees")
    logo_url: str | None = Field(default=None, alias="logoUrl")


class CompanyJob(BaseModel):
    """회사 상세에 포함되는 채용공고"""
    id: int
    title: str
    salary: int | None = None
    equity: Decimal | None = None


class CompanyDetail(Company):
    jobs: list[CompanyJob] = []


class CompanyCreateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    handle: CompanyHandle
    name: Name
    description: Description | None = None
    num_employees: Count | None = Field(default=None, alias="numEmployees")
    logo_url: LogoUrl | None = Field(default=None, alias="logoUrl")


class CompanyUpdateRequest(BaseModel):
    """부분 수정 요청 (handle 은 변경 불가)"""
    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    name: Name | None = None
    description: Description | None = None
    num_employees: Count | None = Field(default=None, alias="numEmployees")
    logo_url: LogoUrl | None = Field(default=None, alias="logoUrl")

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        if value is None:
            raise ValueError("name cannot be null")
        return value


class CompanySearchQuery(BaseModel):
    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    name_like: SearchText | None = Field(default=None, alias="nameLike")
    min_employees: Count | None = Field(default=None, alias="minEmployees")
    max_employees: Count | None = Field(default=None, alias="maxEmployees")

    @model_validator(mode='after')
    def check_employee_range(self):
        if (
            self.min_employees is not None
            and self.max_employees is not None
            and self.min_employees > self.max_employees
        ):
            raise ValueError("minEmployees cannot be greater than maxEmployees")
        return self


class CompanyResponse(BaseModel):
    company: Company


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompanyListResponse(BaseModel):
    companies: list[Company]
