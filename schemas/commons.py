from decimal import Decimal
from typing import Annotated

import asyncpg
from fastapi import Depends, Path
from pydantic import Field, BaseModel, StringConstraints

from utils.auth import require_admin
from utils.database import get_connection

DBConnection = Annotated[asyncpg.Connection, Depends(get_connection)]
AdminUser = Annotated[dict, Depends(require_admin)]

# INTEGER / SERIAL 컬럼 상한
MAX_INT = 2_147_483_647

JobIdPath = Annotated[int, Path(ge=1, le=MAX_INT, description="채용공고 ID")]

CompanyHandle = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=1,
        max_length=25,
        pattern=r"^[a-z0-9-]+$",
    ),
    Field(description="회사 handle", examples=["anderson-arias-morrow"]),
]

HandlePath = Annotated[
    str,
    Path(min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$", description="회사 handle"),
]

Name = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

Description = Annotated[str, StringConstraints(max_length=2000)]

LogoUrl = Annotated[
    str,
    StringConstraints(strip_whitespace=True, max_length=500, pattern=r"^https?://\S+$"),
]

Salary = Annotated[int, Field(ge=0, le=MAX_INT)]

# 0 이상 1 이하 지분율 (예: "0.05")
Equity = Annotated[Decimal, Field(ge=0, le=1)]

Count = Annotated[int, Field(ge=0, le=MAX_INT)]

SearchText = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=50),
]


class DeletedResponse(BaseModel):
    deleted: str
