from decimal import Decimal
from typing import Any, Mapping, NamedTuple

from utils.errors import bad_request

# equity 컬럼(NUMERIC)의 0 값
EQUITY_ZERO = Decimal("0")


class ClauseResult(NamedTuple):
    """SQL 절 텍스트와 위치 파라미터($1, $2, ...) 값 목록"""
    text: str
    values: list[Any]

    @property
    def next_index(self) -> int:
        """이 절 뒤에 이어 붙일 다음 파라미터 번호"""
        return len(self.values) + 1

    def where(self) -> str:
        """조건이 없으면 빈 문자열, 있으면 'WHERE (...)'"""
        if not self.text:
            return ""
        return f"WHERE ({self.text})"


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def build_set_clause(
    update_fields: Mapping[str, Any],
    column_map: Mapping[str, str]
) -> ClauseResult:
    """
    부분 수정용 UPDATE SET 절 생성.

    Args:
        update_fields: 수정할 필드와 값 {"numEmployees": 5, ...}
        column_map: API 필드명 -> DB 컬럼 매핑 {"numEmployees": "num_employees"}
            매핑에 없는 필드는 필드명을 그대로 컬럼명으로 사용

    Returns:
        ClauseResult(text, values)
        - text: '"num_employees"=$1, "description"=$2'
        - values: [5, "Description 3"]

    Raises:
        AppError(BAD_REQUEST): update_fields 가 비어있는 경우

    Example:
        >>> clause = build_set_clause(
        ...     {"numEmployees": 5, "description": "Description 3"},
        ...     {"numEmployees": "num_employees"},
        ... )
        >>> clause.text
        '"num_employees"=$1, "description"=$2'
        >>> clause.values
        [5, 'Description 3']
    """
    if not update_fields:
        raise bad_request("No data")

    set_parts = []
    values = []

    for idx, (field_name, value) in enumerate(update_fields.items(), start=1):
        column_name = column_map.get(field_name, field_name)
        set_parts.append(f"{quote_identifier(column_name)}=${idx}")
        values.append(value)

    return ClauseResult(", ".join(set_parts), values)


class FilterBuilder:
    """
    WHERE 조건을 순서대로 쌓아 위치 파라미터 절을 만든다.
    값이 None 인 조건은 무시된다.

        builder = FilterBuilder()
        builder.contains("title", "dev").at_least("salary", 50000)
        clause = builder.build()
        # clause.text   -> "LOWER(title) LIKE $1 AND salary >= $2"
        # clause.values -> ["%dev%", 50000]
    """

    def __init__(self, start_index: int = 1):
        self.filters: list[str] = []
        self.values: list[Any] = []
        self._param_idx = start_index

    def _add(self, predicate: str, value: Any) -> "FilterBuilder":
        self.filters.append(f"{predicate} ${self._param_idx}")
        self.values.append(value)
        self._param_idx += 1
        return self

    def contains(self, column: str, text: str | None) -> "FilterBuilder":
        # 컬럼만 소문자로 변환, 패턴 값은 그대로 바인딩
        if text is None:
            return self
        return self._add(f"LOWER({column}) LIKE", f"%{text}%")

    def at_least(self, column: str, number: Any) -> "FilterBuilder":
        if number is None:
            return self
        return self._add(f"{column} >=", number)

    def at_most(self, column: str, number: Any) -> "FilterBuilder":
        if number is None:
            return self
        return self._add(f"{column} <=", number)

    def not_equal(self, column: str, value: Any) -> "FilterBuilder":
        return self._add(f"{column} !=", value)

    @property
    def next_index(self) -> int:
        return self._param_idx

    def build(self) -> ClauseResult:
        return ClauseResult(" AND ".join(self.filters), list(self.values))


def build_job_filter_clause(
    title_like: str | None = None,
    min_salary: int | None = None,
    has_equity: bool | None = None,
) -> ClauseResult:
    """채용공고 검색 조건 (title -> salary -> equity 순서 고정)"""
    builder = FilterBuilder()
    builder.contains("title", title_like)
    builder.at_least("salary", min_salary)
    # False 는 None 과 동일하게 취급 (equity = 0 조건을 만들지 않음)
    if has_equity:
        builder.not_equal("equity", EQUITY_ZERO)
    return builder.build()


def build_company_filter_clause(
    name_like: str | None = None,
    min_employees: int | None = None,
    max_employees: int | None = None,
) -> ClauseResult:
    """회사 검색 조건 (name -> min -> max 순서 고정)"""
    return (
        FilterBuilder()
        .contains("name", name_like)
        .at_least("num_employees", min_employees)
        .at_most("num_employees", max_employees)
        .build()
    )
