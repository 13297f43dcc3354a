"""
회사 검색 필터

쿼리스트링 -> 필터 목록(CompanyFilter) -> WHERE 절 + 파라미터 순서로 변환합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence, Union

from common.errors import ValidationError
from common.sql import FilterQuery, PlaceholderSequence


@dataclass(frozen=True, slots=True)
class MinEmployees:
    value: int


@dataclass(frozen=True, slots=True)
class MaxEmployees:
    value: int


@dataclass(frozen=True, slots=True)
class NameLike:
    pattern: str


CompanyFilter = Union[MinEmployees, MaxEmployees, NameLike]

COMPANY_FILTER_KEYS = ("name", "minEmployees", "maxEmployees")


def parse_non_negative_int(key: str, raw: str) -> int:
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{key} must be an integer", details={key: raw})
    if value < 0:
        raise ValidationError(f"{key} must not be negative", details={key: raw})
    return value


def parse_company_filters(query_params: Mapping[str, str]) -> list[CompanyFilter]:
    """
    쿼리스트링(flat key -> string)을 순서를 유지한 필터 목록으로 변환합니다.

    - 허용되지 않은 키는 ValidationError
    - name은 부분 일치(`%name%`)로 감쌉니다
    - minEmployees > maxEmployees 이면 ValidationError
    """
    filters: list[CompanyFilter] = []
    for key, raw in query_params.items():
        if key == "minEmployees":
            filters.append(MinEmployees(parse_non_negative_int(key, raw)))
        elif key == "maxEmployees":
            filters.append(MaxEmployees(parse_non_negative_int(key, raw)))
        elif key == "name":
            filters.append(NameLike(f"%{raw}%"))
        else:
            raise ValidationError(
                f"Request contains invalid query parameter {key}. "
                f"Please only use the following valid parameters: "
                f"{', '.join(COMPANY_FILTER_KEYS)}",
                details={"parameter": key},
            )

    minimum = next((f.value for f in filters if isinstance(f, MinEmployees)), None)
    maximum = next((f.value for f in filters if isinstance(f, MaxEmployees)), None)
    if minimum is not None and maximum is not None and minimum > maximum:
        raise ValidationError("minEmployees cannot be greater than maxEmployees")

    return filters


def build_company_filter(filters: Sequence[CompanyFilter]) -> FilterQuery:
    """
    회사 필터 목록으로 SELECT 쿼리를 만듭니다.

    projection은 handle을 기본으로, 필터에 쓰인 컬럼만 추가합니다.
    (name 필터 -> name, 인원수 필터 -> num_employees)
    """
    seq = PlaceholderSequence()
    wheres: list[str] = []
    select_name = False
    select_num_employees = False

    for f in filters:
        if isinstance(f, MinEmployees):
            wheres.append(f"num_employees >= {seq.add(f.value)}")
            select_num_employees = True
        elif isinstance(f, MaxEmployees):
            wheres.append(f"num_employees <= {seq.add(f.value)}")
            select_num_employees = True
        elif isinstance(f, NameLike):
            wheres.append(f"name ILIKE {seq.add(f.pattern)}")
            select_name = True
        else:
            raise ValidationError(f"Unsupported company filter: {f!r}")

    columns = ["handle"]
    if select_name:
        columns.append("name")
    if select_num_employees:
        columns.append('num_employees AS "numEmployees"')

    query = f"SELECT {', '.join(columns)} FROM companies"
    if wheres:
        query += " WHERE " + " AND ".join(wheres)
    query += " ORDER BY name"
    return FilterQuery(query=query, parameters=seq.parameters)
