"""
채용 공고 검색 필터

hasEquity는 파라미터 없이 고정 조건(`equity > 0`)만 추가하므로,
placeholder 번호는 실제로 값이 추가될 때만 증가해야 합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence, Union

from common.errors import ValidationError
from common.sql import FilterQuery, PlaceholderSequence
from company.domain.filters import parse_non_negative_int


@dataclass(frozen=True, slots=True)
class HasEquity:
    enabled: bool


@dataclass(frozen=True, slots=True)
class MinSalary:
    value: int


@dataclass(frozen=True, slots=True)
class TitleLike:
    pattern: str


JobFilter = Union[HasEquity, MinSalary, TitleLike]

JOB_FILTER_KEYS = ("title", "minSalary", "hasEquity")

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'


def parse_has_equity(raw: str) -> bool:
    # 정확히 "true"일 때만 필터를 켭니다 (대소문자 구분)
    value = str(raw)
    if value not in ("true", "false"):
        raise ValidationError(
            "hasEquity must be 'true' or 'false'", details={"hasEquity": raw}
        )
    return value == "true"


def parse_job_filters(query_params: Mapping[str, str]) -> list[JobFilter]:
    filters: list[JobFilter] = []
    for key, raw in query_params.items():
        if key == "hasEquity":
            filters.append(HasEquity(parse_has_equity(raw)))
        elif key == "minSalary":
            filters.append(MinSalary(parse_non_negative_int(key, raw)))
        elif key == "title":
            filters.append(TitleLike(f"%{raw}%"))
        else:
            raise ValidationError(
                f"Request contains invalid query parameter {key}. "
                f"Please only use the following valid parameters: "
                f"{', '.join(JOB_FILTER_KEYS)}",
                details={"parameter": key},
            )
    return filters


def build_job_filter(filters: Sequence[JobFilter]) -> FilterQuery:
    seq = PlaceholderSequence()
    wheres: list[str] = []

    for f in filters:
        if isinstance(f, HasEquity):
            if f.enabled:
                wheres.append("equity > 0")
        elif isinstance(f, MinSalary):
            wheres.append(f"salary >= {seq.add(f.value)}")
        elif isinstance(f, TitleLike):
            wheres.append(f"title ILIKE {seq.add(f.pattern)}")
        else:
            raise ValidationError(f"Unsupported job filter: {f!r}")

    query = f"SELECT {JOB_COLUMNS} FROM jobs"
    if wheres:
        query += " WHERE " + " AND ".join(wheres)
    query += " ORDER BY company_handle"
    return FilterQuery(query=query, parameters=seq.parameters)
