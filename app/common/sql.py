"""
Raw SQL 조립 유틸리티

- PlaceholderSequence: `$1, $2, ...` 위치 기반 placeholder 발급기
- ColumnNameMap: 요청 필드명 -> 물리 컬럼명 매핑 (없으면 필드명 그대로)
- build_set_clause: partial update용 SET 절 생성
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping

from common.errors import ValidationError


@dataclass(frozen=True, slots=True)
class GeneratedClause:
    clause: str
    parameters: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class FilterQuery:
    query: str
    parameters: tuple[Any, ...]


class PlaceholderSequence:
    """
    값이 실제로 추가될 때만 증가하는 placeholder 카운터.

    add()가 반환하는 `$k`는 항상 parameters[k - 1]에 바인딩됩니다.
    """

    def __init__(self, values=()) -> None:
        self._values: list[Any] = list(values)

    def add(self, value: Any) -> str:
        self._values.append(value)
        return f"${len(self._values)}"

    @property
    def parameters(self) -> tuple[Any, ...]:
        return tuple(self._values)

    def __len__(self) -> int:
        return len(self._values)


class ColumnNameMap(Mapping[str, str]):
    """
    요청 필드명(camelCase) -> DB 컬럼명 매핑.

    매핑에 없는 키는 그대로 컬럼명으로 사용합니다.
    매핑된 값이 빈 문자열이어도 그 값을 그대로 돌려줍니다.
    """

    def __init__(self, mapping: Mapping[str, str] | None = None):
        self._mapping = dict(mapping or {})

    def column_for(self, field: str) -> str:
        if field in self._mapping:
            return self._mapping[field]
        return field

    def __getitem__(self, field: str) -> str:
        return self._mapping[field]

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def __repr__(self) -> str:
        return f"ColumnNameMap({self._mapping!r})"


def quote_identifier(name: str) -> str:
    # 대소문자 보존용 식별자 quoting
    return '"' + name.replace('"', '""') + '"'


def build_set_clause(
    payload: Mapping[str, Any],
    column_name_map: Mapping[str, str] | None = None,
) -> GeneratedClause:
    """
    partial update용 SET 절을 만듭니다.

    Example:
        build_set_clause({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        -> GeneratedClause('"first_name"=$1, "age"=$2', ("Aliya", 32))

    WHERE 절의 lookup key는 호출 측에서
    PlaceholderSequence(clause.parameters).add(key)로 이어 붙입니다.
    """
    if not payload:
        raise ValidationError("no data supplied")

    if not isinstance(column_name_map, ColumnNameMap):
        column_name_map = ColumnNameMap(column_name_map)

    seq = PlaceholderSequence()
    fragments = [
        f"{quote_identifier(column_name_map.column_for(field))}={seq.add(value)}"
        for field, value in payload.items()
    ]
    return GeneratedClause(clause=", ".join(fragments), parameters=seq.parameters)
