from __future__ import annotations

import logging
import re
from typing import Any, Sequence

from django.db import DEFAULT_DB_ALIAS, connections, transaction

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"\$(\d+)")


def to_format_style(sql: str, parameters: Sequence[Any]) -> tuple[str, list[Any]]:
    """
    `$1, $2, ...` placeholder를 DB-API format 스타일(`%s`)로 변환합니다.

    - placeholder가 등장하는 순서대로 parameters를 다시 나열합니다
    - SQL 본문의 리터럴 `%`는 `%%`로 escape 합니다
    """
    ordered: list[Any] = []

    def _replace(match: re.Match) -> str:
        index = int(match.group(1))
        if index < 1 or index > len(parameters):
            raise ValueError(
                f"placeholder ${index} has no parameter "
                f"({len(parameters)} supplied)"
            )
        ordered.append(parameters[index - 1])
        return "%s"

    converted = _PLACEHOLDER_RE.sub(_replace, sql.replace("%", "%%"))
    return converted, ordered


class DjangoSQLStore:
    """
    Django DB 커넥션 위에서 raw SQL을 실행하는 store 어댑터.

    결과 row는 cursor 컬럼명을 key로 하는 dict로 돌려줍니다.
    IntegrityError 등 DB 예외는 그대로 전파되며, 해석은 리포지토리의 몫입니다.
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def query(self, sql: str, parameters: Sequence[Any] = ()) -> list[dict]:
        parameters = list(parameters)
        logger.debug("SQL %s params=%r", " ".join(sql.split()), parameters)

        with transaction.atomic(using=self.using):
            with connections[self.using].cursor() as cursor:
                if parameters:
                    converted, ordered = to_format_style(sql, parameters)
                    cursor.execute(converted, ordered)
                else:
                    cursor.execute(sql)

                if cursor.description is None:
                    return []
                columns = [col[0] for col in cursor.description]
                return [dict(zip(columns, row)) for row in cursor.fetchall()]


UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def integrity_error_code(exc: Exception) -> str | None:
    """
    IntegrityError의 SQLSTATE를 꺼냅니다.

    psycopg(3)는 sqlstate, psycopg2는 pgcode를 씁니다.
    """
    cause = exc.__cause__ or exc
    return getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)


def integrity_error_constraint(exc: Exception) -> str | None:
    """위반된 제약조건 이름 (psycopg diag.constraint_name)"""
    cause = exc.__cause__ or exc
    diag = getattr(cause, "diag", None)
    return getattr(diag, "constraint_name", None)
