from __future__ import annotations

from typing import Any, Mapping, Sequence

from common.adapters.django_sql_store import (
    UNIQUE_VIOLATION,
    integrity_error_code,
    integrity_error_constraint,
)
from common.adapters.sql_job_repo import normalize_job_row
from common.errors import DuplicateError, NotFoundError
from common.ports.company_repo import CompanyRepositoryPort
from common.ports.sql_store import SQLStorePort
from common.sql import ColumnNameMap, PlaceholderSequence, build_set_clause
from company.domain.filters import CompanyFilter, build_company_filter
from django.db import IntegrityError

COMPANY_COLUMN_NAMES = ColumnNameMap(
    {
        "numEmployees": "num_employees",
        "logoUrl": "logo_url",
    }
)

COMPANY_PRIMARY_KEY = "companies_pkey"

COMPANY_COLUMNS = (
    'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'
)


def duplicate_company_error(
    exc: IntegrityError, *, handle: str | None = None, name: str | None = None
) -> DuplicateError:
    """
    unique 위반을 어떤 값이 겹쳤는지 담은 DuplicateError로 바꿉니다.

    PK(handle) 위반이 아니면 name unique 위반입니다.
    handle을 넘기지 않으면(update) handle은 바뀌지 않으므로 name 위반으로 봅니다.
    """
    constraint = integrity_error_constraint(exc)
    if handle is not None and constraint in (None, COMPANY_PRIMARY_KEY):
        return DuplicateError(f"Duplicate company: {handle}")
    return DuplicateError(f"Duplicate company name: {name}", details={"name": name})


class SQLCompanyRepository(CompanyRepositoryPort):
    def __init__(self, store: SQLStorePort):
        self._store = store

    def create(self, data: Mapping[str, Any]) -> dict:
        """
        회사 생성.

        handle 중복 여부를 미리 조회하지 않고 INSERT 한 번으로 처리합니다.
        unique 위반은 DuplicateError로 변환합니다.
        """
        handle = data["handle"]
        try:
            rows = self._store.query(
                f"""INSERT INTO companies
                   (handle, name, description, num_employees, logo_url)
                   VALUES ($1, $2, $3, $4, $5)
                   RETURNING {COMPANY_COLUMNS}""",
                [
                    handle,
                    data["name"],
                    data["description"],
                    data.get("numEmployees"),
                    data.get("logoUrl"),
                ],
            )
        except IntegrityError as e:
            if integrity_error_code(e) == UNIQUE_VIOLATION:
                raise duplicate_company_error(
                    e, handle=handle, name=data["name"]
                ) from e
            raise
        return rows[0]

    def find_all(self) -> list[dict]:
        return self._store.query(
            f"""SELECT {COMPANY_COLUMNS}
               FROM companies
               ORDER BY name"""
        )

    def filter_by(self, filters: Sequence[CompanyFilter]) -> list[dict]:
        built = build_company_filter(filters)
        rows = self._store.query(built.query, built.parameters)
        if not rows:
            raise NotFoundError(
                "Couldn't find company that matched search criteria."
            )
        return rows

    def get(self, handle: str) -> dict:
        rows = self._store.query(
            f"""SELECT {COMPANY_COLUMNS}
               FROM companies
               WHERE handle = $1""",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")

        company = rows[0]
        jobs = self._store.query(
            """SELECT id, title, salary, equity
               FROM jobs
               WHERE company_handle = $1
               ORDER BY id""",
            [handle],
        )
        company["jobs"] = [normalize_job_row(job) for job in jobs]
        return company

    def update(self, handle: str, data: Mapping[str, Any]) -> dict:
        """
        partial update: data에 포함된 필드만 변경합니다.

        data: {name, description, numEmployees, logoUrl} 중 일부
        """
        set_clause = build_set_clause(data, COMPANY_COLUMN_NAMES)
        seq = PlaceholderSequence(set_clause.parameters)
        handle_placeholder = seq.add(handle)

        try:
            rows = self._store.query(
                f"""UPDATE companies
                   SET {set_clause.clause}
                   WHERE handle = {handle_placeholder}
                   RETURNING {COMPANY_COLUMNS}""",
                seq.parameters,
            )
        except IntegrityError as e:
            if integrity_error_code(e) == UNIQUE_VIOLATION:
                raise duplicate_company_error(e, name=data.get("name")) from e
            raise
        if not rows:
            raise NotFoundError(f"No company: {handle}")
        return rows[0]

    def remove(self, handle: str) -> None:
        # 소속 공고와 지원 내역까지 한 statement 안에서 함께 삭제
        rows = self._store.query(
            """WITH removed AS (
                   DELETE FROM companies
                   WHERE handle = $1
                   RETURNING handle
               ), removed_jobs AS (
                   DELETE FROM jobs
                   WHERE company_handle IN (SELECT handle FROM removed)
                   RETURNING id
               ), removed_applications AS (
                   DELETE FROM applications
                   WHERE job_id IN (SELECT id FROM removed_jobs)
               )
               SELECT handle FROM removed""",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")
