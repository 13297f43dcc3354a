from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Sequence

from common.adapters.django_sql_store import (
    FOREIGN_KEY_VIOLATION,
    integrity_error_code,
)
from common.errors import NotFoundError
from common.ports.job_repo import JobRepositoryPort
from common.ports.sql_store import SQLStorePort
from common.sql import ColumnNameMap, PlaceholderSequence, build_set_clause
from django.db import IntegrityError
from job.domain.filters import JOB_COLUMNS, JobFilter, build_job_filter

JOB_COLUMN_NAMES = ColumnNameMap({"companyHandle": "company_handle"})


def normalize_job_row(row: dict) -> dict:
    """NUMERIC equity를 `"0.1"` 형태의 문자열로 맞춥니다."""
    equity = row.get("equity")
    if isinstance(equity, Decimal):
        row["equity"] = format(equity.normalize(), "f")
    elif isinstance(equity, float):
        row["equity"] = str(equity)
    return row


class SQLJobRepository(JobRepositoryPort):
    def __init__(self, store: SQLStorePort):
        self._store = store

    def create(self, data: Mapping[str, Any]) -> dict:
        """
        채용 공고 생성 (중복 검사 없음).

        존재하지 않는 companyHandle이면 NotFoundError.
        """
        company_handle = data["companyHandle"]
        try:
            rows = self._store.query(
                f"""INSERT INTO jobs (title, salary, equity, company_handle)
                   SELECT $1::text, $2::integer, $3::numeric, handle
                   FROM companies
                   WHERE handle = $4
                   RETURNING {JOB_COLUMNS}""",
                [
                    data["title"],
                    data.get("salary"),
                    data.get("equity"),
                    company_handle,
                ],
            )
        except IntegrityError as e:
            if integrity_error_code(e) == FOREIGN_KEY_VIOLATION:
                raise NotFoundError(f"No company: {company_handle}") from e
            raise
        if not rows:
            raise NotFoundError(f"No company: {company_handle}")
        return normalize_job_row(rows[0])

    def find_all(self) -> list[dict]:
        rows = self._store.query(
            f"""SELECT {JOB_COLUMNS}
               FROM jobs
               ORDER BY id"""
        )
        return [normalize_job_row(row) for row in rows]

    def filter_by(self, filters: Sequence[JobFilter]) -> list[dict]:
        built = build_job_filter(filters)
        rows = self._store.query(built.query, built.parameters)
        if not rows:
            raise NotFoundError("Couldn't find any jobs that matched search criteria.")
        return [normalize_job_row(row) for row in rows]

    def get(self, job_id: int) -> dict:
        rows = self._store.query(
            f"""SELECT {JOB_COLUMNS}
               FROM jobs
               WHERE id = $1""",
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        return normalize_job_row(rows[0])

    def update(self, job_id: int, data: Mapping[str, Any]) -> dict:
        set_clause = build_set_clause(data, JOB_COLUMN_NAMES)
        seq = PlaceholderSequence(set_clause.parameters)
        id_placeholder = seq.add(job_id)

        rows = self._store.query(
            f"""UPDATE jobs
               SET {set_clause.clause}
               WHERE id = {id_placeholder}
               RETURNING {JOB_COLUMNS}""",
            seq.parameters,
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        return normalize_job_row(rows[0])

    def remove(self, job_id: int) -> None:
        rows = self._store.query(
            """WITH removed AS (
                   DELETE FROM jobs
                   WHERE id = $1
                   RETURNING id
               ), removed_applications AS (
                   DELETE FROM applications
                   WHERE job_id IN (SELECT id FROM removed)
               )
               SELECT id FROM removed""",
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
