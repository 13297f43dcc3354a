from __future__ import annotations

from common.adapters.django_sql_store import UNIQUE_VIOLATION, integrity_error_code
from common.errors import DuplicateError, NotFoundError
from common.ports.application_repo import ApplicationRepositoryPort
from common.ports.sql_store import SQLStorePort
from django.db import IntegrityError


class SQLApplicationRepository(ApplicationRepositoryPort):
    def __init__(self, store: SQLStorePort):
        self._store = store

    def create(self, username: str, job_id: int) -> dict:
        """
        채용 공고 지원.

        공고 -> 사용자 순으로 존재 여부를 확인하고, 없으면 NotFoundError.
        이미 지원한 공고면 DuplicateError.
        """
        if not self._store.query("SELECT id FROM jobs WHERE id = $1", [job_id]):
            raise NotFoundError(f"Job with id of {job_id} not found.")

        if not self._store.query(
            "SELECT username FROM users WHERE username = $1", [username]
        ):
            raise NotFoundError(f"User with username {username} not found.")

        try:
            self._store.query(
                """INSERT INTO applications (job_id, username)
                   VALUES ($1, $2)""",
                [job_id, username],
            )
        except IntegrityError as e:
            if integrity_error_code(e) == UNIQUE_VIOLATION:
                raise DuplicateError(
                    f"User {username} already applied to job {job_id}."
                ) from e
            raise
        return {"applied": job_id}

    def job_ids_for(self, username: str) -> list[int]:
        rows = self._store.query(
            """SELECT job_id
               FROM applications
               WHERE username = $1
               ORDER BY job_id""",
            [username],
        )
        return [row["job_id"] for row in rows]
