from __future__ import annotations

from common.adapters.django_sql_store import DjangoSQLStore
from common.adapters.sql_application_repo import SQLApplicationRepository
from common.adapters.sql_job_repo import SQLJobRepository
from common.ports.application_repo import ApplicationRepositoryPort
from common.ports.job_repo import JobRepositoryPort


def build_job_repository() -> JobRepositoryPort:
    return SQLJobRepository(store=DjangoSQLStore())


def build_application_repository() -> ApplicationRepositoryPort:
    return SQLApplicationRepository(store=DjangoSQLStore())
