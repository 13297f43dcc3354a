from __future__ import annotations

from common.adapters.django_sql_store import DjangoSQLStore
from common.adapters.sql_company_repo import SQLCompanyRepository
from common.ports.company_repo import CompanyRepositoryPort


def build_company_repository() -> CompanyRepositoryPort:
    """
    Company 리포지토리 조립(Dependency Injection).
    - services에서는 이 함수만 통해 리포지토리를 얻도록 통일합니다.
    """
    return SQLCompanyRepository(store=DjangoSQLStore())
