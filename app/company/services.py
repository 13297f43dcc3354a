"""
Company Service

회사 조회/생성/수정/삭제 서비스
"""

import logging
from typing import Dict, List, Mapping

from company.application.container import build_company_repository
from company.domain.filters import parse_company_filters

logger = logging.getLogger(__name__)


class CompanyService:
    """
    회사 서비스

    SQL 조립과 실행은 리포지토리에 위임합니다.
    """

    @staticmethod
    def list_companies(query_params: Mapping[str, str]) -> List[Dict]:
        """
        회사 목록 조회

        쿼리스트링이 비어있으면 전체 목록, 있으면 필터 검색 결과를 반환합니다.
        필터 결과가 비어있으면 NotFoundError가 발생합니다.
        """
        repo = build_company_repository()
        if not query_params:
            return repo.find_all()

        filters = parse_company_filters(query_params)
        return repo.filter_by(filters)

    @staticmethod
    def get_company(handle: str) -> Dict:
        return build_company_repository().get(handle)

    @staticmethod
    def create_company(data: Dict) -> Dict:
        company = build_company_repository().create(data)
        logger.info(f"Created company {company['handle']}")
        return company

    @staticmethod
    def update_company(handle: str, data: Dict) -> Dict:
        company = build_company_repository().update(handle, data)
        logger.info(f"Updated company {handle}: fields={list(data.keys())}")
        return company

    @staticmethod
    def delete_company(handle: str) -> None:
        build_company_repository().remove(handle)
        logger.info(f"Deleted company {handle}")
