"""
Job Service

채용 공고 관리 및 지원 서비스
"""

import logging
from typing import Dict, List, Mapping

from job.application.container import (
    build_application_repository,
    build_job_repository,
)
from job.domain.filters import parse_job_filters

logger = logging.getLogger(__name__)


class JobService:
    """
    채용 공고 서비스

    채용 공고의 CRUD를 담당합니다.
    """

    @staticmethod
    def list_jobs(query_params: Mapping[str, str]) -> List[Dict]:
        """
        채용 공고 목록 조회

        Args:
            query_params: title / minSalary / hasEquity 필터 (선택)

        Returns:
            채용 공고 dict 목록
        """
        repo = build_job_repository()
        if not query_params:
            return repo.find_all()

        filters = parse_job_filters(query_params)
        return repo.filter_by(filters)

    @staticmethod
    def get_job(job_id: int) -> Dict:
        return build_job_repository().get(job_id)

    @staticmethod
    def create_job(data: Dict) -> Dict:
        """
        채용 공고 생성

        Args:
            data: {title, salary, equity, companyHandle}

        Returns:
            생성된 채용 공고 dict
        """
        job = build_job_repository().create(data)
        logger.info(f"Created job {job['id']} for company {job['companyHandle']}")
        return job

    @staticmethod
    def update_job(job_id: int, data: Dict) -> Dict:
        job = build_job_repository().update(job_id, data)
        logger.info(f"Updated job {job_id}: fields={list(data.keys())}")
        return job

    @staticmethod
    def delete_job(job_id: int) -> None:
        build_job_repository().remove(job_id)
        logger.info(f"Deleted job {job_id}")


class ApplicationService:
    """채용 공고 지원 서비스"""

    @staticmethod
    def apply(username: str, job_id: int) -> Dict:
        result = build_application_repository().create(username, job_id)
        logger.info(f"User {username} applied to job {job_id}")
        return result

    @staticmethod
    def applied_job_ids(username: str) -> List[int]:
        return build_application_repository().job_ids_for(username)
