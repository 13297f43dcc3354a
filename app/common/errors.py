"""
Job board 도메인 에러

리포지토리/빌더는 아래 타입의 예외를 던지고,
HTTP 경계(View)에서 status code로 변환합니다.
"""

from __future__ import annotations

from typing import Optional

from rest_framework import status


class JobBoardError(Exception):
    """도메인 에러 베이스 클래스"""

    code = "ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response_data(self) -> dict:
        data = {"error": self.message, "error_code": self.code}
        if self.details:
            data["details"] = self.details
        return data


class ValidationError(JobBoardError):
    """잘못된 입력 (빈 update payload, 알 수 없는 필터 키 등)"""

    code = "VALIDATION_ERROR"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(JobBoardError):
    """조회 대상이 없거나 필터 결과가 비어있음"""

    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND


class DuplicateError(JobBoardError):
    """unique key 충돌"""

    code = "DUPLICATE"
    status_code = status.HTTP_400_BAD_REQUEST
