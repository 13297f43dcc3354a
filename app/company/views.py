"""
Company Views

회사 API 엔드포인트 (Thin Controller)
"""

import logging

from common.errors import JobBoardError
from common.permissions import IsAdminOrReadOnly
from company.serializers import CompanyCreateSerializer, CompanyUpdateSerializer
from company.services import CompanyService
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

logger = logging.getLogger(__name__)


class CompanyViewSet(GenericViewSet):
    """
    회사 ViewSet (Thin Controller)

    비즈니스 로직은 CompanyService에 위임하고,
    HTTP 요청/응답 처리만 담당합니다.
    """

    serializer_class = CompanyCreateSerializer
    permission_classes = [IsAdminOrReadOnly]
    lookup_field = "handle"

    def get_serializer_class(self):
        if self.action == "partial_update":
            return CompanyUpdateSerializer
        return CompanyCreateSerializer

    @extend_schema(
        parameters=[
            OpenApiParameter(name="name", type=OpenApiTypes.STR, required=False),
            OpenApiParameter(
                name="minEmployees", type=OpenApiTypes.INT, required=False
            ),
            OpenApiParameter(
                name="maxEmployees", type=OpenApiTypes.INT, required=False
            ),
        ],
        responses={200: OpenApiTypes.OBJECT},
    )
    def list(self, request, *args, **kwargs):
        """
        회사 목록 조회 (필터 선택)

        GET /api/v1/companies/?name=&minEmployees=&maxEmployees=
        """
        try:
            companies = CompanyService.list_companies(request.query_params)
            return Response({"companies": companies})
        except JobBoardError as e:
            return Response(e.to_response_data(), status=e.status_code)
        except Exception as e:
            logger.error(f"Failed to list companies: {str(e)}", exc_info=True)
            return Response(
                {"error": "Failed to retrieve companies"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    def retrieve(self, request, handle=None, *args, **kwargs):
        """
        회사 상세 조회 (소속 채용 공고 포함)

        GET /api/v1/companies/<handle>/
        """
        try:
            company = CompanyService.get_company(handle)
            return Response({"company": company})
        except JobBoardError as e:
            return Response(e.to_response_data(), status=e.status_code)
        except Exception as e:
            logger.error(f"Failed to retrieve company {handle}: {str(e)}", exc_info=True)
            return Response(
                {"error": "Failed to retrieve company"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    def create(self, request, *args, **kwargs):
        """
        회사 생성 (관리자)

        POST /api/v1/companies/
        """
        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            company = CompanyService.create_company(serializer.validated_data)
            return Response({"company": company}, status=status.HTTP_201_CREATED)
        except JobBoardError as e:
            return Response(e.to_response_data(), status=e.status_code)
        except Exception as e:
            logger.error(f"Failed to create company: {str(e)}", exc_info=True)
            return Response(
                {"error": "Failed to create company"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    def partial_update(self, request, handle=None, *args, **kwargs):
        """
        회사 수정 (부분, 관리자)

        PATCH /api/v1/companies/<handle>/
        """
        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            company = CompanyService.update_company(handle, serializer.validated_data)
            return Response({"company": company})
        except JobBoardError as e:
            return Response(e.to_response_data(), status=e.status_code)
        except Exception as e:
            logger.error(f"Failed to update company {handle}: {str(e)}", exc_info=True)
            return Response(
                {"error": "Failed to update company"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    def destroy(self, request, handle=None, *args, **kwargs):
        """
        회사 삭제 (관리자)

        DELETE /api/v1/companies/<handle>/
        """
        try:
            CompanyService.delete_company(handle)
            return Response({"deleted": handle})
        except JobBoardError as e:
            return Response(e.to_response_data(), status=e.status_code)
        except Exception as e:
            logger.error(f"Failed to delete company {handle}: {str(e)}", exc_info=True)
            return Response(
                {"error": "Failed to delete company"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
