"""
Job Views

채용 공고 API 엔드포인트 (Thin Controller)
"""

import logging

from common.errors import JobBoardError
from common.permissions import IsAdminOrReadOnly
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from job.serializers import JobCreateSerializer, JobUpdateSerializer
from job.services import JobService
from rest_framework import status
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

logger = logging.getLogger(__name__)


class JobViewSet(GenericViewSet):
    """
    채용 공고 ViewSet (Thin Controller)

    비즈니스 로직은 JobService에 위임하고,
    HTTP 요청/응답 처리만 담당합니다.
    """

    serializer_class = JobCreateSerializer
    permission_classes = [IsAdminOrReadOnly]
    lookup_value_regex = r"\d+"

    def get_serializer_class(self):
        if self.action == "partial_update":
            return JobUpdateSerializer
        return JobCreateSerializer

    @extend_schema(
        parameters=[
            OpenApiParameter(name="title", type=OpenApiTypes.STR, required=False),
            OpenApiParameter(name="minSalary", type=OpenApiTypes.INT, required=False),
            OpenApiParameter(name="hasEquity", type=OpenApiTypes.BOOL, required=False),
        ],
        responses={200: OpenApiTypes.OBJECT},
    )
    def list(self, request, *args, **kwargs):
        """
        채용 공고 목록 조회 (필터 선택)

        GET /api/v1/jobs/?title=&minSalary=&hasEquity=
        """
        try:
            jobs = JobService.list_jobs(request.query_params)
            return Response({"jobs": jobs})
        except JobBoardError as e:
            return Response(e.to_response_data(), status=e.status_code)
        except Exception as e:
            logger.error(f"Failed to list jobs: {str(e)}", exc_info=True)
            return Response(
                {"error": "Failed to retrieve jobs"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    def retrieve(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 상세 조회

        GET /api/v1/jobs/<id>/
        """
        try:
            job = JobService.get_job(int(pk))
            return Response({"job": job})
        except JobBoardError as e:
            return Response(e.to_response_data(), status=e.status_code)
        except Exception as e:
            logger.error(f"Failed to retrieve job {pk}: {str(e)}", exc_info=True)
            return Response(
                {"error": "Failed to retrieve job"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    def create(self, request, *args, **kwargs):
        """
        채용 공고 생성 (관리자)

        POST /api/v1/jobs/
        """
        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            job = JobService.create_job(serializer.validated_data)
            return Response({"job": job}, status=status.HTTP_201_CREATED)
        except JobBoardError as e:
            return Response(e.to_response_data(), status=e.status_code)
        except Exception as e:
            logger.error(f"Failed to create job: {str(e)}", exc_info=True)
            return Response(
                {"error": "Failed to create job"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    def partial_update(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 수정 (부분, 관리자)

        PATCH /api/v1/jobs/<id>/
        """
        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            job = JobService.update_job(int(pk), serializer.validated_data)
            return Response({"job": job})
        except JobBoardError as e:
            return Response(e.to_response_data(), status=e.status_code)
        except Exception as e:
            logger.error(f"Failed to update job {pk}: {str(e)}", exc_info=True)
            return Response(
                {"error": "Failed to update job"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    def destroy(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 삭제 (관리자)

        DELETE /api/v1/jobs/<id>/
        """
        try:
            JobService.delete_job(int(pk))
            return Response({"deleted": int(pk)})
        except JobBoardError as e:
            return Response(e.to_response_data(), status=e.status_code)
        except Exception as e:
            logger.error(f"Failed to delete job {pk}: {str(e)}", exc_info=True)
            return Response(
                {"error": "Failed to delete job"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
