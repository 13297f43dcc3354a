import logging

from common.errors import JobBoardError
from common.permissions import IsCorrectUserOrAdmin
from django.shortcuts import get_object_or_404
from drf_spectacular.utils import OpenApiTypes, extend_schema
from job.services import ApplicationService
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken
from user.models import User
from user.serializers import (
    UserDetailSerializer,
    UserLoginSerializer,
    UserRegistrationSerializer,
)

logger = logging.getLogger(__name__)


def issue_tokens(user: User) -> dict:
    refresh = RefreshToken.for_user(user)
    return {
        "refresh": str(refresh),
        "access": str(refresh.access_token),
    }


class UserRegistrationView(APIView):
    permission_classes = []  # No permission required for registration

    @extend_schema(
        request=UserRegistrationSerializer,
        responses={201: OpenApiTypes.OBJECT},
        summary="User Registration",
        description="Register a new (non-admin) user and get JWT tokens.",
    )
    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"Registered user {user.username}")
        return Response(issue_tokens(user), status=status.HTTP_201_CREATED)


class UserLoginView(APIView):
    permission_classes = []  # No permission required for login

    @extend_schema(
        request=UserLoginSerializer,
        responses={
            200: OpenApiTypes.OBJECT,
        },
        summary="User Login",
        description="Login with username and password to get JWT tokens.",
    )
    def post(self, request):
        serializer = UserLoginSerializer(
            data=request.data, context={"request": request}
        )
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        return Response(issue_tokens(user), status=status.HTTP_200_OK)


class UserDetailView(APIView):
    """
    사용자 정보 + 지원한 채용 공고 id 목록

    GET /api/v1/users/<username>/
    """

    permission_classes = [IsCorrectUserOrAdmin]

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    def get(self, request, username):
        user = get_object_or_404(User, username=username)
        data = UserDetailSerializer(user).data
        data["jobs"] = ApplicationService.applied_job_ids(username)
        return Response({"user": data})


class JobApplicationView(APIView):
    """
    채용 공고 지원

    POST /api/v1/users/<username>/jobs/<job_id>/
    """

    permission_classes = [IsCorrectUserOrAdmin]

    @extend_schema(request=None, responses={201: OpenApiTypes.OBJECT})
    def post(self, request, username, job_id):
        try:
            result = ApplicationService.apply(username, job_id)
            return Response(result, status=status.HTTP_201_CREATED)
        except JobBoardError as e:
            return Response(e.to_response_data(), status=e.status_code)
        except Exception as e:
            logger.error(
                f"Failed to apply {username} to job {job_id}: {str(e)}", exc_info=True
            )
            return Response(
                {"error": "Failed to apply to job"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
