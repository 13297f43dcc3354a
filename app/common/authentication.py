"""
JWT Cookie Authentication

Authorization 헤더 또는 HttpOnly Cookie에서 JWT를 읽어 인증하는 래퍼.
"""

from django.conf import settings
from rest_framework_simplejwt.authentication import JWTAuthentication


class JWTCookieAuthentication(JWTAuthentication):
    """
    1) Authorization: Bearer <token> 헤더
    2) Cookie (JWT_AUTH_COOKIE, 기본값 access_token)
    순으로 토큰을 찾아 인증.

    토큰이 없으면 익명 사용자로 처리하고, 권한 판단은 permission 클래스에 맡깁니다.
    """

    def authenticate(self, request):
        header = super().authenticate(request)
        if header is not None:
            return header

        cookie_name = getattr(settings, "JWT_AUTH_COOKIE", "access_token")
        raw = request.COOKIES.get(cookie_name)
        if not raw:
            return None

        validated = self.get_validated_token(raw)
        return self.get_user(validated), validated
