from rest_framework.permissions import SAFE_METHODS, BasePermission


class IsAdminOrReadOnly(BasePermission):
    """
    조회(GET/HEAD/OPTIONS)는 누구나, 그 외에는 관리자(is_staff)만 허용합니다.
    """

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        user = request.user
        return bool(user and user.is_authenticated and user.is_staff)


class IsCorrectUserOrAdmin(BasePermission):
    """
    URL의 username과 로그인 사용자가 같거나, 관리자일 때만 허용합니다.
    """

    message = (
        "You must be an admin or signed in as the user "
        "whose information you are trying to access."
    )

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if user.is_staff:
            return True
        return view.kwargs.get("username") == user.username
