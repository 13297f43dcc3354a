from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    """
    지원자/관리자 계정.

    관리자 여부는 is_staff 플래그로 판단합니다.
    """

    class Meta(AbstractUser.Meta):
        db_table = "users"
