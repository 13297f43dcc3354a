# app/conftest.py
"""
공통 pytest fixtures
"""
import pytest
from rest_framework.test import APIClient


class FakeSQLStore:
    """
    SQLStorePort 테스트 더블.

    - 실행된 SQL(공백 정리)과 파라미터를 calls에 기록합니다
    - respond()로 등록한 결과를 순서대로 돌려주고, 예외면 raise 합니다
    """

    def __init__(self):
        self.calls = []
        self._responses = []

    def respond(self, *results):
        self._responses.extend(results)
        return self

    def query(self, sql, parameters=()):
        self.calls.append((" ".join(sql.split()), tuple(parameters)))
        result = self._responses.pop(0) if self._responses else []
        if isinstance(result, BaseException):
            raise result
        return [dict(row) for row in result]

    @property
    def last_sql(self):
        return self.calls[-1][0]

    @property
    def last_parameters(self):
        return self.calls[-1][1]


@pytest.fixture
def fake_store():
    return FakeSQLStore()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_user(django_user_model):
    return django_user_model.objects.create_user(
        username="admin", password="adminpass123", is_staff=True
    )


@pytest.fixture
def regular_user(django_user_model):
    return django_user_model.objects.create_user(
        username="u1", password="password123", email="u1@example.com"
    )
