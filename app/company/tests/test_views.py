"""
Tests for Company Views

회사 API 엔드포인트 테스트 (서비스/리포지토리는 mock)
"""

from unittest.mock import MagicMock, patch

import pytest
from common.errors import DuplicateError, NotFoundError
from company.domain.filters import MinEmployees, NameLike
from rest_framework import status

NEW_COMPANY = {
    "handle": "new",
    "name": "New",
    "description": "New Description",
    "numEmployees": 1,
    "logoUrl": "http://new.img",
}


@pytest.mark.django_db
class TestCompanyList:
    @patch("company.views.CompanyService.list_companies")
    def test_list_without_filters(self, mock_list, api_client):
        mock_list.return_value = [dict(NEW_COMPANY)]

        response = api_client.get("/api/v1/companies/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"companies": [NEW_COMPANY]}

    @patch("company.services.build_company_repository")
    def test_filters_are_parsed_in_order(self, mock_build, api_client):
        repo = MagicMock()
        repo.filter_by.return_value = [{"handle": "c1", "name": "C1"}]
        mock_build.return_value = repo

        response = api_client.get("/api/v1/companies/?name=c1&minEmployees=1")

        assert response.status_code == status.HTTP_200_OK
        repo.filter_by.assert_called_once_with([NameLike("%c1%"), MinEmployees(1)])
        repo.find_all.assert_not_called()

    @patch("company.services.build_company_repository")
    def test_no_match_is_404(self, mock_build, api_client):
        repo = MagicMock()
        repo.filter_by.side_effect = NotFoundError("Couldn't find company")
        mock_build.return_value = repo

        response = api_client.get("/api/v1/companies/?name=nope")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["error_code"] == "NOT_FOUND"

    def test_invalid_filter_key_is_400(self, api_client):
        response = api_client.get("/api/v1/companies/?nope=1")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["error_code"] == "VALIDATION_ERROR"

    def test_min_greater_than_max_is_400(self, api_client):
        response = api_client.get(
            "/api/v1/companies/?minEmployees=10&maxEmployees=1"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestCompanyRetrieve:
    @patch("company.views.CompanyService.get_company")
    def test_retrieve(self, mock_get, api_client):
        mock_get.return_value = {**NEW_COMPANY, "jobs": []}

        response = api_client.get("/api/v1/companies/new/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["company"]["handle"] == "new"
        mock_get.assert_called_once_with("new")

    @patch("company.views.CompanyService.get_company")
    def test_not_found(self, mock_get, api_client):
        mock_get.side_effect = NotFoundError("No company: nope")

        response = api_client.get("/api/v1/companies/nope/")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["error"] == "No company: nope"


@pytest.mark.django_db
class TestCompanyCreate:
    def test_anonymous_is_401(self, api_client):
        response = api_client.post("/api/v1/companies/", NEW_COMPANY, format="json")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_non_admin_is_403(self, api_client, regular_user):
        api_client.force_authenticate(user=regular_user)

        response = api_client.post("/api/v1/companies/", NEW_COMPANY, format="json")

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @patch("company.views.CompanyService.create_company")
    def test_admin_creates(self, mock_create, api_client, admin_user):
        mock_create.return_value = dict(NEW_COMPANY)
        api_client.force_authenticate(user=admin_user)

        response = api_client.post("/api/v1/companies/", NEW_COMPANY, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data == {"company": NEW_COMPANY}
        assert dict(mock_create.call_args.args[0]) == NEW_COMPANY

    def test_missing_fields_is_400(self, api_client, admin_user):
        api_client.force_authenticate(user=admin_user)

        response = api_client.post(
            "/api/v1/companies/", {"handle": "new"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "name" in response.data

    def test_unknown_field_is_400(self, api_client, admin_user):
        api_client.force_authenticate(user=admin_user)

        response = api_client.post(
            "/api/v1/companies/", {**NEW_COMPANY, "ceo": "me"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "ceo" in response.data

    @patch("company.views.CompanyService.create_company")
    def test_duplicate_is_400(self, mock_create, api_client, admin_user):
        mock_create.side_effect = DuplicateError("Duplicate company: new")
        api_client.force_authenticate(user=admin_user)

        response = api_client.post("/api/v1/companies/", NEW_COMPANY, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["error_code"] == "DUPLICATE"


@pytest.mark.django_db
class TestCompanyUpdateDelete:
    @patch("company.views.CompanyService.update_company")
    def test_partial_update(self, mock_update, api_client, admin_user):
        mock_update.return_value = {**NEW_COMPANY, "name": "Renamed"}
        api_client.force_authenticate(user=admin_user)

        response = api_client.patch(
            "/api/v1/companies/new/", {"name": "Renamed"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["company"]["name"] == "Renamed"
        handle, data = mock_update.call_args.args
        assert handle == "new"
        assert dict(data) == {"name": "Renamed"}

    @patch("company.services.build_company_repository")
    def test_rename_to_taken_name_is_400(self, mock_build, api_client, admin_user):
        mock_build.return_value.update.side_effect = DuplicateError(
            "Duplicate company name: C1"
        )
        api_client.force_authenticate(user=admin_user)

        response = api_client.patch(
            "/api/v1/companies/c2/", {"name": "C1"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["error_code"] == "DUPLICATE"

    def test_empty_patch_is_400(self, api_client, admin_user):
        api_client.force_authenticate(user=admin_user)

        response = api_client.patch("/api/v1/companies/new/", {}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_handle_cannot_change(self, api_client, admin_user):
        api_client.force_authenticate(user=admin_user)

        response = api_client.patch(
            "/api/v1/companies/new/", {"handle": "other"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_patch_non_admin_is_403(self, api_client, regular_user):
        api_client.force_authenticate(user=regular_user)

        response = api_client.patch(
            "/api/v1/companies/new/", {"name": "x"}, format="json"
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @patch("company.views.CompanyService.delete_company")
    def test_delete(self, mock_delete, api_client, admin_user):
        api_client.force_authenticate(user=admin_user)

        response = api_client.delete("/api/v1/companies/new/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"deleted": "new"}
        mock_delete.assert_called_once_with("new")

    @patch("company.views.CompanyService.delete_company")
    def test_delete_missing(self, mock_delete, api_client, admin_user):
        mock_delete.side_effect = NotFoundError("No company: nope")
        api_client.force_authenticate(user=admin_user)

        response = api_client.delete("/api/v1/companies/nope/")

        assert response.status_code == status.HTTP_404_NOT_FOUND
