"""
Tests for DjangoSQLStore

placeholder 변환 / IntegrityError 해석 / 실제 DB 실행
"""

from types import SimpleNamespace

import pytest
from common.adapters.django_sql_store import (
    FOREIGN_KEY_VIOLATION,
    UNIQUE_VIOLATION,
    DjangoSQLStore,
    integrity_error_code,
    integrity_error_constraint,
    to_format_style,
)
from company.models import Company
from django.db import IntegrityError


class TestToFormatStyle:
    def test_replaces_numbered_placeholders(self):
        sql, params = to_format_style(
            "SELECT * FROM jobs WHERE salary >= $1 AND title ILIKE $2", [100, "%a%"]
        )

        assert sql == "SELECT * FROM jobs WHERE salary >= %s AND title ILIKE %s"
        assert params == [100, "%a%"]

    def test_reorders_parameters_by_placeholder_index(self):
        sql, params = to_format_style("UPDATE t SET a=$2 WHERE id = $1", [7, "x"])

        assert sql == "UPDATE t SET a=%s WHERE id = %s"
        assert params == ["x", 7]

    def test_two_digit_placeholders(self):
        values = list(range(1, 12))
        sql, params = to_format_style("SELECT $11, $1", values)

        assert sql == "SELECT %s, %s"
        assert params == [11, 1]

    def test_escapes_literal_percent(self):
        sql, _ = to_format_style("SELECT '100%' WHERE a = $1", [1])

        assert sql == "SELECT '100%%' WHERE a = %s"

    def test_missing_parameter_raises(self):
        with pytest.raises(ValueError):
            to_format_style("SELECT $2", ["only-one"])


class TestIntegrityErrorCode:
    def test_reads_psycopg_sqlstate(self):
        err = IntegrityError("duplicate key value")
        err.__cause__ = SimpleNamespace(sqlstate=UNIQUE_VIOLATION)

        assert integrity_error_code(err) == UNIQUE_VIOLATION

    def test_reads_psycopg2_pgcode(self):
        err = IntegrityError("violates foreign key constraint")
        err.__cause__ = SimpleNamespace(pgcode=FOREIGN_KEY_VIOLATION)

        assert integrity_error_code(err) == FOREIGN_KEY_VIOLATION

    def test_message_alone_is_not_decoded(self):
        assert integrity_error_code(IntegrityError("UNIQUE constraint failed")) is None

    def test_constraint_name(self):
        err = IntegrityError("duplicate key value")
        err.__cause__ = SimpleNamespace(
            sqlstate=UNIQUE_VIOLATION,
            diag=SimpleNamespace(constraint_name="companies_pkey"),
        )

        assert integrity_error_constraint(err) == "companies_pkey"

    def test_constraint_name_missing(self):
        assert integrity_error_constraint(IntegrityError("boom")) is None


@pytest.mark.django_db
class TestDjangoSQLStore:
    def setup_method(self):
        self.store = DjangoSQLStore()

    def test_returns_rows_as_dicts(self):
        Company.objects.create(
            handle="c1", name="C1", description="Desc1", num_employees=1
        )

        rows = self.store.query(
            'SELECT handle, num_employees AS "numEmployees" FROM companies '
            "WHERE handle = $1",
            ["c1"],
        )

        assert rows == [{"handle": "c1", "numEmployees": 1}]

    def test_query_without_parameters(self):
        Company.objects.create(handle="c1", name="C1", description="Desc1")
        Company.objects.create(handle="c2", name="C2", description="Desc2")

        rows = self.store.query("SELECT handle FROM companies ORDER BY name")

        assert [row["handle"] for row in rows] == ["c1", "c2"]

    def test_statement_without_result_set(self):
        Company.objects.create(handle="c1", name="C1", description="Desc1")

        rows = self.store.query(
            "UPDATE companies SET description = $1 WHERE handle = $2", ["New", "c1"]
        )

        assert rows == []
        assert Company.objects.get(handle="c1").description == "New"

    def test_integrity_error_propagates(self):
        Company.objects.create(handle="c1", name="C1", description="Desc1")

        with pytest.raises(IntegrityError) as exc_info:
            self.store.query(
                "INSERT INTO companies (handle, name, description) "
                "VALUES ($1, $2, $3)",
                ["c1", "Other", "Desc"],
            )

        assert integrity_error_code(exc_info.value) == UNIQUE_VIOLATION
        # atomic 블록으로 감싸져 있어 이후 쿼리도 정상 실행
        assert self.store.query("SELECT handle FROM companies") == [{"handle": "c1"}]
