"""
Tests for 채용 공고 검색 필터

hasEquity는 파라미터를 소비하지 않아야 합니다.
"""

import pytest
from common.errors import ValidationError
from job.domain.filters import (
    HasEquity,
    MinSalary,
    TitleLike,
    build_job_filter,
    parse_job_filters,
)


class TestBuildJobFilter:
    def test_has_equity_adds_clause_without_parameter(self):
        result = build_job_filter([TitleLike("Job2"), HasEquity(True), MinSalary(0)])

        assert result.parameters == ("Job2", 0)
        assert "equity > 0" in result.query
        assert (
            "WHERE title ILIKE $1 AND equity > 0 AND salary >= $2" in result.query
        )

    def test_has_equity_first_does_not_shift_numbering(self):
        result = build_job_filter([HasEquity(True), MinSalary(100)])

        assert "salary >= $1" in result.query
        assert "$2" not in result.query
        assert result.parameters == (100,)

    def test_has_equity_false_adds_nothing(self):
        result = build_job_filter([HasEquity(False), TitleLike("%eng%")])

        assert "equity > 0" not in result.query
        assert "WHERE title ILIKE $1 ORDER BY" in result.query

    def test_projection_and_order(self):
        result = build_job_filter([MinSalary(1)])

        assert result.query.startswith(
            'SELECT id, title, salary, equity, company_handle AS "companyHandle" '
            "FROM jobs"
        )
        assert result.query.endswith("ORDER BY company_handle")

    def test_only_disabled_filters_has_no_where(self):
        result = build_job_filter([HasEquity(False)])

        assert " WHERE " not in result.query
        assert result.parameters == ()

    def test_unknown_filter_object_is_rejected(self):
        with pytest.raises(ValidationError):
            build_job_filter(["title"])


class TestParseJobFilters:
    def test_parses_in_order(self):
        filters = parse_job_filters(
            {"title": "Job2", "hasEquity": "true", "minSalary": "0"}
        )

        assert filters == [TitleLike("%Job2%"), HasEquity(True), MinSalary(0)]

    def test_has_equity_literals(self):
        assert parse_job_filters({"hasEquity": "true"}) == [HasEquity(True)]
        assert parse_job_filters({"hasEquity": "false"}) == [HasEquity(False)]

    @pytest.mark.parametrize("raw", ["TRUE", "True", " true", "FALSE"])
    def test_has_equity_is_case_sensitive(self, raw):
        with pytest.raises(ValidationError, match="hasEquity"):
            parse_job_filters({"hasEquity": raw})

    def test_has_equity_rejects_other_values(self):
        with pytest.raises(ValidationError, match="hasEquity"):
            parse_job_filters({"hasEquity": "yes"})

    def test_unknown_key(self):
        with pytest.raises(ValidationError, match="title, minSalary, hasEquity"):
            parse_job_filters({"company": "c1"})

    def test_min_salary_must_be_integer(self):
        with pytest.raises(ValidationError):
            parse_job_filters({"minSalary": "1.5"})
