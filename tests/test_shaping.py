"""Tests for request body construction and search-result summaries."""

from __future__ import annotations

from apollo_mcp.core.models import SearchCompaniesInput, SearchNewsInput, SearchPeopleInput
from apollo_mcp.core.shaping import (
    build_company_search_body,
    build_news_search_body,
    build_people_search_body,
    normalize_employee_range,
    summarize_companies,
    summarize_people,
)

from .fixtures import COMPANY_SEARCH_RESPONSE, COMPANY_SUMMARY_FIELDS, PERSON_SEARCH_RESPONSE


class TestRequestBodies:
    def test_people_body_merges_filters(self) -> None:
        parsed = SearchPeopleInput.model_validate(
            {"query": "engineer", "filters": {"titles": ["CTO"], "locations": ["Berlin"]}, "page": 2}
        )

        assert build_people_search_body(parsed) == {
            "q": "engineer",
            "page": 2,
            "titles": ["CTO"],
            "locations": ["Berlin"],
        }

    def test_empty_input_gives_empty_body(self) -> None:
        assert build_people_search_body(SearchPeopleInput()) == {}

    def test_news_body_passes_arbitrary_filters(self) -> None:
        parsed = SearchNewsInput.model_validate(
            {"query": "funding", "filters": {"organization_ids": ["abc"], "published_at": {"min": "2024-01-01"}}, "per_page": 5}
        )

        assert build_news_search_body(parsed) == {
            "q": "funding",
            "per_page": 5,
            "organization_ids": ["abc"],
            "published_at": {"min": "2024-01-01"},
        }

    def test_employee_ranges_rewritten(self) -> None:
        assert normalize_employee_range("11-20") == "11,20"
        assert normalize_employee_range("21,50") == "21,50"
        assert normalize_employee_range("10001") == "10001"

    def test_company_body(self) -> None:
        parsed = SearchCompaniesInput.model_validate({
            "query": "technology",
            "per_page": 10,
            "filters": {
                "organization_num_employees_ranges": ["11-20", "21,50"],
                "organization_locations": ["Texas"],
                "q_organization_name": "Apollo",
                "revenue_range": {"min": 1000000, "max": 5000000},
                "total_funding_range": {"min": 0, "max": 250000},
                "organization_job_locations": [],
            },
        })

        assert build_company_search_body(parsed) == {
            "q": "technology",
            "per_page": 10,
            "organization_num_employees_ranges": ["11,20", "21,50"],
            "organization_locations": ["Texas"],
            "q_organization_name": "Apollo",
            "revenue_range": {"min": 1000000, "max": 5000000},
            "total_funding_range": {"max": 250000},
        }


class TestSummaries:
    def test_people_summary(self) -> None:
        summary = summarize_people(PERSON_SEARCH_RESPONSE)

        assert summary["total_results"] == 145
        assert summary["page"] == 1
        assert summary["per_page"] == 10
        assert summary["people"][0] == {
            "id": "5f7b1234567890abcdef1234",
            "name": "John Doe",
            "title": "Software Engineer",
            "company": "Example Corp",
            "location": "San Francisco, California, United States",
            "linkedin_url": "https://linkedin.com/in/johndoe",
            "email": "john.doe@example.com",
            "seniority": "senior",
        }
        assert summary["people"][1]["company"] is None

    def test_company_summary_reads_organizations_only(self) -> None:
        summary = summarize_companies(COMPANY_SEARCH_RESPONSE)

        assert len(summary["companies"]) == 2
        assert all(set(c) == COMPANY_SUMMARY_FIELDS for c in summary["companies"])
        assert "acct-1" not in {c["id"] for c in summary["companies"]}
        first, second = summary["companies"]
        assert first["website"] == "https://example.com"
        assert first["revenue"] == "50M"
        assert first["location"] == "123 Main St, San Francisco, CA 94105"
        assert second["location"] == "Austin, United States"

    def test_accounts_alone_yield_no_companies(self) -> None:
        summary = summarize_companies({"accounts": [{"id": "a"}]})
        assert summary["companies"] == []

    def test_missing_pagination_uses_defaults(self) -> None:
        summary = summarize_people({})
        assert summary == {"total_results": 0, "page": 1, "per_page": 25, "people": []}

    def test_tolerates_malformed_payloads(self) -> None:
        summary = summarize_companies({"pagination": None, "organizations": [None, "junk", {"name": "Ok"}]})
        assert [c["name"] for c in summary["companies"]] == ["Ok"]
        assert summarize_people(None)["people"] == []
        assert summarize_people({"people": "not-a-list"})["people"] == []
