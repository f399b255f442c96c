"""Request body construction and response summaries for the search tools.

Apollo's response schema is not contractually fixed, so every field read
here is optional: missing or null values become None (or a default) rather
than errors.
"""

from __future__ import annotations

from typing import Any, Optional

from .models import CompanyFilters, NumericRange, SearchCompaniesInput, SearchNewsInput, SearchPeopleInput

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 25

# Company filters copied into the request body unchanged when set.
_COMPANY_PASSTHROUGH_FILTERS = (
    "organization_locations",
    "organization_not_locations",
    "currently_using_any_of_technology_uids",
    "q_organization_keyword_tags",
    "q_organization_name",
    "q_organization_job_titles",
    "organization_job_locations",
)

_COMPANY_RANGE_FILTERS = (
    "revenue_range",
    "latest_funding_amount_range",
    "total_funding_range",
    "organization_num_jobs_range",
)


# ─── Request bodies ──────────────────────────────────────────────────────────


def _paginated_body(query: Optional[str], page: Optional[int], per_page: Optional[int]) -> dict[str, Any]:
    body: dict[str, Any] = {}
    if query:
        body["q"] = query
    if page:
        body["page"] = page
    if per_page:
        body["per_page"] = per_page
    return body


def build_people_search_body(parsed: SearchPeopleInput) -> dict[str, Any]:
    body = _paginated_body(parsed.query, parsed.page, parsed.per_page)
    if parsed.filters:
        body.update(parsed.filters.model_dump(exclude_none=True))
    return body


def build_news_search_body(parsed: SearchNewsInput) -> dict[str, Any]:
    body = _paginated_body(parsed.query, parsed.page, parsed.per_page)
    if parsed.filters:
        body.update(parsed.filters)
    return body


def normalize_employee_range(value: str) -> str:
    """Apollo expects '11,20'; accept the more natural '11-20' too."""
    return value.replace("-", ",", 1) if "-" in value else value


def _range_body(value: NumericRange) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if value.min:
        out["min"] = value.min
    if value.max:
        out["max"] = value.max
    return out


def build_company_search_body(parsed: SearchCompaniesInput) -> dict[str, Any]:
    """Map validated company-search input onto Apollo's body fields."""
    body = _paginated_body(parsed.query, parsed.page, parsed.per_page)
    filters: Optional[CompanyFilters] = parsed.filters
    if not filters:
        return body

    if filters.organization_num_employees_ranges:
        body["organization_num_employees_ranges"] = [
            normalize_employee_range(r) for r in filters.organization_num_employees_ranges
        ]

    for name in _COMPANY_PASSTHROUGH_FILTERS:
        value = getattr(filters, name)
        if value:
            body[name] = value

    for name in _COMPANY_RANGE_FILTERS:
        value = getattr(filters, name)
        if value is not None:
            body[name] = _range_body(value)

    return body


# ─── Response summaries ──────────────────────────────────────────────────────


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _records(result: dict, key: str) -> list[dict]:
    items = result.get(key)
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


def _pagination_summary(result: dict) -> dict[str, Any]:
    pagination = _as_dict(result.get("pagination"))
    return {
        "total_results": pagination.get("total_entries") or 0,
        "page": pagination.get("page") or DEFAULT_PAGE,
        "per_page": pagination.get("per_page") or DEFAULT_PER_PAGE,
    }


def summarize_people(result: Any) -> dict[str, Any]:
    """Reduce a people-search response to the fields worth showing."""
    result = _as_dict(result)
    people = []
    for person in _records(result, "people"):
        people.append({
            "id": person.get("id"),
            "name": person.get("name"),
            "title": person.get("title"),
            "company": _as_dict(person.get("organization")).get("name"),
            "location": person.get("formatted_address"),
            "linkedin_url": person.get("linkedin_url"),
            "email": person.get("email"),
            "seniority": person.get("seniority"),
        })
    return {**_pagination_summary(result), "people": people}


def _company_location(company: dict) -> str:
    if company.get("raw_address"):
        return company["raw_address"]
    parts = [company.get(k) for k in ("city", "state", "country")]
    return ", ".join(p for p in parts if p)


def summarize_companies(result: Any) -> dict[str, Any]:
    """Reduce a company-search response to the fields worth showing.

    Only the `organizations` list is read; Apollo also returns saved
    `accounts` in the same payload, which are not search hits.
    """
    result = _as_dict(result)
    companies = []
    for company in _records(result, "organizations"):
        companies.append({
            "id": company.get("id"),
            "name": company.get("name"),
            "website": company.get("website_url"),
            "industry": company.get("industry"),
            "employee_count": company.get("employee_count"),
            "location": _company_location(company),
            "linkedin_url": company.get("linkedin_url"),
            "founded_year": company.get("founded_year"),
            "phone": company.get("phone"),
            "revenue": company.get("organization_revenue_printed"),
            "market_cap": company.get("market_cap"),
        })
    return {**_pagination_summary(result), "companies": companies}
