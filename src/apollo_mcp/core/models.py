"""Pydantic input models — the typed schemas behind each tool.

The server validates caller arguments against these before any request is
built. Every field except the bulk lists and organization IDs is optional.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, EmailStr, Field, HttpUrl, TypeAdapter

_EMAIL = TypeAdapter(EmailStr)
_URL = TypeAdapter(HttpUrl)


def _check_email(value: str) -> str:
    _EMAIL.validate_python(value)
    return value


def _check_url(value: str) -> str:
    _URL.validate_python(value)
    return value


# Validated, but sent to Apollo exactly as the caller wrote them.
Email = Annotated[str, AfterValidator(_check_email)]
Url = Annotated[str, AfterValidator(_check_url)]


class Pagination(BaseModel):
    """Page selection shared by the search tools."""

    page: Optional[int] = Field(None, ge=1, description="Page number (default: 1)")
    per_page: Optional[int] = Field(None, ge=1, le=200, description="Results per page (1-200, default: 25)")


class NumericRange(BaseModel):
    min: Optional[int | float] = None
    max: Optional[int | float] = None


# ─── People ──────────────────────────────────────────────────────────────────


class PeopleFilters(BaseModel):
    """Advanced filtering options for targeting specific people."""

    locations: Optional[list[str]] = Field(None, description="Person locations (cities, states, countries)")
    seniority: Optional[list[str]] = Field(None, description="Seniority levels (e.g., ['C-Level', 'VP', 'Director'])")
    titles: Optional[list[str]] = Field(None, description="Job titles (e.g., ['CEO', 'CTO', 'Sales Manager'])")
    departments: Optional[list[str]] = Field(None, description="Departments (e.g., ['Engineering', 'Sales'])")
    company_domains: Optional[list[str]] = Field(None, description="Company domains (e.g., ['google.com'])")
    company_names: Optional[list[str]] = Field(None, description="Company names")
    industries: Optional[list[str]] = Field(None, description="Industries (e.g., ['Software', 'Healthcare'])")
    technologies: Optional[list[str]] = Field(None, description="Technologies they use (e.g., ['python', 'salesforce'])")
    years_of_experience: Optional[list[str]] = Field(None, description="Experience ranges (e.g., ['1-3', '4-6'])")
    education_degrees: Optional[list[str]] = Field(None, description="Education degrees (e.g., ['MBA', 'PhD'])")
    education_schools: Optional[list[str]] = Field(None, description="Education institutions")


class SearchPeopleInput(Pagination):
    query: Optional[str] = Field(None, description="Search query for names, titles, or keywords")
    filters: Optional[PeopleFilters] = None


class PersonIdentifier(BaseModel):
    """Fields Apollo can match a person on."""

    email: Optional[Email] = None
    linkedin_url: Optional[Url] = None
    name: Optional[str] = None
    company: Optional[str] = None


class EnrichPersonInput(PersonIdentifier):
    reveal_personal_emails: Optional[bool] = Field(None, description="Reveal personal emails (default: false)")
    reveal_phone_number: Optional[bool] = Field(None, description="Reveal phone numbers (default: false)")


class BulkEnrichPeopleInput(BaseModel):
    people: list[PersonIdentifier]
    reveal_personal_emails: Optional[bool] = Field(None, description="Reveal personal emails (default: false)")
    reveal_phone_number: Optional[bool] = Field(None, description="Reveal phone numbers (default: false)")


# ─── Companies ───────────────────────────────────────────────────────────────


class CompanyFilters(BaseModel):
    """Advanced company filters. Start with location + keywords for best results."""

    organization_num_employees_ranges: Optional[list[str]] = Field(
        None, description="Employee count ranges (e.g., ['11,20', '21,50']). '11-20' is also accepted."
    )
    organization_locations: Optional[list[str]] = Field(None, description="Company locations (cities, states, countries)")
    organization_not_locations: Optional[list[str]] = Field(None, description="Exclude companies from these locations")
    q_organization_keyword_tags: Optional[list[str]] = Field(None, description="Industry keywords (e.g., ['saas', 'fintech'])")
    q_organization_name: Optional[str] = Field(None, description="Specific company name filter")
    currently_using_any_of_technology_uids: Optional[list[str]] = Field(None, description="Technologies companies use")
    revenue_range: Optional[NumericRange] = Field(None, description="Revenue range in dollars (no commas/symbols)")
    latest_funding_amount_range: Optional[NumericRange] = Field(None, description="Latest funding round amount range")
    total_funding_range: Optional[NumericRange] = Field(None, description="Total funding amount range")
    q_organization_job_titles: Optional[list[str]] = Field(None, description="Job titles in active postings")
    organization_job_locations: Optional[list[str]] = Field(None, description="Job posting locations")
    organization_num_jobs_range: Optional[NumericRange] = Field(None, description="Number of active job postings range")


class SearchCompaniesInput(Pagination):
    query: Optional[str] = Field(None, description="Search query for company names, industries, or keywords")
    filters: Optional[CompanyFilters] = None


class OrganizationIdentifier(BaseModel):
    domain: Optional[str] = None
    name: Optional[str] = None


class EnrichCompanyInput(OrganizationIdentifier):
    pass


class BulkEnrichOrganizationsInput(BaseModel):
    organizations: list[OrganizationIdentifier]


class OrganizationIdInput(BaseModel):
    organization_id: str = Field(min_length=1, description="The Apollo organization ID")


# ─── News ────────────────────────────────────────────────────────────────────


class SearchNewsInput(Pagination):
    query: Optional[str] = None
    filters: Optional[dict[str, Any]] = None
