"""Apollo.io MCP Server.

FastMCP server with 9 tools over people/company search and enrichment.
Run: apollo-mcp
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, ToolAnnotations
from pydantic import BaseModel

from . import __version__
from .config import ConfigError, configure_logging, load_config
from .core.client import ApolloClient
from .core.models import CompanyFilters, OrganizationIdentifier, PeopleFilters, PersonIdentifier
from .tools import ApolloTools

logger = logging.getLogger(__name__)

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=True)

INSTRUCTIONS = (
    "Search and enrich people and companies with Apollo.io — people search, company search, "
    "person and company enrichment, bulk enrichment, job postings, organization details, and news."
)


def _arguments(**kwargs: Any) -> dict[str, Any]:
    """Collect the arguments a caller actually supplied, as plain JSON data."""
    out: dict[str, Any] = {}
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json", exclude_none=True)
        elif isinstance(value, list):
            value = [v.model_dump(mode="json", exclude_none=True) if isinstance(v, BaseModel) else v for v in value]
        out[key] = value
    return out


def build_server(client: ApolloClient) -> FastMCP:
    """Create the FastMCP server with every Apollo tool bound to `client`."""

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[None]:
        configure_logging("INFO")
        logger.info("Apollo MCP server %s started (base URL: %s)", __version__, client.base_url)
        try:
            yield
        finally:
            logger.info("Apollo MCP server stopped")

    mcp = FastMCP("apollo-mcp", instructions=INSTRUCTIONS, lifespan=lifespan)
    tools = ApolloTools(client)

    # ─── Tool 1: Search People ───────────────────────────────────────────────

    @mcp.tool(title="Search People", annotations=READ_ONLY, structured_output=False)
    async def apollo_search_people(
        query: Optional[str] = None,
        filters: Optional[PeopleFilters] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> CallToolResult:
        """Search for people in Apollo with advanced filtering options.

        Use filters to target specific roles, locations, seniority levels, and companies.

        Args:
            query: Search query for names, titles, or keywords.
            filters: Locations, seniority, titles, departments, company domains/names,
                     industries, technologies, experience, and education filters.
            page: Page number (default: 1).
            per_page: Results per page (1-200, default: 25).
        """
        return await tools.search_people(_arguments(query=query, filters=filters, page=page, per_page=per_page))

    # ─── Tool 2: Search Companies ────────────────────────────────────────────

    @mcp.tool(title="Search Companies", annotations=READ_ONLY, structured_output=False)
    async def apollo_search_companies(
        query: Optional[str] = None,
        filters: Optional[CompanyFilters] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> CallToolResult:
        """Search for companies/organizations in Apollo with comprehensive filtering options.

        Args:
            query: Search query for company names, industries, or keywords.
            filters: Employee ranges, locations, keyword tags, technologies, revenue and
                     funding ranges, and job-posting filters. Start with location + keywords.
            page: Page number (default: 1).
            per_page: Results per page (1-200, default: 25).
        """
        return await tools.search_companies(_arguments(query=query, filters=filters, page=page, per_page=per_page))

    # ─── Tool 3: Enrich Person ───────────────────────────────────────────────

    @mcp.tool(title="Enrich Person", annotations=READ_ONLY, structured_output=False)
    async def apollo_enrich_person(
        email: Optional[str] = None,
        linkedin_url: Optional[str] = None,
        name: Optional[str] = None,
        company: Optional[str] = None,
        reveal_personal_emails: Optional[bool] = None,
        reveal_phone_number: Optional[bool] = None,
    ) -> CallToolResult:
        """Enrich a person by email, linkedin_url, or name+company using Apollo match.

        Args:
            email: Work or personal email address.
            linkedin_url: LinkedIn profile URL.
            name: Full name (combine with company).
            company: Company name or domain.
            reveal_personal_emails: Reveal personal emails (default: false).
            reveal_phone_number: Reveal phone numbers (default: false).
        """
        return await tools.enrich_person(_arguments(
            email=email,
            linkedin_url=linkedin_url,
            name=name,
            company=company,
            reveal_personal_emails=reveal_personal_emails,
            reveal_phone_number=reveal_phone_number,
        ))

    # ─── Tool 4: Enrich Company ──────────────────────────────────────────────

    @mcp.tool(title="Enrich Company", annotations=READ_ONLY, structured_output=False)
    async def apollo_enrich_company(domain: Optional[str] = None, name: Optional[str] = None) -> CallToolResult:
        """Enrich a company/organization by domain or name using Apollo match.

        Args:
            domain: Company domain (e.g., 'apollo.io').
            name: Company name.
        """
        return await tools.enrich_company(_arguments(domain=domain, name=name))

    # ─── Tool 5: Bulk Enrich People ──────────────────────────────────────────

    @mcp.tool(title="Bulk Enrich People", annotations=READ_ONLY, structured_output=False)
    async def apollo_bulk_enrich_people(
        people: list[PersonIdentifier],
        reveal_personal_emails: Optional[bool] = None,
        reveal_phone_number: Optional[bool] = None,
    ) -> CallToolResult:
        """Bulk enrich multiple people using Apollo match.

        Args:
            people: People to match, each with email, linkedin_url, name, or company.
            reveal_personal_emails: Reveal personal emails (default: false).
            reveal_phone_number: Reveal phone numbers (default: false).
        """
        return await tools.bulk_enrich_people(_arguments(
            people=people,
            reveal_personal_emails=reveal_personal_emails,
            reveal_phone_number=reveal_phone_number,
        ))

    # ─── Tool 6: Bulk Enrich Organizations ───────────────────────────────────

    @mcp.tool(title="Bulk Enrich Organizations", annotations=READ_ONLY, structured_output=False)
    async def apollo_bulk_enrich_organizations(organizations: list[OrganizationIdentifier]) -> CallToolResult:
        """Bulk enrich multiple organizations using Apollo match.

        Args:
            organizations: Organizations to match, each with domain or name.
        """
        return await tools.bulk_enrich_organizations(_arguments(organizations=organizations))

    # ─── Tool 7: Job Postings ────────────────────────────────────────────────

    @mcp.tool(title="Get Organization Job Postings", annotations=READ_ONLY, structured_output=False)
    async def apollo_get_organization_job_postings(organization_id: str) -> CallToolResult:
        """Get job postings for a specific organization by organization ID.

        Args:
            organization_id: The Apollo organization ID.
        """
        return await tools.get_organization_job_postings(_arguments(organization_id=organization_id))

    # ─── Tool 8: Organization Info ───────────────────────────────────────────

    @mcp.tool(title="Get Complete Organization Info", annotations=READ_ONLY, structured_output=False)
    async def apollo_get_complete_organization_info(organization_id: str) -> CallToolResult:
        """Get complete information for a specific organization by organization ID.

        Args:
            organization_id: The Apollo organization ID.
        """
        return await tools.get_complete_organization_info(_arguments(organization_id=organization_id))

    # ─── Tool 9: News ────────────────────────────────────────────────────────

    @mcp.tool(title="Search News Articles", annotations=READ_ONLY, structured_output=False)
    async def apollo_search_news_articles(
        query: Optional[str] = None,
        filters: Optional[dict[str, Any]] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> CallToolResult:
        """Search for news articles related to companies in Apollo.

        Args:
            query: Search query.
            filters: Additional Apollo news filters, merged into the request body as-is.
            page: Page number (default: 1).
            per_page: Results per page (1-200, default: 25).
        """
        return await tools.search_news_articles(_arguments(query=query, filters=filters, page=page, per_page=per_page))

    return mcp


def main():
    """Entry point for the `apollo-mcp` command."""
    try:
        config = load_config()
    except ConfigError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    build_server(ApolloClient(config)).run()


if __name__ == "__main__":
    main()
