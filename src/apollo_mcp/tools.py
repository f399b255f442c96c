"""Tool handlers — validate arguments, call Apollo, wrap the result.

Each handler takes the raw argument mapping a caller sent and always returns
a `CallToolResult`. Validation errors and Apollo failures come back as
error-flagged results instead of exceptions, so one bad call never takes
the server down.
"""

from __future__ import annotations

import functools
import json
import logging
from typing import Any, Awaitable, Callable, Optional

from mcp.types import CallToolResult, TextContent

from .core.client import ApolloClient
from .core.models import (
    BulkEnrichOrganizationsInput,
    BulkEnrichPeopleInput,
    EnrichCompanyInput,
    EnrichPersonInput,
    OrganizationIdInput,
    SearchCompaniesInput,
    SearchNewsInput,
    SearchPeopleInput,
)
from .core.shaping import (
    build_company_search_body,
    build_news_search_body,
    build_people_search_body,
    summarize_companies,
    summarize_people,
)

logger = logging.getLogger(__name__)

Arguments = Optional[dict[str, Any]]

REVEAL_FLAGS = {"reveal_personal_emails", "reveal_phone_number"}


def text_result(payload: Any) -> CallToolResult:
    """Wrap a JSON-serializable payload as a successful tool result."""
    return CallToolResult(content=[TextContent(type="text", text=json.dumps(payload, indent=2))])


def error_result(message: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=message)], isError=True)


def tool_boundary(action: str) -> Callable:
    """Turn any exception raised by a handler into an error-flagged result."""

    def decorator(handler: Callable[..., Awaitable[CallToolResult]]) -> Callable[..., Awaitable[CallToolResult]]:
        @functools.wraps(handler)
        async def wrapper(self: "ApolloTools", arguments: Arguments = None) -> CallToolResult:
            try:
                return await handler(self, arguments or {})
            except Exception as exc:
                logger.warning("%s failed: %s", handler.__name__, exc)
                return error_result(f"Error {action}: {exc}")

        return wrapper

    return decorator


class ApolloTools:
    """The nine Apollo operations exposed to tool-calling clients."""

    def __init__(self, client: ApolloClient):
        self.client = client

    # ─── Search ──────────────────────────────────────────────────────────────

    @tool_boundary("searching people")
    async def search_people(self, arguments: dict[str, Any]) -> CallToolResult:
        parsed = SearchPeopleInput.model_validate(arguments)
        result = await self.client.search_people(build_people_search_body(parsed))
        return text_result(summarize_people(result))

    @tool_boundary("searching companies")
    async def search_companies(self, arguments: dict[str, Any]) -> CallToolResult:
        parsed = SearchCompaniesInput.model_validate(arguments)
        result = await self.client.search_companies(build_company_search_body(parsed))
        return text_result(summarize_companies(result))

    @tool_boundary("searching news articles")
    async def search_news_articles(self, arguments: dict[str, Any]) -> CallToolResult:
        parsed = SearchNewsInput.model_validate(arguments)
        result = await self.client.search_news(build_news_search_body(parsed))
        return text_result(result)

    # ─── Enrichment ──────────────────────────────────────────────────────────

    @tool_boundary("enriching person")
    async def enrich_person(self, arguments: dict[str, Any]) -> CallToolResult:
        parsed = EnrichPersonInput.model_validate(arguments)
        body = parsed.model_dump(mode="json", exclude_none=True, exclude=REVEAL_FLAGS)
        result = await self.client.match_person(
            body,
            bool(parsed.reveal_personal_emails),
            bool(parsed.reveal_phone_number),
        )
        return text_result(result)

    @tool_boundary("enriching company")
    async def enrich_company(self, arguments: dict[str, Any]) -> CallToolResult:
        parsed = EnrichCompanyInput.model_validate(arguments)
        result = await self.client.match_company(parsed.model_dump(exclude_none=True))
        return text_result(result)

    @tool_boundary("bulk enriching people")
    async def bulk_enrich_people(self, arguments: dict[str, Any]) -> CallToolResult:
        parsed = BulkEnrichPeopleInput.model_validate(arguments)
        body = parsed.model_dump(mode="json", exclude_none=True, exclude=REVEAL_FLAGS)
        result = await self.client.bulk_match_people(
            body,
            bool(parsed.reveal_personal_emails),
            bool(parsed.reveal_phone_number),
        )
        return text_result(result)

    @tool_boundary("bulk enriching organizations")
    async def bulk_enrich_organizations(self, arguments: dict[str, Any]) -> CallToolResult:
        parsed = BulkEnrichOrganizationsInput.model_validate(arguments)
        result = await self.client.bulk_match_organizations(parsed.model_dump(exclude_none=True))
        return text_result(result)

    # ─── Organizations ───────────────────────────────────────────────────────

    @tool_boundary("getting job postings")
    async def get_organization_job_postings(self, arguments: dict[str, Any]) -> CallToolResult:
        parsed = OrganizationIdInput.model_validate(arguments)
        return text_result(await self.client.get_job_postings(parsed.organization_id))

    @tool_boundary("getting organization info")
    async def get_complete_organization_info(self, arguments: dict[str, Any]) -> CallToolResult:
        parsed = OrganizationIdInput.model_validate(arguments)
        return text_result(await self.client.get_organization_info(parsed.organization_id))
