"""Apollo.io REST API client.

API docs: https://docs.apollo.io/reference
Auth: `x-api-key` header. Errors are classified once and never retried.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..config import ApolloConfig
from .errors import ApolloAuthError, ApolloError, ApolloHTTPError, ApolloRateLimitError

logger = logging.getLogger(__name__)


def raise_for_apollo_status(response: httpx.Response) -> None:
    """Raise the matching ApolloError for a failed response; no-op below 400."""
    status = response.status_code
    if status < 400:
        return

    error: ApolloError
    if status == 401:
        error = ApolloAuthError()
    elif status == 429:
        error = ApolloRateLimitError(response.headers.get("retry-after"))
    else:
        error = ApolloHTTPError(status, response.text)

    logger.warning("Apollo %s %s failed: %s", response.request.method, response.request.url.path, error)
    raise error


class ApolloClient:
    """Thin async wrapper over the Apollo endpoints used by the CLI and server.

    The client does not interpret response bodies: each method returns the
    parsed JSON exactly as Apollo sent it.
    """

    def __init__(self, config: ApolloConfig):
        self._config = config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": self._config.api_key,
        }

    async def _post(self, path: str, body: Any, params: Optional[dict] = None) -> Any:
        logger.debug("POST %s", path)
        async with httpx.AsyncClient(base_url=self._config.base_url, headers=self._headers()) as client:
            response = await client.post(path, json=body, params=params)
        raise_for_apollo_status(response)
        return response.json()

    async def _get(self, path: str) -> Any:
        logger.debug("GET %s", path)
        async with httpx.AsyncClient(base_url=self._config.base_url, headers=self._headers()) as client:
            response = await client.get(path)
        raise_for_apollo_status(response)
        return response.json()

    # ─── Search ──────────────────────────────────────────────────────────────

    async def search_people(self, params: dict[str, Any]) -> Any:
        """People search (`mixed_people/api_search`)."""
        return await self._post("/mixed_people/api_search", params)

    async def search_companies(self, params: dict[str, Any]) -> Any:
        """Organization search (`mixed_companies/search`)."""
        return await self._post("/mixed_companies/search", params)

    async def search_news(self, params: dict[str, Any]) -> Any:
        return await self._post("/news_articles/search", params)

    # ─── Enrichment ──────────────────────────────────────────────────────────

    async def match_person(
        self,
        params: dict[str, Any],
        reveal_personal_emails: bool = False,
        reveal_phone_number: bool = False,
    ) -> Any:
        """Enrich a single person.

        Args:
            params: Identifying fields (email, linkedin_url, name, company...).
            reveal_personal_emails: Include personal emails in the match.
            reveal_phone_number: Include phone numbers in the match.

        The reveal flags travel as query parameters, not body fields.
        """
        return await self._post(
            "/people/match",
            params,
            params=_reveal_params(reveal_personal_emails, reveal_phone_number),
        )

    async def match_company(self, params: dict[str, Any]) -> Any:
        return await self._post("/organizations/enrich", params)

    async def bulk_match_people(
        self,
        params: dict[str, Any],
        reveal_personal_emails: bool = False,
        reveal_phone_number: bool = False,
    ) -> Any:
        """Enrich several people in one request. Reveal flags as in match_person."""
        return await self._post(
            "/people/bulk_match",
            params,
            params=_reveal_params(reveal_personal_emails, reveal_phone_number),
        )

    async def bulk_match_organizations(self, params: dict[str, Any]) -> Any:
        return await self._post("/organizations/bulk_enrich", params)

    # ─── Organizations ───────────────────────────────────────────────────────

    async def get_job_postings(self, organization_id: str) -> Any:
        return await self._get(f"/organizations/{organization_id}/job_postings")

    async def get_organization_info(self, organization_id: str) -> Any:
        return await self._get(f"/organizations/{organization_id}")


def _reveal_params(reveal_personal_emails: bool, reveal_phone_number: bool) -> dict[str, str]:
    return {
        "reveal_personal_emails": "true" if reveal_personal_emails else "false",
        "reveal_phone_number": "true" if reveal_phone_number else "false",
    }
