"""Tests for tool registration on the FastMCP server."""

from __future__ import annotations

import json

import httpx
import pytest
from mcp.shared.memory import create_connected_server_and_client_session
from respx import MockRouter

from apollo_mcp.config import DEFAULT_BASE_URL as BASE_URL
from apollo_mcp.core.client import ApolloClient
from apollo_mcp.core.models import PeopleFilters, PersonIdentifier
from apollo_mcp.server import _arguments, build_server

EXPECTED_TOOLS = {
    "apollo_search_people",
    "apollo_search_companies",
    "apollo_enrich_person",
    "apollo_enrich_company",
    "apollo_bulk_enrich_people",
    "apollo_bulk_enrich_organizations",
    "apollo_get_organization_job_postings",
    "apollo_get_complete_organization_info",
    "apollo_search_news_articles",
}


@pytest.mark.asyncio
async def test_registers_all_tools(client: ApolloClient) -> None:
    server = build_server(client)

    tools = await server.list_tools()

    assert {t.name for t in tools} == EXPECTED_TOOLS
    for tool in tools:
        assert tool.annotations.readOnlyHint is True
        assert tool.description


@pytest.mark.asyncio
async def test_required_arguments_in_schema(client: ApolloClient) -> None:
    tools = {t.name: t for t in await build_server(client).list_tools()}

    assert tools["apollo_get_organization_job_postings"].inputSchema["required"] == ["organization_id"]
    assert tools["apollo_bulk_enrich_people"].inputSchema["required"] == ["people"]
    assert "required" not in tools["apollo_search_people"].inputSchema


def test_servers_do_not_share_state(config) -> None:
    first = build_server(ApolloClient(config))
    second = build_server(ApolloClient(config))

    assert first is not second


def test_arguments_drop_unset_and_dump_models() -> None:
    args = _arguments(
        query=None,
        filters=PeopleFilters(titles=["CTO"]),
        people=[PersonIdentifier(email="a@acme.io")],
        page=2,
    )

    assert args == {"filters": {"titles": ["CTO"]}, "people": [{"email": "a@acme.io"}], "page": 2}


@pytest.mark.asyncio
async def test_call_tool_returns_raw_payload(client: ApolloClient, respx_mock: MockRouter) -> None:
    mocked = {"person": {"id": "p1", "email": "tim@apollo.io"}}
    route = respx_mock.post(url__startswith=f"{BASE_URL}/people/match").mock(
        return_value=httpx.Response(200, json=mocked)
    )

    async with create_connected_server_and_client_session(build_server(client)._mcp_server) as session:
        result = await session.call_tool("apollo_enrich_person", {"email": "tim@apollo.io"})

    assert result.isError is False
    assert json.loads(result.content[0].text) == mocked
    assert json.loads(route.calls.last.request.content) == {"email": "tim@apollo.io"}


@pytest.mark.asyncio
async def test_call_tool_with_wrong_argument_type_is_error(client: ApolloClient, respx_mock: MockRouter) -> None:
    async with create_connected_server_and_client_session(build_server(client)._mcp_server) as session:
        result = await session.call_tool("apollo_search_people", {"per_page": "x"})

    assert result.isError is True
    assert len(respx_mock.calls) == 0


@pytest.mark.asyncio
async def test_lifespan_configures_logging(client: ApolloClient, monkeypatch: pytest.MonkeyPatch) -> None:
    levels: list[str] = []
    monkeypatch.setattr("apollo_mcp.server.configure_logging", levels.append)

    async with create_connected_server_and_client_session(build_server(client)._mcp_server) as session:
        await session.list_tools()

    assert levels == ["INFO"]
