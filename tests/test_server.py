"""
Tests for the MCP server wiring.
"""

from unittest.mock import AsyncMock, patch

from starlette.testclient import TestClient

from solodit_mcp import server
from solodit_mcp.models import SearchParameters
from solodit_mcp.solodit_client import SoloditClient


def test_health_route():
    from asgi import app

    response = TestClient(app).get("/health")
    assert response.status_code == 200
    assert response.text == "OK"


def test_health_resource():
    resource = server.health_ready
    fn = getattr(resource, "fn", resource)
    assert fn() == "ok"


def test_client_built_once_from_settings():
    with patch.object(server, "_client", None), patch.object(
        server.settings, "solodit_api_key", "abc"
    ):
        first = server._get_client()
        second = server._get_client()

    assert isinstance(first, SoloditClient)
    assert first is second
    assert first.api_key == "abc"


async def test_get_finding_by_id_delegates():
    fake = AsyncMock(return_value="rendered")
    with patch.object(server, "_client", object()), patch.object(
        server.findings, "get_finding_by_id", fake
    ):
        tool = server.get_finding_by_id
        fn = getattr(tool, "fn", tool)
        assert await fn("some-slug") == "rendered"

    fake.assert_awaited_once()
    assert fake.await_args.args[1] == "some-slug"


async def test_search_findings_passes_every_argument():
    arguments = {
        "keywords": "oracle",
        "impact": ["HIGH", "LOW"],
        "firms": ["Cyfrin"],
        "tags": ["Oracle"],
        "protocol": "lend",
        "protocolCategory": ["Lending"],
        "forked": ["Compound"],
        "languages": ["Solidity"],
        "user": "alice",
        "minFinders": "1",
        "maxFinders": "4",
        "reportedDays": "60",
        "qualityScore": 3.5,
        "rarityScore": 2.0,
        "sortField": "Quality",
        "sortDirection": "Asc",
        "page": 3,
        "pageSize": 25,
    }
    fake = AsyncMock(return_value="rendered")
    with patch.object(server, "_client", object()), patch.object(
        server.findings, "search_findings", fake
    ):
        tool = server.search_findings
        fn = getattr(tool, "fn", tool)
        assert await fn(**arguments) == "rendered"

    params = fake.await_args.args[1]
    assert isinstance(params, SearchParameters)
    assert params.model_dump() == arguments


async def test_search_findings_defaults_leave_everything_unset():
    fake = AsyncMock(return_value="rendered")
    with patch.object(server, "_client", object()), patch.object(
        server.findings, "search_findings", fake
    ):
        tool = server.search_findings
        fn = getattr(tool, "fn", tool)
        await fn()

    params = fake.await_args.args[1]
    assert params.model_dump(exclude_none=True) == {}
