# solodit_mcp/server.py
from __future__ import annotations

from typing import Annotated, List, Optional

from fastmcp import FastMCP
from pydantic import Field
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from . import findings
from .models import Impact, ReportedWindow, SearchParameters, SortDirection, SortField
from .settings import settings
from .solodit_client import SoloditClient

# -------------------- FastMCP server config --------------------
mcp = FastMCP("Solodit MCP")


# -------------------- Lazy Solodit client --------------------
_client: SoloditClient | None = None


def _get_client() -> SoloditClient:
    global _client
    if _client is None:
        _client = SoloditClient.from_settings(settings)
    return _client


# -------------------- Tools --------------------
#
# search_findings: discovery by keyword, severity, firm, tag, protocol, finder...
# get_finding_by_id: full content of one finding when its ID or slug is known.
#
@mcp.tool(
    name="search_findings",
    description="Search Solodit for smart contract security findings and vulnerabilities. You can filter by keywords, impact level, audit firms, tags, protocols, and more.",
)
async def search_findings(
    keywords: Annotated[Optional[str], "Search keywords to find in title and content"] = None,
    impact: Annotated[Optional[List[Impact]], "Filter by impact level (severity)"] = None,
    firms: Annotated[Optional[List[str]], "Filter by audit firm names (e.g., Cyfrin, Sherlock, Code4rena)"] = None,
    tags: Annotated[Optional[List[str]], "Filter by vulnerability tags (e.g., Reentrancy, Oracle, Access Control)"] = None,
    protocol: Annotated[Optional[str], "Filter by protocol name (partial match)"] = None,
    protocolCategory: Annotated[Optional[List[str]], "Filter by protocol categories (e.g., DeFi, NFT, Lending)"] = None,
    forked: Annotated[Optional[List[str]], "Filter by the protocol a codebase was forked from (e.g., Uniswap V2, Compound)"] = None,
    languages: Annotated[Optional[List[str]], "Filter by programming languages (e.g., Solidity, Rust, Cairo)"] = None,
    user: Annotated[Optional[str], "Filter by finder/auditor handle (partial match)"] = None,
    minFinders: Annotated[Optional[str], "Minimum number of finders"] = None,
    maxFinders: Annotated[Optional[str], "Maximum number of finders"] = None,
    reportedDays: Annotated[Optional[ReportedWindow], "Filter by time period (30, 60, 90 days, or alltime)"] = None,
    qualityScore: Annotated[Optional[float], Field(ge=0, le=5, description="Minimum quality score (0-5)")] = None,
    rarityScore: Annotated[Optional[float], Field(ge=0, le=5, description="Minimum rarity score (0-5)")] = None,
    sortField: Annotated[Optional[SortField], "Sort by field (default: Recency)"] = None,
    sortDirection: Annotated[Optional[SortDirection], "Sort direction (default: Desc)"] = None,
    page: Annotated[Optional[int], Field(ge=1, description="Page number (default: 1)")] = None,
    pageSize: Annotated[Optional[int], Field(ge=1, le=100, description="Results per page (default: 20, max: 100)")] = None,
) -> str:
    """Search Solodit findings.
    Query the Solodit database of smart contract audit findings collected from
    audit firms and contest platforms.

    **Filters** (all optional, combined with AND):
    - `keywords`: free text matched against title and content
    - `impact`: any of HIGH, MEDIUM, LOW, GAS
    - `firms`, `tags`, `protocolCategory`, `forked`, `languages`: lists of names
    - `protocol`, `user`: partial matches on protocol name and finder handle
    - `minFinders` / `maxFinders`: bounds on how many auditors reported the issue
      (few finders usually means a rarer bug)
    - `reportedDays`: 30, 60, 90 or alltime
    - `qualityScore` / `rarityScore`: minimum scores on a 0-5 scale

    **Sorting and paging:** `sortField` (Recency, Quality, Rarity), `sortDirection`
    (Desc, Asc), `page` (from 1), `pageSize` (1-100, default 20).

    **Use cases:**
    - "Recent high severity oracle bugs": impact=["HIGH"], tags=["Oracle"], reportedDays="30"
    - "Rare reentrancy findings": tags=["Reentrancy"], maxFinders="1", sortField="Rarity"
    - "What did Cyfrin find in lending protocols?": firms=["Cyfrin"], protocolCategory=["Lending"]

    Endpoint:
      POST /findings

    Auth:
      X-Cyfrin-API-Key: <key>

    Request body:
      {
        "page": 1,
        "pageSize": 20,
        "filters": {
          "keywords": "reentrancy",
          "impact": ["HIGH"],
          "firms": [{"value": "Cyfrin"}],
          "reported": {"value": "30"}
        }
      }

    Returns:
      Text summary (total results, page, query time, rate limit) followed by one
      block per finding with ID, slug, protocol, firm, scores, finders, tags,
      source link and a summary or content excerpt.
    """
    params = SearchParameters(
        keywords=keywords,
        impact=impact,
        firms=firms,
        tags=tags,
        protocol=protocol,
        protocolCategory=protocolCategory,
        forked=forked,
        languages=languages,
        user=user,
        minFinders=minFinders,
        maxFinders=maxFinders,
        reportedDays=reportedDays,
        qualityScore=qualityScore,
        rarityScore=rarityScore,
        sortField=sortField,
        sortDirection=sortDirection,
        page=page,
        pageSize=pageSize,
    )
    return await findings.search_findings(_get_client(), params)


@mcp.tool(
    name="get_finding_by_id",
    description="Get detailed information about a specific finding by its ID or slug",
)
async def get_finding_by_id(
    keywords: Annotated[str, "The finding ID or slug to search for"],
) -> str:
    """Fetch one finding with its full content.

    Use when an ID or slug is already known (e.g. from a search_findings
    result). Issues a single-result search (page=1, pageSize=1) with the value
    as keywords and renders the full, untruncated content.

    Returns:
      Detailed text for the finding, or "No finding found with ID or slug: ..."
      when nothing matches.
    """
    return await findings.get_finding_by_id(_get_client(), keywords)


@mcp.resource("health://ready")
def health_ready() -> str:
    return "ok"


@mcp.custom_route("/health", methods=["GET"])
async def health_check(request: Request) -> PlainTextResponse:
    return PlainTextResponse("OK")
