"""Tool operations: build the request, query Solodit, render the answer."""
from __future__ import annotations

import logging

from .filters import build_request, lookup_request
from .formatting import format_finding_detail, format_not_found, format_search_results
from .models import SearchParameters
from .solodit_client import SoloditClient

logger = logging.getLogger(__name__)


async def search_findings(client: SoloditClient, params: SearchParameters) -> str:
    request = build_request(params)
    response = await client.search_findings(request)
    logger.info(
        "search_findings: %d of %d results (page %d)",
        len(response.findings),
        response.metadata.totalResults,
        request.page,
    )
    return format_search_results(response)


async def get_finding_by_id(client: SoloditClient, keywords: str) -> str:
    response = await client.search_findings(lookup_request(keywords))
    if not response.findings:
        return format_not_found(keywords)
    return format_finding_detail(response.findings[0])
