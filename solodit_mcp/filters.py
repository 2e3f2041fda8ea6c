"""Translate tool arguments into the findings endpoint request shape."""
from __future__ import annotations

from typing import Any

from .models import (
    FilterOption,
    FindingFilters,
    FindingsRequest,
    ReportedFilter,
    SearchParameters,
)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20

# Copied to the filters object as-is.
_VERBATIM_FIELDS = (
    "keywords",
    "impact",
    "protocol",
    "user",
    "minFinders",
    "maxFinders",
    "qualityScore",
    "rarityScore",
    "sortField",
    "sortDirection",
)

# Free-text lists sent as [{"value": ...}, ...].
_OPTION_FIELDS = ("firms", "tags", "protocolCategory", "forked", "languages")


def build_filters(params: SearchParameters) -> FindingFilters | None:
    """
    Collect the filter fields the caller supplied.

    A field counts as supplied when it is not None, so 0, "0" and empty lists
    are forwarded. Returns None when nothing was supplied so the request
    carries no ``filters`` key at all.
    """
    fields: dict[str, Any] = {}

    for name in _VERBATIM_FIELDS:
        value = getattr(params, name)
        if value is not None:
            fields[name] = value

    for name in _OPTION_FIELDS:
        values = getattr(params, name)
        if values is not None:
            fields[name] = [FilterOption(value=v) for v in values]

    if params.reportedDays is not None:
        fields["reported"] = ReportedFilter(value=params.reportedDays)

    if not fields:
        return None
    return FindingFilters(**fields)


def build_request(params: SearchParameters) -> FindingsRequest:
    return FindingsRequest(
        page=params.page if params.page is not None else DEFAULT_PAGE,
        pageSize=params.pageSize if params.pageSize is not None else DEFAULT_PAGE_SIZE,
        filters=build_filters(params),
    )


def lookup_request(keywords: str) -> FindingsRequest:
    """Single-result request used to fetch one finding by ID or slug."""
    return FindingsRequest(page=1, pageSize=1, filters=FindingFilters(keywords=keywords))
