"""Render Solodit findings as markdown-ish text for tool results."""
from __future__ import annotations

from .models import Finding, SearchResponse

PLACEHOLDER = "N/A"
EXCERPT_LENGTH = 500
TRUNCATION_MARKER = "..."


def _or_placeholder(value: object | None) -> str:
    if value is None or value == "":
        return PLACEHOLDER
    return str(value)


def _score(value: int | float) -> str:
    # 4.0 renders as 4
    return f"{value:g}"


def _joined(values: list[str]) -> str:
    return ", ".join(values) or PLACEHOLDER


def excerpt(finding: Finding) -> str:
    """Summary when present, otherwise the head of the content."""
    if finding.summary:
        return finding.summary
    if len(finding.content) >= EXCERPT_LENGTH:
        return finding.content[:EXCERPT_LENGTH] + TRUNCATION_MARKER
    return finding.content


def format_fields(finding: Finding, *, include_impact: bool = False) -> str:
    lines = [
        f"- ID: {finding.id}",
        f"- Slug: {finding.slug}",
    ]
    if include_impact:
        lines.append(f"- Impact: {finding.impact}")
    lines += [
        f"- Protocol: {_or_placeholder(finding.protocol_name)}",
        f"- Audit Firm: {_or_placeholder(finding.firm_name)}",
        f"- Quality Score: {_score(finding.quality_score)}/5",
        f"- Rarity Score: {_score(finding.general_score)}/5",
        f"- Report Date: {_or_placeholder(finding.report_date)}",
        f"- Finders: {_joined(finding.finder_handles)} ({finding.finders_count} total)",
        f"- Tags: {_joined(finding.tag_titles)}",
        f"- Source: {_or_placeholder(finding.source_link)}",
    ]
    return "\n".join(lines)


def format_finding(finding: Finding) -> str:
    """One search-result block with a truncated body."""
    return "\n\n".join(
        [
            f"## [{finding.impact}] {finding.title}",
            format_fields(finding),
            excerpt(finding),
            "---",
        ]
    )


def format_finding_detail(finding: Finding) -> str:
    """Full view of a single finding, content untruncated."""
    return "\n\n".join(
        [
            f"# {finding.title}",
            format_fields(finding, include_impact=True),
            "---",
            "## Content",
            finding.content,
        ]
    ).strip()


def format_search_results(response: SearchResponse) -> str:
    meta = response.metadata
    rate = response.rateLimit
    header = "\n".join(
        [
            "# Solodit Search Results",
            "",
            f"Total Results: {meta.totalResults}",
            f"Page: {meta.currentPage} of {meta.totalPages}",
            f"Results on this page: {len(response.findings)}",
            f"Query Time: {meta.elapsed:.3f}s",
            f"Rate Limit: {rate.remaining}/{rate.limit} remaining",
            "",
            "---",
        ]
    )
    blocks = [format_finding(f) for f in response.findings]
    return "\n\n".join([header, *blocks]).strip()


def format_not_found(query: str) -> str:
    return f"No finding found with ID or slug: {query}"
