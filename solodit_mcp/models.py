from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Impact = Literal["HIGH", "MEDIUM", "LOW", "GAS"]
ReportedWindow = Literal["30", "60", "90", "alltime"]
SortField = Literal["Recency", "Quality", "Rarity"]
SortDirection = Literal["Desc", "Asc"]


# ---- Tool input ----
class SearchParameters(BaseModel):
    keywords: str | None = None
    impact: list[Impact] | None = None
    firms: list[str] | None = None
    tags: list[str] | None = None
    protocol: str | None = None
    protocolCategory: list[str] | None = None
    forked: list[str] | None = None
    languages: list[str] | None = None
    user: str | None = None
    minFinders: str | None = None
    maxFinders: str | None = None
    reportedDays: ReportedWindow | None = None
    qualityScore: float | None = Field(default=None, ge=0, le=5)
    rarityScore: float | None = Field(default=None, ge=0, le=5)
    sortField: SortField | None = None
    sortDirection: SortDirection | None = None
    page: int | None = Field(default=None, ge=1)
    pageSize: int | None = Field(default=None, ge=1, le=100)
    model_config = ConfigDict(frozen=True)


# ---- Request ----
class FilterOption(BaseModel):
    value: str
    label: str | None = None
    model_config = ConfigDict(frozen=True)


class ReportedFilter(BaseModel):
    value: ReportedWindow
    label: str | None = None
    model_config = ConfigDict(frozen=True)


class FindingFilters(BaseModel):
    keywords: str | None = None
    impact: list[Impact] | None = None
    firms: list[FilterOption] | None = None
    tags: list[FilterOption] | None = None
    protocol: str | None = None
    protocolCategory: list[FilterOption] | None = None
    forked: list[FilterOption] | None = None
    languages: list[FilterOption] | None = None
    user: str | None = None
    minFinders: str | None = None
    maxFinders: str | None = None
    reported: ReportedFilter | None = None
    qualityScore: float | None = None
    rarityScore: float | None = None
    sortField: SortField | None = None
    sortDirection: SortDirection | None = None
    model_config = ConfigDict(frozen=True)


class FindingsRequest(BaseModel):
    page: int = 1
    pageSize: int = 20
    filters: FindingFilters | None = None
    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict:
        """JSON body for the findings endpoint; unset fields are left out."""
        return self.model_dump(mode="json", exclude_none=True)


# ---- Response ----
class Warden(BaseModel):
    handle: str


class IssueFinder(BaseModel):
    wardens_warden: Warden


class Tag(BaseModel):
    title: str


class IssueTagScore(BaseModel):
    tags_tag: Tag


class Finding(BaseModel):
    id: str | int
    slug: str = ""
    title: str = ""
    content: str = ""
    summary: str | None = None
    impact: str = ""
    quality_score: int | float = 0
    general_score: int | float = 0
    report_date: str | None = None
    firm_name: str | None = None
    protocol_name: str | None = None
    finders_count: int = 0
    source_link: str | None = None
    issues_issue_finders: list[IssueFinder] = Field(default_factory=list)
    issues_issuetagscore: list[IssueTagScore] = Field(default_factory=list)
    model_config = ConfigDict(extra="allow")

    @field_validator("content", mode="before")
    @classmethod
    def _null_content(cls, value):
        return "" if value is None else value

    @field_validator("issues_issue_finders", "issues_issuetagscore", mode="before")
    @classmethod
    def _null_list(cls, value):
        return [] if value is None else value

    @property
    def finder_handles(self) -> list[str]:
        return [f.wardens_warden.handle for f in self.issues_issue_finders]

    @property
    def tag_titles(self) -> list[str]:
        return [t.tags_tag.title for t in self.issues_issuetagscore]


class SearchMetadata(BaseModel):
    totalResults: int
    currentPage: int
    pageSize: int | None = None
    totalPages: int
    elapsed: float


class RateLimit(BaseModel):
    limit: int
    remaining: int
    reset: int | float | None = None


class SearchResponse(BaseModel):
    findings: list[Finding]
    metadata: SearchMetadata
    rateLimit: RateLimit


class ErrorResponse(BaseModel):
    message: str | None = None
    model_config = ConfigDict(extra="allow")
