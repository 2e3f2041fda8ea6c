from __future__ import annotations

import logging
from typing import Any, Dict, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .models import ErrorResponse, FindingsRequest, SearchResponse
from .settings import DEFAULT_BASE_URL, Settings

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

API_KEY_ENV = "SOLODIT_API_KEY"
API_KEY_HEADER = "X-Cyfrin-API-Key"
DEFAULT_HEADERS = {
    "User-Agent": "solodit-mcp/1.0",
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class ConfigurationError(RuntimeError):
    pass


class AuthenticationError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__(
            f"{API_KEY_ENV} environment variable is not set. "
            "Please set it to use the Solodit API."
        )


class ApiError(RuntimeError):
    def __init__(self, status: int, message: str = "", reason: str = ""):
        super().__init__(f"Solodit API error ({status}): {message or reason}")
        self.status = status
        self.message = message


def _error_message(response: httpx.Response) -> str:
    """Best-effort ``message`` from an error body; empty when unparseable."""
    try:
        payload = response.json()
    except ValueError:
        return ""
    if not isinstance(payload, dict):
        return ""
    try:
        return ErrorResponse.model_validate(payload).message or ""
    except ValidationError:
        return ""


class SoloditClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "SoloditClient":
        return cls(
            api_key=settings.solodit_api_key,
            base_url=settings.solodit_base_url,
            timeout=settings.solodit_timeout,
        )

    def _headers(self) -> Dict[str, str]:
        if not self.api_key:
            raise AuthenticationError()
        h = DEFAULT_HEADERS.copy()
        h[API_KEY_HEADER] = self.api_key
        return h

    async def _post(self, path: str, json: Dict[str, Any], model: type[T]) -> T:
        headers = self._headers()
        logger.debug("POST %s%s %s", self.base_url, path, json)
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            r = await client.post(path, json=json, headers=headers)
        if not r.is_success:
            message = _error_message(r)
            logger.warning("Solodit API returned %s: %s", r.status_code, message)
            raise ApiError(r.status_code, message, r.reason_phrase)
        try:
            return model.model_validate(r.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Solodit API returned an unexpected body (status %s): %s", r.status_code, e)
            raise ApiError(r.status_code, "", r.reason_phrase) from None

    async def search_findings(self, request: FindingsRequest) -> SearchResponse:
        return await self._post("/findings", request.to_payload(), SearchResponse)
