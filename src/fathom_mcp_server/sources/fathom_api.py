"""Fathom external API meeting source.

Talks to the Fathom REST API with httpx. Each endpoint has exactly one
method; the transcript is fetched directly (no callback destination).
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx
from pydantic import ValidationError

from ..config import AppConfig
from ..errors import (
    MalformedResponseError,
    NotFoundError,
    TimeoutErrorApp,
    UpstreamAuthError,
    UpstreamError,
)
from ..logging import get_logger
from ..meeting_source import MeetingSource
from ..schemas import MeetingListPage, TranscriptResponse

logger = get_logger(__name__)


class FathomApiSource(MeetingSource):
    """Meeting source backed by the Fathom external API.

    Args:
        api_key: Value for the `X-Api-Key` header. When None the header is
            omitted and Fathom answers 401, which surfaces as a tool error.
        api_base: Base URL, e.g. https://api.fathom.ai/external/v1.
        timeout_seconds: Transport timeout for list and transcript calls.
        transport: Optional httpx transport (used by tests).
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        api_base: str,
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if api_key:
            headers["X-Api-Key"] = api_key
        self._client = httpx.AsyncClient(
            base_url=api_base.rstrip("/"),
            headers=headers,
            timeout=timeout_seconds,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls, config: AppConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> FathomApiSource:
        """Alternative constructor from application config."""
        return cls(
            config.api_key_value,
            api_base=config.api_base,
            timeout_seconds=config.request_timeout_seconds,
            transport=transport,
        )

    # ---------------------- Endpoints ----------------------

    async def list_meetings(
        self,
        *,
        cursor: str = "",
        include_summary: bool = False,
        include_transcript: bool = False,
    ) -> MeetingListPage:
        params: Dict[str, Any] = {
            "include_summary": _flag(include_summary),
            "include_transcript": _flag(include_transcript),
        }
        if cursor:
            params["cursor"] = cursor
        body = await self._get_json("/meetings", params=params)
        try:
            return MeetingListPage.model_validate(body)
        except ValidationError as exc:
            raise MalformedResponseError(
                "Unexpected response shape from meetings endpoint",
                {"errors": exc.errors(include_url=False)},
            ) from exc

    async def get_summary(
        self, recording_id: int, *, timeout: Optional[float] = None
    ) -> Dict[str, Any]:
        body = await self._get_json(
            f"/recordings/{recording_id}/summary",
            timeout=timeout,
            context={"recording_id": recording_id},
        )
        if not isinstance(body, dict):
            raise MalformedResponseError(
                "Summary response is not a JSON object",
                {"recording_id": recording_id},
            )
        summary = body.get("summary", body)
        if not isinstance(summary, dict):
            raise MalformedResponseError(
                "Summary field is not a JSON object",
                {"recording_id": recording_id},
            )
        return summary

    async def get_transcript(self, recording_id: int) -> TranscriptResponse:
        body = await self._get_json(
            f"/recordings/{recording_id}/transcript",
            context={"recording_id": recording_id},
        )
        if not isinstance(body, dict) or not isinstance(body.get("transcript"), list):
            keys = list(body.keys()) if isinstance(body, dict) else None
            raise MalformedResponseError(
                "Transcript response has no transcript list",
                {"recording_id": recording_id, "keys": keys},
            )
        try:
            return TranscriptResponse.model_validate(body)
        except ValidationError as exc:
            raise MalformedResponseError(
                "Unexpected transcript segment shape",
                {"recording_id": recording_id, "errors": exc.errors(include_url=False)},
            ) from exc

    async def aclose(self) -> None:
        await self._client.aclose()

    # ---------------------- Transport ----------------------

    async def _get_json(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        timeout: Optional[float] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Any:
        details: Dict[str, Any] = {"path": path, **(context or {})}
        kwargs: Dict[str, Any] = {"params": params}
        if timeout is not None:
            kwargs["timeout"] = timeout
        try:
            response = await self._client.get(path, **kwargs)
        except httpx.TimeoutException as exc:
            raise TimeoutErrorApp(
                f"Request to {path} timed out", {**details, "timeout": timeout}
            ) from exc
        except httpx.RequestError as exc:
            raise UpstreamError(f"Connection error: {exc}", details) from exc

        logger.debug("fathom response", path=path, status_code=response.status_code)
        if response.status_code in (401, 403):
            raise UpstreamAuthError(
                "Fathom rejected the API key; check FATHOM_API_KEY",
                {**details, "status_code": response.status_code},
            )
        if response.status_code == 404:
            raise NotFoundError(f"Not found: {path}", details)
        if response.is_error:
            raise UpstreamError(
                f"Fathom API returned HTTP {response.status_code}",
                {**details, "status_code": response.status_code, "body": response.text[:200]},
            )

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError("Response is not valid JSON", details) from exc


def _flag(value: bool) -> str:
    return "true" if value else "false"
