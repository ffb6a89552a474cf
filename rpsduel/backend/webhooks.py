"""Outbound webhook calls to the chat platform."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from .errors import DownstreamDeliveryFailure

logger = logging.getLogger(__name__)

USER_AGENT = "DiscordBot (rpsduel, 0.1.0)"


@dataclass(frozen=True)
class WebhookRequest:
    endpoint: str
    method: str
    body: dict[str, Any] | None = None


class WebhookClient(Protocol):
    async def send(self, request: WebhookRequest) -> None:
        """Perform the call; raise DownstreamDeliveryFailure when it does not succeed."""


def message_endpoint(app_id: str, token: str | None, message_id: str | None) -> str:
    return f"webhooks/{app_id}/{token}/messages/{message_id}"


class HttpWebhookClient:
    def __init__(
        self,
        api_base_url: str,
        bot_token: str,
        *,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_base_url = api_base_url.rstrip("/")
        self._headers = {
            "Authorization": f"Bot {bot_token}",
            "Content-Type": "application/json; charset=UTF-8",
            "User-Agent": USER_AGENT,
        }
        self._timeout = float(timeout)
        self._transport = transport

    async def send(self, request: WebhookRequest) -> None:
        url = f"{self._api_base_url}/{request.endpoint.lstrip('/')}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.request(request.method, url, headers=self._headers, json=request.body)
        except httpx.HTTPError as exc:
            raise DownstreamDeliveryFailure(f"{request.method} {request.endpoint} failed: {exc}") from exc
        if response.is_error:
            raise DownstreamDeliveryFailure(
                f"{request.method} {request.endpoint} -> {response.status_code}: {response.text}"
            )


async def deliver_best_effort(client: WebhookClient, request: WebhookRequest) -> bool:
    """Send ``request`` and log, never raise, on failure."""
    try:
        await client.send(request)
    except Exception:
        logger.warning("best-effort %s %s failed", request.method, request.endpoint, exc_info=True)
        return False
    return True
