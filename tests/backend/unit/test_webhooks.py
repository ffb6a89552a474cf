import asyncio
import json

import httpx
import pytest

from rpsduel.backend.errors import DownstreamDeliveryFailure
from rpsduel.backend.webhooks import HttpWebhookClient, WebhookRequest, deliver_best_effort, message_endpoint


def test_message_endpoint_format() -> None:
    assert message_endpoint("app", "tok", "msg") == "webhooks/app/tok/messages/msg"


def test_http_client_sends_method_body_and_auth() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    client = HttpWebhookClient("http://platform.invalid/api/", "secret", transport=httpx.MockTransport(handler))

    asyncio.run(client.send(WebhookRequest(endpoint="webhooks/a/t/messages/m", method="PATCH", body={"content": "x"})))

    [request] = seen
    assert request.method == "PATCH"
    assert str(request.url) == "http://platform.invalid/api/webhooks/a/t/messages/m"
    assert request.headers["Authorization"] == "Bot secret"
    assert json.loads(request.content) == {"content": "x"}


def test_http_client_raises_on_error_status() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(404, json={"message": "Unknown Message"}))
    client = HttpWebhookClient("http://platform.invalid/api", "secret", transport=transport)

    with pytest.raises(DownstreamDeliveryFailure):
        asyncio.run(client.send(WebhookRequest(endpoint="webhooks/a/t/messages/m", method="DELETE")))


def test_http_client_wraps_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = HttpWebhookClient("http://platform.invalid/api", "secret", transport=httpx.MockTransport(handler))

    with pytest.raises(DownstreamDeliveryFailure):
        asyncio.run(client.send(WebhookRequest(endpoint="x", method="DELETE")))


def test_deliver_best_effort_swallows_and_logs_failures(caplog) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(500))
    client = HttpWebhookClient("http://platform.invalid/api", "secret", transport=transport)

    delivered = asyncio.run(deliver_best_effort(client, WebhookRequest(endpoint="x", method="DELETE")))

    assert delivered is False
    assert "best-effort DELETE x failed" in caplog.text


def test_deliver_best_effort_reports_success() -> None:
    client = HttpWebhookClient(
        "http://platform.invalid/api", "secret", transport=httpx.MockTransport(lambda request: httpx.Response(204))
    )

    assert asyncio.run(deliver_best_effort(client, WebhookRequest(endpoint="x", method="DELETE"))) is True
