# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Tests for the bundled senders.
"""

from typing import Callable
from urllib.parse import parse_qsl

import httpx
import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)
from opentelemetry.trace import StatusCode, Tracer

from slackrpc.methods.channels import ArchiveError, ChannelsClient
from slackrpc.rpc.web.backends.httpx import HTTPXWebRequestSender
from slackrpc.rpc.web.backends.otel import TracedWebRequestSender
from slackrpc.rpc.web.decorators import (
    RequestNetworkError,
    TimeoutException,
    UnexpectedStatusError,
    WebApiClientBuilder,
)
from slackrpc.rpc.web.errors import ErrorKind

from .conftest import FakeSender

URL = "https://slack.com/api/channels.archive"
PARAMS = [("token", "xoxb-1"), ("channel", "C123"), ("validate", "1")]


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestHTTPXWebRequestSender:

    @pytest.mark.asyncio
    async def test_posts_form_encoded_params(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text='{"ok": true}')

        async with mock_client(handler) as client:
            body = await HTTPXWebRequestSender(client=client).send(URL, PARAMS)

        assert body == '{"ok": true}'
        assert seen[0].method == "POST"
        assert str(seen[0].url) == URL
        assert seen[0].headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert parse_qsl(seen[0].content.decode()) == PARAMS

    @pytest.mark.asyncio
    async def test_error_replies_are_returned_as_text(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text='{"ok": false, "error": "not_authed"}')

        async with mock_client(handler) as client:
            body = await HTTPXWebRequestSender(client=client).send(URL, PARAMS)

        assert "not_authed" in body

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(429, text="rate limited")

        async with mock_client(handler) as client:
            with pytest.raises(UnexpectedStatusError) as exc_info:
                await HTTPXWebRequestSender(client=client).send(URL, PARAMS)

        assert exc_info.value.status_code == 429
        assert exc_info.value.body == b"rate limited"

    @pytest.mark.asyncio
    async def test_timeout_is_translated(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        async with mock_client(handler) as client:
            with pytest.raises(TimeoutException):
                await HTTPXWebRequestSender(client=client).send(URL, PARAMS)

    @pytest.mark.asyncio
    async def test_network_error_is_translated(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with mock_client(handler) as client:
            with pytest.raises(RequestNetworkError) as exc_info:
                await HTTPXWebRequestSender(client=client).send(URL, PARAMS)

        assert exc_info.value.url == URL

    @pytest.mark.asyncio
    async def test_transport_failure_reaches_caller_as_client_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        async with mock_client(handler) as client:
            channels = WebApiClientBuilder(
                HTTPXWebRequestSender(client=client), "t"
            ).build(ChannelsClient)

            with pytest.raises(ArchiveError) as exc_info:
                await channels.archive(channel="C1")  # type: ignore[call-arg]

        assert exc_info.value.kind is ErrorKind.CLIENT
        assert isinstance(exc_info.value.cause, UnexpectedStatusError)


@pytest.fixture
def exporter_and_tracer() -> tuple[InMemorySpanExporter, Tracer]:
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    return exporter, provider.get_tracer("tests")


class TestTracedWebRequestSender:

    @pytest.mark.asyncio
    async def test_span_wraps_send(
        self, exporter_and_tracer: tuple[InMemorySpanExporter, Tracer]
    ) -> None:
        exporter, tracer = exporter_and_tracer
        inner = FakeSender('{"ok": true}')

        body = await TracedWebRequestSender(inner, tracer=tracer).send(URL, PARAMS)

        assert body == '{"ok": true}'
        assert inner.calls == [(URL, PARAMS)]

        (span,) = exporter.get_finished_spans()
        assert span.name == "slack channels.archive"
        assert span.attributes is not None
        assert span.attributes["slack.method"] == "channels.archive"
        assert tuple(span.attributes["slack.params"]) == ("token", "channel", "validate")  # type: ignore[arg-type]
        assert "xoxb-1" not in str(dict(span.attributes))

    @pytest.mark.asyncio
    async def test_failure_marks_span_and_reraises(
        self, exporter_and_tracer: tuple[InMemorySpanExporter, Tracer]
    ) -> None:
        exporter, tracer = exporter_and_tracer
        failure = ConnectionError("down")

        with pytest.raises(ConnectionError):
            await TracedWebRequestSender(
                FakeSender(error=failure), tracer=tracer
            ).send(URL, PARAMS)

        (span,) = exporter.get_finished_spans()
        assert span.status.status_code is StatusCode.ERROR
        assert span.events[0].name == "exception"
