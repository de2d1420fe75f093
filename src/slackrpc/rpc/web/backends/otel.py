from typing import Sequence

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode, Tracer

from slackrpc.rpc.web.decorators import WebRequestSender


class TracedWebRequestSender(WebRequestSender):
    """Wraps a sender so each send runs in its own span."""

    def __init__(self, sender: WebRequestSender, tracer: Tracer | None = None):
        self.sender = sender
        self.tracer = tracer or trace.get_tracer(__name__)

    async def send(self, url: str, params: Sequence[tuple[str, str]]) -> str:
        method = url.rstrip("/").rsplit("/", 1)[-1]

        with self.tracer.start_as_current_span(
            f"slack {method}",
            kind=trace.SpanKind.CLIENT,
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            span.set_attribute("url.full", url)
            span.set_attribute("slack.method", method)
            # Only names; values include the token.
            span.set_attribute("slack.params", [name for name, _ in params])

            try:
                body = await self.sender.send(url, params)
            except Exception as err:
                span.record_exception(err)
                span.set_status(Status(StatusCode.ERROR, str(err)))
                raise

            span.set_attribute("http.response.body.size", len(body))
            return body
