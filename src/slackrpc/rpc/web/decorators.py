# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import inspect
import logging
from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Protocol,
    Sequence,
    TypeVar,
    cast,
)

from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError

from slackrpc.config import get_slack_url_for_method
from slackrpc.reflect.decorators import StackableDecorator
from slackrpc.rpc.web.errors import WebMethodError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R", bound="WebApiResponse")

UrlResolver = Callable[[str], str]


class WebApiRequest(BaseModel):
    """
    Base for method arguments.

    Fields are sent in declaration order. A field left as None is not sent at
    all. Use `serialization_alias` when the wire name is not a valid or
    convenient attribute name.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")


class WebApiResponse(BaseModel):
    ok: StrictBool = False
    error: str | None = None


class WebRequestSender(Protocol):
    """Sends one form encoded request and returns the raw reply body."""

    async def send(self, url: str, params: Sequence[tuple[str, str]]) -> str: ...


class WebTransportError(Exception):
    """Base for failures raised by the bundled senders"""


class TimeoutException(WebTransportError):
    """Exception raised when a request times out"""


class RequestNetworkError(WebTransportError):

    def __init__(self, url: str, backend_request: Any = None):
        self.url = url
        self.backend_request = backend_request
        super().__init__(f"Network error while calling {url}")


class UnexpectedStatusError(WebTransportError):

    def __init__(self, url: str, status_code: int, body: bytes):
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(f"Unexpected status {status_code} from {url}")


def encode_param(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def encode_params(token: str, request: WebApiRequest) -> list[tuple[str, str]]:
    params = [("token", token)]
    for name, value in request.model_dump(by_alias=True, exclude_none=True).items():
        params.append((name, encode_param(value)))
    return params


async def call(
    sender: WebRequestSender,
    token: str,
    method: str,
    request: WebApiRequest,
    response_type: type[R],
    error_type: type[WebMethodError[Any]],
    *,
    url_resolver: UrlResolver = get_slack_url_for_method,
) -> R:
    """
    Invoke one Web API method.

    The sender is called exactly once. Its failures, an undecodable reply and
    any ``ok: false`` reply are all raised as `error_type`. A reply with
    ``ok: true`` is returned as is, whatever its ``error`` field says.
    """

    params = encode_params(token, request)
    url = url_resolver(method)

    logger.debug(
        "Calling %s at %s with params %s",
        method,
        url,
        [name for name, _ in params],
    )

    try:
        body = await sender.send(url, params)
    except Exception as err:
        logger.warning("Sender failed while calling %s: %s", method, err)
        raise error_type.client(err) from err

    try:
        response = response_type.model_validate_json(body)
    except ValidationError as err:
        logger.warning("Malformed response from %s: %s", method, err)
        raise error_type.malformed_response(err) from err

    if response.ok:
        logger.debug("Method %s succeeded", method)
        return response

    logger.debug("Method %s reported error %r", method, response.error)
    raise error_type.from_error_code(response.error or "")


class WebApiFamily(StackableDecorator):
    """Class decorator naming the method family, e.g. ``channels``."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix


class WebMethod(StackableDecorator):

    def __init__(self, name: str, errors: type[WebMethodError[Any]]):
        self.name = name
        self.errors = errors


@dataclass(frozen=True)
class WebMethodSpec:
    method: str
    request_type: type[WebApiRequest]
    response_type: type[WebApiResponse]
    error_type: type[WebMethodError[Any]]


def _resolve_spec(
    family: WebApiFamily, mapping: WebMethod, method_call: Callable[..., Any]
) -> WebMethodSpec:
    signature = inspect.signature(method_call, eval_str=True)
    parameters = [*signature.parameters.values()][1:]

    if len(parameters) != 1:
        raise ValueError(
            f"{method_call.__qualname__} must take exactly one request argument"
        )

    request_type = parameters[0].annotation
    response_type = signature.return_annotation

    if not (
        inspect.isclass(request_type) and issubclass(request_type, WebApiRequest)
    ):
        raise ValueError(
            f"{method_call.__qualname__} request must be annotated with a WebApiRequest"
        )
    if not (
        inspect.isclass(response_type) and issubclass(response_type, WebApiResponse)
    ):
        raise ValueError(
            f"{method_call.__qualname__} must return a WebApiResponse subclass"
        )

    return WebMethodSpec(
        method=f"{family.prefix}.{mapping.name}" if family.prefix else mapping.name,
        request_type=request_type,
        response_type=response_type,
        error_type=mapping.errors,
    )


def inspect_web_methods(cls: type) -> list[tuple[str, WebMethodSpec]]:
    family = WebApiFamily.get_last(cls)

    if family is None:
        raise ValueError(f"{cls.__name__} is not a web api family")

    specs: list[tuple[str, WebMethodSpec]] = []
    for attr_name, method_call in inspect.getmembers(cls, predicate=inspect.isfunction):
        if (mapping := WebMethod.get_last(method_call)) is not None:
            specs.append((attr_name, _resolve_spec(family, mapping, method_call)))
    return specs


class WebApiClientBuilder:

    def __init__(
        self,
        sender: WebRequestSender,
        token: str,
        url_resolver: UrlResolver = get_slack_url_for_method,
    ):
        self._sender = sender
        self._token = token
        self._url_resolver = url_resolver

    def create_method(self, spec: WebMethodSpec) -> Callable[..., Awaitable[Any]]:

        async def web_method(
            request: WebApiRequest | None = None, **fields: Any
        ) -> WebApiResponse:
            if request is None:
                request = spec.request_type(**fields)
            elif fields:
                raise TypeError(
                    f"{spec.method} takes either a request or keyword fields, not both"
                )
            elif not isinstance(request, spec.request_type):
                raise TypeError(
                    f"{spec.method} expects {spec.request_type.__name__}, "
                    f"got {type(request).__name__}"
                )

            return await call(
                self._sender,
                self._token,
                spec.method,
                request,
                spec.response_type,
                spec.error_type,
                url_resolver=self._url_resolver,
            )

        web_method.__name__ = spec.method.rsplit(".", 1)[-1]
        web_method.__qualname__ = spec.method
        return web_method

    def build(self, cls: type[T]) -> T:

        class Dummy: ...

        dummy = Dummy()

        for attr_name, spec in inspect_web_methods(cls):
            setattr(dummy, attr_name, self.create_method(spec))

        return cast(T, dummy)


__all__ = [
    "WebApiRequest",
    "WebApiResponse",
    "WebRequestSender",
    "WebTransportError",
    "TimeoutException",
    "RequestNetworkError",
    "UnexpectedStatusError",
    "encode_param",
    "encode_params",
    "call",
    "WebApiFamily",
    "WebMethod",
    "WebMethodSpec",
    "inspect_web_methods",
    "WebApiClientBuilder",
]
