from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slackrpc.config import (
        SlackWebConfig,
        SlackWebConfigError,
        get_slack_url_for_method,
    )
    from slackrpc.methods.channels import ChannelsClient
    from slackrpc.rpc.web.backends.httpx import HTTPXWebRequestSender
    from slackrpc.rpc.web.backends.otel import TracedWebRequestSender
    from slackrpc.rpc.web.decorators import (
        RequestNetworkError,
        TimeoutException,
        UnexpectedStatusError,
        WebApiClientBuilder,
        WebApiFamily,
        WebApiRequest,
        WebApiResponse,
        WebMethod,
        WebRequestSender,
        WebTransportError,
        call,
    )
    from slackrpc.rpc.web.errors import ErrorCode, ErrorKind, WebMethodError
    from slackrpc.types import Channel, Message, ThreadInfo

    __all__ = [
        "SlackWebConfig",
        "SlackWebConfigError",
        "get_slack_url_for_method",
        "ChannelsClient",
        "HTTPXWebRequestSender",
        "TracedWebRequestSender",
        "RequestNetworkError",
        "TimeoutException",
        "UnexpectedStatusError",
        "WebApiClientBuilder",
        "WebApiFamily",
        "WebApiRequest",
        "WebApiResponse",
        "WebMethod",
        "WebRequestSender",
        "WebTransportError",
        "call",
        "ErrorCode",
        "ErrorKind",
        "WebMethodError",
        "Channel",
        "Message",
        "ThreadInfo",
    ]

__SPEC_PARENT__: str = __spec__.parent  # type: ignore
# A mapping of {<member name>: (package, <module name>, <real name>)}
_dynamic_imports: "dict[str, tuple[str, str, str | None]]" = {
    "SlackWebConfig": (__SPEC_PARENT__, "config", None),
    "SlackWebConfigError": (__SPEC_PARENT__, "config", None),
    "get_slack_url_for_method": (__SPEC_PARENT__, "config", None),
    "ChannelsClient": (__SPEC_PARENT__, "methods.channels", None),
    "HTTPXWebRequestSender": (__SPEC_PARENT__, "rpc.web.backends.httpx", None),
    "TracedWebRequestSender": (__SPEC_PARENT__, "rpc.web.backends.otel", None),
    "RequestNetworkError": (__SPEC_PARENT__, "rpc.web.decorators", None),
    "TimeoutException": (__SPEC_PARENT__, "rpc.web.decorators", None),
    "UnexpectedStatusError": (__SPEC_PARENT__, "rpc.web.decorators", None),
    "WebApiClientBuilder": (__SPEC_PARENT__, "rpc.web.decorators", None),
    "WebApiFamily": (__SPEC_PARENT__, "rpc.web.decorators", None),
    "WebApiRequest": (__SPEC_PARENT__, "rpc.web.decorators", None),
    "WebApiResponse": (__SPEC_PARENT__, "rpc.web.decorators", None),
    "WebMethod": (__SPEC_PARENT__, "rpc.web.decorators", None),
    "WebRequestSender": (__SPEC_PARENT__, "rpc.web.decorators", None),
    "WebTransportError": (__SPEC_PARENT__, "rpc.web.decorators", None),
    "call": (__SPEC_PARENT__, "rpc.web.decorators", None),
    "ErrorCode": (__SPEC_PARENT__, "rpc.web.errors", None),
    "ErrorKind": (__SPEC_PARENT__, "rpc.web.errors", None),
    "WebMethodError": (__SPEC_PARENT__, "rpc.web.errors", None),
    "Channel": (__SPEC_PARENT__, "types", None),
    "Message": (__SPEC_PARENT__, "types", None),
    "ThreadInfo": (__SPEC_PARENT__, "types", None),
}

__all__ = [*_dynamic_imports]


def __getattr__(attr_name: str) -> object:

    dynamic_attr = _dynamic_imports.get(attr_name)
    if dynamic_attr is None:
        raise AttributeError(f"module {__name__!r} has no attribute {attr_name!r}")

    package, module_name, realname = dynamic_attr

    module = import_module(f"{package}.{module_name}", package=package)
    result = getattr(module, attr_name if realname is None else realname)
    globals()[attr_name] = result
    return result


def __dir__() -> "list[str]":
    return list(__all__)
