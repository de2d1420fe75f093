# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Web API RPC Module
"""
This module provides the generic Web API call pattern:
- Method family and method decorators (@WebApiFamily, @WebMethod)
- Request and response base models (WebApiRequest, WebApiResponse)
- Form parameter encoding and the `call` coroutine
- Client builder turning a decorated protocol into a working client
- Typed errors (WebMethodError, ErrorCode, ErrorKind)
"""

from .backends.httpx import HTTPXWebRequestSender
from .backends.otel import TracedWebRequestSender
from .decorators import (
    RequestNetworkError,
    TimeoutException,
    UnexpectedStatusError,
    WebApiClientBuilder,
    WebApiFamily,
    WebApiRequest,
    WebApiResponse,
    WebMethod,
    WebMethodSpec,
    WebRequestSender,
    WebTransportError,
    call,
    encode_param,
    encode_params,
    inspect_web_methods,
)
from .errors import ErrorCode, ErrorKind, WebMethodError

__all__ = [
    # Decorators
    "WebApiFamily",
    "WebMethod",
    # Models
    "WebApiRequest",
    "WebApiResponse",
    # Call pattern
    "call",
    "encode_param",
    "encode_params",
    "inspect_web_methods",
    "WebMethodSpec",
    "WebApiClientBuilder",
    # Errors
    "ErrorCode",
    "ErrorKind",
    "WebMethodError",
    # Transport
    "WebRequestSender",
    "WebTransportError",
    "TimeoutException",
    "RequestNetworkError",
    "UnexpectedStatusError",
    "HTTPXWebRequestSender",
    "TracedWebRequestSender",
]
