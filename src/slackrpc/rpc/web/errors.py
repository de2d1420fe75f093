# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Error model shared by every Web API method.

Each method owns a closed `ErrorCode` enumeration of the failure codes the
server documents for it, and an exception class (a `WebMethodError` subclass)
bound to that enumeration. A raised error always has one of four kinds, see
`ErrorKind`.
"""

from enum import Enum
from typing import Any, ClassVar, Generic, Self, TypeVar


class ErrorCode(Enum):
    """
    Base for per-method error code tables.

    Members are declared as ``NAME = ("wire_code", "Human readable text.")``;
    the member value is the wire code and the text is kept as `description`.
    """

    description: str

    def __new__(cls, code: str, description: str) -> Self:
        obj = object.__new__(cls)
        obj._value_ = code
        obj.description = description
        return obj

    @property
    def code(self) -> str:
        return str(self.value)

    @classmethod
    def resolve(cls, code: str) -> Self | None:
        try:
            return cls(code)
        except ValueError:
            return None

    def __str__(self) -> str:
        return f"{self.value}: {self.description}"


class ErrorKind(Enum):
    KNOWN = "known"
    """The server reported a code documented for the method."""

    UNKNOWN = "unknown"
    """The server reported a code this library does not know."""

    MALFORMED_RESPONSE = "malformed_response"
    """The reply body was not the expected JSON object."""

    CLIENT = "client"
    """The sender failed before a reply body was available."""


C = TypeVar("C", bound=ErrorCode)


class WebMethodError(Exception, Generic[C]):
    """
    Failure of one Web API method call.

    Subclasses set `codes` to the method's `ErrorCode` enumeration. Use the
    `from_error_code`, `malformed_response` and `client` constructors rather
    than calling the class directly.
    """

    codes: ClassVar[type[ErrorCode]]

    def __init__(
        self,
        kind: ErrorKind,
        *,
        code: C | None = None,
        error: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.kind = kind
        self.code = code
        self.error = error
        self.cause = cause
        super().__init__(self.description)

    @classmethod
    def from_error_code(cls, error: str) -> Self:
        code = cls.codes.resolve(error)
        if code is None:
            return cls(ErrorKind.UNKNOWN, error=error)
        return cls(ErrorKind.KNOWN, code=code, error=error)  # type: ignore[arg-type]

    @classmethod
    def malformed_response(cls, cause: BaseException) -> Self:
        return cls(ErrorKind.MALFORMED_RESPONSE, cause=cause)

    @classmethod
    def client(cls, cause: BaseException) -> Self:
        return cls(ErrorKind.CLIENT, cause=cause)

    @property
    def description(self) -> str:
        if self.kind is ErrorKind.KNOWN and self.code is not None:
            return str(self.code)
        if self.kind is ErrorKind.UNKNOWN:
            return self.error or ""
        return str(self.cause)

    def __repr__(self) -> str:
        detail: Any = {
            ErrorKind.KNOWN: self.code,
            ErrorKind.UNKNOWN: self.error,
        }.get(self.kind, self.cause)
        return f"{type(self).__name__}({self.kind.name}, {detail!r})"


# Failure codes every Web API method can report.

NOT_AUTHED = ("not_authed", "No authentication token provided.")
INVALID_AUTH = ("invalid_auth", "Invalid authentication token.")
ACCOUNT_INACTIVE = (
    "account_inactive",
    "Authentication token is for a deleted user or team.",
)
INVALID_ARG_NAME = (
    "invalid_arg_name",
    "The method was passed an argument whose name falls outside the bounds of "
    "common decency. This includes very long names and names with "
    "non-alphanumeric characters other than _. If you get this error, it is "
    "typically an indication that you have made a very malformed API call.",
)
INVALID_ARRAY_ARG = (
    "invalid_array_arg",
    "The method was passed a PHP-style array argument (e.g. with a name like "
    "foo[7]). These are never valid with the Slack API.",
)
INVALID_CHARSET = (
    "invalid_charset",
    "The method was called via a POST request, but the charset specified in "
    "the Content-Type header was invalid. Valid charset names are: utf-8 "
    "iso-8859-1.",
)
INVALID_FORM_DATA = (
    "invalid_form_data",
    "The method was called via a POST request with Content-Type "
    "application/x-www-form-urlencoded or multipart/form-data, but the form "
    "data was either missing or syntactically invalid.",
)
INVALID_POST_TYPE = (
    "invalid_post_type",
    "The method was called via a POST request, but the specified Content-Type "
    "was invalid. Valid types are: application/x-www-form-urlencoded "
    "multipart/form-data text/plain.",
)
MISSING_POST_TYPE = (
    "missing_post_type",
    "The method was called via a POST request and included a data payload, but "
    "the request did not include a Content-Type header.",
)
TEAM_ADDED_TO_ORG = (
    "team_added_to_org",
    "The team associated with your request is currently undergoing migration "
    "to an Enterprise Organization. Web API and other platform operations will "
    "be intermittently unavailable until the transition is complete.",
)
REQUEST_TIMEOUT = (
    "request_timeout",
    "The method was called via a POST request, but the POST data was either "
    "missing or truncated.",
)

# Caller restrictions shared by most write methods.

USER_IS_BOT = ("user_is_bot", "This method cannot be called by a bot user.")
USER_IS_RESTRICTED = (
    "user_is_restricted",
    "This method cannot be called by a restricted user or single channel guest.",
)
USER_IS_ULTRA_RESTRICTED = (
    "user_is_ultra_restricted",
    "This method cannot be called by a single channel guest.",
)
