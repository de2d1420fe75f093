# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Get info on your team's Slack channels, create or archive channels, invite
users, set the topic and purpose, and mark a channel as read.

Every method below wraps https://api.slack.com/methods/channels.<name>. Build
a client with::

    client = WebApiClientBuilder(sender, token).build(ChannelsClient)
    await client.archive(channel="C123")
"""

from typing import Protocol

from pydantic import AliasChoices, Field

from slackrpc.rpc.web.decorators import (
    WebApiFamily,
    WebApiRequest,
    WebApiResponse,
    WebMethod,
)
from slackrpc.rpc.web.errors import (
    ACCOUNT_INACTIVE,
    INVALID_ARG_NAME,
    INVALID_ARRAY_ARG,
    INVALID_AUTH,
    INVALID_CHARSET,
    INVALID_FORM_DATA,
    INVALID_POST_TYPE,
    MISSING_POST_TYPE,
    NOT_AUTHED,
    REQUEST_TIMEOUT,
    TEAM_ADDED_TO_ORG,
    USER_IS_BOT,
    USER_IS_RESTRICTED,
    USER_IS_ULTRA_RESTRICTED,
    ErrorCode,
    WebMethodError,
)
from slackrpc.types import Channel, Message, SlackObject, ThreadInfo

CHANNEL_NOT_FOUND = ("channel_not_found", "Value passed for channel was invalid.")
USER_NOT_FOUND = ("user_not_found", "Value passed for user was invalid.")
IS_ARCHIVED = ("is_archived", "Channel has been archived.")
NO_CHANNEL = ("no_channel", "Value passed for name was empty.")
NAME_TAKEN = ("name_taken", "A channel cannot be created with the given name.")
RESTRICTED_CREATE = (
    "restricted_action",
    "A team preference prevents the authenticated user from creating channels.",
)
INVALID_NAME = ("invalid_name", "Value passed for name was invalid.")
INVALID_NAME_REQUIRED = ("invalid_name_required", "Value passed for name was empty.")
INVALID_NAME_PUNCTUATION = (
    "invalid_name_punctuation",
    "Value passed for name contained only punctuation.",
)
INVALID_NAME_MAXLENGTH = (
    "invalid_name_maxlength",
    "Value passed for name exceeded max length.",
)
INVALID_NAME_SPECIALS = (
    "invalid_name_specials",
    "Value passed for name contained unallowed special characters or upper case "
    "characters.",
)
NOT_IN_CHANNEL_SELF = ("not_in_channel", "Authenticated user is not in the channel.")
NOT_IN_CHANNEL_CALLER = ("not_in_channel", "Caller is not a member of the channel.")


# channels.archive


class ArchiveRequest(WebApiRequest):
    channel: str
    """Channel to archive"""


class ArchiveResponse(WebApiResponse):
    pass


class ArchiveErrorCode(ErrorCode):
    CHANNEL_NOT_FOUND = CHANNEL_NOT_FOUND
    ALREADY_ARCHIVED = ("already_archived", "Channel has already been archived.")
    CANT_ARCHIVE_GENERAL = (
        "cant_archive_general",
        "You cannot archive the general channel",
    )
    RESTRICTED_ACTION = (
        "restricted_action",
        "A team preference prevents the authenticated user from archiving.",
    )
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    USER_IS_BOT = USER_IS_BOT
    USER_IS_RESTRICTED = USER_IS_RESTRICTED
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class ArchiveError(WebMethodError[ArchiveErrorCode]):
    codes = ArchiveErrorCode


# channels.create


class CreateRequest(WebApiRequest):
    name: str
    """Name of channel to create"""
    validate_name: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("validate_name", "validate"),
        serialization_alias="validate",
    )
    """Whether to return errors on invalid channel name instead of modifying it
    to meet the specified criteria."""


class CreateResponse(WebApiResponse):
    channel: Channel | None = None


class CreateErrorCode(ErrorCode):
    NAME_TAKEN = NAME_TAKEN
    RESTRICTED_ACTION = RESTRICTED_CREATE
    NO_CHANNEL = NO_CHANNEL
    INVALID_NAME_REQUIRED = INVALID_NAME_REQUIRED
    INVALID_NAME_PUNCTUATION = INVALID_NAME_PUNCTUATION
    INVALID_NAME_MAXLENGTH = INVALID_NAME_MAXLENGTH
    INVALID_NAME_SPECIALS = INVALID_NAME_SPECIALS
    INVALID_NAME = INVALID_NAME
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    USER_IS_BOT = USER_IS_BOT
    USER_IS_RESTRICTED = USER_IS_RESTRICTED
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class CreateError(WebMethodError[CreateErrorCode]):
    codes = CreateErrorCode


# channels.history


class HistoryRequest(WebApiRequest):
    channel: str
    """Channel to fetch history for."""
    latest: str | None = None
    """End of time range of messages to include in results."""
    oldest: str | None = None
    """Start of time range of messages to include in results."""
    inclusive: bool | None = None
    """Include messages with latest or oldest timestamp in results."""
    count: int | None = None
    """Number of messages to return, between 1 and 1000."""
    unreads: bool | None = None
    """Include unread_count_display in the output?"""


class HistoryResponse(WebApiResponse):
    has_more: bool | None = None
    latest: str | None = None
    messages: list[Message] | None = None


class HistoryErrorCode(ErrorCode):
    CHANNEL_NOT_FOUND = CHANNEL_NOT_FOUND
    INVALID_TS_LATEST = ("invalid_ts_latest", "Value passed for latest was invalid")
    INVALID_TS_OLDEST = ("invalid_ts_oldest", "Value passed for oldest was invalid")
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class HistoryError(WebMethodError[HistoryErrorCode]):
    codes = HistoryErrorCode


# channels.info


class InfoRequest(WebApiRequest):
    channel: str
    """Channel to get info on"""


class InfoResponse(WebApiResponse):
    channel: Channel | None = None


class InfoErrorCode(ErrorCode):
    CHANNEL_NOT_FOUND = CHANNEL_NOT_FOUND
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class InfoError(WebMethodError[InfoErrorCode]):
    codes = InfoErrorCode


# channels.invite


class InviteRequest(WebApiRequest):
    channel: str
    """Channel to invite user to."""
    user: str
    """User to invite to channel."""


class InviteResponse(WebApiResponse):
    channel: Channel | None = None


class InviteErrorCode(ErrorCode):
    CHANNEL_NOT_FOUND = CHANNEL_NOT_FOUND
    USER_NOT_FOUND = USER_NOT_FOUND
    CANT_INVITE_SELF = (
        "cant_invite_self",
        "Authenticated user cannot invite themselves to a channel.",
    )
    NOT_IN_CHANNEL = NOT_IN_CHANNEL_SELF
    ALREADY_IN_CHANNEL = (
        "already_in_channel",
        "Invited user is already in the channel.",
    )
    IS_ARCHIVED = IS_ARCHIVED
    CANT_INVITE = ("cant_invite", "User cannot be invited to this channel.")
    URA_MAX_CHANNELS = (
        "ura_max_channels",
        "URA is already in the maximum number of channels.",
    )
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    USER_IS_BOT = USER_IS_BOT
    USER_IS_ULTRA_RESTRICTED = USER_IS_ULTRA_RESTRICTED
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class InviteError(WebMethodError[InviteErrorCode]):
    codes = InviteErrorCode


# channels.join


class JoinRequest(WebApiRequest):
    name: str
    """Name of channel to join"""
    validate_name: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("validate_name", "validate"),
        serialization_alias="validate",
    )
    """Whether to return errors on invalid channel name instead of modifying it
    to meet the specified criteria."""


class JoinResponse(WebApiResponse):
    channel: Channel | None = None


class JoinErrorCode(ErrorCode):
    CHANNEL_NOT_FOUND = CHANNEL_NOT_FOUND
    NAME_TAKEN = NAME_TAKEN
    RESTRICTED_ACTION = RESTRICTED_CREATE
    NO_CHANNEL = NO_CHANNEL
    IS_ARCHIVED = IS_ARCHIVED
    INVALID_NAME_REQUIRED = INVALID_NAME_REQUIRED
    INVALID_NAME_PUNCTUATION = INVALID_NAME_PUNCTUATION
    INVALID_NAME_MAXLENGTH = INVALID_NAME_MAXLENGTH
    INVALID_NAME_SPECIALS = INVALID_NAME_SPECIALS
    INVALID_NAME = INVALID_NAME
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    USER_IS_BOT = USER_IS_BOT
    USER_IS_RESTRICTED = USER_IS_RESTRICTED
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class JoinError(WebMethodError[JoinErrorCode]):
    codes = JoinErrorCode


# channels.kick


class KickRequest(WebApiRequest):
    channel: str
    """Channel to remove user from."""
    user: str
    """User to remove from channel."""


class KickResponse(WebApiResponse):
    pass


class KickErrorCode(ErrorCode):
    CHANNEL_NOT_FOUND = CHANNEL_NOT_FOUND
    USER_NOT_FOUND = USER_NOT_FOUND
    CANT_KICK_SELF = (
        "cant_kick_self",
        "Authenticated user can't kick themselves from a channel.",
    )
    NOT_IN_CHANNEL = ("not_in_channel", "User was not in the channel.")
    CANT_KICK_FROM_GENERAL = (
        "cant_kick_from_general",
        "User cannot be removed from #general.",
    )
    RESTRICTED_ACTION = (
        "restricted_action",
        "A team preference prevents the authenticated user from kicking.",
    )
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    USER_IS_BOT = USER_IS_BOT
    USER_IS_RESTRICTED = USER_IS_RESTRICTED
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class KickError(WebMethodError[KickErrorCode]):
    codes = KickErrorCode


# channels.leave


class LeaveRequest(WebApiRequest):
    channel: str
    """Channel to leave"""


class LeaveResponse(WebApiResponse):
    pass


class LeaveErrorCode(ErrorCode):
    CHANNEL_NOT_FOUND = CHANNEL_NOT_FOUND
    IS_ARCHIVED = IS_ARCHIVED
    CANT_LEAVE_GENERAL = (
        "cant_leave_general",
        "Authenticated user cannot leave the general channel",
    )
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    USER_IS_BOT = USER_IS_BOT
    USER_IS_RESTRICTED = USER_IS_RESTRICTED
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class LeaveError(WebMethodError[LeaveErrorCode]):
    codes = LeaveErrorCode


# channels.list


class ListRequest(WebApiRequest):
    exclude_archived: bool | None = None
    """Exclude archived channels from the list"""
    exclude_members: bool | None = None
    """Exclude the members collection from each channel"""


class ListResponse(WebApiResponse):
    channels: list[Channel] | None = None


class ListErrorCode(ErrorCode):
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class ListError(WebMethodError[ListErrorCode]):
    codes = ListErrorCode


# channels.mark


class MarkRequest(WebApiRequest):
    channel: str
    """Channel to set reading cursor in."""
    ts: str
    """Timestamp of the most recently seen message."""


class MarkResponse(WebApiResponse):
    pass


class MarkErrorCode(ErrorCode):
    CHANNEL_NOT_FOUND = CHANNEL_NOT_FOUND
    INVALID_TIMESTAMP = ("invalid_timestamp", "Value passed for timestamp was invalid.")
    NOT_IN_CHANNEL = NOT_IN_CHANNEL_CALLER
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class MarkError(WebMethodError[MarkErrorCode]):
    codes = MarkErrorCode


# channels.rename


class RenameRequest(WebApiRequest):
    channel: str
    """Channel to rename"""
    name: str
    """New name for channel."""
    validate_name: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("validate_name", "validate"),
        serialization_alias="validate",
    )
    """Whether to return errors on invalid channel name instead of modifying it
    to meet the specified criteria."""




class RenameResponseChannel(SlackObject):
    id: str | None = None
    name: str | None = None
    is_channel: bool | None = None
    created: float | None = None


class RenameResponse(WebApiResponse):
    channel: RenameResponseChannel | None = None


class RenameErrorCode(ErrorCode):
    CHANNEL_NOT_FOUND = CHANNEL_NOT_FOUND
    NOT_IN_CHANNEL = NOT_IN_CHANNEL_CALLER
    NOT_AUTHORIZED = ("not_authorized", "Caller cannot rename this channel")
    INVALID_NAME = INVALID_NAME
    NAME_TAKEN = ("name_taken", "New channel name is taken")
    INVALID_NAME_REQUIRED = INVALID_NAME_REQUIRED
    INVALID_NAME_PUNCTUATION = INVALID_NAME_PUNCTUATION
    INVALID_NAME_MAXLENGTH = INVALID_NAME_MAXLENGTH
    INVALID_NAME_SPECIALS = INVALID_NAME_SPECIALS
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    USER_IS_BOT = USER_IS_BOT
    USER_IS_RESTRICTED = USER_IS_RESTRICTED
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class RenameError(WebMethodError[RenameErrorCode]):
    codes = RenameErrorCode


# channels.replies


class RepliesRequest(WebApiRequest):
    channel: str
    """Channel to fetch thread from"""
    thread_ts: str
    """Unique identifier of a thread's parent message"""


class RepliesResponse(WebApiResponse):
    messages: list[Message] | None = None
    thread_info: ThreadInfo | None = None


class RepliesErrorCode(ErrorCode):
    CHANNEL_NOT_FOUND = (
        "channel_not_found",
        "Value for channel was missing or invalid.",
    )
    THREAD_NOT_FOUND = (
        "thread_not_found",
        "Value for thread_ts was missing or invalid.",
    )
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class RepliesError(WebMethodError[RepliesErrorCode]):
    codes = RepliesErrorCode


# channels.setPurpose


class SetPurposeRequest(WebApiRequest):
    channel: str
    """Channel to set the purpose of"""
    purpose: str
    """The new purpose"""


class SetPurposeResponse(WebApiResponse):
    purpose: str | None = None


class SetPurposeErrorCode(ErrorCode):
    CHANNEL_NOT_FOUND = CHANNEL_NOT_FOUND
    NOT_IN_CHANNEL = NOT_IN_CHANNEL_SELF
    IS_ARCHIVED = IS_ARCHIVED
    TOO_LONG = ("too_long", "Purpose was longer than 250 characters.")
    USER_IS_RESTRICTED = USER_IS_RESTRICTED
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class SetPurposeError(WebMethodError[SetPurposeErrorCode]):
    codes = SetPurposeErrorCode


# channels.setTopic


class SetTopicRequest(WebApiRequest):
    channel: str
    """Channel to set the topic of"""
    topic: str
    """The new topic"""


class SetTopicResponse(WebApiResponse):
    topic: str | None = None


class SetTopicErrorCode(ErrorCode):
    CHANNEL_NOT_FOUND = CHANNEL_NOT_FOUND
    NOT_IN_CHANNEL = NOT_IN_CHANNEL_SELF
    IS_ARCHIVED = IS_ARCHIVED
    TOO_LONG = ("too_long", "Topic was longer than 250 characters.")
    USER_IS_RESTRICTED = USER_IS_RESTRICTED
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class SetTopicError(WebMethodError[SetTopicErrorCode]):
    codes = SetTopicErrorCode


# channels.unarchive


class UnarchiveRequest(WebApiRequest):
    channel: str
    """Channel to unarchive"""


class UnarchiveResponse(WebApiResponse):
    pass


class UnarchiveErrorCode(ErrorCode):
    CHANNEL_NOT_FOUND = CHANNEL_NOT_FOUND
    NOT_ARCHIVED = ("not_archived", "Channel is not archived.")
    NOT_AUTHED = NOT_AUTHED
    INVALID_AUTH = INVALID_AUTH
    ACCOUNT_INACTIVE = ACCOUNT_INACTIVE
    USER_IS_BOT = USER_IS_BOT
    USER_IS_RESTRICTED = USER_IS_RESTRICTED
    INVALID_ARG_NAME = INVALID_ARG_NAME
    INVALID_ARRAY_ARG = INVALID_ARRAY_ARG
    INVALID_CHARSET = INVALID_CHARSET
    INVALID_FORM_DATA = INVALID_FORM_DATA
    INVALID_POST_TYPE = INVALID_POST_TYPE
    MISSING_POST_TYPE = MISSING_POST_TYPE
    TEAM_ADDED_TO_ORG = TEAM_ADDED_TO_ORG
    REQUEST_TIMEOUT = REQUEST_TIMEOUT


class UnarchiveError(WebMethodError[UnarchiveErrorCode]):
    codes = UnarchiveErrorCode


@WebApiFamily("channels")
class ChannelsClient(Protocol):

    @WebMethod("archive", errors=ArchiveError)
    async def archive(self, request: ArchiveRequest) -> ArchiveResponse:
        """Archives a channel."""
        ...

    @WebMethod("create", errors=CreateError)
    async def create(self, request: CreateRequest) -> CreateResponse:
        """Creates a channel."""
        ...

    @WebMethod("history", errors=HistoryError)
    async def history(self, request: HistoryRequest) -> HistoryResponse:
        """Fetches history of messages and events from a channel."""
        ...

    @WebMethod("info", errors=InfoError)
    async def info(self, request: InfoRequest) -> InfoResponse:
        """Gets information about a channel."""
        ...

    @WebMethod("invite", errors=InviteError)
    async def invite(self, request: InviteRequest) -> InviteResponse:
        """Invites a user to a channel."""
        ...

    @WebMethod("join", errors=JoinError)
    async def join(self, request: JoinRequest) -> JoinResponse:
        """Joins a channel, creating it if needed."""
        ...

    @WebMethod("kick", errors=KickError)
    async def kick(self, request: KickRequest) -> KickResponse:
        """Removes a user from a channel."""
        ...

    @WebMethod("leave", errors=LeaveError)
    async def leave(self, request: LeaveRequest) -> LeaveResponse:
        """Leaves a channel."""
        ...

    @WebMethod("list", errors=ListError)
    async def list(self, request: ListRequest) -> ListResponse:
        """Lists all channels in a Slack team."""
        ...

    @WebMethod("mark", errors=MarkError)
    async def mark(self, request: MarkRequest) -> MarkResponse:
        """Sets the read cursor in a channel."""
        ...

    @WebMethod("rename", errors=RenameError)
    async def rename(self, request: RenameRequest) -> RenameResponse:
        """Renames a channel."""
        ...

    @WebMethod("replies", errors=RepliesError)
    async def replies(self, request: RepliesRequest) -> RepliesResponse:
        """Retrieve a thread of messages posted to a channel"""
        ...

    @WebMethod("setPurpose", errors=SetPurposeError)
    async def set_purpose(self, request: SetPurposeRequest) -> SetPurposeResponse:
        """Sets the purpose for a channel."""
        ...

    @WebMethod("setTopic", errors=SetTopicError)
    async def set_topic(self, request: SetTopicRequest) -> SetTopicResponse:
        """Sets the topic for a channel."""
        ...

    @WebMethod("unarchive", errors=UnarchiveError)
    async def unarchive(self, request: UnarchiveRequest) -> UnarchiveResponse:
        """Unarchives a channel."""
        ...
