# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Objects embedded in Web API replies.

Only the commonly used fields are modelled; anything else the server sends is
kept as extra attributes.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class SlackObject(BaseModel):
    model_config = ConfigDict(extra="allow")


class ChannelTopic(SlackObject):
    value: str | None = None
    creator: str | None = None
    last_set: float | None = None


class ChannelPurpose(SlackObject):
    value: str | None = None
    creator: str | None = None
    last_set: float | None = None


class Channel(SlackObject):
    id: str | None = None
    name: str | None = None
    created: float | None = None
    creator: str | None = None
    is_channel: bool | None = None
    is_archived: bool | None = None
    is_general: bool | None = None
    is_member: bool | None = None
    members: list[str] | None = None
    topic: ChannelTopic | None = None
    purpose: ChannelPurpose | None = None
    last_read: str | None = None
    latest: dict[str, Any] | None = None
    unread_count: int | None = None
    unread_count_display: int | None = None
    num_members: int | None = None


class Message(SlackObject):
    type: str | None = None
    subtype: str | None = None
    ts: str | None = None
    user: str | None = None
    bot_id: str | None = None
    text: str | None = None
    thread_ts: str | None = None
    reply_count: int | None = None
    replies: list[dict[str, Any]] | None = None
    is_starred: bool | None = None
    reactions: list[dict[str, Any]] | None = None


class ThreadInfo(SlackObject):
    complete: bool | None = None
    count: int | None = None
