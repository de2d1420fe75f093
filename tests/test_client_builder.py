# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Tests for the declarative client decorators and WebApiClientBuilder.
"""

from typing import Protocol

import pytest
from pydantic import ValidationError

from slackrpc.methods.channels import (
    ArchiveRequest,
    ChannelsClient,
    CreateResponse,
    InviteError,
    ListRequest,
    ListResponse,
    SetTopicRequest,
    SetTopicResponse,
)
from slackrpc.rpc.web.decorators import (
    WebApiClientBuilder,
    WebApiFamily,
    WebMethod,
    inspect_web_methods,
)
from slackrpc.rpc.web.errors import ErrorKind

from .conftest import FakeSender

CHANNEL_METHODS = {
    "channels.archive",
    "channels.create",
    "channels.history",
    "channels.info",
    "channels.invite",
    "channels.join",
    "channels.kick",
    "channels.leave",
    "channels.list",
    "channels.mark",
    "channels.rename",
    "channels.replies",
    "channels.setPurpose",
    "channels.setTopic",
    "channels.unarchive",
}


class TestDecorators:

    def test_family_is_registered(self) -> None:
        family = WebApiFamily.get_last(ChannelsClient)
        assert family is not None
        assert family.prefix == "channels"

    def test_method_is_registered(self) -> None:
        mapping = WebMethod.get_last(ChannelsClient.set_topic)
        assert mapping is not None
        assert mapping.name == "setTopic"

    def test_undecorated_class_has_no_family(self) -> None:
        class Plain:
            pass

        assert WebApiFamily.get_last(Plain) is None

    def test_subclass_does_not_inherit_family(self) -> None:
        class Child(ChannelsClient, Protocol):
            pass

        assert WebApiFamily.get_last(Child) is None

    def test_metadata_is_created_on_first_registration(self) -> None:
        class Plain:
            pass

        assert WebApiFamily.get_metadata(Plain) is None

        WebApiFamily("plain")(Plain)

        metadata = WebApiFamily.get_metadata(Plain)
        assert metadata is not None
        assert metadata is WebApiFamily.get_or_set_metadata(Plain)
        assert [d.prefix for d in WebApiFamily.get(Plain)] == ["plain"]


class TestInspectWebMethods:

    def test_all_channel_methods_are_exposed(self) -> None:
        methods = {spec.method for _, spec in inspect_web_methods(ChannelsClient)}
        assert methods == CHANNEL_METHODS

    def test_spec_types_come_from_annotations(self) -> None:
        specs = dict(inspect_web_methods(ChannelsClient))

        assert specs["set_topic"].method == "channels.setTopic"
        assert specs["set_topic"].request_type is SetTopicRequest
        assert specs["set_topic"].response_type is SetTopicResponse
        assert specs["invite"].error_type is InviteError
        assert specs["create"].response_type is CreateResponse

    def test_rejects_undecorated_class(self) -> None:
        class Plain:
            pass

        with pytest.raises(ValueError):
            inspect_web_methods(Plain)

    def test_rejects_method_without_request(self) -> None:
        @WebApiFamily("bad")
        class Bad(Protocol):

            @WebMethod("ping", errors=InviteError)
            async def ping(self) -> ListResponse: ...

        with pytest.raises(ValueError):
            inspect_web_methods(Bad)

    def test_rejects_non_response_return(self) -> None:
        @WebApiFamily("bad")
        class Bad(Protocol):

            @WebMethod("ping", errors=InviteError)
            async def ping(self, request: ListRequest) -> dict: ...  # type: ignore[type-arg]

        with pytest.raises(ValueError):
            inspect_web_methods(Bad)


class TestWebApiClientBuilder:

    def test_build_rejects_non_family(self, sender: FakeSender) -> None:
        class Plain:
            pass

        with pytest.raises(ValueError):
            WebApiClientBuilder(sender, "t").build(Plain)

    def test_built_client_has_every_method(self, sender: FakeSender) -> None:
        client = WebApiClientBuilder(sender, "t").build(ChannelsClient)

        for attr_name, _ in inspect_web_methods(ChannelsClient):
            assert callable(getattr(client, attr_name))

    @pytest.mark.asyncio
    async def test_method_accepts_request_instance(self, sender: FakeSender) -> None:
        client = WebApiClientBuilder(sender, "xoxb-1").build(ChannelsClient)

        response = await client.archive(ArchiveRequest(channel="C123"))

        assert response.ok is True
        assert sender.calls == [
            (
                "https://slack.com/api/channels.archive",
                [("token", "xoxb-1"), ("channel", "C123")],
            )
        ]

    @pytest.mark.asyncio
    async def test_method_accepts_keyword_fields(self) -> None:
        sender = FakeSender('{"ok": true, "topic": "Apply topically"}')
        client = WebApiClientBuilder(sender, "t").build(ChannelsClient)

        response = await client.set_topic(channel="C1", topic="Apply topically")  # type: ignore[call-arg]

        assert isinstance(response, SetTopicResponse)
        assert response.topic == "Apply topically"
        assert sender.calls[0][0].endswith("/channels.setTopic")
        assert sender.calls[0][1] == [
            ("token", "t"),
            ("channel", "C1"),
            ("topic", "Apply topically"),
        ]

    @pytest.mark.asyncio
    async def test_method_without_fields_builds_empty_request(self) -> None:
        sender = FakeSender('{"ok": true, "channels": [{"id": "C1", "name": "general"}]}')
        client = WebApiClientBuilder(sender, "t").build(ChannelsClient)

        response = await client.list()  # type: ignore[call-arg]

        assert response.channels is not None
        assert response.channels[0].name == "general"
        assert sender.calls[0][1] == [("token", "t")]

    @pytest.mark.asyncio
    async def test_method_rejects_wrong_request_type(self, sender: FakeSender) -> None:
        client = WebApiClientBuilder(sender, "t").build(ChannelsClient)

        with pytest.raises(TypeError):
            await client.archive(ListRequest())  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_method_rejects_request_and_fields(self, sender: FakeSender) -> None:
        client = WebApiClientBuilder(sender, "t").build(ChannelsClient)

        with pytest.raises(TypeError):
            await client.archive(ArchiveRequest(channel="C1"), channel="C2")  # type: ignore[call-arg]

    @pytest.mark.asyncio
    async def test_misspelled_field_is_rejected(self, sender: FakeSender) -> None:
        client = WebApiClientBuilder(sender, "t").build(ChannelsClient)

        with pytest.raises(ValidationError):
            await client.history(channel="C1", cout=5)  # type: ignore[call-arg]
        with pytest.raises(ValidationError):
            await client.list(exclude_archive=True)  # type: ignore[call-arg]

        assert sender.calls == []

    @pytest.mark.asyncio
    async def test_method_raises_its_own_error_class(self) -> None:
        sender = FakeSender('{"ok": false, "error": "already_in_channel"}')
        client = WebApiClientBuilder(sender, "t").build(ChannelsClient)

        with pytest.raises(InviteError) as exc_info:
            await client.invite(channel="C1", user="U1")  # type: ignore[call-arg]

        assert exc_info.value.kind is ErrorKind.KNOWN

    @pytest.mark.asyncio
    async def test_custom_url_resolver(self, sender: FakeSender) -> None:
        client = WebApiClientBuilder(
            sender, "t", url_resolver=lambda method: f"http://localhost/{method}"
        ).build(ChannelsClient)

        await client.leave(channel="C1")  # type: ignore[call-arg]

        assert sender.calls[0][0] == "http://localhost/channels.leave"
