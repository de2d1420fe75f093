# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Any, Callable, Self, TypedDict, TypeVar, cast

DECORATED_T = TypeVar("DECORATED_T", bound="Callable[..., Any] | type")


class DecoratorMetadata(TypedDict):
    decorators: "list[StackableDecorator]"
    decorators_by_type: "dict[Any, list[StackableDecorator]]"


class StackableDecorator:
    """
    Base for decorators that only attach metadata to their subject.

    Several decorators may be stacked on the same class or function; they are
    stored in application order and grouped by `decorator_key()`.
    """

    _ATTR_NAME: str = "__slackrpc_stackable_decorator__"

    def __call__(self, subject: DECORATED_T) -> DECORATED_T:
        self.register(subject, self)
        return subject

    @classmethod
    def decorator_key(cls) -> Any:
        return cls

    @classmethod
    def get_or_set_metadata(cls, subject: Any) -> DecoratorMetadata:
        metadata = cls.get_metadata(subject)
        if metadata is None:
            metadata = DecoratorMetadata(decorators=[], decorators_by_type={})
            setattr(subject, cls._ATTR_NAME, metadata)
        return metadata

    @classmethod
    def get_metadata(cls, subject: Any) -> DecoratorMetadata | None:
        # Registrations are per subject, a subclass never sees its parent's.
        own = getattr(subject, "__dict__", {})
        if cls._ATTR_NAME not in own:
            return None
        return cast(DecoratorMetadata, own[cls._ATTR_NAME])

    @classmethod
    def register(cls, subject: Any, decorator: "StackableDecorator") -> None:
        metadata = cls.get_or_set_metadata(subject)
        metadata["decorators"].append(decorator)
        metadata["decorators_by_type"].setdefault(cls.decorator_key(), []).append(
            decorator
        )

    @classmethod
    def get(cls, subject: Any) -> list[Self]:
        metadata = cls.get_metadata(subject)
        if metadata is None:
            return []

        if cls is StackableDecorator:
            return cast(list[Self], metadata["decorators"])
        return cast(
            list[Self], metadata["decorators_by_type"].get(cls.decorator_key(), [])
        )

    @classmethod
    def get_last(cls, subject: Any) -> Self | None:
        decorators = cls.get(subject)
        if decorators:
            return decorators[-1]
        return None
