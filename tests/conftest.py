"""
Pytest configuration and fixtures for slackrpc tests.
"""

from typing import Sequence

import pytest


class FakeSender:
    """Sender answering every call with a canned body or exception."""

    def __init__(self, body: str = '{"ok": true}', error: Exception | None = None):
        self.body = body
        self.error = error
        self.calls: list[tuple[str, list[tuple[str, str]]]] = []

    async def send(self, url: str, params: Sequence[tuple[str, str]]) -> str:
        self.calls.append((url, list(params)))
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def sender() -> FakeSender:
    return FakeSender()
