# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Web API senders
"""
Sender implementations for Web API clients.
"""

from .httpx import HTTPXWebRequestSender
from .otel import TracedWebRequestSender

__all__ = [
    "HTTPXWebRequestSender",
    "TracedWebRequestSender",
]
