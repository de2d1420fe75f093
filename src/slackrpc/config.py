# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import os
from typing import Mapping
from urllib.parse import urljoin

from pydantic import BaseModel, ValidationError

SLACK_API_URL = "https://slack.com/api/"


def get_slack_url_for_method(method: str, base_url: str = SLACK_API_URL) -> str:
    return urljoin(base_url.rstrip("/") + "/", method)


class SlackWebConfigError(Exception):
    pass


class SlackWebConfig(BaseModel):
    """Settings read from the environment, see `from_env`."""

    SLACK_API_URL: str = SLACK_API_URL
    SLACK_API_TIMEOUT: float = 30.0
    SLACK_TOKEN: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SlackWebConfig":
        try:
            return cls.model_validate({**(os.environ if environ is None else environ)})
        except ValidationError as e:
            raise SlackWebConfigError(f"Invalid Slack Web API settings: {e}") from e

    def url_for(self, method: str) -> str:
        return get_slack_url_for_method(method, self.SLACK_API_URL)
