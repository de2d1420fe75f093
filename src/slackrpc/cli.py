# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import asyncio
import logging
from typing import Any

import click
from pydantic import ValidationError

from slackrpc.config import SlackWebConfig, SlackWebConfigError
from slackrpc.methods.channels import ChannelsClient
from slackrpc.rpc.web.backends.httpx import HTTPXWebRequestSender
from slackrpc.rpc.web.decorators import (
    WebApiClientBuilder,
    WebMethodSpec,
    inspect_web_methods,
)
from slackrpc.rpc.web.errors import WebMethodError


def parse_params(params: tuple[str, ...]) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for item in params:
        if "=" not in item:
            raise click.BadParameter(
                "'%s' is not in key=value form" % item, param_hint="--param"
            )
        key, value = item.split("=", 1)
        parsed[key.strip()] = value
    return parsed


def find_method(name: str) -> tuple[str, WebMethodSpec]:
    for attr_name, spec in inspect_web_methods(ChannelsClient):
        if name in (attr_name, spec.method, spec.method.rsplit(".", 1)[-1]):
            return attr_name, spec
    raise click.BadParameter("Unknown channels method '%s'" % name, param_hint="METHOD")


@click.group()
def cli() -> None:
    pass


@cli.command()
@click.argument("method", required=False)
@click.option(
    "-p",
    "--param",
    "params",
    multiple=True,
    help="Request field as key=value, may be repeated",
)
@click.option(
    "--token",
    type=str,
    envvar="SLACK_TOKEN",
    help="Authentication token (defaults to $SLACK_TOKEN)",
)
@click.option(
    "--api-url",
    type=str,
    default=None,
    help="Web API base url (defaults to $SLACK_API_URL)",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Request timeout in seconds (defaults to $SLACK_API_TIMEOUT)",
)
@click.option(
    "--list-methods",
    is_flag=True,
    default=False,
    help="Print the available methods and exit",
)
@click.option("-v", "--verbose", is_flag=True, default=False)
def channels(
    method: str | None,
    params: tuple[str, ...],
    token: str | None,
    api_url: str | None,
    timeout: float | None,
    list_methods: bool,
    verbose: bool,
) -> None:
    """Invoke one channels.* Web API method and print the reply as JSON."""

    if list_methods:
        for _, spec in inspect_web_methods(ChannelsClient):
            click.echo(spec.method)
        return

    if method is None:
        raise click.UsageError("Missing argument 'METHOD'")

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    try:
        config = SlackWebConfig.from_env()
    except SlackWebConfigError as e:
        raise click.ClickException(str(e)) from e

    if api_url is not None:
        config = config.model_copy(update={"SLACK_API_URL": api_url})

    token = token or config.SLACK_TOKEN
    if not token:
        raise click.UsageError("A token is required, pass --token or set SLACK_TOKEN")

    attr_name, spec = find_method(method)
    fields: dict[str, Any] = parse_params(params)

    try:
        request = spec.request_type.model_validate(fields)
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="--param") from e

    sender = HTTPXWebRequestSender(
        default_timeout=timeout if timeout is not None else config.SLACK_API_TIMEOUT
    )
    client = WebApiClientBuilder(sender, token, url_resolver=config.url_for).build(
        ChannelsClient
    )

    try:
        response = asyncio.run(getattr(client, attr_name)(request))
    except WebMethodError as e:
        raise click.ClickException(str(e)) from e

    click.echo(response.model_dump_json(indent=2, exclude_none=True))
