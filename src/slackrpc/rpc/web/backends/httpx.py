import logging
import time
from typing import Sequence
from urllib.parse import urlencode

import httpx

from slackrpc.rpc.web.decorators import (
    RequestNetworkError,
    TimeoutException,
    UnexpectedStatusError,
    WebRequestSender,
)

logger = logging.getLogger(__name__)


class HTTPXWebRequestSender(WebRequestSender):

    def __init__(
        self,
        default_timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.default_timeout = default_timeout
        self.client = client

    async def send(self, url: str, params: Sequence[tuple[str, str]]) -> str:

        start_time = time.time()

        request_kwargs = {
            "method": "POST",
            "url": url,
            "headers": {"Content-Type": "application/x-www-form-urlencoded"},
            "content": urlencode(list(params)),
            "timeout": self.default_timeout,
        }

        try:
            if self.client is not None:
                response = await self.client.request(**request_kwargs)  # type: ignore[arg-type]
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.request(**request_kwargs)  # type: ignore[arg-type]
        except httpx.TimeoutException as err:
            raise TimeoutException(f"Request timed out: {err}") from err
        except httpx.NetworkError as err:
            raise RequestNetworkError(url=url, backend_request=err.request) from err

        logger.debug(
            "POST %s answered %s in %.3fs",
            url,
            response.status_code,
            time.time() - start_time,
        )

        if not response.is_success:
            raise UnexpectedStatusError(url, response.status_code, response.content)

        return response.text
