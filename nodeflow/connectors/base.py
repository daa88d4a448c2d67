# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Connector base class.

A connector performs the I/O behind one data or action node type. When the
credentials it needs are missing it returns a simulated payload instead of
failing, so workflows stay runnable without external services.
"""

import httpx

from nodeflow.core.config import Config, Credentials
from nodeflow.engine.exceptions import ConnectorError


class Connector:
    """Shared plumbing for HTTP-backed connectors"""

    name = "connector"
    label = "Connector"

    def __init__(self, config: Config, credentials: Credentials, client: httpx.AsyncClient):
        self.config = config
        self.credentials = credentials
        self.client = client

    @property
    def configured(self) -> bool:
        """Whether the credentials this connector needs are present"""
        return True

    async def _request(self, method: str, url: str, check: bool = True, **kwargs) -> httpx.Response:
        """
        Send a request through the shared client.

        Transport failures, and non-2xx responses when check is set, are
        raised as ConnectorError.
        """
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise ConnectorError(self.name, f"{self.label} request failed: {e}") from e

        if check and not response.is_success:
            raise ConnectorError(
                self.name,
                f"{self.label} error: {response.status_code} {response.reason_phrase}"
            )

        return response
