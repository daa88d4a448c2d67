# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""Generic HTTP fetch."""

from typing import Any, Dict, Optional

from nodeflow.core.logging import get_engine_logger
from .base import Connector

logger = get_engine_logger("connectors.http")

BODY_METHODS = {"POST", "PUT"}


class HttpConnector(Connector):
    name = "http"
    label = "HTTP request"

    async def fetch(
        self,
        url: Optional[str],
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        body: Optional[str] = None
    ) -> Any:
        """
        Fetch url and return the decoded body.

        JSON responses are parsed; anything else is returned as text.
        Without a url there is nothing to call and a simulated payload is
        returned.
        """
        method = (method or "GET").upper()

        if not url:
            logger.warning("HTTP node has no URL configured, simulating request")
            return {"success": True, "simulated": True, "method": method, "url": url}

        kwargs: Dict[str, Any] = {"headers": headers or {}}
        if body and method in BODY_METHODS:
            kwargs["content"] = body

        response = await self._request(method, url, **kwargs)

        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            return response.json()
        return response.text
