# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Outbound messaging: SMS, social posts and webhooks.

SMS and social have no provider wired in and always simulate.
"""

from typing import Any, Dict, Optional

from nodeflow.core.logging import get_engine_logger
from .base import Connector

logger = get_engine_logger("connectors.messaging")


class SmsConnector(Connector):
    name = "sms"
    label = "SMS"

    @property
    def configured(self) -> bool:
        return False

    async def send(self, to: Optional[str], message: Optional[str] = None) -> Dict[str, Any]:
        logger.warning("SMS integration not implemented, simulating")
        return {
            "success": True,
            "simulated": True,
            "to": to,
            "message": "SMS would be sent",
        }


class SocialConnector(Connector):
    name = "social"
    label = "Social"

    @property
    def configured(self) -> bool:
        return False

    async def post(self, platform: str, message: str) -> Dict[str, Any]:
        logger.warning("Social media posting not implemented, simulating")
        return {
            "success": True,
            "simulated": True,
            "platform": platform,
            "message": message,
            "posted": "Social media post would be created",
        }


class WebhookConnector(Connector):
    name = "webhook"
    label = "Webhook"

    async def send(
        self,
        url: Optional[str],
        payload: Dict[str, Any],
        method: str = "POST",
        headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Deliver payload as JSON.

        A non-2xx reply is reported via success/status, not raised.
        """
        if not url:
            logger.warning("Webhook URL not configured, simulating delivery")
            return {"success": True, "simulated": True, "url": url}

        response = await self._request(
            method or "POST",
            url,
            check=False,
            json=payload,
            headers={"Content-Type": "application/json", **(headers or {})},
        )

        return {
            "success": response.is_success,
            "status": response.status_code,
            "url": url,
        }
