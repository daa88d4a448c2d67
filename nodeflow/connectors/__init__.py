# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Connectors - external integrations invoked by data, action and AI nodes.

Connectors are constructed explicitly and handed to the engine as one
bundle, so tests can swap any of them for a fake.
"""

from dataclasses import dataclass
from typing import Optional

import httpx

from nodeflow.core.config import Config, Credentials
from .ai import AIConnector
from .base import Connector
from .email import EmailConnector
from .github import GitHubConnector
from .google import CalendarConnector, SheetsConnector
from .http import HttpConnector
from .messaging import SmsConnector, SocialConnector, WebhookConnector
from .weather import WeatherConnector


@dataclass
class Connectors:
    """All connectors available to node executors during a run"""
    weather: WeatherConnector
    github: GitHubConnector
    calendar: CalendarConnector
    http: HttpConnector
    email: EmailConnector
    sms: SmsConnector
    webhook: WebhookConnector
    social: SocialConnector
    sheets: SheetsConnector
    ai: AIConnector
    client: httpx.AsyncClient

    async def aclose(self) -> None:
        """Close the shared HTTP client"""
        await self.client.aclose()


def build_connectors(
    config: Config,
    credentials: Credentials,
    client: Optional[httpx.AsyncClient] = None
) -> Connectors:
    """Create every connector around one shared HTTP client"""
    client = client or httpx.AsyncClient(timeout=config.http_timeout)
    args = (config, credentials, client)

    return Connectors(
        weather=WeatherConnector(*args),
        github=GitHubConnector(*args),
        calendar=CalendarConnector(*args),
        http=HttpConnector(*args),
        email=EmailConnector(*args),
        sms=SmsConnector(*args),
        webhook=WebhookConnector(*args),
        social=SocialConnector(*args),
        sheets=SheetsConnector(*args),
        ai=AIConnector(*args),
        client=client,
    )


__all__ = [
    "Connector",
    "Connectors",
    "build_connectors",
    "AIConnector",
    "CalendarConnector",
    "EmailConnector",
    "GitHubConnector",
    "HttpConnector",
    "SheetsConnector",
    "SmsConnector",
    "SocialConnector",
    "WebhookConnector",
    "WeatherConnector",
]
