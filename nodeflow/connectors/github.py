# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""Recent commits, issues or pull requests of a GitHub repository."""

from typing import Any, Dict

from nodeflow.core.logging import get_engine_logger
from nodeflow.engine.context import now_iso
from nodeflow.engine.exceptions import ConnectorError
from .base import Connector

logger = get_engine_logger("connectors.github")

# Data type -> REST collection
ENDPOINTS = {
    "commits": "commits",
    "issues": "issues",
    "prs": "pulls",
}


class GitHubConnector(Connector):
    name = "github"
    label = "GitHub API"

    @property
    def configured(self) -> bool:
        return bool(self.credentials.github_token)

    async def fetch(self, owner: str, repository: str, data_type: str = "commits") -> Dict[str, Any]:
        full_name = f"{owner}/{repository}"

        if not self.configured:
            logger.warning("GitHub token not configured, returning mock data")
            return {
                "repository": full_name,
                "type": data_type,
                "items": [
                    {"id": "1", "message": "Initial commit", "author": "demo", "date": now_iso()},
                    {"id": "2", "message": "Add feature X", "author": "demo", "date": now_iso()},
                ],
                "simulated": True,
            }

        collection = ENDPOINTS.get(data_type)
        if collection is None:
            raise ConnectorError(self.name, f"Unknown GitHub data type: {data_type}")

        response = await self._request(
            "GET",
            f"{self.config.github_api_url}/repos/{full_name}/{collection}",
            headers={
                "Authorization": f"Bearer {self.credentials.github_token}",
                "Accept": "application/vnd.github.v3+json",
            }
        )

        return {
            "repository": full_name,
            "type": data_type,
            "items": response.json()[:self.config.github_max_items],
        }
