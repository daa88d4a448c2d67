# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Google API connectors (Calendar, Sheets).

Authenticates with a service account built from GOOGLE_CLIENT_EMAIL and
GOOGLE_PRIVATE_KEY. The Google client library is synchronous, so calls run
in a worker thread.
"""

import asyncio
from typing import Any, Dict, List, Optional

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from nodeflow.core.logging import get_engine_logger
from nodeflow.engine.context import now_iso
from nodeflow.engine.exceptions import ConnectorError
from .base import Connector

logger = get_engine_logger("connectors.google")

TOKEN_URI = "https://oauth2.googleapis.com/token"
CALENDAR_SCOPES = ["https://www.googleapis.com/auth/calendar.readonly"]
SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


class GoogleConnector(Connector):
    """Base for service-account backed Google APIs"""

    api_name = ""
    api_version = ""
    scopes: List[str] = []

    @property
    def configured(self) -> bool:
        return self.credentials.has_google

    def _service(self):
        info = {
            "type": "service_account",
            "client_email": self.credentials.google_client_email,
            "private_key": self.credentials.google_private_key,
            "token_uri": TOKEN_URI,
        }
        creds = service_account.Credentials.from_service_account_info(info, scopes=self.scopes)
        return build(self.api_name, self.api_version, credentials=creds, cache_discovery=False)

    async def _execute(self, build_request) -> Dict[str, Any]:
        """Build and execute a request off the event loop"""
        def run():
            return build_request(self._service()).execute()

        try:
            return await asyncio.to_thread(run)
        except HttpError as e:
            raise ConnectorError(self.name, f"{self.label} error: {e.reason}") from e


class CalendarConnector(GoogleConnector):
    name = "calendar"
    label = "Google Calendar"
    api_name = "calendar"
    api_version = "v3"
    scopes = CALENDAR_SCOPES

    async def list_events(
        self,
        calendar_id: str,
        time_min: Optional[str] = None,
        time_max: Optional[str] = None,
        max_results: Optional[int] = None
    ) -> Dict[str, Any]:
        if not self.configured:
            logger.warning("Google credentials not configured, returning mock data")
            return {
                "calendarId": calendar_id,
                "events": [
                    {"id": "1", "title": "Team Meeting", "start": now_iso(), "end": now_iso(hours=1)},
                    {"id": "2", "title": "Project Review", "start": now_iso(hours=2), "end": now_iso(hours=3)},
                ],
                "simulated": True,
            }

        params = {
            "calendarId": calendar_id,
            "timeMin": time_min or now_iso(),
            "maxResults": max_results or self.config.calendar_max_results,
            "singleEvents": True,
            "orderBy": "startTime",
        }
        if time_max:
            params["timeMax"] = time_max

        data = await self._execute(lambda service: service.events().list(**params))
        return {"calendarId": calendar_id, "events": data.get("items", [])}


class SheetsConnector(GoogleConnector):
    name = "sheet"
    label = "Google Sheets"
    api_name = "sheets"
    api_version = "v4"
    scopes = SHEETS_SCOPES

    async def write(
        self,
        spreadsheet_id: str,
        range_: str,
        values: List[str],
        action: str = "append"
    ) -> Dict[str, Any]:
        """Append or overwrite one row of values"""
        if not self.configured:
            logger.warning("Google credentials not configured, simulating sheet write")
            return {
                "success": True,
                "simulated": True,
                "spreadsheetId": spreadsheet_id,
                "range": range_,
                "values": values,
                "action": action,
            }

        body = {"values": [values]}

        if action == "append":
            data = await self._execute(
                lambda service: service.spreadsheets().values().append(
                    spreadsheetId=spreadsheet_id,
                    range=range_,
                    valueInputOption="USER_ENTERED",
                    body=body,
                )
            )
            updates = data.get("updates", {})
            return {
                "success": True,
                "updatedRange": updates.get("updatedRange"),
                "updatedRows": updates.get("updatedRows"),
            }

        data = await self._execute(
            lambda service: service.spreadsheets().values().update(
                spreadsheetId=spreadsheet_id,
                range=range_,
                valueInputOption="USER_ENTERED",
                body=body,
            )
        )
        return {
            "success": True,
            "updatedRange": data.get("updatedRange"),
            "updatedCells": data.get("updatedCells"),
        }
