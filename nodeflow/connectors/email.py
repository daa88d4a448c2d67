# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""Outgoing email over SMTP."""

import asyncio
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import make_msgid
from typing import Any, Dict, Optional

from nodeflow.core.logging import get_engine_logger
from nodeflow.engine.exceptions import ConnectorError
from .base import Connector

logger = get_engine_logger("connectors.email")

DEFAULT_SMTP_HOST = "smtp.gmail.com"


class EmailConnector(Connector):
    name = "email"
    label = "SMTP"

    @property
    def configured(self) -> bool:
        return self.credentials.has_smtp

    def _send(self, sender: str, to: str, subject: str, html_body: str) -> str:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = sender
        msg["To"] = to
        msg["Message-ID"] = make_msgid()
        msg.attach(MIMEText(html_body, "html"))

        host = self.credentials.smtp_host or DEFAULT_SMTP_HOST
        with smtplib.SMTP(host, self.credentials.smtp_port) as server:
            if self.config.smtp_use_tls:
                server.starttls(context=ssl.create_default_context())
            server.login(self.credentials.smtp_user, self.credentials.smtp_pass)
            server.sendmail(sender, [to], msg.as_string())

        return msg["Message-ID"]

    async def send(self, to: str, subject: str, body: str, sender: Optional[str] = None) -> Dict[str, Any]:
        if not self.configured:
            logger.warning("SMTP credentials not configured, simulating email send")
            return {
                "success": True,
                "simulated": True,
                "to": to,
                "subject": subject,
                "message": "Email would be sent (no SMTP credentials configured)",
            }

        try:
            message_id = await asyncio.to_thread(
                self._send,
                sender or self.credentials.smtp_user,
                to,
                subject,
                f"<div>{body}</div>",
            )
        except (smtplib.SMTPException, OSError) as e:
            raise ConnectorError(self.name, f"Failed to send email: {e}") from e

        return {"success": True, "messageId": message_id, "to": to, "subject": subject}
