"""
Graph Mailer - sends email through the Microsoft Graph sendMail API.

Token selection:
- A delegated user token sends from that user's mailbox (/me/sendMail)
- Otherwise the application token sends from the configured service
  account (/users/{sender}/sendMail)
"""

from typing import Optional

import httpx

from app.config import settings
from app.logger import get_logger

logger = get_logger("mailer")


class MailDeliveryError(Exception):
    """Raised when Graph rejects or fails to accept a message."""


class GraphMailer:
    """Thin async client for Graph sendMail."""

    def __init__(
        self,
        access_token: Optional[str] = None,
        sender_email: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.access_token = access_token if access_token is not None else settings.GRAPH_ACCESS_TOKEN
        self.sender_email = sender_email if sender_email is not None else settings.NOTIFICATION_SENDER_EMAIL
        self.base_url = (base_url or settings.GRAPH_BASE_URL).rstrip("/")
        self.timeout = settings.HTTP_TIMEOUT
        self._client = client

    def _endpoint(self, delegated: bool) -> str:
        if delegated:
            return f"{self.base_url}/me/sendMail"
        if not self.sender_email:
            raise MailDeliveryError("NOTIFICATION_SENDER_EMAIL is not configured")
        return f"{self.base_url}/users/{self.sender_email}/sendMail"

    @staticmethod
    def build_payload(to: list[str], subject: str, body: str, content_type: str = "HTML") -> dict:
        """Graph sendMail request body."""
        return {
            "message": {
                "subject": subject,
                "body": {"contentType": content_type, "content": body},
                "toRecipients": [{"emailAddress": {"address": email}} for email in to],
            },
            "saveToSentItems": True,
        }

    async def send(
        self,
        to: list[str],
        subject: str,
        body: str,
        access_token: Optional[str] = None,
        content_type: str = "HTML",
    ) -> None:
        """Send one message.

        Args:
            to: Recipient addresses
            subject: Email subject
            body: Message content
            access_token: Delegated user token; the application token is used if omitted
            content_type: Graph body type, "HTML" or "Text"

        Raises:
            MailDeliveryError: Graph returned an error or could not be reached
        """
        delegated = access_token is not None
        token = access_token or self.access_token
        if not token:
            raise MailDeliveryError("No Graph access token available")

        endpoint = self._endpoint(delegated)
        logger.info(f"Sending '{subject}' to {', '.join(to)} ({'delegated' if delegated else 'service account'})")

        headers = {"Authorization": f"Bearer {token}", "Content-Type": "application/json"}
        payload = self.build_payload(to, subject, body, content_type)

        try:
            if self._client is not None:
                resp = await self._client.post(endpoint, json=payload, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.post(endpoint, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise MailDeliveryError(f"Graph request failed: {e}") from e

        if resp.status_code >= 400:
            raise MailDeliveryError(f"Graph API error: {resp.status_code} - {resp.text}")
