"""Email delivery for leads via the Resend HTTP API."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from mowroi.config.settings import Settings
from mowroi.leads.email import render_lead_email
from mowroi.leads.schema import LeadRequest

logger = logging.getLogger(__name__)


class LeadDeliveryError(Exception):
    """The email provider rejected or failed to accept a lead."""


class LeadEmailClient:
    """Sends rendered lead emails to the sales inbox."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._settings = settings or Settings()
        self._client = client or httpx.AsyncClient(timeout=30.0)

    async def send(self, lead: LeadRequest) -> None:
        subject, body = render_lead_email(lead)
        payload = {
            "from": self._settings.lead_from,
            "to": self._settings.lead_recipients,
            "subject": subject,
            "html": body,
            "reply_to": lead.email,
        }
        headers = {"Authorization": f"Bearer {self._settings.resend_api_key}"}

        try:
            response = await self._client.post(
                self._settings.resend_api_url, json=payload, headers=headers
            )
        except httpx.HTTPError as e:
            logger.error(f"Email API request failed: {e}")
            raise LeadDeliveryError(str(e)) from e

        if not response.is_success:
            logger.error(f"Email API error {response.status_code}: {response.text}")
            raise LeadDeliveryError(f"HTTP {response.status_code}")

    async def aclose(self) -> None:
        await self._client.aclose()
