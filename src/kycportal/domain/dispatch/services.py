"""Outbound email and WhatsApp dispatch of KYC documents."""

from __future__ import annotations

import html
import re
from typing import TYPE_CHECKING, Any

import httpx
import structlog

from kycportal.config import get_settings
from kycportal.domain.uploads.storage import display_name

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger()

DEFAULT_COUNTRY_CODE = "1"
NATIONAL_NUMBER_MAX_DIGITS = 10


class DispatchError(Exception):
    """The messaging endpoint refused or could not be reached."""


def normalize_phone(phone: str) -> str:
    """E.164 style number: digits only, ``+`` prefixed, default country code for short numbers."""
    digits = re.sub(r"\D", "", phone)
    if len(digits) <= NATIONAL_NUMBER_MAX_DIGITS:
        digits = f"{DEFAULT_COUNTRY_CODE}{digits}"
    return f"+{digits}"


def email_subject(company_name: str) -> str:
    return f"Documents from {company_name}"


def email_body(company_name: str, file_paths: Sequence[str]) -> str:
    items = "".join(
        f'<li style="background-color: #f8fafc; padding: 12px; margin-bottom: 8px; border-radius: 6px;">'
        f"{html.escape(display_name(path))}</li>"
        for path in file_paths
    )
    return (
        '<div style="font-family: Arial, sans-serif; padding: 20px; max-width: 600px; margin: 0 auto;">'
        f"<h2>{html.escape(email_subject(company_name))}</h2>"
        "<p>Please find the following documents attached to this email:</p>"
        f'<ul style="list-style-type: none; padding: 0; margin: 0;">{items}</ul>'
        f"<p>Total documents: {len(file_paths)}</p>"
        "</div>"
    )


class DocumentDispatcher:
    """Posts document bundles to the configured messaging endpoints."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        settings = get_settings()
        self.email_endpoint = settings.messaging.EMAIL_ENDPOINT
        self.whatsapp_endpoint = settings.messaging.WHATSAPP_ENDPOINT
        self.api_key = settings.messaging.API_KEY
        self.timeout = settings.messaging.TIMEOUT
        self.transport = transport

    async def _post(self, url: str, payload: dict[str, Any]) -> None:
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                response = await client.post(url, json=payload, headers=headers)
                response.raise_for_status()
            except httpx.HTTPStatusError as err:
                message = _error_message(err.response) or "Failed to send documents"
                logger.error("Messaging endpoint rejected request", url=url, status_code=err.response.status_code)
                raise DispatchError(message) from err
            except httpx.HTTPError as err:
                logger.error("Messaging endpoint unreachable", url=url, error=str(err))
                raise DispatchError("Failed to send documents") from err

    async def send_email(self, to: str, company_name: str, file_paths: Sequence[str]) -> None:
        await self._post(
            self.email_endpoint,
            {
                "to": to,
                "subject": email_subject(company_name),
                "html": email_body(company_name, file_paths),
                "documents": [{"filepath": path} for path in file_paths],
                "companyName": company_name,
            },
        )
        logger.info("Documents sent via email", company=company_name, documents=len(file_paths))

    async def send_whatsapp(self, phone: str, company_name: str, file_paths: Sequence[str]) -> str:
        formatted_phone = normalize_phone(phone)
        await self._post(
            self.whatsapp_endpoint,
            {
                "phone": formatted_phone,
                "documents": [{"filepath": path} for path in file_paths],
                "companyName": company_name,
            },
        )
        logger.info("Documents sent via WhatsApp", company=company_name, documents=len(file_paths))
        return formatted_phone


def _error_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    return body.get("message") if isinstance(body, dict) else None


def provide_dispatcher() -> DocumentDispatcher:
    return DocumentDispatcher()
