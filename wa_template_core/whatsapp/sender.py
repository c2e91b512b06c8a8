"""
Template Message Sender
=======================
Sends the diagnosticMKt template through the WhatsApp Cloud API.
"""

from typing import Any, Optional

import httpx
import structlog

from wa_template_core.http.exceptions import (
    ApiRequestFailedError,
    InvalidArgumentError,
)

from .constants import (
    DEFAULT_LANGUAGE_CODE,
    GRAPH_API_BASE_URL,
    JSON_CONTENT_TYPE,
    MESSAGES_PATH,
)
from .models import ApiResponse, TemplateRequest

logger = structlog.get_logger(__name__)


def _require(value: Any, param_name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(param_name)


def build_messages_url(phone_number_id: str) -> str:
    """Graph API messages endpoint for a sending phone number ID."""
    return f"{GRAPH_API_BASE_URL}{phone_number_id}{MESSAGES_PATH}"


def build_request(
    phone_number_id: str,
    access_token: str,
    template_request: TemplateRequest,
) -> httpx.Request:
    return httpx.Request(
        "POST",
        build_messages_url(phone_number_id),
        content=template_request.to_json().encode("utf-8"),
        headers={
            "Authorization": f"Bearer {access_token}",
            "Content-Type": JSON_CONTENT_TYPE,
        },
    )


async def post_template(client: httpx.AsyncClient, request: httpx.Request) -> ApiResponse:
    """Send one request and read the whole reply, whatever its status."""
    response = await client.send(request)
    try:
        await response.aread()
    finally:
        await response.aclose()

    return ApiResponse(
        status_code=response.status_code,
        body=response.text,
        reason=response.reason_phrase,
    )


async def send_diagnostic_mkt_template(
    client: httpx.AsyncClient,
    phone_number_id: str,
    access_token: str,
    to_phone_number: str,
    customer_name: Optional[str],
    doctor_consultation_discount: Optional[str],
    doctor_coupon_code: Optional[str],
    health_checkup_discount: Optional[str],
    diagnostic_coupon_code: Optional[str],
    language_code: Optional[str] = DEFAULT_LANGUAGE_CODE,
) -> str:
    """
    Send the "diagnosticMKt" template message with its document header.

    Args:
        client: Caller-owned async HTTP client; it is never closed here
        phone_number_id: Meta WhatsApp phone number ID of the sender
        access_token: Graph API bearer token
        to_phone_number: Recipient in international format, sent as given
        customer_name: Template variable {{1}}
        doctor_consultation_discount: Template variable {{2}} (e.g. "20%")
        doctor_coupon_code: Template variable {{3}}
        health_checkup_discount: Template variable {{4}} (e.g. "15%")
        diagnostic_coupon_code: Template variable {{5}}
        language_code: Template language code

    Returns:
        Raw API response body

    Raises:
        InvalidArgumentError: client missing or a required value blank
        ApiRequestFailedError: the API answered with a non-2xx status

    Transport errors and cancellation propagate unchanged.
    """
    if client is None:
        raise InvalidArgumentError("client")
    _require(phone_number_id, "phone_number_id")
    _require(access_token, "access_token")
    _require(to_phone_number, "to_phone_number")

    template_request = TemplateRequest.build(
        to_phone_number=to_phone_number,
        customer_name=customer_name,
        doctor_consultation_discount=doctor_consultation_discount,
        doctor_coupon_code=doctor_coupon_code,
        health_checkup_discount=health_checkup_discount,
        diagnostic_coupon_code=diagnostic_coupon_code,
        language_code=language_code,
    )
    request = build_request(phone_number_id, access_token, template_request)

    logger.debug(
        "Sending WhatsApp template",
        template=template_request.template.name,
        language=language_code,
        phone_number_id=phone_number_id,
    )
    response = await post_template(client, request)
    logger.debug("WhatsApp template response", status=response.status_code)

    if not response.is_success:
        raise ApiRequestFailedError(response.status_code, response.reason, response.body)

    return response.body
