"""
WhatsApp Template Client
========================
Holds credentials and an HTTP client for repeated template sends.
"""

from typing import Optional

import httpx
import structlog

from wa_template_core.config import WhatsAppConfig

from .constants import DEFAULT_LANGUAGE_CODE
from .sender import send_diagnostic_mkt_template

logger = structlog.get_logger(__name__)


class WhatsAppTemplateClient:
    """
    Convenience wrapper around send_diagnostic_mkt_template.

    A client passed in by the caller is shared and left open; one created
    here is closed by close() or on leaving the async context.
    """

    def __init__(
        self,
        config: Optional[WhatsAppConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or WhatsAppConfig()
        self._client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self):
        self._get_client()
        return self

    async def __aexit__(self, *args):
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
            self._owns_client = True
        return self._client

    async def close(self):
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.debug("WhatsApp HTTP client closed")

    async def send_diagnostic_mkt(
        self,
        to_phone_number: str,
        customer_name: Optional[str],
        doctor_consultation_discount: Optional[str],
        doctor_coupon_code: Optional[str],
        health_checkup_discount: Optional[str],
        diagnostic_coupon_code: Optional[str],
        language_code: Optional[str] = DEFAULT_LANGUAGE_CODE,
    ) -> str:
        """Send the diagnosticMKt template with the configured credentials."""
        return await send_diagnostic_mkt_template(
            self._get_client(),
            self.config.phone_number_id,
            self.config.access_token,
            to_phone_number,
            customer_name,
            doctor_consultation_discount,
            doctor_coupon_code,
            health_checkup_discount,
            diagnostic_coupon_code,
            language_code=language_code,
        )
