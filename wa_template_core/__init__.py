"""
WhatsApp Template Core
======================
Sends the diagnosticMKt WhatsApp template through the Graph API.
"""

__version__ = "0.1.0"

# Sending
from wa_template_core.whatsapp import (
    TemplateRequest,
    ApiResponse,
    WhatsAppTemplateClient,
    build_messages_url,
    send_diagnostic_mkt_template,
)

# Errors
from wa_template_core.http.exceptions import (
    TemplateSenderError,
    InvalidArgumentError,
    ApiRequestFailedError,
)

# Config
from wa_template_core.config import WhatsAppConfig

# Logging
from wa_template_core.logging import setup_logging

__all__ = [
    "__version__",
    "TemplateRequest",
    "ApiResponse",
    "WhatsAppTemplateClient",
    "build_messages_url",
    "send_diagnostic_mkt_template",
    "TemplateSenderError",
    "InvalidArgumentError",
    "ApiRequestFailedError",
    "WhatsAppConfig",
    "setup_logging",
]
