"""
WhatsApp Templates Module
==========================
diagnosticMKt template sending over the WhatsApp Cloud API.
"""

from .models import (
    TextParameter,
    DocumentMedia,
    DocumentParameter,
    HeaderComponent,
    BodyComponent,
    Language,
    Template,
    TemplateRequest,
    ApiResponse,
)
from .sender import build_messages_url, send_diagnostic_mkt_template
from .client import WhatsAppTemplateClient

__all__ = [
    # Models
    "TextParameter",
    "DocumentMedia",
    "DocumentParameter",
    "HeaderComponent",
    "BodyComponent",
    "Language",
    "Template",
    "TemplateRequest",
    "ApiResponse",
    # Sending
    "build_messages_url",
    "send_diagnostic_mkt_template",
    "WhatsAppTemplateClient",
]
