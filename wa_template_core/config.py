"""
WhatsApp Configuration
======================
Credentials and transport settings for calling applications.
"""

import os
from dataclasses import dataclass, field


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    return float(raw) if raw else default


@dataclass
class WhatsAppConfig:
    """Configuration for the WhatsApp Cloud API connection."""
    phone_number_id: str = field(
        default_factory=lambda: os.environ.get("WHATSAPP_PHONE_NUMBER_ID", "")
    )
    access_token: str = field(
        default_factory=lambda: os.environ.get("WHATSAPP_ACCESS_TOKEN", "")
    )
    timeout: float = field(
        default_factory=lambda: _env_float("WHATSAPP_TIMEOUT", 30.0)
    )

    @classmethod
    def from_env(cls) -> "WhatsAppConfig":
        return cls()
