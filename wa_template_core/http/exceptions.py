from typing import Optional


class TemplateSenderError(Exception):
    """Base exception for all template sending errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidArgumentError(TemplateSenderError, ValueError):
    """Raised before any network activity when a required argument is missing or blank."""
    def __init__(self, param_name: str, message: str = "Value is required."):
        self.param_name = param_name
        super().__init__(f"{message} (Parameter: {param_name})")


class ApiRequestFailedError(TemplateSenderError):
    """Raised when the Graph API answers with a non-2xx status."""
    def __init__(self, status_code: int, reason: Optional[str], body: str):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(
            f"WhatsApp template send failed ({status_code} {reason}): {body}"
        )
