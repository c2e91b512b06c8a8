from .exceptions import (
    TemplateSenderError,
    InvalidArgumentError,
    ApiRequestFailedError,
)

__all__ = [
    "TemplateSenderError",
    "InvalidArgumentError",
    "ApiRequestFailedError",
]
