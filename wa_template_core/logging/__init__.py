"""
Logging Module

Structured logging shared by the package and its callers.
"""

from .structured import setup_logging

__all__ = [
    "setup_logging",
]
