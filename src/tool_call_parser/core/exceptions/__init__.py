"""Export the exception hierarchy used by parser lookup and registration."""

from .exceptions import (
    ToolCallParserError,
    UnsupportedProviderError,
    InvalidProviderError,
    ProviderNotSupportedError,
    ParserRegistrationError,
)

__all__ = [
    "ToolCallParserError",
    "UnsupportedProviderError",
    "InvalidProviderError",
    "ProviderNotSupportedError",
    "ParserRegistrationError",
]
