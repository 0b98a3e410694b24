"""
Custom exception classes for the tool call parser.

Structural mismatches inside a provider response are never errors; the parsers
skip them. The exceptions here cover the remaining failure modes: looking up a
parser that cannot be served and registering a parser that cannot be stored.
Malformed JSON text is not wrapped and surfaces as ``json.JSONDecodeError``.
"""


class ToolCallParserError(Exception):
    """Base exception for all parser-related errors."""

    pass


class UnsupportedProviderError(ToolCallParserError, ValueError):
    """Raised when a provider identifier cannot be used to look up a parser."""

    pass


class InvalidProviderError(UnsupportedProviderError):
    """Raised when the identifier is not valid for direct lookup (e.g. the auto-detect sentinel)."""

    pass


class ProviderNotSupportedError(UnsupportedProviderError):
    """Raised when no parser is registered for an otherwise valid identifier."""

    pass


class ParserRegistrationError(ToolCallParserError):
    """Raised when a parser cannot be registered."""

    pass
