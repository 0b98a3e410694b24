"""Provider -> parser registry with auto-detecting dispatch."""

import threading
from typing import Any, Dict, List, Optional, Union

from ..core.base import ToolCallParser
from ..core.config import ParserConfig
from ..core.exceptions import InvalidProviderError, ParserRegistrationError, ProviderNotSupportedError
from ..core.json_utils import is_blank, load_response
from ..core.logger import get_logger
from ..core.models import ToolCall
from ..core.providers import Provider, ProviderFormat
from ..parsers import (
    AnthropicToolCallParser,
    BedrockToolCallParser,
    CohereToolCallParser,
    GoogleToolCallParser,
    OpenAIToolCallParser,
)
from .detection import detect_provider_tree

logger = get_logger(__name__)

ProviderKey = Union[Provider, str]


class ParserRegistry:
    """
    Maps provider identifiers to parser instances and dispatches responses to them.

    Built-in identifiers are registered on construction; providers sharing a wire format
    share one parser instance. Custom identifiers (any string that is not a built-in value)
    can be added at runtime with ``register``, and built-ins can be overridden; the last
    registration wins.

    All access goes through an internal lock, so registering while other threads parse
    is safe. Parsing itself runs outside the lock on a snapshot of the mapping.
    """

    def __init__(self, config: Optional[ParserConfig] = None, register_defaults: bool = True) -> None:
        """
        Initialize the registry.

        Args:
            config: Detection and fallback settings. Defaults to ``ParserConfig()``.
            register_defaults: Whether to register the built-in parsers.
        """
        self.config = config or ParserConfig()
        self._lock = threading.RLock()
        self._parsers: Dict[ProviderKey, ToolCallParser] = {}
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        shared: Dict[ProviderFormat, ToolCallParser] = {
            ProviderFormat.OPENAI: OpenAIToolCallParser(),
            ProviderFormat.ANTHROPIC: AnthropicToolCallParser(),
            ProviderFormat.GOOGLE: GoogleToolCallParser(),
            ProviderFormat.BEDROCK: BedrockToolCallParser(),
            ProviderFormat.COHERE: CohereToolCallParser(),
        }
        with self._lock:
            for provider in Provider:
                if provider is Provider.AUTO:
                    continue
                self._parsers[provider] = shared[provider.wire_format]

    def reset(self) -> None:
        """Drop every registration and restore the built-in parsers."""
        with self._lock:
            self._parsers.clear()
            self._register_defaults()
        logger.info("Parser registry reset to built-in providers.")

    def register(self, provider: ProviderKey, parser: ToolCallParser) -> None:
        """
        Register or replace the parser for a provider.

        Args:
            provider: A ``Provider`` or a custom identifier string.
            parser: The parser instance to use for that identifier.

        Raises:
            ParserRegistrationError: If ``provider`` is the auto-detect sentinel or ``parser``
                is not a ``ToolCallParser``.
        """
        if not isinstance(parser, ToolCallParser):
            label = _key_label(provider) if isinstance(provider, str) else repr(provider)
            msg = f"Parser for '{label}' must be a ToolCallParser, got {type(parser).__name__}."
            logger.error(msg)
            raise ParserRegistrationError(msg)

        try:
            key = _normalize_key(provider)
        except InvalidProviderError as e:
            raise ParserRegistrationError(str(e)) from e

        with self._lock:
            replaced = key in self._parsers
            self._parsers[key] = parser
        logger.info("%s parser for '%s': %r", "Replaced" if replaced else "Registered", _key_label(key), parser)

    def get(self, provider: ProviderKey) -> ToolCallParser:
        """
        Look up the parser for a provider.

        Raises:
            InvalidProviderError: If ``provider`` is the auto-detect sentinel or not an identifier.
            ProviderNotSupportedError: If nothing is registered for ``provider``.
        """
        key = _normalize_key(provider)
        with self._lock:
            parser = self._parsers.get(key)
        if parser is None:
            msg = f"Provider '{_key_label(key)}' is not supported."
            logger.error(msg)
            raise ProviderNotSupportedError(msg)
        return parser

    def try_get(self, provider: ProviderKey) -> Optional[ToolCallParser]:
        """Like ``get`` but returns ``None`` instead of raising."""
        try:
            key = _normalize_key(provider)
        except InvalidProviderError:
            return None
        with self._lock:
            return self._parsers.get(key)

    def providers(self) -> List[ProviderKey]:
        """Registered identifiers in registration order."""
        with self._lock:
            return list(self._parsers)

    def openai_compatible_providers(self) -> List[Provider]:
        """Registered built-in identifiers that speak the OpenAI format."""
        return [key for key in self.providers() if isinstance(key, Provider) and key.is_openai_compatible]

    def detect_provider(self, response: Any) -> Provider:
        """Guess the provider of a response; ``Provider.AUTO`` when unresolved or blank."""
        if is_blank(response):
            return Provider.AUTO
        return detect_provider_tree(
            load_response(response), permissive_anthropic=self.config.permissive_anthropic_detection
        )

    def parse(self, response: Any) -> List[ToolCall]:
        """
        Extract tool calls from a response of unknown origin.

        The detected provider's parser handles the response alone. If detection is
        unresolved, the parsers in ``config.fallback_order`` are tried in turn and the
        first non-empty result is returned.

        Args:
            response: JSON text, a pydantic model or a decoded tree.

        Returns:
            The tool calls found, possibly empty.

        Raises:
            json.JSONDecodeError: If text input is not valid JSON.
        """
        if is_blank(response):
            return []
        tree = load_response(response)

        parser = self._detected_parser(tree)
        if parser is not None:
            return parser.parse_tree(tree)

        for provider in self.config.fallback_order:
            fallback = self.try_get(provider)
            if fallback is None:
                continue
            calls = fallback.parse_tree(tree)
            if calls:
                logger.debug("Fallback parser for '%s' matched %d tool call(s).", provider.value, len(calls))
                return calls
        return []

    def has_tool_calls(self, response: Any) -> bool:
        """Check a response of unknown origin for tool calls."""
        if is_blank(response):
            return False
        tree = load_response(response)

        parser = self._detected_parser(tree)
        if parser is not None:
            return parser.has_tool_calls_tree(tree)

        return any(candidate.has_tool_calls_tree(tree) for candidate in self._distinct_parsers())

    def _detected_parser(self, tree: Any) -> Optional[ToolCallParser]:
        detected = detect_provider_tree(tree, permissive_anthropic=self.config.permissive_anthropic_detection)
        if detected is Provider.AUTO:
            return None
        return self.try_get(detected)

    def _distinct_parsers(self) -> List[ToolCallParser]:
        with self._lock:
            parsers = list(self._parsers.values())
        seen = set()
        distinct: List[ToolCallParser] = []
        for parser in parsers:
            if id(parser) not in seen:
                seen.add(id(parser))
                distinct.append(parser)
        return distinct


def _normalize_key(provider: ProviderKey) -> ProviderKey:
    if isinstance(provider, Provider):
        key: ProviderKey = provider
    elif isinstance(provider, str) and provider.strip():
        try:
            key = Provider(provider)
        except ValueError:
            key = provider
    else:
        raise InvalidProviderError(f"Invalid provider identifier: {provider!r}")

    if key is Provider.AUTO:
        raise InvalidProviderError("Provider.AUTO is not a parser; use parse() or detect_provider() for auto-detection.")
    return key


def _key_label(key: ProviderKey) -> str:
    return key.value if isinstance(key, Provider) else key
