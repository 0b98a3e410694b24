"""Abstract base for provider-specific tool call parsers."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional

from .json_utils import is_blank, load_response
from .logger import get_logger
from .models import ToolCall, ToolCallResult
from .providers import Provider

logger = get_logger(__name__)


class ToolCallParser(ABC):
    """
    Extracts normalized tool calls from one provider family's responses and formats
    tool results back into that family's wire shape.

    ``parse`` and ``has_tool_calls`` accept JSON text, a pydantic model (for example an
    SDK response object) or an already decoded tree. Blank text short-circuits to no
    calls; invalid JSON text raises ``json.JSONDecodeError``. Candidates that do not
    match the provider's shape are skipped, never reported.
    """

    @property
    @abstractmethod
    def provider(self) -> Provider:
        """The provider identifier this parser was written for."""
        pass

    def parse(self, response: Any) -> List[ToolCall]:
        """Extract tool calls from a response.

        Args:
            response: JSON text, a pydantic model or a decoded JSON tree.

        Returns:
            The tool calls in discovery order.
        """
        if is_blank(response):
            return []
        return self.parse_tree(load_response(response))

    def has_tool_calls(self, response: Any) -> bool:
        """Check whether a response requests any tool calls."""
        if is_blank(response):
            return False
        return self.has_tool_calls_tree(load_response(response))

    @abstractmethod
    def parse_tree(self, tree: Any) -> List[ToolCall]:
        """Extract tool calls from a decoded JSON tree. Must not raise on unexpected shapes."""
        pass

    @abstractmethod
    def has_tool_calls_tree(self, tree: Any) -> bool:
        """Check a decoded JSON tree for tool calls. Must not raise on unexpected shapes."""
        pass

    @abstractmethod
    def format_results(self, results: Iterable[ToolCallResult]) -> str:
        """Format tool results as the JSON text the provider expects back."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider={self.provider.value!r})"

    def _collect(self, candidates: Iterable[Any], parse_candidate: Callable[[Any], Optional[ToolCall]]) -> List[ToolCall]:
        """Run ``parse_candidate`` over each candidate, dropping the ones it rejects."""
        calls: List[ToolCall] = []
        for candidate in candidates:
            call = parse_candidate(candidate)
            if call is None:
                logger.debug("%s skipped an unrecognized tool call candidate.", type(self).__name__)
                continue
            calls.append(call)
        return calls
