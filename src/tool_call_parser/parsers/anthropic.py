"""Parse Anthropic ``tool_use`` content blocks."""

from typing import Any, Iterable, List, Optional

from ..core.base import ToolCallParser
from ..core.json_utils import arguments_text, dump_json, get_list, get_name, get_str
from ..core.models import ToolCall, ToolCallResult
from ..core.providers import Provider

TOOL_USE = "tool_use"
TOOL_RESULT = "tool_result"


class AnthropicToolCallParser(ToolCallParser):
    """Parser for the Anthropic Messages API and Anthropic-compatible endpoints."""

    @property
    def provider(self) -> Provider:
        return Provider.ANTHROPIC

    def parse_tree(self, tree: Any) -> List[ToolCall]:
        """Collect ``tool_use`` content blocks in order."""
        blocks = [block for block in get_list(tree, "content") if get_str(block, "type") == TOOL_USE]
        return self._collect(blocks, self._parse_tool_use)

    def has_tool_calls_tree(self, tree: Any) -> bool:
        if get_str(tree, "stop_reason") == TOOL_USE:
            return True
        return any(get_str(block, "type") in (TOOL_USE, TOOL_RESULT) for block in get_list(tree, "content"))

    def format_results(self, results: Iterable[ToolCallResult]) -> str:
        """Build one user message of ``tool_result`` blocks."""
        message = {
            "role": "user",
            "content": [
                {
                    "type": TOOL_RESULT,
                    "tool_use_id": result.tool_call_id,
                    "content": result.content,
                    "is_error": not result.is_success,
                }
                for result in results
            ],
        }
        return dump_json(message)

    @staticmethod
    def _parse_tool_use(block: Any) -> Optional[ToolCall]:
        call_id = get_str(block, "id")
        name = get_name(block)
        if call_id is None or name is None:
            return None

        arguments = arguments_text(block.get("input"))
        if arguments is None:
            return None
        return ToolCall(id=call_id, name=name, arguments=arguments)
