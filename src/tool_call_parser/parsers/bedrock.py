"""Parse AWS Bedrock Converse API ``toolUse`` blocks."""

import json
from typing import Any, Iterable, List, Optional

from ..core.base import ToolCallParser
from ..core.json_utils import (
    TOOL_USE_ID_PREFIX,
    arguments_text,
    dump_json,
    get_dict,
    get_list,
    get_name,
    get_str,
    has_key,
    new_call_id,
)
from ..core.logger import get_logger
from ..core.models import ToolCall, ToolCallResult
from ..core.providers import Provider

logger = get_logger(__name__)


class BedrockToolCallParser(ToolCallParser):
    """
    Parser for the Bedrock Converse API.

    ``toolUse`` blocks are gathered from ``output.message.content[]``, ``message.content[]``
    (when ``message`` is an object), ``content[]`` and a bare root ``toolUse``, in that order.
    """

    @property
    def provider(self) -> Provider:
        return Provider.BEDROCK

    def parse_tree(self, tree: Any) -> List[ToolCall]:
        """Collect ``toolUse`` blocks from every supported location; ids fall back to a synthesized one."""
        return self._collect(self._find_tool_uses(tree), self._parse_tool_use)

    def has_tool_calls_tree(self, tree: Any) -> bool:
        if get_str(tree, "stopReason") == "tool_use":
            return True
        return bool(self._find_tool_uses(tree))

    def format_results(self, results: Iterable[ToolCallResult]) -> str:
        """Build one user message of ``toolResult`` blocks, with JSON-looking content embedded as JSON."""
        content = [
            {
                "toolResult": {
                    "toolUseId": result.tool_call_id,
                    "content": [{"json": self._json_content(result.content)}],
                    "status": "success" if result.is_success else "error",
                }
            }
            for result in results
        ]
        return dump_json({"role": "user", "content": content})

    @staticmethod
    def _json_content(content: str) -> Any:
        """Embed JSON-looking content as-is, wrap everything else as ``{"result": content}``."""
        if content.lstrip().startswith(("{", "[")):
            try:
                return json.loads(content)
            except json.JSONDecodeError:
                logger.debug("Tool result content looks like JSON but does not decode; wrapping it as text.")
        return {"result": content}

    @classmethod
    def _find_tool_uses(cls, tree: Any) -> List[Any]:
        found: List[Any] = []
        found.extend(cls._tool_uses_in(get_list(get_dict(get_dict(tree, "output"), "message"), "content")))
        found.extend(cls._tool_uses_in(get_list(get_dict(tree, "message"), "content")))
        found.extend(cls._tool_uses_in(get_list(tree, "content")))
        if has_key(tree, "toolUse"):
            found.append(tree["toolUse"])
        return [tool_use for tool_use in found if tool_use is not None]

    @staticmethod
    def _tool_uses_in(blocks: List[Any]) -> List[Any]:
        return [block["toolUse"] for block in blocks if has_key(block, "toolUse")]

    @staticmethod
    def _parse_tool_use(tool_use: Any) -> Optional[ToolCall]:
        name = get_name(tool_use)
        if name is None:
            return None

        arguments = arguments_text(tool_use.get("input"))
        if arguments is None:
            return None
        call_id = get_str(tool_use, "toolUseId") or new_call_id(TOOL_USE_ID_PREFIX)
        return ToolCall(id=call_id, name=name, arguments=arguments)
