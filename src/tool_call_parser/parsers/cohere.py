"""Parse Cohere Command tool calls (V1, V2 and multi-step ``actions``)."""

from typing import Any, Iterable, List, Optional

from ..core.base import ToolCallParser
from ..core.json_utils import arguments_text, dump_json, get_dict, get_list, get_name, get_str, has_key, new_call_id
from ..core.models import ToolCall, ToolCallResult
from ..core.providers import Provider


class CohereToolCallParser(ToolCallParser):
    """
    Parser for Cohere's chat API.

    Three sources are combined, in order: the root ``tool_calls`` array, ``message.tool_calls``
    (when ``message`` is an object) and the multi-step ``actions`` array. Entries of either
    ``tool_calls`` array may use the V2 shape (``id`` plus ``function.name``/``function.arguments``)
    or the V1 shape (``name``/``parameters``).
    """

    @property
    def provider(self) -> Provider:
        return Provider.COHERE

    def parse_tree(self, tree: Any) -> List[ToolCall]:
        """Collect V1 and V2 tool calls plus ``actions`` entries."""
        calls = self._collect(get_list(tree, "tool_calls"), self._parse_tool_call)
        calls.extend(self._collect(get_list(get_dict(tree, "message"), "tool_calls"), self._parse_tool_call))
        calls.extend(self._collect(get_list(tree, "actions"), self._parse_action))
        return calls

    def has_tool_calls_tree(self, tree: Any) -> bool:
        if get_str(tree, "finish_reason") == "TOOL_CALL":
            return True
        return bool(get_list(tree, "tool_calls")) or bool(get_list(get_dict(tree, "message"), "tool_calls"))

    def format_results(self, results: Iterable[ToolCallResult]) -> str:
        """Build a ``tool_results`` object. Parameters are not echoed back."""
        tool_results = [
            {
                "call": {"name": result.tool_name or "", "parameters": {}},
                "outputs": [{"result": result.content}],
            }
            for result in results
        ]
        return dump_json({"tool_results": tool_results})

    @staticmethod
    def _parse_tool_call(candidate: Any) -> Optional[ToolCall]:
        # V2: {id, type, function: {name, arguments}}
        if has_key(candidate, "function"):
            function = get_dict(candidate, "function")
            name = get_name(function)
            if function is None or name is None:
                return None
            arguments = arguments_text(function.get("arguments"), allow_string=True)
            if arguments is None:
                return None
            return ToolCall(id=get_str(candidate, "id") or new_call_id(), name=name, arguments=arguments)

        # V1: {name, parameters}
        name = get_name(candidate)
        if name is None:
            return None
        arguments = arguments_text(candidate.get("parameters"))
        if arguments is None:
            return None
        return ToolCall(id=new_call_id(), name=name, arguments=arguments)

    @staticmethod
    def _parse_action(action: Any) -> Optional[ToolCall]:
        name = get_name(action, "tool_name")
        if name is None:
            return None

        arguments = arguments_text(action.get("tool_input"))
        if arguments is None:
            return None
        return ToolCall(id=new_call_id(), name=name, arguments=arguments)
