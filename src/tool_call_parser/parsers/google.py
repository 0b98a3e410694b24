"""Parse Google Gemini / Vertex AI ``functionCall`` parts."""

from typing import Any, Iterable, List, Optional

from ..core.base import ToolCallParser
from ..core.json_utils import arguments_text, dump_json, get_dict, get_list, get_name, has_key, new_call_id
from ..core.models import ToolCall, ToolCallResult
from ..core.providers import Provider


class GoogleToolCallParser(ToolCallParser):
    """
    Parser for Gemini ``functionCall`` parts.

    Calls are gathered from every location Gemini payloads use, in this order:
    ``candidates[].content.parts[]``, ``content.parts[]``, ``parts[]`` and a bare root
    ``functionCall``. Gemini does not send call ids, so one is synthesized per call.
    """

    @property
    def provider(self) -> Provider:
        return Provider.GOOGLE

    def parse_tree(self, tree: Any) -> List[ToolCall]:
        """Collect ``functionCall`` parts. Gemini sends no ids, so every call gets a synthesized one."""
        return self._collect(self._find_function_calls(tree), self._parse_function_call)

    def has_tool_calls_tree(self, tree: Any) -> bool:
        return bool(self._find_function_calls(tree))

    def format_results(self, results: Iterable[ToolCallResult]) -> str:
        """Build a list of ``functionResponse`` parts."""
        responses = [
            {"functionResponse": {"name": result.tool_name or "", "response": {"result": result.content}}}
            for result in results
        ]
        return dump_json(responses)

    @classmethod
    def _find_function_calls(cls, tree: Any) -> List[Any]:
        found: List[Any] = []
        for candidate in get_list(tree, "candidates"):
            found.extend(cls._function_calls_in(get_list(get_dict(candidate, "content"), "parts")))
        found.extend(cls._function_calls_in(get_list(get_dict(tree, "content"), "parts")))
        found.extend(cls._function_calls_in(get_list(tree, "parts")))
        if has_key(tree, "functionCall"):
            found.append(tree["functionCall"])
        return [function_call for function_call in found if function_call is not None]

    @staticmethod
    def _function_calls_in(parts: List[Any]) -> List[Any]:
        return [part["functionCall"] for part in parts if has_key(part, "functionCall")]

    @staticmethod
    def _parse_function_call(function_call: Any) -> Optional[ToolCall]:
        name = get_name(function_call)
        if name is None:
            return None

        arguments = arguments_text(function_call.get("args"))
        if arguments is None:
            return None
        return ToolCall(id=new_call_id(), name=name, arguments=arguments)
