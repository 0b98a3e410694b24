from typing import Any, Dict, Iterator

import pytest
from google.genai import types
from openai.types.chat import ChatCompletion

from tool_call_parser import (
    AnthropicToolCallParser,
    BedrockToolCallParser,
    CohereToolCallParser,
    GoogleToolCallParser,
    OpenAIToolCallParser,
    reset_default_registry,
)


@pytest.fixture(autouse=True)
def clean_default_registry() -> Iterator[None]:
    """Undo custom registrations made on the process-wide registry by a test."""
    yield
    reset_default_registry()


@pytest.fixture
def openai_parser() -> OpenAIToolCallParser:
    return OpenAIToolCallParser()


@pytest.fixture
def anthropic_parser() -> AnthropicToolCallParser:
    return AnthropicToolCallParser()


@pytest.fixture
def google_parser() -> GoogleToolCallParser:
    return GoogleToolCallParser()


@pytest.fixture
def bedrock_parser() -> BedrockToolCallParser:
    return BedrockToolCallParser()


@pytest.fixture
def cohere_parser() -> CohereToolCallParser:
    return CohereToolCallParser()


@pytest.fixture
def openai_response() -> Dict[str, Any]:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "finish_reason": "tool_calls",
                "message": {
                    "role": "assistant",
                    "content": None,
                    "tool_calls": [
                        {
                            "id": "call_1",
                            "type": "function",
                            "function": {"name": "get_weather", "arguments": '{"location": "Tokyo"}'},
                        },
                        {
                            "id": "call_2",
                            "type": "function",
                            "function": {"name": "get_time", "arguments": '{"timezone": "Asia/Tokyo"}'},
                        },
                    ],
                },
            }
        ],
    }


@pytest.fixture
def anthropic_response() -> Dict[str, Any]:
    return {
        "id": "msg_1",
        "type": "message",
        "role": "assistant",
        "content": [
            {"type": "text", "text": "Let me check."},
            {"type": "tool_use", "id": "toolu_1", "name": "get_weather", "input": {"location": "Paris"}},
            {"type": "tool_use", "id": "toolu_2", "name": "get_time", "input": {"timezone": "Europe/Paris"}},
        ],
        "stop_reason": "tool_use",
    }


@pytest.fixture
def google_response() -> Dict[str, Any]:
    return {
        "candidates": [
            {
                "content": {
                    "role": "model",
                    "parts": [
                        {"functionCall": {"name": "get_weather", "args": {"location": "London"}}},
                        {"functionCall": {"name": "get_time", "args": {"timezone": "Europe/London"}}},
                    ],
                }
            }
        ]
    }


@pytest.fixture
def bedrock_response() -> Dict[str, Any]:
    return {
        "output": {
            "message": {
                "role": "assistant",
                "content": [
                    {"text": "Checking."},
                    {"toolUse": {"toolUseId": "tooluse_1", "name": "get_weather", "input": {"location": "Oslo"}}},
                    {"toolUse": {"toolUseId": "tooluse_2", "name": "get_time", "input": {"timezone": "Europe/Oslo"}}},
                ],
            }
        },
        "stopReason": "tool_use",
    }


@pytest.fixture
def cohere_response() -> Dict[str, Any]:
    return {
        "id": "c-1",
        "finish_reason": "TOOL_CALL",
        "tool_calls": [
            {"id": "call_v2_1", "type": "function", "function": {"name": "get_weather", "arguments": '{"location": "Seoul"}'}},
            {"id": "call_v2_2", "type": "function", "function": {"name": "get_time", "arguments": {"timezone": "Asia/Seoul"}}},
        ],
    }


@pytest.fixture
def openai_completion() -> ChatCompletion:
    return ChatCompletion.model_validate(
        {
            "id": "chatcmpl-sdk",
            "object": "chat.completion",
            "created": 1700000000,
            "model": "gpt-4o-mini",
            "choices": [
                {
                    "index": 0,
                    "finish_reason": "tool_calls",
                    "message": {
                        "role": "assistant",
                        "content": None,
                        "tool_calls": [
                            {
                                "id": "call_abc123",
                                "type": "function",
                                "function": {"name": "get_weather", "arguments": '{"location":"Tokyo"}'},
                            }
                        ],
                    },
                }
            ],
        }
    )


@pytest.fixture
def gemini_response() -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(
                    role="model",
                    parts=[types.Part(function_call=types.FunctionCall(name="get_weather", args={"location": "Berlin"}))],
                )
            )
        ]
    )
