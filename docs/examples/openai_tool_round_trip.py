import json
import os

from openai import OpenAI

import tool_call_parser as tcp
from tool_call_parser import ToolCallResult


def get_weather(location: str) -> str:
    """Pretend weather lookup."""
    return json.dumps({"location": location, "forecast": "sunny", "celsius": 22})


TOOLS = [
    {
        "type": "function",
        "function": {
            "name": "get_weather",
            "description": "Get the current weather for a location.",
            "parameters": {
                "type": "object",
                "properties": {"location": {"type": "string", "description": "City name"}},
                "required": ["location"],
            },
        },
    }
]


def main() -> None:
    """
    Ask a model for the weather, run the tool calls it requests and send the results back.
    """
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        print("Error: OPENAI_API_KEY not found in environment variables.")
        return

    client = OpenAI(api_key=api_key, base_url=os.getenv("OPENAI_BASE_URL"))
    model = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    messages = [{"role": "user", "content": "What's the weather in Tokyo?"}]

    completion = client.chat.completions.create(model=model, messages=messages, tools=TOOLS)
    if not tcp.has_tool_calls(completion):
        print(completion.choices[0].message.content)
        return

    results = []
    for call in tcp.parse(completion):
        try:
            results.append(ToolCallResult.success(call.id, get_weather(**call.arguments_json()), call.name))
        except TypeError as e:
            results.append(ToolCallResult.failure(call.id, str(e), call.name))

    messages.append(completion.choices[0].message.model_dump(exclude_none=True))
    messages.extend(json.loads(tcp.get_parser(tcp.Provider.OPENAI).format_results(results)))

    final = client.chat.completions.create(model=model, messages=messages, tools=TOOLS)
    print(final.choices[0].message.content)


if __name__ == "__main__":
    main()
