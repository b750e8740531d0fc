"""
Tool-calling wine chat agent on the Anthropic Messages API.
"""
from __future__ import annotations

import json
from typing import Any, Optional, TypedDict

from anthropic import Anthropic

from wine_agent.config import (
    ANTHROPIC_API_KEY, ANTHROPIC_MODEL, CHAT_MAX_TOKENS, TOOL_RESULT_CAP,
)
from wine_agent.data.store import WineStore
from wine_agent.agent.registry import TOOLS_SPECS, execute_tool

MAX_TOOL_ROUNDS = 8

SYSTEM_PROMPT = """You are a wine expert assistant with access to a database of {count:,} wine reviews.
You can search, filter, and provide detailed information about wines.

When users ask about wines:
- Use search_wines for text queries (e.g., "cherry oak", "Napa Valley", "Quilceda Creek")
- Use filter_wines for specific criteria (price, rating, region, varietal, vintage)
- Use get_wine_details for specific wine names
- Provide natural, conversational responses with wine recommendations
- When showing wines, include brand, name, rating, price, and brief tasting notes
- Limit results to top 10 most relevant wines unless user asks for more

Available wine data: brand, name, vintage, price, rating (0-5 stars), region,
AVA, main varietal, type (Red/White/Rosé/etc.), tasting notes, tasting/publication dates."""


class Message(TypedDict):
    role: str
    content: str


_anthropic_client: Optional[Anthropic] = None


def get_anthropic_client() -> Anthropic:
    """Get or initialize the shared Anthropic client."""
    global _anthropic_client
    if _anthropic_client is None:
        if not ANTHROPIC_API_KEY:
            raise RuntimeError("ANTHROPIC_API_KEY not configured")
        _anthropic_client = Anthropic(api_key=ANTHROPIC_API_KEY)
    return _anthropic_client


def _tool_result_content(result: Any) -> str:
    if isinstance(result, list):
        result = result[:TOOL_RESULT_CAP]
    return json.dumps(result, ensure_ascii=False)


class WineChatAgent:
    """Runs the tool loop: model → tool calls → tool results → model, until a text answer."""

    def __init__(
        self,
        store: WineStore,
        client: Optional[Anthropic] = None,
        model: str = ANTHROPIC_MODEL,
        max_tokens: int = CHAT_MAX_TOKENS,
    ) -> None:
        self.store = store
        self.client = client
        self.model = model
        self.max_tokens = max_tokens

    def _create(self, messages: list[dict]):
        client = self.client or get_anthropic_client()
        return client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=SYSTEM_PROMPT.format(count=self.store.wine_count()),
            tools=TOOLS_SPECS,
            messages=messages,
        )

    def run_tool(self, name: str, args: dict) -> Any:
        print(f"[Tool Call] {name}: {json.dumps(args, ensure_ascii=False)}")
        result = execute_tool(self.store, name, args)
        if isinstance(result, list):
            print(f"[Tool Result] Found {len(result)} wines")
        elif isinstance(result, dict) and "error" in result:
            print(f"[Tool Result] Error: {result['error']}")
        return result

    def chat(self, messages: list[Message]) -> str:
        """Answer the last user message given the conversation so far."""
        convo: list[dict] = [{"role": m["role"], "content": m["content"]} for m in messages]
        response = self._create(convo)

        rounds = 0
        while response.stop_reason == "tool_use" and rounds < MAX_TOOL_ROUNDS:
            rounds += 1
            tool_uses = [block for block in response.content if block.type == "tool_use"]
            if not tool_uses:
                break

            convo.append({"role": "assistant", "content": response.content})
            convo.append({
                "role": "user",
                "content": [
                    {
                        "type": "tool_result",
                        "tool_use_id": block.id,
                        "content": _tool_result_content(self.run_tool(block.name, dict(block.input or {}))),
                    }
                    for block in tool_uses
                ],
            })
            response = self._create(convo)

        return "".join(block.text for block in response.content if block.type == "text")
