"""
Chat endpoint — the wine agent with tool calling.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from wine_agent.agent.chat import WineChatAgent
from wine_agent.data.store import WineStore
from wine_agent.api.dependencies import get_store
from wine_agent.api.response_models import ChatRequest, ChatResponse

router = APIRouter(prefix="/api", tags=["chat"])


def get_chat_agent(store: WineStore = Depends(get_store)) -> WineChatAgent:
    return WineChatAgent(store)


@router.post("/chat", response_model=ChatResponse)
def chat(body: ChatRequest, agent: WineChatAgent = Depends(get_chat_agent)):
    if not body.messages:
        raise HTTPException(400, "Messages array required")
    try:
        message = agent.chat([m.model_dump() for m in body.messages])
    except Exception as exc:
        print(f"[Chat Error] {exc}")
        raise HTTPException(500, str(exc))
    return ChatResponse(message=message)
