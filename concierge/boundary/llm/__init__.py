"""
LLM boundary: construction of the chat model behind the assistant.
"""

from concierge.boundary.llm.chat_model_factory import build_chat_model

__all__ = ["build_chat_model"]
