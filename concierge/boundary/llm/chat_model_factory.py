"""
Chat model factory.

Builds the Gemini chat model used by the borrower assistant from settings.

Dependencies: langchain_google_genai, concierge.configs
System role: LLM client construction
"""

import logging

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from concierge.configs.chat import ChatSettings

logger = logging.getLogger(__name__)


def build_chat_model(settings: ChatSettings) -> BaseChatModel | None:
    """
    Create the chat model, or None when no API key is configured.

    Args:
        settings: Chat settings (key, model id, sampling parameters)

    Returns:
        BaseChatModel | None: Ready-to-use chat model
    """
    if not settings.google_api_key:
        logger.warning("CHAT_GOOGLE_API_KEY is not set; chat turns are disabled")
        return None

    logger.info(f"Initialising chat model {settings.model_id}")
    return ChatGoogleGenerativeAI(
        model=settings.model_id,
        google_api_key=settings.google_api_key,
        temperature=settings.temperature,
        max_output_tokens=settings.max_output_tokens,
    )
