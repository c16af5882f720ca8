"""
Model factory for selecting the embedding and chat provider.

Depends on LLM_PROVIDER: 'openai' (default) or 'google_genai'.
Both providers are exposed through the LangChain Embeddings and
BaseChatModel interfaces so the pipeline never sees the SDK.

Dependencies: langchain_openai, langchain_google_genai, pdfchat.configs
System role: Embedding and chat model instantiation and selection
"""

import logging

from langchain_core.embeddings import Embeddings
from langchain_core.language_models.chat_models import BaseChatModel

from pdfchat.configs.llm import LLMSettings

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("openai", "google_genai")


def _provider(settings: LLMSettings) -> str:
    provider = settings.provider.lower()
    if provider not in SUPPORTED_PROVIDERS:
        raise ValueError(
            f"Invalid LLM_PROVIDER: {provider}. "
            f"Must be one of {', '.join(SUPPORTED_PROVIDERS)}."
        )
    return provider


def get_embeddings(settings: LLMSettings) -> Embeddings:
    """
    Build the embeddings model for the configured provider.

    Args:
        settings: LLM settings

    Returns:
        Embeddings: LangChain embeddings instance

    Raises:
        ValueError: If LLM_PROVIDER is invalid
    """
    provider = _provider(settings)
    logger.info(
        f"{__name__}:get_embeddings - Creating {provider} embeddings",
        extra={"model": settings.embedding_model},
    )

    if provider == "openai":
        from langchain_openai import OpenAIEmbeddings

        kwargs = {"model": settings.embedding_model}
        if settings.api_key:
            kwargs["api_key"] = settings.api_key
        return OpenAIEmbeddings(**kwargs)

    from langchain_google_genai import GoogleGenerativeAIEmbeddings

    kwargs = {"model": settings.embedding_model}
    if settings.api_key:
        kwargs["google_api_key"] = settings.api_key
    return GoogleGenerativeAIEmbeddings(**kwargs)


def get_chat_model(settings: LLMSettings) -> BaseChatModel:
    """
    Build the chat model for the configured provider.

    Args:
        settings: LLM settings

    Returns:
        BaseChatModel: LangChain chat model instance

    Raises:
        ValueError: If LLM_PROVIDER is invalid
    """
    provider = _provider(settings)
    logger.info(
        f"{__name__}:get_chat_model - Creating {provider} chat model",
        extra={"model": settings.chat_model},
    )

    kwargs = {"model": settings.chat_model}
    if settings.temperature is not None:
        kwargs["temperature"] = settings.temperature

    if provider == "openai":
        from langchain_openai import ChatOpenAI

        if settings.api_key:
            kwargs["api_key"] = settings.api_key
        return ChatOpenAI(**kwargs)

    from langchain_google_genai import ChatGoogleGenerativeAI

    if settings.api_key:
        kwargs["google_api_key"] = settings.api_key
    return ChatGoogleGenerativeAI(**kwargs)
