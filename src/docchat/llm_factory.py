from typing import Any

from .config_validator import get_required_env

try:
    from langchain_google_genai import ChatGoogleGenerativeAI
except ImportError:
    ChatGoogleGenerativeAI = None

try:
    from langchain_groq import ChatGroq
except ImportError:
    ChatGroq = None

try:
    from langchain_openai import ChatOpenAI
except ImportError:
    ChatOpenAI = None


def get_llm_instance(provider: str, model: str) -> Any:
    """
    Factory to return a ready-to-use chat model based on provider name.

    :param provider: 'google', 'groq' or 'openai'
    :param model: LLM model name
    :return: LangChain chat model exposing ``invoke``
    :raises ConfigurationError: if the provider API key is missing
    """
    provider = provider.lower()

    if provider == "google":
        if ChatGoogleGenerativeAI is None:
            raise ImportError("langchain_google_genai not installed")
        api_key = get_required_env(
            "GOOGLE_API_KEY", "API_KEY",
            description="Google AI Studio API key (https://aistudio.google.com/app/apikey)",
        )
        return ChatGoogleGenerativeAI(model=model, google_api_key=api_key)

    elif provider == "groq":
        if ChatGroq is None:
            raise ImportError("langchain_groq not installed")
        api_key = get_required_env(
            "GROQ_API_KEY", "API_KEY",
            description="Groq API key (https://console.groq.com/keys)",
        )
        return ChatGroq(model=model, api_key=api_key, streaming=False)

    elif provider == "openai":
        if ChatOpenAI is None:
            raise ImportError("langchain_openai not installed")
        api_key = get_required_env(
            "OPENAI_API_KEY", "API_KEY",
            description="OpenAI API key (https://platform.openai.com/api-keys)",
        )
        return ChatOpenAI(model_name=model, openai_api_key=api_key, streaming=False)

    else:
        raise ValueError(f"Unknown LLM provider: {provider}")
