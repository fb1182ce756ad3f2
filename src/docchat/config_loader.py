"""
Configuration loader.

Builds DocChatConfig from environment variables (and a local .env file).
"""
from dotenv import load_dotenv

from .config import DocChatConfig
from .config_validator import (
    first_env,
    get_bool_env,
    get_float_env,
    get_int_env,
    get_optional_env,
)
from .exceptions import ConfigurationError


def load_config_from_env(dotenv_path: str = None) -> DocChatConfig:
    """
    Load configuration from environment variables with validation.

    API keys are not read here; they are resolved by the LLM factory
    when the model client is created.

    Usage:
        config = load_config_from_env()
        app = DocChatApp(config)
        app.initialize()

    :param dotenv_path: Optional explicit .env path
    :return: Validated DocChatConfig instance
    :raises ConfigurationError: if values are malformed
    """
    load_dotenv(dotenv_path)

    config = DocChatConfig(
        llm_provider=get_optional_env("LLM_PROVIDER", default="google").lower(),
        llm_model=first_env(("LLM_MODEL", "MODEL"), default="gemini-1.5-flash"),
        llm_max_retries=get_int_env("LLM_MAX_RETRIES", 0),
        llm_retry_backoff_seconds=get_float_env("LLM_RETRY_BACKOFF_SECONDS", 0.5),
        memory_max_turns=get_int_env("MEMORY_MAX_TURNS", 10),
        default_session_id=get_optional_env("DEFAULT_SESSION_ID", default="default").strip(),
        session_ttl_seconds=get_float_env("SESSION_TTL_SECONDS", None),
        session_reap_interval_seconds=get_float_env("SESSION_REAP_INTERVAL_SECONDS", 60.0),
        max_upload_bytes=get_int_env("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
        include_error_codes=get_bool_env("INCLUDE_ERROR_CODES", False),
        static_dir=get_optional_env("STATIC_DIR", default="public"),
        port=get_int_env("PORT", 3000),
    )

    if config.memory_max_turns < 1:
        raise ConfigurationError("MEMORY_MAX_TURNS must be at least 1")
    if not config.default_session_id:
        raise ConfigurationError("DEFAULT_SESSION_ID cannot be blank")
    if config.llm_max_retries < 0:
        raise ConfigurationError("LLM_MAX_RETRIES cannot be negative")
    if config.session_ttl_seconds is not None and config.session_ttl_seconds <= 0:
        raise ConfigurationError("SESSION_TTL_SECONDS must be positive when set")

    return config
