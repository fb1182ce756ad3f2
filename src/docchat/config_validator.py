"""
Configuration validation utilities.

Environment lookups with placeholder detection and typed parsing.
"""
import os
import warnings
from typing import Iterable, Optional

from .exceptions import ConfigurationError


_PLACEHOLDER_PATTERNS = (
    "your_",
    "your-",
    "placeholder",
    "changeme",
    "xxx",
    "replace",
)


def get_required_env(*keys: str, description: Optional[str] = None) -> str:
    """
    Get the first set environment variable among ``keys``.

    Several names are accepted so that provider-specific names
    (``GOOGLE_API_KEY``) and the generic ``API_KEY`` both work.

    :param keys: Environment variable names, checked in order
    :param description: Human-readable description for error messages
    :return: Environment variable value
    :raises ConfigurationError: if none is set or the value is a placeholder
    """
    for key in keys:
        value = os.getenv(key)
        if not value:
            continue
        if _is_placeholder(value):
            raise ConfigurationError(
                f"{key} appears to be a placeholder value.\n"
                f"Please set a real value. Current value: {_mask_secret(value)}"
            )
        return value

    names = " or ".join(keys)
    raise ConfigurationError(
        f"{names} is required but not set.\n"
        f"Set it in the environment or in a .env file in the project root.\n\n"
        f"Description: {description or names}"
    )


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if value and _is_placeholder(value):
        warnings.warn(
            f"{key} appears to be a placeholder. Using default.",
            UserWarning,
        )
        return default

    return value


def get_bool_env(key: str, default: bool = False) -> bool:
    value = get_optional_env(key)
    if value is None or value == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def get_int_env(key: str, default: int) -> int:
    return int(_parse_number(key, default, int))


def get_float_env(key: str, default: Optional[float]) -> Optional[float]:
    return _parse_number(key, default, float)


def first_env(keys: Iterable[str], default: Optional[str] = None) -> Optional[str]:
    """Return the first non-empty optional env var among ``keys``."""
    for key in keys:
        value = get_optional_env(key)
        if value:
            return value
    return default


def _parse_number(key, default, kind):
    raw = get_optional_env(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{key} must be a number, got {raw!r}"
        ) from e


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False
    value_lower = value.lower()
    return any(pattern in value_lower for pattern in _PLACEHOLDER_PATTERNS)


def _mask_secret(secret: str, show_chars: int = 4) -> str:
    """
    Mask secret for safe display in error messages.

    :param secret: Secret to mask
    :param show_chars: Number of characters to show at start/end
    :return: Masked secret
    """
    if not secret or len(secret) <= show_chars * 2:
        return "***"

    return f"{secret[:show_chars]}...{secret[-show_chars:]}"
