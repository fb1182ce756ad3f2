#!/usr/bin/env python3
"""
List Gemini models available to the configured Google API key.

Usage:
    python demo/list_models.py
"""
import sys

import httpx
from dotenv import load_dotenv

from docchat.config_validator import get_required_env
from docchat.exceptions import ConfigurationError

MODELS_URL = "https://generativelanguage.googleapis.com/v1beta/models"


def list_models(api_key, timeout=10.0):
    """
    Fetch model names.

    :param api_key: Google API key
    :param timeout: Request timeout in seconds
    :return: List of model names (empty when the API returned none)
    """
    with httpx.Client(timeout=timeout) as client:
        response = client.get(MODELS_URL, params={"key": api_key})
        response.raise_for_status()
        data = response.json()
    return [m.get("name") for m in data.get("models") or []]


def main():
    load_dotenv()
    try:
        api_key = get_required_env("GOOGLE_API_KEY", "API_KEY", description="Google AI Studio API key")
        names = list_models(api_key)
    except ConfigurationError as e:
        print(e)
        return 1
    except httpx.HTTPError as e:
        print(f"Listing error: {e}")
        return 1

    if not names:
        print("No models found.")
        return 0

    print("Available models:")
    for name in names:
        print("-", name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
