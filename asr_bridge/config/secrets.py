"""Secrets and authentication configuration."""

from __future__ import annotations

import os

ENV_API_KEY = "DASHSCOPE_API_KEY"
# Older .env files only set API_KEY.
ENV_API_KEY_FALLBACK = "API_KEY"


def get_api_key() -> str:
    key = (os.getenv(ENV_API_KEY) or "").strip()
    if key:
        return key
    return (os.getenv(ENV_API_KEY_FALLBACK) or "").strip()


__all__ = ["ENV_API_KEY", "ENV_API_KEY_FALLBACK", "get_api_key"]
