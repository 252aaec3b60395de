"""Bearer credential helpers for the ASR socket."""

from __future__ import annotations

from asr_bridge.config.websocket import (
    WS_AUTH_HEADER,
    WS_AUTH_SCHEME,
    CREDENTIAL_MISSING_LABEL,
    CREDENTIAL_PREFIX_MAX_CHARS,
)


def build_auth_headers(api_key: str) -> dict[str, str]:
    return {WS_AUTH_HEADER: f"{WS_AUTH_SCHEME} {api_key}"}


def mask_credential(api_key: str) -> str:
    """Return a loggable prefix of the key; never more than half of it."""
    key = (api_key or "").strip()
    if not key:
        return CREDENTIAL_MISSING_LABEL
    visible = min(CREDENTIAL_PREFIX_MAX_CHARS, len(key) // 2)
    return f"{key[:visible]}..."


__all__ = ["build_auth_headers", "mask_credential"]
