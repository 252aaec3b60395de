"""Clipboard publisher for finalized sentences."""

from __future__ import annotations

import logging

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardPublisher:
    def __call__(self, text: str) -> bool:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            logger.error("Clipboard write failed: %s", exc)
            return False
        logger.info("Copied to clipboard: %s", text)
        return True


__all__ = ["ClipboardPublisher"]
