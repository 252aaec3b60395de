"""Commit sentence-final transcriptions to the external consumer."""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

Publisher = Callable[[str], object]
PartialObserver = Callable[[str], object]


class ResultSink:
    """Only sentence-final results reach ``publish``; partials are observational."""

    def __init__(self, publish: Publisher, *, on_partial: PartialObserver | None = None) -> None:
        self._publish = publish
        self._on_partial = on_partial
        self.published = 0

    def on_result(self, text: str, is_sentence_final: bool) -> None:
        if not is_sentence_final:
            if self._on_partial is not None:
                try:
                    self._on_partial(text)
                except Exception:
                    logger.exception("partial observer failed")
            return

        try:
            self._publish(text)
        except Exception:
            logger.exception("publishing final text failed")
            return
        self.published += 1
        logger.debug("published final text (%d chars)", len(text))


__all__ = ["PartialObserver", "Publisher", "ResultSink"]
