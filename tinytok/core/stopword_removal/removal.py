from __future__ import annotations
from typing import FrozenSet

from tinytok.core.stopword_removal.base import TokenFilter
from tinytok.core.stopword_removal.config import StopwordConfig


class DefaultStopwordFilter(TokenFilter):
    """Rejects candidates that are too short or sit in the stop set (exact match)."""

    def __init__(self, config: StopwordConfig | None = None):
        self.cfg = config or StopwordConfig()
        self._stopset: FrozenSet[str] = self.cfg.effective_stopwords()

    @property
    def stopwords(self) -> FrozenSet[str]:
        return self._stopset

    def accept(self, candidate: str) -> bool:
        if not candidate or len(candidate) < self.cfg.min_token_len:
            return False
        return candidate not in self._stopset
