from __future__ import annotations
import logging
from typing import AbstractSet, FrozenSet, List, Optional

from tinytok.core.normalization.config import NormalizationConfig, default_ignore_chars
from tinytok.core.normalization.normalizer import DefaultTextNormalizer
from tinytok.core.segmentation.base import SegmentationError, Segmenter
from tinytok.core.stopword_removal.config import StopwordConfig, default_stopwords
from tinytok.core.stopword_removal.removal import DefaultStopwordFilter
from tinytok.core.tokenization.base import Tokenizer
from tinytok.core.tokenization.dedupe import dedupe

logger = logging.getLogger(__name__)

DEFAULT_STOPWORDS = default_stopwords()
DEFAULT_IGNORE_CHARS = default_ignore_chars()


class TinyTokenizer(Tokenizer):
    """
    Segment → normalize → filter → dedupe.

    The stop set and ignore set are frozen at construction, so one instance
    can be shared across threads.
    """

    def __init__(
        self,
        segmenter: Segmenter,
        stopwords: AbstractSet[str] = DEFAULT_STOPWORDS,
        ignore_chars: AbstractSet[str] = DEFAULT_IGNORE_CHARS,
        *,
        min_token_len: int = 2,
    ):
        self.segmenter = segmenter
        self.normalizer = DefaultTextNormalizer(
            NormalizationConfig(ignore_chars=frozenset(ignore_chars))
        )
        self.token_filter = DefaultStopwordFilter(
            StopwordConfig(stopwords=frozenset(stopwords), min_token_len=min_token_len)
        )

    @property
    def stopwords(self) -> FrozenSet[str]:
        return self.token_filter.stopwords

    @property
    def ignore_chars(self) -> FrozenSet[str]:
        return self.normalizer.cfg.ignore_chars

    def _segment(self, text: str) -> List[str]:
        try:
            return list(self.segmenter.segment(text))
        except Exception as e:
            logger.warning(
                "Segmentation failed in %s: %s", type(self.segmenter).__name__, e
            )
            raise SegmentationError(f"Segmentation failed: {e}") from e

    def tokenize(self, text: Optional[str]) -> List[str]:
        segments = self._segment(text or "")

        kept: List[str] = []
        for segment in segments:
            candidate = self.normalizer.normalize(segment)
            if self.token_filter.accept(candidate):
                kept.append(candidate)

        tokens = dedupe(kept)
        logger.debug(
            "Tokenized %d segments into %d tokens", len(segments), len(tokens)
        )
        return tokens
