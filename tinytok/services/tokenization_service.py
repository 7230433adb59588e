from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, FrozenSet, List, Optional, Sequence

from tinytok.core.normalization.config import NormalizationConfig
from tinytok.core.normalization.normalizer import DefaultTextNormalizer
from tinytok.core.segmentation.base import Segmenter
from tinytok.core.segmentation.segmenter import segmenter_for
from tinytok.core.stopword_removal.config import StopwordConfig
from tinytok.core.tokenization.config import TokenizationConfig
from tinytok.core.tokenization.tokenizer import DEFAULT_IGNORE_CHARS, TinyTokenizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenizationResult:
    tokens: List[List[str]]  # one token list per input text
    config: TokenizationConfig
    elapsed_ms: float


class TokenizationService:
    """
    Orchestrates tokenization requests.
    - Builds one TinyTokenizer per distinct config, keeping the most recent
      `cache_size` of them
    - Tokenizes single texts or batches, preserving input order
    """

    def __init__(
        self,
        default_segmenter: str = "whitespace",
        *,
        cache_size: int = 64,
        segmenter_factory: Callable[[str], Segmenter] = segmenter_for,
    ):
        self.default_segmenter = default_segmenter
        self._segmenter_factory = segmenter_factory
        self.pipeline_for = lru_cache(maxsize=cache_size)(self._build_pipeline)

    @staticmethod
    def _normalize_words(
        words: Optional[Sequence[str]], normalizer: DefaultTextNormalizer
    ) -> FrozenSet[str]:
        # Stop set lookups happen after normalization, so overrides must match that form
        normalized = (normalizer.normalize(w) for w in words or [])
        return frozenset(w for w in normalized if w)

    def resolve_config(
        self,
        segmenter: Optional[str] = None,
        custom_stopwords: Optional[Sequence[str]] = None,
        exclude_stopwords: Optional[Sequence[str]] = None,
        ignore_chars: Optional[Sequence[str]] = None,
    ) -> TokenizationConfig:
        ignore = None if ignore_chars is None else frozenset(ignore_chars)
        normalizer = DefaultTextNormalizer(
            NormalizationConfig(
                ignore_chars=DEFAULT_IGNORE_CHARS if ignore is None else ignore
            )
        )
        return TokenizationConfig(
            segmenter=(segmenter or self.default_segmenter).lower(),
            custom_stopwords=self._normalize_words(custom_stopwords, normalizer),
            exclude_stopwords=self._normalize_words(exclude_stopwords, normalizer),
            ignore_chars=ignore,
        )

    def _build_pipeline(self, cfg: TokenizationConfig) -> TinyTokenizer:
        stop_cfg = StopwordConfig(
            custom_stopwords=cfg.custom_stopwords,
            exclude_stopwords=cfg.exclude_stopwords,
        )
        pipeline = TinyTokenizer(
            self._segmenter_factory(cfg.segmenter),
            stopwords=stop_cfg.effective_stopwords(),
            ignore_chars=(
                DEFAULT_IGNORE_CHARS if cfg.ignore_chars is None else cfg.ignore_chars
            ),
            min_token_len=stop_cfg.min_token_len,
        )
        logger.info(
            "Built tokenizer pipeline segmenter=%s stopwords=%d ignore_chars=%d",
            cfg.segmenter,
            len(pipeline.stopwords),
            len(pipeline.ignore_chars),
        )
        return pipeline

    def tokenize(self, text: Optional[str], cfg: TokenizationConfig) -> List[str]:
        return self.pipeline_for(cfg).tokenize(text)

    def tokenize_many(
        self, texts: Sequence[Optional[str]], cfg: TokenizationConfig
    ) -> TokenizationResult:
        pipeline = self.pipeline_for(cfg)
        start = time.perf_counter()
        tokens = [pipeline.tokenize(t) for t in texts]
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Tokenized %d texts with %s in %.1f ms",
            len(texts),
            cfg.segmenter,
            elapsed_ms,
        )
        return TokenizationResult(tokens=tokens, config=cfg, elapsed_ms=elapsed_ms)
