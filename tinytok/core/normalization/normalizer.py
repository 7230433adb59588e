from __future__ import annotations
import unicodedata

from tinytok.core.normalization.base import TextNormalizer
from tinytok.core.normalization.config import NormalizationConfig


def is_punctuation(ch: str) -> bool:
    # Pc, Pd, Ps, Pe, Pi, Pf, Po
    return unicodedata.category(ch).startswith("P")


class DefaultTextNormalizer(TextNormalizer):
    """
    Reduces one segment to its canonical form:
      1. trim surrounding whitespace
      2. case-fold
      3. drop Unicode punctuation
      4. drop characters from the ignore set
    Steps 3 and 4 overlap on purpose; both always run.
    """

    def __init__(self, config: NormalizationConfig | None = None):
        self.cfg = config or NormalizationConfig()
        self._ignore = frozenset(self.cfg.ignore_chars)

    def normalize(self, segment: str) -> str:
        if segment is None:
            return ""
        s = str(segment).strip()
        s = s.casefold() if self.cfg.casefold else s.lower()
        s = "".join(ch for ch in s if not is_punctuation(ch))
        s = "".join(ch for ch in s if ch not in self._ignore)
        return s
