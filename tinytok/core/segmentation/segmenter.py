# tinytok/core/segmentation/segmenter.py
from __future__ import annotations
import re
from typing import Dict, List

import tinysegmenter
from nltk.tokenize import wordpunct_tokenize

from tinytok.core.segmentation.base import Segmenter


# ----------------------------
# Whitespace
# ----------------------------


class WhitespaceSegmenter(Segmenter):
    """Adapter: splits on runs of Unicode whitespace."""

    _re_ws = re.compile(r"\s+")

    def segment(self, text: str) -> List[str]:
        return self._re_ws.split(text or "")


# ----------------------------
# NLTK wordpunct
# ----------------------------


class WordPunctSegmenter(Segmenter):
    """Adapter: NLTK wordpunct, splits runs of word chars from runs of punctuation."""

    def segment(self, text: str) -> List[str]:
        return list(wordpunct_tokenize(text or ""))


# ----------------------------
# TinySegmenter (Japanese)
# ----------------------------


class JapaneseSegmenter(Segmenter):
    """
    Adapter: TinySegmenter, for Japanese text with no whitespace between words.
    Latin words and spaces in mixed text come back as their own segments.
    """

    def __init__(self):
        self._ts = None  # lazy

    def segment(self, text: str) -> List[str]:
        if self._ts is None:
            self._ts = tinysegmenter.TinySegmenter()
        return list(self._ts.tokenize(text or ""))


_segmenter_cache: Dict[str, Segmenter] = {}


def segmenter_for(method: str) -> Segmenter:
    m = method.lower()
    if m in _segmenter_cache:
        return _segmenter_cache[m]

    if m == "whitespace":
        inst: Segmenter = WhitespaceSegmenter()
    elif m == "wordpunct":
        inst = WordPunctSegmenter()
    elif m == "tinysegmenter":
        inst = JapaneseSegmenter()
    else:
        raise ValueError(f"Unsupported segmentation method: {method}")

    _segmenter_cache[m] = inst
    return inst
