from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class SegmentationError(Exception):
    """Raised when the segmenter cannot split the input text."""


class Segmenter(ABC):
    """Port: split raw text into an ordered list of substrings."""

    @abstractmethod
    def segment(self, text: str) -> List[str]: ...
