from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional


class Tokenizer(ABC):
    """Port: turn raw text into a list of unique, normalized tokens."""

    @abstractmethod
    def tokenize(self, text: Optional[str]) -> List[str]: ...
