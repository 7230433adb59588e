from __future__ import annotations
from abc import ABC, abstractmethod


class TokenFilter(ABC):
    """Port: decide whether a normalized candidate becomes a token."""

    @abstractmethod
    def accept(self, candidate: str) -> bool: ...
