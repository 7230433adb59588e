from __future__ import annotations
from typing import Iterable, List


def dedupe(tokens: Iterable[str]) -> List[str]:
    """Drop repeats, keeping the first occurrence of each token in place."""
    return list(dict.fromkeys(tokens))
