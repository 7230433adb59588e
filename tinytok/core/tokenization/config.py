from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Optional


@dataclass(frozen=True)
class TokenizationConfig:
    segmenter: str = "whitespace"  # see SEGMENTATION_METHODS
    custom_stopwords: FrozenSet[str] = field(default_factory=frozenset)
    exclude_stopwords: FrozenSet[str] = field(default_factory=frozenset)
    ignore_chars: Optional[FrozenSet[str]] = None  # None → built-in set
