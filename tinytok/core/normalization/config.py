from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet


def default_ignore_chars() -> FrozenSet[str]:
    # $ ^ | < ~ ` are Unicode symbols, not punctuation, so only this set strips them
    return frozenset(
        {
            ".", ",", "!", "@", "#", "$", "%", "^", "&", "*", "(", ")", "?",
            "[", "]", "{", "}", "\\", "|", "<", "'", ":", ";", "~", "`",
        }
    )


@dataclass(frozen=True)
class NormalizationConfig:
    ignore_chars: FrozenSet[str] = field(default_factory=default_ignore_chars)
    casefold: bool = True  # False falls back to str.lower()
