from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable


def _to_frozenset(x: Iterable[str] | None) -> FrozenSet[str]:
    return frozenset(map(str, x or []))


# ASCII symbol strings
_SYMBOLS = [
    "", ".", ",", "!", "@", "#", "$", "%", "^", "&", "*", "(", ")", "?",
    "[", "]", "{", "}", "\\", "|", "<", '"', ":", ";", "'", "~", "`",
]

# English function words
_ENGLISH = [
    "a", "all", "am", "an", "and", "any", "are", "as", "at", "be", "but",
    "can", "did", "do", "does", "for", "from", "had", "has", "have", "here",
    "how", "i", "if", "in", "is", "it", "no", "not", "of", "on", "or", "so",
    "that", "the", "then", "there", "this", "to", "too", "up", "use", "what",
    "when", "where", "who", "why", "you", "br",
]

# Japanese particles and auxiliary fragments
_JAPANESE = [
    "は", "を", "の", "が", "で", "に", "も", "し", "から", "って", "これ",
    "へ", "と", "より", "や", "やら", "なり", "か", "だの", "かしら", "な",
    "とも", "ぞ", "わ", "さ", "よ", "ね", "ばかり", "まで", "だけ", "ほど",
    "くらい", "など", "こそ", "でも", "しか", "さえ", "だに", "けれども",
    "こと", "よう", "」", "て", "ず", "た", "れ",
]

# Full-width symbol strings
_FULLWIDTH = [
    "！", "＠", "＃", "＄", "％", "＾", "＆", "＊", "＿", "＋", "＝", "－",
    "（", "）", "、", "。", "・", "【", "　", "｛", "｝", "：", "；", "”",
    "’", "＜", "＞", "？", "｜", "￥", "～",
]


def default_stopwords() -> FrozenSet[str]:
    return frozenset(_SYMBOLS + _ENGLISH + _JAPANESE + _FULLWIDTH)


@dataclass(frozen=True)
class StopwordConfig:
    stopwords: FrozenSet[str] = field(default_factory=default_stopwords)
    custom_stopwords: FrozenSet[str] = field(
        default_factory=frozenset
    )  # extra words to reject
    exclude_stopwords: FrozenSet[str] = field(
        default_factory=frozenset
    )  # words to keep even if in the list
    min_token_len: int = 2  # reject candidates shorter than this

    def effective_stopwords(self) -> FrozenSet[str]:
        base = _to_frozenset(self.stopwords) | _to_frozenset(self.custom_stopwords)
        return base - _to_frozenset(self.exclude_stopwords)
