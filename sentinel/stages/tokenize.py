from __future__ import annotations

import re
from typing import FrozenSet, Iterator

STOP_WORDS: FrozenSet[str] = frozenset({
    "a", "an", "the", "and", "or", "but", "is", "are", "was", "were",
    "in", "on", "at", "to", "for", "of", "with", "by", "from", "this",
    "that", "it", "as", "be", "can", "will", "has", "have", "had",
})

# ASCII word characters only; anything else (accents included) is deleted, not
# replaced, so "state-of-the-art" stays one token.
_PUNCT_RE = re.compile(r"[^A-Za-z0-9_\s]")


def _iter_tokens(text: str) -> Iterator[str]:
    for word in _PUNCT_RE.sub("", text.lower()).split():
        if word and word not in STOP_WORDS:
            yield word


def tokenize(text: str) -> Iterator[str]:
    """Yield lowercase word tokens of ``text`` in order of appearance.

    Stop words and empty strings are dropped; repeated words are kept. The
    result is a generator and can only be consumed once.
    """
    if not isinstance(text, str):
        raise TypeError(f"tokenize() expects str, got {type(text).__name__}")
    return _iter_tokens(text)
