from __future__ import annotations

from typing import Dict, List

from sentinel.stages.tokenize import tokenize
from sentinel.stages.vectorize import vectorize


def top_keywords(text: str, limit: int = 5) -> List[str]:
    """Most frequent tokens of ``text``, at most ``limit`` of them.

    Equal counts are ordered by first occurrence in the text.
    """
    if limit <= 0:
        return []
    tokens = list(tokenize(text))
    counts = vectorize(tokens)
    first_seen: Dict[str, int] = {}
    for pos, tok in enumerate(tokens):
        first_seen.setdefault(tok, pos)
    ranked = sorted(counts, key=lambda tok: (-counts[tok], first_seen[tok]))
    return ranked[:limit]
