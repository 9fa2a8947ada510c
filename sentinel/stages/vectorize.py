from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Iterable, Mapping

TermVector = Mapping[str, int]


def vectorize(tokens: Iterable[str]) -> TermVector:
    """Count each distinct token into a fresh, read-only term-frequency map."""
    return MappingProxyType(Counter(tokens))
