"""Scan stages: tokenize, vectorize, score, classify, extract keywords.

Each stage exposes a small, pure function API; only ``classify`` iterates
over the reference collection.
"""

from sentinel.stages.classify import DUPLICATE_THRESHOLD, RECOMMEND_THRESHOLD, classify, is_duplicate
from sentinel.stages.keywords import top_keywords
from sentinel.stages.similarity import cosine_similarity, score_references
from sentinel.stages.tokenize import STOP_WORDS, tokenize
from sentinel.stages.vectorize import vectorize

__all__ = [
    "DUPLICATE_THRESHOLD",
    "RECOMMEND_THRESHOLD",
    "STOP_WORDS",
    "classify",
    "cosine_similarity",
    "is_duplicate",
    "score_references",
    "tokenize",
    "top_keywords",
    "vectorize",
]
