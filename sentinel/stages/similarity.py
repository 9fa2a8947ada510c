from __future__ import annotations

import math
from typing import List, Optional, Sequence

import numpy as np
from sklearn.feature_extraction import DictVectorizer

from sentinel.stages.tokenize import tokenize
from sentinel.stages.vectorize import TermVector, vectorize


def _squared_norm(vector: TermVector) -> int:
    return sum(count * count for count in vector.values())


def magnitude(vector: TermVector) -> float:
    return math.sqrt(_squared_norm(vector))


def dot_product(a: TermVector, b: TermVector) -> int:
    # Summed over the keys of ``a``; keys only in ``b`` contribute nothing.
    return sum(count * b.get(token, 0) for token, count in a.items())


def _vector_of(text: str) -> TermVector:
    return vectorize(tokenize(text))


def cosine_similarity(text_a: str, text_b: str) -> float:
    """Cosine similarity of the term-frequency vectors of two raw texts.

    Returns a float in [0, 1]; 0.0 when either text has no tokens left after
    stop-word removal.
    """
    vec_a = _vector_of(text_a)
    vec_b = _vector_of(text_b)
    if not vec_a or not vec_b:
        return 0.0

    sq_a = _squared_norm(vec_a)
    sq_b = _squared_norm(vec_b)
    if sq_a == 0 or sq_b == 0:
        return 0.0

    # |A|*|B| taken as sqrt(|A|^2 * |B|^2): identical vectors give exactly 1.0
    return dot_product(vec_a, vec_b) / math.sqrt(sq_a * sq_b)


def score_references(candidate_text: str, texts: Sequence[Optional[str]]) -> np.ndarray:
    """Score one candidate against many texts in a single sparse-matrix pass.

    Same arithmetic as :func:`cosine_similarity`, so ``out[i]`` equals
    ``cosine_similarity(candidate_text, texts[i])``. Missing or empty texts
    score 0.
    """
    n = len(texts)
    scores = np.zeros(n, dtype=np.float64)
    cand = _vector_of(candidate_text)
    if n == 0 or not cand:
        return scores

    ref_vecs: List[dict] = [dict(_vector_of(t)) if t else {} for t in texts]
    dv = DictVectorizer(dtype=np.float64, sparse=True)
    mat = dv.fit_transform([dict(cand)] + ref_vecs)
    cand_row, refs = mat[0], mat[1:]

    dots = np.asarray((refs @ cand_row.T).todense()).ravel()
    sq_refs = np.asarray(refs.multiply(refs).sum(axis=1)).ravel()
    denom = np.sqrt(float(_squared_norm(cand)) * sq_refs)

    mask = denom > 0
    scores[mask] = dots[mask] / denom[mask]
    return scores
