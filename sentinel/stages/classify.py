from __future__ import annotations

from typing import Any, List, Mapping, Sequence, Union

import numpy as np

from sentinel.models import Document, Verdict
from sentinel.stages.similarity import cosine_similarity, score_references
from sentinel.utils import get_logger

logger = get_logger(__name__)

DUPLICATE_THRESHOLD = 0.6
RECOMMEND_THRESHOLD = 0.5

Reference = Union[Document, Mapping[str, Any]]


def _as_document(ref: Reference) -> Document:
    if isinstance(ref, Document):
        return ref
    return Document.from_record(ref)


def is_duplicate(score: float, threshold: float = DUPLICATE_THRESHOLD) -> bool:
    # Strict: a score equal to the threshold is not a duplicate.
    return score > threshold


def _scan_loop(candidate_text: str, docs: List[Document]):
    best_score = 0.0
    best_idx = None
    scored = 0
    for idx, doc in enumerate(docs):
        if not doc.abstract:
            continue
        scored += 1
        score = cosine_similarity(candidate_text, doc.abstract)
        # strict ">" keeps the first of equal maxima
        if score > best_score:
            best_score = score
            best_idx = idx
    return best_score, best_idx, scored


def _scan_batch(candidate_text: str, docs: List[Document]):
    abstracts = [doc.abstract or None for doc in docs]
    scored = sum(1 for a in abstracts if a)
    if not docs:
        return 0.0, None, scored
    scores = score_references(candidate_text, abstracts)
    # argmax returns the lowest index among ties
    idx = int(np.argmax(scores))
    best_score = float(scores[idx])
    if best_score <= 0.0:
        return 0.0, None, scored
    return best_score, idx, scored


def classify(
    candidate_text: str,
    references: Sequence[Reference],
    threshold: float = DUPLICATE_THRESHOLD,
    *,
    batch: bool = False,
) -> Verdict:
    """Find the reference most similar to ``candidate_text`` and flag duplicates.

    References without an abstract are skipped. With no usable reference the
    verdict has score 0.0, no matched title and is not a duplicate.
    """
    docs = [_as_document(r) for r in references]
    if batch:
        best_score, best_idx, scored = _scan_batch(candidate_text, docs)
    else:
        best_score, best_idx, scored = _scan_loop(candidate_text, docs)

    verdict = Verdict(
        score=best_score,
        matched_title=docs[best_idx].title if best_idx is not None else None,
        matched_index=best_idx,
        is_duplicate=is_duplicate(best_score, threshold),
        threshold=threshold,
        scored=scored,
    )
    logger.info(
        "classify: refs=%d scored=%d best=%.4f dup=%s (thr=%.2f batch=%s)",
        len(docs),
        scored,
        verdict.score,
        verdict.is_duplicate,
        threshold,
        batch,
    )
    return verdict
