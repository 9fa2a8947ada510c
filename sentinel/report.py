from __future__ import annotations

from typing import Any, Dict, List, Optional

from sentinel.models import Verdict
from sentinel.stages.classify import RECOMMEND_THRESHOLD


def recommendation(verdict: Verdict, recommend_threshold: float = RECOMMEND_THRESHOLD) -> Optional[str]:
    """Advisory message shown when the best match is close, else ``None``.

    Independent of the duplicate threshold: a candidate can get advice without
    being flagged.
    """
    if not verdict.score > recommend_threshold:
        return None
    title = verdict.matched_title or "Unknown Project"
    return (
        f'This project is too similar to "{title}". '
        "We suggest focusing on unique architectural patterns or novel datasets "
        "to improve innovation score."
    )


def build_report(
    verdict: Verdict,
    *,
    file_name: str,
    keywords: List[str],
    references_total: int,
    recommend_threshold: float = RECOMMEND_THRESHOLD,
    elapsed_s: float = 0.0,
    generated_at: str = "",
    scan_id: str = "",
) -> Dict[str, Any]:
    return {
        "scan_id": scan_id,
        "file_name": file_name,
        "generated_at": generated_at,
        "status": "DUPLICATE DETECTED" if verdict.is_duplicate else "UNIQUE PROJECT",
        "clearance": "DENIED" if verdict.is_duplicate else "GRANTED",
        "verdict": verdict.model_dump(mode="json"),
        "similarity_pct": round(verdict.score * 100, 1),
        "recommend_threshold": recommend_threshold,
        "references": {"total": references_total, "scored": verdict.scored},
        "keywords": list(keywords),
        "recommendation": recommendation(verdict, recommend_threshold),
        "elapsed_s": round(elapsed_s, 3),
    }
