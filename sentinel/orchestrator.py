
import os
import time
import uuid
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional, Callable

from sentinel.models import Document
from sentinel.report import build_report
from sentinel.rendering.markdown import render_md
from sentinel.sources import get_provider
from sentinel.stages.classify import DUPLICATE_THRESHOLD, RECOMMEND_THRESHOLD, classify
from sentinel.stages.keywords import top_keywords
from sentinel.utils import write_output, validate_config, get_logger, load_file, now_utc

logger = get_logger(__name__)


def _apply_overrides(cfg: Dict[str, Any], overrides: Optional[Dict[str, Any]]) -> None:
    if not overrides:
        return

    cl = cfg.setdefault("classifier", {})
    if overrides.get("threshold") is not None:
        cl["threshold"] = float(overrides["threshold"])  # type: ignore[arg-type]
    if overrides.get("recommend_threshold") is not None:
        cl["recommend_threshold"] = float(overrides["recommend_threshold"])  # type: ignore[arg-type]
    if overrides.get("batch") is not None:
        cl["batch"] = bool(overrides["batch"])

    if overrides.get("keywords_limit") is not None:
        cfg.setdefault("keywords", {})["limit"] = int(overrides["keywords_limit"])  # type: ignore[arg-type]

    if overrides.get("output_dir") is not None:
        cfg.setdefault("output", {})["dir"] = str(overrides["output_dir"])


def _resolve_source_paths(cfg: Dict[str, Any], config_path: str) -> None:
    src = cfg.get("source") or {}
    path = src.get("path")
    if path and not os.path.isabs(path):
        src["path"] = str(Path(config_path).resolve().parent / path)


def scan_text(
    candidate_text: str,
    fetch_references: Callable[[], List[Document]],
    cfg: Dict[str, Any],
    *,
    file_name: str = "",
    scan_id: str = "",
) -> Dict[str, Any]:
    """Scan one candidate against the references returned by ``fetch_references``.

    References are fetched in full before classification starts.
    """
    cl = cfg.get("classifier") or {}
    threshold = float(cl.get("threshold", DUPLICATE_THRESHOLD))
    recommend_threshold = float(cl.get("recommend_threshold", RECOMMEND_THRESHOLD))
    batch = bool(cl.get("batch", False))
    limit = int((cfg.get("keywords") or {}).get("limit", 5))

    t0 = time.monotonic()
    references = fetch_references()
    logger.info("fetched references=%d took_ms=%d", len(references), int((time.monotonic()-t0)*1000))

    t1 = time.monotonic()
    verdict = classify(candidate_text, references, threshold, batch=batch)
    keywords = top_keywords(candidate_text, limit)
    elapsed = time.monotonic() - t1
    logger.info("scanned took_ms=%d keywords=%s", int(elapsed*1000), keywords)

    return build_report(
        verdict,
        file_name=file_name,
        keywords=keywords,
        references_total=len(references),
        recommend_threshold=recommend_threshold,
        elapsed_s=elapsed,
        generated_at=now_utc().isoformat().replace("+00:00", "Z"),
        scan_id=scan_id,
    )


def _execute_scan(cfg: Dict[str, Any], candidate_path: str, run_id: str) -> Dict[str, Any]:
    scan_id = cfg.get("scan_id", "scan")
    logger.info("config loaded scan_id=%s source=%s", scan_id, cfg["source"]["type"])

    candidate_text = load_file(candidate_path)
    report = scan_text(
        candidate_text,
        get_provider(cfg["source"]),
        cfg,
        file_name=os.path.basename(candidate_path),
        scan_id=f"{scan_id}-{run_id}",
    )
    logger.info(
        "verdict status=%s score=%.4f matched=%s",
        report["status"],
        report["verdict"]["score"],
        report["verdict"]["matched_title"],
    )

    out_cfg = cfg.get("output")
    if out_cfg and out_cfg.get("dir"):
        generated = write_output(render_md(report), report, out_cfg)
        report["outputs"] = generated
        logger.info("output written dir=%s files=%d", out_cfg["dir"], len(generated))
    return report


def run_once(
    config_path: str,
    candidate_path: str,
    *,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Execute one scan with given config file path and plain-text candidate."""
    run_id = uuid.uuid4().hex[:8]
    logger.info("=== run start id=%s ===", run_id)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
        _apply_overrides(cfg, overrides)
        validate_config(cfg)
        _resolve_source_paths(cfg, config_path)
        return _execute_scan(cfg, candidate_path, run_id)

    except Exception as e:
        logger.error("Scan failed: %s", e)
        raise
    finally:
        logger.info("=== run end id=%s ===", run_id)
