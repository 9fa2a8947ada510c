from __future__ import annotations

import os
from typing import Any, Dict, List

import requests
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from sentinel.models import Document
from sentinel.sources import to_documents
from sentinel.utils import get_logger, normalize_http_url, redact_secrets

logger = get_logger(__name__)


@retry(stop=stop_after_attempt(5), wait=wait_exponential(multiplier=1, min=1, max=10),
       retry=retry_if_exception_type(requests.RequestException), reraise=True)
def _get_json(url: str, params: Dict[str, str], headers: Dict[str, str], timeout: float) -> Any:
    r = requests.get(url, params=params, headers=headers, timeout=timeout)
    r.raise_for_status()
    return r.json()


def fetch(source_cfg: Dict[str, Any]) -> List[Document]:
    """Fetch ``title, abstract`` rows from a PostgREST-style table endpoint."""
    base = normalize_http_url(source_cfg.get("url"))
    if not base:
        raise ValueError(f"Invalid REST source url: {source_cfg.get('url')!r}")
    table = source_cfg.get("table", "projects")
    url = f"{base}/{table}"

    headers = {"Accept": "application/json"}
    key_env = source_cfg.get("api_key_env")
    if key_env:
        key = os.getenv(key_env)
        if key:
            headers["apikey"] = key
            headers["Authorization"] = f"Bearer {key}"

    params = {"select": "title,abstract"}
    try:
        data = _get_json(url, params, headers, float(source_cfg.get("timeout", 10)))
    except requests.RequestException as e:
        logger.error("source.rest: fetch failed url=%s err=%s", url, redact_secrets(str(e), [key_env] if key_env else None))
        raise

    docs = to_documents(data)
    logger.info("source.rest: url=%s references=%d", url, len(docs))
    return docs
