from __future__ import annotations

import json
import os
from typing import Any, Dict, List

import yaml

from sentinel.models import Document
from sentinel.sources import to_documents
from sentinel.utils import get_logger, load_file

logger = get_logger(__name__)


def _unwrap(data: Any) -> Any:
    if isinstance(data, dict):
        for key in ("references", "projects"):
            if key in data:
                return data[key]
        raise ValueError("Reference file mapping needs a 'references' or 'projects' list")
    return data


def fetch(source_cfg: Dict[str, Any]) -> List[Document]:
    """Load reference records from a local YAML or JSON file."""
    path = source_cfg["path"]
    raw = load_file(path)
    if os.path.splitext(path)[1].lower() == ".json":
        data = json.loads(raw)
    else:
        data = yaml.safe_load(raw)
    docs = to_documents(_unwrap(data if data is not None else []))
    logger.info("source.file: path=%s references=%d", path, len(docs))
    return docs
