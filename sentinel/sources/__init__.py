"""Reference providers.

A provider is a zero-argument callable returning the reference collection as a
list of :class:`sentinel.models.Document`. Each adapter module exposes
``fetch(source_cfg)``; ``get_provider`` binds one to its config.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Dict, List

from sentinel.models import Document

Provider = Callable[[], List[Document]]


def get_provider(source_cfg: Dict[str, Any]) -> Provider:
    t = source_cfg["type"]
    if t == "file":
        from sentinel.sources import file_adapter
        return partial(file_adapter.fetch, source_cfg)
    elif t == "rest":
        from sentinel.sources import rest_adapter
        return partial(rest_adapter.fetch, source_cfg)
    else:
        raise ValueError(f"Unknown source type: {t}")


def to_documents(records: Any) -> List[Document]:
    """Coerce raw ``{title, abstract}`` records into documents.

    Missing titles become ``""``; abstracts that are not strings become ``None``.
    """
    if not isinstance(records, list):
        raise ValueError(f"Expected a list of reference records, got {type(records).__name__}")
    docs: List[Document] = []
    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            raise ValueError(f"Reference record #{i} is not a mapping")
        docs.append(Document.from_record(rec))
    return docs
