from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """A reference record: project title plus its abstract, if any."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    abstract: Optional[str] = None

    @classmethod
    def from_record(cls, rec: Mapping[str, Any]) -> "Document":
        """Build from a raw ``{title, abstract}`` row.

        Missing or null titles become ``""``; abstracts that are not strings
        become ``None``.
        """
        title = rec.get("title")
        abstract = rec.get("abstract")
        return cls(
            title=str(title) if title is not None else "",
            abstract=abstract if isinstance(abstract, str) else None,
        )


class Verdict(BaseModel):
    """Best match for a candidate and the resulting duplicate decision."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(0.0, ge=0.0, le=1.0)
    matched_title: Optional[str] = None
    matched_index: Optional[int] = None
    is_duplicate: bool = False
    threshold: float
    scored: int = 0
