import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ValidationError

from kisan_assistant.models.advice import Citation, GroundingMetadata

logger = logging.getLogger(__name__)


def coerce_grounding_metadata(value: Any) -> Optional[GroundingMetadata]:
    """Accept our own model, a vendor pydantic model, or a plain dict."""
    if value is None:
        return None
    if isinstance(value, GroundingMetadata):
        return value
    if isinstance(value, BaseModel):
        value = value.model_dump()
    if not isinstance(value, dict):
        return None
    try:
        return GroundingMetadata.model_validate(value)
    except ValidationError:
        logger.warning("Ignoring grounding metadata with an unexpected shape")
        return None


def extract_citations(metadata: Any) -> List[Citation]:
    """One citation per chunk carrying a web source, in chunk order.

    Repeated sources are kept as repeated citations.
    """
    grounding = coerce_grounding_metadata(metadata)
    if grounding is None or not grounding.grounding_chunks:
        return []

    citations: List[Citation] = []
    for chunk in grounding.grounding_chunks:
        if chunk.web is None:
            continue
        citations.append(Citation(uri=chunk.web.uri or "", title=chunk.web.title or ""))
    return citations
