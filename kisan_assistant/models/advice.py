from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field


class ParsedResponse(BaseModel):
    title: str = Field(default="")
    summary: List[str] = Field(default_factory=list)
    additional: List[str] = Field(default_factory=list)

    @property
    def is_structured(self) -> bool:
        # Casual chat replies carry no markers and must be shown verbatim.
        return bool(self.title) or bool(self.summary)


class Citation(BaseModel):
    uri: str
    title: str


class WebSource(BaseModel):
    uri: Optional[str] = None
    title: Optional[str] = None


class GroundingChunk(BaseModel):
    web: Optional[WebSource] = None


class GroundingMetadata(BaseModel):
    grounding_chunks: Optional[List[GroundingChunk]] = Field(
        default=None,
        validation_alias=AliasChoices("grounding_chunks", "groundingChunks"),
    )


class SearchResult(BaseModel):
    text: str = Field(default="")
    sources: List[Citation] = Field(default_factory=list)


class Scheme(BaseModel):
    name: str
    benefit: str


class DashboardInsights(BaseModel):
    tip: Optional[str] = None
    market: Optional[str] = None
