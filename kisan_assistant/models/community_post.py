from typing import List, Optional

from pydantic import Field

from kisan_assistant.core.document_store import Document


class CommunityPost(Document):
    author: str = Field(...)
    location: str = Field(...)
    content: str = Field(...)
    image: Optional[str] = Field(default=None)
    likes: int = Field(default=0)
    comments: int = Field(default=0)
    time: str = Field(...)
    tags: Optional[List[str]] = Field(default=None, description="AI generated tags")
