from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, field_validator

from kisan_assistant.api.dependencies import get_advisor, get_auth_service, get_database
from kisan_assistant.collections.community_post import get_community_posts, save_community_post
from kisan_assistant.collections.database import Database
from kisan_assistant.models.community_post import CommunityPost
from kisan_assistant.services.advisor import FarmingAdvisor
from kisan_assistant.services.auth_service import AuthService

router = APIRouter(prefix="/community", tags=["Community"])


class CreatePostRequest(BaseModel):
    content: str = Field(..., min_length=1)
    image: Optional[str] = None

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Post cannot be empty")
        return v


@router.get("/posts", response_model=List[CommunityPost], response_model_exclude_none=True)
async def list_posts(db: Database = Depends(get_database)):
    return get_community_posts(db)


@router.post(
    "/posts",
    response_model=CommunityPost,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: CreatePostRequest,
    db: Database = Depends(get_database),
    auth: AuthService = Depends(get_auth_service),
    advisor: FarmingAdvisor = Depends(get_advisor),
):
    """
    Publishes a post; tags come from the AI and are left empty when tagging fails.
    """
    tags = await advisor.post_tags(request.content)
    user = auth.get_current_user()
    post = CommunityPost(
        author=user.name if user else "Farmer",
        location=(user.location if user else None) or "India",
        content=request.content,
        image=request.image,
        likes=0,
        comments=0,
        time="Just now",
        tags=tags.value if tags.ok else [],
    )
    return save_community_post(db, post)
