from typing import List

from kisan_assistant.collections.database import Database
from kisan_assistant.models.community_post import CommunityPost


def get_community_posts(db: Database) -> List[CommunityPost]:
    return db.posts.find()


def save_community_post(db: Database, post: CommunityPost) -> CommunityPost:
    return db.posts.insert_one(post)
