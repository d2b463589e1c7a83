from typing import Callable

from kisan_assistant.collections.seed_data import SEED_LISTINGS, SEED_POSTS
from kisan_assistant.core.document_store import Collection, seed_collection, timestamp_id
from kisan_assistant.core.kv_store import KeyValueStore
from kisan_assistant.models.community_post import CommunityPost
from kisan_assistant.models.market_listing import MarketListing
from kisan_assistant.models.user import UserRecord

USERS_COLLECTION = "kisan_users_db"
LISTINGS_COLLECTION = "kisan_listings_db"
POSTS_COLLECTION = "kisan_posts_db"
CURRENT_USER_SESSION_KEY = "kisan_current_user_session"


class Database:
    def __init__(self, store: KeyValueStore, id_factory: Callable[[], str] = timestamp_id) -> None:
        self.store = store
        self.users: Collection[UserRecord] = Collection(USERS_COLLECTION, UserRecord, store, id_factory)
        self.listings: Collection[MarketListing] = Collection(
            LISTINGS_COLLECTION, MarketListing, store, id_factory
        )
        self.posts: Collection[CommunityPost] = Collection(POSTS_COLLECTION, CommunityPost, store, id_factory)

    def seed(self) -> None:
        seed_collection(self.listings, SEED_LISTINGS, "market listings")
        seed_collection(self.posts, SEED_POSTS, "community posts")


def init_database(store: KeyValueStore, seed: bool = True) -> Database:
    database = Database(store)
    if seed:
        database.seed()
    return database
