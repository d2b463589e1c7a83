from typing import List, Optional

from kisan_assistant.collections.database import Database
from kisan_assistant.models.market_listing import ListingType, MarketListing


def get_market_listings(db: Database, listing_type: Optional[ListingType] = None) -> List[MarketListing]:
    query = {"type": listing_type.value} if listing_type else {}
    return db.listings.find(query)


def save_market_listing(db: Database, listing: MarketListing) -> MarketListing:
    return db.listings.insert_one(listing)
