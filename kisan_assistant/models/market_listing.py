from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from kisan_assistant.core.document_store import Document


class ListingType(str, Enum):
    BUY = "buy"
    SELL = "sell"
    RENT = "rent"


class MarketListing(Document):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    crop: str = Field(..., description="Crop name, or equipment name for rentals")
    quantity: str = Field(...)
    price: str = Field(...)
    location: str = Field(...)
    description: str = Field(default="")
    seller: str = Field(...)
    time: str = Field(...)
    type: ListingType = Field(...)
    # crop sellers
    seed_type: Optional[str] = Field(default=None)
    fertilizer: Optional[str] = Field(default=None)
    harvest_date: Optional[str] = Field(default=None)
    # equipment rentals
    equipment_brand: Optional[str] = Field(default=None)
    equipment_power: Optional[str] = Field(default=None, description='e.g. "50 HP"')
