from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from kisan_assistant.api.dependencies import get_advisor, get_auth_service, get_database
from kisan_assistant.api.fallbacks import Operation, fallback_message, listing_description_fallback
from kisan_assistant.api.schemas import AdviceResponse, LocalizedRequest
from kisan_assistant.collections.database import Database
from kisan_assistant.collections.market_listing import get_market_listings, save_market_listing
from kisan_assistant.models.advice import SearchResult
from kisan_assistant.models.ai_result import AIResult, FailureReason
from kisan_assistant.models.market_listing import ListingType, MarketListing
from kisan_assistant.services.advisor import FarmingAdvisor
from kisan_assistant.services.auth_service import AuthService

router = APIRouter(prefix="/market", tags=["Marketplace"])


class ListingFields(BaseModel):
    crop: str = Field(..., min_length=1)
    quantity: str = Field(..., min_length=1)
    price: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)


class CreateListingRequest(ListingFields):
    type: ListingType = ListingType.SELL
    description: str = ""
    seed_type: Optional[str] = None
    fertilizer: Optional[str] = None
    harvest_date: Optional[str] = None
    equipment_brand: Optional[str] = None
    equipment_power: Optional[str] = None


class OptimizeListingRequest(ListingFields, LocalizedRequest):
    type: ListingType = ListingType.SELL


class OptimizeListingResponse(BaseModel):
    description: str


class RateCheckRequest(LocalizedRequest):
    crop: str = Field(..., min_length=1)
    market: str = Field(..., min_length=1, description="Mandi name")


class MarketSearchRequest(LocalizedRequest):
    query: str = Field(..., min_length=1)


@router.get("/listings", response_model=List[MarketListing], response_model_exclude_none=True)
async def list_listings(
    type: Optional[ListingType] = Query(default=None, description="Filter by listing type"),
    db: Database = Depends(get_database),
):
    return get_market_listings(db, type)


@router.post(
    "/listings",
    response_model=MarketListing,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_listing(
    request: CreateListingRequest,
    db: Database = Depends(get_database),
    auth: AuthService = Depends(get_auth_service),
):
    user = auth.get_current_user()
    listing = MarketListing(
        **request.model_dump(),
        seller=user.name if user else "Farmer",
        time="Just now",
    )
    return save_market_listing(db, listing)


@router.post("/listings/optimize", response_model=OptimizeListingResponse)
async def optimize_listing(
    request: OptimizeListingRequest, advisor: FarmingAdvisor = Depends(get_advisor)
):
    """
    Writes a short marketing description for a listing draft.
    """
    result = await advisor.optimize_listing(
        listing_type=request.type,
        crop=request.crop,
        quantity=request.quantity,
        price=request.price,
        location=request.location,
        language=request.language.value,
    )
    if result.ok:
        return OptimizeListingResponse(description=result.value)
    return OptimizeListingResponse(
        description=listing_description_fallback(
            result.failure, request.type, request.crop, request.location
        )
    )


def _search_response(operation: Operation, result: AIResult[SearchResult]) -> AdviceResponse:
    if not result.ok:
        return AdviceResponse.from_text(fallback_message(operation, result.failure), failure=result.failure)
    if not result.value.text:
        return AdviceResponse.from_text(
            fallback_message(operation, FailureReason.EMPTY_RESPONSE),
            sources=result.value.sources,
        )
    return AdviceResponse.from_text(result.value.text, sources=result.value.sources)


@router.post("/rates", response_model=AdviceResponse)
async def check_gov_rate(request: RateCheckRequest, advisor: FarmingAdvisor = Depends(get_advisor)):
    result = await advisor.gov_market_rate(request.crop, request.market, request.language.value)
    return _search_response(Operation.GOV_MARKET_RATE, result)


@router.post("/search", response_model=AdviceResponse)
async def search_buyers(request: MarketSearchRequest, advisor: FarmingAdvisor = Depends(get_advisor)):
    """
    B2B buyer and price-trend search grounded on web results.
    """
    result = await advisor.market_search(request.query, request.language.value)
    return _search_response(Operation.MARKET_SEARCH, result)
