"""User-facing strings for failed AI operations.

Services report a FailureReason; this table is the only place those become text.
"""

from enum import Enum
from typing import Optional

from kisan_assistant.models.ai_result import FailureReason
from kisan_assistant.models.market_listing import ListingType


class Operation(str, Enum):
    DIAGNOSIS = "diagnosis"
    SOIL_ANALYSIS = "soil_analysis"
    FAST_ADVICE = "fast_advice"
    CHAT = "chat"
    MARKET_SEARCH = "market_search"
    GOV_MARKET_RATE = "gov_market_rate"
    CROP_CALENDAR = "crop_calendar"
    FERTILIZER = "fertilizer"


# (message when the reply was empty, message when the call failed)
_FALLBACKS = {
    Operation.DIAGNOSIS: (
        "Unable to diagnose. Please try again with a clearer photo.",
        "Error connecting to the diagnosis service.",
    ),
    Operation.SOIL_ANALYSIS: ("Could not analyze soil.", "Error analyzing soil image."),
    Operation.FAST_ADVICE: ("No advice generated.", "Service unavailable."),
    Operation.CHAT: (
        "I didn't understand that.",
        "Connection lost. Starting a new conversation...",
    ),
    Operation.MARKET_SEARCH: ("No market data found.", "Could not search for buyers right now."),
    Operation.GOV_MARKET_RATE: ("Rate data not found.", "Could not fetch government data right now."),
    Operation.CROP_CALENDAR: ("Calendar generation failed.", "Could not generate calendar."),
    Operation.FERTILIZER: ("Calculation failed.", "Could not calculate fertilizer dosage."),
}

DEFAULT_DAILY_TIP = "Keep your field clean to prevent pests."
DEFAULT_MARKET_TREND = "Check local mandi prices before selling."
OFFLINE_DAILY_TIP = "Water your crops early in the morning."
OFFLINE_MARKET_TREND = "Market rates vary, check mandi."


def fallback_message(operation: Operation, failure: Optional[FailureReason]) -> str:
    empty_message, error_message = _FALLBACKS[operation]
    if failure == FailureReason.EMPTY_RESPONSE:
        return empty_message
    return error_message


def listing_description_fallback(
    failure: Optional[FailureReason], listing_type: ListingType, crop: str, location: str
) -> str:
    if failure == FailureReason.EMPTY_RESPONSE:
        prefix = "Quality" if listing_type == ListingType.SELL else "Need"
        return f"{prefix} {crop} in {location}."
    return f"{crop} available in {location}."
