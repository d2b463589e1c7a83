from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field, field_validator

from kisan_assistant.api.dependencies import get_advisor
from kisan_assistant.api.fallbacks import (
    DEFAULT_DAILY_TIP,
    DEFAULT_MARKET_TREND,
    OFFLINE_DAILY_TIP,
    OFFLINE_MARKET_TREND,
    Operation,
    fallback_message,
)
from kisan_assistant.api.schemas import AdviceResponse, ImageRequest, LocalizedRequest
from kisan_assistant.core.config import settings
from kisan_assistant.models.advice import DashboardInsights, Scheme
from kisan_assistant.models.ai_result import AIResult
from kisan_assistant.models.language import Language
from kisan_assistant.services.advisor import FarmingAdvisor

router = APIRouter(prefix="/advice", tags=["Advice"])


class DiagnosisRequest(ImageRequest):
    kind: Literal["disease", "weed"] = "disease"
    crop_name: Optional[str] = Field(default=None, max_length=100)

    @field_validator("crop_name")
    @classmethod
    def crop_name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) > 0 and not v.strip():
            raise ValueError("Please enter a valid crop name or leave blank")
        return v


class WeatherAdviceRequest(LocalizedRequest):
    temperature: float = Field(..., ge=-10, le=60, description="°C")
    humidity: float = Field(..., ge=0, le=100, description="%")
    rainfall: str = Field(..., min_length=1)
    crop: Optional[str] = None


class FinanceAdviceRequest(LocalizedRequest):
    income: float = Field(..., ge=0)
    expense: float = Field(..., ge=0)
    trend: Literal["profit", "stable", "loss"] = "stable"


class CropCalendarRequest(LocalizedRequest):
    crop: str = Field(..., min_length=1)
    sowing_date: str = Field(..., min_length=1)


class FertilizerRequest(LocalizedRequest):
    crop: str = Field(..., min_length=1)
    land_size: float = Field(..., gt=0, le=1000, description="Acres")
    days_since_sowing: int = Field(..., ge=0, le=365)


def _advice_response(operation: Operation, result: AIResult[str]) -> AdviceResponse:
    if result.ok:
        return AdviceResponse.from_text(result.value)
    return AdviceResponse.from_text(fallback_message(operation, result.failure), failure=result.failure)


@router.post("/diagnosis", response_model=AdviceResponse)
async def diagnose(request: DiagnosisRequest, advisor: FarmingAdvisor = Depends(get_advisor)):
    """
    Crop disease or weed identification from a photo.
    """
    if request.kind == "weed":
        result = await advisor.identify_weed(request.inline_image(), request.language.value)
    else:
        result = await advisor.diagnose_crop(
            request.inline_image(), request.crop_name, request.language.value
        )
    return _advice_response(Operation.DIAGNOSIS, result)


@router.post("/soil", response_model=AdviceResponse)
async def analyze_soil(request: ImageRequest, advisor: FarmingAdvisor = Depends(get_advisor)):
    result = await advisor.analyze_soil(request.inline_image(), request.language.value)
    return _advice_response(Operation.SOIL_ANALYSIS, result)


@router.post("/weather", response_model=AdviceResponse)
async def weather_advice(request: WeatherAdviceRequest, advisor: FarmingAdvisor = Depends(get_advisor)):
    result = await advisor.weather_advice(
        temperature=request.temperature,
        humidity=request.humidity,
        rainfall=request.rainfall,
        crop=request.crop,
        language=request.language.value,
    )
    return _advice_response(Operation.FAST_ADVICE, result)


@router.post("/finance", response_model=AdviceResponse)
async def finance_advice(request: FinanceAdviceRequest, advisor: FarmingAdvisor = Depends(get_advisor)):
    result = await advisor.finance_advice(
        income=request.income,
        expense=request.expense,
        trend=request.trend,
        language=request.language.value,
    )
    return _advice_response(Operation.FAST_ADVICE, result)


@router.post("/crop-calendar", response_model=AdviceResponse)
async def crop_calendar(request: CropCalendarRequest, advisor: FarmingAdvisor = Depends(get_advisor)):
    result = await advisor.crop_calendar(request.crop, request.sowing_date, request.language.value)
    return _advice_response(Operation.CROP_CALENDAR, result)


@router.post("/fertilizer", response_model=AdviceResponse)
async def fertilizer_plan(request: FertilizerRequest, advisor: FarmingAdvisor = Depends(get_advisor)):
    result = await advisor.fertilizer_plan(
        crop=request.crop,
        land_size=request.land_size,
        days_since_sowing=request.days_since_sowing,
        language=request.language.value,
    )
    return _advice_response(Operation.FERTILIZER, result)


@router.get("/dashboard", response_model=DashboardInsights)
async def dashboard_insights(
    language: Language = Query(default=Language(settings.DEFAULT_LANGUAGE)),
    advisor: FarmingAdvisor = Depends(get_advisor),
):
    """
    Daily tip and market pulse for the home screen.
    """
    result = await advisor.dashboard_insights(language.value)
    if not result.ok:
        return DashboardInsights(tip=OFFLINE_DAILY_TIP, market=OFFLINE_MARKET_TREND)
    return DashboardInsights(
        tip=result.value.tip or DEFAULT_DAILY_TIP,
        market=result.value.market or DEFAULT_MARKET_TREND,
    )


@router.get("/schemes", response_model=List[Scheme])
async def government_schemes(
    location: str = Query(..., min_length=1),
    language: Language = Query(default=Language(settings.DEFAULT_LANGUAGE)),
    advisor: FarmingAdvisor = Depends(get_advisor),
):
    result = await advisor.government_schemes(location, language.value)
    return result.value if result.ok else []
