import logging
import re
from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from kisan_assistant.core.config import settings
from kisan_assistant.core.errors import TransportError
from kisan_assistant.models.advice import DashboardInsights, Scheme, SearchResult
from kisan_assistant.models.ai_result import AIResult, FailureReason
from kisan_assistant.models.language import language_name
from kisan_assistant.models.market_listing import ListingType
from kisan_assistant.prompts.advice_prompts import (
    CROP_CALENDAR_PROMPT,
    DASHBOARD_INSIGHTS_PROMPT,
    DASHBOARD_INSIGHTS_SEPARATOR,
    DISEASE_DIAGNOSIS_PROMPT,
    FERTILIZER_PLAN_PROMPT,
    FINANCE_ADVICE_PROMPT,
    GOV_MARKET_RATE_PROMPT,
    GOVERNMENT_SCHEMES_PROMPT,
    LISTING_CONTEXTS,
    LISTING_OPTIMIZER_PROMPT,
    MARKET_SEARCH_PROMPT,
    MARKET_SEARCH_SYSTEM_TEMPLATE,
    POST_TAGS_PROMPT,
    SOIL_ANALYSIS_PROMPT,
    WEATHER_ADVICE_PROMPT,
    WEED_IDENTIFICATION_PROMPT,
)
from kisan_assistant.prompts.farming_system_prompt import (
    FARMING_SYSTEM_PROMPT,
    GOV_MARKET_RATE_SYSTEM_PROMPT,
)
from kisan_assistant.prompts.language_directive import localize_prompt
from kisan_assistant.services.citations import extract_citations
from kisan_assistant.services.response_parser import split_dashboard_insights
from kisan_assistant.services.transport import (
    AITransport,
    GenerationRequest,
    GenerationResponse,
    InlineImage,
)

logger = logging.getLogger(__name__)

_schemes_adapter = TypeAdapter(List[Scheme])
_tags_adapter = TypeAdapter(List[str])
_QUOTES = re.compile(r"['\"]+")


class FarmingAdvisor:
    """One method per AI-backed feature of the app.

    Freeform methods return the raw reply text; render it with
    ``services.response_parser``. Nothing here raises on transport failure.
    """

    def __init__(self, transport: AITransport) -> None:
        self._transport = transport

    async def _call(self, operation: str, request: GenerationRequest) -> AIResult[GenerationResponse]:
        try:
            response = await self._transport.generate(request)
        except TransportError as e:
            logger.warning("%s failed: %s", operation, e.message)
            return AIResult.error(FailureReason.TRANSPORT_ERROR, detail=e.message)
        except Exception as e:
            logger.exception("%s raised unexpectedly", operation)
            return AIResult.error(FailureReason.TRANSPORT_ERROR, detail=str(e))
        return AIResult.success(response)

    async def _text(self, operation: str, request: GenerationRequest) -> AIResult[str]:
        result = await self._call(operation, request)
        if not result.ok:
            return AIResult.error(result.failure, detail=result.detail)
        if not result.value.text:
            return AIResult.error(FailureReason.EMPTY_RESPONSE)
        return AIResult.success(result.value.text)

    async def _json(self, operation: str, request: GenerationRequest, adapter: TypeAdapter) -> AIResult[Any]:
        result = await self._call(operation, request)
        if not result.ok:
            return AIResult.error(result.failure, detail=result.detail)
        try:
            value = adapter.validate_json(result.value.text or "[]")
        except ValidationError as e:
            logger.warning("%s returned malformed JSON: %s", operation, e.error_count())
            return AIResult.error(FailureReason.DECODE_ERROR, detail=str(e))
        return AIResult.success(value)

    async def _grounded_search(
        self, operation: str, request: GenerationRequest
    ) -> AIResult[SearchResult]:
        result = await self._call(operation, request)
        if not result.ok:
            return AIResult.error(result.failure, detail=result.detail)
        response = result.value
        return AIResult.success(
            SearchResult(
                text=response.text or "",
                sources=extract_citations(response.grounding_metadata),
            )
        )

    async def generate_diagnosis(
        self,
        prompt: str,
        image: InlineImage,
        language: str = settings.DEFAULT_LANGUAGE,
    ) -> AIResult[str]:
        request = GenerationRequest(
            model=settings.DIAGNOSIS_MODEL,
            contents=localize_prompt(prompt, language),
            system_instruction=FARMING_SYSTEM_PROMPT,
            temperature=0.4,
            image=image,
        )
        return await self._text("diagnosis", request)

    async def diagnose_crop(
        self,
        image: InlineImage,
        crop_name: Optional[str] = None,
        language: str = settings.DEFAULT_LANGUAGE,
    ) -> AIResult[str]:
        prompt = DISEASE_DIAGNOSIS_PROMPT.format(crop_name=crop_name or "Unknown")
        return await self.generate_diagnosis(prompt, image, language)

    async def identify_weed(
        self, image: InlineImage, language: str = settings.DEFAULT_LANGUAGE
    ) -> AIResult[str]:
        return await self.generate_diagnosis(WEED_IDENTIFICATION_PROMPT, image, language)

    async def analyze_soil(
        self, image: InlineImage, language: str = settings.DEFAULT_LANGUAGE
    ) -> AIResult[str]:
        request = GenerationRequest(
            model=settings.DIAGNOSIS_MODEL,
            contents=SOIL_ANALYSIS_PROMPT.format(language=language_name(language)),
            temperature=0.4,
            image=image,
        )
        return await self._text("soil analysis", request)

    async def fast_advice(self, prompt: str, language: str = settings.DEFAULT_LANGUAGE) -> AIResult[str]:
        request = GenerationRequest(
            model=settings.FAST_MODEL,
            contents=localize_prompt(prompt, language),
            system_instruction=FARMING_SYSTEM_PROMPT,
            temperature=0.3,
        )
        return await self._text("fast advice", request)

    async def weather_advice(
        self,
        temperature: float,
        humidity: float,
        rainfall: str,
        crop: Optional[str] = None,
        language: str = settings.DEFAULT_LANGUAGE,
    ) -> AIResult[str]:
        prompt = WEATHER_ADVICE_PROMPT.format(
            temperature=temperature,
            humidity=humidity,
            rainfall=rainfall,
            crop=crop or "General",
        )
        return await self.fast_advice(prompt, language)

    async def finance_advice(
        self,
        income: float,
        expense: float,
        trend: str,
        language: str = settings.DEFAULT_LANGUAGE,
    ) -> AIResult[str]:
        prompt = FINANCE_ADVICE_PROMPT.format(income=income, expense=expense, trend=trend)
        return await self.fast_advice(prompt, language)

    async def dashboard_insights(self, language: str = settings.DEFAULT_LANGUAGE) -> AIResult[DashboardInsights]:
        request = GenerationRequest(
            model=settings.FAST_MODEL,
            contents=DASHBOARD_INSIGHTS_PROMPT.format(language=language_name(language)),
            temperature=0.5,
        )
        result = await self._call("dashboard insights", request)
        if not result.ok:
            return AIResult.error(result.failure, detail=result.detail)
        return AIResult.success(
            split_dashboard_insights(result.value.text or "", DASHBOARD_INSIGHTS_SEPARATOR)
        )

    async def market_search(self, query: str, language: str = settings.DEFAULT_LANGUAGE) -> AIResult[SearchResult]:
        name = language_name(language)
        request = GenerationRequest(
            model=settings.SEARCH_MODEL,
            contents=MARKET_SEARCH_PROMPT.format(query=query, language=name),
            system_instruction=MARKET_SEARCH_SYSTEM_TEMPLATE.format(language=name),
            use_search=True,
        )
        return await self._grounded_search("market search", request)

    async def gov_market_rate(
        self, crop: str, market: str, language: str = settings.DEFAULT_LANGUAGE
    ) -> AIResult[SearchResult]:
        request = GenerationRequest(
            model=settings.SEARCH_MODEL,
            contents=GOV_MARKET_RATE_PROMPT.format(
                crop=crop, market=market, language=language_name(language)
            ),
            system_instruction=GOV_MARKET_RATE_SYSTEM_PROMPT,
            use_search=True,
        )
        return await self._grounded_search("government market rate", request)

    async def optimize_listing(
        self,
        listing_type: ListingType,
        crop: str,
        quantity: str,
        price: str,
        location: str,
        language: str = settings.DEFAULT_LANGUAGE,
    ) -> AIResult[str]:
        context = LISTING_CONTEXTS[ListingType(listing_type).value].format(crop=crop)
        request = GenerationRequest(
            model=settings.FAST_MODEL,
            contents=LISTING_OPTIMIZER_PROMPT.format(
                context=context,
                quantity=quantity,
                price=price,
                location=location,
                language=language_name(language),
            ),
            temperature=0.7,
        )
        result = await self._text("listing optimizer", request)
        if not result.ok:
            return result
        cleaned = _QUOTES.sub("", result.value.strip())
        if not cleaned:
            return AIResult.error(FailureReason.EMPTY_RESPONSE)
        return AIResult.success(cleaned)

    async def government_schemes(
        self, location: str, language: str = settings.DEFAULT_LANGUAGE
    ) -> AIResult[List[Scheme]]:
        request = GenerationRequest(
            model=settings.DIAGNOSIS_MODEL,
            contents=GOVERNMENT_SCHEMES_PROMPT.format(
                location=location, language=language_name(language)
            ),
            temperature=0.3,
            response_schema=list[Scheme],
        )
        return await self._json("government schemes", request, _schemes_adapter)

    async def crop_calendar(
        self, crop: str, sowing_date: str, language: str = settings.DEFAULT_LANGUAGE
    ) -> AIResult[str]:
        request = GenerationRequest(
            model=settings.FAST_MODEL,
            contents=CROP_CALENDAR_PROMPT.format(
                crop=crop, sowing_date=sowing_date, language=language_name(language)
            ),
            temperature=0.4,
        )
        return await self._text("crop calendar", request)

    async def fertilizer_plan(
        self,
        crop: str,
        land_size: float,
        days_since_sowing: int,
        language: str = settings.DEFAULT_LANGUAGE,
    ) -> AIResult[str]:
        request = GenerationRequest(
            model=settings.FAST_MODEL,
            contents=FERTILIZER_PLAN_PROMPT.format(
                crop=crop,
                land_size=land_size,
                days_since_sowing=days_since_sowing,
                language=language_name(language),
            ),
            temperature=0.3,
        )
        return await self._text("fertilizer plan", request)

    async def post_tags(self, content: str) -> AIResult[List[str]]:
        request = GenerationRequest(
            model=settings.FAST_MODEL,
            contents=POST_TAGS_PROMPT.format(content=content),
            response_schema=list[str],
        )
        return await self._json("post tagging", request, _tags_adapter)
