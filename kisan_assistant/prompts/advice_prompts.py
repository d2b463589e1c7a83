from langchain_core.prompts import PromptTemplate

from kisan_assistant.prompts.farming_system_prompt import MARKET_SEARCH_SYSTEM_PROMPT

DISEASE_DIAGNOSIS_PROMPT = PromptTemplate.from_template(
    "Identify the disease for this crop: {crop_name}. Look for symptoms in the image."
)

WEED_IDENTIFICATION_PROMPT = "Identify this weed and tell me how to remove it."

SOIL_ANALYSIS_PROMPT = PromptTemplate.from_template(
    """
Analyze this image of soil.
Identify:
1. Soil Texture (Clay, Loam, Sandy, etc.)
2. Color & likely moisture content.
3. Best suitable crops for this soil type in India.

Format:
TITLE: Soil Analysis
SUMMARY:
- Type: [Soil Type]
- Characteristics: [Details]
- Best Crops: [List]

OUTPUT STRICTLY IN {language}.
"""
)

WEATHER_ADVICE_PROMPT = PromptTemplate.from_template(
    """
WEATHER-BASED FARMING SUGGESTIONS:
- Temperature: {temperature}°C
- Humidity: {humidity}%
- Rainfall: {rainfall}
- Crop: {crop}

Follow the specific rules:
- If temp > 32°C warn about heat stress.
- If temp < 18°C warn about slow growth.
- If humidity > 80% suggest reduced nitrogen.
- If rainfall low suggest irrigation.
"""
)

FINANCE_ADVICE_PROMPT = PromptTemplate.from_template(
    """
MONEY MANAGEMENT ADVICE:
- Monthly/Seasonal Income: ₹{income}
- Expenses: ₹{expense}
- Farmer says trend is: {trend}

Provide a financial health summary, spending tips, and cost-saving ideas for a small Indian farmer.
"""
)

DASHBOARD_INSIGHTS_SEPARATOR = "|||"

DASHBOARD_INSIGHTS_PROMPT = PromptTemplate.from_template(
    """
Generate two short sections for an Indian farmer dashboard.
1. A short, practical "Daily Farming Tip" (1 sentence).
2. A short "Market Trend Analysis" for major crops in India (1-2 sentences).

Separate them with "|||".
Example output:
Rotate crops to improve soil health. ||| Wheat prices are steady, but onion prices are rising due to rain.

OUTPUT STRICTLY IN {language} LANGUAGE.
"""
)

MARKET_SEARCH_PROMPT = PromptTemplate.from_template(
    "Find current B2B buyers, agricultural market platforms (eNAM, etc), or price trends for: "
    "{query} in India. List specific websites or companies if found. Summarize findings in {language}."
)

MARKET_SEARCH_SYSTEM_TEMPLATE = PromptTemplate.from_template(MARKET_SEARCH_SYSTEM_PROMPT)

GOV_MARKET_RATE_PROMPT = PromptTemplate.from_template(
    """
Find the latest official daily market prices (Mandi Rates) for {crop} in {market} or nearby districts in India.
Prioritize data from agmarknet.gov.in, enam.gov.in, or data.gov.in.

Provide a VERY short summary including:
1. Market Name
2. Modal Price (Per Quintal)
3. Date of data

Output strictly in {language}.
"""
)

LISTING_CONTEXTS = {
    "sell": PromptTemplate.from_template(
        "Write a VERY SHORT (under 20 words), attractive B2B marketplace description for SELLING {crop}. "
        "Highlight freshness, quality, and direct farm origin."
    ),
    "rent": PromptTemplate.from_template(
        "Write a VERY SHORT (under 20 words) attractive ad to RENT OUT this farm equipment: {crop}. "
        "Highlight condition and performance."
    ),
    "buy": PromptTemplate.from_template(
        "Write a VERY SHORT (under 20 words), urgent B2B marketplace description for BUYING (REQUESTING) {crop}. "
        "Highlight urgency, payment terms, or bulk requirement."
    ),
}

LISTING_OPTIMIZER_PROMPT = PromptTemplate.from_template(
    """
Act as a professional agriculture marketing expert.
{context}
- Quantity/Capacity: {quantity}
- Price: {price}
- Location: {location}

OUTPUT STRICTLY IN {language} LANGUAGE.
"""
)

GOVERNMENT_SCHEMES_PROMPT = PromptTemplate.from_template(
    """
List 3 major Indian government agriculture schemes/subsidies relevant for a farmer in {location}.
Include PM-Kisan if applicable.
Return a JSON array where each object has "name" and "benefit" keys.

OUTPUT STRICTLY IN {language} LANGUAGE.
"""
)

CROP_CALENDAR_PROMPT = PromptTemplate.from_template(
    """
Create a simplified Crop Calendar for {crop} sown on {sowing_date} in India.
Provide a structured timeline with 4-5 key stages (Sowing, Germination/Irrigation, Fertilizing, Flowering, Harvest).

Format exactly like this:
TITLE: Calendar for {crop}

SUMMARY:
- Stage 1 (Day 1-5): [Brief Action]
- Stage 2 (Day 15-20): [Brief Action]
- Stage 3 (Day 45): [Brief Action]
- Harvest (Day 90-100): [Brief Action]

ADDITIONAL ADVICE:
- [One key tip for this season]

OUTPUT STRICTLY IN {language} LANGUAGE.
"""
)

FERTILIZER_PLAN_PROMPT = PromptTemplate.from_template(
    """
Act as an expert agronomist. Calculate the fertilizer dosage (Urea, DAP, MOP) for:
- Crop: {crop}
- Land Size: {land_size} Acres
- Crop Stage: {days_since_sowing} days after sowing.

Provide a practical dosage schedule in "Bags" (approx 50kg) or "kg".
Mention estimated cost in rupees if possible.

Format exactly like this:
TITLE: Fertilizer Plan for {crop}

SUMMARY:
- Basal Dose: [Amount]
- Top Dressing: [Amount]
- Est. Cost: [Amount]

ADDITIONAL ADVICE:
- [Safety or efficiency tip]

OUTPUT STRICTLY IN {language} LANGUAGE.
"""
)

POST_TAGS_PROMPT = PromptTemplate.from_template(
    """
Analyze this post from a farmer community: "{content}".
Return a JSON array of 2-3 short tags (e.g. ["Wheat", "Pest Control", "Success"]).
"""
)
