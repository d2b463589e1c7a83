from kisan_assistant.models.community_post import CommunityPost
from kisan_assistant.models.market_listing import ListingType, MarketListing

SEED_LISTINGS = [
    MarketListing(
        id="1",
        crop="Wheat (Sharbati)",
        quantity="50 Quintal",
        price="₹2200/Q",
        location="Bhatinda, Punjab",
        description="Premium Sharbati wheat, golden grains, harvested this week. Moisture content < 10%.",
        seller="Rajinder Singh",
        time="2 hrs ago",
        type=ListingType.SELL,
        seed_type="HD-2967",
        fertilizer="DAP, Urea",
    ),
    MarketListing(
        id="2",
        crop="Cotton",
        quantity="20 Quintal",
        price="₹6100/Q",
        location="Rajkot, Gujarat",
        description="Long staple cotton, clean picked. Direct from field. Ready for ginning.",
        seller="Patel Bros",
        time="5 hrs ago",
        type=ListingType.SELL,
    ),
    MarketListing(
        id="3",
        crop="Red Chilli",
        quantity="500 Kg",
        price="₹180/Kg",
        location="Guntur, AP",
        description="Spicy Guntur chilli, vibrant red color. Dried naturally under sun.",
        seller="Ramesh Kumar",
        time="1 day ago",
        type=ListingType.SELL,
    ),
    MarketListing(
        id="4",
        crop="Basmati Rice",
        quantity="100 Quintal",
        price="₹3500/Q",
        location="Karnal, Haryana",
        description="1121 Basmati Steam Rice. Best quality for export.",
        seller="Haryana Agro Traders",
        time="Just now",
        type=ListingType.BUY,
    ),
    MarketListing(
        id="5",
        crop="Mahindra 575 DI",
        quantity="1 Unit",
        price="₹800/hr",
        location="Pune, MH",
        description="Tractor available for ploughing and rotavator. Driver included.",
        seller="Suresh Farm Services",
        time="1 hr ago",
        type=ListingType.RENT,
        equipment_brand="Mahindra",
        equipment_power="45 HP",
    ),
    MarketListing(
        id="6",
        crop="Drone Spraying",
        quantity="5 Acres",
        price="₹400/acre",
        location="Indore, MP",
        description="Agri-drone for pesticide spraying. Fast and efficient. Saves water.",
        seller="TechKisan Solutions",
        time="3 hrs ago",
        type=ListingType.RENT,
        equipment_brand="Garuda Aerospace",
        equipment_power="Battery",
    ),
]

SEED_POSTS = [
    CommunityPost(
        id="101",
        author="Vikram Singh",
        location="Punjab",
        content="Used Nano Urea this season on my wheat crop. Seeing great results! Has anyone else tried it?",
        time="2 hrs ago",
        likes=15,
        comments=4,
        tags=["Fertilizer", "Wheat", "Success"],
    ),
    CommunityPost(
        id="102",
        author="Suresh Patel",
        location="Gujarat",
        content="Found these white spots on my cotton leaves. Is this fungal? Please help.",
        time="5 hrs ago",
        likes=8,
        comments=12,
        tags=["Cotton", "Disease", "Help"],
    ),
    CommunityPost(
        id="103",
        author="Anil Kumar",
        location="Bihar",
        content="Mandi prices for Maize are rising. Good time to sell brothers!",
        time="1 day ago",
        likes=42,
        comments=10,
        tags=["Maize", "Market Price"],
    ),
]
