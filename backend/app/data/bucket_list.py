"""Ken and Gail's curated travel bucket list.

Raw rows as maintained in the original spreadsheet. Loaded once into
immutable CatalogItem objects by app.services.catalog_service.

Columns:
    destination          Display name, optional trailing "(Country/State)"
    ken_priority         1 (highest) .. 6
    gail_interest_level  "" | "HIGH" | "LOW"
    status               "" (planned) | "Done" | "Done - <year>"
"""

BUCKET_LIST_ROWS: tuple[dict, ...] = (
    {
        "destination": "Machu Picchu (Peru)",
        "ken_priority": 1,
        "gail_interest_level": "HIGH",
        "status": "",
        "experiences": ("Ancient ruins exploration", "Hiking Inca Trail", "Cultural immersion", "Photography"),
        "estimated_duration": 10,
        "difficulty": "challenging",
        "best_season": "May-September (dry season)",
        "tags": ("adventure", "culture", "history", "hiking"),
    },
    {
        "destination": "African Safari (South Africa, Zambia, Tanzania)",
        "ken_priority": 1,
        "gail_interest_level": "HIGH",
        "status": "",
        "experiences": ("Wildlife safari", "Big Five viewing", "Cultural villages", "Photography"),
        "estimated_duration": 14,
        "difficulty": "moderate",
        "best_season": "May-October (dry season)",
        "tags": ("wildlife", "adventure", "photography", "nature"),
    },
    {
        "destination": "New Zealand",
        "ken_priority": 2,
        "gail_interest_level": "",
        "status": "",
        "experiences": ("Scenic drives", "Adventure sports", "Hobbiton tours", "Fjord exploration"),
        "estimated_duration": 14,
        "difficulty": "moderate",
        "best_season": "October-April (summer)",
        "tags": ("adventure", "nature", "scenic", "outdoor"),
    },
    {
        "destination": "Yosemite (California)",
        "ken_priority": 2,
        "gail_interest_level": "",
        "status": "",
        "experiences": ("Hiking", "Rock climbing", "Photography", "Nature walks"),
        "estimated_duration": 5,
        "difficulty": "moderate",
        "best_season": "April-October",
        "tags": ("nature", "hiking", "photography", "national-park"),
    },
    {
        "destination": "Iceland",
        "ken_priority": 2,
        "gail_interest_level": "HIGH",
        "status": "",
        "experiences": ("Northern Lights", "Geysers", "Waterfalls", "Blue Lagoon", "Ring Road"),
        "estimated_duration": 10,
        "difficulty": "easy",
        "best_season": "June-August (summer) or September-March (Northern Lights)",
        "tags": ("nature", "scenic", "unique", "photography"),
    },
    {
        "destination": "Bryce, Zions, Arches, Capitol Reef, Canyonlands",
        "ken_priority": 2,
        "gail_interest_level": "",
        "status": "",
        "experiences": ("Hiking", "Photography", "Scenic drives", "Rock formations"),
        "estimated_duration": 12,
        "difficulty": "moderate",
        "best_season": "April-May, September-October",
        "tags": ("nature", "hiking", "photography", "national-park"),
    },
    {
        "destination": "Norway/Sweden/Finland",
        "ken_priority": 3,
        "gail_interest_level": "",
        "status": "",
        "experiences": ("Northern Lights", "Fjord cruises", "Sami culture", "Arctic experiences"),
        "estimated_duration": 12,
        "difficulty": "easy",
        "best_season": "June-August (midnight sun) or December-March (Northern Lights)",
        "tags": ("nature", "culture", "scenic", "unique"),
    },
    {
        "destination": "Amalfi Coast (Italy)",
        "ken_priority": 3,
        "gail_interest_level": "",
        "status": "",
        "experiences": ("Coastal drives", "Italian cuisine", "Historic towns", "Mediterranean culture"),
        "estimated_duration": 8,
        "difficulty": "easy",
        "best_season": "April-June, September-October",
        "tags": ("culture", "food", "scenic", "relaxation"),
    },
    {
        "destination": "Thailand, Vietnam, Cambodia, Laos",
        "ken_priority": 3,
        "gail_interest_level": "",
        "status": "",
        "experiences": ("Temple visits", "Street food", "Cultural immersion", "Historic sites"),
        "estimated_duration": 21,
        "difficulty": "moderate",
        "best_season": "November-March (cool/dry season)",
        "tags": ("culture", "food", "history", "adventure"),
    },
    {
        "destination": "Prague (Czech Republic)",
        "ken_priority": 3,
        "gail_interest_level": "",
        "status": "",
        "experiences": ("Historic architecture", "Castle tours", "Local cuisine", "Cultural walks"),
        "estimated_duration": 5,
        "difficulty": "easy",
        "best_season": "April-June, September-October",
        "tags": ("culture", "history", "architecture", "food"),
    },
    {
        "destination": "Ireland",
        "ken_priority": 4,
        "gail_interest_level": "LOW",
        "status": "",
        "experiences": ("Scenic drives", "Pub culture", "Historic sites", "Countryside"),
        "estimated_duration": 10,
        "difficulty": "easy",
        "best_season": "May-September",
        "tags": ("culture", "scenic", "history", "relaxation"),
    },
    {
        "destination": "Scotland",
        "ken_priority": 4,
        "gail_interest_level": "LOW",
        "status": "",
        "experiences": ("Highland tours", "Castle visits", "Whisky tasting", "Scenic drives"),
        "estimated_duration": 10,
        "difficulty": "easy",
        "best_season": "May-September",
        "tags": ("culture", "scenic", "history", "food"),
    },
    {
        "destination": "Patagonia (Argentina)",
        "ken_priority": 4,
        "gail_interest_level": "HIGH",
        "status": "",
        "experiences": ("Hiking", "Glacier viewing", "Wildlife", "Adventure activities"),
        "estimated_duration": 14,
        "difficulty": "challenging",
        "best_season": "October-April (summer)",
        "tags": ("adventure", "nature", "hiking", "wildlife"),
    },
    {
        "destination": "Marrakesh (Morocco)",
        "ken_priority": 4,
        "gail_interest_level": "",
        "status": "",
        "experiences": ("Medina exploration", "Souks shopping", "Moroccan cuisine", "Desert trips"),
        "estimated_duration": 7,
        "difficulty": "moderate",
        "best_season": "October-April",
        "tags": ("culture", "food", "adventure", "unique"),
    },
    {
        "destination": "Great Smokies (TN)",
        "ken_priority": 4,
        "gail_interest_level": "LOW",
        "status": "",
        "experiences": ("Hiking", "Wildlife viewing", "Scenic drives", "Fall foliage"),
        "estimated_duration": 5,
        "difficulty": "easy",
        "best_season": "April-May, September-October",
        "tags": ("nature", "hiking", "scenic", "national-park"),
    },
    {
        "destination": "Other Parks: Badlands, Death Valley, Sequoia, Grand Teton, Glacier, Rainier, Shenandoah",
        "ken_priority": 4,
        "gail_interest_level": "",
        "status": "",
        "experiences": ("Hiking", "Photography", "Wildlife viewing", "Scenic drives"),
        "estimated_duration": 20,
        "difficulty": "moderate",
        "best_season": "Varies by park",
        "tags": ("nature", "hiking", "photography", "national-park"),
    },
    {
        "destination": "Bora Bora",
        "ken_priority": 5,
        "gail_interest_level": "",
        "status": "",
        "experiences": ("Beach relaxation", "Water sports", "Overwater bungalows", "Snorkeling"),
        "estimated_duration": 7,
        "difficulty": "easy",
        "best_season": "May-October (dry season)",
        "tags": ("relaxation", "beach", "luxury", "water-sports"),
    },
    {
        "destination": "Tahiti",
        "ken_priority": 5,
        "gail_interest_level": "",
        "status": "",
        "experiences": ("Beach relaxation", "Polynesian culture", "Water activities", "Island hopping"),
        "estimated_duration": 7,
        "difficulty": "easy",
        "best_season": "May-October (dry season)",
        "tags": ("relaxation", "beach", "culture", "water-sports"),
    },
    {
        "destination": "Fiji",
        "ken_priority": 5,
        "gail_interest_level": "",
        "status": "",
        "experiences": ("Beach relaxation", "Snorkeling", "Island culture", "Water sports"),
        "estimated_duration": 7,
        "difficulty": "easy",
        "best_season": "May-October (dry season)",
        "tags": ("relaxation", "beach", "culture", "water-sports"),
    },
    {
        "destination": "Bali (Indonesia)",
        "ken_priority": 5,
        "gail_interest_level": "",
        "status": "",
        "experiences": ("Temple visits", "Rice terraces", "Balinese culture", "Beach relaxation"),
        "estimated_duration": 10,
        "difficulty": "easy",
        "best_season": "April-October (dry season)",
        "tags": ("culture", "relaxation", "beach", "spiritual"),
    },
    {
        "destination": "Yellowstone (Wyoming)",
        "ken_priority": 6,
        "gail_interest_level": "",
        "status": "Done - 2024",
        "experiences": ("Geysers", "Wildlife viewing", "Hot springs", "Hiking"),
        "estimated_duration": 7,
        "difficulty": "easy",
        "best_season": "April-October",
        "tags": ("nature", "wildlife", "national-park", "unique"),
    },
    {
        "destination": "New Orleans (Louisiana)",
        "ken_priority": 6,
        "gail_interest_level": "",
        "status": "Done",
        "experiences": ("Jazz music", "Creole cuisine", "French Quarter", "Cultural tours"),
        "estimated_duration": 4,
        "difficulty": "easy",
        "best_season": "October-May",
        "tags": ("culture", "food", "music", "history"),
    },
    {
        "destination": "Banff (Calgary)",
        "ken_priority": 6,
        "gail_interest_level": "",
        "status": "Done - 2025",
        "experiences": ("Mountain scenery", "Lake activities", "Wildlife viewing", "Hiking"),
        "estimated_duration": 7,
        "difficulty": "moderate",
        "best_season": "June-September",
        "tags": ("nature", "scenic", "hiking", "wildlife"),
    },
)

# Daily cost tiers for the mocked cost estimate (USD per day)
DAILY_COST_TIERS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (120, ("africa", "peru", "morocco")),
    (300, ("norway", "iceland", "bora bora")),
    (80, ("thailand", "vietnam", "cambodia")),
)
DEFAULT_DAILY_COST = 150

# Round-trip transport estimates (USD)
TRANSPORT_COST_TIERS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (1500, ("africa", "peru", "new zealand")),
    (1000, ("europe", "iceland")),
)
DEFAULT_TRANSPORT_COST = 800

TRAVEL_COMPANY_LINKS: tuple[str, ...] = (
    "https://www.intrepidtravel.com/us",
    "https://www.thenaturaladventure.com/",
)
