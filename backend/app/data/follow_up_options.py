"""Fixed option tables for follow-up questions and their answer mappings.

Each option label doubles as the lookup key when an answer comes back: an
answer matches an option when it starts with the option's label, so both the
bare label ("Western Europe") and the displayed option string
("Western Europe (France, Germany, Netherlands)") resolve.
"""

# region term → question text + (label, examples, concrete destinations)
REGION_CLARIFICATIONS: dict[str, dict] = {
    "europe": {
        "question": "Which regions of Europe interest you most?",
        "subregions": (
            ("Western Europe", "France, Germany, Netherlands",
             ("Paris, France", "Amsterdam, Netherlands", "Berlin, Germany")),
            ("Southern Europe", "Italy, Spain, Greece",
             ("Rome, Italy", "Barcelona, Spain", "Athens, Greece")),
            ("Northern Europe", "Scandinavia, UK",
             ("Stockholm, Sweden", "London, UK", "Copenhagen, Denmark")),
            ("Eastern Europe", "Czech Republic, Poland, Hungary",
             ("Prague, Czech Republic", "Krakow, Poland", "Budapest, Hungary")),
            ("Mediterranean Islands", "Sicily, Sardinia, Greek Islands",
             ("Sicily, Italy", "Santorini, Greece", "Mallorca, Spain")),
        ),
    },
    "asia": {
        "question": "Which parts of Asia would you like to explore?",
        "subregions": (
            ("Southeast Asia", "Thailand, Vietnam, Indonesia",
             ("Bangkok, Thailand", "Ho Chi Minh City, Vietnam", "Bali, Indonesia")),
            ("East Asia", "Japan, South Korea, China",
             ("Tokyo, Japan", "Seoul, South Korea", "Beijing, China")),
            ("South Asia", "India, Nepal, Sri Lanka",
             ("Mumbai, India", "Kathmandu, Nepal", "Colombo, Sri Lanka")),
            ("Central Asia", "Kazakhstan, Uzbekistan",
             ("Almaty, Kazakhstan", "Tashkent, Uzbekistan")),
            ("Middle East", "UAE, Jordan, Israel",
             ("Dubai, UAE", "Amman, Jordan", "Tel Aviv, Israel")),
        ),
    },
    "africa": {
        "question": "Which parts of Africa are you most drawn to?",
        "subregions": (
            ("North Africa", "Morocco, Egypt, Tunisia",
             ("Marrakesh, Morocco", "Cairo, Egypt", "Tunis, Tunisia")),
            ("East Africa", "Kenya, Tanzania, Rwanda",
             ("Nairobi, Kenya", "Zanzibar, Tanzania", "Kigali, Rwanda")),
            ("Southern Africa", "South Africa, Namibia, Botswana",
             ("Cape Town, South Africa", "Windhoek, Namibia", "Maun, Botswana")),
            ("West Africa", "Ghana, Senegal, Nigeria",
             ("Accra, Ghana", "Dakar, Senegal", "Lagos, Nigeria")),
            ("Indian Ocean Islands", "Madagascar, Mauritius, Seychelles",
             ("Antananarivo, Madagascar", "Port Louis, Mauritius", "Mahe, Seychelles")),
        ),
    },
    "america": {
        "question": "Which parts of the Americas would you like to visit?",
        "subregions": (
            ("North America", "USA, Canada",
             ("New York City, USA", "San Francisco, USA", "Vancouver, Canada")),
            ("Mexico", "Mexico City, Oaxaca, Yucatan",
             ("Mexico City, Mexico", "Oaxaca, Mexico", "Tulum, Mexico")),
            ("Central America", "Costa Rica, Guatemala, Belize",
             ("San Jose, Costa Rica", "Antigua, Guatemala", "Belize City, Belize")),
            ("Caribbean", "Puerto Rico, Jamaica, Bahamas",
             ("San Juan, Puerto Rico", "Montego Bay, Jamaica", "Nassau, Bahamas")),
            ("South America", "Peru, Argentina, Brazil",
             ("Cusco, Peru", "Buenos Aires, Argentina", "Rio de Janeiro, Brazil")),
        ),
    },
}

# (label, examples, concrete activities)
EXPERIENCE_CATEGORIES: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("Outdoor adventures", "hiking, water sports, wildlife",
     ("Hiking mountain trails", "Scuba diving", "Wildlife safari")),
    ("Cultural immersion", "local traditions, festivals, communities",
     ("Local festival participation", "Traditional craft workshops", "Community homestays")),
    ("Culinary experiences", "cooking classes, food tours, markets",
     ("Cooking classes with locals", "Street food tours", "Wine tasting")),
    ("Historical exploration", "museums, ancient sites, architecture",
     ("Ancient ruins exploration", "Museum visits", "Architecture tours")),
    ("Relaxation and wellness", "spas, beaches, meditation",
     ("Spa treatments", "Beach relaxation", "Meditation retreats")),
    ("Photography and nature", "landscapes, wildlife, scenic routes",
     ("Landscape photography", "Wildlife photography", "Street photography")),
    ("Urban exploration", "nightlife, shopping, modern culture",
     ("Nightlife experiences", "Local markets", "Modern art galleries")),
    ("Adventure sports", "climbing, diving, extreme activities",
     ("Rock climbing", "Bungee jumping", "Paragliding")),
)

# (label, description, min USD, max USD, travel style used when none is set)
BUDGET_BRACKETS: tuple[tuple[str, str, int, int, str], ...] = (
    ("Under $1,500", "Budget travel", 500, 1500, "budget"),
    ("$1,500 - $3,500", "Mid-range comfort", 1500, 3500, "mid-range"),
    ("$3,500 - $7,500", "Premium experience", 3500, 7500, "mid-range"),
    ("$7,500 - $15,000", "Luxury travel", 7500, 15000, "luxury"),
    ("Over $15,000", "Ultra-luxury", 15000, 50000, "luxury"),
)
BUDGET_CURRENCY = "USD"

# (label, travel_style value)
TRAVEL_STYLE_OPTIONS: tuple[tuple[str, str], ...] = (
    ("Budget-conscious", "budget"),
    ("Comfortable mid-range", "mid-range"),
    ("Luxury and premium", "luxury"),
    ("Adventure-focused", "adventure"),
)

# Defaults applied when a budget answer arrives and the field is still unset
DEFAULT_TRAVEL_DURATION = "medium"
DEFAULT_GROUP_SIZE = 2


def option_text(label: str, detail: str) -> str:
    return f"{label} ({detail})"


def matches_option(answer: str, label: str) -> bool:
    return answer.strip().lower().startswith(label.lower())
