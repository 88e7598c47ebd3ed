"""Static term tables for input analysis and recommendation heuristics.

Used for:
- Vague destination / experience detection (input analyzer, answer integrator)
- Interest → difficulty classification (catalog matching)
- Keyword buckets for heuristic recommendations
"""

# Broad regions or placeholders that do not name a concrete place
VAGUE_DESTINATION_TERMS: tuple[str, ...] = (
    "europe",
    "asia",
    "africa",
    "america",
    "world",
    "everywhere",
    "anywhere",
)

# Generic activity words; only vague when the entry is short
VAGUE_EXPERIENCE_TERMS: tuple[str, ...] = (
    "adventure",
    "fun",
    "experience",
    "activity",
    "something",
    "anything",
)
VAGUE_EXPERIENCE_MAX_LENGTH = 20  # entries at or above this length count as descriptive

MIN_ENTRY_LENGTH = 2

TRAVEL_STYLES: tuple[str, ...] = ("budget", "mid-range", "luxury", "adventure")
TRAVEL_DURATIONS: tuple[str, ...] = ("short", "medium", "long")
FLEXIBILITY_OPTIONS: tuple[str, ...] = ("fixed", "flexible", "very-flexible", "seasonal")

MAX_GROUP_SIZE = 50
LARGE_GROUP_SIZE = 10
LOW_BUDGET_MIN = 100
HIGH_BUDGET_MAX = 50_000
MAX_TRIP_DAYS = 365

# Interest → catalog difficulty. Checked in order; first hit wins.
INTEREST_DIFFICULTY: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("challenging", ("adventure", "extreme", "challenging", "hiking", "climbing")),
    ("moderate", ("moderate", "active", "walking", "cultural", "culture")),
    ("easy", ("relaxation", "easy", "comfort", "luxury")),
)

# Keyword buckets scanned over all free text (substring, lower-cased)
INTEREST_BUCKETS: dict[str, tuple[str, ...]] = {
    "adventure": ("adventure", "hiking", "climbing", "extreme", "sport"),
    "cultural": ("culture", "local", "traditional", "history", "museum", "heritage"),
    "nature": ("nature", "wildlife", "scenic", "landscape", "park", "outdoor"),
    "relaxation": ("relax", "spa", "beach", "luxury", "comfort", "peaceful"),
}
