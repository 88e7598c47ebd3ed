"""Recommendation engine configuration — single source for all weights and limits."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ConfidenceWeights:
    """Additive confidence contributions for a catalog item (clamped to ceiling)."""
    base: float = 0.5
    destination_match: float = 0.3
    experience_match: float = 0.2
    interest_match: float = 0.15
    ken_priority_boost: float = 0.1   # ken_priority <= ken_priority_cutoff
    gail_high_boost: float = 0.15
    ken_priority_cutoff: int = 2
    ceiling: float = 1.0


@dataclass(frozen=True)
class ReasoningTiers:
    """Confidence thresholds for the opening phrase of a catalog reasoning."""
    excellent: float = 0.8
    good: float = 0.6


@dataclass(frozen=True)
class ResultLimits:
    """Maximum items per source and overall."""
    catalog_max: int = 5
    experience_max: int = 3
    total_max: int = 8
    description_experiences: int = 3   # experiences listed in a catalog description
    related_experiences: int = 2
    related_tags: int = 2


@dataclass(frozen=True)
class ExperienceParams:
    """Cross-pollinated catalog experiences."""
    confidence: float = 0.8
    duration_divisor: int = 3   # metadata duration = ceil(item duration / divisor)


@dataclass(frozen=True)
class HeuristicTemplate:
    """Fixed experience recommendation emitted when a keyword bucket fires."""
    title: str
    description: str
    reasoning: str
    confidence: float
    related_to: tuple[str, ...]
    duration: int
    difficulty: str


# Keyword bucket (app.data.vocabulary.INTEREST_BUCKETS) → template. Dict order is emission order.
HEURISTIC_TEMPLATES: dict[str, HeuristicTemplate] = {
    "adventure": HeuristicTemplate(
        title="Adventure Photography Workshop",
        description="Capture dramatic landscapes and action shots with a local guide who knows the best vantage points.",
        reasoning="Based on your interest in adventure activities.",
        confidence=0.7,
        related_to=("adventure", "photography"),
        duration=2,
        difficulty="moderate",
    ),
    "cultural": HeuristicTemplate(
        title="Local Cooking Class Experience",
        description="Learn traditional recipes from a local chef and share the meal you cook together.",
        reasoning="Matches your interest in cultural experiences.",
        confidence=0.75,
        related_to=("culture", "food", "local"),
        duration=1,
        difficulty="easy",
    ),
    "nature": HeuristicTemplate(
        title="Guided Nature Walk",
        description="Explore protected landscapes with a naturalist guide and spot local wildlife along the way.",
        reasoning="Fits your interest in nature and the outdoors.",
        confidence=0.65,
        related_to=("nature", "wildlife"),
        duration=1,
        difficulty="easy",
    ),
    "relaxation": HeuristicTemplate(
        title="Wellness Retreat Day",
        description="Unwind with spa treatments, a slow morning of yoga, and time set aside to do nothing at all.",
        reasoning="Suits your preference for a relaxed pace.",
        confidence=0.6,
        related_to=("relaxation", "wellness"),
        duration=1,
        difficulty="easy",
    ),
}

# travel_duration → inclusive day range for catalog matching
DURATION_BUCKETS: dict[str, tuple[int, int]] = {
    "short": (1, 7),
    "medium": (7, 14),
    "long": (14, 30),
}


@dataclass(frozen=True)
class RecommendationConfig:
    """Top-level config aggregating all sub-configs."""
    confidence: ConfidenceWeights = field(default_factory=ConfidenceWeights)
    reasoning: ReasoningTiers = field(default_factory=ReasoningTiers)
    limits: ResultLimits = field(default_factory=ResultLimits)
    experiences: ExperienceParams = field(default_factory=ExperienceParams)


# Singleton — import this everywhere
recommendation_config = RecommendationConfig()
