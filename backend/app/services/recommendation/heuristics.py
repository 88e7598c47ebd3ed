"""Heuristic recommendations — fixed templates triggered by keyword buckets.

The lower-cased concatenation of destinations, experiences, and interests is
scanned once per bucket; each bucket contributes at most one recommendation.
"""

from app.data.vocabulary import INTEREST_BUCKETS
from app.schemas.recommendation import Recommendation, RecommendationMetadata
from app.schemas.travel_input import TravelInput
from app.services.recommendation.config import HEURISTIC_TEMPLATES, HeuristicTemplate


def detect_buckets(travel_input: TravelInput) -> list[str]:
    prefs = travel_input.preferences
    text = " ".join(
        list(travel_input.destinations)
        + list(travel_input.experiences)
        + list(prefs.interests if prefs else [])
    ).lower()
    return [bucket for bucket, keywords in INTEREST_BUCKETS.items() if any(k in text for k in keywords)]


def _from_template(template: HeuristicTemplate) -> Recommendation:
    return Recommendation(
        type="experience",
        title=template.title,
        description=template.description,
        reasoning=template.reasoning,
        confidence=template.confidence,
        related_to=list(template.related_to),
        metadata=RecommendationMetadata(duration=template.duration, difficulty=template.difficulty),
    )


class HeuristicRecommender:

    def recommend(self, travel_input: TravelInput) -> list[Recommendation]:
        buckets = detect_buckets(travel_input)
        return [_from_template(HEURISTIC_TEMPLATES[b]) for b in buckets if b in HEURISTIC_TEMPLATES]


# Singleton
heuristic_recommender = HeuristicRecommender()
