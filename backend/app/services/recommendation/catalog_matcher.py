"""Catalog matcher — scores bucket-list items against travel input.

Candidate selection (CatalogService.recommended) ranks the incomplete items by
how many request filters they satisfy, then Gail's favourites, then Ken's
priority. The top few are then scored:

    base 0.5
    + 0.3   destination match (either direction, parenthetical ignored)
    + 0.2   experience match
    + 0.15  interest / tag match
    + 0.1   Ken priority 1-2
    + 0.15  Gail HIGH interest
    clamped to 1.0
"""

import logging
import re

from app.data.vocabulary import INTEREST_DIFFICULTY
from app.schemas.recommendation import Recommendation, RecommendationMetadata
from app.schemas.travel_input import TravelInput
from app.services.catalog_service import CatalogItem, CatalogService, catalog_service
from app.services.recommendation.config import DURATION_BUCKETS, recommendation_config
from app.services.recommendation.matching import (
    destination_matches,
    experience_matches,
    interest_matches,
)

logger = logging.getLogger(__name__)

cfg = recommendation_config
weights = cfg.confidence
limits = cfg.limits

_WORD_RE = re.compile(r"[a-z]+")


def difficulty_for_interests(interests: list[str]) -> str | None:
    """First difficulty level with a keyword among the interest words. Whole words only."""
    words = {word for interest in interests for word in _WORD_RE.findall(interest.lower())}
    for difficulty, keywords in INTEREST_DIFFICULTY:
        if words.intersection(keywords):
            return difficulty
    return None


def duration_range(travel_duration: str | None) -> tuple[int, int] | None:
    return DURATION_BUCKETS.get(travel_duration) if travel_duration else None


class CatalogMatcher:

    def __init__(self, catalog: CatalogService = catalog_service):
        self.catalog = catalog

    def match(self, travel_input: TravelInput) -> list[Recommendation]:
        prefs = travel_input.preferences
        interests = prefs.interests if prefs else []
        difficulty = difficulty_for_interests(interests)
        days = duration_range(prefs.travel_duration if prefs else None)

        candidates = self.catalog.recommended(difficulty=difficulty, duration_range=days)
        logger.debug(
            f"Catalog candidates: {len(candidates)} (difficulty={difficulty}, duration={days})"
        )
        return [self._to_recommendation(item, travel_input) for item in candidates[:limits.catalog_max]]

    def _to_recommendation(self, item: CatalogItem, travel_input: TravelInput) -> Recommendation:
        prefs = travel_input.preferences
        dest_hit = destination_matches(item, travel_input.destinations)
        exp_hit = experience_matches(item, travel_input.experiences)
        interest_hit = interest_matches(item, prefs.interests if prefs else [])

        confidence = weights.base
        if dest_hit:
            confidence += weights.destination_match
        if exp_hit:
            confidence += weights.experience_match
        if interest_hit:
            confidence += weights.interest_match
        if item.ken_priority <= weights.ken_priority_cutoff:
            confidence += weights.ken_priority_boost
        if item.is_gail_favorite:
            confidence += weights.gail_high_boost
        confidence = round(min(weights.ceiling, confidence), 2)

        related = [item.base_name]
        related += list(item.experiences[:limits.related_experiences])
        related += list(item.tags[:limits.related_tags])

        return Recommendation(
            type="destination",
            title=item.destination,
            description=self._description(item),
            reasoning=self._reasoning(item, confidence, dest_hit, exp_hit),
            confidence=confidence,
            related_to=related,
            metadata=RecommendationMetadata(
                season=item.best_season,
                duration=item.estimated_duration,
                difficulty=item.difficulty,
            ),
        )

    @staticmethod
    def _description(item: CatalogItem) -> str:
        highlights = ", ".join(item.experiences[:limits.description_experiences])
        parts = [
            f"Experience {highlights}." if highlights else f"Explore {item.destination}.",
            f"Best time to visit: {item.best_season}.",
            f"Plan for about {item.estimated_duration} days at a {item.difficulty} pace.",
        ]
        if item.ken_priority <= weights.ken_priority_cutoff:
            parts.append("One of Ken's top priorities.")
        if item.is_gail_favorite:
            parts.append("Gail is especially keen on this one.")
        return " ".join(parts)

    @staticmethod
    def _reasoning(item: CatalogItem, confidence: float, dest_hit: bool, exp_hit: bool) -> str:
        if confidence > cfg.reasoning.excellent:
            clauses = ["This is an excellent match from Ken and Gail's bucket list"]
        elif confidence > cfg.reasoning.good:
            clauses = ["This destination from the bucket list aligns well with your interests"]
        else:
            clauses = ["This bucket list destination offers interesting possibilities"]

        if dest_hit:
            clauses.append("matches your stated destination interest")
        if exp_hit:
            clauses.append("offers experiences you're looking for")
        if item.is_gail_favorite:
            clauses.append("is highly recommended by Gail")
        return ", ".join(clauses) + "."


# Singleton
catalog_matcher = CatalogMatcher()
