"""Experience matcher — surfaces individual bucket-list experiences that echo the user's own."""

import logging
import math

from app.schemas.recommendation import Recommendation, RecommendationMetadata
from app.schemas.travel_input import TravelInput
from app.services.catalog_service import CatalogService, catalog_service
from app.services.recommendation.config import recommendation_config
from app.services.recommendation.matching import either_contains

logger = logging.getLogger(__name__)

cfg = recommendation_config


class ExperienceMatcher:

    def __init__(self, catalog: CatalogService = catalog_service):
        self.catalog = catalog

    def match(self, travel_input: TravelInput) -> list[Recommendation]:
        """Catalog experiences echoing a user experience, first occurrence wins."""
        recommendations: list[Recommendation] = []
        seen: set[str] = set()

        for item in self.catalog.incomplete():
            for item_exp in item.experiences:
                if len(recommendations) >= cfg.limits.experience_max:
                    break
                key = item_exp.lower()
                if key in seen:
                    continue
                user_exp = next((e for e in travel_input.experiences if either_contains(e, item_exp)), None)
                if user_exp is None:
                    continue

                seen.add(key)
                recommendations.append(Recommendation(
                    type="experience",
                    title=item_exp,
                    description=f"{item_exp} in {item.destination}, a highlight from Ken and Gail's bucket list.",
                    reasoning=f"Matches your interest in {user_exp}.",
                    confidence=cfg.experiences.confidence,
                    related_to=[item.base_name, user_exp],
                    metadata=RecommendationMetadata(
                        season=item.best_season,
                        duration=math.ceil(item.estimated_duration / cfg.experiences.duration_divisor),
                        difficulty=item.difficulty,
                    ),
                ))

        logger.debug(f"Experience matches: {len(recommendations)}")
        return recommendations


experience_matcher = ExperienceMatcher()
