"""Recommendation engine — orchestrates the scoring pipeline.

    normalize → CatalogMatcher → ExperienceMatcher → HeuristicRecommender
    → stable sort by confidence (desc) → cap

Everything is computed fresh per call from the immutable catalog, so identical
arguments always yield identical lists. Any failure inside the pipeline is
surfaced as a single ScoringError; a partial list is never returned.
"""

import logging

from app.errors import ScoringError
from app.schemas.recommendation import IntegrationResult, Recommendation
from app.schemas.travel_input import TravelInput, UserProfile
from app.services.input_analyzer import input_analyzer
from app.services.recommendation.answer_integrator import answer_integrator
from app.services.recommendation.catalog_matcher import catalog_matcher
from app.services.recommendation.config import recommendation_config
from app.services.recommendation.experience_matcher import experience_matcher
from app.services.recommendation.heuristics import heuristic_recommender

logger = logging.getLogger(__name__)


def _count(value) -> int:
    return len(value) if isinstance(value, (list, tuple)) else 0


def scoring_diagnostics(user_profile: UserProfile | None, travel_input: TravelInput) -> dict:
    """Counts and presence flags only; never raw user text."""
    return {
        "destination_count": _count(getattr(travel_input, "destinations", None)),
        "experience_count": _count(getattr(travel_input, "experiences", None)),
        "has_home_location": getattr(user_profile, "home_location", None) is not None,
        "has_preferences": getattr(travel_input, "preferences", None) is not None,
    }


class RecommendationEngine:

    def score(self, user_profile: UserProfile | None, travel_input: TravelInput) -> list[Recommendation]:
        """Ranked recommendations for one request, highest confidence first."""
        try:
            normalized = input_analyzer.normalize(travel_input)

            catalog_recs = catalog_matcher.match(normalized)
            experience_recs = experience_matcher.match(normalized)
            heuristic_recs = heuristic_recommender.recommend(normalized)
            logger.debug(
                f"Scored {len(catalog_recs)} catalog, {len(experience_recs)} experience, "
                f"{len(heuristic_recs)} heuristic recommendations"
            )

            ranked = sorted(
                catalog_recs + experience_recs + heuristic_recs,
                key=lambda r: r.confidence,
                reverse=True,
            )
            return ranked[:recommendation_config.limits.total_max]

        except Exception as e:
            details = scoring_diagnostics(user_profile, travel_input)
            logger.error(f"Recommendation scoring failed ({type(e).__name__}): {details}")
            raise ScoringError("Failed to generate recommendations", details=details) from e

    def integrate_and_score(
        self,
        original_input: TravelInput,
        answers: dict,
        user_profile: UserProfile | None = None,
    ) -> IntegrationResult:
        updated = answer_integrator.integrate(original_input, answers)
        recommendations = self.score(user_profile, updated)
        return IntegrationResult(updated_input=updated, recommendations=recommendations)


# Singleton — import this everywhere
recommendation_engine = RecommendationEngine()
