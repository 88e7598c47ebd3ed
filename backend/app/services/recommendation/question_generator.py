"""Question generator — turns gaps in travel input into follow-up questions.

Emission order is fixed and does not depend on anything but the input:
    destination-details        no usable destination
    {region}-clarification-N   one per destination naming a broad region
    experience-details         no usable experience
    experience-specification   any short, generic experience entry
    travel-style               preferences flagged incomplete and style unset
    budget-specification       budget absent or zero-valued
"""

import logging

from app.data.follow_up_options import (
    BUDGET_BRACKETS,
    EXPERIENCE_CATEGORIES,
    REGION_CLARIFICATIONS,
    TRAVEL_STYLE_OPTIONS,
    option_text,
)
from app.schemas.travel_input import FollowUpQuestion, TravelInput
from app.services.input_analyzer import (
    budget_is_missing,
    input_analyzer,
    usable_entries,
    vague_experiences,
)

logger = logging.getLogger(__name__)


def region_for(destination: str) -> str | None:
    """First clarifiable region term contained in the destination, in table order."""
    text = destination.lower()
    return next((region for region in REGION_CLARIFICATIONS if region in text), None)


def region_question_id(region: str, index: int) -> str:
    return f"{region}-clarification-{index}"


class QuestionGenerator:

    def generate(self, travel_input: TravelInput) -> list[FollowUpQuestion]:
        questions: list[FollowUpQuestion] = []

        if not usable_entries(travel_input.destinations):
            questions.append(FollowUpQuestion(
                id="destination-details",
                question="Where would you like to go on this trip?",
                type="text",
                context="Name a few countries, cities, or landmarks you have in mind",
            ))

        for index, destination in enumerate(travel_input.destinations or []):
            if not destination:
                continue
            region = region_for(destination)
            if region:
                questions.append(self._region_question(region, index, destination))

        if not usable_entries(travel_input.experiences):
            questions.append(FollowUpQuestion(
                id="experience-details",
                question="What would you like to do while you are there?",
                type="text",
                context="List activities such as hiking, museums, or food tours",
            ))

        if vague_experiences(travel_input.experiences):
            questions.append(FollowUpQuestion(
                id="experience-specification",
                question="What types of experiences are you most interested in?",
                type="multiple-choice",
                options=[option_text(label, detail) for label, detail, _ in EXPERIENCE_CATEGORIES],
                context="Help us understand what kind of activities you enjoy",
            ))

        prefs = travel_input.preferences
        preferences_flagged = "preferences" in input_analyzer.detect_incomplete(travel_input).incomplete_areas
        if preferences_flagged and (prefs is None or not prefs.travel_style):
            questions.append(FollowUpQuestion(
                id="travel-style",
                question="How would you describe your preferred travel style?",
                type="multiple-choice",
                options=[label for label, _ in TRAVEL_STYLE_OPTIONS],
                context="Your travel style shapes accommodation and activity suggestions",
                required=False,
            ))

        if budget_is_missing(prefs.budget_range if prefs else None):
            questions.append(FollowUpQuestion(
                id="budget-specification",
                question="What is your approximate budget for this trip?",
                type="multiple-choice",
                options=[option_text(label, desc) for label, desc, *_ in BUDGET_BRACKETS],
                context="This helps us recommend experiences within your price range",
            ))

        logger.debug(f"Generated {len(questions)} follow-up questions")
        return questions

    @staticmethod
    def _region_question(region: str, index: int, destination: str) -> FollowUpQuestion:
        table = REGION_CLARIFICATIONS[region]
        return FollowUpQuestion(
            id=region_question_id(region, index),
            question=table["question"],
            type="multiple-choice",
            options=[option_text(label, examples) for label, examples, _ in table["subregions"]],
            context=f"Clarifying your interest in {destination.strip()}",
        )


# Singleton — import this everywhere
question_generator = QuestionGenerator()
