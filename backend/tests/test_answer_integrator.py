import logging

import pytest

from app.errors import IntegrationError
from app.schemas.travel_input import BudgetRange, Preferences, TravelInput
from app.services.input_analyzer import input_analyzer
from app.services.recommendation.answer_integrator import answer_integrator


def test_budget_bracket_answer():
    updated = answer_integrator.integrate(
        TravelInput(destinations=["Peru"], experiences=["hiking"]),
        {"budget-specification": "$1,500 - $3,500 (Mid-range comfort)"},
    )
    budget = updated.preferences.budget_range
    assert (budget.min, budget.max, budget.currency) == (1500, 3500, "USD")
    assert updated.preferences.travel_style == "mid-range"
    assert updated.preferences.travel_duration == "medium"
    assert updated.preferences.group_size == 2
    assert updated.preferences.interests == []


def test_budget_answer_preserves_set_values():
    original = TravelInput(
        destinations=["Peru"],
        experiences=["hiking"],
        preferences=Preferences(travel_style="luxury", group_size=4, interests=["food"]),
    )
    updated = answer_integrator.integrate(original, {"budget-specification": "Under $1,500"})
    assert updated.preferences.budget_range == BudgetRange(min=500, max=1500)
    assert updated.preferences.travel_style == "luxury"
    assert updated.preferences.group_size == 4
    assert updated.preferences.interests == ["food"]


def test_region_clarification_replaces_vague_destination():
    original = TravelInput(destinations=["Peru", "Europe"], experiences=["hiking"])
    updated = answer_integrator.integrate(
        original,
        {"europe-clarification-1": ["Southern Europe (Italy, Spain, Greece)", "Western Europe"]},
    )
    assert updated.destinations == [
        "Peru",
        "Rome, Italy", "Barcelona, Spain", "Athens, Greece",
        "Paris, France", "Amsterdam, Netherlands", "Berlin, Germany",
    ]
    assert original.destinations == ["Peru", "Europe"]


def test_region_answers_without_index_are_accepted():
    updated = answer_integrator.integrate(
        TravelInput(destinations=["asia"], experiences=["hiking"]),
        {"asia-clarification": "East Asia"},
    )
    assert updated.destinations == ["Tokyo, Japan", "Seoul, South Korea", "Beijing, China"]


def test_unrecognized_region_option_leaves_input_unchanged(caplog):
    original = TravelInput(destinations=["Europe"], experiences=["hiking"])
    with caplog.at_level(logging.WARNING):
        updated = answer_integrator.integrate(original, {"europe-clarification-0": "Atlantis"})
    assert updated == original
    assert "No recognized region option" in caplog.text


def test_experience_specification_replaces_vague_entries(vague_input):
    updated = answer_integrator.integrate(
        vague_input,
        {"experience-specification": ["Culinary experiences (cooking classes, food tours, markets)"]},
    )
    assert updated.experiences == ["Cooking classes with locals", "Street food tours", "Wine tasting"]


def test_experience_specification_keeps_specific_entries():
    original = TravelInput(destinations=["Peru"], experiences=["hiking", "something fun"])
    updated = answer_integrator.integrate(original, {"experience-specification": "Adventure sports"})
    assert updated.experiences == ["hiking", "Rock climbing", "Bungee jumping", "Paragliding"]


def test_details_answers_are_split_and_appended():
    updated = answer_integrator.integrate(
        TravelInput(),
        {"destination-details": "Peru, Japan; Iceland", "experience-details": "hiking, hot springs"},
    )
    assert updated.destinations == ["Peru", "Japan", "Iceland"]
    assert updated.experiences == ["hiking", "hot springs"]


def test_travel_style_answer():
    updated = answer_integrator.integrate(TravelInput(destinations=["Peru"]), {"travel-style": "Adventure-focused"})
    assert updated.preferences.travel_style == "adventure"


def test_handler_order_ignores_dict_order():
    answers = {
        "budget-specification": "$7,500 - $15,000 (Luxury travel)",
        "travel-style": "Budget-conscious",
    }
    updated = answer_integrator.integrate(TravelInput(destinations=["Peru"], experiences=["hiking"]), answers)
    # travel-style runs before budget, so the bracket default does not override it
    assert updated.preferences.travel_style == "budget"
    assert updated.preferences.budget_range.max == 15000


@pytest.mark.parametrize("answers", [
    {"unknown-question": "yes"},
    {"budget-specification": 42},
    {"travel-style": {"style": "luxury"}},
    {"budget-specification": "Free"},
])
def test_bad_answers_are_ignored(answers):
    original = TravelInput(destinations=["Peru"], experiences=["hiking"])
    assert answer_integrator.integrate(original, answers) == original


def test_integration_keeps_valid_input_valid(complete_input):
    updated = answer_integrator.integrate(
        complete_input,
        {"budget-specification": "Over $15,000 (Ultra-luxury)", "travel-style": "Luxury and premium"},
    )
    assert input_analyzer.validate(updated).is_valid is True


def test_followed_up_input_no_longer_needs_follow_up(vague_input):
    updated = answer_integrator.integrate(vague_input, {
        "europe-clarification-0": "Northern Europe",
        "experience-specification": "Historical exploration",
        "travel-style": "Comfortable mid-range",
        "budget-specification": "$3,500 - $7,500 (Premium experience)",
    })
    assert input_analyzer.detect_incomplete(updated).needs_follow_up is False


def test_unexpected_failure_is_wrapped():
    broken = TravelInput.model_construct(destinations=[1, 2], experiences=[], preferences=None, timeframe=None)
    with pytest.raises(IntegrationError) as exc_info:
        answer_integrator.integrate(broken, {"europe-clarification-0": "Western Europe"})
    assert exc_info.value.details["destination_count"] == 2


def test_region_answer_keeps_unrelated_duplicates():
    original = TravelInput(destinations=["Paris", "paris", "Europe"], experiences=["hiking"])
    updated = answer_integrator.integrate(original, {"europe-clarification-2": "Southern Europe"})
    assert updated.destinations == ["Paris", "paris", "Rome, Italy", "Barcelona, Spain", "Athens, Greece"]


def test_details_answers_keep_existing_entries():
    original = TravelInput(destinations=["Peru", "peru"], experiences=["hiking"])
    updated = answer_integrator.integrate(original, {"destination-details": "Japan, PERU"})
    assert updated.destinations == ["Peru", "peru", "Japan"]


def test_region_answer_without_matching_destination_is_ignored(caplog):
    original = TravelInput(destinations=["Peru"], experiences=["hiking"])
    with caplog.at_level(logging.WARNING):
        updated = answer_integrator.integrate(original, {"europe-clarification-0": "Western Europe"})
    assert updated == original
    assert "No destination mentions the clarified region" in caplog.text
