import pytest

from app.schemas.travel_input import BudgetRange, Preferences, TravelInput
from app.services.input_analyzer import input_analyzer
from app.services.recommendation.question_generator import question_generator


def _ids(travel_input: TravelInput) -> list[str]:
    return [q.id for q in question_generator.generate(travel_input)]


@pytest.mark.parametrize("travel_input", [
    TravelInput(),
    TravelInput(destinations=["Peru"]),
    TravelInput(experiences=["hiking"]),
])
def test_missing_required_fields_produce_questions(travel_input):
    assert len(question_generator.generate(travel_input)) >= 1


def test_empty_input_asks_for_details():
    ids = _ids(TravelInput())
    assert ids[0] == "destination-details"
    assert "experience-details" in ids


def test_vague_region_and_experience(vague_input):
    ids = _ids(vague_input)
    assert "europe-clarification-0" in ids
    assert "experience-specification" in ids


def test_order_is_fixed():
    travel_input = TravelInput(destinations=["Peru", "Southeast Asia", "Africa"], experiences=["fun"])
    assert _ids(travel_input) == [
        "asia-clarification-1",
        "africa-clarification-2",
        "experience-specification",
        "travel-style",
        "budget-specification",
    ]


def test_region_question_shape():
    question = question_generator.generate(TravelInput(destinations=["Europe"], experiences=["hiking"]))[0]
    assert question.type == "multiple-choice"
    assert question.context == "Clarifying your interest in Europe"
    assert len(question.options) == 5
    assert question.options[0] == "Western Europe (France, Germany, Netherlands)"


def test_every_question_is_well_formed(vague_input):
    for travel_input in (TravelInput(), vague_input, TravelInput(destinations=["america", "asia"], experiences=["x"])):
        for q in question_generator.generate(travel_input):
            assert q.id
            assert len(q.question) > 10 and q.question.endswith("?")
            assert q.context
            if q.type != "text":
                assert q.options


def test_complete_input_has_no_questions(complete_input):
    assert question_generator.generate(complete_input) == []


def test_budget_question_only_when_missing(complete_input):
    assert "budget-specification" not in _ids(complete_input)
    prefs = Preferences(travel_style="luxury", budget_range=BudgetRange(min=0, max=0))
    ids = _ids(complete_input.model_copy(update={"preferences": prefs}))
    assert ids == ["budget-specification"]
    budget = question_generator.generate(complete_input.model_copy(update={"preferences": prefs}))[0]
    assert "$1,500 - $3,500 (Mid-range comfort)" in budget.options
    assert len(budget.options) == 5


def test_experience_categories():
    question = next(
        q for q in question_generator.generate(TravelInput(destinations=["Peru"], experiences=["adventure"]))
        if q.id == "experience-specification"
    )
    assert len(question.options) == 8


def test_generation_is_deterministic(vague_input):
    assert question_generator.generate(vague_input) == question_generator.generate(vague_input)


def test_budget_without_style_agrees_with_analyzer():
    travel_input = TravelInput(
        destinations=["Paris"],
        experiences=["museum tours"],
        preferences=Preferences(budget_range=BudgetRange(min=1000, max=3000), interests=["art"]),
    )
    assert input_analyzer.detect_incomplete(travel_input).needs_follow_up is False
    assert question_generator.generate(travel_input) == []


def test_travel_style_asked_while_preferences_incomplete():
    ids = _ids(TravelInput(destinations=["Paris"], experiences=["museum tours"]))
    assert ids == ["travel-style", "budget-specification"]
