from datetime import date

import pytest

from app.schemas.travel_input import BudgetRange, Preferences, Timeframe, TravelInput
from app.services.input_analyzer import input_analyzer, is_vague_experience


# ---------- validate ----------


@pytest.mark.parametrize("field", ["destinations", "experiences"])
def test_empty_required_field_is_invalid(complete_input, field):
    travel_input = complete_input.model_copy(update={field: []})
    result = input_analyzer.validate(travel_input)
    assert result.is_valid is False
    assert any("required" in e for e in result.errors)


def test_short_entry_is_an_error():
    result = input_analyzer.validate(TravelInput(destinations=["Peru", " x "], experiences=["hiking"]))
    assert result.is_valid is False
    assert any("at least 2 characters" in e for e in result.errors)


def test_complete_input_is_valid(complete_input):
    result = input_analyzer.validate(complete_input)
    assert result.is_valid is True
    assert result.errors == []


@pytest.mark.parametrize("budget", [
    BudgetRange(min=-5, max=100),
    BudgetRange(min=3000, max=3000),
    BudgetRange(min=5000, max=1000),
])
def test_bad_budget_errors_mention_budget(budget):
    travel_input = TravelInput(
        destinations=["Peru"],
        experiences=["hiking"],
        preferences=Preferences(budget_range=budget),
    )
    result = input_analyzer.validate(travel_input)
    assert result.is_valid is False
    assert all("budget" in e.lower() for e in result.errors)


@pytest.mark.parametrize("prefs", [
    Preferences(travel_style="backpacker"),
    Preferences(travel_duration="forever"),
    Preferences(group_size=0),
    Preferences(group_size=51),
])
def test_invalid_preferences(prefs):
    result = input_analyzer.validate(TravelInput(destinations=["Peru"], experiences=["hiking"], preferences=prefs))
    assert result.is_valid is False


def test_timeframe_errors():
    travel_input = TravelInput(
        destinations=["Peru"],
        experiences=["hiking"],
        timeframe=Timeframe(start_date=date(2026, 5, 10), end_date=date(2026, 5, 1), flexibility="whenever"),
    )
    result = input_analyzer.validate(travel_input)
    assert "End date must be after start date" in result.errors
    assert "Invalid flexibility option" in result.errors


def test_vague_terms_are_warnings_not_errors(vague_input):
    result = input_analyzer.validate(vague_input)
    assert result.is_valid is True
    assert any("Vague destinations" in w for w in result.warnings)
    assert any("Vague experiences" in w for w in result.warnings)


def test_soft_warnings():
    travel_input = TravelInput(
        destinations=["Peru", "peru"],
        experiences=["hiking"],
        preferences=Preferences(budget_range=BudgetRange(min=50, max=60_000), group_size=12),
    )
    result = input_analyzer.validate(travel_input)
    assert result.is_valid is True
    warnings = " ".join(result.warnings)
    assert "duplicates" in warnings
    assert "Large groups" in warnings
    assert "Very low budget" in warnings
    assert "High budget" in warnings
    assert "No interests selected" in warnings


def test_descriptive_experience_is_not_vague():
    assert is_vague_experience("fun") is True
    assert is_vague_experience("a fun evening of live jazz music") is False


# ---------- detect_incomplete ----------


def test_empty_input_needs_follow_up():
    analysis = input_analyzer.detect_incomplete(TravelInput())
    assert analysis.needs_follow_up is True
    assert analysis.incomplete_areas == ["destinations", "experiences", "preferences", "budget"]
    assert len(analysis.suggestions) == len(analysis.incomplete_areas)


def test_vague_input_flags_areas(vague_input):
    analysis = input_analyzer.detect_incomplete(vague_input)
    assert "destinations" in analysis.incomplete_areas
    assert "experiences" in analysis.incomplete_areas
    assert analysis.suggestions[0].startswith("Specify which countries or cities in europe")


def test_complete_input_needs_nothing(complete_input):
    analysis = input_analyzer.detect_incomplete(complete_input)
    assert analysis.needs_follow_up is False
    assert analysis.incomplete_areas == []


def test_zero_budget_counts_as_missing(complete_input):
    prefs = complete_input.preferences.model_copy(update={"budget_range": BudgetRange()})
    analysis = input_analyzer.detect_incomplete(complete_input.model_copy(update={"preferences": prefs}))
    assert analysis.incomplete_areas == ["budget"]


# ---------- completeness_score ----------


def test_score_bounds(complete_input):
    assert input_analyzer.completeness_score(TravelInput()) == 0
    score = input_analyzer.completeness_score(complete_input)
    assert isinstance(score, int)
    assert 0 <= score <= 100


def test_score_is_monotonic():
    steps = [
        TravelInput(),
        TravelInput(destinations=["europe"]),
        TravelInput(destinations=["europe", "Peru"]),
        TravelInput(destinations=["europe", "Peru"], experiences=["fun"]),
        TravelInput(destinations=["europe", "Peru"], experiences=["fun", "hiking"],
                    preferences=Preferences(travel_style="luxury")),
        TravelInput(destinations=["europe", "Peru"], experiences=["fun", "hiking"],
                    preferences=Preferences(travel_style="luxury", interests=["food"],
                                            budget_range=BudgetRange(min=1000, max=2000))),
        TravelInput(destinations=["europe", "Peru"], experiences=["fun", "hiking"],
                    preferences=Preferences(travel_style="luxury", interests=["food"],
                                            budget_range=BudgetRange(min=1000, max=2000),
                                            group_size=2, travel_duration="short"),
                    timeframe=Timeframe(flexibility="fixed",
                                        start_date=date(2026, 6, 1), end_date=date(2026, 6, 10))),
    ]
    scores = [input_analyzer.completeness_score(s) for s in steps]
    assert scores == sorted(scores)
    assert scores[-1] == 100


# ---------- normalize ----------


def test_normalize_trims_and_drops_empty():
    travel_input = TravelInput(
        destinations=["  Peru ", "", "   ", "Iceland"],
        experiences=[" hiking"],
        preferences=Preferences(interests=[" food ", ""]),
    )
    normalized = input_analyzer.normalize(travel_input)
    assert normalized.destinations == ["Peru", "Iceland"]
    assert normalized.experiences == ["hiking"]
    assert normalized.preferences.interests == ["food"]
    # original untouched
    assert travel_input.destinations[0] == "  Peru "


def test_normalize_is_idempotent(complete_input, vague_input):
    for travel_input in (complete_input, vague_input, TravelInput(destinations=[" a b "])):
        once = input_analyzer.normalize(travel_input)
        assert input_analyzer.normalize(once) == once


def test_normalize_keeps_valid_input_valid(complete_input):
    assert input_analyzer.validate(input_analyzer.normalize(complete_input)).is_valid is True


def test_negative_budget_message():
    travel_input = TravelInput(
        destinations=["Peru"],
        experiences=["hiking"],
        preferences=Preferences(budget_range=BudgetRange(min=-5, max=100)),
    )
    errors = input_analyzer.validate(travel_input).errors
    assert "All budget amounts must be positive" in errors
    assert all("budget" in e for e in errors)
