import pytest

from app.schemas.travel_input import BudgetRange, Preferences, Timeframe, TravelInput


@pytest.fixture
def complete_input() -> TravelInput:
    return TravelInput(
        destinations=["Peru", "Iceland"],
        experiences=["hiking", "photography"],
        preferences=Preferences(
            budget_range=BudgetRange(min=2000, max=6000),
            travel_style="adventure",
            interests=["hiking", "nature"],
            travel_duration="medium",
            group_size=2,
        ),
        timeframe=Timeframe(flexibility="flexible"),
    )


@pytest.fixture
def vague_input() -> TravelInput:
    return TravelInput(destinations=["europe"], experiences=["fun"])


@pytest.fixture
def peru_hiking() -> TravelInput:
    return TravelInput(destinations=["Peru"], experiences=["hiking"])
