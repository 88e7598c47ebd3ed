"""Answer integrator — merges follow-up answers back into travel input.

Answers are keyed by question id and applied in a fixed order regardless of
how the caller ordered them:

    1. destination-details / experience-details   free text appended
    2. {region}-clarification[-N]                 broad region → concrete places
    3. experience-specification                   generic entries → activities
    4. travel-style                               sets travel_style
    5. budget-specification                       sets budget_range + defaults

A bad answer for one key is logged and skipped; it never blocks the others.
The original TravelInput is never modified.
"""

import logging
import re

from app.data.follow_up_options import (
    BUDGET_BRACKETS,
    BUDGET_CURRENCY,
    DEFAULT_GROUP_SIZE,
    DEFAULT_TRAVEL_DURATION,
    EXPERIENCE_CATEGORIES,
    REGION_CLARIFICATIONS,
    TRAVEL_STYLE_OPTIONS,
    matches_option,
)
from app.data.vocabulary import TRAVEL_STYLES
from app.errors import IntegrationError
from app.schemas.travel_input import BudgetRange, Preferences, TravelInput
from app.services.input_analyzer import is_vague_experience

logger = logging.getLogger(__name__)

_REGION_KEY_RE = re.compile(r"^([a-z]+)-clarification(?:-(\d+))?$")
_SPLIT_RE = re.compile(r"[,;]")

DESTINATION_DETAILS_KEY = "destination-details"
EXPERIENCE_DETAILS_KEY = "experience-details"
EXPERIENCE_KEY = "experience-specification"
STYLE_KEY = "travel-style"
BUDGET_KEY = "budget-specification"


def _as_list(answer) -> list[str]:
    """A single string or a list of strings; anything else is rejected."""
    if isinstance(answer, str):
        return [answer]
    if isinstance(answer, (list, tuple)) and all(isinstance(a, str) for a in answer):
        return list(answer)
    raise IntegrationError(
        "Unsupported answer shape",
        details={"answer_type": type(answer).__name__},
    )


def _new_entries(existing: list[str], additions: list[str]) -> list[str]:
    """Additions not already present (case-insensitive). Existing entries are never touched."""
    seen = {entry.lower() for entry in existing}
    result = []
    for entry in additions:
        key = entry.lower()
        if key not in seen:
            seen.add(key)
            result.append(entry)
    return result


def _region_key_index(key: str) -> int:
    index = _REGION_KEY_RE.match(key).group(2)
    return int(index) if index else -1


class _Draft:
    """Working copy of the fields the handlers touch."""

    def __init__(self, travel_input: TravelInput):
        self.destinations = list(travel_input.destinations or [])
        self.experiences = list(travel_input.experiences or [])
        self.preferences = (
            travel_input.preferences.model_copy(deep=True)
            if travel_input.preferences is not None else None
        )

    def prefs(self) -> Preferences:
        if self.preferences is None:
            self.preferences = Preferences()
        return self.preferences


class AnswerIntegrator:

    def integrate(self, original_input: TravelInput, answers: dict) -> TravelInput:
        """Return a new TravelInput with every recognizable answer applied."""
        try:
            draft = _Draft(original_input)
            handled: set[str] = set()

            # 1. Free-text details
            for key, field_name in (
                (DESTINATION_DETAILS_KEY, "destinations"),
                (EXPERIENCE_DETAILS_KEY, "experiences"),
            ):
                if key in answers:
                    handled.add(key)
                    self._run(key, self._apply_details, answers[key], draft, field_name)

            # 2. Region clarifications, merged per region in question index order
            region_keys: dict[str, list[str]] = {}
            for key in answers:
                match = _REGION_KEY_RE.match(key)
                if match and match.group(1) in REGION_CLARIFICATIONS:
                    region_keys.setdefault(match.group(1), []).append(key)
                    handled.add(key)
            for region, keys in region_keys.items():
                picks: list[str] = []
                for key in sorted(keys, key=_region_key_index):
                    picks += self._run(key, _as_list, answers[key]) or []
                self._run(f"{region}-clarification", self._apply_region, region, picks, draft)

            # 3-5. Single-key handlers
            for key, handler in (
                (EXPERIENCE_KEY, self._apply_experience_spec),
                (STYLE_KEY, self._apply_travel_style),
                (BUDGET_KEY, self._apply_budget),
            ):
                if key in answers:
                    handled.add(key)
                    self._run(key, handler, answers[key], draft)

            for key in answers:
                if key not in handled:
                    logger.warning(f"Ignoring answer for unknown question '{key}'")

            return original_input.model_copy(
                update={
                    "destinations": draft.destinations,
                    "experiences": draft.experiences,
                    "preferences": draft.preferences,
                },
                deep=True,
            )

        except Exception as e:
            details = {
                "answer_count": len(answers) if isinstance(answers, dict) else 0,
                "destination_count": len(getattr(original_input, "destinations", None) or []),
                "experience_count": len(getattr(original_input, "experiences", None) or []),
                "has_preferences": getattr(original_input, "preferences", None) is not None,
            }
            logger.error(f"Answer integration failed ({type(e).__name__}): {details}")
            raise IntegrationError("Failed to integrate follow-up answers", details=details) from e

    @staticmethod
    def _run(key: str, handler, *args):
        """Call one handler; an IntegrationError only skips this key."""
        try:
            return handler(*args)
        except IntegrationError as e:
            logger.warning(f"Ignoring answer for '{key}': {e} {e.details}")
            return None

    # ---------- Handlers ----------

    def _apply_details(self, answer, draft: _Draft, field_name: str) -> None:
        entries = [
            part.strip()
            for text in _as_list(answer)
            for part in _SPLIT_RE.split(text)
            if part.strip()
        ]
        if not entries:
            raise IntegrationError("Empty details answer")
        current = getattr(draft, field_name)
        setattr(draft, field_name, current + _new_entries(current, entries))

    def _apply_region(self, region: str, picks: list[str], draft: _Draft) -> None:
        mapped: list[str] = []
        for choice in picks:
            for label, _, destinations in REGION_CLARIFICATIONS[region]["subregions"]:
                if matches_option(choice, label):
                    mapped.extend(destinations)
                    break
        if not mapped:
            raise IntegrationError("No recognized region option", details={"region": region, "answer_count": len(picks)})

        matching = [d for d in draft.destinations if region in d.lower()]
        if not matching:
            raise IntegrationError("No destination mentions the clarified region", details={"region": region})

        unrelated = [d for d in draft.destinations if region not in d.lower()]
        places = _new_entries(unrelated, mapped)
        replaced: list[str] = []
        for destination in draft.destinations:
            if region not in destination.lower():
                replaced.append(destination)
            elif destination is matching[0]:
                replaced.extend(places)
        draft.destinations = replaced

    def _apply_experience_spec(self, answer, draft: _Draft) -> None:
        activities: list[str] = []
        for selected in _as_list(answer):
            for label, _, mapped in EXPERIENCE_CATEGORIES:
                if matches_option(selected, label):
                    activities.extend(mapped)
                    break
        if not activities:
            raise IntegrationError("No recognized experience category")

        kept = [e for e in draft.experiences if not is_vague_experience(e)]
        draft.experiences = kept + _new_entries(kept, activities)

    def _apply_travel_style(self, answer, draft: _Draft) -> None:
        selected = _as_list(answer)
        if not selected:
            raise IntegrationError("Empty travel style answer")
        choice = selected[0].strip()
        style = next((value for label, value in TRAVEL_STYLE_OPTIONS if matches_option(choice, label)), None)
        if style is None and choice.lower() in TRAVEL_STYLES:
            style = choice.lower()
        if style is None:
            raise IntegrationError("No recognized travel style")
        draft.prefs().travel_style = style

    def _apply_budget(self, answer, draft: _Draft) -> None:
        selected = _as_list(answer)
        if not selected:
            raise IntegrationError("Empty budget answer")
        bracket = next((b for b in BUDGET_BRACKETS if matches_option(selected[0], b[0])), None)
        if bracket is None:
            raise IntegrationError("No recognized budget bracket")

        _, _, low, high, default_style = bracket
        prefs = draft.prefs()
        prefs.budget_range = BudgetRange(min=low, max=high, currency=BUDGET_CURRENCY)
        if not prefs.travel_style:
            prefs.travel_style = default_style
        if not prefs.travel_duration:
            prefs.travel_duration = DEFAULT_TRAVEL_DURATION
        if prefs.group_size is None:
            prefs.group_size = DEFAULT_GROUP_SIZE


# Singleton — import this everywhere
answer_integrator = AnswerIntegrator()
