"""Input analyzer — validation, vagueness detection, completeness scoring, normalization.

All methods are pure functions of the TravelInput they receive. Validation
problems are returned as data (ValidationResult / IncompleteAnalysis), never
raised.
"""

import logging
from dataclasses import dataclass

from app.data.vocabulary import (
    FLEXIBILITY_OPTIONS,
    HIGH_BUDGET_MAX,
    LARGE_GROUP_SIZE,
    LOW_BUDGET_MIN,
    MAX_GROUP_SIZE,
    MAX_TRIP_DAYS,
    MIN_ENTRY_LENGTH,
    TRAVEL_DURATIONS,
    TRAVEL_STYLES,
    VAGUE_DESTINATION_TERMS,
    VAGUE_EXPERIENCE_MAX_LENGTH,
    VAGUE_EXPERIENCE_TERMS,
)
from app.schemas.travel_input import (
    BudgetRange,
    IncompleteAnalysis,
    TravelInput,
    ValidationResult,
)

logger = logging.getLogger(__name__)

AREAS = ("destinations", "experiences", "preferences", "budget")

# Completeness weights (sum = 100)
W_DESTINATIONS = 15
W_SPECIFIC_DESTINATION = 5
W_EXPERIENCES = 15
W_SPECIFIC_EXPERIENCE = 5
W_TRAVEL_STYLE = 10
W_INTERESTS = 10
W_BUDGET = 10
W_GROUP_SIZE = 5
W_TRAVEL_DURATION = 5
W_FLEXIBILITY = 10
W_DATES = 10


# ---------- Term helpers (shared with question generator / answer integrator) ----------


def is_vague_destination(destination: str) -> bool:
    text = destination.lower()
    return any(term in text for term in VAGUE_DESTINATION_TERMS)


def is_vague_experience(experience: str) -> bool:
    """Generic activity word in a short entry. Longer, descriptive entries are not vague."""
    text = experience.lower().strip()
    return len(text) < VAGUE_EXPERIENCE_MAX_LENGTH and any(term in text for term in VAGUE_EXPERIENCE_TERMS)


def vague_destinations(destinations: list[str] | None) -> list[str]:
    return [d for d in destinations or [] if d and is_vague_destination(d)]


def vague_experiences(experiences: list[str] | None) -> list[str]:
    return [e for e in experiences or [] if e and is_vague_experience(e)]


def usable_entries(entries: list[str] | None) -> list[str]:
    return [e for e in entries or [] if e and len(e.strip()) >= MIN_ENTRY_LENGTH]


def budget_is_missing(budget: BudgetRange | None) -> bool:
    return budget is None or (budget.min == 0 and budget.max == 0)


def budget_problems(budget: BudgetRange) -> list[str]:
    problems = []
    if budget.min < 0 or budget.max < 0:
        problems.append("All budget amounts must be positive")
    if budget.min >= budget.max:
        problems.append("Maximum budget must be greater than minimum budget")
    return problems


def _clean(entries: list[str] | None) -> list[str]:
    return [e.strip() for e in entries or [] if e and e.strip()]


# ---------- Findings ----------


@dataclass(frozen=True)
class Finding:
    area: str
    kind: str  # error | vague | note
    message: str


class InputAnalyzer:
    """Stateless analysis of travel input."""

    def validate(self, travel_input: TravelInput) -> ValidationResult:
        findings = self._check(travel_input)
        errors = [f.message for f in findings if f.kind == "error"]
        warnings = [f.message for f in findings if f.kind != "error"]
        return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)

    def detect_incomplete(self, travel_input: TravelInput) -> IncompleteAnalysis:
        """Areas that need clarification, with one suggestion per area."""
        flagged = {f.area for f in self._check(travel_input) if f.kind in ("error", "vague")}

        prefs = travel_input.preferences
        if prefs is None:
            flagged.add("preferences")
        if budget_is_missing(prefs.budget_range if prefs else None):
            flagged.add("budget")

        areas = [area for area in AREAS if area in flagged]
        logger.debug(f"Incomplete areas: {areas}")
        suggestions = [self._suggestion(area, travel_input) for area in areas]
        return IncompleteAnalysis(
            needs_follow_up=bool(areas),
            incomplete_areas=areas,
            suggestions=suggestions,
        )

    def completeness_score(self, travel_input: TravelInput) -> int:
        """Weighted presence score, 0-100. Adding data never lowers it."""
        score = 0

        destinations = _clean(travel_input.destinations)
        if destinations:
            score += W_DESTINATIONS
            if any(not is_vague_destination(d) for d in destinations):
                score += W_SPECIFIC_DESTINATION

        experiences = _clean(travel_input.experiences)
        if experiences:
            score += W_EXPERIENCES
            if any(not is_vague_experience(e) for e in experiences):
                score += W_SPECIFIC_EXPERIENCE

        prefs = travel_input.preferences
        if prefs is not None:
            if prefs.travel_style:
                score += W_TRAVEL_STYLE
            if _clean(prefs.interests):
                score += W_INTERESTS
            if prefs.budget_range is not None and not budget_problems(prefs.budget_range):
                score += W_BUDGET
            if prefs.group_size is not None and prefs.group_size >= 1:
                score += W_GROUP_SIZE
            if prefs.travel_duration:
                score += W_TRAVEL_DURATION

        timeframe = travel_input.timeframe
        if timeframe is not None:
            if timeframe.flexibility:
                score += W_FLEXIBILITY
            if timeframe.start_date and timeframe.end_date:
                score += W_DATES

        return max(0, min(100, int(score)))

    def normalize(self, travel_input: TravelInput) -> TravelInput:
        """Trim entries and drop empty ones. Returns a new TravelInput."""
        update = {
            "destinations": _clean(travel_input.destinations),
            "experiences": _clean(travel_input.experiences),
        }
        if travel_input.preferences is not None:
            update["preferences"] = travel_input.preferences.model_copy(
                update={"interests": _clean(travel_input.preferences.interests)},
                deep=True,
            )
        return travel_input.model_copy(update=update, deep=True)

    # ------------------------------------------------------------------ #

    def _check(self, travel_input: TravelInput) -> list[Finding]:
        findings: list[Finding] = []
        findings += self._check_destinations(travel_input.destinations)
        findings += self._check_experiences(travel_input.experiences)
        findings += self._check_preferences(travel_input)
        findings += self._check_timeframe(travel_input)
        return findings

    def _check_destinations(self, destinations: list[str] | None) -> list[Finding]:
        if not destinations:
            return [Finding("destinations", "error", "At least one destination is required")]

        findings = []
        if len(usable_entries(destinations)) < len(destinations):
            findings.append(Finding("destinations", "error", "All destinations must be at least 2 characters long"))

        unique = {(d or "").strip().lower() for d in destinations}
        if len(unique) != len(destinations):
            findings.append(Finding("destinations", "note", "Some destinations appear to be duplicates"))

        vague = vague_destinations(destinations)
        if vague:
            findings.append(Finding(
                "destinations", "vague",
                f"Vague destinations detected: {', '.join(vague)}. "
                "Consider being more specific for better recommendations.",
            ))
        return findings

    def _check_experiences(self, experiences: list[str] | None) -> list[Finding]:
        if not experiences:
            return [Finding("experiences", "error", "At least one experience or activity is required")]

        findings = []
        if len(usable_entries(experiences)) < len(experiences):
            findings.append(Finding("experiences", "error", "All experiences must be at least 2 characters long"))

        vague = vague_experiences(experiences)
        if vague:
            findings.append(Finding(
                "experiences", "vague",
                f"Vague experiences detected: {', '.join(vague)}. Consider being more specific.",
            ))
        return findings

    def _check_preferences(self, travel_input: TravelInput) -> list[Finding]:
        prefs = travel_input.preferences
        if prefs is None:
            return []

        findings = []
        if prefs.travel_style and prefs.travel_style not in TRAVEL_STYLES:
            findings.append(Finding(
                "preferences", "error",
                f"Invalid travel style. Must be one of: {', '.join(TRAVEL_STYLES)}",
            ))
        if prefs.travel_duration and prefs.travel_duration not in TRAVEL_DURATIONS:
            findings.append(Finding(
                "preferences", "error",
                f"Invalid travel duration. Must be one of: {', '.join(TRAVEL_DURATIONS)}",
            ))

        if prefs.group_size is not None:
            if not 1 <= prefs.group_size <= MAX_GROUP_SIZE:
                findings.append(Finding("preferences", "error", f"Group size must be between 1 and {MAX_GROUP_SIZE}"))
            elif prefs.group_size > LARGE_GROUP_SIZE:
                findings.append(Finding(
                    "preferences", "note",
                    "Large groups may have limited accommodation and activity options",
                ))

        if prefs.budget_range is not None:
            budget = prefs.budget_range
            findings += [Finding("budget", "error", msg) for msg in budget_problems(budget)]
            if 0 <= budget.min < LOW_BUDGET_MIN:
                findings.append(Finding("budget", "note", "Very low budget may limit travel options"))
            if budget.max > HIGH_BUDGET_MAX:
                findings.append(Finding("budget", "note", "High budget detected - consider if this is accurate"))

        if not _clean(prefs.interests):
            findings.append(Finding(
                "preferences", "note",
                "No interests selected - this may limit recommendation quality",
            ))
        return findings

    def _check_timeframe(self, travel_input: TravelInput) -> list[Finding]:
        timeframe = travel_input.timeframe
        if timeframe is None:
            return []

        findings = []
        if timeframe.flexibility and timeframe.flexibility not in FLEXIBILITY_OPTIONS:
            findings.append(Finding("preferences", "error", "Invalid flexibility option"))

        if any(not 1 <= m <= 12 for m in timeframe.preferred_months):
            findings.append(Finding("preferences", "error", "Preferred months must be between 1 and 12"))

        if timeframe.start_date and timeframe.end_date:
            if timeframe.start_date >= timeframe.end_date:
                findings.append(Finding("preferences", "error", "End date must be after start date"))
            elif (timeframe.end_date - timeframe.start_date).days > MAX_TRIP_DAYS:
                findings.append(Finding(
                    "preferences", "note",
                    "Very long trip duration detected - consider breaking into multiple trips",
                ))
        elif timeframe.duration is not None and timeframe.duration > MAX_TRIP_DAYS:
            findings.append(Finding(
                "preferences", "note",
                "Very long trip duration detected - consider breaking into multiple trips",
            ))
        return findings

    def _suggestion(self, area: str, travel_input: TravelInput) -> str:
        if area == "destinations":
            vague = vague_destinations(travel_input.destinations)
            if vague and usable_entries(travel_input.destinations):
                return f"Specify which countries or cities in {', '.join(vague)}"
            return "Add at least one destination you would like to visit"
        if area == "experiences":
            if vague_experiences(travel_input.experiences) and usable_entries(travel_input.experiences):
                return 'Describe specific activities you want to do (e.g., "hiking", "museums", "local food tours")'
            return "Add at least one experience or activity you are looking for"
        if area == "preferences":
            return "Tell us your travel style, interests, trip length, and group size"
        return "Provide a budget range to get realistic recommendations"


# Singleton — import this everywhere
input_analyzer = InputAnalyzer()
