"""Catalog service — read-only access to the curated bucket list.

The raw rows in app.data.bucket_list are converted once, at import time, into
frozen CatalogItem objects. Status strings are resolved into CatalogStatus
here so nothing downstream has to substring-check "done".
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from app.data.bucket_list import (
    BUCKET_LIST_ROWS,
    DAILY_COST_TIERS,
    DEFAULT_DAILY_COST,
    DEFAULT_TRANSPORT_COST,
    TRANSPORT_COST_TIERS,
)

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
_MONTH_RE = re.compile(r"\b(" + "|".join(MONTH_NAMES) + r")\b")
_YEAR_RE = re.compile(r"\b(\d{4})\b")
_ALL_MONTHS = frozenset(range(1, 13))

STATUS_FILTERS = ("incomplete", "completed", "all")


class CatalogStatus(str, Enum):
    PLANNED = "planned"
    DONE = "done"


def parse_status(raw: str) -> tuple[CatalogStatus, int | None]:
    """Resolve a raw status cell into (status, completed year)."""
    text = (raw or "").strip()
    if "done" not in text.lower():
        return CatalogStatus.PLANNED, None
    match = _YEAR_RE.search(text)
    return CatalogStatus.DONE, int(match.group(1)) if match else None


def season_months(best_season: str) -> frozenset[int]:
    """
    Months (1-12) covered by a best-season description.

    "April-May, September-October" → {4, 5, 9, 10}
    "October-April (summer)" wraps the year end.
    Alternatives separated by "or" are unioned. Text with no month names
    ("Varies by park") is treated as year-round.
    """
    months: set[int] = set()
    for segment in re.split(r",|\bor\b", best_season.lower()):
        found = [MONTH_NAMES.index(name) + 1 for name in _MONTH_RE.findall(segment)]
        if len(found) >= 2:
            start, end = found[0], found[1]
            month = start
            while True:
                months.add(month)
                if month == end:
                    break
                month = month % 12 + 1
        elif found:
            months.add(found[0])
    return frozenset(months) if months else _ALL_MONTHS


@dataclass(frozen=True)
class CatalogItem:
    destination: str
    ken_priority: int
    gail_interest_level: str  # "" | "HIGH" | "LOW"
    status: CatalogStatus
    completed_year: int | None
    experiences: tuple[str, ...]
    estimated_duration: int  # days
    difficulty: str  # easy | moderate | challenging
    best_season: str
    tags: tuple[str, ...]

    @property
    def id(self) -> str:
        return "bucket-" + re.sub(r"[^a-zA-Z0-9]", "-", self.destination).lower()

    @property
    def base_name(self) -> str:
        """Destination with any trailing parenthetical removed."""
        return self.destination.split("(")[0].strip()

    @property
    def is_done(self) -> bool:
        return self.status is CatalogStatus.DONE

    @property
    def is_gail_favorite(self) -> bool:
        return self.gail_interest_level == "HIGH"

    def estimate_cost(self) -> dict:
        """Rough trip cost range in USD. Heuristic only."""
        name = self.destination.lower()
        daily = next(
            (cost for cost, terms in DAILY_COST_TIERS if any(t in name for t in terms)),
            DEFAULT_DAILY_COST,
        )
        transport = next(
            (cost for cost, terms in TRANSPORT_COST_TIERS if any(t in name for t in terms)),
            DEFAULT_TRANSPORT_COST,
        )
        base = daily * self.estimated_duration + transport
        return {"min": round(base * 0.8), "max": round(base * 1.4), "currency": "USD"}

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "destination": self.destination,
            "kenPriority": self.ken_priority,
            "gailInterestLevel": self.gail_interest_level,
            "status": self.status.value,
            "completedYear": self.completed_year,
            "experiences": list(self.experiences),
            "estimatedDuration": self.estimated_duration,
            "difficulty": self.difficulty,
            "bestSeason": self.best_season,
            "tags": list(self.tags),
            "costEstimate": self.estimate_cost(),
        }


def load_item(row: dict) -> CatalogItem:
    status, year = parse_status(row.get("status", ""))
    return CatalogItem(
        destination=row["destination"],
        ken_priority=row["ken_priority"],
        gail_interest_level=row.get("gail_interest_level", ""),
        status=status,
        completed_year=year,
        experiences=tuple(row["experiences"]),
        estimated_duration=row["estimated_duration"],
        difficulty=row["difficulty"],
        best_season=row["best_season"],
        tags=tuple(tag.lower() for tag in row["tags"]),
    )


class CatalogService:
    """Pure filter/sort queries over the static bucket list."""

    def __init__(self, rows: tuple[dict, ...] = BUCKET_LIST_ROWS):
        self._items: tuple[CatalogItem, ...] = tuple(load_item(row) for row in rows)
        logger.debug(f"Catalog loaded: {len(self._items)} items")

    def all_items(self) -> list[CatalogItem]:
        return list(self._items)

    def incomplete(self) -> list[CatalogItem]:
        return [item for item in self._items if not item.is_done]

    def completed(self) -> list[CatalogItem]:
        return [item for item in self._items if item.is_done]

    def high_priority(self) -> list[CatalogItem]:
        """Ken's priority 1-2 or Gail's HIGH interest."""
        return [item for item in self._items if item.ken_priority <= 2 or item.is_gail_favorite]

    def get(self, item_id: str) -> CatalogItem | None:
        return next((item for item in self._items if item.id == item_id), None)

    def search(self, text: str) -> list[CatalogItem]:
        """Case-insensitive match on destination, experiences, or tags."""
        needle = text.strip().lower()
        if not needle:
            return []
        return [
            item for item in self._items
            if needle in item.destination.lower()
            or any(needle in exp.lower() for exp in item.experiences)
            or any(needle in tag for tag in item.tags)
        ]

    def for_month(self, month: int) -> list[CatalogItem]:
        return [item for item in self._items if month in season_months(item.best_season)]

    def query(
        self,
        status: str = "incomplete",
        tags: list[str] | None = None,
        difficulty: str | None = None,
        min_duration: int | None = None,
        max_duration: int | None = None,
        gail_interest: str | None = None,
        priority: int | None = None,
        month: int | None = None,
    ) -> list[CatalogItem]:
        """
        Filter the catalog. All given filters must hold; catalog order is kept.

        Raises ValueError for an unknown status filter or month.
        """
        if status == "all":
            items = self.all_items()
        elif status == "completed":
            items = self.completed()
        elif status == "incomplete":
            items = self.incomplete()
        else:
            raise ValueError(f"Unknown status filter '{status}', expected one of {', '.join(STATUS_FILTERS)}")

        if month is not None and not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {month}")

        wanted_tags = [t.strip().lower() for t in tags or [] if t.strip()]
        if wanted_tags:
            items = [i for i in items if any(t in i.tags for t in wanted_tags)]
        if difficulty:
            items = [i for i in items if i.difficulty == difficulty]
        if min_duration is not None:
            items = [i for i in items if i.estimated_duration >= min_duration]
        if max_duration is not None:
            items = [i for i in items if i.estimated_duration <= max_duration]
        if gail_interest:
            items = [i for i in items if i.gail_interest_level == gail_interest.upper()]
        if priority is not None:
            items = [i for i in items if i.ken_priority == priority]
        if month is not None:
            items = [i for i in items if month in season_months(i.best_season)]
        return items

    def recommended(
        self,
        difficulty: str | None = None,
        duration_range: tuple[int, int] | None = None,
        prioritize_gail: bool = True,
    ) -> list[CatalogItem]:
        """
        Rank incomplete items for a request.

        Items satisfying more of the requested difficulty/duration filters come
        first, then Gail's HIGH interest items, then lower Ken priority. The
        sort is stable, so remaining ties keep catalog order.
        """

        def rank(item: CatalogItem) -> tuple[int, int, int]:
            misses = 0
            if difficulty and item.difficulty != difficulty:
                misses += 1
            if duration_range and not duration_range[0] <= item.estimated_duration <= duration_range[1]:
                misses += 1
            gail_rank = 0 if prioritize_gail and item.is_gail_favorite else 1
            return misses, gail_rank, item.ken_priority

        return sorted(self.incomplete(), key=rank)


# Singleton — import this everywhere
catalog_service = CatalogService()
