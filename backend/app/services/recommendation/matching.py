"""Text matching helpers shared by the catalog and experience matchers.

All comparisons are case-insensitive substring checks in either direction, so
"Peru" matches "Machu Picchu, Peru" and "hiking the Inca Trail" matches
"Inca Trail".
"""

from app.services.catalog_service import CatalogItem


def either_contains(a: str, b: str) -> bool:
    a, b = a.strip().lower(), b.strip().lower()
    if not a or not b:
        return False
    return a in b or b in a


def destination_matches(item: CatalogItem, destinations: list[str]) -> bool:
    """Full name contains the user's destination, or the user's destination contains the base name."""
    name = item.destination.lower()
    base = item.base_name.lower()
    for dest in destinations:
        text = dest.strip().lower()
        if text and (text in name or (base and base in text)):
            return True
    return False


def experience_matches(item: CatalogItem, experiences: list[str]) -> bool:
    return any(either_contains(exp, item_exp) for exp in experiences for item_exp in item.experiences)


def interest_matches(item: CatalogItem, interests: list[str]) -> bool:
    return any(either_contains(interest, tag) for interest in interests for tag in item.tags)
