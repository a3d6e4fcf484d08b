# 📦 engine/sorting.py
# ─────────────────────────────
# Sort orders for Hush creator listings

from engine.matcher import MATCH_FIELD

SORT_KEYS = {
    "rating": lambda c: -(c.get("rating") or 0),
    "success": lambda c: -(c.get("meetup_success_rate") or 0),
    # Creators without a price go last in both directions
    "price-low": lambda c: (c.get("starting_price") is None, c.get("starting_price") or 0),
    "price-high": lambda c: (c.get("starting_price") is None, -(c.get("starting_price") or 0)),
    "meetups": lambda c: -(c.get("verified_meetups") or 0),
    # Ties on match percentage go to the better rated creator
    "match": lambda c: (-(c.get(MATCH_FIELD) or 0), -(c.get("rating") or 0)),
    "recommended": lambda c: -((c.get("meetup_success_rate") or 0) * (c.get("verified_meetups") or 0)),
}

DEFAULT_SORT = "recommended"


def sort_creators(creators, sort_by=DEFAULT_SORT):
    """Stable sort into a new list. Unknown keys raise ValueError."""
    key = SORT_KEYS.get(sort_by or DEFAULT_SORT)
    if key is None:
        raise ValueError(f"Unknown sort order: {sort_by}")
    return sorted(creators, key=key)
