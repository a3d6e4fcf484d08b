# 📦 engine/filters.py
# ─────────────────────────────
# Explore filters for Hush creator listings

from math import inf

from engine.features import age_in_ranges

ANY_PRICE = "Any price"

PRICE_RANGES = {
    ANY_PRICE: (0, inf),
    "Under ₦50k": (0, 50000),
    "₦50k - ₦75k": (50000, 75000),
    "₦75k - ₦100k": (75000, 100000),
    "Over ₦100k": (100000, inf),
}


def filter_by_location(creators, slug):
    """Location slug, e.g. "port-harcourt". "all" keeps everyone."""
    if not slug or slug == "all":
        return list(creators)
    return [c for c in creators if location_slug(c.get("location")) == slug]


def filter_by_search(creators, query):
    """Case-insensitive search over name, username and areas."""
    if not query:
        return list(creators)
    q = query.lower()
    return [
        c for c in creators
        if q in (c.get("name") or "").lower()
        or q in (c.get("username") or "").lower()
        or any(q in area.lower() for area in c.get("areas") or [])
    ]


def filter_by_online(creators):
    return [c for c in creators if c.get("is_online")]


def filter_by_available(creators):
    return [c for c in creators if c.get("is_available")]


def filter_by_extras(creators, extras):
    """Creator must offer every selected extra."""
    if not extras:
        return list(creators)
    return [c for c in creators if all(_offers_extra(c, extra) for extra in extras)]


def filter_by_price_range(creators, label):
    """Starting price within [min, max)."""
    if not label or label == ANY_PRICE:
        return list(creators)
    if label not in PRICE_RANGES:
        raise ValueError(f"Unknown price range: {label}")
    low, high = PRICE_RANGES[label]
    return [
        c for c in creators
        if c.get("starting_price") is not None and low <= c["starting_price"] < high
    ]


def filter_by_favorites(creators, favorites):
    favorites = set(favorites or [])
    return [c for c in creators if c.get("username") in favorites]


def filter_by_body_type(creators, body_types):
    return _filter_by_label(creators, "body_type", body_types)


def filter_by_skin_tone(creators, skin_tones):
    return _filter_by_label(creators, "skin_tone", skin_tones)


def filter_by_age_range(creators, labels):
    """Any selected range; creators without an age are dropped."""
    if not labels:
        return list(creators)
    return [c for c in creators if c.get("age") is not None and age_in_ranges(c["age"], labels)]


def filter_by_services(creators, services):
    """Any selected service contained in one of the creator's services."""
    if not services:
        return list(creators)
    wanted = [s.lower() for s in services]
    return [
        c for c in creators
        if any(w in offered.lower() for w in wanted for offered in c.get("services") or [])
    ]


def apply_all_filters(creators, filters):
    """Applies all explore filters sequentially."""
    result = filter_by_location(creators, filters.location)
    result = filter_by_search(result, filters.search)
    if filters.online_only:
        result = filter_by_online(result)
    if filters.available_only:
        result = filter_by_available(result)
    result = filter_by_extras(result, filters.extras)
    result = filter_by_price_range(result, filters.price_range)
    if filters.favorites is not None:
        result = filter_by_favorites(result, filters.favorites)
    result = filter_by_body_type(result, filters.body_types)
    result = filter_by_skin_tone(result, filters.skin_tones)
    result = filter_by_age_range(result, filters.age_ranges)
    result = filter_by_services(result, filters.services)
    return result


def location_slug(location):
    return (location or "").lower().replace(" ", "-")

# ─────────────────────────────
# Internal helpers

def _offers_extra(creator, extra):
    for entry in creator.get("extras") or []:
        name = entry.get("name") if isinstance(entry, dict) else entry
        if name == extra:
            return True
    return False


def _filter_by_label(creators, field, labels):
    if not labels:
        return list(creators)
    wanted = {label.lower() for label in labels}
    return [c for c in creators if c.get(field) and c[field].lower() in wanted]
