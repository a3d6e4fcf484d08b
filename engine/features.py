# 📦 engine/features.py
# ─────────────────────────────
# Per-category scores for the Hush match engine
#
# Each scorer returns a (score, weight) pair when the client expressed a
# preference for that category, or None when the category is inactive.

from engine.config import AGE_RANGES, NO_PREFERENCE, WEIGHTS


def location_score(prefs, creator, weight=None):
    """Full weight when the creator's location equals the preferred one."""
    weight = WEIGHTS["location"] if weight is None else weight
    preferred = prefs.get("preferred_location")
    if not isinstance(preferred, str) or not preferred:
        return None
    location = creator.get("location") or ""
    return (weight if location.lower() == preferred.lower() else 0.0), weight


def body_type_score(prefs, creator, weight=None):
    """Full weight when the creator's body type is one of the listed ones."""
    weight = WEIGHTS["body_type"] if weight is None else weight
    return _label_score(prefs.get("body_types"), creator.get("body_type"), weight)


def skin_tone_score(prefs, creator, weight=None):
    """Full weight when the creator's skin tone is one of the listed ones."""
    weight = WEIGHTS["skin_tone"] if weight is None else weight
    return _label_score(prefs.get("skin_tones"), creator.get("skin_tone"), weight)


def age_score(prefs, creator, weight=None):
    """Full weight when the creator's age falls inside any listed range."""
    weight = WEIGHTS["age"] if weight is None else weight
    ranges = prefs.get("age_ranges") or []
    age = creator.get("age")
    if not ranges or age is None:
        return None
    return (weight if age_in_ranges(age, ranges) else 0.0), weight


def services_score(prefs, creator, weight=None):
    """Partial credit: share of preferred services the creator offers."""
    weight = WEIGHTS["services"] if weight is None else weight
    wanted = prefs.get("services") or []
    if not wanted:
        return None
    offered = creator.get("services") or []
    matched = [s for s in wanted if any(services_overlap(s, cs) for cs in offered)]
    return (len(matched) / len(wanted)) * weight, weight


def age_in_ranges(age, labels):
    """Inclusive range check. Labels outside AGE_RANGES never match."""
    for label in labels:
        bounds = AGE_RANGES.get(label)
        if bounds and bounds[0] <= age <= bounds[1]:
            return True
    return False


def services_overlap(a, b):
    """Two-way case-insensitive substring containment."""
    a, b = a.lower(), b.lower()
    return a in b or b in a


def effective_labels(values):
    """Drop the "No preference" sentinel from a preference list."""
    sentinel = NO_PREFERENCE.lower()
    return [v for v in (values or []) if v and v.lower() != sentinel]

# ─────────────────────────────
# Internal

def _label_score(wanted, actual, weight):
    wanted = effective_labels(wanted)
    if not wanted:
        return None
    hit = bool(actual) and any(w.lower() == actual.lower() for w in wanted)
    return (weight if hit else 0.0), weight

# ─────────────────────────────
# Full category breakdown

CATEGORY_SCORERS = {
    "location": location_score,
    "body_type": body_type_score,
    "skin_tone": skin_tone_score,
    "age": age_score,
    "services": services_score,
}


def build_category_scores(prefs, creator, weights=None):
    """Assemble the (score, weight) pairs of every active category."""
    weights = weights or WEIGHTS
    scores = {}
    for name, scorer in CATEGORY_SCORERS.items():
        pair = scorer(prefs, creator, weights.get(name, 0.0))
        if pair is not None:
            scores[name] = (float(pair[0]), float(pair[1]))
    return scores
