# 📦 engine/matcher.py
# ─────────────────────────────
# Preference matching engine for Hush
#
# Scores how well a creator fits a client's stated preferences as a
# weighted average over the categories the client actually filled in.

import math

import structlog

from engine import features
from engine.config import WEIGHTS

log = structlog.get_logger()

MATCH_FIELD = "match_percentage"


class Matcher:
    def __init__(self, preferences, weights=None):
        self.preferences = preferences
        self.weights = weights or WEIGHTS

    def score(self, creator) -> int:
        """Match percentage (0-100) of a single creator."""
        scores = features.build_category_scores(self.preferences, creator, self.weights)
        if not scores:
            return 0
        total_score = sum(score for score, _ in scores.values())
        total_weight = sum(weight for _, weight in scores.values())
        if total_weight <= 0:
            return 0
        # Half-up rounding, 12.5 -> 13
        percentage = math.floor(total_score / total_weight * 100 + 0.5)
        return min(100, max(0, percentage))

    def annotate(self, creators):
        """Copy of each creator with its match percentage added."""
        return [{**creator, MATCH_FIELD: self.score(creator)} for creator in creators]

    def top_matches(self, creators, limit=5):
        """Best scoring creators first, zero scores dropped."""
        annotated = [c for c in self.annotate(creators) if c[MATCH_FIELD] > 0]
        annotated.sort(key=lambda c: c[MATCH_FIELD], reverse=True)
        top = annotated[:max(limit, 0)]
        log.debug("Top matches computed", candidates=len(creators), matched=len(annotated), returned=len(top))
        return top

    def explain(self, creator):
        """Per-category breakdown behind a match percentage."""
        scores = features.build_category_scores(self.preferences, creator, self.weights)
        return {
            MATCH_FIELD: self.score(creator),
            "categories": {
                name: {"score": round(score, 2), "weight": weight}
                for name, (score, weight) in scores.items()
            },
        }


def has_meaningful_preferences(preferences) -> bool:
    """True when at least one category could become active."""
    if not preferences:
        return False
    location = preferences.get("preferred_location")
    return bool(
        (isinstance(location, str) and location)
        or features.effective_labels(preferences.get("body_types"))
        or features.effective_labels(preferences.get("skin_tones"))
        or preferences.get("age_ranges")
        or preferences.get("services")
    )


def calculate_match_percentage(preferences, creator) -> int:
    if preferences is None or creator is None:
        return 0
    return Matcher(preferences).score(creator)


def get_top_matches(preferences, creators, limit=5):
    """
    Rank creators by match percentage for a client.
    Returns at most `limit` creators with a positive score, highest first.
    """
    if not preferences or not creators or not has_meaningful_preferences(preferences):
        return []
    return Matcher(preferences).top_matches(creators, limit=limit)


def add_match_percentages(preferences, creators):
    """Annotate every creator with its match percentage, order preserved."""
    if preferences is None or creators is None:
        return creators
    return Matcher(preferences).annotate(creators)


def explain_match(preferences, creator):
    if preferences is None or creator is None:
        return {MATCH_FIELD: 0, "categories": {}}
    return Matcher(preferences).explain(creator)
