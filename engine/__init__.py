# engine/__init__.py
# ─────────────────────────────
# Init file for Hush match engine package
# Exposes core components

from .filters import apply_all_filters
from .features import build_category_scores
from .matcher import (
    Matcher,
    add_match_percentages,
    calculate_match_percentage,
    explain_match,
    get_top_matches,
    has_meaningful_preferences,
)
from .sorting import sort_creators

__all__ = [
    "apply_all_filters",
    "build_category_scores",
    "Matcher",
    "add_match_percentages",
    "calculate_match_percentage",
    "explain_match",
    "get_top_matches",
    "has_meaningful_preferences",
    "sort_creators",
]
