# 📦 /services/matcher_service.py

from engine import (
    add_match_percentages,
    apply_all_filters,
    explain_match,
    get_top_matches,
    sort_creators,
)
from prometheus_client import Counter
import structlog

log = structlog.get_logger()

REQUEST_COUNTER = Counter("hush_match_requests", "Total matching requests made", ["endpoint"])
MATCHES_RETURNED_COUNTER = Counter("hush_matches_returned", "Number of matches returned per request")
EMPTY_RESULT_COUNTER = Counter("hush_empty_results", "Requests that produced no creators", ["endpoint"])


def _prefs(preferences):
    return preferences.model_dump() if preferences is not None else None


def run_top_matches(preferences, creators, limit=5):
    REQUEST_COUNTER.labels("top").inc()
    matches = get_top_matches(_prefs(preferences), creators, limit=limit)

    if matches:
        MATCHES_RETURNED_COUNTER.inc(len(matches))
    else:
        EMPTY_RESULT_COUNTER.labels("top").inc()
    log.info("Top matches generated", creators=len(creators), returned=len(matches))
    return matches


def run_annotate(preferences, creators):
    REQUEST_COUNTER.labels("annotate").inc()
    return add_match_percentages(_prefs(preferences), creators)


def run_explanation(preferences, creators, creator_id):
    REQUEST_COUNTER.labels("explain").inc()
    creator = next((c for c in creators if str(c.get("id")) == creator_id), None)
    if creator is None:
        return None
    return {"creator_id": creator_id, **explain_match(_prefs(preferences), creator)}


def run_explore(request, creators):
    """Filter, annotate with match percentages when preferences are given, then sort."""
    REQUEST_COUNTER.labels("explore").inc()
    result = apply_all_filters(creators, request.filters)
    if request.preferences is not None:
        result = add_match_percentages(_prefs(request.preferences), result)
    result = sort_creators(result, request.sort_by)

    if not result:
        EMPTY_RESULT_COUNTER.labels("explore").inc()
    log.info("Explore listing built", creators=len(creators), returned=len(result), sort_by=request.sort_by)
    return result
