# 📦 utils/transform_creator.py
# ─────────────────────────────
# Database creator rows → flat creator records used by matching and explore

from datetime import datetime, timedelta, timezone

ONLINE_WINDOW = timedelta(minutes=15)

DEFAULT_LOCATION = "Lagos"
DEFAULT_RATING = 4.8
DEFAULT_SUCCESS_RATE = 98.0
DEFAULT_PRICING = {
    "unlockContact": 5000,
    "unlockPhotos": 3000,
    "meetupIncall": {"1": 50000, "2": 80000, "overnight": 150000},
    "meetupOutcall": None,
}


def transform_db_creator(db_data, now=None):
    """
    Flatten a `users` row with its nested `creators` record.

    Returns None when the row or its creator record is missing.
    """
    if not db_data or not db_data.get("creators"):
        return None

    creator = db_data["creators"]
    photos = creator.get("creator_photos") or []
    pricing = creator.get("pricing") or DEFAULT_PRICING

    return {
        "id": creator.get("id"),
        "user_id": db_data.get("id"),
        "name": db_data.get("name"),
        "username": db_data.get("username"),
        "tagline": creator.get("tagline") or "",
        "bio": creator.get("bio") or "",
        "location": creator.get("location") or DEFAULT_LOCATION,
        "areas": [a.get("area") for a in creator.get("creator_areas") or []],
        "body_type": creator.get("body_type") or None,
        "skin_tone": creator.get("skin_tone") or None,
        "age": creator.get("age") or None,
        "height": creator.get("height") or None,
        "services": creator.get("services") or [],
        "rating": _to_float(creator.get("rating")) or DEFAULT_RATING,
        "reviews": creator.get("reviews_count") or 0,
        "verified_meetups": creator.get("verified_meetups") or 0,
        "meetup_success_rate": _to_float(creator.get("meetup_success_rate")) or DEFAULT_SUCCESS_RATE,
        "favorite_count": creator.get("favorite_count") or 0,
        "profile_views": creator.get("profile_views") or 0,
        "is_verified": bool(creator.get("is_verified") or creator.get("is_video_verified")),
        "is_studio_verified": bool(creator.get("is_studio_verified")),
        "is_online": is_recently_seen(db_data.get("last_seen_at"), now=now),
        "is_available": creator.get("is_available") is not False,
        "starting_price": starting_price(pricing),
        "extras": [
            {"id": e.get("id"), "name": e.get("name"), "price": _to_float(e.get("price"))}
            for e in creator.get("creator_extras") or []
        ],
        "boundaries": [b.get("boundary") for b in creator.get("creator_boundaries") or []],
        "photo_count": len(photos),
        "preview_photo_count": sum(1 for p in photos if p.get("is_preview")),
        "schedule": creator.get("schedule"),
        "contact": {
            "phone": db_data.get("phone"),
            "whatsapp": whatsapp_number(db_data.get("phone")),
        },
    }


def is_recently_seen(last_seen_at, now=None):
    """Online means seen within the last 15 minutes."""
    if not last_seen_at:
        return False
    try:
        seen = _parse_timestamp(last_seen_at)
    except ValueError:
        return False
    now = now or datetime.now(timezone.utc)
    return now - seen < ONLINE_WINDOW


def whatsapp_number(phone):
    """Local 0-prefixed numbers become 234-prefixed international ones."""
    if not phone:
        return None
    return "234" + phone[1:] if phone.startswith("0") else phone


def starting_price(pricing):
    """One-hour incall price, None when the creator has no incall rates."""
    incall = (pricing or {}).get("meetupIncall") or {}
    price = incall.get("1", incall.get(1))
    return _to_float(price)

# ─────────────────────────────
# Internal

def _to_float(value):
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _parse_timestamp(value):
    if isinstance(value, datetime):
        seen = value
    else:
        seen = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if seen.tzinfo is None:
        seen = seen.replace(tzinfo=timezone.utc)
    return seen
