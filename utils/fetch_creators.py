# 📦 utils/fetch_creators.py

import asyncio
import structlog
from typing import List

import supabase_client
from utils.transform_creator import transform_db_creator

log = structlog.get_logger()

CREATOR_SELECT = """
    *,
    creators(
        *,
        creator_areas(id, area),
        creator_photos(id, storage_path, is_preview, display_order, captured_at),
        creator_extras(id, name, price),
        creator_boundaries(id, boundary)
    )
"""


class CreatorFetchError(Exception):
    """Creators could not be loaded from Supabase."""


async def fetch_creators(retries: int = 3, delay: float = 2.0, client=None) -> List[dict]:
    """Fetch creators from Supabase, with retry logic."""
    client = client or supabase_client.supabase
    if client is None:
        raise CreatorFetchError("Supabase client is not configured.")

    rows = None
    for attempt in range(retries):
        try:
            log.info("Fetching creators", attempt=attempt + 1)
            response = (
                client.table("users")
                .select(CREATOR_SELECT)
                .eq("user_type", "creator")
                .execute()
            )
            rows = response.data
            break

        except Exception as e:
            log.error("Failed to fetch creators", attempt=attempt + 1, error=str(e))
            if attempt < retries - 1:
                await asyncio.sleep(delay * (2 ** attempt))  # Exponential backoff
            else:
                raise CreatorFetchError("Could not fetch creators from Supabase.") from e

    if not rows:
        log.warning("No creators found in Supabase.")
        return []

    creators = []
    for row in rows:
        try:
            creator = transform_db_creator(row)
        except (TypeError, ValueError, AttributeError) as e:
            log.error("Skipping malformed creator row", user_id=row.get("id"), error=str(e))
            continue
        if creator is None:
            log.warning("Skipping user without creator profile", user_id=row.get("id"))
            continue
        creators.append(creator)

    log.info("Successfully fetched creators from Supabase", count=len(creators), skipped=len(rows) - len(creators))
    return creators
