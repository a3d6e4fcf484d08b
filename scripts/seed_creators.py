import random
import uuid

import structlog

from engine.config import AGE_RANGES
from supabase_client import supabase

log = structlog.get_logger()

# ───────────────────────────────────────────────────────────────────────────
# Fake creators for local development and demo databases
# ───────────────────────────────────────────────────────────────────────────
NAMES          = ["Ada", "Bimpe", "Chioma", "Dami", "Ebere", "Funke", "Halima", "Ife", "Kemi", "Ngozi"]
LOCATIONS      = {"Lagos": ["Lekki", "VI", "Ikoyi", "Ajah", "Ikeja"], "Abuja": ["Wuse", "Maitama", "Asokoro"], "Port Harcourt": ["GRA", "Trans Amadi"]}
BODY_TYPES     = ["Slim", "Curvy", "Athletic", "Thick", "Petite"]
SKIN_TONES     = ["Light", "Caramel", "Medium", "Dark"]
SERVICES       = ["GFE", "Dinner date", "Travel companion", "Massage", "Duo"]
EXTRAS         = [("Massage", 20000), ("Duo (with friend)", 120000), ("Overnight", 150000)]


def generate_fake_creator(rng=random):
    location = rng.choice(list(LOCATIONS))
    low, high = rng.choice(list(AGE_RANGES.values()))
    hourly = rng.choice([40000, 45000, 50000, 60000, 75000, 80000, 120000])
    user_id = str(uuid.uuid4())
    name = rng.choice(NAMES)

    user = {
        "id": user_id,
        "name": name,
        "username": f"{name.lower()}_{user_id[:6]}",
        "user_type": "creator",
    }
    creator = {
        "id": str(uuid.uuid4()),
        "user_id": user_id,
        "location": location,
        "body_type": rng.choice(BODY_TYPES),
        "skin_tone": rng.choice(SKIN_TONES),
        "age": rng.randint(low, min(high, 45)),
        "services": rng.sample(SERVICES, k=rng.randint(1, 3)),
        "rating": round(rng.uniform(4.0, 5.0), 1),
        "verified_meetups": rng.randint(0, 90),
        "meetup_success_rate": rng.randint(80, 100),
        "is_available": rng.random() > 0.2,
        "pricing": {"meetupIncall": {"1": hourly, "2": int(hourly * 1.6), "overnight": hourly * 3}},
    }
    areas = [{"creator_id": creator["id"], "area": a} for a in rng.sample(LOCATIONS[location], k=2)]
    extras = [
        {"creator_id": creator["id"], "name": n, "price": p}
        for n, p in rng.sample(EXTRAS, k=rng.randint(0, 2))
    ]
    return user, creator, areas, extras


def _insert(table, rows):
    if not rows:
        return
    resp = supabase.table(table).insert(rows).execute()
    if not resp.data:
        raise RuntimeError(f"Failed to insert into {table}: {resp.data}")


def main(n=40):
    if supabase is None:
        raise RuntimeError("SUPABASE_URL and SUPABASE_KEY must be set to seed creators.")

    users, creators, areas, extras = [], [], [], []
    for _ in range(n):
        user, creator, creator_areas, creator_extras = generate_fake_creator()
        users.append(user)
        creators.append(creator)
        areas.extend(creator_areas)
        extras.extend(creator_extras)

    log.info("Uploading fake creators", count=n)
    _insert("users", users)
    _insert("creators", creators)
    _insert("creator_areas", areas)
    _insert("creator_extras", extras)
    log.info("Fake creators uploaded", count=n)


if __name__ == "__main__":
    main()
