# 📦 /tests/test_creators.py

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from utils import fetch_creators as fetch_module
from utils.fetch_creators import CreatorFetchError, fetch_creators
from utils.transform_creator import starting_price, transform_db_creator, whatsapp_number
from tests.utils.dummies import make_db_row

NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)

# ---------------------- Transform tests ----------------------

def test_transform_missing_rows():
    assert transform_db_creator(None) is None
    assert transform_db_creator({"id": "user-1", "creators": None}) is None


def test_transform_flattens_creator_row():
    creator = transform_db_creator(make_db_row(), now=NOW)

    assert creator["id"] == "creator-1"
    assert creator["username"] == "bella_luxe"
    assert creator["location"] == "Abuja"
    assert creator["areas"] == ["Wuse", "Maitama"]
    assert creator["body_type"] == "Curvy"
    assert creator["rating"] == 4.9
    assert creator["meetup_success_rate"] == 95.0
    assert creator["is_verified"] is True
    assert creator["starting_price"] == 60000.0
    assert creator["extras"] == [{"id": 7, "name": "Duo (with friend)", "price": 150000.0}]
    assert creator["boundaries"] == ["No overnight on first booking"]
    assert creator["photo_count"] == 3
    assert creator["preview_photo_count"] == 1


def test_transform_defaults():
    row = make_db_row(location=None, rating=None, meetup_success_rate="n/a", body_type="",
                      age=None, services=None, pricing=None, creator_areas=None, is_available=None)
    creator = transform_db_creator(row, now=NOW)

    assert creator["location"] == "Lagos"
    assert creator["rating"] == 4.8
    assert creator["meetup_success_rate"] == 98.0
    assert creator["body_type"] is None
    assert creator["age"] is None
    assert creator["services"] == []
    assert creator["areas"] == []
    assert creator["is_available"] is True
    assert creator["starting_price"] == 50000.0


def test_transform_unavailable_only_when_explicitly_false():
    assert transform_db_creator(make_db_row(is_available=False), now=NOW)["is_available"] is False


@pytest.mark.parametrize("minutes_ago, expected", [(1, True), (14, True), (16, False)])
def test_online_window(minutes_ago, expected):
    row = make_db_row()
    row["last_seen_at"] = (NOW - timedelta(minutes=minutes_ago)).isoformat().replace("+00:00", "Z")
    assert transform_db_creator(row, now=NOW)["is_online"] is expected


def test_malformed_last_seen_counts_as_offline():
    row = make_db_row()
    row["last_seen_at"] = "not-a-date"
    creator = transform_db_creator(row, now=NOW)

    assert creator is not None
    assert creator["is_online"] is False


def test_transform_profile_views_and_contact():
    creator = transform_db_creator(make_db_row(), now=NOW)

    assert creator["profile_views"] == 0
    assert creator["contact"] == {"phone": "08012345678", "whatsapp": "2348012345678"}
    assert transform_db_creator(make_db_row(profile_views=1200), now=NOW)["profile_views"] == 1200


@pytest.mark.parametrize("phone, expected", [
    ("08012345678", "2348012345678"),
    ("2348012345678", "2348012345678"),
    (None, None),
    ("", None),
])
def test_whatsapp_number(phone, expected):
    assert whatsapp_number(phone) == expected


def test_starting_price_without_incall():
    assert starting_price({"meetupIncall": None}) is None
    assert starting_price({"meetupIncall": {1: 45000}}) == 45000.0

# ---------------------- Fetch tests ----------------------

class FakeQuery:
    def __init__(self, rows, failures=0):
        self.rows = rows
        self.failures = failures
        self.calls = []

    def table(self, name):
        self.calls.append(("table", name))
        return self

    def select(self, columns):
        return self

    def eq(self, column, value):
        self.calls.append(("eq", column, value))
        return self

    def execute(self):
        if self.failures:
            self.failures -= 1
            raise ConnectionError("supabase unavailable")
        return SimpleNamespace(data=self.rows)


@pytest.mark.asyncio
async def test_fetch_creators_transforms_rows():
    client = FakeQuery([make_db_row(), {"id": "user-2", "creators": None}])
    creators = await fetch_creators(client=client)

    assert [c["username"] for c in creators] == ["bella_luxe"]
    assert ("table", "users") in client.calls
    assert ("eq", "user_type", "creator") in client.calls


@pytest.mark.asyncio
async def test_fetch_creators_empty_table():
    assert await fetch_creators(client=FakeQuery([])) == []


@pytest.mark.asyncio
async def test_fetch_creators_retries_then_succeeds():
    client = FakeQuery([make_db_row()], failures=2)
    creators = await fetch_creators(retries=3, delay=0, client=client)
    assert len(creators) == 1


@pytest.mark.asyncio
async def test_fetch_creators_raises_after_retries():
    with pytest.raises(CreatorFetchError):
        await fetch_creators(retries=2, delay=0, client=FakeQuery([], failures=5))


@pytest.mark.asyncio
async def test_fetch_creators_without_client(monkeypatch):
    monkeypatch.setattr(fetch_module.supabase_client, "supabase", None)
    with pytest.raises(CreatorFetchError):
        await fetch_creators()


@pytest.mark.asyncio
async def test_fetch_creators_skips_malformed_rows():
    bad_timestamp = make_db_row()
    bad_timestamp["id"] = "user-3"
    bad_timestamp["last_seen_at"] = "not-a-date"
    bad_extras = make_db_row(creator_extras=["not-an-extra"])
    bad_extras["id"] = "user-4"
    client = FakeQuery([make_db_row(), bad_timestamp, bad_extras])

    creators = await fetch_creators(retries=2, delay=0, client=client)

    assert [c["user_id"] for c in creators] == ["user-1", "user-3"]
    assert creators[1]["is_online"] is False


@pytest.mark.asyncio
async def test_fetch_creators_does_not_retry_row_errors():
    client = FakeQuery([make_db_row(creator_extras=["not-an-extra"])])

    assert await fetch_creators(retries=3, delay=0, client=client) == []
    assert client.calls.count(("table", "users")) == 1
