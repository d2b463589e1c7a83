import itertools
import json

from kisan_assistant.collections.database import (
    LISTINGS_COLLECTION,
    POSTS_COLLECTION,
    Database,
    init_database,
)
from kisan_assistant.collections.seed_data import SEED_LISTINGS, SEED_POSTS
from kisan_assistant.core.document_store import Collection, seed_collection
from kisan_assistant.core.kv_store import MemoryKeyValueStore
from kisan_assistant.models.market_listing import ListingType, MarketListing
from kisan_assistant.models.user import UserRecord


def _counter_ids():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


def _user(email, name="Farmer", **kwargs):
    return UserRecord(email=email, name=name, password="secret", **kwargs)


def test_insert_assigns_id_and_find_returns_it(kv_store):
    users = Collection("users", UserRecord, kv_store)
    stored = users.insert_one(_user("a@x.com"))
    assert stored.id
    assert users.find({}) == [stored]


def test_insert_keeps_existing_id(kv_store):
    users = Collection("users", UserRecord, kv_store)
    assert users.insert_one(_user("a@x.com", id="u-7")).id == "u-7"


def test_empty_id_is_replaced(kv_store):
    users = Collection("users", UserRecord, kv_store, id_factory=lambda: "fresh")
    assert users.insert_one(_user("a@x.com", id="")).id == "fresh"


def test_insert_prepends(kv_store):
    users = Collection("users", UserRecord, kv_store, id_factory=_counter_ids())
    users.insert_one(_user("first@x.com"))
    users.insert_one(_user("second@x.com"))
    assert [u.email for u in users.find()] == ["second@x.com", "first@x.com"]


def test_insert_writes_whole_collection_under_its_name(kv_store):
    users = Collection("users", UserRecord, kv_store, id_factory=_counter_ids())
    users.insert_one(_user("a@x.com"))
    users.insert_one(_user("b@x.com"))
    raw = json.loads(kv_store.get("users"))
    assert [item["email"] for item in raw] == ["b@x.com", "a@x.com"]


def test_find_one_exact_match(kv_store):
    users = Collection("users", UserRecord, kv_store, id_factory=_counter_ids())
    users.insert_one(_user("a@x.com", name="Older"))
    users.insert_one(_user("b@x.com"))
    users.insert_one(_user("a@x.com", name="Newer"))

    assert users.find_one({"email": "a@x.com"}).name == "Newer"
    assert users.find_one({"email": "A@x.com"}) is None
    assert users.find_one({"email": "a@x"}) is None
    assert len(users.find({})) == 3


def test_query_is_and_of_fields(kv_store):
    users = Collection("users", UserRecord, kv_store, id_factory=_counter_ids())
    users.insert_one(_user("a@x.com", name="Ravi", location="Pune"))
    users.insert_one(_user("b@x.com", name="Ravi", location="Nagpur"))
    found = users.find({"name": "Ravi", "location": "Pune"})
    assert [u.email for u in found] == ["a@x.com"]


def test_query_on_absent_field_does_not_match(kv_store):
    users = Collection("users", UserRecord, kv_store, id_factory=_counter_ids())
    users.insert_one(_user("a@x.com"))
    assert users.find({"location": None}) == []
    assert users.find({"nickname": "x"}) == []


def test_is_empty(kv_store):
    users = Collection("users", UserRecord, kv_store)
    assert users.is_empty()
    users.insert_one(_user("a@x.com"))
    assert not users.is_empty()


def test_corrupt_content_reads_as_empty(kv_store):
    kv_store.set("users", "{not json")
    users = Collection("users", UserRecord, kv_store, id_factory=lambda: "n1")
    assert users.is_empty()
    assert users.find() == []
    users.insert_one(_user("a@x.com"))
    assert [u.id for u in users.find()] == ["n1"]


def test_non_list_content_reads_as_empty(kv_store):
    kv_store.set("users", json.dumps({"email": "a@x.com"}))
    assert Collection("users", UserRecord, kv_store).is_empty()


def test_invalid_records_are_skipped_but_preserved(kv_store):
    kv_store.set(
        "users",
        json.dumps(
            [
                {"id": "1", "email": "a@x.com", "name": "A", "password": "p"},
                {"id": "2", "email": "broken@x.com"},
                {"email": "noid@x.com", "name": "N", "password": "p"},
                "junk",
            ]
        ),
    )
    users = Collection("users", UserRecord, kv_store, id_factory=lambda: "3")
    assert [u.id for u in users.find()] == ["1"]

    users.insert_one(_user("c@x.com"))
    assert len(json.loads(kv_store.get("users"))) == 5


def test_listing_is_stored_with_camel_case_keys(kv_store):
    listings = Collection("listings", MarketListing, kv_store)
    listings.insert_one(SEED_LISTINGS[0])
    raw = json.loads(kv_store.get("listings"))[0]
    assert raw["seedType"] == "HD-2967"
    assert "seed_type" not in raw
    assert listings.find_one({"seedType": "HD-2967"}).seed_type == "HD-2967"


def test_seed_order_is_reversed_and_idempotent(kv_store):
    listings = Collection("listings", MarketListing, kv_store)
    seeds = SEED_LISTINGS[:3]

    assert seed_collection(listings, seeds, "market listings") is True
    assert [l.id for l in listings.find()] == ["3", "2", "1"]

    assert seed_collection(listings, seeds, "market listings") is False
    assert [l.id for l in listings.find()] == ["3", "2", "1"]


def test_database_seeds_listings_and_posts_only(kv_store):
    db = init_database(kv_store)
    assert [l.id for l in db.listings.find()] == [l.id for l in reversed(SEED_LISTINGS)]
    assert [p.id for p in db.posts.find()] == ["103", "102", "101"]
    assert db.users.is_empty()
    assert kv_store.get(LISTINGS_COLLECTION) is not None
    assert kv_store.get(POSTS_COLLECTION) is not None


def test_database_does_not_reseed_non_empty_collections(kv_store):
    db = init_database(kv_store)
    db.posts.insert_one(SEED_POSTS[0].model_copy(update={"id": "200"}))
    init_database(kv_store)
    assert len(db.posts.find()) == len(SEED_POSTS) + 1


def test_filter_listings_by_type():
    db = init_database(MemoryKeyValueStore())
    rentals = db.listings.find({"type": ListingType.RENT})
    assert [l.crop for l in rentals] == ["Drone Spraying", "Mahindra 575 DI"]


def test_read_your_own_write_across_instances(kv_store):
    first = Database(kv_store)
    second = Database(kv_store)
    stored = first.users.insert_one(_user("a@x.com"))
    assert second.users.find_one({"email": "a@x.com"}) == stored
