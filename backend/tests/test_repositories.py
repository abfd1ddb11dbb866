"""Tests for the MongoDB repository primitives."""

import mongomock
import pytest
from bson import ObjectId

from diagnostic_center.exceptions import InvalidIdentifier
from diagnostic_center.repositories import ReservationRepository, UserRepository


@pytest.fixture
def db():
    return mongomock.MongoClient()["repo_tests"]


def test_find_by_id_round_trip(db):
    repo = UserRepository(db)
    inserted = repo.insert_one({"email": "a@x.com", "role": "user"})

    user = repo.find_by_id(str(inserted.inserted_id))

    assert user.id == str(inserted.inserted_id)
    assert user.email == "a@x.com"
    assert not user.is_admin


def test_find_by_id_missing_returns_none(db):
    assert UserRepository(db).find_by_id(ObjectId()) is None


def test_malformed_identifier_raises(db):
    repo = UserRepository(db)

    with pytest.raises(InvalidIdentifier):
        repo.find_by_id("xyz")
    with pytest.raises(InvalidIdentifier):
        repo.delete_by_id("xyz")


def test_promote_to_admin_sets_role_only(db):
    repo = UserRepository(db)
    user_id = repo.insert_one({"email": "a@x.com", "name": "A"}).inserted_id

    result = repo.promote_to_admin(str(user_id))

    assert result.modified_count == 1
    assert db.users.find_one({"_id": user_id}) == {
        "_id": user_id,
        "email": "a@x.com",
        "name": "A",
        "role": "admin",
    }


def test_update_and_fetch_returns_merged_document(db):
    repo = UserRepository(db)
    user_id = repo.insert_one({"email": "a@x.com"}).inserted_id

    user = repo.update_and_fetch(user_id, {"_id": ObjectId(), "status": "active"})

    assert user.id == str(user_id)
    assert user.status == "active"


def test_to_document_keeps_only_stored_fields(db):
    repo = ReservationRepository(db)
    reservation_id = repo.insert_one({"email": "a@x.com", "slot": "10:00"}).inserted_id

    [reservation] = repo.find_by_email("a@x.com")

    assert reservation.to_document() == {
        "_id": str(reservation_id),
        "email": "a@x.com",
        "slot": "10:00",
    }
