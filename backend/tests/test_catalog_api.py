"""Tests for the diagnostic test, doctor and banner endpoints."""

import pytest
from bson import ObjectId


@pytest.mark.parametrize("path", ["/tests", "/doctors"])
def test_catalog_crud(client, db, admin_headers, path):
    created = client.post(path, json={"name": "Item", "price": 500}, headers=admin_headers)
    assert created.status_code == 200
    item_id = created.json()["insertedId"]

    listed = client.get(path)
    assert listed.json() == [{"_id": item_id, "name": "Item", "price": 500}]

    fetched = client.get(f"{path}/{item_id}")
    assert fetched.json() == {"_id": item_id, "name": "Item", "price": 500}

    updated = client.patch(
        f"{path}/{item_id}", json={"price": 450, "slots": 10}, headers=admin_headers
    )
    assert updated.status_code == 200
    assert updated.json() == {"_id": item_id, "name": "Item", "price": 450, "slots": 10}

    deleted = client.delete(f"{path}/{item_id}", headers=admin_headers)
    assert deleted.json() == {"acknowledged": True, "deletedCount": 1}
    assert client.get(f"{path}/{item_id}").status_code == 404


@pytest.mark.parametrize("path", ["/tests", "/doctors", "/banners"])
def test_writes_require_admin(client, user_headers, path):
    assert client.post(path, json={"name": "x"}).status_code == 401
    assert client.post(path, json={"name": "x"}, headers=user_headers).status_code == 403
    assert client.delete(f"{path}/{ObjectId()}", headers=user_headers).status_code == 403


def test_get_missing_test_is_not_found(client):
    response = client.get(f"/tests/{ObjectId()}")

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Test not found"


def test_get_malformed_test_id(client):
    response = client.get("/tests/12345")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INVALID_IDENTIFIER"


def test_update_missing_doctor_is_not_found(client, admin_headers):
    response = client.patch(f"/doctors/{ObjectId()}", json={"name": "x"}, headers=admin_headers)

    assert response.status_code == 404


def test_client_supplied_id_is_ignored(client, db, admin_headers):
    supplied = str(ObjectId())

    created = client.post("/tests", json={"_id": supplied, "name": "CBC"}, headers=admin_headers)

    assert created.json()["insertedId"] != supplied
    assert db.tests.count_documents({}) == 1


def test_delete_missing_id_leaves_collection(client, db, admin_headers):
    db.doctors.insert_one({"name": "Dr. Who"})

    response = client.delete(f"/doctors/{ObjectId()}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["deletedCount"] == 0
    assert db.doctors.count_documents({}) == 1


def test_banner_flow(client, admin_headers):
    created = client.post(
        "/banners",
        json={"title": "Winter checkup", "couponCode": "WINTER20", "isActive": True},
        headers=admin_headers,
    )
    banner_id = created.json()["insertedId"]

    assert client.get("/banners").json() == [
        {"_id": banner_id, "title": "Winter checkup", "couponCode": "WINTER20", "isActive": True}
    ]

    client.delete(f"/banners/{banner_id}", headers=admin_headers)
    assert client.get("/banners").json() == []
