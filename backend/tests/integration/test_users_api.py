"""End-to-end tests for /api/v1/users: accounts and their person records."""

import pytest

BASE = "/api/v1/users"


def _body(**values):
    body = {
        "firstName": "Bob",
        "lastName": "Builder",
        "email": "bob@example.com",
        "password": "s3cret-pass",
    }
    body.update(values)
    return body


@pytest.mark.asyncio
async def test_deleted_user_email_can_be_used_again(client, admin_headers):
    first = await client.post(BASE, json=_body(), headers=admin_headers)
    assert first.status_code == 201, first.text

    response = await client.delete(f"{BASE}/{first.json()['id']}", headers=admin_headers)
    assert response.status_code == 204

    second = await client.post(BASE, json=_body(email="BOB@example.com"), headers=admin_headers)
    assert second.status_code == 201, second.text
    assert second.json()["id"] != first.json()["id"]
    assert second.json()["personId"] != first.json()["personId"]


@pytest.mark.asyncio
async def test_deleting_user_deletes_their_person(client, admin, admin_headers):
    created = (await client.post(BASE, json=_body(), headers=admin_headers)).json()
    await client.delete(f"{BASE}/{created['id']}", headers=admin_headers)

    response = await client.get(
        f"/api/v1/persons/{created['personId']}", headers=admin_headers
    )
    assert response.status_code == 404

    response = await client.get(
        "/api/v1/persons",
        params={"entityStatus": "DELETED", "search": "bob@example.com"},
        headers=admin_headers,
    )
    [person] = response.json()["data"]
    assert person["deletedBy"] == admin.id


@pytest.mark.asyncio
async def test_live_user_email_conflicts(client, admin_headers):
    await client.post(BASE, json=_body(), headers=admin_headers)
    response = await client.post(BASE, json=_body(firstName="Robert"), headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["meta"]["errorCode"] == "DUPLICATE_RESOURCE"


@pytest.mark.asyncio
async def test_restoring_into_a_taken_email_conflicts(client, admin_headers):
    first = (await client.post(BASE, json=_body(), headers=admin_headers)).json()
    await client.delete(f"{BASE}/{first['id']}", headers=admin_headers)
    await client.post(BASE, json=_body(), headers=admin_headers)

    response = await client.patch(
        f"{BASE}/{first['id']}/status", json={"entityStatus": "ACTIVE"}, headers=admin_headers
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_restored_user_gets_their_person_back(client, admin_headers):
    created = (await client.post(BASE, json=_body(), headers=admin_headers)).json()
    await client.delete(f"{BASE}/{created['id']}", headers=admin_headers)

    response = await client.patch(
        f"{BASE}/{created['id']}/status", json={"entityStatus": "ACTIVE"}, headers=admin_headers
    )
    assert response.status_code == 200

    response = await client.get(
        f"/api/v1/persons/{created['personId']}", headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["entityStatus"] == "ACTIVE"
