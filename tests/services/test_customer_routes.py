"""Customer Routes — HTTP behaviour of /v1/customers.

Invariants:
    - create then get returns the same fields with a server-assigned id
    - duplicate email → 409 on create and on update to another customer's email
    - updating a customer while keeping its own email succeeds
    - birth date after today → 400; today → accepted
    - delete → 204, second delete → 404
    - error body is always {"error": "<message>"}
"""

from datetime import timedelta
from uuid import uuid4

import pytest

from app.core.validate_customer import utc_today
from tests.services.payloads import customer_payload


async def test_create_then_get_returns_same_fields(client):
    body = customer_payload()
    res = await client.post("/v1/customers", json=body)
    assert res.status_code == 201
    created = res.json()
    assert created["id"]
    assert res.headers["location"] == f"/v1/customers/{created['id']}"

    res = await client.get(f"/v1/customers/{created['id']}")
    assert res.status_code == 200
    fetched = res.json()
    assert fetched == created
    for key in ("name", "email", "phone", "birthDate"):
        assert fetched[key] == body[key]


async def test_create_assigns_distinct_ids(make_customer):
    first = await make_customer(email="one@mail.com")
    second = await make_customer(email="two@mail.com")
    assert first["id"] != second["id"]


async def test_list_returns_all_customers(client, make_customer):
    await make_customer(name="Bruno", email="bruno@mail.com")
    await make_customer(name="Carla", email="carla@mail.com")

    res = await client.get("/v1/customers")
    assert res.status_code == 200
    names = [c["name"] for c in res.json()["customers"]]
    assert sorted(names) == ["Bruno", "Carla"]


async def test_list_empty_store(client):
    res = await client.get("/v1/customers")
    assert res.status_code == 200
    assert res.json() == {"customers": []}


async def test_get_unknown_customer_returns_404(client):
    res = await client.get(f"/v1/customers/{uuid4()}")
    assert res.status_code == 404
    assert res.json() == {"error": "Customer not found"}


async def test_get_with_malformed_id_returns_400(client):
    res = await client.get("/v1/customers/not-a-uuid")
    assert res.status_code == 400
    assert res.json()["error"].startswith("Invalid request data")


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("name", "", "Name is required"),
        ("name", "   ", "Name is required"),
        ("email", None, "Email is required"),
        ("phone", "", "Phone is required"),
        ("birthDate", None, "BirthDate is required"),
        ("email", "not-an-email", "Email is invalid"),
    ],
)
async def test_create_rejects_invalid_field(client, field, value, message):
    res = await client.post("/v1/customers", json=customer_payload(**{field: value}))
    assert res.status_code == 400
    assert res.json() == {"error": message}


async def test_create_reports_first_failing_field(client):
    """Name is checked before email, email before phone."""
    body = customer_payload(name="", email="", phone="")
    res = await client.post("/v1/customers", json=body)
    assert res.json() == {"error": "Name is required"}


async def test_required_checks_precede_email_syntax(client):
    body = customer_payload(email="broken", phone="")
    res = await client.post("/v1/customers", json=body)
    assert res.json() == {"error": "Phone is required"}


async def test_birth_date_in_future_rejected(client):
    tomorrow = (utc_today() + timedelta(days=1)).isoformat()
    res = await client.post("/v1/customers", json=customer_payload(birthDate=tomorrow))
    assert res.status_code == 400
    assert res.json() == {"error": "BirthDate cannot be in the future"}


async def test_birth_date_today_accepted(client):
    today = utc_today().isoformat()
    res = await client.post("/v1/customers", json=customer_payload(birthDate=today))
    assert res.status_code == 201
    assert res.json()["birthDate"] == today


async def test_malformed_birth_date_returns_400(client):
    res = await client.post("/v1/customers", json=customer_payload(birthDate="17/05/1990"))
    assert res.status_code == 400
    assert "birthDate" in res.json()["error"]


async def test_create_duplicate_email_returns_409(client, make_customer):
    await make_customer(email="dup@mail.com")
    res = await client.post(
        "/v1/customers", json=customer_payload(name="Other", email="dup@mail.com"),
    )
    assert res.status_code == 409
    assert res.json() == {"error": "Email already in use"}


async def test_create_accepts_snake_case_fields(client):
    body = customer_payload()
    body["birth_date"] = body.pop("birthDate")
    res = await client.post("/v1/customers", json=body)
    assert res.status_code == 201
    assert res.json()["birthDate"] == "1990-05-17"


# ─── update ──────────────────────────────────────────────────────

async def test_update_changes_fields(client, make_customer):
    customer = await make_customer()
    body = customer_payload(name="Ana S. Lima", phone="+55 21 99999-0000")
    res = await client.put(f"/v1/customers/{customer['id']}", json=body)
    assert res.status_code == 200
    assert res.json()["name"] == "Ana S. Lima"

    fetched = (await client.get(f"/v1/customers/{customer['id']}")).json()
    assert fetched["phone"] == "+55 21 99999-0000"
    assert fetched["id"] == customer["id"]


async def test_update_keeping_own_email_succeeds(client, make_customer):
    customer = await make_customer(email="same@mail.com")
    res = await client.put(
        f"/v1/customers/{customer['id']}",
        json=customer_payload(name="Renamed", email="same@mail.com"),
    )
    assert res.status_code == 200
    assert res.json()["email"] == "same@mail.com"


async def test_update_to_another_customers_email_returns_409(client, make_customer):
    await make_customer(email="first@mail.com")
    second = await make_customer(email="second@mail.com")
    res = await client.put(
        f"/v1/customers/{second['id']}",
        json=customer_payload(email="first@mail.com"),
    )
    assert res.status_code == 409
    assert res.json() == {"error": "Email already in use"}


async def test_update_unknown_customer_returns_404(client):
    res = await client.put(f"/v1/customers/{uuid4()}", json=customer_payload())
    assert res.status_code == 404
    assert res.json() == {"error": "Customer not found"}


async def test_update_validates_before_lookup(client):
    """Bad input on a missing id is still 400: validation precedes the store."""
    res = await client.put(f"/v1/customers/{uuid4()}", json=customer_payload(name=""))
    assert res.status_code == 400


async def test_update_birth_date_in_future_rejected(client, make_customer):
    customer = await make_customer()
    tomorrow = (utc_today() + timedelta(days=1)).isoformat()
    res = await client.put(
        f"/v1/customers/{customer['id']}",
        json=customer_payload(birthDate=tomorrow),
    )
    assert res.status_code == 400
    assert res.json() == {"error": "BirthDate cannot be in the future"}


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_returns_204_and_removes_customer(client, make_customer):
    customer = await make_customer()
    res = await client.delete(f"/v1/customers/{customer['id']}")
    assert res.status_code == 204
    assert res.content == b""

    res = await client.get(f"/v1/customers/{customer['id']}")
    assert res.status_code == 404


async def test_delete_twice_returns_404_second_time(client, make_customer):
    customer = await make_customer()
    first = await client.delete(f"/v1/customers/{customer['id']}")
    second = await client.delete(f"/v1/customers/{customer['id']}")
    assert first.status_code == 204
    assert second.status_code == 404
    assert second.json() == {"error": "Customer not found"}


async def test_delete_nonexistent_customer_returns_404(client):
    res = await client.delete(f"/v1/customers/{uuid4()}")
    assert res.status_code == 404


async def test_deleted_customer_email_can_be_reused(client, make_customer):
    customer = await make_customer(email="reuse@mail.com")
    await client.delete(f"/v1/customers/{customer['id']}")
    res = await client.post("/v1/customers", json=customer_payload(email="reuse@mail.com"))
    assert res.status_code == 201
