from conftest import headers

PAYLOAD = {"firstName": "Ewa", "lastName": "Nowak", "email": "ewa@example.com", "phone": "+48 600 000 000"}


def test_register_user_as_customer(client):
    resp = client.post("/api/users", json=PAYLOAD)

    assert resp.status_code == 201
    body = resp.json()
    assert body["role"] == "CUSTOMER"
    assert body["firstName"] == "Ewa"

    assert client.get(f"/api/users/{body['id']}").json()["email"] == "ewa@example.com"


def test_duplicate_email_rejected(client):
    client.post("/api/users", json=PAYLOAD)

    assert client.post("/api/users", json=PAYLOAD).status_code == 400


def test_invalid_email_rejected(client):
    assert client.post("/api/users", json={**PAYLOAD, "email": "nope"}).status_code == 422


def test_get_missing_user(client):
    assert client.get("/api/users/999").status_code == 404


def test_list_users_admin_only(client, admin, customer):
    assert client.get("/api/users", headers=headers(customer)).status_code == 403

    resp = client.get("/api/users", headers=headers(admin))
    assert resp.status_code == 200
    assert {u["id"] for u in resp.json()} == {admin.id, customer.id}


def test_admin_promotes_user(client, admin, customer):
    resp = client.put(
        f"/api/users/{customer.id}",
        json={**PAYLOAD, "role": "ADMIN"},
        headers=headers(admin),
    )

    assert resp.status_code == 200
    assert resp.json()["role"] == "ADMIN"
    assert client.get("/api/users", headers=headers(customer)).status_code == 200


def test_update_missing_user(client, admin):
    assert client.put("/api/users/999", json=PAYLOAD, headers=headers(admin)).status_code == 404
