"""Emergency contact and safe-word CRUD tests."""


def _signup(client, email):
    r = client.post("/api/auth/signup", json={"name": "T", "email": email, "password": "pass"})
    return {"Authorization": f"Bearer {r.json()['token']}"}


def test_create_and_list_contacts(client):
    h = _signup(client, "c1@test.com")
    r = client.post("/api/contacts", headers=h, json={"name": "Mum", "phone": "555-0100", "shareLocation": 1})
    assert r.status_code == 201
    contact = r.json()
    assert contact["id"]
    assert contact == {
        "id": contact["id"],
        "name": "Mum",
        "relationship": "",
        "phone": "555-0100",
        "email": "",
        "shareLocation": True,
    }
    client.post("/api/contacts", headers=h, json={"name": "Dad", "phone": "555-0101", "relationship": "father"})

    listed = client.get("/api/contacts", headers=h).json()
    assert [c["name"] for c in listed] == ["Mum", "Dad"]


def test_create_contact_requires_name_and_phone(client):
    h = _signup(client, "c2@test.com")
    r = client.post("/api/contacts", headers=h, json={"name": "No phone"})
    assert r.status_code == 400
    assert r.json()["error"] == "Name and phone are required"


def test_update_contact_replaces_fields(client):
    h = _signup(client, "c3@test.com")
    created = client.post(
        "/api/contacts",
        headers=h,
        json={"name": "Sam", "phone": "1", "email": "sam@test.com", "shareLocation": True},
    ).json()

    r = client.put(f"/api/contacts/{created['id']}", headers=h, json={"name": "Samuel", "phone": "2"})
    assert r.status_code == 200
    updated = r.json()
    assert updated["id"] == created["id"]
    assert updated["name"] == "Samuel"
    assert updated["email"] == ""
    assert updated["shareLocation"] is False


def test_update_unknown_contact_is_404_before_validation(client):
    h = _signup(client, "c4@test.com")
    r = client.put("/api/contacts/missing", headers=h, json={})
    assert r.status_code == 404
    assert r.json()["error"] == "Contact not found"


def test_update_contact_missing_phone(client):
    h = _signup(client, "c5@test.com")
    created = client.post("/api/contacts", headers=h, json={"name": "A", "phone": "1"}).json()
    r = client.put(f"/api/contacts/{created['id']}", headers=h, json={"name": "A"})
    assert r.status_code == 400


def test_delete_contact(client):
    h = _signup(client, "c6@test.com")
    created = client.post("/api/contacts", headers=h, json={"name": "A", "phone": "1"}).json()
    r = client.delete(f"/api/contacts/{created['id']}", headers=h)
    assert r.status_code == 204
    assert client.get("/api/contacts", headers=h).json() == []
    assert client.delete(f"/api/contacts/{created['id']}", headers=h).status_code == 404


def test_cannot_touch_another_users_contact(client):
    owner = _signup(client, "owner@test.com")
    intruder = _signup(client, "intruder@test.com")
    contact = client.post("/api/contacts", headers=owner, json={"name": "Private", "phone": "9"}).json()

    assert client.delete(f"/api/contacts/{contact['id']}", headers=intruder).status_code == 404
    r = client.put(f"/api/contacts/{contact['id']}", headers=intruder, json={"name": "X", "phone": "0"})
    assert r.status_code == 404

    assert client.get("/api/contacts", headers=owner).json() == [contact]


def test_create_safe_word_defaults(client):
    h = _signup(client, "w1@test.com")
    r = client.post("/api/safe-words", headers=h, json={"word": "Pineapple"})
    assert r.status_code == 201
    word = r.json()
    assert word["word"] == "Pineapple"
    assert word["activate"] is True
    assert word["notifyEmergencyContact"] is False
    assert word["notifyNearby"] is False
    assert word["callPolice"] is False


def test_create_safe_word_null_flags_are_off(client):
    h = _signup(client, "wnull@test.com")
    r = client.post(
        "/api/safe-words",
        headers=h,
        json={"word": "lime", "callPolice": None, "notifyNearby": None, "activate": None},
    )
    assert r.status_code == 201
    word = r.json()
    assert word["callPolice"] is False
    assert word["notifyNearby"] is False
    assert word["notifyEmergencyContact"] is False
    # Sent as null, so not the omitted-field default
    assert word["activate"] is False


def test_create_safe_word_requires_word(client):
    h = _signup(client, "w2@test.com")
    r = client.post("/api/safe-words", headers=h, json={"callPolice": True})
    assert r.status_code == 400
    assert r.json()["error"] == "Word is required"


def test_update_safe_word_is_partial(client):
    h = _signup(client, "w3@test.com")
    word = client.post("/api/safe-words", headers=h, json={"word": "mango", "callPolice": True}).json()

    r = client.put(f"/api/safe-words/{word['id']}", headers=h, json={"activate": False})
    assert r.status_code == 200
    updated = r.json()
    assert updated["activate"] is False
    assert updated["callPolice"] is True
    assert updated["word"] == "mango"


def test_update_safe_word_cannot_change_id(client):
    h = _signup(client, "w4@test.com")
    word = client.post("/api/safe-words", headers=h, json={"word": "plum"}).json()
    updated = client.put(f"/api/safe-words/{word['id']}", headers=h, json={"id": "hijack", "word": "pear"}).json()
    assert updated["id"] == word["id"]
    assert updated["word"] == "pear"


def test_safe_word_unknown_id(client):
    h = _signup(client, "w5@test.com")
    assert client.put("/api/safe-words/nope", headers=h, json={"activate": True}).status_code == 404
    assert client.delete("/api/safe-words/nope", headers=h).status_code == 404


def test_delete_safe_word(client):
    h = _signup(client, "w6@test.com")
    word = client.post("/api/safe-words", headers=h, json={"word": "fig"}).json()
    assert client.delete(f"/api/safe-words/{word['id']}", headers=h).status_code == 204
    assert client.get("/api/safe-words", headers=h).json() == []
