"""Signup, login, session and access guard tests."""


def _signup(client, email, password="secret", name="Test"):
    return client.post("/api/auth/signup", json={"name": name, "email": email, "password": password})


def test_signup_returns_token_and_public_user(client):
    r = _signup(client, "ana@test.com", name="Ana")
    assert r.status_code == 200
    data = r.json()
    assert data["token"]
    assert data["user"]["email"] == "ana@test.com"
    assert data["user"]["name"] == "Ana"
    assert set(data["user"]) == {"id", "email", "name"}


def test_login_after_signup_yields_same_user(client):
    signup = _signup(client, "round@test.com", password="pw1").json()
    r = client.post("/api/auth/login", json={"email": "round@test.com", "password": "pw1"})
    assert r.status_code == 200
    assert r.json()["user"]["id"] == signup["user"]["id"]
    assert r.json()["token"] != signup["token"]


def test_signup_missing_fields(client):
    for body in (
        {"email": "x@test.com", "password": "p"},
        {"name": "X", "password": "p"},
        {"name": "X", "email": "x@test.com"},
        {"name": "", "email": "x@test.com", "password": "p"},
    ):
        r = client.post("/api/auth/signup", json=body)
        assert r.status_code == 400
        assert r.json()["error"] == "Name, email and password are required"


def test_duplicate_email_conflicts_regardless_of_other_fields(client):
    assert _signup(client, "dup@test.com", password="a", name="A").status_code == 200
    r = _signup(client, "dup@test.com", password="different", name="B")
    assert r.status_code == 400
    assert r.json()["error"] == "Email already registered"


def test_email_match_is_case_sensitive(client):
    assert _signup(client, "Case@test.com").status_code == 200
    assert _signup(client, "case@test.com").status_code == 200


def test_wrong_password_and_unknown_email_fail_identically(client):
    _signup(client, "leak@test.com", password="right")
    wrong_pw = client.post("/api/auth/login", json={"email": "leak@test.com", "password": "wrong"})
    wrong_email = client.post("/api/auth/login", json={"email": "nobody@test.com", "password": "right"})
    assert wrong_pw.status_code == wrong_email.status_code == 400
    assert wrong_pw.json() == wrong_email.json() == {"error": "Invalid email or password"}


def test_login_missing_fields(client):
    r = client.post("/api/auth/login", json={"email": "only@test.com"})
    assert r.status_code == 400


def test_password_is_not_stored_in_plaintext(client, store):
    _signup(client, "hash@test.com", password="plain-secret")
    with store.session() as db:
        user = db.users.get_by_email("hash@test.com")
    assert user.password_hash != "plain-secret"
    assert len(user.password_hash) == 128  # 512-bit digest, hex
    assert user.salt


def test_protected_route_requires_token(client):
    r = client.get("/api/profile")
    assert r.status_code == 401
    assert r.json() == {"error": "Unauthorized"}


def test_unknown_token_rejected(client):
    r = client.get("/api/profile", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401


def test_old_tokens_stay_valid_after_new_login(client):
    first = _signup(client, "multi@test.com", password="pw").json()["token"]
    second = client.post("/api/auth/login", json={"email": "multi@test.com", "password": "pw"}).json()["token"]
    for token in (first, second):
        assert client.get("/api/profile", headers={"Authorization": f"Bearer {token}"}).status_code == 200


def test_me_returns_public_user(client):
    data = _signup(client, "me@test.com", name="Me").json()
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {data['token']}"})
    assert r.status_code == 200
    assert r.json() == data["user"]


def test_logout_revokes_only_that_token(client):
    first = _signup(client, "out@test.com", password="pw").json()["token"]
    second = client.post("/api/auth/login", json={"email": "out@test.com", "password": "pw"}).json()["token"]

    r = client.post("/api/auth/logout", headers={"Authorization": f"Bearer {first}"})
    assert r.status_code == 200
    assert client.get("/api/profile", headers={"Authorization": f"Bearer {first}"}).status_code == 401
    assert client.get("/api/profile", headers={"Authorization": f"Bearer {second}"}).status_code == 200


def test_session_for_vanished_user_is_not_found(client, sessions):
    """A valid token whose user no longer exists resolves to 404, not 401."""
    sessions.put("ghost-token", "no-such-user")
    r = client.get("/api/profile", headers={"Authorization": "Bearer ghost-token"})
    assert r.status_code == 404
    assert r.json() == {"error": "User not found"}
