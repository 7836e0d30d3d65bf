"""
Tests for registration and login endpoints.
"""
from backpacker.models.user import USERNAME_MAX_LENGTH, User


def test_register(client):
    """Test user registration."""
    response = client.post(
        "/api/users/register",
        json={
            "username": "testuser",
            "email": "Test@Example.com",
            "password": "testpassword123"
        }
    )
    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User registered successfully"
    assert data["user"]["username"] == "testuser"
    assert data["user"]["email"] == "test@example.com"
    assert "id" in data["user"]
    assert "createdAt" in data["user"]
    assert "password" not in data["user"]
    assert "hashedPassword" not in data["user"]


def test_register_missing_fields(client):
    response = client.post(
        "/api/users/register",
        json={"username": "testuser", "password": "testpassword123"}
    )
    assert response.status_code == 400
    assert response.json()["code"] == "MISSING_FIELDS"
    assert "email" in response.json()["message"]


def test_register_blank_username_is_missing(client):
    response = client.post(
        "/api/users/register",
        json={"username": "   ", "email": "a@example.com", "password": "testpassword123"}
    )
    assert response.status_code == 400
    assert response.json()["code"] == "MISSING_FIELDS"


def test_register_password_length_boundary(client):
    """Five characters is too short, six is enough."""
    short = client.post(
        "/api/users/register",
        json={"username": "shorty", "email": "short@example.com", "password": "12345"}
    )
    assert short.status_code == 400
    assert short.json()["code"] == "WEAK_CREDENTIAL"

    ok = client.post(
        "/api/users/register",
        json={"username": "shorty", "email": "short@example.com", "password": "123456"}
    )
    assert ok.status_code == 201


def test_register_duplicate_email(client):
    """Same email, different username is rejected as an email conflict."""
    first = client.post(
        "/api/users/register",
        json={"username": "first", "email": "dup@example.com", "password": "secret123"}
    )
    assert first.status_code == 201

    second = client.post(
        "/api/users/register",
        json={"username": "second", "email": "DUP@example.com", "password": "secret123"}
    )
    assert second.status_code == 400
    assert second.json()["code"] == "DUPLICATE_IDENTITY"
    assert second.json()["message"] == "Email already in use"


def test_register_duplicate_username(client):
    client.post(
        "/api/users/register",
        json={"username": "taken", "email": "one@example.com", "password": "secret123"}
    )
    response = client.post(
        "/api/users/register",
        json={"username": "taken", "email": "two@example.com", "password": "secret123"}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Username already taken"


def test_register_invalid_email(client):
    response = client.post(
        "/api/users/register",
        json={"username": "bademail", "email": "not-an-email", "password": "secret123"}
    )
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert "email" in response.json()["errors"]


def test_login_with_username_and_email(client):
    """Test user login by either identifier."""
    client.post(
        "/api/users/register",
        json={"username": "testuser2", "email": "test2@example.com", "password": "testpassword123"}
    )

    by_username = client.post(
        "/api/users/login",
        json={"username": "testuser2", "password": "testpassword123"}
    )
    assert by_username.status_code == 200
    data = by_username.json()
    assert data["message"] == "Login successful"
    assert data["user"]["username"] == "testuser2"
    assert data["tokenType"] == "bearer"
    assert data["accessToken"]

    by_email = client.post(
        "/api/users/login",
        json={"email": "TEST2@example.com", "password": "testpassword123"}
    )
    assert by_email.status_code == 200


def test_login_invalid_credentials_are_undifferentiated(client):
    client.post(
        "/api/users/register",
        json={"username": "testuser3", "email": "test3@example.com", "password": "testpassword123"}
    )
    wrong_password = client.post(
        "/api/users/login",
        json={"username": "testuser3", "password": "wrongpassword"}
    )
    unknown_user = client.post(
        "/api/users/login",
        json={"username": "nonexistent", "password": "wrongpassword"}
    )
    assert wrong_password.status_code == 400
    assert unknown_user.status_code == 400
    assert wrong_password.json() == unknown_user.json()
    assert wrong_password.json()["code"] == "INVALID_CREDENTIALS"


def test_login_missing_fields(client):
    response = client.post("/api/users/login", json={"password": "whatever"})
    assert response.status_code == 400
    assert response.json()["code"] == "MISSING_FIELDS"


def test_list_users_excludes_secrets(client, register_user):
    register_user("alice")
    register_user("bobby")

    response = client.get("/api/users")
    assert response.status_code == 200
    users = response.json()
    assert {u["username"] for u in users} == {"alice", "bobby"}
    for user in users:
        assert set(user) == {"id", "username", "email", "createdAt"}


def test_me_requires_token(client, register_user):
    user, headers = register_user("carol")

    assert client.get("/api/users/me").status_code == 401
    bad = client.get("/api/users/me", headers={"Authorization": "Bearer not-a-token"})
    assert bad.status_code == 401
    assert bad.json()["code"] == "NOT_AUTHENTICATED"

    me = client.get("/api/users/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["id"] == user["id"]


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").status_code == 200


def test_register_at_maximum_lengths(client):
    """The longest accepted username and a long email both fit their columns."""
    username = "u" * USERNAME_MAX_LENGTH
    email = "a" * 64 + "@" + "b" * 60 + "." + "c" * 20 + ".com"
    response = client.post(
        "/api/users/register",
        json={"username": username, "email": email, "password": "secret123"}
    )
    assert response.status_code == 201
    assert response.json()["user"]["username"] == username
    assert len(email) <= User.__table__.c.email.type.length

    too_long = client.post(
        "/api/users/register",
        json={"username": username + "u", "email": "other@example.com", "password": "secret123"}
    )
    assert too_long.status_code == 400
    assert too_long.json()["code"] == "VALIDATION_ERROR"
    assert "username" in too_long.json()["errors"]
