from conftest import sign_in, sign_up


def test_sign_up_creates_admin_profile(client):
    headers = sign_up(client, email="Dono@Oficina.com")

    response = client.get("/api/v1/auth/me", headers=headers)
    assert response.status_code == 200
    payload = response.json()
    assert payload["user"]["email"] == "dono@oficina.com"
    assert payload["profile"]["user_type"] == "admin"
    assert payload["profile"]["status"] == "active"


def test_sign_in_with_wrong_password_returns_401(client):
    sign_up(client)
    response = client.post(
        "/api/v1/auth/sign-in", json={"email": "dono@oficina.com", "password": "errada123"}
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "E-mail ou senha inválidos"


def test_requests_without_session_are_rejected(client):
    assert client.get("/api/v1/clients/").status_code == 401
    assert client.get("/api/v1/dashboard/").status_code == 401

    response = client.get("/api/v1/clients/", headers={"Authorization": "Bearer token-invalido"})
    assert response.status_code == 401


def test_sign_out_invalidates_token(client):
    headers = sign_up(client)
    assert client.post("/api/v1/auth/sign-out", headers=headers).status_code == 204
    assert client.get("/api/v1/auth/me", headers=headers).status_code == 401

    new_headers = sign_in(client, "dono@oficina.com", "segredo123")
    assert client.get("/api/v1/auth/me", headers=new_headers).status_code == 200


def test_duplicate_email_returns_409(client):
    sign_up(client)
    response = client.post(
        "/api/v1/auth/sign-up",
        json={"email": "dono@oficina.com", "password": "outra123", "name": "Outro"},
    )
    assert response.status_code == 409


def test_short_password_is_rejected(client):
    response = client.post(
        "/api/v1/auth/sign-up",
        json={"email": "novo@oficina.com", "password": "123", "name": "Novo"},
    )
    assert response.status_code == 422
