# tests/test_auth.py
from conftest import ANA, BRUNO, COOKIE_NAME, use_cookie

from app.services.auth_service import AuthService
from app.services.profile_service import ProfileService


# -------- Sign-up --------


def test_register_returns_numeric_user_id(client, register):
    resp = register(client)
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Usuário cadastrado com sucesso!"
    assert isinstance(body["userId"], int)


def test_register_then_login_then_read_profile(client, register):
    assert register(client).status_code == 201

    resp = client.post("/api/login", json={"email": "a@x.com", "senha": "secret123"})
    assert resp.status_code == 200
    assert resp.json() == {"message": "Login realizado com sucesso!"}

    resp = client.get("/api/perfil")
    assert resp.status_code == 200
    assert resp.json()["nome_completo"] == "Ana Silva"


def test_register_accepts_optional_profile_fields(client, register, login):
    resp = register(
        client,
        endereco="Rua das Flores",
        numero="12",
        cidade="Recife",
        estado="PE",
        whatsapp="81999990000",
        mostrar_dados_orcamento=True,
    )
    assert resp.status_code == 201
    login(client)

    profile = client.get("/api/perfil").json()
    assert profile["endereco"] == "Rua das Flores"
    assert profile["cidade"] == "Recife"
    assert profile["mostrar_dados_orcamento"] is True
    assert profile["complemento"] is None


def test_register_ignores_unknown_fields(client, register):
    assert register(client, confirmar_senha="secret123").status_code == 201


def test_register_missing_required_field(client):
    for field in ("email", "senha", "tipo_pessoa", "nome_completo", "cpf_cnpj"):
        data = {k: v for k, v in ANA.items() if k != field}
        resp = client.post("/api/cadastro", json=data)
        assert resp.status_code == 400, field
        assert resp.json() == {"error": "Campos obrigatórios faltando."}


def test_register_blank_required_field(client, register):
    resp = register(client, nome_completo="   ")
    assert resp.status_code == 400


def test_register_duplicate_email(client, register):
    assert register(client).status_code == 201

    resp = register(client, cpf_cnpj="99988877766", nome_completo="Outra Pessoa")
    assert resp.status_code == 409
    assert resp.json() == {"error": "E-mail já cadastrado."}


def test_register_duplicate_tax_id(client, register):
    assert register(client).status_code == 201

    resp = register(client, email="outra@x.com")
    assert resp.status_code == 409
    assert resp.json() == {"error": "CPF/CNPJ já cadastrado."}


def test_duplicate_email_caught_by_unique_constraint(client, register, monkeypatch):
    assert register(client).status_code == 201
    monkeypatch.setattr(AuthService, "ensure_email_free", lambda self, session, email: None)

    resp = register(client, cpf_cnpj="99988877766")
    assert resp.status_code == 409
    assert resp.json() == {"error": "E-mail ou CPF/CNPJ já cadastrado."}


def test_duplicate_tax_id_caught_by_unique_constraint_rolls_back_user(
    client, register, monkeypatch
):
    assert register(client).status_code == 201
    monkeypatch.setattr(
        ProfileService,
        "ensure_cpf_cnpj_free",
        lambda self, session, cpf_cnpj, owner_id=None: None,
    )

    resp = register(client, email="outra@x.com")
    assert resp.status_code == 409

    # The user row was part of the failed transaction.
    resp = client.post("/api/login", json={"email": "outra@x.com", "senha": ANA["senha"]})
    assert resp.status_code == 401


def test_register_stores_digest_not_password(client, register, engine):
    from sqlmodel import Session, select

    from app.models.user import User

    assert register(client).status_code == 201
    with Session(engine) as session:
        user = session.exec(select(User).where(User.email == ANA["email"])).one()
    assert user.senha != ANA["senha"]


# -------- Login --------


def test_login_sets_http_only_cookie(client, register):
    register(client)
    resp = client.post("/api/login", json={"email": ANA["email"], "senha": ANA["senha"]})
    assert resp.status_code == 200

    set_cookie = resp.headers["set-cookie"]
    assert set_cookie.startswith(f"{COOKIE_NAME}=")
    assert "HttpOnly" in set_cookie
    assert "Max-Age=86400" in set_cookie
    assert "Secure" not in set_cookie


def test_wrong_password_and_unknown_email_look_the_same(client, register):
    register(client)

    wrong_secret = client.post("/api/login", json={"email": ANA["email"], "senha": "nope"})
    unknown_email = client.post("/api/login", json={"email": "ghost@x.com", "senha": "nope"})

    assert wrong_secret.status_code == unknown_email.status_code == 401
    assert wrong_secret.json() == unknown_email.json() == {"error": "Credenciais inválidas."}
    assert "set-cookie" not in wrong_secret.headers


def test_login_missing_field(client):
    resp = client.post("/api/login", json={"email": ANA["email"]})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Campos obrigatórios faltando."}


def test_login_without_body(client):
    resp = client.post("/api/login")
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_email_is_case_sensitive(client, register):
    register(client)
    resp = client.post("/api/login", json={"email": "A@X.COM", "senha": ANA["senha"]})
    assert resp.status_code == 401


def test_two_sessions_for_one_user(client, other_client, register, login):
    register(client)
    login(client)
    login(other_client)

    assert client.get("/api/perfil").status_code == 200
    assert other_client.get("/api/perfil").status_code == 200


# -------- Logout --------


def test_logout_invalidates_session(signed_in):
    cookie = signed_in.cookies.get(COOKIE_NAME)

    resp = signed_in.post("/api/logout")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Logout realizado com sucesso!"}

    # Replay the old cookie explicitly: it must not work any more.
    use_cookie(signed_in, cookie)
    resp = signed_in.get("/api/perfil")
    assert resp.status_code == 401
    assert resp.json() == {"error": "Não autenticado."}


def test_logout_only_ends_its_own_session(client, other_client, register, login):
    register(client)
    login(client)
    login(other_client)

    assert client.post("/api/logout").status_code == 200
    assert other_client.get("/api/perfil").status_code == 200


def test_logout_clears_cookie(signed_in):
    resp = signed_in.post("/api/logout")
    set_cookie = resp.headers["set-cookie"]
    assert set_cookie.startswith(f'{COOKIE_NAME}=""') or set_cookie.startswith(f"{COOKIE_NAME}=;")
    assert "Max-Age=0" in set_cookie


def test_logout_without_session(client):
    resp = client.post("/api/logout")
    assert resp.status_code == 401
    assert resp.json() == {"error": "Não autenticado."}


def test_logout_twice(signed_in):
    cookie = signed_in.cookies.get(COOKIE_NAME)
    assert signed_in.post("/api/logout").status_code == 200

    use_cookie(signed_in, cookie)
    assert signed_in.post("/api/logout").status_code == 401


# -------- Guard --------


def test_forged_cookie_is_unauthenticated(client, register, login):
    register(client)
    cookie = login(client)
    header, payload, signature = cookie.split(".")

    use_cookie(client, f"{header}.{payload}.{signature[::-1]}")
    assert client.get("/api/perfil").status_code == 401


def test_raw_token_without_signature_is_unauthenticated(client, store, register):
    register(client)
    token = store.create(1)

    use_cookie(client, token)
    assert client.get("/api/perfil").status_code == 401


def test_expired_session_is_unauthenticated(client, store, register, login):
    register(client)
    login(client)

    store._clock = lambda: 10**12
    assert client.get("/api/perfil").status_code == 401


def test_health_check(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": "optiq-backend"}


def test_second_user_can_register(client, register):
    assert register(client).status_code == 201
    assert register(client, BRUNO).status_code == 201
