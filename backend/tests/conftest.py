import asyncio
import os

# La app no debe tocar la base de datos por defecto al arrancar en los tests
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ.pop("INITIAL_ADMIN_EMAIL", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ordem_express.api import deps
from ordem_express.db.database import Base, enable_sqlite_foreign_keys
from ordem_express.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="session")
def test_engine(tmp_path_factory):
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{db_path}",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    async def init_models() -> None:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(init_models())
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture(scope="session")
def async_session_maker(test_engine):
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest.fixture(autouse=True)
def clean_database(test_engine):
    async def truncate_tables() -> None:
        async with test_engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                await conn.execute(table.delete())

    asyncio.run(truncate_tables())
    yield


@pytest.fixture()
def client(async_session_maker):
    async def override_get_db():
        async with async_session_maker() as session:
            yield session

    app.dependency_overrides[deps.get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def sign_up(client, email="dono@oficina.com", name="Dono da Oficina", password="segredo123"):
    response = client.post(
        "/api/v1/auth/sign-up",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def sign_in(client, email, password):
    response = client.post("/api/v1/auth/sign-in", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
def admin_headers(client):
    return sign_up(client)


@pytest.fixture()
def technician(client, admin_headers):
    response = client.post(
        "/api/v1/technicians/",
        json={"email": "tecnico@oficina.com", "password": "tecnico123", "name": "Carlos Técnico"},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
def client_record(client, admin_headers):
    response = client.post(
        "/api/v1/clients/",
        json={"name": "Maria Souza", "phone": "11 99999-0000", "email": "maria@example.com"},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
def equipment(client, admin_headers, client_record):
    response = client.post(
        "/api/v1/equipments/",
        json={"type": "Notebook", "brand": "Dell", "model": "Inspiron", "client_id": client_record["id"]},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
def service_order(client, admin_headers, client_record, equipment, technician):
    response = client.post(
        "/api/v1/service-orders/",
        json={
            "client_id": client_record["id"],
            "equipment_id": equipment["id"],
            "technician_id": technician["id"],
            "problem_description": "Não liga",
            "value": "150,00",
        },
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
