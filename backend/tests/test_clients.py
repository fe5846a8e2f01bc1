from conftest import sign_up
from ordem_express.services.client_service import CLIENT_HAS_EQUIPMENTS, CLIENT_HAS_ORDERS


def test_client_crud_round_trip(client, admin_headers):
    created = client.post(
        "/api/v1/clients/",
        json={"name": "  João Lima  ", "email": "", "phone": "11 98888-7777"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    payload = created.json()
    assert payload["name"] == "João Lima"
    assert payload["email"] is None

    client_id = payload["id"]
    listed = client.get("/api/v1/clients/", headers=admin_headers).json()
    assert [c["id"] for c in listed] == [client_id]

    updated = client.put(
        f"/api/v1/clients/{client_id}", json={"address": "Rua A, 10"}, headers=admin_headers
    )
    assert updated.status_code == 200
    assert updated.json()["address"] == "Rua A, 10"
    assert updated.json()["phone"] == "11 98888-7777"

    deleted = client.delete(f"/api/v1/clients/{client_id}", headers=admin_headers)
    assert deleted.status_code == 200
    assert client.get(f"/api/v1/clients/{client_id}", headers=admin_headers).status_code == 404


def test_client_name_is_required(client, admin_headers):
    response = client.post("/api/v1/clients/", json={"name": "   "}, headers=admin_headers)
    assert response.status_code == 422


def test_clients_are_scoped_to_owner(client, admin_headers, client_record):
    other_headers = sign_up(client, email="outra@oficina.com", name="Outra Oficina")

    assert client.get("/api/v1/clients/", headers=other_headers).json() == []
    response = client.get(f"/api/v1/clients/{client_record['id']}", headers=other_headers)
    assert response.status_code == 404
    response = client.delete(f"/api/v1/clients/{client_record['id']}", headers=other_headers)
    assert response.status_code == 404


def test_client_with_equipment_cannot_be_deleted(client, admin_headers, client_record, equipment):
    response = client.delete(f"/api/v1/clients/{client_record['id']}", headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["detail"] == CLIENT_HAS_EQUIPMENTS

    # El cliente sigue existiendo
    assert client.get(f"/api/v1/clients/{client_record['id']}", headers=admin_headers).status_code == 200


def test_client_delete_checks_equipment_before_orders(client, admin_headers, client_record, service_order):
    response = client.delete(f"/api/v1/clients/{client_record['id']}", headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["detail"] == CLIENT_HAS_EQUIPMENTS


def test_client_with_orders_cannot_be_deleted(client, admin_headers, client_record, service_order, monkeypatch):
    async def no_equipments(db, client_id):
        return 0

    monkeypatch.setattr(
        "ordem_express.crud.equipment_crud.count_equipments_by_client", no_equipments
    )
    response = client.delete(f"/api/v1/clients/{client_record['id']}", headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["detail"] == CLIENT_HAS_ORDERS
