from ordem_express.services.equipment_service import EQUIPMENT_HAS_ORDERS


def test_equipment_includes_client_name(client, admin_headers, equipment, client_record):
    listed = client.get("/api/v1/equipments/", headers=admin_headers).json()
    assert len(listed) == 1
    assert listed[0]["client"] == {"id": client_record["id"], "name": "Maria Souza"}
    assert listed[0]["model"] == "Inspiron"


def test_equipment_requires_existing_client(client, admin_headers):
    response = client.post(
        "/api/v1/equipments/",
        json={"type": "Celular", "client_id": "nao-existe"},
        headers=admin_headers,
    )
    assert response.status_code == 404


def test_equipment_type_is_required(client, admin_headers, client_record):
    response = client.post(
        "/api/v1/equipments/",
        json={"type": "", "client_id": client_record["id"]},
        headers=admin_headers,
    )
    assert response.status_code == 422


def test_equipment_with_orders_is_protected(client, admin_headers, equipment, service_order):
    response = client.delete(f"/api/v1/equipments/{equipment['id']}", headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["detail"] == EQUIPMENT_HAS_ORDERS

    other = client.post("/api/v1/clients/", json={"name": "Pedro"}, headers=admin_headers).json()
    response = client.put(
        f"/api/v1/equipments/{equipment['id']}", json={"client_id": other["id"]}, headers=admin_headers
    )
    assert response.status_code == 409


def test_equipment_update_and_delete(client, admin_headers, equipment):
    response = client.put(
        f"/api/v1/equipments/{equipment['id']}",
        json={"serial_number": "SN-001", "brand": ""},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["serial_number"] == "SN-001"
    assert response.json()["brand"] is None

    assert client.delete(f"/api/v1/equipments/{equipment['id']}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/v1/equipments/{equipment['id']}", headers=admin_headers).status_code == 404
