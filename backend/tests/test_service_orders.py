from conftest import sign_in, sign_up

from ordem_express.services.service_order_service import filter_service_orders


def test_new_order_starts_in_progress_and_pending(service_order, client_record, equipment, technician):
    assert service_order["status"] == "in_progress"
    assert service_order["payment_status"] == "pending"
    assert service_order["value"] == 150.0
    assert service_order["status_badge"] == {"label": "Em andamento", "css_class": "status-in-progress"}
    assert service_order["payment_badge"] == {"label": "Pendente", "css_class": "status-pending"}
    assert service_order["client"]["name"] == client_record["name"]
    assert service_order["equipment"]["type"] == equipment["type"]
    assert service_order["technician"] == {"id": technician["id"], "name": "Carlos Técnico"}


def test_order_requires_all_selections(client, admin_headers, client_record, equipment):
    response = client.post(
        "/api/v1/service-orders/",
        json={
            "client_id": client_record["id"],
            "equipment_id": equipment["id"],
            "technician_id": "",
            "problem_description": "Tela quebrada",
        },
        headers=admin_headers,
    )
    assert response.status_code == 422


def test_order_rejects_negative_value(client, admin_headers, client_record, equipment, technician):
    response = client.post(
        "/api/v1/service-orders/",
        json={
            "client_id": client_record["id"],
            "equipment_id": equipment["id"],
            "technician_id": technician["id"],
            "problem_description": "Tela quebrada",
            "value": "-10",
        },
        headers=admin_headers,
    )
    assert response.status_code == 422


def test_equipment_must_belong_to_client(client, admin_headers, equipment, technician):
    other = client.post("/api/v1/clients/", json={"name": "Pedro"}, headers=admin_headers).json()
    response = client.post(
        "/api/v1/service-orders/",
        json={
            "client_id": other["id"],
            "equipment_id": equipment["id"],
            "technician_id": technician["id"],
            "problem_description": "Tela quebrada",
        },
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_only_technicians_can_be_assigned(client, admin_headers, client_record, equipment):
    admin_profile = client.get("/api/v1/auth/me", headers=admin_headers).json()["profile"]
    response = client.post(
        "/api/v1/service-orders/",
        json={
            "client_id": client_record["id"],
            "equipment_id": equipment["id"],
            "technician_id": admin_profile["id"],
            "problem_description": "Tela quebrada",
        },
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_statuses_can_be_set_freely(client, admin_headers, service_order):
    url = f"/api/v1/service-orders/{service_order['id']}"

    response = client.put(url, json={"status": "delivered", "payment_status": "paid"}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["status_badge"] == {"label": "Entregue", "css_class": "status-delivered"}
    assert response.json()["payment_badge"] == {"label": "Pago", "css_class": "status-completed"}

    response = client.put(url, json={"status": "in_progress"}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["status"] == "in_progress"
    assert response.json()["payment_status"] == "paid"

    response = client.put(url, json={"status": "cancelled"}, headers=admin_headers)
    assert response.status_code == 422


def test_update_solution_and_value(client, admin_headers, service_order):
    response = client.put(
        f"/api/v1/service-orders/{service_order['id']}",
        json={"solution_description": "Troca da fonte", "value": "89.9"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["solution_description"] == "Troca da fonte"
    assert response.json()["value"] == 89.9
    assert response.json()["problem_description"] == "Não liga"


def test_list_filters_by_status_and_client(client, admin_headers, service_order, client_record):
    url = "/api/v1/service-orders/"
    assert len(client.get(url, headers=admin_headers).json()) == 1
    assert len(client.get(url, params={"status": "all", "client_id": "all"}, headers=admin_headers).json()) == 1
    assert len(client.get(url, params={"status": "in_progress"}, headers=admin_headers).json()) == 1
    assert client.get(url, params={"status": "completed"}, headers=admin_headers).json() == []
    assert len(client.get(url, params={"client_id": client_record["id"]}, headers=admin_headers).json()) == 1
    assert client.get(url, params={"client_id": "outro"}, headers=admin_headers).json() == []


def test_orders_are_scoped_to_owner(client, service_order):
    other_headers = sign_up(client, email="outra@oficina.com", name="Outra Oficina")
    assert client.get("/api/v1/service-orders/", headers=other_headers).json() == []
    response = client.get(f"/api/v1/service-orders/{service_order['id']}", headers=other_headers)
    assert response.status_code == 404


def test_form_options_follow_selected_client(client, admin_headers, client_record, equipment, technician):
    other = client.post("/api/v1/clients/", json={"name": "Pedro"}, headers=admin_headers).json()

    response = client.post("/api/v1/service-orders/form", json={}, headers=admin_headers)
    assert response.status_code == 200
    options = response.json()
    assert {c["name"] for c in options["clients"]} == {"Maria Souza", "Pedro"}
    assert options["equipments"] == []
    assert [t["id"] for t in options["technicians"]] == [technician["id"]]
    assert options["can_submit"] is False

    form = {
        "client_id": client_record["id"],
        "equipment_id": equipment["id"],
        "technician_id": technician["id"],
        "problem_description": "Não liga",
    }
    options = client.post("/api/v1/service-orders/form", json=form, headers=admin_headers).json()
    assert [e["id"] for e in options["equipments"]] == [equipment["id"]]
    assert options["can_submit"] is True

    # Al cambiar de cliente el equipo elegido deja de ser válido
    form["client_id"] = other["id"]
    options = client.post("/api/v1/service-orders/form", json=form, headers=admin_headers).json()
    assert options["equipments"] == []
    assert options["form"]["equipment_id"] is None
    assert options["can_submit"] is False


def test_form_cannot_submit_without_problem(client, admin_headers, client_record, equipment, technician):
    form = {
        "client_id": client_record["id"],
        "equipment_id": equipment["id"],
        "technician_id": technician["id"],
        "problem_description": "   ",
    }
    options = client.post("/api/v1/service-orders/form", json=form, headers=admin_headers).json()
    assert options["can_submit"] is False


def test_print_document_escapes_fields(client, admin_headers, client_record, equipment, technician):
    order = client.post(
        "/api/v1/service-orders/",
        json={
            "client_id": client_record["id"],
            "equipment_id": equipment["id"],
            "technician_id": technician["id"],
            "problem_description": "<script>alert(1)</script>",
        },
        headers=admin_headers,
    ).json()

    response = client.get(f"/api/v1/service-orders/{order['id']}/print", headers=admin_headers)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "<script>alert(1)</script>" not in html
    assert f"#{order['id'][-8:]}" in html
    assert "Maria Souza" in html
    assert "Em andamento" in html
    assert "window.print()" in html
    assert "sistema Ordem Express" in html


def test_media_files_and_signature(client, admin_headers, service_order):
    base = f"/api/v1/service-orders/{service_order['id']}"

    media = client.post(
        f"{base}/media",
        json={"file_url": "https://storage.example.com/foto.jpg", "file_type": "image/jpeg"},
        headers=admin_headers,
    )
    assert media.status_code == 201
    assert len(client.get(f"{base}/media", headers=admin_headers).json()) == 1

    assert client.get(f"{base}/signature", headers=admin_headers).status_code == 404
    first = client.put(f"{base}/signature", json={"signature_url": "data:image/png;base64,AAA"},
                       headers=admin_headers)
    assert first.status_code == 200
    second = client.put(f"{base}/signature", json={"signature_url": "data:image/png;base64,BBB"},
                        headers=admin_headers)
    assert second.json()["id"] == first.json()["id"]
    assert client.get(f"{base}/signature", headers=admin_headers).json()["signature_url"].endswith("BBB")

    media_id = media.json()["id"]
    assert client.delete(f"{base}/media/{media_id}", headers=admin_headers).status_code == 200
    assert client.get(f"{base}/media", headers=admin_headers).json() == []


def test_delete_order_removes_attachments(client, admin_headers, service_order, equipment):
    base = f"/api/v1/service-orders/{service_order['id']}"
    client.post(f"{base}/media", json={"file_url": "https://x/y.jpg", "file_type": "image/jpeg"},
                headers=admin_headers)

    assert client.delete(base, headers=admin_headers).status_code == 200
    assert client.get(base, headers=admin_headers).status_code == 404
    # Sin OS, el equipo ya puede borrarse
    assert client.delete(f"/api/v1/equipments/{equipment['id']}", headers=admin_headers).status_code == 200


class _Order:
    def __init__(self, status, client_id):
        self.status = status
        self.client_id = client_id


def test_filter_service_orders():
    orders = [_Order("in_progress", "a"), _Order("completed", "a"), _Order("in_progress", "b")]

    assert filter_service_orders(orders) == orders
    assert filter_service_orders(orders, status_filter="all", client_id="all") == orders
    assert filter_service_orders(orders, status_filter="in_progress") == [orders[0], orders[2]]
    assert filter_service_orders(orders, client_id="a") == orders[:2]
    assert filter_service_orders(orders, status_filter="in_progress", client_id="b") == [orders[2]]
    assert filter_service_orders(orders, status_filter="delivered") == []


def test_foreign_technician_cannot_be_assigned(client, technician):
    other_headers = sign_up(client, email="outra@oficina.com", name="Outra Oficina")
    other_client = client.post("/api/v1/clients/", json={"name": "Pedro"}, headers=other_headers).json()
    other_equipment = client.post(
        "/api/v1/equipments/",
        json={"type": "Celular", "client_id": other_client["id"]},
        headers=other_headers,
    ).json()

    options = client.post("/api/v1/service-orders/form", json={}, headers=other_headers).json()
    assert options["technicians"] == []

    response = client.post(
        "/api/v1/service-orders/",
        json={
            "client_id": other_client["id"],
            "equipment_id": other_equipment["id"],
            "technician_id": technician["id"],
            "problem_description": "Tela quebrada",
        },
        headers=other_headers,
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Técnico não encontrado"


def test_technician_sees_own_shop_technicians(client, technician):
    headers = sign_in(client, "tecnico@oficina.com", "tecnico123")
    options = client.post("/api/v1/service-orders/form", json={}, headers=headers).json()
    assert [t["id"] for t in options["technicians"]] == [technician["id"]]
