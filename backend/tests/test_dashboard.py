from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

from ordem_express.services.dashboard_service import calculate_stats


def _order(status, payment_status, value, created_at):
    return SimpleNamespace(status=status, payment_status=payment_status, value=value, created_at=created_at)


def test_calculate_stats():
    today = datetime(2024, 5, 20)
    orders = [
        _order("in_progress", "pending", Decimal("100.00"), datetime(2024, 5, 2)),
        _order("awaiting_part", "pending", None, datetime(2024, 5, 3)),
        _order("completed", "paid", Decimal("250.50"), datetime(2024, 5, 10)),
        _order("delivered", "paid", Decimal("80.00"), datetime(2024, 4, 28)),
    ]

    stats = calculate_stats(orders, today=today)

    assert stats.total_orders == 4
    assert stats.open_orders == 2
    assert stats.completed_orders == 2
    assert stats.pending_payments == 2
    # Solo cuenta lo pagado dentro del mes en curso
    assert stats.monthly_revenue == 250.5


def test_calculate_stats_empty():
    stats = calculate_stats([])
    assert stats.total_orders == 0
    assert stats.monthly_revenue == 0.0


def test_dashboard_endpoint(client, admin_headers, service_order):
    client.put(
        f"/api/v1/service-orders/{service_order['id']}",
        json={"status": "completed", "payment_status": "paid"},
        headers=admin_headers,
    )

    response = client.get("/api/v1/dashboard/", headers=admin_headers)
    assert response.status_code == 200
    payload = response.json()
    assert payload["profile"]["user_type"] == "admin"
    assert [o["id"] for o in payload["recent_orders"]] == [service_order["id"]]
    assert payload["recent_orders"][0]["equipment"]["brand"] == "Dell"
    assert payload["stats"]["total_orders"] == 1
    assert payload["stats"]["completed_orders"] == 1
    assert payload["stats"]["pending_payments"] == 0
    assert payload["stats"]["monthly_revenue"] == 150.0
