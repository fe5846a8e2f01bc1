from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

from ordem_express.services.print_service import format_money, render_service_order_html


def _order(**overrides):
    data = dict(
        id="12345678-aaaa-bbbb-cccc-1234abcd5678",
        short_number="abcd5678",
        client=SimpleNamespace(name="Ana & Filhos", phone=None, email="", address="Rua B"),
        equipment=SimpleNamespace(type="Impressora", brand="HP", model=None, serial_number=None),
        technician=SimpleNamespace(name="Carlos"),
        problem_description="Papel atolado",
        solution_description=None,
        value=None,
        status="awaiting_part",
        payment_status="pending",
        created_at=datetime(2024, 3, 5, 10, 0),
    )
    data.update(overrides)
    return SimpleNamespace(**data)


def test_format_money():
    assert format_money(Decimal("150")) == "R$ 150.00"
    assert format_money(None) == "Não informado"
    assert format_money(0) == "Não informado"


def test_render_document_sections():
    html = render_service_order_html(_order(), printed_at=datetime(2024, 3, 6, 9, 30))

    assert "#abcd5678" in html
    assert "Ana &amp; Filhos" in html
    assert "Aguardando peça" in html and "status-waiting" in html
    assert "Pendente" in html
    assert "05/03/2024" in html
    assert "06/03/2024 09:30:00" in html
    assert "SOLUÇÃO APLICADA" not in html
    assert html.count("Não informado") >= 4


def test_render_includes_solution_when_present():
    html = render_service_order_html(_order(solution_description="Limpeza do rolo", value=Decimal("80")))
    assert "SOLUÇÃO APLICADA" in html
    assert "Limpeza do rolo" in html
    assert "R$ 80.00" in html
