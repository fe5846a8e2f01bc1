from decimal import Decimal

import pytest
from pydantic import ValidationError

from ordem_express.schemas.client_schema import ClientCreate
from ordem_express.schemas.service_order_schema import ServiceOrderFormState
from ordem_express.schemas.validators import blank_to_none, parse_money, require_text


def test_parse_money():
    assert parse_money("150,5") == Decimal("150.50")
    assert parse_money(" 99.999 ") == Decimal("100.00")
    assert parse_money(0) == Decimal("0.00")
    assert parse_money("") is None
    assert parse_money(None) is None


@pytest.mark.parametrize("value", ["-1", "abc", "NaN"])
def test_parse_money_rejects_invalid(value):
    with pytest.raises(ValueError):
        parse_money(value)


def test_require_text_and_blank_to_none():
    assert require_text("  Nome  ", "Nome") == "Nome"
    with pytest.raises(ValueError, match="Nome é obrigatório"):
        require_text("   ", "Nome")
    assert blank_to_none("  ") is None
    assert blank_to_none("x") == "x"


def test_client_create_blank_optionals_become_none():
    client = ClientCreate(name="Ana", email=" ", phone="", address=None)
    assert client.email is None and client.phone is None

    with pytest.raises(ValidationError):
        ClientCreate(name="")


def test_form_state_can_submit():
    assert not ServiceOrderFormState().can_submit
    form = ServiceOrderFormState(client_id="c", equipment_id="e", technician_id="t", problem_description="x")
    assert form.can_submit
    assert not form.model_copy(update={"technician_id": None}).can_submit


def test_password_rule_is_shared(monkeypatch):
    from ordem_express.core.config import settings
    from ordem_express.schemas.auth_schema import SignUpRequest
    from ordem_express.schemas.technician_schema import PasswordReset, TechnicianCreate

    monkeypatch.setattr(settings, "MIN_PASSWORD_LENGTH", 8)

    with pytest.raises(ValidationError):
        SignUpRequest(email="a@b.com", password="1234567", name="Ana")
    with pytest.raises(ValidationError):
        TechnicianCreate(email="t@b.com", password="1234567", name="Téc")
    with pytest.raises(ValidationError):
        PasswordReset(new_password="1234567")

    assert SignUpRequest(email="a@b.com", password="12345678", name="Ana").password == "12345678"
    assert TechnicianCreate(email="t@b.com", password="12345678", name="Téc").password == "12345678"
