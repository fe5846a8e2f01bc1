# backend/ordem_express/schemas/validators.py
"""
Validaciones de presencia compartidas por los esquemas de formularios.

Los formularios solo exigen campos obligatorios no vacíos y longitudes
mínimas; no hay validación de formato (e-mail, teléfono) más allá de eso.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional, Any

from ordem_express.core.config import settings

TWO_PLACES = Decimal("0.01")


def blank_to_none(value: Any) -> Any:
    """Convierte cadenas vacías o con solo espacios en None."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def require_text(value: Optional[str], label: str) -> str:
    """Exige un texto no vacío y lo devuelve sin espacios alrededor."""
    if value is None or not value.strip():
        raise ValueError(f"{label} é obrigatório")
    return value.strip()


def parse_money(value: Any) -> Optional[Decimal]:
    """
    Interpreta un valor monetario (número o texto) como Decimal con dos
    decimales. Vacío equivale a "no informado". Acepta coma decimal.
    """
    value = blank_to_none(value)
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValueError("Valor inválido")
    if not amount.is_finite():
        raise ValueError("Valor inválido")
    if amount < 0:
        raise ValueError("O valor não pode ser negativo")
    return amount.quantize(TWO_PLACES)


def check_password(value: Optional[str]) -> str:
    """Longitud mínima de contraseña, común al registro y a la gestión de técnicos."""
    if value is None or len(value) < settings.MIN_PASSWORD_LENGTH:
        raise ValueError(f"A senha deve ter pelo menos {settings.MIN_PASSWORD_LENGTH} caracteres")
    return value
