# backend/ordem_express/services/status_badges.py
"""
Etiquetas y estilos fijos para los estados de una orden de servicio.

Cada valor conocido se asocia a exactamente una etiqueta y una clase CSS;
cualquier otro valor se muestra tal cual con el estilo genérico.
"""

from typing import Dict, Tuple

GENERIC_BADGE_CLASS = "status-outline"

STATUS_BADGES: Dict[str, Tuple[str, str]] = {
    "in_progress": ("Em andamento", "status-in-progress"),
    "awaiting_part": ("Aguardando peça", "status-waiting"),
    "completed": ("Finalizado", "status-completed"),
    "delivered": ("Entregue", "status-delivered"),
}

PAYMENT_BADGES: Dict[str, Tuple[str, str]] = {
    "paid": ("Pago", "status-completed"),
    "pending": ("Pendente", "status-pending"),
}


def _value_of(status) -> str:
    # Acepta tanto enums (str, Enum) como cadenas
    return getattr(status, "value", status)


def status_badge(status) -> Tuple[str, str]:
    """Devuelve (etiqueta, clase_css) para el estado de la OS."""
    value = _value_of(status)
    return STATUS_BADGES.get(value, (str(value), GENERIC_BADGE_CLASS))


def payment_badge(payment_status) -> Tuple[str, str]:
    """Devuelve (etiqueta, clase_css) para el estado de pago."""
    value = _value_of(payment_status)
    return PAYMENT_BADGES.get(value, (str(value), GENERIC_BADGE_CLASS))
