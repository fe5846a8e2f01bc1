# backend/ordem_express/schemas/service_order_schema.py
"""
Se encarga de definir los esquemas Pydantic para las órdenes de servicio (OS)
y sus adjuntos.
"""

import enum
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from ordem_express.services import status_badges
from .client_schema import ClientContact, ClientSummary
from .equipment_schema import EquipmentSummary, EquipmentOption
from .technician_schema import TechnicianOption
from .validators import blank_to_none, parse_money, require_text

class ServiceOrderStatus(str, enum.Enum):
    """Define los posibles estados de una orden de servicio."""
    IN_PROGRESS = "in_progress"
    AWAITING_PART = "awaiting_part"
    COMPLETED = "completed"
    DELIVERED = "delivered"

class PaymentStatus(str, enum.Enum):
    """Estado de pago de la OS."""
    PENDING = "pending"
    PAID = "paid"


# Estados agrupados para las estadísticas del panel
OPEN_STATUSES = (ServiceOrderStatus.IN_PROGRESS.value, ServiceOrderStatus.AWAITING_PART.value)
CLOSED_STATUSES = (ServiceOrderStatus.COMPLETED.value, ServiceOrderStatus.DELIVERED.value)


class Badge(BaseModel):
    """Etiqueta visible y clase de estilo de un estado."""
    label: str
    css_class: str


class ServiceOrderCreate(BaseModel):
    """Esquema para abrir una OS. Cliente, equipo, técnico y problema son obligatorios."""
    client_id: str = Field(..., description="ID del cliente")
    equipment_id: str = Field(..., description="ID del equipo (debe pertenecer al cliente)")
    technician_id: str = Field(..., description="ID del perfil técnico asignado")
    problem_description: str = Field(..., description="Descripción del problema")
    value: Optional[Decimal] = Field(None, description="Valor del servicio")

    @field_validator("client_id", "equipment_id", "technician_id")
    @classmethod
    def selection_required(cls, v, info):
        labels = {"client_id": "Cliente", "equipment_id": "Equipamento", "technician_id": "Técnico"}
        return require_text(v, labels[info.field_name])

    @field_validator("problem_description")
    @classmethod
    def problem_required(cls, v):
        return require_text(v, "Descrição do problema")

    @field_validator("value", mode="before")
    @classmethod
    def money(cls, v):
        return parse_money(v)


class ServiceOrderUpdate(BaseModel):
    """
    Actualización parcial de una OS. Los estados se asignan libremente:
    no hay tabla de transiciones.
    """
    client_id: Optional[str] = None
    equipment_id: Optional[str] = None
    technician_id: Optional[str] = None
    problem_description: Optional[str] = None
    solution_description: Optional[str] = None
    value: Optional[Decimal] = None
    status: Optional[ServiceOrderStatus] = None
    payment_status: Optional[PaymentStatus] = None

    @field_validator("solution_description", mode="before")
    @classmethod
    def empty_solution(cls, v):
        return blank_to_none(v)

    @field_validator("client_id", "equipment_id", "technician_id", "problem_description")
    @classmethod
    def not_blank(cls, v, info):
        if v is None:
            return v
        return require_text(v, info.field_name)

    @field_validator("value", mode="before")
    @classmethod
    def money(cls, v):
        return parse_money(v)


class ServiceOrderResponse(BaseModel):
    """Esquema completo de respuesta para una OS, con datos relacionados."""
    id: str
    owner_id: str
    client_id: str
    equipment_id: str
    technician_id: str
    problem_description: str
    solution_description: Optional[str] = None
    value: Optional[float] = None
    status: str
    payment_status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    client: Optional[ClientContact] = None
    equipment: Optional[EquipmentSummary] = None
    technician: Optional[TechnicianOption] = None

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def status_badge(self) -> Badge:
        label, css_class = status_badges.status_badge(self.status)
        return Badge(label=label, css_class=css_class)

    @computed_field
    @property
    def payment_badge(self) -> Badge:
        label, css_class = status_badges.payment_badge(self.payment_status)
        return Badge(label=label, css_class=css_class)


# ========================================
# FORMULARIO DE ALTA (SELECTORES EN CASCADA)
# ========================================

class ServiceOrderFormState(BaseModel):
    """Estado parcial del formulario de alta de OS."""
    client_id: Optional[str] = None
    equipment_id: Optional[str] = None
    technician_id: Optional[str] = None
    problem_description: Optional[str] = None
    value: Optional[str] = None

    @field_validator("client_id", "equipment_id", "technician_id", mode="before")
    @classmethod
    def empty_selection(cls, v):
        return blank_to_none(v)

    @property
    def can_submit(self) -> bool:
        """Solo se puede enviar con cliente, equipo, técnico y problema informados."""
        return bool(
            self.client_id
            and self.equipment_id
            and self.technician_id
            and self.problem_description
            and self.problem_description.strip()
        )


class ServiceOrderFormOptions(BaseModel):
    """Listas para los selectores y estado normalizado del formulario."""
    clients: List[ClientSummary] = []
    equipments: List[EquipmentOption] = []
    technicians: List[TechnicianOption] = []
    form: ServiceOrderFormState
    can_submit: bool


# ========================================
# ADJUNTOS
# ========================================

class MediaFileCreate(BaseModel):
    file_url: str
    file_type: str
    file_name: Optional[str] = None

    @field_validator("file_url", "file_type")
    @classmethod
    def required(cls, v, info):
        return require_text(v, info.field_name)

    @field_validator("file_name", mode="before")
    @classmethod
    def empty_name(cls, v):
        return blank_to_none(v)


class MediaFileResponse(MediaFileCreate):
    id: str
    service_order_id: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SignatureUpdate(BaseModel):
    signature_url: str

    @field_validator("signature_url")
    @classmethod
    def required(cls, v):
        return require_text(v, "Assinatura")


class SignatureResponse(SignatureUpdate):
    id: str
    service_order_id: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
