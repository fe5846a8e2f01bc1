# backend/ordem_express/schemas/equipment_schema.py
"""
Se encarga de definir los esquemas Pydantic para el modelo Equipment.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from .client_schema import ClientSummary
from .validators import blank_to_none, require_text

class EquipmentBase(BaseModel):
    """Propiedades base de un equipo."""
    type: str
    brand: Optional[str] = None
    model: Optional[str] = None
    serial_number: Optional[str] = None
    observations: Optional[str] = None
    client_id: str

    # El campo se llama "model" como la columna; se libera el prefijo protegido de Pydantic
    model_config = ConfigDict(protected_namespaces=())

    @field_validator("brand", "model", "serial_number", "observations", mode="before")
    @classmethod
    def empty_optional_fields(cls, v):
        return blank_to_none(v)


class EquipmentCreate(EquipmentBase):
    """Esquema para registrar un equipo. Tipo y cliente son obligatorios."""

    @field_validator("type")
    @classmethod
    def type_required(cls, v):
        return require_text(v, "Tipo")

    @field_validator("client_id")
    @classmethod
    def client_required(cls, v):
        return require_text(v, "Cliente")


class EquipmentUpdate(BaseModel):
    """Actualización parcial de un equipo."""
    type: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    serial_number: Optional[str] = None
    observations: Optional[str] = None
    client_id: Optional[str] = None

    model_config = ConfigDict(protected_namespaces=())

    @field_validator("brand", "model", "serial_number", "observations", mode="before")
    @classmethod
    def empty_optional_fields(cls, v):
        return blank_to_none(v)

    @field_validator("type", "client_id")
    @classmethod
    def not_blank(cls, v, info):
        if v is None:
            return v
        return require_text(v, "Tipo" if info.field_name == "type" else "Cliente")


class EquipmentSummary(BaseModel):
    """Datos del equipo tal como aparecen en la OS."""
    id: str
    type: str
    brand: Optional[str] = None
    model: Optional[str] = None
    serial_number: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, protected_namespaces=())


class EquipmentOption(BaseModel):
    """Opción del selector de equipos al abrir una OS."""
    id: str
    type: str
    brand: Optional[str] = None
    model: Optional[str] = None
    client_id: str

    model_config = ConfigDict(from_attributes=True, protected_namespaces=())


class EquipmentResponse(EquipmentBase):
    """Esquema de respuesta de un equipo, con el nombre de su cliente."""
    id: str
    owner_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    client: Optional[ClientSummary] = None

    model_config = ConfigDict(from_attributes=True, protected_namespaces=())
