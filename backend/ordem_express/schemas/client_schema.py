# backend/ordem_express/schemas/client_schema.py

"""
Esquemas Pydantic para el modelo Client.

Patrón de esquemas utilizado:
- ClientBase: Propiedades comunes compartidas
- ClientCreate: Para crear nuevos clientes (POST)
- ClientUpdate: Para actualizaciones parciales (PUT)
- ClientResponse: Para respuestas de la API (GET)
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from .validators import blank_to_none, require_text

# ========================================
# ESQUEMA BASE
# ========================================

class ClientBase(BaseModel):
    """Propiedades comunes compartidas entre esquemas de cliente."""
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    @field_validator("email", "phone", "address", mode="before")
    @classmethod
    def empty_optional_fields(cls, v):
        return blank_to_none(v)


# ========================================
# ESQUEMAS PARA OPERACIONES
# ========================================

class ClientCreate(ClientBase):
    """Esquema para crear un nuevo cliente. El nombre es obligatorio."""

    @field_validator("name")
    @classmethod
    def name_required(cls, v):
        return require_text(v, "Nome")


class ClientUpdate(BaseModel):
    """Esquema para actualizar un cliente. Todos los campos son opcionales."""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    @field_validator("email", "phone", "address", mode="before")
    @classmethod
    def empty_optional_fields(cls, v):
        return blank_to_none(v)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        if v is None:
            return v
        return require_text(v, "Nome")


# ========================================
# ESQUEMAS DE RESPUESTA
# ========================================

class ClientSummary(BaseModel):
    """Referencia mínima a un cliente, usada en listados y selectores."""
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class ClientContact(ClientSummary):
    """Datos de contacto del cliente tal como aparecen en la OS."""
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


class ClientResponse(ClientBase):
    """Esquema para las respuestas de la API al leer clientes."""
    id: str
    owner_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
