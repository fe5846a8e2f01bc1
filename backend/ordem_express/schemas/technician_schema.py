# backend/ordem_express/schemas/technician_schema.py
"""
Esquemas Pydantic para perfiles (administradores y técnicos).
"""

import enum
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .validators import blank_to_none, check_password, require_text

class UserType(str, enum.Enum):
    """Tipos de perfil. Solo los técnicos pueden recibir órdenes de servicio."""
    ADMIN = "admin"
    TECHNICIAN = "technician"

class TechnicianStatus(str, enum.Enum):
    """Estado de actividad de un técnico."""
    ACTIVE = "active"
    INACTIVE = "inactive"

    def toggled(self) -> "TechnicianStatus":
        """Devuelve el estado opuesto (activo <-> inactivo)."""
        if self is TechnicianStatus.ACTIVE:
            return TechnicianStatus.INACTIVE
        return TechnicianStatus.ACTIVE


class TechnicianCreate(BaseModel):
    """Alta de técnico: crea la cuenta de acceso y el perfil asociado."""
    email: str
    password: str
    name: str
    phone: Optional[str] = None
    position: Optional[str] = None

    @field_validator("phone", "position", mode="before")
    @classmethod
    def empty_optional_fields(cls, v):
        return blank_to_none(v)

    @field_validator("email")
    @classmethod
    def email_required(cls, v):
        return require_text(v, "E-mail").lower()

    @field_validator("name")
    @classmethod
    def name_required(cls, v):
        return require_text(v, "Nome")

    @field_validator("password")
    @classmethod
    def password_length(cls, v):
        return check_password(v)


class TechnicianUpdate(BaseModel):
    """Edición de perfil de técnico. Todos los campos son opcionales."""
    name: Optional[str] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    status: Optional[TechnicianStatus] = None

    @field_validator("phone", "position", mode="before")
    @classmethod
    def empty_optional_fields(cls, v):
        return blank_to_none(v)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        if v is None:
            return v
        return require_text(v, "Nome")


class PasswordReset(BaseModel):
    """Nueva contraseña definida por un administrador."""
    new_password: str = Field(..., description="Nueva contraseña del técnico")

    @field_validator("new_password")
    @classmethod
    def password_length(cls, v):
        return check_password(v)


class TechnicianOption(BaseModel):
    """Referencia mínima a un técnico (selectores y detalle de OS)."""
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class ProfileResponse(BaseModel):
    """Perfil completo tal como se devuelve en la API."""
    id: str
    user_id: str
    owner_id: Optional[str] = None
    name: str
    phone: Optional[str] = None
    position: Optional[str] = None
    status: str
    user_type: str
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
