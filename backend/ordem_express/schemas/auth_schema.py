# backend/ordem_express/schemas/auth_schema.py
"""
Esquemas de entrada y salida para la autenticación.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from .technician_schema import ProfileResponse
from .validators import check_password, require_text

class SignInRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return require_text(v, "E-mail").lower()


class SignUpRequest(SignInRequest):
    """Registro de una nueva cuenta de taller (perfil administrador)."""
    name: str

    @field_validator("name")
    @classmethod
    def name_required(cls, v):
        return require_text(v, "Nome")

    @field_validator("password")
    @classmethod
    def password_length(cls, v):
        return check_password(v)


class SessionToken(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserResponse(BaseModel):
    id: str
    email: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AppContextResponse(BaseModel):
    """Usuario autenticado y su perfil."""
    user: UserResponse
    profile: Optional[ProfileResponse] = None
