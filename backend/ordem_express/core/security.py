# backend/ordem_express/core/security.py
"""
Utilidades de seguridad: hash de contraseñas y tokens de sesión.
"""

import secrets
from passlib.context import CryptContext

# Configuración de la seguridad para contraseñas
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verifica si una contraseña en texto plano coincide con su versión hasheada.
    """
    return pwd_context.verify(plain_password, hashed_password)


def new_session_token() -> str:
    """Token opaco para el encabezado Authorization: Bearer."""
    return secrets.token_urlsafe(32)
