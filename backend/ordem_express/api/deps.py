# backend/ordem_express/api/deps.py
"""
Módulo de dependencias para FastAPI.

Este archivo centraliza todas las dependencias que pueden ser inyectadas
en los endpoints de la API:
- Sesión de base de datos por petición
- Configuración
- Contexto de aplicación (usuario y perfil autenticados)
- Exigencia de perfil administrador
"""

from typing import AsyncGenerator, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ordem_express.core.config import settings
from ordem_express.core.context import AppContext
from ordem_express.db.database import AsyncSessionLocal
from ordem_express.services.auth_service import auth_service

bearer_scheme = HTTPBearer(auto_error=False)

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependencia de FastAPI para obtener una sesión de base de datos asíncrona.
    Se asegura de que la sesión se cierre siempre después de la petición.
    """
    async with AsyncSessionLocal() as session:
        yield session

def get_settings():
    """
    Dependencia de FastAPI para obtener el objeto de configuración.
    """
    return settings

async def get_app_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> AppContext:
    """
    Resuelve el token Bearer en el contexto de la petición.
    Sin sesión válida se responde 401 antes de cualquier consulta o cambio.
    """
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Usuário não autenticado",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None or not credentials.credentials:
        raise unauthorized
    context = await auth_service.get_context(db, credentials.credentials)
    if context is None:
        raise unauthorized
    return context

async def require_admin(context: AppContext = Depends(get_app_context)) -> AppContext:
    """Solo perfiles administradores pueden gestionar técnicos."""
    if not context.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Apenas administradores podem gerenciar técnicos.",
        )
    return context
