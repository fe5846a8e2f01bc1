# backend/ordem_express/api/v1/endpoints/auth.py

"""
Endpoints de autenticación: registro, inicio y cierre de sesión, y contexto actual.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from ordem_express.api import deps
from ordem_express.core.context import AppContext
from ordem_express.schemas import auth_schema
from ordem_express.schemas.technician_schema import ProfileResponse
from ordem_express.services.auth_service import auth_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/sign-up", response_model=auth_schema.SessionToken, status_code=status.HTTP_201_CREATED)
async def sign_up(
    *,
    db: AsyncSession = Depends(deps.get_db),
    sign_up_in: auth_schema.SignUpRequest,
) -> auth_schema.SessionToken:
    """Registra una cuenta de taller y devuelve su token de sesión."""
    token = await auth_service.sign_up(
        db, email=sign_up_in.email, password=sign_up_in.password, name=sign_up_in.name
    )
    return auth_schema.SessionToken(access_token=token)


@router.post("/sign-in", response_model=auth_schema.SessionToken)
async def sign_in(
    *,
    db: AsyncSession = Depends(deps.get_db),
    credentials: auth_schema.SignInRequest,
) -> auth_schema.SessionToken:
    """Inicia sesión con e-mail y contraseña."""
    token = await auth_service.sign_in(db, email=credentials.email, password=credentials.password)
    return auth_schema.SessionToken(access_token=token)


@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
) -> Response:
    """Cierra la sesión actual."""
    await auth_service.sign_out(db, context)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=auth_schema.AppContextResponse)
async def read_me(context: AppContext = Depends(deps.get_app_context)):
    """Usuario autenticado y su perfil."""
    profile = context.profile
    return auth_schema.AppContextResponse(
        user=auth_schema.UserResponse.model_validate(context.user),
        profile=ProfileResponse.model_validate(profile) if profile else None,
    )
