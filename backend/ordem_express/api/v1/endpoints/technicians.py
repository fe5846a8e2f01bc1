# backend/ordem_express/api/v1/endpoints/technicians.py

"""
Endpoints de gestión de técnicos.

Todas las rutas exigen un perfil administrador (403 en caso contrario).
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from ordem_express.api import deps
from ordem_express.core.context import AppContext
from ordem_express.schemas import technician_schema
from ordem_express.services.technician_service import technician_service

router = APIRouter()

@router.get("/", response_model=List[technician_schema.ProfileResponse])
async def read_technicians(
    db: AsyncSession = Depends(deps.get_db),
    admin: AppContext = Depends(deps.require_admin),
):
    """Perfiles de tipo técnico, los más recientes primero."""
    return await technician_service.get_technicians(db, admin)


@router.post("/", response_model=technician_schema.ProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_technician(
    *,
    db: AsyncSession = Depends(deps.get_db),
    admin: AppContext = Depends(deps.require_admin),
    technician_in: technician_schema.TechnicianCreate,
):
    """Crea la cuenta de acceso y el perfil del técnico."""
    return await technician_service.create_technician(db, admin, technician_in)


@router.get("/{technician_id}", response_model=technician_schema.ProfileResponse)
async def read_technician(
    technician_id: str,
    db: AsyncSession = Depends(deps.get_db),
    admin: AppContext = Depends(deps.require_admin),
):
    return await technician_service.get_technician(db, admin, technician_id)


@router.put("/{technician_id}", response_model=technician_schema.ProfileResponse)
async def update_technician(
    *,
    technician_id: str,
    db: AsyncSession = Depends(deps.get_db),
    admin: AppContext = Depends(deps.require_admin),
    technician_in: technician_schema.TechnicianUpdate,
):
    return await technician_service.update_technician(db, admin, technician_id, technician_in)


@router.post("/{technician_id}/toggle-status", response_model=technician_schema.ProfileResponse)
async def toggle_technician_status(
    technician_id: str,
    db: AsyncSession = Depends(deps.get_db),
    admin: AppContext = Depends(deps.require_admin),
):
    """Alterna el técnico entre activo e inactivo."""
    return await technician_service.toggle_status(db, admin, technician_id)


@router.post("/{technician_id}/reset-password", response_model=technician_schema.ProfileResponse)
async def reset_technician_password(
    *,
    technician_id: str,
    db: AsyncSession = Depends(deps.get_db),
    admin: AppContext = Depends(deps.require_admin),
    password_in: technician_schema.PasswordReset,
):
    """Define una nueva contraseña para el técnico."""
    return await technician_service.reset_password(db, admin, technician_id, password_in)


@router.delete("/{technician_id}", response_model=technician_schema.ProfileResponse)
async def delete_technician(
    technician_id: str,
    db: AsyncSession = Depends(deps.get_db),
    admin: AppContext = Depends(deps.require_admin),
):
    """Elimina la cuenta del técnico junto con su perfil."""
    return await technician_service.delete_technician(db, admin, technician_id)
