# backend/ordem_express/api/v1/endpoints/equipments.py

"""
Endpoints REST para operaciones CRUD de equipos.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from ordem_express.api import deps
from ordem_express.core.context import AppContext
from ordem_express.schemas import equipment_schema
from ordem_express.services.equipment_service import equipment_service

router = APIRouter()

@router.get("/", response_model=List[equipment_schema.EquipmentResponse])
async def read_equipments(
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
):
    """Equipos del propietario con el nombre de su cliente."""
    return await equipment_service.get_equipments(db, context)


@router.post("/", response_model=equipment_schema.EquipmentResponse, status_code=status.HTTP_201_CREATED)
async def create_equipment(
    *,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
    equipment_in: equipment_schema.EquipmentCreate,
):
    """Registra un equipo para uno de los clientes del propietario."""
    return await equipment_service.create_equipment(db, context, equipment_in)


@router.get("/{equipment_id}", response_model=equipment_schema.EquipmentResponse)
async def read_equipment(
    equipment_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
):
    return await equipment_service.get_equipment(db, context, equipment_id)


@router.put("/{equipment_id}", response_model=equipment_schema.EquipmentResponse)
async def update_equipment(
    *,
    equipment_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
    equipment_in: equipment_schema.EquipmentUpdate,
):
    return await equipment_service.update_equipment(db, context, equipment_id, equipment_in)


@router.delete("/{equipment_id}", response_model=equipment_schema.EquipmentResponse)
async def delete_equipment(
    equipment_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
):
    """Elimina un equipo sin OS vinculadas."""
    return await equipment_service.delete_equipment(db, context, equipment_id)
