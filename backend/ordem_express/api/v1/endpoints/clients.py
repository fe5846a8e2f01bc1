# backend/ordem_express/api/v1/endpoints/clients.py

"""
Endpoints REST para operaciones CRUD de clientes.

Todas las rutas requieren sesión y operan solo sobre los clientes del
propietario autenticado.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from ordem_express.api import deps
from ordem_express.core.context import AppContext
from ordem_express.schemas import client_schema
from ordem_express.services.client_service import client_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/", response_model=List[client_schema.ClientResponse])
async def read_clients(
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
):
    """Clientes del propietario, los más recientes primero."""
    return await client_service.get_clients(db, context)


@router.post("/", response_model=client_schema.ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    *,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
    client_in: client_schema.ClientCreate,
):
    """Crea un nuevo cliente."""
    logger.info(f"Creando cliente '{client_in.name}'")
    return await client_service.create_client(db, context, client_in)


@router.get("/{client_id}", response_model=client_schema.ClientResponse)
async def read_client(
    client_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
):
    return await client_service.get_client(db, context, client_id)


@router.put("/{client_id}", response_model=client_schema.ClientResponse)
async def update_client(
    *,
    client_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
    client_in: client_schema.ClientUpdate,
):
    """Actualiza los campos enviados de un cliente."""
    return await client_service.update_client(db, context, client_id, client_in)


@router.delete("/{client_id}", response_model=client_schema.ClientResponse)
async def delete_client(
    client_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
):
    """Elimina un cliente sin equipos ni OS vinculados."""
    return await client_service.delete_client(db, context, client_id)
