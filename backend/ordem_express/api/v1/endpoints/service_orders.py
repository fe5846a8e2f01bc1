# backend/ordem_express/api/v1/endpoints/service_orders.py

"""
Endpoints REST para órdenes de servicio (OS).

Incluye:
- CRUD de OS con filtros por estado y cliente
- Opciones del formulario de alta (selectores en cascada)
- Documento de impresión en HTML
- Archivos multimedia y firma de cada OS
"""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from ordem_express.api import deps
from ordem_express.core.context import AppContext
from ordem_express.schemas import service_order_schema
from ordem_express.services.print_service import render_service_order_html
from ordem_express.services.service_order_service import service_order_service

logger = logging.getLogger(__name__)
router = APIRouter()

# ========================================
# CONSULTA Y FORMULARIO
# ========================================

@router.get("/", response_model=List[service_order_schema.ServiceOrderResponse])
async def read_service_orders(
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
    status_filter: Optional[str] = Query(None, alias="status", description="Estado de la OS o 'all'"),
    client_id: Optional[str] = Query(None, description="ID del cliente o 'all'"),
):
    """
    OS del propietario, las más recientes primero.

    Los filtros se combinan: una OS aparece solo si cumple ambos.
    """
    return await service_order_service.get_orders(
        db, context, status_filter=status_filter, client_id=client_id
    )


@router.post("/form", response_model=service_order_schema.ServiceOrderFormOptions)
async def read_form_options(
    *,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
    form: service_order_schema.ServiceOrderFormState,
):
    """Listas de clientes, equipos del cliente elegido y técnicos para el formulario de alta."""
    return await service_order_service.get_form_options(db, context, form)


@router.get("/{order_id}", response_model=service_order_schema.ServiceOrderResponse)
async def read_service_order(
    order_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
):
    return await service_order_service.get_order(db, context, order_id)


@router.get("/{order_id}/print", response_class=HTMLResponse)
async def print_service_order(
    order_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
    app_settings=Depends(deps.get_settings),
):
    """Documento HTML listo para imprimir."""
    order = await service_order_service.get_order(db, context, order_id)
    logger.info(f"Generando documento de impresión para la OS {order_id}")
    return HTMLResponse(content=render_service_order_html(order, system_name=app_settings.PRINT_SYSTEM_NAME))

# ========================================
# ESCRITURA
# ========================================

@router.post("/", response_model=service_order_schema.ServiceOrderResponse, status_code=status.HTTP_201_CREATED)
async def create_service_order(
    *,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
    order_in: service_order_schema.ServiceOrderCreate,
):
    """Abre una OS nueva: en andamento y con pago pendiente."""
    return await service_order_service.create_order(db, context, order_in)


@router.put("/{order_id}", response_model=service_order_schema.ServiceOrderResponse)
async def update_service_order(
    *,
    order_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
    order_in: service_order_schema.ServiceOrderUpdate,
):
    """Actualiza los campos enviados, estados incluidos."""
    return await service_order_service.update_order(db, context, order_id, order_in)


@router.delete("/{order_id}", response_model=service_order_schema.ServiceOrderResponse)
async def delete_service_order(
    order_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
):
    return await service_order_service.delete_order(db, context, order_id)

# ========================================
# ADJUNTOS (MULTIMEDIA Y FIRMA)
# ========================================

@router.get("/{order_id}/media", response_model=List[service_order_schema.MediaFileResponse])
async def read_media_files(
    order_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
):
    return await service_order_service.get_media_files(db, context, order_id)


@router.post("/{order_id}/media", response_model=service_order_schema.MediaFileResponse,
             status_code=status.HTTP_201_CREATED)
async def add_media_file(
    *,
    order_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
    media_in: service_order_schema.MediaFileCreate,
):
    """Registra un archivo (foto, vídeo...) ya subido al almacenamiento."""
    return await service_order_service.add_media_file(db, context, order_id, media_in)


@router.delete("/{order_id}/media/{media_id}", response_model=service_order_schema.MediaFileResponse)
async def delete_media_file(
    order_id: str,
    media_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
):
    return await service_order_service.delete_media_file(db, context, order_id, media_id)


@router.get("/{order_id}/signature", response_model=service_order_schema.SignatureResponse)
async def read_signature(
    order_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
):
    return await service_order_service.get_signature(db, context, order_id)


@router.put("/{order_id}/signature", response_model=service_order_schema.SignatureResponse)
async def set_signature(
    *,
    order_id: str,
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
    signature_in: service_order_schema.SignatureUpdate,
):
    """Guarda la firma del cliente, sustituyendo la anterior."""
    return await service_order_service.set_signature(db, context, order_id, signature_in)
