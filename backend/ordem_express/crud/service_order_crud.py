# backend/ordem_express/crud/service_order_crud.py
"""
Operaciones CRUD para las órdenes de servicio y sus adjuntos
(archivos multimedia y firmas).
"""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ordem_express.db.models.service_order_model import ServiceOrder, MediaFile, Signature
# Registrar todos los modelos antes de construir opciones de carga a nivel de módulo
from ordem_express.db.models import (  # noqa: F401
    user_model, profile_model, client_model, equipment_model, service_order_model
)
from ordem_express.crud.repository import SQLAlchemyRepository

service_order_repository = SQLAlchemyRepository(
    ServiceOrder,
    default_order=ServiceOrder.created_at.desc(),
    load_options=(
        selectinload(ServiceOrder.client),
        selectinload(ServiceOrder.equipment),
        selectinload(ServiceOrder.technician),
    ),
)

media_file_repository = SQLAlchemyRepository(
    MediaFile, owner_field=None, default_order=MediaFile.created_at
)

signature_repository = SQLAlchemyRepository(
    Signature, owner_field=None, default_order=Signature.created_at.desc()
)


async def get_recent_orders(db: AsyncSession, owner_id: str, limit: int = 10) -> List[ServiceOrder]:
    """Las OS más recientes del propietario."""
    return await service_order_repository.list(db, owner_id=owner_id, limit=limit)


async def count_orders_by_client(db: AsyncSession, client_id: str) -> int:
    """Número de OS registradas para un cliente."""
    return await service_order_repository.count(db, filters={"client_id": client_id})


async def get_media_files(db: AsyncSession, service_order_id: str) -> List[MediaFile]:
    return await media_file_repository.list(db, filters={"service_order_id": service_order_id})


async def get_media_file(db: AsyncSession, service_order_id: str, media_id: str) -> Optional[MediaFile]:
    """Obtiene un archivo solo si pertenece a la OS indicada."""
    result = await db.execute(
        select(MediaFile).filter(MediaFile.id == media_id, MediaFile.service_order_id == service_order_id)
    )
    return result.scalars().first()


async def get_signature(db: AsyncSession, service_order_id: str) -> Optional[Signature]:
    """Firma vigente de la OS (la más reciente)."""
    signatures = await signature_repository.list(
        db, filters={"service_order_id": service_order_id}, limit=1
    )
    return signatures[0] if signatures else None
