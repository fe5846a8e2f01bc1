# backend/ordem_express/crud/equipment_crud.py
"""
Este archivo contiene las operaciones CRUD para el modelo Equipment.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ordem_express.db.models.equipment_model import Equipment
# Registrar todos los modelos antes de construir opciones de carga a nivel de módulo
from ordem_express.db.models import (  # noqa: F401
    user_model, profile_model, client_model, equipment_model, service_order_model
)
from ordem_express.crud.repository import SQLAlchemyRepository

equipment_repository = SQLAlchemyRepository(
    Equipment,
    default_order=Equipment.created_at.desc(),
    load_options=(selectinload(Equipment.client),),
)


async def get_equipments_by_client(db: AsyncSession, owner_id: str, client_id: str) -> List[Equipment]:
    """Equipos de un cliente concreto, ordenados por tipo."""
    return await equipment_repository.list(
        db, owner_id=owner_id, filters={"client_id": client_id}, order_by=Equipment.type
    )


async def count_equipments_by_client(db: AsyncSession, client_id: str) -> int:
    """Número de equipos registrados para un cliente."""
    return await equipment_repository.count(db, filters={"client_id": client_id})
