# backend/ordem_express/services/equipment_service.py
"""
Servicio para operaciones de negocio relacionadas con equipos.

Cada equipo pertenece a un cliente del mismo propietario. Un equipo con
órdenes de servicio no se borra ni cambia de cliente, porque la OS exige
que su equipo sea del cliente de la orden.
"""

import logging
from typing import List

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from ordem_express.core.context import AppContext
from ordem_express.crud.client_crud import client_repository
from ordem_express.crud.equipment_crud import equipment_repository
from ordem_express.crud.service_order_crud import service_order_repository
from ordem_express.db.models.equipment_model import Equipment
from ordem_express.schemas import equipment_schema

logger = logging.getLogger(__name__)

EQUIPMENT_HAS_ORDERS = "Este equipamento possui ordens de serviço. Exclua as OS primeiro."

class EquipmentService:
    """
    Servicio para operaciones de negocio relacionadas con equipos.
    """

    async def _check_client(self, db: AsyncSession, context: AppContext, client_id: str) -> None:
        if not await client_repository.get(db, client_id, owner_id=context.owner_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado")

    async def _count_orders(self, db: AsyncSession, equipment_id: str) -> int:
        return await service_order_repository.count(db, filters={"equipment_id": equipment_id})

    async def get_equipments(self, db: AsyncSession, context: AppContext) -> List[Equipment]:
        return await equipment_repository.list(db, owner_id=context.owner_id)

    async def get_equipment(self, db: AsyncSession, context: AppContext, equipment_id: str) -> Equipment:
        equipment = await equipment_repository.get(db, equipment_id, owner_id=context.owner_id)
        if not equipment:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Equipamento não encontrado")
        return equipment

    async def create_equipment(self, db: AsyncSession, context: AppContext,
                               equipment_in: equipment_schema.EquipmentCreate) -> Equipment:
        await self._check_client(db, context, equipment_in.client_id)
        record = equipment_in.model_dump()
        record["owner_id"] = context.owner_id
        equipment = await equipment_repository.create(db, record)
        logger.info(f"Equipo {equipment.id} creado para el cliente {equipment.client_id}")
        return equipment

    async def update_equipment(self, db: AsyncSession, context: AppContext, equipment_id: str,
                               equipment_in: equipment_schema.EquipmentUpdate) -> Equipment:
        equipment = await self.get_equipment(db, context, equipment_id)
        patch = equipment_in.model_dump(exclude_unset=True)
        for required_field in ("type", "client_id"):
            if required_field in patch and patch[required_field] is None:
                patch.pop(required_field)

        new_client_id = patch.get("client_id")
        if new_client_id and new_client_id != equipment.client_id:
            await self._check_client(db, context, new_client_id)
            if await self._count_orders(db, equipment_id) > 0:
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail="Este equipamento possui ordens de serviço e não pode mudar de cliente.",
                )

        updated = await equipment_repository.update(db, equipment_id, patch, owner_id=context.owner_id)
        logger.info(f"Equipo {equipment_id} actualizado: {sorted(patch)}")
        return updated

    async def delete_equipment(self, db: AsyncSession, context: AppContext, equipment_id: str) -> Equipment:
        await self.get_equipment(db, context, equipment_id)
        if await self._count_orders(db, equipment_id) > 0:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=EQUIPMENT_HAS_ORDERS)
        try:
            deleted = await equipment_repository.delete(db, equipment_id, owner_id=context.owner_id)
        except IntegrityError:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=EQUIPMENT_HAS_ORDERS)
        logger.info(f"Equipo {equipment_id} eliminado")
        return deleted


# Instancia global del servicio
equipment_service = EquipmentService()
