# backend/ordem_express/services/client_service.py
"""
Servicio para operaciones de negocio relacionadas con clientes.

La regla principal es de integridad referencial: un cliente no se borra
mientras tenga equipos u órdenes de servicio. Las dos comprobaciones y el
borrado son consultas independientes, sin transacción que las agrupe.
"""

import logging
from typing import List

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from ordem_express.core.context import AppContext
from ordem_express.crud import equipment_crud, service_order_crud
from ordem_express.crud.client_crud import client_repository
from ordem_express.db.models.client_model import Client
from ordem_express.schemas import client_schema

logger = logging.getLogger(__name__)

CLIENT_HAS_EQUIPMENTS = "Este cliente possui equipamentos cadastrados. Exclua os equipamentos primeiro."
CLIENT_HAS_ORDERS = "Este cliente possui ordens de serviço. Exclua as OS primeiro."

class ClientService:
    """
    Servicio para operaciones de negocio relacionadas con clientes.
    """

    async def get_clients(self, db: AsyncSession, context: AppContext) -> List[Client]:
        """Clientes del propietario, los más recientes primero."""
        return await client_repository.list(db, owner_id=context.owner_id)

    async def get_client(self, db: AsyncSession, context: AppContext, client_id: str) -> Client:
        client = await client_repository.get(db, client_id, owner_id=context.owner_id)
        if not client:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado")
        return client

    async def create_client(self, db: AsyncSession, context: AppContext,
                            client_in: client_schema.ClientCreate) -> Client:
        record = client_in.model_dump()
        record["owner_id"] = context.owner_id
        client = await client_repository.create(db, record)
        logger.info(f"Cliente {client.id} creado por {context.owner_id}")
        return client

    async def update_client(self, db: AsyncSession, context: AppContext, client_id: str,
                            client_in: client_schema.ClientUpdate) -> Client:
        """Escribe solo los campos enviados. El nombre no puede quedar vacío."""
        patch = client_in.model_dump(exclude_unset=True)
        if patch.get("name", "") is None:
            patch.pop("name")
        client = await client_repository.update(db, client_id, patch, owner_id=context.owner_id)
        if not client:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado")
        logger.info(f"Cliente {client_id} actualizado: {sorted(patch)}")
        return client

    async def delete_client(self, db: AsyncSession, context: AppContext, client_id: str) -> Client:
        """
        Borra un cliente tras comprobar que no tiene equipos ni OS.

        Raises:
            HTTPException 404: el cliente no existe o es de otro propietario
            HTTPException 409: el cliente tiene equipos u OS; no se intenta el borrado
        """
        await self.get_client(db, context, client_id)

        if await equipment_crud.count_equipments_by_client(db, client_id) > 0:
            logger.warning(f"Borrado del cliente {client_id} rechazado: tiene equipos")
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=CLIENT_HAS_EQUIPMENTS)

        if await service_order_crud.count_orders_by_client(db, client_id) > 0:
            logger.warning(f"Borrado del cliente {client_id} rechazado: tiene OS")
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=CLIENT_HAS_ORDERS)

        try:
            deleted = await client_repository.delete(db, client_id, owner_id=context.owner_id)
        except IntegrityError:
            # Un equipo u OS creado entre la comprobación y el borrado
            logger.warning(f"Borrado del cliente {client_id} rechazado por la base de datos")
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=CLIENT_HAS_EQUIPMENTS)
        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado")
        logger.info(f"Cliente {client_id} eliminado")
        return deleted


# Instancia global del servicio
client_service = ClientService()
