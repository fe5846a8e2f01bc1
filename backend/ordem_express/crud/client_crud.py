# backend/ordem_express/crud/client_crud.py
"""
Este archivo contiene las operaciones CRUD para el modelo Client.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from ordem_express.db.models.client_model import Client
from ordem_express.crud.repository import SQLAlchemyRepository

client_repository = SQLAlchemyRepository(Client, default_order=Client.created_at.desc())


async def get_clients_by_name(db: AsyncSession, owner_id: str) -> List[Client]:
    """Clientes del propietario ordenados por nombre, para selectores y filtros."""
    return await client_repository.list(db, owner_id=owner_id, order_by=Client.name)
