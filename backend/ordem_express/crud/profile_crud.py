# backend/ordem_express/crud/profile_crud.py
"""
Operaciones CRUD para perfiles de usuario (administradores y técnicos).

Los técnicos pertenecen al taller de la cuenta administradora que los creó
(owner_id); los de otro taller se comportan como inexistentes.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from ordem_express.db.models.profile_model import Profile
from ordem_express.crud.repository import SQLAlchemyRepository

profile_repository = SQLAlchemyRepository(Profile, default_order=Profile.created_at.desc())


async def get_profile_by_user_id(db: AsyncSession, user_id: str) -> Optional[Profile]:
    """Perfil vinculado a una cuenta de acceso."""
    profiles = await profile_repository.list(db, filters={"user_id": user_id}, limit=1)
    return profiles[0] if profiles else None


async def get_technicians(db: AsyncSession, owner_id: str) -> List[Profile]:
    """Perfiles de tipo técnico del taller, los más recientes primero."""
    return await profile_repository.list(db, owner_id=owner_id, filters={"user_type": "technician"})


async def get_assignable_technicians(db: AsyncSession, owner_id: str) -> List[Profile]:
    """Técnicos del taller que pueden recibir una OS, ordenados por nombre."""
    return await profile_repository.list(
        db, owner_id=owner_id, filters={"user_type": "technician"}, order_by=Profile.name
    )
