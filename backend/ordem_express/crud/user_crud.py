# backend/ordem_express/crud/user_crud.py
"""
Operaciones de almacenamiento para cuentas de acceso y sesiones.
"""

from typing import Optional
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ordem_express.db.models.user_model import User, AuthSession
from ordem_express.crud.repository import SQLAlchemyRepository

user_repository = SQLAlchemyRepository(User, owner_field=None, default_order=User.created_at)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).filter(User.email == email.lower()))
    return result.scalars().first()


async def create_session(db: AsyncSession, user_id: str, token: str) -> AuthSession:
    db_session = AuthSession(token=token, user_id=user_id)
    db.add(db_session)
    await db.commit()
    return db_session


async def get_session(db: AsyncSession, token: str) -> Optional[AuthSession]:
    result = await db.execute(select(AuthSession).filter(AuthSession.token == token))
    return result.scalars().first()


async def delete_session(db: AsyncSession, token: str) -> None:
    await db.execute(delete(AuthSession).where(AuthSession.token == token))
    await db.commit()
