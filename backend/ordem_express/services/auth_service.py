# backend/ordem_express/services/auth_service.py
"""
Servicio de autenticación y gestión de cuentas.

Agrupa todo lo que la aplicación delega en la "plataforma" de identidad:
- Registro, inicio y cierre de sesión
- Resolución del contexto (usuario + perfil) a partir del token de sesión
- API administrativa: crear cuenta, borrar cuenta, definir contraseña

Las cuentas y sus perfiles se crean en una única transacción.
"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from ordem_express.core.context import AppContext
from ordem_express.core.security import hash_password, verify_password, new_session_token
from ordem_express.crud import profile_crud, user_crud
from ordem_express.crud.user_crud import user_repository
from ordem_express.db.models.profile_model import Profile
from ordem_express.db.models.user_model import User
from ordem_express.schemas.technician_schema import UserType, TechnicianStatus

logger = logging.getLogger(__name__)

class AuthService:
    """
    Servicio de identidad: cuentas, sesiones y operaciones administrativas.
    """

    # ========================================
    # SESIONES
    # ========================================

    async def sign_up(self, db: AsyncSession, email: str, password: str, name: str) -> str:
        """
        Registra una cuenta nueva con perfil de administrador (el dueño del
        taller) y abre una sesión para ella.

        Returns:
            Token de sesión
        """
        await self.admin_create_user(
            db, email=email, password=password, name=name, user_type=UserType.ADMIN
        )
        return await self.sign_in(db, email=email, password=password)

    async def sign_in(self, db: AsyncSession, email: str, password: str) -> str:
        """Valida las credenciales y abre una sesión nueva."""
        user = await user_crud.get_user_by_email(db, email)
        if not user or not verify_password(password, user.hashed_password):
            logger.warning(f"Intento de inicio de sesión fallido para {email}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="E-mail ou senha inválidos",
            )

        token = new_session_token()
        await user_crud.create_session(db, user_id=user.id, token=token)
        logger.info(f"Sesión iniciada para el usuario {user.id}")
        return token

    async def sign_out(self, db: AsyncSession, context: AppContext) -> None:
        """Cierra la sesión: el token deja de ser válido."""
        await user_crud.delete_session(db, context.session_token)
        logger.info(f"Sesión cerrada para el usuario {context.user.id}")

    async def get_context(self, db: AsyncSession, token: str) -> Optional[AppContext]:
        """
        Construye el contexto de la petición a partir del token.

        El usuario y el perfil se releen en cada llamada, así los cambios de
        perfil (tipo, estado) se reflejan en la siguiente petición.
        """
        auth_session = await user_crud.get_session(db, token)
        if not auth_session:
            return None
        user = await user_repository.get(db, auth_session.user_id)
        if not user:
            return None
        profile = await profile_crud.get_profile_by_user_id(db, user.id)
        return AppContext(user=user, profile=profile, session_token=token)

    # ========================================
    # API ADMINISTRATIVA
    # ========================================

    async def admin_create_user(self, db: AsyncSession, email: str, password: str, name: str,
                                user_type: UserType = UserType.TECHNICIAN,
                                phone: Optional[str] = None, position: Optional[str] = None,
                                created_by: Optional[str] = None, owner_id: Optional[str] = None) -> Profile:
        """
        Crea una cuenta de acceso y su perfil en una sola transacción.

        owner_id es la cuenta dueña del taller; sin él, la cuenta nueva es
        dueña de su propio taller (alta de administrador).

        Returns:
            El perfil creado
        """
        if await user_crud.get_user_by_email(db, email):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Já existe uma conta com este e-mail",
            )

        user = User(email=email.lower(), hashed_password=hash_password(password))
        db.add(user)
        try:
            await db.flush()
            profile = Profile(
                user_id=user.id,
                name=name,
                phone=phone,
                position=position,
                user_type=UserType(user_type).value,
                status=TechnicianStatus.ACTIVE.value,
                created_by=created_by,
                owner_id=owner_id or user.id,
            )
            db.add(profile)
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Já existe uma conta com este e-mail",
            )

        logger.info(f"Cuenta {user.id} creada con perfil {profile.user_type}")
        return await profile_crud.profile_repository.get(db, profile.id)

    async def admin_delete_user(self, db: AsyncSession, user_id: str) -> bool:
        """
        Borra una cuenta. El perfil y las sesiones se eliminan en cascada.

        Returns:
            False si la cuenta no existe
        """
        try:
            deleted = await user_repository.delete(db, user_id)
        except IntegrityError:
            logger.warning(f"No se puede borrar la cuenta {user_id}: tiene registros vinculados")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Não é possível excluir: existem ordens de serviço vinculadas a este usuário.",
            )
        if deleted:
            logger.info(f"Cuenta {user_id} eliminada")
        return deleted is not None

    async def admin_set_password(self, db: AsyncSession, user_id: str, new_password: str) -> bool:
        """Define una nueva contraseña para la cuenta indicada."""
        updated = await user_repository.update(db, user_id, {"hashed_password": hash_password(new_password)})
        if updated:
            logger.info(f"Contraseña redefinida para la cuenta {user_id}")
        return updated is not None

    async def ensure_initial_admin(self, db: AsyncSession, email: str, password: str, name: str) -> None:
        """Crea la cuenta de administrador inicial si todavía no existe."""
        if await user_crud.get_user_by_email(db, email):
            return
        await self.admin_create_user(db, email=email, password=password, name=name, user_type=UserType.ADMIN)
        logger.info(f"Administrador inicial creado: {email}")


# Instancia global del servicio
auth_service = AuthService()
