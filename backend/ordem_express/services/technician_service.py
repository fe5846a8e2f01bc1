# backend/ordem_express/services/technician_service.py
"""
Servicio de administración de técnicos.

Solo los administradores llegan aquí: la comprobación se hace en la capa de
API (dependencia require_admin), no en el cliente. Alta, borrado y cambio de
contraseña se delegan en el servicio de identidad.
"""

import logging
from typing import List

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from ordem_express.core.context import AppContext
from ordem_express.crud import profile_crud
from ordem_express.crud.profile_crud import profile_repository
from ordem_express.db.models.profile_model import Profile
from ordem_express.schemas import technician_schema
from ordem_express.schemas.technician_schema import TechnicianStatus, UserType
from ordem_express.services.auth_service import auth_service

logger = logging.getLogger(__name__)

class TechnicianService:
    """
    Servicio para la gestión de perfiles de técnico.

    Cada administrador gestiona solo los técnicos de su taller; los de otro
    taller responden 404 igual que un ID inexistente.
    """

    async def get_technicians(self, db: AsyncSession, admin: AppContext) -> List[Profile]:
        return await profile_crud.get_technicians(db, admin.shop_id)

    async def get_technician(self, db: AsyncSession, admin: AppContext, technician_id: str) -> Profile:
        technician = await profile_repository.get(db, technician_id, owner_id=admin.shop_id)
        if not technician or technician.user_type != UserType.TECHNICIAN.value:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Técnico não encontrado")
        return technician

    async def create_technician(self, db: AsyncSession, admin: AppContext,
                                technician_in: technician_schema.TechnicianCreate) -> Profile:
        """Crea la cuenta de acceso y el perfil de técnico en el taller del administrador."""
        technician = await auth_service.admin_create_user(
            db,
            email=technician_in.email,
            password=technician_in.password,
            name=technician_in.name,
            phone=technician_in.phone,
            position=technician_in.position,
            user_type=UserType.TECHNICIAN,
            created_by=admin.profile.id if admin.profile else None,
            owner_id=admin.shop_id,
        )
        logger.info(f"Técnico {technician.id} creado por {admin.user.id}")
        return technician

    async def update_technician(self, db: AsyncSession, admin: AppContext, technician_id: str,
                                technician_in: technician_schema.TechnicianUpdate) -> Profile:
        await self.get_technician(db, admin, technician_id)
        patch = technician_in.model_dump(exclude_unset=True)
        for required_field in ("name", "status"):
            if required_field in patch and patch[required_field] is None:
                patch.pop(required_field)
        if "status" in patch:
            patch["status"] = TechnicianStatus(patch["status"]).value
        technician = await profile_repository.update(db, technician_id, patch, owner_id=admin.shop_id)
        logger.info(f"Técnico {technician_id} actualizado: {sorted(patch)}")
        return technician

    async def toggle_status(self, db: AsyncSession, admin: AppContext, technician_id: str) -> Profile:
        """Alterna activo <-> inactivo. Aplicarlo dos veces deja el estado original."""
        technician = await self.get_technician(db, admin, technician_id)
        try:
            current = TechnicianStatus(technician.status)
        except ValueError:
            current = TechnicianStatus.INACTIVE
        new_status = current.toggled().value
        technician = await profile_repository.update(
            db, technician_id, {"status": new_status}, owner_id=admin.shop_id
        )
        logger.info(f"Estado del técnico {technician_id} cambiado a {new_status}")
        return technician

    async def reset_password(self, db: AsyncSession, admin: AppContext, technician_id: str,
                             password_in: technician_schema.PasswordReset) -> Profile:
        technician = await self.get_technician(db, admin, technician_id)
        await auth_service.admin_set_password(db, technician.user_id, password_in.new_password)
        return technician

    async def delete_technician(self, db: AsyncSession, admin: AppContext, technician_id: str) -> Profile:
        """Borra la cuenta del técnico; el perfil desaparece en cascada."""
        technician = await self.get_technician(db, admin, technician_id)
        await auth_service.admin_delete_user(db, technician.user_id)
        logger.info(f"Técnico {technician_id} eliminado")
        return technician


# Instancia global del servicio
technician_service = TechnicianService()
