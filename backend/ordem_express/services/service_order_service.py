# backend/ordem_express/services/service_order_service.py
"""
Servicio para operaciones de negocio relacionadas con órdenes de servicio (OS).

Responsabilidades principales:
- Validar las referencias de la OS (cliente, equipo y técnico)
- Mantener la regla "el equipo pertenece al cliente de la OS"
- Preparar las listas de los selectores en cascada del formulario de alta
- Filtrar listados por estado y cliente
- Gestionar archivos multimedia y firma de cada OS

Los estados (status, payment_status) se asignan libremente en las
actualizaciones: cualquier valor del conjunto cerrado es aceptado desde
cualquier otro.
"""

import logging
from typing import Iterable, List, Optional

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from ordem_express.core.context import AppContext
from ordem_express.crud import client_crud, equipment_crud, profile_crud, service_order_crud
from ordem_express.crud.client_crud import client_repository
from ordem_express.crud.equipment_crud import equipment_repository
from ordem_express.crud.profile_crud import profile_repository
from ordem_express.crud.service_order_crud import (
    service_order_repository, media_file_repository, signature_repository
)
from ordem_express.db.models.service_order_model import ServiceOrder, MediaFile, Signature
from ordem_express.schemas import service_order_schema
from ordem_express.schemas.client_schema import ClientSummary
from ordem_express.schemas.equipment_schema import EquipmentOption
from ordem_express.schemas.technician_schema import TechnicianOption, UserType

logger = logging.getLogger(__name__)

# Campos NOT NULL: un null explícito en una actualización se ignora
REQUIRED_FIELDS = ("client_id", "equipment_id", "technician_id", "problem_description", "status", "payment_status")


def filter_service_orders(orders: Iterable[ServiceOrder], status_filter: Optional[str] = None,
                          client_id: Optional[str] = None) -> List[ServiceOrder]:
    """
    Filtra por igualdad un listado ya obtenido. None (o "all") significa
    "sin filtro" para cada criterio.
    """
    status_value = getattr(status_filter, "value", status_filter)
    result = list(orders)
    if status_value and status_value != "all":
        result = [order for order in result if order.status == status_value]
    if client_id and client_id != "all":
        result = [order for order in result if order.client_id == client_id]
    return result


class ServiceOrderService:
    """
    Servicio para operaciones de negocio relacionadas con órdenes de servicio.
    """

    # ========================================
    # VALIDACIÓN DE REFERENCIAS
    # ========================================

    async def _validate_references(self, db: AsyncSession, context: AppContext, client_id: str,
                                   equipment_id: str, technician_id: Optional[str]) -> None:
        client = await client_repository.get(db, client_id, owner_id=context.owner_id)
        if not client:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado")

        equipment = await equipment_repository.get(db, equipment_id, owner_id=context.owner_id)
        if not equipment:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Equipamento não encontrado")
        if equipment.client_id != client.id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="O equipamento selecionado não pertence ao cliente.",
            )

        if technician_id is not None:
            technician = await profile_repository.get(db, technician_id, owner_id=context.shop_id)
            if not technician:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Técnico não encontrado")
            if technician.user_type != UserType.TECHNICIAN.value:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Apenas perfis do tipo técnico podem ser atribuídos a uma OS.",
                )

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def get_orders(self, db: AsyncSession, context: AppContext,
                         status_filter: Optional[str] = None,
                         client_id: Optional[str] = None) -> List[ServiceOrder]:
        """OS del propietario (más recientes primero), filtradas en memoria."""
        orders = await service_order_repository.list(db, owner_id=context.owner_id)
        return filter_service_orders(orders, status_filter=status_filter, client_id=client_id)

    async def get_order(self, db: AsyncSession, context: AppContext, order_id: str) -> ServiceOrder:
        order = await service_order_repository.get(db, order_id, owner_id=context.owner_id)
        if not order:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ordem de serviço não encontrada")
        return order

    async def get_form_options(self, db: AsyncSession, context: AppContext,
                               form: service_order_schema.ServiceOrderFormState
                               ) -> service_order_schema.ServiceOrderFormOptions:
        """
        Listas de los selectores del formulario de alta.

        Los equipos ofrecidos son exactamente los del cliente seleccionado
        (ninguno sin cliente). Un equipo seleccionado que no esté en esa
        lista se descarta, igual que al cambiar de cliente en el formulario.
        """
        clients = await client_crud.get_clients_by_name(db, context.owner_id)
        client_ids = {client.id for client in clients}

        equipments = []
        if form.client_id and form.client_id in client_ids:
            equipments = await equipment_crud.get_equipments_by_client(db, context.owner_id, form.client_id)
        technicians = await profile_crud.get_assignable_technicians(db, context.shop_id)

        normalized = form.model_copy(update={
            "client_id": form.client_id if form.client_id in client_ids else None,
            "equipment_id": form.equipment_id if form.equipment_id in {e.id for e in equipments} else None,
            "technician_id": form.technician_id if form.technician_id in {t.id for t in technicians} else None,
        })
        return service_order_schema.ServiceOrderFormOptions(
            clients=[ClientSummary.model_validate(client) for client in clients],
            equipments=[EquipmentOption.model_validate(equipment) for equipment in equipments],
            technicians=[TechnicianOption.model_validate(technician) for technician in technicians],
            form=normalized,
            can_submit=normalized.can_submit,
        )

    # ========================================
    # OPERACIONES DE ESCRITURA
    # ========================================

    async def create_order(self, db: AsyncSession, context: AppContext,
                           order_in: service_order_schema.ServiceOrderCreate) -> ServiceOrder:
        await self._validate_references(
            db, context, order_in.client_id, order_in.equipment_id, order_in.technician_id
        )
        record = order_in.model_dump()
        record.update(
            owner_id=context.owner_id,
            status=service_order_schema.ServiceOrderStatus.IN_PROGRESS.value,
            payment_status=service_order_schema.PaymentStatus.PENDING.value,
        )
        order = await service_order_repository.create(db, record)
        logger.info(f"OS {order.id} creada para el cliente {order.client_id}")
        return order

    async def update_order(self, db: AsyncSession, context: AppContext, order_id: str,
                           order_in: service_order_schema.ServiceOrderUpdate) -> ServiceOrder:
        """
        Actualización parcial. Si cambia el cliente o el equipo se vuelve a
        comprobar que el equipo sea del cliente.
        """
        order = await self.get_order(db, context, order_id)
        patch = order_in.model_dump(exclude_unset=True)
        for field in REQUIRED_FIELDS:
            if field in patch and patch[field] is None:
                patch.pop(field)
        for field in ("status", "payment_status"):
            if field in patch:
                patch[field] = getattr(patch[field], "value", patch[field])

        client_id = patch.get("client_id", order.client_id)
        equipment_id = patch.get("equipment_id", order.equipment_id)
        if client_id != order.client_id or equipment_id != order.equipment_id or "technician_id" in patch:
            await self._validate_references(db, context, client_id, equipment_id, patch.get("technician_id"))

        if "status" in patch and patch["status"] != order.status:
            logger.info(f"OS {order_id}: estado {order.status} -> {patch['status']}")
        updated = await service_order_repository.update(db, order_id, patch, owner_id=context.owner_id)
        return updated

    async def delete_order(self, db: AsyncSession, context: AppContext, order_id: str) -> ServiceOrder:
        """Borra la OS; sus archivos y firmas se eliminan en cascada."""
        await self.get_order(db, context, order_id)
        deleted = await service_order_repository.delete(db, order_id, owner_id=context.owner_id)
        logger.info(f"OS {order_id} eliminada")
        return deleted

    # ========================================
    # ADJUNTOS
    # ========================================

    async def get_media_files(self, db: AsyncSession, context: AppContext, order_id: str) -> List[MediaFile]:
        await self.get_order(db, context, order_id)
        return await service_order_crud.get_media_files(db, order_id)

    async def add_media_file(self, db: AsyncSession, context: AppContext, order_id: str,
                             media_in: service_order_schema.MediaFileCreate) -> MediaFile:
        await self.get_order(db, context, order_id)
        record = media_in.model_dump()
        record["service_order_id"] = order_id
        media = await media_file_repository.create(db, record)
        logger.info(f"Archivo {media.id} añadido a la OS {order_id}")
        return media

    async def delete_media_file(self, db: AsyncSession, context: AppContext, order_id: str,
                                media_id: str) -> MediaFile:
        await self.get_order(db, context, order_id)
        media = await service_order_crud.get_media_file(db, order_id, media_id)
        if not media:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Arquivo não encontrado")
        return await media_file_repository.delete(db, media.id)

    async def get_signature(self, db: AsyncSession, context: AppContext, order_id: str) -> Signature:
        await self.get_order(db, context, order_id)
        signature = await service_order_crud.get_signature(db, order_id)
        if not signature:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assinatura não encontrada")
        return signature

    async def set_signature(self, db: AsyncSession, context: AppContext, order_id: str,
                            signature_in: service_order_schema.SignatureUpdate) -> Signature:
        """Guarda la firma de la OS, sustituyendo la anterior si existía."""
        await self.get_order(db, context, order_id)
        current = await service_order_crud.get_signature(db, order_id)
        if current:
            return await signature_repository.update(db, current.id, {"signature_url": signature_in.signature_url})
        signature = await signature_repository.create(
            db, {"service_order_id": order_id, "signature_url": signature_in.signature_url}
        )
        logger.info(f"Firma registrada para la OS {order_id}")
        return signature


# Instancia global del servicio
service_order_service = ServiceOrderService()
