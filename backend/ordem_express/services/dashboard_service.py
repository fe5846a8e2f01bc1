# backend/ordem_express/services/dashboard_service.py
"""
Servicio del panel principal: OS recientes y estadísticas sobre ellas.
"""

from datetime import datetime, timezone
from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ordem_express.core.config import settings
from ordem_express.core.context import AppContext
from ordem_express.crud import service_order_crud
from ordem_express.db.models.service_order_model import ServiceOrder
from ordem_express.schemas.dashboard_schema import DashboardResponse, DashboardStats
from ordem_express.schemas.service_order_schema import (
    CLOSED_STATUSES, OPEN_STATUSES, PaymentStatus, ServiceOrderResponse
)
from ordem_express.schemas.technician_schema import ProfileResponse


def calculate_stats(orders: Iterable[ServiceOrder], today: Optional[datetime] = None) -> DashboardStats:
    """
    Estadísticas sobre un conjunto de OS.

    monthly_revenue suma el valor de las OS pagadas creadas en el mes en curso.
    """
    today = today or datetime.now(timezone.utc)
    orders = list(orders)

    monthly_revenue = sum(
        float(order.value or 0)
        for order in orders
        if order.payment_status == PaymentStatus.PAID.value
        and order.created_at is not None
        and order.created_at.year == today.year
        and order.created_at.month == today.month
    )
    return DashboardStats(
        total_orders=len(orders),
        open_orders=sum(1 for order in orders if order.status in OPEN_STATUSES),
        completed_orders=sum(1 for order in orders if order.status in CLOSED_STATUSES),
        pending_payments=sum(1 for order in orders if order.payment_status == PaymentStatus.PENDING.value),
        monthly_revenue=round(monthly_revenue, 2),
    )


class DashboardService:

    async def get_dashboard(self, db: AsyncSession, context: AppContext) -> DashboardResponse:
        orders = await service_order_crud.get_recent_orders(
            db, context.owner_id, limit=settings.DASHBOARD_RECENT_ORDERS
        )
        return DashboardResponse(
            profile=ProfileResponse.model_validate(context.profile) if context.profile else None,
            recent_orders=[ServiceOrderResponse.model_validate(order) for order in orders],
            stats=calculate_stats(orders),
        )


dashboard_service = DashboardService()
