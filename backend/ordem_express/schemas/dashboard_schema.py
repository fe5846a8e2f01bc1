# backend/ordem_express/schemas/dashboard_schema.py
"""
Esquemas del panel principal: OS recientes y estadísticas.
"""

from typing import List, Optional
from pydantic import BaseModel

from .service_order_schema import ServiceOrderResponse
from .technician_schema import ProfileResponse

class DashboardStats(BaseModel):
    total_orders: int = 0
    open_orders: int = 0
    completed_orders: int = 0
    pending_payments: int = 0
    monthly_revenue: float = 0.0


class DashboardResponse(BaseModel):
    profile: Optional[ProfileResponse] = None
    recent_orders: List[ServiceOrderResponse] = []
    stats: DashboardStats
