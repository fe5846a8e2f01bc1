# backend/ordem_express/api/v1/endpoints/dashboard.py

"""
Endpoint del panel principal.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ordem_express.api import deps
from ordem_express.core.context import AppContext
from ordem_express.schemas.dashboard_schema import DashboardResponse
from ordem_express.services.dashboard_service import dashboard_service

router = APIRouter()

@router.get("/", response_model=DashboardResponse)
async def read_dashboard(
    db: AsyncSession = Depends(deps.get_db),
    context: AppContext = Depends(deps.get_app_context),
):
    """Perfil actual, OS recientes y estadísticas del propietario."""
    return await dashboard_service.get_dashboard(db, context)
