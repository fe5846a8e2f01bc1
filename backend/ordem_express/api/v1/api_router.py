# backend/ordem_express/api/v1/api_router.py
"""
Este archivo contiene el router principal para la API versión 1.

Se encarga de registrar y configurar todos los routers de la versión 1 de la API.
"""

from fastapi import APIRouter

# Importación de routers especializados por dominio de negocio
from ordem_express.api.v1.endpoints import (
    auth,
    clients,
    equipments,
    service_orders,
    technicians,
    dashboard,
)

# ========================================
# CONFIGURACIÓN DEL ROUTER PRINCIPAL V1
# ========================================

api_router_v1 = APIRouter()

# ========================================
# REGISTRO DE ROUTERS POR DOMINIO DE NEGOCIO
# ========================================

# ROUTER DE AUTENTICACIÓN
# Registro, inicio/cierre de sesión y contexto actual
api_router_v1.include_router(
    auth.router,
    prefix="/auth",                 # Prefijo: /api/v1/auth
    tags=["Auth"]
)

# ROUTER DE CLIENTES
api_router_v1.include_router(
    clients.router,
    prefix="/clients",
    tags=["Clients"]
)

# ROUTER DE EQUIPOS
api_router_v1.include_router(
    equipments.router,
    prefix="/equipments",
    tags=["Equipments"]
)

# ROUTER DE ÓRDENES DE SERVICIO
# CRUD, filtros, formulario de alta, impresión y adjuntos
api_router_v1.include_router(
    service_orders.router,
    prefix="/service-orders",
    tags=["Service Orders"]
)

# ROUTER DE TÉCNICOS
# Solo administradores
api_router_v1.include_router(
    technicians.router,
    prefix="/technicians",
    tags=["Technicians"]
)

# ROUTER DEL PANEL
api_router_v1.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["Dashboard"]
)
