# backend/ordem_express/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación FastAPI completa,
incluyendo la configuración de rutas, middleware, documentación automática,
y eventos del ciclo de vida de la aplicación.

Características principales:
- Configuración centralizada de la aplicación y del logging
- Registro de routers de la API con prefijos
- CORS para el frontend
- Respuesta uniforme ante errores de almacenamiento
- Creación de tablas y administrador inicial al arrancar
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ordem_express.core.config import settings  # Configuración centralizada de la aplicación
from ordem_express.api.v1.api_router import api_router_v1  # Router principal de la API v1
from ordem_express.db.database import AsyncSessionLocal, create_tables
from ordem_express.services.auth_service import auth_service

logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
logger = logging.getLogger(__name__)

# ========================================
# CONFIGURACIÓN DE LA APLICACIÓN FASTAPI
# ========================================

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    version=settings.PROJECT_VERSION,
    description="API para la gestión de órdenes de servicio de asistencia técnica"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ========================================
# REGISTRO DE ROUTERS DE LA API
# ========================================

app.include_router(api_router_v1, prefix=settings.API_V1_STR)

# ========================================
# MANEJO DE ERRORES DE ALMACENAMIENTO
# ========================================

@app.exception_handler(SQLAlchemyError)
async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
    """
    Cualquier fallo del almacenamiento no previsto por los servicios se
    registra con su traza y se devuelve como 500 con un mensaje genérico.
    """
    logger.error(f"Error de base de datos en {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Erro ao acessar o banco de dados. Tente novamente."},
    )

# ========================================
# ENDPOINTS RAÍZ Y VERIFICACIÓN DE ESTADO
# ========================================

@app.get("/", tags=["Root"])
async def read_root():
    """
    Endpoint raíz para verificación básica del estado de la API.

    Returns:
        dict: Mensaje de bienvenida con información del proyecto

    Example:
        GET /
        Response: {"message": "Bem-vindo à Ordem Express API v0.1.0"}
    """
    return {"message": f"Bem-vindo à {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}"}


@app.get("/health", tags=["Root"])
async def health_check():
    return {"status": "ok"}

# ========================================
# EVENTOS DEL CICLO DE VIDA DE LA APLICACIÓN
# ========================================

@app.on_event("startup")
async def startup_event():
    """
    Evento ejecutado al iniciar la aplicación.

    Tareas de inicialización:
    - Creación de las tablas si CREATE_TABLES_ON_STARTUP está activo
    - Alta del administrador inicial si se configuró INITIAL_ADMIN_EMAIL
    """
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables()
        logger.info("Tablas de la base de datos verificadas")

    if settings.INITIAL_ADMIN_EMAIL and settings.INITIAL_ADMIN_PASSWORD:
        async with AsyncSessionLocal() as db:
            await auth_service.ensure_initial_admin(
                db,
                email=settings.INITIAL_ADMIN_EMAIL,
                password=settings.INITIAL_ADMIN_PASSWORD,
                name=settings.INITIAL_ADMIN_NAME,
            )
    else:
        logger.info("INITIAL_ADMIN_EMAIL no configurado, no se crea administrador inicial")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("ordem_express.main:app", host=settings.HOST, port=settings.PORT)
