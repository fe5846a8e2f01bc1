# backend/ordem_express/db/database.py

"""
Configuración principal de la base de datos para la aplicación.

Este módulo establece la conexión con la base de datos usando SQLAlchemy y define
los componentes básicos que serán utilizados por toda la aplicación:
- Motor de base de datos (engine)
- Fábrica de sesiones (AsyncSessionLocal)
- Clase base para modelos (Base)

La dependencia get_db() vive en ordem_express/api/deps.py.
"""

import uuid

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from ordem_express.core.config import settings # Importamos nuestra configuración


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """
    SQLite no aplica claves foráneas (ni ON DELETE CASCADE) salvo que se
    active el pragma en cada conexión. En otros motores no hace nada.
    """
    if async_engine.dialect.name != "sqlite":
        return

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Crear el motor de base de datos asíncrono
engine = create_async_engine(settings.DATABASE_URL, pool_pre_ping=True, echo=settings.SQL_ECHO)
enable_sqlite_foreign_keys(engine)

# expire_on_commit=False es importante para que los objetos sigan siendo utilizables
# después de que la transacción se haya confirmado.
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

# Clase base declarativa para todos los modelos ORM
Base = declarative_base()


def generate_id() -> str:
    """Genera un identificador UUID en formato texto para las claves primarias."""
    return str(uuid.uuid4())


async def create_tables(async_engine: AsyncEngine = engine) -> None:
    """Crea todas las tablas registradas en Base.metadata si no existen."""
    # Registrar los modelos en los metadatos antes de crear las tablas
    from ordem_express.db.models import (  # noqa: F401
        user_model, profile_model, client_model, equipment_model, service_order_model
    )

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
