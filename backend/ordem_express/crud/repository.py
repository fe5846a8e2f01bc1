# backend/ordem_express/crud/repository.py

"""
Interfaz de repositorio y su implementación con SQLAlchemy.

Los endpoints y servicios nunca construyen consultas directamente: trabajan
contra esta interfaz, de modo que la tecnología de almacenamiento puede
cambiar sin tocar el código que la usa.

Operaciones de la interfaz:
- list(owner_id, filters): filas del propietario que cumplen filtros de igualdad
- get(record_id, owner_id): una fila, opcionalmente restringida al propietario
- create(record): inserta y devuelve la fila recién leída
- update(record_id, patch): escribe solo los campos del parche
- delete(record_id): borra la fila
- count(filters): número de filas que cumplen filtros de igualdad

Todas las filas de nivel superior (clientes, equipos, OS) pertenecen a un
propietario; pasar owner_id hace que las filas ajenas se comporten como
inexistentes.
"""

import abc
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ordem_express.db.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class Repository(abc.ABC, Generic[ModelType]):
    """Contrato mínimo de almacenamiento para una entidad."""

    @abc.abstractmethod
    async def list(self, db: AsyncSession, owner_id: Optional[str] = None,
                   filters: Optional[Dict[str, Any]] = None, order_by=None,
                   limit: Optional[int] = None) -> List[ModelType]:
        ...

    @abc.abstractmethod
    async def get(self, db: AsyncSession, record_id: str, owner_id: Optional[str] = None) -> Optional[ModelType]:
        ...

    @abc.abstractmethod
    async def create(self, db: AsyncSession, record: Dict[str, Any]) -> ModelType:
        ...

    @abc.abstractmethod
    async def update(self, db: AsyncSession, record_id: str, patch: Dict[str, Any],
                     owner_id: Optional[str] = None) -> Optional[ModelType]:
        ...

    @abc.abstractmethod
    async def delete(self, db: AsyncSession, record_id: str, owner_id: Optional[str] = None) -> Optional[ModelType]:
        ...

    @abc.abstractmethod
    async def count(self, db: AsyncSession, filters: Optional[Dict[str, Any]] = None) -> int:
        ...


class SQLAlchemyRepository(Repository[ModelType]):
    """
    Implementación genérica sobre una sesión asíncrona de SQLAlchemy.

    Args:
        model: Clase ORM gestionada
        owner_field: Columna que identifica al propietario (None si la entidad no tiene)
        default_order: Orden por defecto de list()
        load_options: Opciones de carga (selectinload...) aplicadas a cada lectura,
            necesarias porque en modo asíncrono no hay carga perezosa implícita
    """

    def __init__(self, model: Type[ModelType], owner_field: Optional[str] = "owner_id",
                 default_order=None, load_options: Sequence[Any] = ()):
        self.model = model
        self.owner_field = owner_field
        self.default_order = default_order
        self.load_options = tuple(load_options)

    # ========================================
    # OPERACIONES DE LECTURA (READ)
    # ========================================

    def _select(self, owner_id: Optional[str] = None, filters: Optional[Dict[str, Any]] = None):
        query = select(self.model)
        if owner_id is not None and self.owner_field:
            query = query.filter(getattr(self.model, self.owner_field) == owner_id)
        for field, value in (filters or {}).items():
            query = query.filter(getattr(self.model, field) == value)
        if self.load_options:
            query = query.options(*self.load_options)
        # populate_existing refresca objetos ya presentes en la sesión (columnas con server_default/onupdate)
        return query.execution_options(populate_existing=True)

    async def list(self, db: AsyncSession, owner_id: Optional[str] = None,
                   filters: Optional[Dict[str, Any]] = None, order_by=None,
                   limit: Optional[int] = None) -> List[ModelType]:
        query = self._select(owner_id, filters)
        order = order_by if order_by is not None else self.default_order
        if order is not None:
            query = query.order_by(*order) if isinstance(order, (list, tuple)) else query.order_by(order)
        if limit is not None:
            query = query.limit(limit)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get(self, db: AsyncSession, record_id: str, owner_id: Optional[str] = None) -> Optional[ModelType]:
        result = await db.execute(self._select(owner_id, {"id": record_id}))
        return result.scalars().first()

    async def count(self, db: AsyncSession, filters: Optional[Dict[str, Any]] = None) -> int:
        query = select(func.count()).select_from(self.model)
        for field, value in (filters or {}).items():
            query = query.filter(getattr(self.model, field) == value)
        result = await db.execute(query)
        return result.scalar_one()

    # ========================================
    # OPERACIONES DE ESCRITURA (CREATE, UPDATE, DELETE)
    # ========================================

    async def _commit(self, db: AsyncSession) -> None:
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise

    async def create(self, db: AsyncSession, record: Dict[str, Any]) -> ModelType:
        db_obj = self.model(**record)
        db.add(db_obj)
        await self._commit(db)
        # Releer con las relaciones y los valores generados por la base de datos
        return await self.get(db, db_obj.id)

    async def update(self, db: AsyncSession, record_id: str, patch: Dict[str, Any],
                     owner_id: Optional[str] = None) -> Optional[ModelType]:
        db_obj = await self.get(db, record_id, owner_id=owner_id)
        if not db_obj:
            return None
        for key, value in patch.items():
            setattr(db_obj, key, value)
        await self._commit(db)
        return await self.get(db, record_id)

    async def delete(self, db: AsyncSession, record_id: str, owner_id: Optional[str] = None) -> Optional[ModelType]:
        db_obj = await self.get(db, record_id, owner_id=owner_id)
        if db_obj:
            await db.delete(db_obj)
            await self._commit(db)
        return db_obj
