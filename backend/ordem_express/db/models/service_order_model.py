# backend/ordem_express/db/models/service_order_model.py
"""
Este archivo contiene el modelo de orden de servicio y sus adjuntos
(archivos multimedia y firma del cliente).
"""

from sqlalchemy import Column, String, Numeric, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sqlalchemy.types import DateTime

from ordem_express.db.database import Base, generate_id

class ServiceOrder(Base):
    __tablename__ = "service_orders"

    id = Column(String(36), primary_key=True, default=generate_id)
    owner_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=False, index=True)
    equipment_id = Column(String(36), ForeignKey("equipments.id"), nullable=False, index=True)
    technician_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    problem_description = Column(Text, nullable=False)
    solution_description = Column(Text, nullable=True)
    value = Column(Numeric(10, 2), nullable=True)
    status = Column(String(20), nullable=False, default="in_progress")
    payment_status = Column(String(20), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    client = relationship("Client", back_populates="service_orders")
    equipment = relationship("Equipment", back_populates="service_orders")
    technician = relationship("Profile", back_populates="service_orders")
    media_files = relationship("MediaFile", back_populates="service_order", cascade="all, delete-orphan", passive_deletes=True)
    signatures = relationship("Signature", back_populates="service_order", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<ServiceOrder(id={self.id}, status='{self.status}', payment_status='{self.payment_status}')>"

    @property
    def short_number(self) -> str:
        """Número corto de la OS tal como se imprime: los últimos 8 caracteres del ID."""
        return self.id[-8:]


class MediaFile(Base):
    __tablename__ = "media_files"

    id = Column(String(36), primary_key=True, default=generate_id)
    service_order_id = Column(String(36), ForeignKey("service_orders.id", ondelete="CASCADE"), nullable=False, index=True)
    file_url = Column(Text, nullable=False)
    file_type = Column(String(100), nullable=False)
    file_name = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    service_order = relationship("ServiceOrder", back_populates="media_files")


class Signature(Base):
    __tablename__ = "signatures"

    id = Column(String(36), primary_key=True, default=generate_id)
    service_order_id = Column(String(36), ForeignKey("service_orders.id", ondelete="CASCADE"), nullable=False, index=True)
    signature_url = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    service_order = relationship("ServiceOrder", back_populates="signatures")
