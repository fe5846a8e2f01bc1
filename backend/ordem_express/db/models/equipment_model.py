# backend/ordem_express/db/models/equipment_model.py
"""
Se encarga de definir el modelo de equipo para la aplicación.
"""

from sqlalchemy import Column, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sqlalchemy.types import DateTime

from ordem_express.db.database import Base, generate_id

class Equipment(Base):
    __tablename__ = "equipments"

    id = Column(String(36), primary_key=True, default=generate_id)
    owner_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=False, index=True)
    type = Column(String(255), nullable=False)
    brand = Column(String(255), nullable=True)
    model = Column(String(255), nullable=True)
    serial_number = Column(String(255), nullable=True)
    observations = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    client = relationship("Client", back_populates="equipments")
    service_orders = relationship("ServiceOrder", back_populates="equipment", passive_deletes="all")

    def __repr__(self):
        return f"<Equipment(id={self.id}, type='{self.type}', client_id={self.client_id})>"
