# backend/ordem_express/db/models/client_model.py
"""
Se encarga de definir el modelo de cliente para la aplicación.
"""

from sqlalchemy import Column, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sqlalchemy.types import DateTime

from ordem_express.db.database import Base, generate_id

class Client(Base):
    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=generate_id)
    owner_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Sin cascada: un cliente con equipos u OS no se puede borrar
    equipments = relationship("Equipment", back_populates="client", passive_deletes="all")
    service_orders = relationship("ServiceOrder", back_populates="client", passive_deletes="all")

    def __repr__(self):
        return f"<Client(id={self.id}, name='{self.name}')>"
