# backend/ordem_express/db/models/profile_model.py
"""
Se encarga de definir el modelo de perfil (administradores y técnicos).
"""

from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sqlalchemy.types import DateTime

from ordem_express.db.database import Base, generate_id

class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)
    # Cuenta dueña del taller al que pertenece el perfil (la propia cuenta en los administradores)
    owner_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    position = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default="active")
    user_type = Column(String(20), nullable=False, default="technician", index=True)
    created_by = Column(String(36), ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="profile", foreign_keys=[user_id])
    service_orders = relationship("ServiceOrder", back_populates="technician", passive_deletes="all")

    def __repr__(self):
        return f"<Profile(id={self.id}, name='{self.name}', user_type='{self.user_type}')>"
