# backend/ordem_express/db/models/user_model.py
"""
Modelos de identidad: cuentas de acceso y sesiones activas.
"""

from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sqlalchemy.types import DateTime

from ordem_express.db.database import Base, generate_id

class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Al borrar la cuenta se borran su perfil y sus sesiones
    profile = relationship("Profile", back_populates="user", uselist=False,
                           cascade="all, delete-orphan", passive_deletes=True,
                           foreign_keys="Profile.user_id")
    sessions = relationship("AuthSession", back_populates="user",
                            cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"


class AuthSession(Base):
    __tablename__ = "auth_sessions"

    token = Column(String(128), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="sessions")
