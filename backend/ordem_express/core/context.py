# backend/ordem_express/core/context.py
"""
Contexto de aplicación de cada petición autenticada.

Sustituye al estado global de sesión: se construye al resolver el token de
la petición (releyendo usuario y perfil de la base de datos), se pasa
explícitamente a servicios y endpoints y deja de existir cuando la sesión
se cierra.
"""

from dataclasses import dataclass
from typing import Optional

from ordem_express.db.models.user_model import User
from ordem_express.db.models.profile_model import Profile


@dataclass(frozen=True)
class AppContext:
    user: User
    profile: Optional[Profile]
    session_token: str

    @property
    def owner_id(self) -> str:
        """Clave de propiedad de las filas creadas en esta sesión."""
        return self.user.id

    @property
    def shop_id(self) -> str:
        """Cuenta dueña del taller: delimita qué técnicos ve y asigna esta sesión."""
        if self.profile is not None and self.profile.owner_id:
            return self.profile.owner_id
        return self.user.id

    @property
    def is_admin(self) -> bool:
        return self.profile is not None and self.profile.user_type == "admin"
