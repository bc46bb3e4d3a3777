"""
Exceptions métier levées par les services.
Les routers les traduisent en HTTPException (404, 409, 400, 401).
"""


class NotFoundError(ValueError):
    """Ressource introuvable (classe, cours, personne, message...)."""


class ConflictError(ValueError):
    """Violation d'unicité (email déjà utilisé, nom de classe existant...)."""


class AuthenticationError(Exception):
    """Identifiants invalides."""
