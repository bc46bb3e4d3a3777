"""
Champs d'audit partagés : qui a créé / modifié la ligne, et quand.
Renseignés explicitement par les services avec l'utilisateur courant.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, DateTime, String

ANONYMOUS = "Anonymous"


class AuditMixin:
    created_at = Column(DateTime, nullable=True)
    created_by = Column(String(100), nullable=True)
    updated_at = Column(DateTime, nullable=True)
    updated_by = Column(String(100), nullable=True)

    def mark_created(self, actor: Optional[str]) -> None:
        self.created_at = datetime.now(timezone.utc)
        self.created_by = actor or ANONYMOUS

    def mark_updated(self, actor: Optional[str]) -> None:
        self.updated_at = datetime.now(timezone.utc)
        self.updated_by = actor or ANONYMOUS
