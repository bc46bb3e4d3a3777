"""
Modèle SQLAlchemy pour le calendrier des jours fériés (page publique /holidays).
"""

import enum

from sqlalchemy import Column, String

from app.database import Base
from app.models.audit import AuditMixin


class HolidayType(str, enum.Enum):
    FESTIVAL = "FESTIVAL"
    FEDERAL = "FEDERAL"


class Holiday(AuditMixin, Base):
    __tablename__ = "holidays"

    day = Column(String(20), primary_key=True)
    reason = Column(String(100), nullable=False)
    type = Column(String(20), nullable=False)  # FESTIVAL, FEDERAL
