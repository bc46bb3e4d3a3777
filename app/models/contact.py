"""
Modèle SQLAlchemy pour les messages du formulaire de contact.
"""

import enum

from sqlalchemy import Column, Integer, String, Text

from app.database import Base
from app.models.audit import AuditMixin


class ContactStatus(str, enum.Enum):
    OPEN = "OPEN"
    CLOSE = "CLOSE"


class Contact(AuditMixin, Base):
    __tablename__ = "contact_msg"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    mobile_num = Column(String(10), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(10), nullable=False, default=ContactStatus.OPEN.value)  # OPEN, CLOSE
