"""
Modèle SQLAlchemy pour les personnes (élèves, administrateurs).
Une personne appartient à au plus une classe et suit zéro ou plusieurs cours.
"""

from typing import Optional

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.audit import AuditMixin


class Person(AuditMixin, Base):
    __tablename__ = "persons"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    mobile_num = Column(String(20), nullable=True)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False)
    class_id = Column(Integer, ForeignKey("classes.id", ondelete="SET NULL"), nullable=True)

    role = relationship("Role", back_populates="persons")
    school_class = relationship("SchoolClass", back_populates="persons")
    courses = relationship("Course", secondary="person_courses", back_populates="persons")

    @property
    def role_name(self) -> Optional[str]:
        return self.role.role_name if self.role is not None else None

    @property
    def class_name(self) -> Optional[str]:
        return self.school_class.name if self.school_class is not None else None
