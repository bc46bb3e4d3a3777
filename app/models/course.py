"""
Modèle SQLAlchemy pour les cours et la table d'association personne ↔ cours.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.audit import AuditMixin

person_courses = Table(
    "person_courses",
    Base.metadata,
    Column("person_id", Integer, ForeignKey("persons.id", ondelete="CASCADE"), primary_key=True),
    Column("course_id", Integer, ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True),
)


class Course(AuditMixin, Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    fees = Column(String(50), nullable=True)

    persons = relationship("Person", secondary=person_courses, back_populates="courses")
