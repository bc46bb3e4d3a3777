"""
Modèle SQLAlchemy pour les rôles applicatifs.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.database import Base

ADMIN_ROLE = "ADMIN"
STUDENT_ROLE = "STUDENT"
USER_ROLE = "USER"
ALL_ROLES = (ADMIN_ROLE, STUDENT_ROLE, USER_ROLE)


class Role(Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    role_name = Column(String(50), unique=True, nullable=False)

    persons = relationship("Person", back_populates="role")
