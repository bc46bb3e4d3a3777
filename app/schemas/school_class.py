"""
Schémas Pydantic pour les classes (espace administrateur).
"""

from typing import List

from pydantic import BaseModel, EmailStr, field_validator

from app.schemas.person import PersonSummary, normalize_email


class ClassCreate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def name_min_length(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Le nom de la classe doit contenir au moins 3 caractères.")
        return v


class ClassResponse(BaseModel):
    id: int
    name: str
    nb_students: int


class ClassDetail(BaseModel):
    id: int
    name: str
    students: List[PersonSummary]


class ClassStudentAdd(BaseModel):
    """Corps de POST /admin/addStudent : l'élève est désigné par son email."""
    class_id: int
    email: EmailStr

    @field_validator("email")
    @classmethod
    def email_lowercase(cls, v: str) -> str:
        return normalize_email(v)
