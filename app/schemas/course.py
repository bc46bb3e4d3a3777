"""
Schémas Pydantic pour les cours.
"""

from typing import List

from pydantic import BaseModel, EmailStr, field_validator

from app.schemas.person import PersonSummary, normalize_email


class CourseCreate(BaseModel):
    name: str
    fees: str

    @field_validator("name", "fees")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip()


class CourseResponse(BaseModel):
    id: int
    name: str
    fees: str
    nb_students: int


class CourseDetail(BaseModel):
    id: int
    name: str
    fees: str
    students: List[PersonSummary]


class CourseStudentAdd(BaseModel):
    """Corps de POST /admin/addStudentToCourse."""
    course_id: int
    email: EmailStr

    @field_validator("email")
    @classmethod
    def email_lowercase(cls, v: str) -> str:
        return normalize_email(v)
