"""
Schémas Pydantic pour les personnes : inscription, profil, authentification.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator, model_validator

from app.schemas.contact import MOBILE_PATTERN


def normalize_email(email: str) -> str:
    """Les emails de compte sont stockés et comparés en minuscules."""
    return email.strip().lower()


class PersonRegister(BaseModel):
    """Inscription publique (POST /public/createUser)."""
    name: str
    mobile_num: str
    email: EmailStr
    confirm_email: EmailStr
    pwd: str
    confirm_pwd: str

    @field_validator("email", "confirm_email")
    @classmethod
    def email_lowercase(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("name")
    @classmethod
    def name_min_length(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Le nom doit contenir au moins 3 caractères.")
        return v

    @field_validator("mobile_num")
    @classmethod
    def mobile_ten_digits(cls, v: str) -> str:
        v = v.strip()
        if not MOBILE_PATTERN.match(v):
            raise ValueError("Le numéro de mobile doit contenir 10 chiffres.")
        return v

    @field_validator("pwd")
    @classmethod
    def pwd_min_length(cls, v: str) -> str:
        if len(v) < 5:
            raise ValueError("Le mot de passe doit contenir au moins 5 caractères.")
        return v

    @model_validator(mode="after")
    def fields_match(self) -> "PersonRegister":
        if self.email != self.confirm_email:
            raise ValueError("Les adresses email ne correspondent pas.")
        if self.pwd != self.confirm_pwd:
            raise ValueError("Les mots de passe ne correspondent pas.")
        return self


class ProfileUpdate(BaseModel):
    """Mise à jour du profil (POST /updateProfile). Les champs absents ne sont pas modifiés."""
    name: Optional[str] = None
    mobile_num: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_min_length(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v.strip()) < 3:
            raise ValueError("Le nom doit contenir au moins 3 caractères.")
        return v.strip() if v else v

    @field_validator("mobile_num")
    @classmethod
    def mobile_ten_digits(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not MOBILE_PATTERN.match(v.strip()):
            raise ValueError("Le numéro de mobile doit contenir 10 chiffres.")
        return v.strip() if v else v


class PersonSummary(BaseModel):
    """Élève tel qu'affiché dans une classe ou un cours."""
    id: int
    name: str
    email: str
    mobile_num: Optional[str]

    model_config = {"from_attributes": True}


class PersonResponse(BaseModel):
    id: int
    name: str
    email: str
    mobile_num: Optional[str]
    role_name: Optional[str]
    class_name: Optional[str]

    model_config = {"from_attributes": True}


class TokenResponse(BaseModel):
    """Réponse de POST /login."""
    access_token: str
    token_type: str = "bearer"
    role: str


class DashboardResponse(BaseModel):
    name: str
    email: str
    role: str
    class_name: Optional[str] = None
