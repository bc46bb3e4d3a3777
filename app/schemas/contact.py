"""
Schémas Pydantic pour les messages de contact (formulaire public + API REST).
"""

import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator
from pydantic.alias_generators import to_camel

from app.models.contact import ContactStatus

MOBILE_PATTERN = re.compile(r"^[0-9]{10}$")


class ContactCreate(BaseModel):
    """Message soumis via POST /saveMsg ou POST /api/contact/saveMsg."""
    name: str
    mobile_num: str
    email: EmailStr
    subject: str
    message: str

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

    @field_validator("subject")
    @classmethod
    def subject_min_length(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 5:
            raise ValueError("Le sujet doit contenir au moins 5 caractères.")
        return v

    @field_validator("message")
    @classmethod
    def message_min_length(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 10:
            raise ValueError("Le message doit contenir au moins 10 caractères.")
        return v


class ContactForm(BaseModel):
    """Formulaire vierge renvoyé par GET /contact."""
    name: str = ""
    mobile_num: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""


class ContactResponse(BaseModel):
    id: int
    name: str
    mobile_num: str
    email: str
    subject: str
    message: str
    status: ContactStatus
    created_at: Optional[datetime]
    created_by: Optional[str]
    updated_at: Optional[datetime]
    updated_by: Optional[str]

    model_config = {"from_attributes": True}


class ContactPage(BaseModel):
    """Page de messages ouverts (GET /displayMessages)."""
    messages: List[ContactResponse]
    current_page: int
    total_pages: int
    total_messages: int
    sort_field: str
    sort_dir: str
    reverse_sort_dir: str


class ContactStatusQuery(BaseModel):
    """Corps de POST /api/contact/getMessagesByStatus."""
    status: Optional[str] = None


class ContactIdRequest(BaseModel):
    """Corps de DELETE /api/contact/deleteMsg et PATCH /api/contact/closeMsg."""
    contact_id: int


class ApiResponse(BaseModel):
    """Enveloppe {statusCode, statusMsg} de l'API REST."""
    status_code: str
    status_msg: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
