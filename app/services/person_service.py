"""
Service métier pour les personnes : inscription publique et profil.
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, NotFoundError
from app.models.person import Person
from app.models.role import STUDENT_ROLE, Role
from app.schemas.person import PersonRegister, ProfileUpdate, normalize_email
from app.security import hash_password

logger = logging.getLogger(__name__)


def get_person_by_email(db: Session, email: str) -> Optional[Person]:
    """Retourne la personne ayant cet email, ou None."""
    return db.execute(
        select(Person).where(func.lower(Person.email) == normalize_email(email))
    ).scalar_one_or_none()


def create_person(db: Session, data: PersonRegister) -> Person:
    """
    Inscrit une nouvelle personne avec le rôle STUDENT.
    Le mot de passe est haché avant l'enregistrement.
    Lève ConflictError si l'email est déjà utilisé.
    """
    if get_person_by_email(db, data.email) is not None:
        raise ConflictError(f"Un compte existe déjà pour l'email '{data.email}'.")

    role = db.execute(
        select(Role).where(Role.role_name == STUDENT_ROLE)
    ).scalar_one_or_none()
    if role is None:
        raise NotFoundError(f"Rôle {STUDENT_ROLE} introuvable.")

    person = Person(
        name=data.name,
        mobile_num=data.mobile_num,
        email=data.email,
        password_hash=hash_password(data.pwd),
        role=role,
    )
    person.mark_created(None)
    db.add(person)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Un compte existe déjà pour l'email '{data.email}'.")
    db.refresh(person)
    logger.info("Nouvelle personne inscrite : %s", person.email)
    return person


def update_profile(db: Session, email: str, data: ProfileUpdate) -> Person:
    """Met à jour les champs fournis du profil de la personne connectée."""
    person = get_person_by_email(db, email)
    if person is None:
        raise NotFoundError("Personne introuvable.")

    update_data = data.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(person, field, value)
    person.mark_updated(email)

    db.commit()
    db.refresh(person)
    return person
