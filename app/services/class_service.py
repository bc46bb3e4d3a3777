"""
Service métier pour la gestion des classes (espace administrateur).

Une personne appartient à au plus une classe : l'association est portée par
persons.class_id et mise à jour des deux côtés (Person.school_class et
SchoolClass.persons) avant chaque commit.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, NotFoundError
from app.models.person import Person
from app.models.school_class import SchoolClass
from app.schemas.person import PersonSummary
from app.schemas.school_class import ClassCreate, ClassDetail, ClassResponse
from app.services.person_service import get_person_by_email

logger = logging.getLogger(__name__)


def create_class(db: Session, data: ClassCreate, actor: Optional[str] = None) -> ClassResponse:
    """
    Crée une nouvelle classe.
    Lève ConflictError si le nom existe déjà.
    """
    school_class = SchoolClass(name=data.name)
    school_class.mark_created(actor)
    db.add(school_class)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Une classe avec le nom '{data.name}' existe déjà.")
    db.refresh(school_class)
    logger.info("Classe %s créée (%s)", school_class.id, school_class.name)
    return _to_response(school_class)


def get_classes(db: Session) -> List[ClassResponse]:
    """Retourne toutes les classes, triées par nom."""
    classes = db.execute(
        select(SchoolClass).order_by(SchoolClass.name)
    ).scalars().all()
    return [_to_response(c) for c in classes]


def get_class(db: Session, class_id: int) -> Optional[ClassDetail]:
    """Retourne une classe et ses élèves, ou None si inexistante."""
    school_class = db.get(SchoolClass, class_id)
    if school_class is None:
        return None
    return _to_detail(school_class)


def delete_class(db: Session, class_id: int, actor: Optional[str] = None) -> bool:
    """
    Supprime une classe après en avoir détaché tous les élèves.
    Retourne True si supprimé, False si introuvable.
    """
    school_class = db.get(SchoolClass, class_id)
    if school_class is None:
        return False

    for person in list(school_class.persons):
        person.school_class = None
        person.mark_updated(actor)

    db.delete(school_class)
    db.commit()
    logger.info("Classe %s supprimée", class_id)
    return True


def add_student(db: Session, class_id: int, email: str, actor: Optional[str] = None) -> ClassDetail:
    """
    Inscrit dans la classe la personne désignée par son email.
    Une personne déjà inscrite ailleurs change de classe.
    Lève NotFoundError si la classe ou l'email est inconnu.
    """
    school_class = db.get(SchoolClass, class_id)
    if school_class is None:
        raise NotFoundError("Classe introuvable.")

    person = get_person_by_email(db, email)
    if person is None:
        raise NotFoundError(f"Aucune personne avec l'email '{email}'.")

    person.school_class = school_class
    if person not in school_class.persons:
        school_class.persons.append(person)
    person.mark_updated(actor)
    school_class.mark_updated(actor)

    db.commit()
    logger.info("Personne %s inscrite dans la classe %s", person.id, class_id)
    return _to_detail(school_class)


def remove_student(db: Session, class_id: int, person_id: int, actor: Optional[str] = None) -> bool:
    """Retire un élève d'une classe. Retourne True si retiré, False si lien inexistant."""
    school_class = db.get(SchoolClass, class_id)
    person = db.get(Person, person_id)
    if school_class is None or person is None or person.school_class is not school_class:
        return False

    person.school_class = None
    if person in school_class.persons:
        school_class.persons.remove(person)
    person.mark_updated(actor)

    db.commit()
    logger.info("Personne %s retirée de la classe %s", person_id, class_id)
    return True


def _to_response(school_class: SchoolClass) -> ClassResponse:
    return ClassResponse(
        id=school_class.id,
        name=school_class.name,
        nb_students=len(school_class.persons),
    )


def _to_detail(school_class: SchoolClass) -> ClassDetail:
    """Construit le détail d'une classe avec ses élèves triés par nom."""
    students = sorted(school_class.persons, key=lambda p: p.name)
    return ClassDetail(
        id=school_class.id,
        name=school_class.name,
        students=[PersonSummary.model_validate(p) for p in students],
    )
