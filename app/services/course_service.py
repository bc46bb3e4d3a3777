"""
Service métier pour les cours et les inscriptions élève ↔ cours (plusieurs à plusieurs).
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from app.models.course import Course
from app.models.person import Person
from app.schemas.course import CourseCreate, CourseDetail, CourseResponse
from app.schemas.person import PersonSummary
from app.services.person_service import get_person_by_email

logger = logging.getLogger(__name__)


def create_course(db: Session, data: CourseCreate, actor: Optional[str] = None) -> CourseResponse:
    course = Course(name=data.name, fees=data.fees)
    course.mark_created(actor)
    db.add(course)
    db.commit()
    db.refresh(course)
    logger.info("Cours %s créé (%s)", course.id, course.name)
    return _to_response(course)


def get_courses(db: Session, sort_dir: str = "asc") -> List[CourseResponse]:
    """Retourne tous les cours triés par nom. Lève une ValueError si sort_dir est invalide."""
    if sort_dir not in ("asc", "desc"):
        raise ValueError("Le sens de tri doit être 'asc' ou 'desc'.")
    order = Course.name.asc() if sort_dir == "asc" else Course.name.desc()
    courses = db.execute(select(Course).order_by(order, Course.id)).scalars().all()
    return [_to_response(c) for c in courses]


def get_course(db: Session, course_id: int) -> Optional[CourseDetail]:
    course = db.get(Course, course_id)
    if course is None:
        return None
    return _to_detail(course)


def add_student(db: Session, course_id: int, email: str, actor: Optional[str] = None) -> CourseDetail:
    """
    Inscrit la personne désignée par son email au cours.
    Les deux côtés de l'association sont mis à jour ; une seconde inscription est sans effet.
    Lève NotFoundError si le cours ou l'email est inconnu.
    """
    course = db.get(Course, course_id)
    if course is None:
        raise NotFoundError("Cours introuvable.")

    person = get_person_by_email(db, email)
    if person is None:
        raise NotFoundError(f"Aucune personne avec l'email '{email}'.")

    if course in person.courses:
        return _to_detail(course)

    person.courses.append(course)
    if person not in course.persons:
        course.persons.append(person)
    person.mark_updated(actor)

    db.commit()
    logger.info("Personne %s inscrite au cours %s", person.id, course_id)
    return _to_detail(course)


def remove_student(db: Session, course_id: int, person_id: int, actor: Optional[str] = None) -> bool:
    """Désinscrit un élève d'un cours. Retourne True si retiré, False si lien inexistant."""
    course = db.get(Course, course_id)
    person = db.get(Person, person_id)
    if course is None or person is None or course not in person.courses:
        return False

    person.courses.remove(course)
    if person in course.persons:
        course.persons.remove(person)
    person.mark_updated(actor)

    db.commit()
    logger.info("Personne %s désinscrite du cours %s", person_id, course_id)
    return True


def get_person_courses(db: Session, email: str) -> List[CourseResponse]:
    """Cours suivis par la personne connectée (espace élève)."""
    person = get_person_by_email(db, email)
    if person is None:
        raise NotFoundError("Personne introuvable.")
    return [_to_response(c) for c in sorted(person.courses, key=lambda c: c.name)]


def _to_response(course: Course) -> CourseResponse:
    return CourseResponse(
        id=course.id,
        name=course.name,
        fees=course.fees or "",
        nb_students=len(course.persons),
    )


def _to_detail(course: Course) -> CourseDetail:
    students = sorted(course.persons, key=lambda p: p.name)
    return CourseDetail(
        id=course.id,
        name=course.name,
        fees=course.fees or "",
        students=[PersonSummary.model_validate(p) for p in students],
    )
