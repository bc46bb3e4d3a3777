"""
Tests du service de gestion des classes (SQLite en mémoire).
"""

import pytest
from pydantic import ValidationError

from app.exceptions import ConflictError, NotFoundError
from app.models.person import Person
from app.models.school_class import SchoolClass
from app.schemas.school_class import ClassCreate
from app.services.class_service import (
    add_student,
    create_class,
    delete_class,
    get_class,
    get_classes,
    remove_student,
)


# --- Validation des schémas ---

def test_class_create_nom_trop_court_rejete():
    with pytest.raises(ValidationError):
        ClassCreate(name=" A ")


def test_class_create_nom_valide():
    assert ClassCreate(name="  Grade 1  ").name == "Grade 1"


# --- create_class / get_classes ---

def test_create_class_succes(db):
    result = create_class(db, ClassCreate(name="Grade 1"), actor="admin@school.com")

    assert result.id is not None
    assert result.name == "Grade 1"
    assert result.nb_students == 0
    assert db.get(SchoolClass, result.id).created_by == "admin@school.com"


def test_create_class_nom_duplique(db):
    create_class(db, ClassCreate(name="Grade 1"))
    with pytest.raises(ConflictError, match="existe déjà"):
        create_class(db, ClassCreate(name="Grade 1"))


def test_get_classes_triees_par_nom(db):
    create_class(db, ClassCreate(name="Grade 2"))
    create_class(db, ClassCreate(name="Grade 1"))

    assert [c.name for c in get_classes(db)] == ["Grade 1", "Grade 2"]


def test_get_class_inexistante(db):
    assert get_class(db, 999) is None


# --- add_student ---

def test_add_student_met_a_jour_les_deux_cotes(db, make_person):
    school_class = create_class(db, ClassCreate(name="Grade 1"))
    person = make_person()

    detail = add_student(db, school_class.id, person.email)

    assert [s.email for s in detail.students] == [person.email]
    db_class = db.get(SchoolClass, school_class.id)
    db_person = db.get(Person, person.id)
    assert db_person.school_class is db_class
    assert db_person in db_class.persons


def test_add_student_change_de_classe(db, make_person):
    """Une personne appartient à au plus une classe."""
    first = create_class(db, ClassCreate(name="Grade 1"))
    second = create_class(db, ClassCreate(name="Grade 2"))
    person = make_person()

    add_student(db, first.id, person.email)
    add_student(db, second.id, person.email)

    assert db.get(SchoolClass, first.id).persons == []
    assert db.get(Person, person.id).class_id == second.id


def test_add_student_email_inconnu(db):
    school_class = create_class(db, ClassCreate(name="Grade 1"))
    with pytest.raises(NotFoundError, match="email"):
        add_student(db, school_class.id, "inconnu@school.com")


def test_add_student_classe_inexistante(db, make_person):
    person = make_person()
    with pytest.raises(NotFoundError, match="Classe introuvable"):
        add_student(db, 999, person.email)


# --- remove_student ---

def test_remove_student(db, make_person):
    school_class = create_class(db, ClassCreate(name="Grade 1"))
    person = make_person()
    add_student(db, school_class.id, person.email)

    assert remove_student(db, school_class.id, person.id) is True

    assert db.get(Person, person.id).school_class is None
    assert db.get(SchoolClass, school_class.id).persons == []


def test_remove_student_lien_inexistant(db, make_person):
    school_class = create_class(db, ClassCreate(name="Grade 1"))
    person = make_person()
    assert remove_student(db, school_class.id, person.id) is False


# --- delete_class ---

def test_delete_class_detache_les_eleves(db, make_person):
    school_class = create_class(db, ClassCreate(name="Grade 1"))
    alice = make_person(name="Alice", email="alice@school.com")
    bruno = make_person(name="Bruno", email="bruno@school.com")
    add_student(db, school_class.id, alice.email)
    add_student(db, school_class.id, bruno.email)

    assert delete_class(db, school_class.id, actor="admin@school.com") is True

    assert db.get(SchoolClass, school_class.id) is None
    for person_id in (alice.id, bruno.id):
        person = db.get(Person, person_id)
        assert person.class_id is None
        assert person.school_class is None
        assert person.updated_by == "admin@school.com"


def test_delete_class_inexistante(db):
    assert delete_class(db, 999) is False
