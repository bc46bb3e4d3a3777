"""
Router de l'espace administrateur (/admin) : classes, cours et inscriptions.
Réservé au rôle ADMIN (voir app.security.ROUTE_RULES).
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.exceptions import ConflictError, NotFoundError
from app.schemas.course import CourseCreate, CourseDetail, CourseResponse, CourseStudentAdd
from app.schemas.school_class import ClassCreate, ClassDetail, ClassResponse, ClassStudentAdd
from app.security import Principal, get_current_principal
from app.services import class_service, course_service

router = APIRouter(prefix="/admin", tags=["Administration"])


# --- Classes ---

@router.get("/displayClasses", response_model=List[ClassResponse], summary="Lister les classes")
def display_classes(db: Session = Depends(get_db)):
    return class_service.get_classes(db)


@router.post("/addNewClass", response_model=ClassResponse, status_code=201, summary="Créer une classe")
def add_new_class(
    data: ClassCreate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    try:
        return class_service.create_class(db, data, principal.email)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/deleteClass", status_code=204, summary="Supprimer une classe")
def delete_class(
    id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    """Supprime une classe ; ses élèves sont détachés au préalable."""
    if not class_service.delete_class(db, id, principal.email):
        raise HTTPException(status_code=404, detail="Classe introuvable.")


@router.get("/displayStudents", response_model=ClassDetail, summary="Élèves d'une classe")
def display_students(class_id: int = Query(..., alias="classId"), db: Session = Depends(get_db)):
    school_class = class_service.get_class(db, class_id)
    if school_class is None:
        raise HTTPException(status_code=404, detail="Classe introuvable.")
    return school_class


@router.post("/addStudent", response_model=ClassDetail, summary="Inscrire un élève dans une classe")
def add_student(
    data: ClassStudentAdd,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    try:
        return class_service.add_student(db, data.class_id, data.email, principal.email)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/deleteStudent", status_code=204, summary="Retirer un élève d'une classe")
def delete_student(
    class_id: int = Query(..., alias="classId"),
    person_id: int = Query(..., alias="personId"),
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    if not class_service.remove_student(db, class_id, person_id, principal.email):
        raise HTTPException(status_code=404, detail="Lien classe-élève introuvable.")


# --- Cours ---

@router.get("/displayCourses", response_model=List[CourseResponse], summary="Lister les cours")
def display_courses(sort_dir: str = Query("asc", alias="sortDir"), db: Session = Depends(get_db)):
    try:
        return course_service.get_courses(db, sort_dir)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/addNewCourse", response_model=CourseResponse, status_code=201, summary="Créer un cours")
def add_new_course(
    data: CourseCreate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    return course_service.create_course(db, data, principal.email)


@router.get("/viewStudents", response_model=CourseDetail, summary="Élèves d'un cours")
def view_students(id: int, db: Session = Depends(get_db)):
    course = course_service.get_course(db, id)
    if course is None:
        raise HTTPException(status_code=404, detail="Cours introuvable.")
    return course


@router.post("/addStudentToCourse", response_model=CourseDetail, summary="Inscrire un élève à un cours")
def add_student_to_course(
    data: CourseStudentAdd,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    try:
        return course_service.add_student(db, data.course_id, data.email, principal.email)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/deleteStudentFromCourse", status_code=204, summary="Désinscrire un élève d'un cours")
def delete_student_from_course(
    course_id: int = Query(..., alias="courseId"),
    person_id: int = Query(..., alias="personId"),
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    if not course_service.remove_student(db, course_id, person_id, principal.email):
        raise HTTPException(status_code=404, detail="Lien cours-élève introuvable.")
