"""
Router du compte connecté : tableau de bord, profil et catalogue des cours.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.exceptions import NotFoundError
from app.schemas.course import CourseResponse
from app.schemas.person import DashboardResponse, PersonResponse, ProfileUpdate
from app.security import Principal, get_current_principal
from app.services import course_service, person_service

router = APIRouter(tags=["Compte"])


@router.get("/dashboard", response_model=DashboardResponse, summary="Tableau de bord")
def dashboard(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    person = person_service.get_person_by_email(db, principal.email)
    return DashboardResponse(
        name=principal.name,
        email=principal.email,
        role=principal.role,
        class_name=person.class_name if person is not None else None,
    )


@router.get("/displayProfile", response_model=PersonResponse, summary="Mon profil")
def display_profile(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    person = person_service.get_person_by_email(db, principal.email)
    if person is None:
        raise HTTPException(status_code=404, detail="Personne introuvable.")
    return person


@router.post("/updateProfile", response_model=PersonResponse, summary="Modifier mon profil")
def update_profile(
    data: ProfileUpdate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    try:
        return person_service.update_profile(db, principal.email, data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/courses", response_model=List[CourseResponse], summary="Catalogue des cours")
def list_courses(db: Session = Depends(get_db)):
    return course_service.get_courses(db)
