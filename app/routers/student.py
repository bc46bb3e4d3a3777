"""
Router de l'espace élève (/student), réservé au rôle STUDENT.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.exceptions import NotFoundError
from app.schemas.course import CourseResponse
from app.security import Principal, get_current_principal
from app.services import course_service

router = APIRouter(prefix="/student", tags=["Espace élève"])


@router.get("/displayCourses", response_model=List[CourseResponse], summary="Mes cours")
def display_courses(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    try:
        return course_service.get_person_courses(db, principal.email)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
