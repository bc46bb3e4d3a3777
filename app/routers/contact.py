"""
Router du formulaire de contact et de la gestion des messages par l'administrateur.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.exceptions import NotFoundError
from app.schemas.contact import ContactCreate, ContactForm, ContactPage, ContactResponse
from app.security import Principal, get_current_principal, route_guard
from app.services import contact_service

router = APIRouter(tags=["Contact"])


@router.get("/contact", response_model=ContactForm, summary="Formulaire de contact")
def display_contact_page():
    return ContactForm()


@router.post("/saveMsg", response_model=ContactResponse, status_code=201, summary="Envoyer un message")
def save_message(
    data: ContactCreate,
    db: Session = Depends(get_db),
    principal: Optional[Principal] = Depends(route_guard),
):
    """Enregistre un message en statut OPEN. Accessible sans authentification."""
    actor = principal.email if principal else None
    return contact_service.save_message(db, data, actor)


@router.get("/displayMessages", response_model=ContactPage, summary="Messages ouverts (paginés)")
def display_messages(
    page_num: int = Query(1, alias="pageNum"),
    sort_field: str = Query("name", alias="sortField"),
    sort_dir: str = Query("desc", alias="sortDir"),
    db: Session = Depends(get_db),
):
    try:
        return contact_service.find_open_messages(db, page_num, sort_field, sort_dir)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/closeMsg", response_model=ContactResponse, summary="Fermer un message")
def close_message(
    id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    """Passe le message en statut CLOSE au nom de l'administrateur connecté."""
    try:
        return contact_service.close_message(db, id, principal.email)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
