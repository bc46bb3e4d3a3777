"""
Router d'authentification : connexion par formulaire et inscription publique.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.database import get_db
from app.exceptions import AuthenticationError, ConflictError, NotFoundError
from app.schemas.person import PersonRegister, PersonResponse, TokenResponse
from app.security import authenticate, create_access_token
from app.services import person_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentification"])


@router.post("/login", response_model=TokenResponse, summary="Se connecter")
def login(form: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """
    Connexion par formulaire : `username` = email, `password` = mot de passe.
    Retourne un jeton Bearer portant le rôle de la personne.
    """
    try:
        person = authenticate(db, form.username, form.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e), headers={"WWW-Authenticate": "Bearer"})
    logger.info("Connexion de %s", person.email)
    return TokenResponse(access_token=create_access_token(person), role=person.role_name)


@router.post("/public/createUser", response_model=PersonResponse, status_code=201, summary="Créer un compte")
def create_user(data: PersonRegister, db: Session = Depends(get_db)):
    """Inscription d'un nouvel élève (rôle STUDENT)."""
    try:
        return person_service.create_person(db, data)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=500, detail=str(e))
