"""
API REST des messages de contact (/api/contact).
Les réponses d'écriture utilisent l'enveloppe {statusCode, statusMsg}.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.exceptions import NotFoundError
from app.models.contact import ContactStatus
from app.schemas.contact import (
    ApiResponse,
    ContactCreate,
    ContactIdRequest,
    ContactResponse,
    ContactStatusQuery,
)
from app.security import Principal, get_current_principal
from app.services import contact_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contact", tags=["API Contact"])

INVALID_ID_MSG = "Invalid Contact ID received"


def _bad_request(message: str) -> JSONResponse:
    body = ApiResponse(status_code="400", status_msg=message)
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


def _parse_status(value: Optional[str]) -> Optional[ContactStatus]:
    """Statut correspondant à la valeur reçue, ou None si absent ou inconnu."""
    try:
        return ContactStatus(value)
    except ValueError:
        return None


@router.get("/getMessagesByStatus", response_model=List[ContactResponse], summary="Messages par statut")
def get_messages_by_status(status: str, db: Session = Depends(get_db)):
    """Un statut inconnu ne correspond à aucun message : liste vide."""
    contact_status = _parse_status(status)
    if contact_status is None:
        return []
    return contact_service.find_by_status(db, contact_status)


@router.post("/getMessagesByStatus", response_model=List[ContactResponse], summary="Messages par statut (corps JSON)")
def post_messages_by_status(query: ContactStatusQuery, db: Session = Depends(get_db)):
    """Retourne une liste vide si aucun statut n'est fourni ou s'il est inconnu."""
    contact_status = _parse_status(query.status)
    if contact_status is None:
        return []
    return contact_service.find_by_status(db, contact_status)


@router.post("/saveMsg", response_model=ApiResponse, status_code=201, summary="Enregistrer un message")
def save_message(
    data: ContactCreate,
    response: Response,
    invocation_from: str = Header(..., alias="invocationFrom"),
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    logger.info("Header invocationFrom = %s", invocation_from)
    contact_service.save_message(db, data, principal.email)
    response.headers["isMsgSaved"] = "true"
    return ApiResponse(status_code="200", status_msg="Message saved successfully")


@router.delete("/deleteMsg", response_model=ApiResponse, summary="Supprimer un message")
def delete_message(data: ContactIdRequest, db: Session = Depends(get_db)):
    try:
        contact_service.delete_message(db, data.contact_id)
    except NotFoundError:
        return _bad_request(INVALID_ID_MSG)
    return ApiResponse(status_code="200", status_msg="Message successfully deleted")


@router.patch("/closeMsg", response_model=ApiResponse, summary="Fermer un message")
def close_message(
    data: ContactIdRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    try:
        contact_service.close_message(db, data.contact_id, principal.email)
    except NotFoundError:
        return _bad_request(INVALID_ID_MSG)
    return ApiResponse(status_code="200", status_msg="Message successfully closed")
