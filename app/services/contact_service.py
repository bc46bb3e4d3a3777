"""
Service métier pour les messages de contact.

Cycle de vie d'un message : OPEN à l'enregistrement, puis CLOSE quand un
administrateur le traite. Un message fermé n'est jamais rouvert.
"""

import logging
import math
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import NotFoundError
from app.models.contact import Contact, ContactStatus
from app.schemas.contact import ContactCreate, ContactPage, ContactResponse

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = {
    "id": Contact.id,
    "name": Contact.name,
    "email": Contact.email,
    "subject": Contact.subject,
    "created_at": Contact.created_at,
}


def save_message(db: Session, data: ContactCreate, actor: Optional[str] = None) -> Contact:
    """Enregistre un message en statut OPEN, horodaté au nom de son auteur."""
    contact = Contact(**data.model_dump())
    contact.status = ContactStatus.OPEN.value
    contact.mark_created(actor)
    db.add(contact)
    db.commit()
    db.refresh(contact)
    logger.info("Message de contact %s enregistré (par %s)", contact.id, contact.created_by)
    return contact


def list_open(db: Session) -> List[Contact]:
    """Retourne tous les messages OPEN."""
    return find_by_status(db, ContactStatus.OPEN)


def find_by_status(db: Session, status: ContactStatus) -> List[Contact]:
    """Retourne les messages d'un statut donné, du plus ancien au plus récent."""
    return db.execute(
        select(Contact)
        .where(Contact.status == ContactStatus(status).value)
        .order_by(Contact.id)
    ).scalars().all()


def find_open_messages(
    db: Session,
    page: int = 1,
    sort_field: str = "name",
    sort_dir: str = "desc",
) -> ContactPage:
    """
    Retourne une page de messages OPEN (CONTACT_PAGE_SIZE par page).
    Lève une ValueError si la page, le champ ou le sens de tri est invalide.
    """
    if page < 1:
        raise ValueError("Le numéro de page doit être supérieur ou égal à 1.")
    column = SORTABLE_FIELDS.get(sort_field)
    if column is None:
        raise ValueError(f"Tri impossible sur le champ '{sort_field}'.")
    if sort_dir not in ("asc", "desc"):
        raise ValueError("Le sens de tri doit être 'asc' ou 'desc'.")

    page_size = settings.CONTACT_PAGE_SIZE
    total = db.execute(
        select(func.count())
        .select_from(Contact)
        .where(Contact.status == ContactStatus.OPEN.value)
    ).scalar() or 0

    order = column.asc() if sort_dir == "asc" else column.desc()
    messages = db.execute(
        select(Contact)
        .where(Contact.status == ContactStatus.OPEN.value)
        .order_by(order, Contact.id)
        .offset((page - 1) * page_size)
        .limit(page_size)
    ).scalars().all()

    return ContactPage(
        messages=[ContactResponse.model_validate(m) for m in messages],
        current_page=page,
        total_pages=math.ceil(total / page_size),
        total_messages=total,
        sort_field=sort_field,
        sort_dir=sort_dir,
        reverse_sort_dir="desc" if sort_dir == "asc" else "asc",
    )


def close_message(db: Session, contact_id: int, actor: Optional[str] = None) -> Contact:
    """
    Passe un message OPEN → CLOSE en enregistrant qui l'a fermé et quand.
    Un message déjà fermé est renvoyé tel quel.
    Lève NotFoundError si le message est introuvable.
    """
    contact = db.get(Contact, contact_id)
    if contact is None:
        raise NotFoundError(f"Message {contact_id} introuvable.")
    if contact.status == ContactStatus.CLOSE.value:
        logger.info("Message %s déjà fermé", contact_id)
        return contact

    contact.status = ContactStatus.CLOSE.value
    contact.mark_updated(actor)
    db.commit()
    db.refresh(contact)
    logger.info("Message %s fermé par %s", contact_id, contact.updated_by)
    return contact


def delete_message(db: Session, contact_id: int) -> None:
    """Supprime un message. Lève NotFoundError s'il n'existe pas."""
    contact = db.get(Contact, contact_id)
    if contact is None:
        raise NotFoundError(f"Message {contact_id} introuvable.")
    db.delete(contact)
    db.commit()
    logger.info("Message %s supprimé", contact_id)
