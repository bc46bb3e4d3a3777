"""
Initialisation de la base au démarrage de l'API : création des tables,
rôles, calendrier des jours fériés par défaut et compte administrateur.
Idempotent : rien n'est recréé si déjà présent.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

import app.models  # noqa: F401 : enregistre tous les modèles dans Base.metadata
from app.config import settings
from app.database import Base, SessionLocal, engine
from app.models.holiday import Holiday, HolidayType
from app.models.person import Person
from app.models.role import ADMIN_ROLE, ALL_ROLES, Role
from app.schemas.person import normalize_email
from app.security import hash_password

logger = logging.getLogger(__name__)

DEFAULT_HOLIDAYS = [
    ("Jan 1", "New Year's Day", HolidayType.FESTIVAL),
    ("Oct 31", "Halloween", HolidayType.FESTIVAL),
    ("Nov 24", "Thanksgiving Day", HolidayType.FESTIVAL),
    ("Dec 25", "Christmas", HolidayType.FESTIVAL),
    ("Jan 17", "Martin Luther King Jr. Day", HolidayType.FEDERAL),
    ("July 4", "Independence Day", HolidayType.FEDERAL),
    ("Sep 5", "Labor Day", HolidayType.FEDERAL),
    ("Nov 11", "Veterans Day", HolidayType.FEDERAL),
]


def seed_roles(db: Session) -> None:
    existing = set(db.execute(select(Role.role_name)).scalars().all())
    for role_name in ALL_ROLES:
        if role_name not in existing:
            db.add(Role(role_name=role_name))
    db.commit()


def seed_holidays(db: Session) -> None:
    count = db.execute(select(func.count()).select_from(Holiday)).scalar() or 0
    if count:
        return
    for day, reason, holiday_type in DEFAULT_HOLIDAYS:
        holiday = Holiday(day=day, reason=reason, type=holiday_type.value)
        holiday.mark_created(None)
        db.add(holiday)
    db.commit()


def seed_admin(db: Session) -> None:
    """Crée le compte ADMIN_EMAIL s'il est configuré et absent."""
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        return
    email = normalize_email(settings.ADMIN_EMAIL)
    exists = db.execute(
        select(Person.id).where(func.lower(Person.email) == email)
    ).scalar()
    if exists:
        return
    role = db.execute(select(Role).where(Role.role_name == ADMIN_ROLE)).scalar_one()
    admin = Person(
        name=settings.ADMIN_NAME,
        email=email,
        password_hash=hash_password(settings.ADMIN_PASSWORD),
        role=role,
    )
    admin.mark_created(None)
    db.add(admin)
    db.commit()
    logger.info("Compte administrateur %s créé", email)


def init_db() -> None:
    """Crée les tables et les données de référence."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_roles(db)
        seed_holidays(db)
        seed_admin(db)
    finally:
        db.close()
    logger.info("Base de données initialisée.")
