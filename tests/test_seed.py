"""
Tests de l'initialisation des données de référence.
"""

from unittest.mock import patch

from sqlalchemy import select

from app.config import settings
from app.models.holiday import Holiday
from app.models.person import Person
from app.models.role import Role
from app.security import verify_password
from app.seed import DEFAULT_HOLIDAYS, seed_admin, seed_holidays, seed_roles


def test_seed_roles_idempotent(db):
    seed_roles(db)
    seed_roles(db)
    names = sorted(db.execute(select(Role.role_name)).scalars().all())
    assert names == ["ADMIN", "STUDENT", "USER"]


def test_seed_holidays_une_seule_fois(db):
    seed_holidays(db)
    seed_holidays(db)
    assert db.query(Holiday).count() == len(DEFAULT_HOLIDAYS)


def test_seed_admin_non_configure(db):
    with patch.object(settings, "ADMIN_EMAIL", ""):
        seed_admin(db)
    assert db.query(Person).count() == 0


def test_seed_admin_cree_le_compte(db):
    with patch.object(settings, "ADMIN_EMAIL", "admin@school.com"), \
            patch.object(settings, "ADMIN_PASSWORD", "admin123"):
        seed_admin(db)
        seed_admin(db)

    admins = db.query(Person).all()
    assert len(admins) == 1
    assert admins[0].role_name == "ADMIN"
    assert verify_password("admin123", admins[0].password_hash)


def test_seed_admin_email_en_minuscules(db):
    with patch.object(settings, "ADMIN_EMAIL", "Admin@School.COM"), \
            patch.object(settings, "ADMIN_PASSWORD", "admin123"):
        seed_admin(db)
        seed_admin(db)

    admins = db.query(Person).all()
    assert [a.email for a in admins] == ["admin@school.com"]
