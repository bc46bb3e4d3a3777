"""
Configuration partagée pour tous les tests.

- `client` : override de get_db avec un MagicMock, aucune connexion réelle.
- `db` : session SQLite en mémoire avec les tables créées et les rôles insérés,
  pour les tests de services.
"""

import os

# Doit précéder tout import de app.* : la configuration est lue à l'import.
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from unittest.mock import MagicMock

from app.database import Base, get_db
from app.main import app
from app.models.person import Person
from app.models.role import Role
from app.security import create_access_token, hash_password
from app.seed import seed_roles


def make_token(email="admin@school.com", name="Admin", role="ADMIN") -> str:
    person = MagicMock()
    person.email = email
    person.name = name
    person.role_name = role
    return create_access_token(person)


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def client(mock_db):
    """Client HTTP de test avec la BDD mockée."""
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def student_headers():
    token = make_token(email="eleve@school.com", name="Eleve", role="STUDENT")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def db():
    """Session SQLite en mémoire, recréée pour chaque test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    seed_roles(session)
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def make_person(db):
    """Fabrique de personnes persistées avec un rôle donné."""
    def _make(name="Jean Dupont", email="jean@school.com", role="STUDENT", password="secret123"):
        role_obj = db.query(Role).filter(Role.role_name == role).one()
        person = Person(
            name=name,
            email=email,
            mobile_num="0123456789",
            password_hash=hash_password(password),
            role=role_obj,
        )
        db.add(person)
        db.commit()
        db.refresh(person)
        return person
    return _make


@pytest.fixture
def token_for():
    """Fabrique d'en-têtes Bearer pour un rôle donné."""
    def _headers(email="user@school.com", name="Utilisateur", role="USER"):
        return {"Authorization": f"Bearer {make_token(email=email, name=name, role=role)}"}
    return _headers
