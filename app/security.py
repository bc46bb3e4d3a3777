"""
Authentification et contrôle d'accès.

- Mots de passe hachés avec passlib (pbkdf2_sha256).
- Jetons JWT signés (PyJWT) portant le rôle de la personne.
- Table de règles chemin → accès, évaluée avant chaque endpoint par la
  dépendance globale `route_guard` (première règle correspondante gagnante).

Deux façons de s'authentifier : `Authorization: Bearer <jeton>` obtenu via
POST /login, ou HTTP Basic (email:mot de passe) vérifié en base à chaque requête.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import jwt
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBasic, HTTPBasicCredentials, HTTPBearer
from passlib.context import CryptContext
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.exceptions import AuthenticationError
from app.models.person import Person
from app.models.role import ADMIN_ROLE, STUDENT_ROLE
from app.schemas.person import normalize_email

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

basic_scheme = HTTPBasic(auto_error=False)
bearer_scheme = HTTPBearer(auto_error=False)

PERMIT = "PERMIT"
AUTHENTICATED = "AUTHENTICATED"

# (motif, accès) ; accès = PERMIT, AUTHENTICATED ou un nom de rôle.
# Un motif en "/**" couvre le préfixe et tout ce qui est en dessous.
ROUTE_RULES = [
    ("/api/health", PERMIT),
    ("/api/**", AUTHENTICATED),
    ("/dashboard", AUTHENTICATED),
    ("/displayProfile", AUTHENTICATED),
    ("/updateProfile", AUTHENTICATED),
    ("/displayMessages/**", ADMIN_ROLE),
    ("/admin/**", ADMIN_ROLE),
    ("/student/**", STUDENT_ROLE),
    ("/closeMsg/**", ADMIN_ROLE),
    ("/holidays/**", PERMIT),
    ("/", PERMIT),
    ("/home", PERMIT),
    ("/contact", PERMIT),
    ("/about", PERMIT),
    ("/login", PERMIT),
    ("/saveMsg", PERMIT),
    ("/logout", PERMIT),
    ("/courses", AUTHENTICATED),
    ("/public/**", PERMIT),
]
DEFAULT_ACCESS = AUTHENTICATED


@dataclass(frozen=True)
class Principal:
    """Utilisateur authentifié pour la durée d'une requête."""
    email: str
    name: str
    role: str

    @property
    def authorities(self) -> List[str]:
        return [f"ROLE_{self.role}"]

    @classmethod
    def from_person(cls, person: Person) -> "Principal":
        return cls(email=person.email, name=person.name, role=person.role_name)


# --- Mots de passe ---

def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def authenticate(db: Session, email: str, password: str) -> Person:
    """
    Retrouve la personne par email et vérifie son mot de passe.
    Lève AuthenticationError si l'email est inconnu ou le mot de passe faux.
    """
    person = db.execute(
        select(Person).where(func.lower(Person.email) == normalize_email(email))
    ).scalar_one_or_none()
    if person is None or not verify_password(password, person.password_hash):
        logger.warning("Échec d'authentification pour %s", email)
        raise AuthenticationError("Identifiants invalides.")
    return person


# --- Jetons ---

def create_access_token(person: Person) -> str:
    """Jeton signé portant l'email, le nom et le rôle de la personne."""
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "sub": person.email,
        "name": person.name,
        "role": person.role_name,
        "authorities": [f"ROLE_{person.role_name}"],
        "exp": expire,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Principal:
    """Vérifie le jeton et renvoie le Principal. Lève HTTPException(401) sinon."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Jeton expiré.", headers={"WWW-Authenticate": "Bearer"})
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Jeton invalide.", headers={"WWW-Authenticate": "Bearer"})

    if not payload.get("sub") or not payload.get("role"):
        raise HTTPException(status_code=401, detail="Jeton invalide.", headers={"WWW-Authenticate": "Bearer"})
    return Principal(email=payload["sub"], name=payload.get("name", ""), role=payload["role"])


# --- Règles d'accès ---

def _matches(pattern: str, path: str) -> bool:
    if pattern.endswith("/**"):
        base = pattern[:-3]
        return path == base or path.startswith(base + "/")
    return path == pattern


def resolve_access(path: str) -> str:
    """Accès requis pour un chemin : première règle de ROUTE_RULES qui correspond."""
    path = path.rstrip("/") or "/"
    for pattern, access in ROUTE_RULES:
        if _matches(pattern, path):
            return access
    return DEFAULT_ACCESS


def route_guard(
    request: Request,
    basic: Optional[HTTPBasicCredentials] = Depends(basic_scheme),
    bearer: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Optional[Principal]:
    """
    Dépendance globale : identifie l'appelant puis applique ROUTE_RULES.

    Des identifiants fournis mais invalides donnent 401 même sur un chemin public.
    Chemin protégé sans identifiants → 401 ; rôle insuffisant → 403.
    Un jeton Bearer n'est pas relu en base : son rôle vaut jusqu'à expiration.
    """
    principal = None
    if bearer is not None:
        principal = decode_access_token(bearer.credentials)
    elif basic is not None:
        try:
            principal = Principal.from_person(authenticate(db, basic.username, basic.password))
        except AuthenticationError as e:
            raise HTTPException(status_code=401, detail=str(e), headers={"WWW-Authenticate": "Basic"})
    request.state.principal = principal

    access = resolve_access(request.url.path)
    if access == PERMIT:
        return principal
    if principal is None:
        raise HTTPException(
            status_code=401,
            detail="Authentification requise.",
            headers={"WWW-Authenticate": "Basic"},
        )
    if access != AUTHENTICATED and principal.role != access:
        logger.warning(
            "Accès refusé à %s pour %s (rôle %s, requis %s)",
            request.url.path, principal.email, principal.role, access,
        )
        raise HTTPException(status_code=403, detail="Accès refusé.")
    return principal


def get_current_principal(principal: Optional[Principal] = Depends(route_guard)) -> Principal:
    """Dépendance des endpoints qui ont besoin de l'utilisateur connecté."""
    if principal is None:
        raise HTTPException(
            status_code=401,
            detail="Authentification requise.",
            headers={"WWW-Authenticate": "Basic"},
        )
    return principal
