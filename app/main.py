"""
Point d'entrée principal de l'API School Portal.
Démarrage : uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import app.models  # noqa: F401 : enregistre tous les modèles dans Base.metadata avant les routers
from app.config import settings
from app.routers import account, admin, auth, contact, contact_api, holidays, student
from app.security import route_guard
from app.seed import init_db

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : crée les tables et les données de référence."""
    init_db()
    yield


app = FastAPI(
    title="School Portal API",
    description="Gestion d'une école : contact, classes, cours, élèves",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
    # Chaque endpoint passe par la table de règles d'accès avant d'être exécuté
    dependencies=[Depends(route_guard)],
)

# L'API REST /api/contact est appelable depuis n'importe quelle origine.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["Content-Type", "Authorization", "Accept", "invocationFrom"],
    expose_headers=["isMsgSaved"],
)


app.include_router(auth.router)
app.include_router(contact.router)
app.include_router(contact_api.router)
app.include_router(admin.router)
app.include_router(student.router)
app.include_router(account.router)
app.include_router(holidays.router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "School Portal API", "version": "0.1.0"}
