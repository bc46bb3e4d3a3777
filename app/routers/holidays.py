"""
Router public du calendrier des jours fériés.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.holiday import HolidayResponse, HolidaysResponse
from app.services import holiday_service

router = APIRouter(tags=["Jours fériés"])


@router.get("/holidays", response_model=HolidaysResponse, summary="Jours fériés")
def display_holidays(festival: bool = True, federal: bool = True, db: Session = Depends(get_db)):
    """Jours fériés groupés par type ; `festival` / `federal` filtrent les types affichés."""
    grouped = holiday_service.get_holidays(db, festival=festival, federal=federal)
    return HolidaysResponse(
        festival=festival,
        federal=federal,
        holidays={t: [HolidayResponse.model_validate(h) for h in items] for t, items in grouped.items()},
    )
