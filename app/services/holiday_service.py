"""
Service de lecture du calendrier des jours fériés.
"""

from typing import Dict, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.holiday import Holiday, HolidayType


def get_holidays(db: Session, festival: bool = True, federal: bool = True) -> Dict[HolidayType, List[Holiday]]:
    """Jours fériés groupés par type, restreints aux types demandés."""
    wanted = []
    if festival:
        wanted.append(HolidayType.FESTIVAL)
    if federal:
        wanted.append(HolidayType.FEDERAL)

    grouped = {t: [] for t in wanted}
    if not wanted:
        return grouped

    holidays = db.execute(
        select(Holiday).where(Holiday.type.in_([t.value for t in wanted]))
    ).scalars().all()
    for holiday in holidays:
        grouped[HolidayType(holiday.type)].append(holiday)
    return grouped
