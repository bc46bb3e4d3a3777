"""
Schémas Pydantic pour les jours fériés.
"""

from typing import Dict, List

from pydantic import BaseModel

from app.models.holiday import HolidayType


class HolidayResponse(BaseModel):
    day: str
    reason: str
    type: HolidayType

    model_config = {"from_attributes": True}


class HolidaysResponse(BaseModel):
    festival: bool
    federal: bool
    holidays: Dict[HolidayType, List[HolidayResponse]]
