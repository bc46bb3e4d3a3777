"""
Tests du service des jours fériés.
"""

from app.models.holiday import HolidayType
from app.seed import seed_holidays
from app.services.holiday_service import get_holidays


def test_get_holidays_tous_les_types(db):
    seed_holidays(db)
    grouped = get_holidays(db)
    assert len(grouped[HolidayType.FESTIVAL]) == 4
    assert len(grouped[HolidayType.FEDERAL]) == 4


def test_get_holidays_festival_seulement(db):
    seed_holidays(db)
    grouped = get_holidays(db, festival=True, federal=False)
    assert list(grouped) == [HolidayType.FESTIVAL]
    assert all(h.type == "FESTIVAL" for h in grouped[HolidayType.FESTIVAL])


def test_get_holidays_aucun_type(db):
    seed_holidays(db)
    assert get_holidays(db, festival=False, federal=False) == {}
