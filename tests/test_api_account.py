"""
Tests d'intégration API pour le compte connecté, l'espace élève et les jours fériés.
"""

from unittest.mock import ANY, MagicMock, patch

from app.exceptions import NotFoundError
from app.models.holiday import HolidayType
from app.schemas.course import CourseResponse
from app.schemas.person import PersonResponse


# --- Helpers ---

def make_person_response(**kwargs) -> PersonResponse:
    return PersonResponse(
        id=1,
        name=kwargs.get("name", "Eleve"),
        email="eleve@school.com",
        mobile_num=kwargs.get("mobile_num", "0470123456"),
        role_name="STUDENT",
        class_name=kwargs.get("class_name", "Grade 1"),
    )


# ============================================================
# GET /dashboard
# ============================================================

def test_dashboard_sans_authentification(client):
    assert client.get("/dashboard").status_code == 401


def test_dashboard(client, student_headers):
    person = MagicMock()
    person.class_name = "Grade 1"
    with patch("app.routers.account.person_service.get_person_by_email") as mock:
        mock.return_value = person
        response = client.get("/dashboard", headers=student_headers)

    assert response.status_code == 200
    assert response.json() == {
        "name": "Eleve",
        "email": "eleve@school.com",
        "role": "STUDENT",
        "class_name": "Grade 1",
    }


# ============================================================
# GET /displayProfile  /  POST /updateProfile
# ============================================================

def test_display_profile(client, student_headers):
    with patch("app.routers.account.person_service.get_person_by_email") as mock:
        mock.return_value = make_person_response()
        response = client.get("/displayProfile", headers=student_headers)

    assert response.status_code == 200
    assert response.json()["class_name"] == "Grade 1"


def test_display_profile_personne_supprimee(client, student_headers):
    with patch("app.routers.account.person_service.get_person_by_email") as mock:
        mock.return_value = None
        response = client.get("/displayProfile", headers=student_headers)

    assert response.status_code == 404


def test_update_profile(client, student_headers):
    with patch("app.routers.account.person_service.update_profile") as mock:
        mock.return_value = make_person_response(mobile_num="0499999999")
        response = client.post("/updateProfile", json={"mobile_num": "0499999999"}, headers=student_headers)

    assert response.status_code == 200
    assert response.json()["mobile_num"] == "0499999999"
    mock.assert_called_once_with(ANY, "eleve@school.com", ANY)


def test_update_profile_mobile_invalide(client, student_headers):
    response = client.post("/updateProfile", json={"mobile_num": "123"}, headers=student_headers)
    assert response.status_code == 422


# ============================================================
# GET /courses  /  GET /student/displayCourses
# ============================================================

def test_courses_authentifie(client, token_for):
    with patch("app.routers.account.course_service.get_courses") as mock:
        mock.return_value = [CourseResponse(id=1, name="Java", fees="100", nb_students=4)]
        response = client.get("/courses", headers=token_for())

    assert response.status_code == 200
    assert response.json()[0]["name"] == "Java"


def test_courses_sans_authentification(client):
    assert client.get("/courses").status_code == 401


def test_student_display_courses(client, student_headers):
    with patch("app.routers.student.course_service.get_person_courses") as mock:
        mock.return_value = [CourseResponse(id=1, name="Java", fees="100", nb_students=4)]
        response = client.get("/student/displayCourses", headers=student_headers)

    assert response.status_code == 200
    mock.assert_called_once_with(ANY, "eleve@school.com")


def test_student_display_courses_personne_inconnue(client, student_headers):
    with patch("app.routers.student.course_service.get_person_courses") as mock:
        mock.side_effect = NotFoundError("Personne introuvable.")
        response = client.get("/student/displayCourses", headers=student_headers)

    assert response.status_code == 404


# ============================================================
# GET /holidays
# ============================================================

def make_holiday(day, reason, holiday_type):
    holiday = MagicMock()
    holiday.day = day
    holiday.reason = reason
    holiday.type = holiday_type
    return holiday


def test_holidays_public(client):
    with patch("app.routers.holidays.holiday_service.get_holidays") as mock:
        mock.return_value = {
            HolidayType.FESTIVAL: [make_holiday("Dec 25", "Christmas", "FESTIVAL")],
            HolidayType.FEDERAL: [make_holiday("July 4", "Independence Day", "FEDERAL")],
        }
        response = client.get("/holidays")

    assert response.status_code == 200
    data = response.json()
    assert data["festival"] is True
    assert data["holidays"]["FESTIVAL"][0]["reason"] == "Christmas"
    assert data["holidays"]["FEDERAL"][0]["day"] == "July 4"


def test_holidays_filtre_federal(client):
    with patch("app.routers.holidays.holiday_service.get_holidays") as mock:
        mock.return_value = {HolidayType.FEDERAL: []}
        response = client.get("/holidays?festival=false")

    assert response.status_code == 200
    mock.assert_called_once_with(ANY, festival=False, federal=True)
    assert list(response.json()["holidays"]) == ["FEDERAL"]
