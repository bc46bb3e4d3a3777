# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy résolve les relations déclarées par nom de classe
# (Person.courses → Course, SchoolClass.persons → Person, etc.).

from app.models.role import Role  # noqa: F401 : doit précéder person
from app.models.person import Person  # noqa: F401
from app.models.school_class import SchoolClass  # noqa: F401
from app.models.course import Course, person_courses  # noqa: F401
from app.models.contact import Contact, ContactStatus  # noqa: F401
from app.models.holiday import Holiday, HolidayType  # noqa: F401
