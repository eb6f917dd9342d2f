"""Experience, education and award services."""

from portfolio.models.career import Award, Education, Experience
from portfolio.services.base import CrudService


class ExperienceService(CrudService[Experience]):
    model = Experience
    label = "Experience"
    order_by = (Experience.starting_date.desc(), Experience.id.desc())
    image_folder = "portfolio/experiences"


class EducationService(CrudService[Education]):
    model = Education
    label = "Education"
    order_by = (Education.graduation_date.desc(), Education.id.desc())
    image_folder = "portfolio/educations"


class AwardService(CrudService[Award]):
    model = Award
    label = "Award"
    order_by = (Award.award_date.desc(), Award.id.desc())
    image_folder = "portfolio/awards"
