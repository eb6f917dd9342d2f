"""Experience, education and award API endpoints."""

from portfolio.api.crud import build_crud_router
from portfolio.schemas.career import (
    AwardCreate,
    AwardResponse,
    AwardUpdate,
    EducationCreate,
    EducationResponse,
    EducationUpdate,
    ExperienceCreate,
    ExperienceResponse,
    ExperienceUpdate,
)
from portfolio.services.career import AwardService, EducationService, ExperienceService

experience_router = build_crud_router(
    prefix="/experience",
    tag="experience",
    service_class=ExperienceService,
    create_schema=ExperienceCreate,
    update_schema=ExperienceUpdate,
    response_schema=ExperienceResponse,
)

education_router = build_crud_router(
    prefix="/education",
    tag="education",
    service_class=EducationService,
    create_schema=EducationCreate,
    update_schema=EducationUpdate,
    response_schema=EducationResponse,
)

award_router = build_crud_router(
    prefix="/awards",
    tag="awards",
    service_class=AwardService,
    create_schema=AwardCreate,
    update_schema=AwardUpdate,
    response_schema=AwardResponse,
)
