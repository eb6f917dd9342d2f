"""Social link, offered service and review API endpoints."""

from portfolio.api.crud import build_crud_router
from portfolio.schemas.content import (
    ReviewCreate,
    ReviewResponse,
    ReviewUpdate,
    ServiceCreate,
    ServiceResponse,
    ServiceUpdate,
    SocialCreate,
    SocialResponse,
    SocialUpdate,
)
from portfolio.services.content import OfferingService, ReviewService, SocialService

social_router = build_crud_router(
    prefix="/socials",
    tag="socials",
    service_class=SocialService,
    create_schema=SocialCreate,
    update_schema=SocialUpdate,
    response_schema=SocialResponse,
)

service_router = build_crud_router(
    prefix="/services",
    tag="services",
    service_class=OfferingService,
    create_schema=ServiceCreate,
    update_schema=ServiceUpdate,
    response_schema=ServiceResponse,
)

review_router = build_crud_router(
    prefix="/reviews",
    tag="reviews",
    service_class=ReviewService,
    create_schema=ReviewCreate,
    update_schema=ReviewUpdate,
    response_schema=ReviewResponse,
    image_path="avatar",
)
