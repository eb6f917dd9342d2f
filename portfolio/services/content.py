"""Social link, offered service and review services."""

from portfolio.models.content import Review, Service, Social
from portfolio.services.base import CrudService


class SocialService(CrudService[Social]):
    model = Social
    label = "Social"
    order_by = (Social.id.asc(),)
    image_folder = "portfolio/socials"


class OfferingService(CrudService[Service]):
    """Services offered to clients (the ``services`` table)."""

    model = Service
    label = "Service"
    order_by = (Service.id.asc(),)
    image_folder = "portfolio/services"


class ReviewService(CrudService[Review]):
    model = Review
    label = "Review"
    image_field = "avatar_url"
    image_folder = "portfolio/reviews"
