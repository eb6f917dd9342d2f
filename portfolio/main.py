"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio import __version__
from portfolio.api import analytics, auth, blogs, faqs, hire, messages, npm, profile, projects, skills, users
from portfolio.api.career import award_router, education_router, experience_router
from portfolio.api.content import review_router, service_router, social_router
from portfolio.config import get_settings
from portfolio.exceptions import register_exception_handlers
from portfolio.services.email_queue import EmailQueue
from portfolio.services.storage import StorageService

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared queue and storage clients at startup."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.state.email_queue = EmailQueue(settings)
    app.state.storage = StorageService(settings)
    logger.info(
        f"Portfolio API started ({settings.environment}) at /{settings.api_prefix}, "
        f"docs at /{settings.api_prefix}/docs"
    )
    yield


app = FastAPI(
    title="Portfolio API",
    description="Backend for a personal portfolio website with an OTP-protected admin",
    version=__version__,
    lifespan=lifespan,
    docs_url=f"/{settings.api_prefix}/docs",
    openapi_url=f"/{settings.api_prefix}/openapi.json",
)

if settings.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials="*" not in settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

# Register routers
for router in (
    auth.router,
    users.router,
    profile.router,
    skills.skill_router,
    skills.technology_router,
    experience_router,
    education_router,
    award_router,
    social_router,
    service_router,
    review_router,
    projects.router,
    blogs.router,
    npm.router,
    faqs.router,
    hire.router,
    messages.router,
    analytics.router,
):
    app.include_router(router, prefix=f"/{settings.api_prefix}")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
