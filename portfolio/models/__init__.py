"""SQLAlchemy models."""

from portfolio.models.analytics import Page, PageView, Visitor
from portfolio.models.blog import Blog, BlogCategory
from portfolio.models.career import Award, Education, Experience
from portfolio.models.content import Review, Service, Social
from portfolio.models.faq import Faq, FaqCategory
from portfolio.models.hire import FileDocument, HireRequest
from portfolio.models.message import UserMessage
from portfolio.models.npm import NpmPackage, NpmType
from portfolio.models.profile import ProfileInformation
from portfolio.models.project import Project, ProjectType
from portfolio.models.skill import Skill, Technology
from portfolio.models.user import User

__all__ = [
    "User",
    "ProfileInformation",
    "Skill",
    "Technology",
    "Experience",
    "Education",
    "Award",
    "Social",
    "Service",
    "Review",
    "ProjectType",
    "Project",
    "BlogCategory",
    "Blog",
    "NpmType",
    "NpmPackage",
    "FaqCategory",
    "Faq",
    "HireRequest",
    "FileDocument",
    "UserMessage",
    "Visitor",
    "Page",
    "PageView",
]
