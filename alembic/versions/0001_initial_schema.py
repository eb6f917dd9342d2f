"""Initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), primary_key=True)


def upgrade() -> None:
    op.create_table(
        "users",
        _id(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("otp", sa.String(10), nullable=True),
        sa.Column("otp_expiry", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "profile_information",
        _id(),
        sa.Column("name", sa.String(255), nullable=False, server_default=""),
        sa.Column("subtitle", sa.String(255), nullable=True),
        sa.Column("image_url", sa.String(1024), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("resume_url", sa.String(1024), nullable=True),
        sa.Column("contact_email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("working_hour", sa.String(255), nullable=True),
        sa.Column("status", sa.String(100), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "skills",
        _id(),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        *_timestamps(),
    )
    op.create_table(
        "technologies",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("level", sa.Integer(), nullable=True),
        sa.Column("icon_url", sa.String(1024), nullable=True),
        sa.Column(
            "skill_id", sa.Integer(), sa.ForeignKey("skills.id", ondelete="CASCADE"), nullable=False
        ),
        *_timestamps(),
    )
    op.create_index("ix_technologies_skill_id", "technologies", ["skill_id"])

    op.create_table(
        "experiences",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("company", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("starting_date", sa.Date(), nullable=False),
        sa.Column("ending_date", sa.Date(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(1024), nullable=True),
        sa.Column("key_achievements", sa.JSON(), nullable=False),
        sa.Column("technologies", sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "educations",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("institution", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("graduation_date", sa.Date(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(1024), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "awards",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("subtitle", sa.String(255), nullable=True),
        sa.Column("award_from", sa.String(255), nullable=True),
        sa.Column("award_date", sa.Date(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(1024), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "socials",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("url", sa.String(1024), nullable=False),
        sa.Column("image_url", sa.String(1024), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "services",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("subtitle", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(1024), nullable=True),
        sa.Column("bullet_points", sa.JSON(), nullable=False),
        sa.Column("core_tech_stacks", sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "reviews",
        _id(),
        sa.Column("rate", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("subtitle", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.String(1024), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "project_types",
        _id(),
        sa.Column("title", sa.String(255), nullable=False, unique=True),
        *_timestamps(),
    )
    op.create_table(
        "projects",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("subtitle", sa.String(255), nullable=True),
        sa.Column("type_id", sa.Integer(), sa.ForeignKey("project_types.id"), nullable=False),
        sa.Column("image_url", sa.String(1024), nullable=True),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("live_url", sa.String(1024), nullable=True),
        sa.Column("github_url", sa.String(1024), nullable=True),
        sa.Column("frontend_techs", sa.JSON(), nullable=False),
        sa.Column("backend_techs", sa.JSON(), nullable=False),
        sa.Column("devops_techs", sa.JSON(), nullable=False),
        sa.Column("design_techs", sa.JSON(), nullable=False),
        sa.Column("others_techs", sa.JSON(), nullable=False),
        sa.Column("key_accomplishments", sa.JSON(), nullable=False),
        sa.Column("project_overview", sa.Text(), nullable=True),
        sa.Column("problems", sa.JSON(), nullable=True),
        sa.Column("solutions", sa.JSON(), nullable=True),
        sa.Column("solution_architecture", sa.JSON(), nullable=True),
        sa.Column("challenges", sa.JSON(), nullable=True),
        sa.Column("timeline", sa.String(255), nullable=True),
        sa.Column("role", sa.String(255), nullable=True),
        sa.Column("total_member_worked", sa.Integer(), nullable=True),
        sa.Column("outcome", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_projects_type_id", "projects", ["type_id"])

    op.create_table(
        "blog_categories",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "blogs",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(1024), nullable=True),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("blog_categories.id"), nullable=False),
        sa.Column("blocks", sa.JSON(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("ix_blogs_category_id", "blogs", ["category_id"])

    op.create_table(
        "npm_types",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "npm_packages",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("npm_type_id", sa.Integer(), sa.ForeignKey("npm_types.id"), nullable=False),
        sa.Column("version", sa.String(50), nullable=False),
        sa.Column("live_url", sa.String(1024), nullable=True),
        sa.Column("github_url", sa.String(1024), nullable=True),
        sa.Column("installable", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_npm_packages_npm_type_id", "npm_packages", ["npm_type_id"])

    op.create_table(
        "faq_categories",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "faqs",
        _id(),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("faq_categories.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_faqs_category_id", "faqs", ["category_id"])

    op.create_table(
        "hire_requests",
        _id(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("company_name", sa.String(255), nullable=True),
        sa.Column("linkedin_url", sa.String(1024), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("project_desc", sa.Text(), nullable=True),
        sa.Column(
            "service_id", sa.Integer(), sa.ForeignKey("services.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("estimate_budget", sa.String(255), nullable=True),
        sa.Column("expected_timeline", sa.String(255), nullable=True),
        sa.Column("budget", sa.String(255), nullable=True),
        sa.Column("timeline", sa.String(255), nullable=True),
        sa.Column("additional_info", sa.Text(), nullable=True),
        sa.Column("core_features", sa.JSON(), nullable=False),
        sa.Column("tech_suggestion", sa.JSON(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="inprocess"),
        *_timestamps(),
    )
    op.create_index("ix_hire_requests_email", "hire_requests", ["email"])
    op.create_table(
        "file_documents",
        _id(),
        sa.Column("url", sa.String(1024), nullable=False),
        sa.Column("key", sa.String(1024), nullable=False),
        sa.Column("filename", sa.String(255), nullable=True),
        sa.Column("content_type", sa.String(255), nullable=True),
        sa.Column("size_bytes", sa.Integer(), nullable=True),
        sa.Column(
            "hire_request_id",
            sa.Integer(),
            sa.ForeignKey("hire_requests.id", ondelete="CASCADE"),
            nullable=True,
        ),
        *_timestamps(),
    )
    op.create_index("ix_file_documents_hire_request_id", "file_documents", ["hire_request_id"])

    op.create_table(
        "user_messages",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="unread"),
        *_timestamps(),
    )

    op.create_table(
        "visitors",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_agent", sa.String(1024), nullable=True),
        sa.Column("ip_address", sa.String(64), nullable=True),
        sa.Column("first_visit_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("last_visit_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        "pages",
        _id(),
        sa.Column("slug", sa.String(512), nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_pages_slug", "pages", ["slug"], unique=True)
    op.create_table(
        "page_views",
        _id(),
        sa.Column(
            "visitor_id", sa.String(36), sa.ForeignKey("visitors.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("page_id", sa.Integer(), sa.ForeignKey("pages.id", ondelete="CASCADE"), nullable=False),
        sa.Column("viewed_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_page_views_visitor_id", "page_views", ["visitor_id"])
    op.create_index("ix_page_views_page_id", "page_views", ["page_id"])


def downgrade() -> None:
    for table in (
        "page_views",
        "pages",
        "visitors",
        "user_messages",
        "file_documents",
        "hire_requests",
        "faqs",
        "faq_categories",
        "npm_packages",
        "npm_types",
        "blogs",
        "blog_categories",
        "projects",
        "project_types",
        "reviews",
        "services",
        "socials",
        "awards",
        "educations",
        "experiences",
        "technologies",
        "skills",
        "profile_information",
        "users",
    ):
        op.drop_table(table)
